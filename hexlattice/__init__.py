"""Hex-grid coordinates, pixel layout and traversal."""

from .config import GridConfig
from .conversions import (
    axial_to_cube,
    axial_to_offset,
    cube_to_axial,
    offset_to_axial,
    partial_to_cube,
    to_cube,
)
from .coords import Axial, Cube, Offset, OffsetParity, PartialCube, parse_coordinates
from .directions import (
    DIRECTION_VECTORS,
    FlatDirection,
    PointyDirection,
    direction_label,
    opposite,
)
from .errors import HexError, InvalidCoordinate, InvalidDirection, MissingContext
from .grid import CoordinateParams, Grid
from .hex import Hex, HexConfig
from .layout import Layout, Point
from .lines import lerp, line_draw
from .orientation import Orientation, OrientationMatrix
from .traversal import (
    DFSTimestamps,
    adjacency_graph,
    depth_first_search,
    timestamped_depth_first_search,
)

__version__ = "0.3.0"

__all__ = [
    "Axial",
    "axial_to_cube",
    "axial_to_offset",
    "adjacency_graph",
    "CoordinateParams",
    "Cube",
    "cube_to_axial",
    "depth_first_search",
    "DFSTimestamps",
    "DIRECTION_VECTORS",
    "direction_label",
    "FlatDirection",
    "Grid",
    "GridConfig",
    "Hex",
    "HexConfig",
    "HexError",
    "InvalidCoordinate",
    "InvalidDirection",
    "Layout",
    "lerp",
    "line_draw",
    "MissingContext",
    "Offset",
    "offset_to_axial",
    "OffsetParity",
    "opposite",
    "Orientation",
    "OrientationMatrix",
    "parse_coordinates",
    "PartialCube",
    "partial_to_cube",
    "Point",
    "PointyDirection",
    "timestamped_depth_first_search",
    "to_cube",
]
