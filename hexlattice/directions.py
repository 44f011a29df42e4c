"""Neighbor direction vectors and their compass names per orientation."""

from __future__ import annotations

from enum import IntEnum

from .coords import Axial
from .errors import InvalidDirection
from .orientation import Orientation

# Shared by both tilings; only the compass names rotate.
DIRECTION_VECTORS: tuple[Axial, ...] = (
    Axial(+1, 0),
    Axial(0, +1),
    Axial(-1, +1),
    Axial(-1, 0),
    Axial(0, -1),
    Axial(+1, -1),
)


class PointyDirection(IntEnum):
    E = 0
    SE = 1
    SW = 2
    W = 3
    NW = 4
    NE = 5


class FlatDirection(IntEnum):
    SE = 0
    S = 1
    SW = 2
    NW = 3
    N = 4
    NE = 5


_COMPASS_NAMES = {
    "N": "North",
    "NE": "North East",
    "E": "East",
    "SE": "South East",
    "S": "South",
    "SW": "South West",
    "W": "West",
    "NW": "North West",
}


def directions_for(orientation: Orientation) -> type[PointyDirection] | type[FlatDirection]:
    return FlatDirection if orientation is Orientation.FLAT else PointyDirection


def direction_label(direction: int, orientation: Orientation) -> str:
    """Return the long compass name of ``direction``, e.g. ``"North East"``."""

    check_direction(direction, orientation)
    return _COMPASS_NAMES[directions_for(orientation)(direction).name]


def check_direction(direction: object, orientation: Orientation) -> int:
    if isinstance(direction, int) and not isinstance(direction, bool) and 0 <= direction <= 5:
        return int(direction)
    labels = directions_for(orientation)
    first = _COMPASS_NAMES[labels(0).name]
    last = _COMPASS_NAMES[labels(5).name]
    raise InvalidDirection(f"Direction must be between 0 ({first}) and 5 ({last})")


def opposite(direction: int, orientation: Orientation = Orientation.POINTY) -> int:
    """Return the index of the direction pointing the other way."""

    return (check_direction(direction, orientation) + 3) % 6
