"""Immutable cube-coordinate hex value type."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, TypeVar

from .conversions import axial_to_offset, to_cube
from .coords import Axial, Offset, OffsetParity, check_zero_sum, parse_coordinates
from .directions import DIRECTION_VECTORS, check_direction
from .errors import MissingContext
from .orientation import Orientation

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .layout import Layout, Point

HexT = TypeVar("HexT", bound="Hex")


@dataclass(frozen=True)
class HexConfig:
    """Offset parity and tiling used when reading a hex as ``row``/``col``."""

    offset: OffsetParity = OffsetParity.EVEN
    orientation: Orientation = Orientation.POINTY

    @property
    def is_pointy(self) -> bool:
        return self.orientation is Orientation.POINTY


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


@dataclass(frozen=True, eq=False)
class Hex:
    """A single cell in cube coordinates ``(q, r, s)`` with ``q + r + s == 0``.

    ``s`` may be omitted and is then derived from ``q`` and ``r``. ``config``
    only affects the offset view (``row``/``col``) and ``context`` only the
    pixel helpers; neither takes part in equality or hashing.
    """

    q: float
    r: float
    s: float | None = None
    config: HexConfig = field(default_factory=HexConfig, repr=False)
    context: Layout | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        s = self.s
        if s is None:
            s = -self.q - self.r
            object.__setattr__(self, "s", s)
        check_zero_sum(self.q, self.r, s)

    @classmethod
    def from_coordinates(
        cls: type[HexT], coordinates: object, config: HexConfig | None = None
    ) -> HexT:
        """Build a hex from cube, axial, partial or offset coordinates."""

        config = config or HexConfig()
        if isinstance(coordinates, Hex):
            return cls(coordinates.q, coordinates.r, coordinates.s, config=config)
        shape = parse_coordinates(coordinates)
        cube = to_cube(shape, config.offset, config.orientation)
        return cls(cube.q, cube.r, cube.s, config=config)

    # ------------------------------------------------------------------
    # Identity

    @property
    def key(self) -> str:
        return f"hex({_fmt(self.q)},{_fmt(self.r)},{_fmt(self.s)})"

    def __str__(self) -> str:
        return self.key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hex):
            return NotImplemented
        return self.q == other.q and self.r == other.r and self.s == other.s

    def __hash__(self) -> int:
        return hash((self.q, self.r, self.s))

    def equals(self, other: Hex) -> bool:
        return self == other

    # ------------------------------------------------------------------
    # Offset view

    @property
    def col(self) -> int:
        return self.to_offset().col

    @property
    def row(self) -> int:
        return self.to_offset().row

    def to_offset(self) -> Offset:
        return axial_to_offset(
            Axial(self.q, self.r), self.config.offset, self.config.orientation
        )

    def with_config(self: HexT, config: HexConfig) -> HexT:
        return replace(self, config=config)

    def with_context(self: HexT, context: Layout | None) -> HexT:
        return replace(self, context=context)

    # ------------------------------------------------------------------
    # Vector arithmetic

    def _derive(self, q: float, r: float) -> Hex:
        return Hex(q, r, config=self.config, context=self.context)

    def add(self, vec: Hex) -> Hex:
        return self._derive(self.q + vec.q, self.r + vec.r)

    def subtract(self, vec: Hex) -> Hex:
        return self._derive(self.q - vec.q, self.r - vec.r)

    __add__ = add
    __sub__ = subtract

    def scale(self, k: float) -> Hex:
        return self._derive(self.q * k, self.r * k)

    def rotate_left(self) -> Hex:
        """Rotate this vector 60 degrees anti-clockwise."""

        return self._derive(-self.s, -self.q)

    def rotate_right(self) -> Hex:
        """Rotate this vector 60 degrees clockwise."""

        return self._derive(-self.r, -self.s)

    # ------------------------------------------------------------------
    # Neighbors

    def neighbor(self, direction: int) -> Hex:
        """Return the adjacent hex in ``direction`` (a ``PointyDirection`` or ``FlatDirection``)."""

        index = check_direction(direction, self.config.orientation)
        vec = DIRECTION_VECTORS[index]
        return self._derive(self.q + vec.q, self.r + vec.r)

    @property
    def neighbors(self) -> list[Hex]:
        return [self._derive(self.q + d.q, self.r + d.r) for d in DIRECTION_VECTORS]

    # ------------------------------------------------------------------
    # Metric

    def length(self) -> float:
        total = abs(self.q) + abs(self.r) + abs(self.s)
        if isinstance(total, int):
            return total // 2
        return total / 2

    def distance(self, other: Hex) -> float:
        return self.subtract(other).length()

    def round(self) -> Hex:
        """Snap fractional coordinates to the nearest valid integer hex."""

        qi = _round_half_up(self.q)
        ri = _round_half_up(self.r)
        si = _round_half_up(self.s)
        q_diff = abs(qi - self.q)
        r_diff = abs(ri - self.r)
        s_diff = abs(si - self.s)
        if q_diff > r_diff and q_diff > s_diff:
            qi = -ri - si
        elif r_diff > s_diff:
            ri = -qi - si
        else:
            si = -qi - ri
        return Hex(qi, ri, si, config=self.config, context=self.context)

    def lerp(self, other: Hex, t: float) -> Hex:
        """Blend towards ``other`` by ``t``; the result is not rounded."""

        return self._derive(
            self.q * (1 - t) + other.q * t,
            self.r * (1 - t) + other.r * t,
        )

    # ------------------------------------------------------------------
    # Pixel space

    def _require_context(self, action: str) -> Layout:
        if self.context is None:
            raise MissingContext(f"No layout context for {action}")
        return self.context

    def to_point(self) -> Point:
        return self._require_context("converting to a point").hex_to_pixel(self)

    def corners(self, ignore_gutter: bool = False) -> list[Point]:
        layout = self._require_context("converting to coordinates")
        return layout.polygon_corners(self, ignore_gutter)

    def arc_corners(self, size: float, ignore_gutter: bool = False) -> list[tuple[Point, Point]]:
        layout = self._require_context("converting to coordinates")
        return layout.corner_arcs(self, size, ignore_gutter)


def _fmt(value: float) -> str:
    value = value + 0  # folds -0.0 into 0.0
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)
