"""Pixel-space mapping for hex cells: centres, polygon corners and corner arcs."""

from __future__ import annotations

from dataclasses import dataclass
from math import cos, pi, sin, sqrt
from typing import Iterable, NamedTuple

import numpy as np

from .hex import Hex, HexConfig
from .orientation import Orientation


class Point(NamedTuple):
    x: float
    y: float

    def __str__(self) -> str:
        return f"{self.x},{self.y}"


@dataclass(frozen=True)
class Layout:
    orientation: Orientation
    size: Point  # radius along x and y; half-height for pointy, half-width for flat
    origin: Point = Point(0.0, 0.0)
    gutter: float = 0.0  # rendering gap between cells; never affects centres

    def __post_init__(self) -> None:
        object.__setattr__(self, "size", Point(*self.size))
        object.__setattr__(self, "origin", Point(*self.origin))

    @property
    def hex_width(self) -> float:
        if self.orientation.is_flat:
            return 2 * self.size.x
        return sqrt(3) * self.size.x

    @property
    def hex_height(self) -> float:
        if self.orientation.is_flat:
            return sqrt(3) * self.size.y
        return 2 * self.size.y

    def hex_to_pixel(self, h: Hex) -> Point:
        """Return the pixel centre of ``h``."""

        f0, f1, f2, f3 = self.orientation.f
        x = (f0 * h.q + f1 * h.r) * self.size.x + self.origin.x
        y = (f2 * h.q + f3 * h.r) * self.size.y + self.origin.y
        return Point(x, y)

    def pixel_to_hex(self, p: Point | tuple[float, float], config: HexConfig | None = None) -> Hex:
        """Return the fractional hex under ``p``; call ``round()`` for the containing cell."""

        b0, b1, b2, b3 = self.orientation.b
        px = (p[0] - self.origin.x) / self.size.x
        py = (p[1] - self.origin.y) / self.size.y
        q = b0 * px + b1 * py
        r = b2 * px + b3 * py
        if config is None:
            config = HexConfig(orientation=self.orientation)
        return Hex(q, r, config=config, context=self)

    def hexes_to_pixels(self, hexes: Iterable[Hex]) -> np.ndarray:
        """Return an ``(N, 2)`` array with the pixel centre of each hex."""

        qr = np.array([(h.q, h.r) for h in hexes], dtype=float).reshape(-1, 2)
        f0, f1, f2, f3 = self.orientation.f
        forward = np.array([[f0, f1], [f2, f3]])
        scale = np.array([self.size.x, self.size.y])
        origin = np.array([self.origin.x, self.origin.y])
        return qr @ forward.T * scale + origin

    def _radius(self, ignore_gutter: bool) -> Point:
        if ignore_gutter or not self.gutter:
            return self.size
        half = self.gutter / 2
        return Point(self.size.x - half, self.size.y - half)

    def hex_corner_offset(self, corner: int, ignore_gutter: bool = False) -> Point:
        """Offset of ``corner`` from the hex centre, clockwise from the start angle."""

        radius = self._radius(ignore_gutter)
        angle = 2.0 * pi * (self.orientation.start_angle - corner) / 6.0
        return Point(radius.x * cos(angle), radius.y * sin(angle))

    def polygon_corners(self, h: Hex, ignore_gutter: bool = False) -> list[Point]:
        center = self.hex_to_pixel(h)
        corners: list[Point] = []
        for i in range(6):
            offset = self.hex_corner_offset(i, ignore_gutter)
            corners.append(Point(center.x + offset.x, center.y + offset.y))
        return corners

    def corner_arcs(
        self, h: Hex, size: float, ignore_gutter: bool = False
    ) -> list[tuple[Point, Point]]:
        """Return, per corner, the two points ``size`` away along its incident edges.

        Renderers draw a rounded corner as an arc between the pair.
        """

        left, right = self.orientation.arc_angles
        arcs: list[tuple[Point, Point]] = []
        for i, corner in enumerate(self.polygon_corners(h, ignore_gutter)):
            a_left = 2.0 * pi * (left - i) / 6.0
            a_right = 2.0 * pi * (right - i) / 6.0
            arcs.append(
                (
                    Point(corner.x + size * cos(a_left), corner.y + size * sin(a_left)),
                    Point(corner.x + size * cos(a_right), corner.y + size * sin(a_right)),
                )
            )
        return arcs
