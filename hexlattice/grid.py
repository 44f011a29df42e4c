"""Spatial container of hex cells sharing one layout."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, Callable, Generic, Iterable, Iterator

import numpy as np

from .config import GridConfig
from .hex import Hex, HexT
from .layout import Point

logger = logging.getLogger(__name__)


@dataclass
class CoordinateParams(Generic[HexT]):
    """Structured arguments for :meth:`Grid.from_coordinates`."""

    coords: Iterable[object]
    hex_factory: type[HexT] | None = None
    config: GridConfig | Mapping[str, Any] | None = None


class Grid(Generic[HexT]):
    """Hex cells keyed by canonical ``hex(q,r,s)`` identity.

    Every member is stored as a copy carrying the grid's offset parity,
    orientation and layout, so members can be placed in pixel space directly.
    Iteration follows insertion order.
    """

    def __init__(
        self,
        hexes: Iterable[HexT] = (),
        config: GridConfig | Mapping[str, Any] | None = None,
    ) -> None:
        self.config = GridConfig.resolve(config)
        self.layout = self.config.to_layout()
        self.hex_factory: type[HexT] | None = None
        self._hexes: dict[str, HexT] = {}
        for h in hexes:
            if self.hex_factory is None:
                self.hex_factory = type(h)
            self.set_hex(h)

    @classmethod
    def from_coordinates(
        cls,
        coords: CoordinateParams[HexT] | Mapping[str, Any] | Iterable[object],
        config: GridConfig | Mapping[str, Any] | None = None,
        *,
        hex_factory: type[HexT] | None = None,
    ) -> Grid[HexT]:
        """Build a grid with one hex per coordinate.

        ``coords`` is either a plain iterable of coordinate shapes, consumed
        exactly once, or a :class:`CoordinateParams` / mapping with ``coords``
        and optional ``hex_factory`` and ``config``. Keyword arguments fill in
        fields the params leave unset; giving a field both ways is a
        ``TypeError``.
        """

        if isinstance(coords, CoordinateParams):
            params = coords
        elif isinstance(coords, Mapping) and "coords" in coords:
            params = CoordinateParams(**coords)
        else:
            params = CoordinateParams(coords)
        if config is not None:
            if params.config is not None:
                raise TypeError("config given both in coordinate params and as an argument")
            params = replace(params, config=config)
        if hex_factory is not None:
            if params.hex_factory is not None:
                raise TypeError(
                    "hex_factory given both in coordinate params and as an argument"
                )
            params = replace(params, hex_factory=hex_factory)

        grid_config = GridConfig.resolve(params.config)
        factory = params.hex_factory or Hex
        hex_config = grid_config.hex_config
        hexes = [factory.from_coordinates(c, hex_config) for c in params.coords]
        grid: Grid[HexT] = cls(hexes, grid_config)  # type: ignore[arg-type]
        if grid.hex_factory is None:
            grid.hex_factory = factory  # type: ignore[assignment]
        return grid

    # ------------------------------------------------------------------
    # Membership

    def _key(self, value: object) -> str:
        if isinstance(value, Hex):
            return value.key
        return Hex.from_coordinates(value, self.config.hex_config).key

    def set_hex(self, h: HexT) -> HexT:
        """Insert ``h``, silently replacing any member with the same coordinates."""

        adopted = replace(h, config=self.config.hex_config, context=self.layout)
        if adopted.key in self._hexes:
            logger.debug("Replacing %s in %r", adopted.key, self)
        self._hexes[adopted.key] = adopted
        return adopted

    def get_hex(self, value: object) -> HexT | None:
        return self._hexes.get(self._key(value))

    def has_hex(self, value: object) -> bool:
        return self._key(value) in self._hexes

    def __contains__(self, value: object) -> bool:
        return self.has_hex(value)

    def __len__(self) -> int:
        return len(self._hexes)

    def __iter__(self) -> Iterator[HexT]:
        return iter(self._hexes.values())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)})"

    def to_list(self) -> list[HexT]:
        return list(self)

    # ------------------------------------------------------------------
    # Functional helpers

    def _derived(self, hexes: Iterable[HexT]) -> Grid[HexT]:
        grid: Grid[HexT] = type(self)(hexes, self.config)
        if grid.hex_factory is None:
            grid.hex_factory = self.hex_factory
        return grid

    def filter(self, predicate: Callable[[HexT], bool]) -> Grid[HexT]:
        return self._derived(h for h in self if predicate(h))

    def map(self, fn: Callable[[HexT], HexT]) -> Grid[HexT]:
        """Return a new grid of ``fn(h)`` values, re-keyed; later collisions win."""

        return self._derived(fn(h) for h in self)

    def for_each(self, fn: Callable[[HexT], object]) -> None:
        for h in self:
            fn(h)

    # ------------------------------------------------------------------
    # Geometry

    @property
    def hex_width(self) -> float:
        return self.layout.hex_width

    @property
    def hex_height(self) -> float:
        return self.layout.hex_height

    def hex_to_pixel(self, h: Hex) -> Point:
        return self.layout.hex_to_pixel(h)

    def pixel_to_hex(self, point: Point | tuple[float, float]) -> Hex:
        return self.layout.pixel_to_hex(point, self.config.hex_config)

    def pixel_centers(self) -> np.ndarray:
        return self.layout.hexes_to_pixels(self)

    @property
    def width(self) -> float:
        """Pixel width of the bounding box around all members."""

        if not self._hexes:
            return 0
        xs = [self.hex_to_pixel(h).x for h in self]
        return max(xs) - min(xs) + self.hex_width

    @property
    def height(self) -> float:
        """Pixel height of the bounding box around all members."""

        if not self._hexes:
            return 0
        ys = [self.hex_to_pixel(h).y for h in self]
        return max(ys) - min(ys) + self.hex_height
