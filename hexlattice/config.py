"""Validated grid configuration."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .coords import OffsetParity
from .hex import HexConfig
from .layout import Layout, Point
from .orientation import Orientation


class GridConfig(BaseModel):
    """Shared geometry for every hex in a grid.

    Unset fields take their defaults; a partial mapping is always merged over
    these defaults, never over another grid's configuration.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    offset: OffsetParity = Field(default=OffsetParity.EVEN)
    orientation: Orientation = Field(default=Orientation.POINTY)
    size: Point = Field(default=Point(10.0, 10.0))
    origin: Point = Field(default=Point(0.0, 0.0))
    gutter: float = Field(default=0.0, ge=0.0)

    @field_validator("orientation", mode="before")
    @classmethod
    def _coerce_orientation(cls, value: Any) -> Orientation:
        return Orientation.from_value(value)

    @field_validator("size", "origin", mode="before")
    @classmethod
    def _coerce_point(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return Point(value["x"], value["y"])
        return value

    @field_validator("size")
    @classmethod
    def _non_zero_size(cls, value: Point) -> Point:
        if value.x == 0 or value.y == 0:
            raise ValueError("size components must be non-zero")
        return value

    @classmethod
    def resolve(cls, value: GridConfig | Mapping[str, Any] | None = None) -> GridConfig:
        """Return ``value`` as a config, filling unset fields with defaults."""

        if value is None:
            return cls()
        if isinstance(value, GridConfig):
            return value
        return cls.model_validate(dict(value))

    @property
    def is_flat(self) -> bool:
        return self.orientation is Orientation.FLAT

    @property
    def hex_config(self) -> HexConfig:
        return HexConfig(offset=self.offset, orientation=self.orientation)

    def to_layout(self) -> Layout:
        return Layout(
            orientation=self.orientation,
            size=self.size,
            origin=self.origin,
            gutter=self.gutter,
        )
