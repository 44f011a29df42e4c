"""Coordinate shapes accepted at the library boundary."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import TypeAlias

from .errors import InvalidCoordinate


class OffsetParity(IntEnum):
    """Which rows (pointy) or columns (flat) are shoved in offset coordinates."""

    EVEN = +1
    ODD = -1


@dataclass(frozen=True, slots=True)
class Cube:
    q: float
    r: float
    s: float

    def __post_init__(self) -> None:
        check_zero_sum(self.q, self.r, self.s)


@dataclass(frozen=True, slots=True)
class Axial:
    q: float
    r: float


@dataclass(frozen=True, slots=True)
class Offset:
    col: int
    row: int


@dataclass(frozen=True, slots=True)
class PartialCube:
    """Two of the three cube axes; the missing one is derived."""

    q: float | None = None
    r: float | None = None
    s: float | None = None

    def __post_init__(self) -> None:
        present = sum(axis is not None for axis in (self.q, self.r, self.s))
        if present != 2:
            raise InvalidCoordinate(
                f"Partial coordinates need exactly two of q, r, s; got {present}"
            )


Shape: TypeAlias = Cube | Axial | Offset | PartialCube

_CUBE_KEYS = frozenset({"q", "r", "s"})
_OFFSET_KEYS = frozenset({"row", "col"})


def check_zero_sum(q: float, r: float, s: float) -> None:
    """Raise :class:`InvalidCoordinate` unless ``q + r + s`` is zero."""

    if q + r + s != 0:
        raise InvalidCoordinate(f"Hex({q}, {r}, {s}) invalid: does not zero-sum")


def parse_coordinates(value: object) -> Shape:
    """Classify ``value`` into exactly one coordinate shape.

    Accepts shape records, mappings keyed by ``q``/``r``/``s`` or ``row``/``col``,
    2-tuples (axial) and 3-tuples (cube). Anything with keys from both families,
    or with an unusable key set, is rejected rather than guessed at.
    """

    if isinstance(value, (Cube, Axial, Offset, PartialCube)):
        return value
    if isinstance(value, Mapping):
        return _parse_mapping(value)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        if len(value) == 3:
            return Cube(value[0], value[1], value[2])
        if len(value) == 2:
            return Axial(value[0], value[1])
        raise InvalidCoordinate(
            f"Coordinate tuples need 2 (axial) or 3 (cube) entries; got {len(value)}"
        )
    raise InvalidCoordinate(f"Unrecognised coordinate shape: {value!r}")


def _parse_mapping(value: Mapping[str, object]) -> Shape:
    keys = frozenset(value)
    cube_keys = keys & _CUBE_KEYS
    offset_keys = keys & _OFFSET_KEYS
    unknown = keys - _CUBE_KEYS - _OFFSET_KEYS
    if unknown:
        raise InvalidCoordinate(f"Unknown coordinate keys: {sorted(unknown)}")
    if cube_keys and offset_keys:
        raise InvalidCoordinate(
            f"Ambiguous coordinates mix cube and offset keys: {sorted(keys)}"
        )
    if offset_keys:
        if offset_keys != _OFFSET_KEYS:
            raise InvalidCoordinate("Offset coordinates need both row and col")
        return Offset(col=value["col"], row=value["row"])  # type: ignore[arg-type]
    if cube_keys == _CUBE_KEYS:
        return Cube(value["q"], value["r"], value["s"])  # type: ignore[arg-type]
    if cube_keys == {"q", "r"}:
        return Axial(value["q"], value["r"])  # type: ignore[arg-type]
    return PartialCube(**value)  # type: ignore[arg-type]
