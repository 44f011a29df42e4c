from __future__ import annotations

from numbers import Integral

from .coords import Axial, Cube, Offset, OffsetParity, PartialCube, Shape
from .errors import InvalidCoordinate
from .orientation import Orientation


def _as_index(value: float, axis: str) -> int:
    """Return ``value`` as an ``int``; offset parity needs whole coordinates."""

    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise InvalidCoordinate(f"Offset {axis} needs a whole number; got {value!r}")


def axial_to_cube(a: Axial) -> Cube:
    q = a.q
    r = a.r
    s = -q - r
    return Cube(q, r, s)


def cube_to_axial(c: Cube) -> Axial:
    return Axial(c.q, c.r)


def partial_to_cube(p: PartialCube) -> Cube:
    q = p.q if p.q is not None else -p.r - p.s  # type: ignore[operator]
    r = p.r if p.r is not None else -p.q - p.s  # type: ignore[operator]
    # s is always derived from q and r so float input still sums to exactly 0.
    return axial_to_cube(Axial(q, r))


def offset_to_axial(
    o: Offset,
    parity: OffsetParity = OffsetParity.EVEN,
    orientation: Orientation = Orientation.POINTY,
) -> Axial:
    col, row = _as_index(o.col, "col"), _as_index(o.row, "row")
    if orientation is Orientation.POINTY:
        q = col - (row + parity * (row & 1)) // 2
        r = row
    elif orientation is Orientation.FLAT:
        q = col
        r = row - (col + parity * (col & 1)) // 2
    else:
        raise ValueError("Unknown orientation")
    return Axial(q, r)


def axial_to_offset(
    a: Axial,
    parity: OffsetParity = OffsetParity.EVEN,
    orientation: Orientation = Orientation.POINTY,
) -> Offset:
    q, r = _as_index(a.q, "q"), _as_index(a.r, "r")
    if orientation is Orientation.POINTY:
        col = q + (r + parity * (r & 1)) // 2
        row = r
    elif orientation is Orientation.FLAT:
        col = q
        row = r + (q + parity * (q & 1)) // 2
    else:
        raise ValueError("Unknown orientation")
    return Offset(col, row)


def to_cube(
    shape: Shape,
    parity: OffsetParity = OffsetParity.EVEN,
    orientation: Orientation = Orientation.POINTY,
) -> Cube:
    """Normalise any parsed coordinate shape to cube form."""

    if isinstance(shape, Cube):
        return shape
    if isinstance(shape, Axial):
        return axial_to_cube(shape)
    if isinstance(shape, Offset):
        return axial_to_cube(offset_to_axial(shape, parity, orientation))
    return partial_to_cube(shape)
