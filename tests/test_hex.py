from __future__ import annotations

import itertools
from dataclasses import dataclass

import pytest

from hexlattice import (
    FlatDirection,
    Hex,
    HexConfig,
    InvalidCoordinate,
    InvalidDirection,
    Layout,
    MissingContext,
    Offset,
    OffsetParity,
    Orientation,
    Point,
    PointyDirection,
    direction_label,
    opposite,
)


@dataclass(frozen=True, eq=False)
class TerrainHex(Hex):
    terrain: str = "grass"


def cube(h: Hex) -> tuple[float, float, float]:
    return h.q, h.r, h.s


# ---------------------------------------------------------------------------
# Construction


def test_cube_construction():
    assert cube(Hex(1, 2, -3)) == (1, 2, -3)
    assert cube(Hex.from_coordinates({"q": 1, "r": 2, "s": -3})) == (1, 2, -3)


def test_axial_and_partial_construction_derive_third_axis():
    assert cube(Hex(2, -4)) == (2, -4, 2)
    assert cube(Hex.from_coordinates({"q": 2, "r": -4})) == (2, -4, 2)
    assert cube(Hex.from_coordinates({"q": 2, "s": 2})) == (2, -4, 2)
    assert cube(Hex.from_coordinates({"r": -4, "s": 2})) == (2, -4, 2)
    assert cube(Hex.from_coordinates((2, -4))) == (2, -4, 2)
    assert cube(Hex.from_coordinates((2, -4, 2))) == (2, -4, 2)


def test_offset_construction_uses_config():
    even = HexConfig(offset=OffsetParity.EVEN)
    odd = HexConfig(offset=OffsetParity.ODD)
    flat_even = HexConfig(offset=OffsetParity.EVEN, orientation=Orientation.FLAT)
    flat_odd = HexConfig(offset=OffsetParity.ODD, orientation=Orientation.FLAT)

    assert Hex.from_coordinates({"row": 1, "col": 2}, even) == Hex(1, 1, -2)
    assert Hex.from_coordinates({"row": 1, "col": 2}, odd) == Hex(2, 1, -3)
    assert Hex.from_coordinates({"row": 1, "col": 1}, flat_even) == Hex(1, 0, -1)
    assert Hex.from_coordinates({"row": 1, "col": 1}, flat_odd) == Hex(1, 1, -2)


def test_invalid_cube_is_rejected():
    with pytest.raises(InvalidCoordinate, match=r"Hex\(1, 1, 1\) invalid: does not zero-sum"):
        Hex(1, 1, 1)
    with pytest.raises(InvalidCoordinate):
        Hex.from_coordinates({"q": 1, "r": 1, "s": 1})


def test_float_cube_must_sum_exactly_to_zero():
    with pytest.raises(InvalidCoordinate, match="does not zero-sum"):
        Hex(1, 1, -2 + 1e-10)
    with pytest.raises(InvalidCoordinate):
        Hex.from_coordinates({"q": 0.1, "r": 0.2, "s": -0.3})


def test_fractional_hexes_sum_exactly_to_zero():
    derived = (
        Hex(0.1, 0.2),
        Hex.from_coordinates({"r": 0.1, "s": 0.2}),
        Hex(0, 0).lerp(Hex(3, -7), 0.3),
    )
    for h in derived:
        assert h.q + h.r + h.s == 0


def test_subclass_construction_keeps_type():
    h = TerrainHex.from_coordinates((1, 2))
    assert isinstance(h, TerrainHex)
    assert h.terrain == "grass"
    assert h == Hex(1, 2)


# ---------------------------------------------------------------------------
# Identity


def test_key_and_string_forms():
    h = Hex(1, 1)
    assert h.key == "hex(1,1,-2)"
    assert str(h) == "hex(1,1,-2)"
    assert repr(h) == "Hex(q=1, r=1, s=-2)"


def test_equality_ignores_config_and_context():
    plain = Hex(1, 1)
    configured = Hex(
        1,
        1,
        config=HexConfig(offset=OffsetParity.ODD, orientation=Orientation.FLAT),
        context=Layout(Orientation.FLAT, Point(5, 5)),
    )
    assert plain == configured
    assert plain.equals(configured)
    assert hash(plain) == hash(configured)
    assert plain.key == configured.key
    assert plain != Hex(1, -1)


def test_integral_floats_share_the_integer_key():
    assert Hex(1.0, 1.0).key == "hex(1,1,-2)"
    assert Hex(0.0, 0.0).key == "hex(0,0,0)"
    assert Hex(1.0, 1.0) == Hex(1, 1)


@pytest.mark.parametrize(("a", "b"), list(itertools.product([Hex(0, 0), Hex(1, -1), Hex(1.0, -1.0), Hex(2, 3)], repeat=2)))
def test_equality_matches_key_equality(a, b):
    assert (a == b) == (a.key == b.key)


# ---------------------------------------------------------------------------
# Offset view


def test_offset_properties():
    h = Hex(1, 1)
    assert (h.row, h.col) == (1, 2)
    assert h.config == HexConfig(offset=OffsetParity.EVEN, orientation=Orientation.POINTY)


def test_offset_view_of_integral_float_hex():
    h = Hex(1.0, 1.0)
    assert (h.row, h.col) == (1, 2)
    assert isinstance(h.row, int)
    assert h.to_offset() == Hex(1, 1).to_offset()


def test_offset_view_of_fractional_hex_is_rejected():
    h = Hex(0.5, 1.0)
    with pytest.raises(InvalidCoordinate, match="whole number"):
        h.col
    with pytest.raises(InvalidCoordinate):
        h.to_offset()


def test_offset_construction_accepts_integral_floats_only():
    assert Hex.from_coordinates({"row": 1.0, "col": 2.0}) == Hex(1, 1)
    with pytest.raises(InvalidCoordinate, match="whole number"):
        Hex.from_coordinates({"row": 1.5, "col": 2})


@pytest.mark.parametrize("orientation", list(Orientation))
@pytest.mark.parametrize("parity", list(OffsetParity))
def test_offset_roundtrip_through_hex(parity, orientation):
    config = HexConfig(offset=parity, orientation=orientation)
    for row in range(-4, 5):
        for col in range(-4, 5):
            h = Hex.from_coordinates({"row": row, "col": col}, config)
            assert (h.row, h.col) == (row, col)
            assert h.to_offset() == Offset(col=col, row=row)


def test_with_config_and_context_preserve_payload():
    h = TerrainHex(1, 2, terrain="water")
    layout = Layout(Orientation.POINTY, Point(10, 10))
    flat = h.with_config(HexConfig(orientation=Orientation.FLAT)).with_context(layout)
    assert isinstance(flat, TerrainHex)
    assert flat.terrain == "water"
    assert flat.config.orientation is Orientation.FLAT
    assert flat.context is layout
    assert h.context is None


# ---------------------------------------------------------------------------
# Arithmetic


def test_transform_methods():
    h = Hex(1, 1)
    other = Hex(1, -1)
    assert cube(h.add(other)) == (2, 0, -2)
    assert cube(h + other) == (2, 0, -2)
    assert cube(h.subtract(other)) == (0, 2, -2)
    assert cube(h - other) == (0, 2, -2)
    assert cube(h.scale(2)) == (2, 2, -4)
    assert cube(h.rotate_left().rotate_left()) == (1, -2, 1)
    assert cube(h.rotate_right().rotate_right()) == (-2, 1, 1)


def test_transforms_return_new_values():
    h = Hex(1, 1)
    moved = h.add(Hex(1, 0))
    assert moved is not h
    assert cube(h) == (1, 1, -2)


def test_rotation_group():
    h = Hex(3, -1)
    rotated = h
    for _ in range(6):
        rotated = rotated.rotate_left()
    assert rotated == h
    assert h.rotate_left().rotate_right() == h
    four_left = h.rotate_left().rotate_left().rotate_left().rotate_left()
    two_right = h.rotate_right().rotate_right()
    assert four_left == two_right


# ---------------------------------------------------------------------------
# Neighbors


def test_neighbor_pointy_orientation():
    h = Hex(1, 1)
    assert cube(h.neighbor(0)) == (2, 1, -3)
    assert cube(h.neighbor(PointyDirection.E)) == (2, 1, -3)
    assert cube(h.neighbor(3)) == (0, 1, -1)
    assert cube(h.neighbor(PointyDirection.NW)) == (1, 0, -1)


def test_neighbor_flat_orientation_uses_same_vectors():
    h = Hex(1, 1, config=HexConfig(orientation=Orientation.FLAT))
    assert cube(h.neighbor(0)) == (2, 1, -3)
    assert cube(h.neighbor(FlatDirection.SE)) == (2, 1, -3)
    assert cube(h.neighbor(3)) == (0, 1, -1)
    assert cube(h.neighbor(FlatDirection.N)) == (1, 0, -1)


def test_neighbors_property_order():
    assert [cube(n)[:2] for n in Hex(1, 1).neighbors] == [
        (2, 1),
        (1, 2),
        (0, 2),
        (0, 1),
        (1, 0),
        (2, 0),
    ]


@pytest.mark.parametrize("direction", [10, -1, 6, 2.0, "1", None])
def test_invalid_direction_names_pointy_bounds(direction):
    with pytest.raises(InvalidDirection, match=r"^Direction must be between 0 \(East\) and 5 \(North East\)$"):
        Hex(1, 1).neighbor(direction)


def test_invalid_direction_names_flat_bounds():
    h = Hex(1, 1, config=HexConfig(orientation=Orientation.FLAT))
    with pytest.raises(InvalidDirection, match=r"0 \(South East\) and 5 \(North East\)"):
        h.neighbor(10)


def test_direction_labels():
    assert direction_label(PointyDirection.NW, Orientation.POINTY) == "North West"
    assert direction_label(4, Orientation.FLAT) == "North"
    assert opposite(PointyDirection.E) == PointyDirection.W
    assert opposite(FlatDirection.N) == FlatDirection.S


def test_opposite_reports_bounds_for_its_orientation():
    assert opposite(FlatDirection.NW, Orientation.FLAT) == FlatDirection.SE
    with pytest.raises(InvalidDirection, match=r"0 \(South East\) and 5 \(North East\)"):
        opposite(6, Orientation.FLAT)
    with pytest.raises(InvalidDirection, match=r"0 \(East\) and 5 \(North East\)"):
        opposite(-1)


@pytest.mark.parametrize("direction", range(6))
def test_neighbor_symmetry(direction):
    for h in (Hex(0, 0), Hex(3, -7), Hex(-2, 5)):
        assert h.neighbor(direction).neighbor(opposite(direction)) == h


def test_neighbors_keep_config_and_context():
    layout = Layout(Orientation.POINTY, Point(10, 10))
    h = Hex(0, 0, context=layout)
    assert all(n.context is layout for n in h.neighbors)


# ---------------------------------------------------------------------------
# Metric, rounding, interpolation


def test_length_and_distance():
    assert Hex(3, -1).length() == 3
    assert Hex(0, 0).distance(Hex(2, -3)) == 3
    assert isinstance(Hex(3, -1).length(), int)


def test_distance_is_a_metric():
    hexes = [Hex(0, 0), Hex(3, -1), Hex(-2, 4), Hex(5, 5), Hex(-3, -3)]
    for a in hexes:
        assert a.distance(a) == 0
        for b in hexes:
            assert a.distance(b) == b.distance(a)
            for c in hexes:
                assert a.distance(c) <= a.distance(b) + b.distance(c)


@pytest.mark.parametrize(
    ("fractional", "expected"),
    [
        (Hex(1.4, -0.3), Hex(1, 0, -1)),
        # q and r tie on error, so r is corrected.
        (Hex(0.6, 0.6), Hex(1, 0, -1)),
        # Halves round up, not to even.
        (Hex(0.5, -0.5), Hex(1, -1, 0)),
        (Hex(-2.2, 0.9), Hex(-2, 1, 1)),
    ],
)
def test_round(fractional, expected):
    rounded = fractional.round()
    assert rounded == expected
    assert all(isinstance(axis, int) for axis in cube(rounded))


def test_round_is_idempotent():
    for q, r in [(0.3, 0.3), (1.49, -2.51), (-0.5, 0.5), (7.77, -3.33)]:
        once = Hex(q, r).round()
        assert once.round() == once


def test_lerp_is_not_rounded():
    mid = Hex(0, 0).lerp(Hex(3, -2), 0.5)
    assert (mid.q, mid.r) == (1.5, -1.0)
    assert mid.q + mid.r + mid.s == 0


def test_zero_sum_holds_for_derived_values():
    h = Hex(0.1, 0.7)
    for value in (h, h.scale(3.3), h.lerp(Hex(5, -9), 0.37), h.rotate_left(), h.add(Hex(2, 2))):
        assert value.q + value.r + value.s == pytest.approx(0.0, abs=1e-12)


# ---------------------------------------------------------------------------
# Pixel helpers


def test_pixel_helpers_require_context():
    h = Hex(1, 1)
    with pytest.raises(MissingContext, match="No layout context"):
        h.to_point()
    with pytest.raises(MissingContext):
        h.corners()
    with pytest.raises(MissingContext):
        h.arc_corners(2)


def test_pixel_helpers_delegate_to_layout():
    layout = Layout(Orientation.POINTY, Point(10, 10), Point(5, 5))
    h = Hex(1, 0).with_context(layout)
    assert h.to_point() == layout.hex_to_pixel(h)
    assert h.corners() == layout.polygon_corners(h)
    assert h.arc_corners(2) == layout.corner_arcs(h, 2)
