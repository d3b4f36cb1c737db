import pytest

from gridstash.grid_types import (
    INDEX_NONE,
    IntPoint,
    SlotAvailability,
    SlotAvailabilityResult,
    SpaceQueryResult,
    TileParameters,
    TileQuadrant,
    Vector2,
)


def test_vector_distance():
    assert Vector2(0.0, 0.0).distance(Vector2(3.0, 4.0)) == pytest.approx(5.0)


def test_vector_distance_is_symmetric_and_zero_to_self():
    a, b = Vector2(1.5, -2.0), Vector2(-4.0, 7.25)
    assert a.distance(b) == pytest.approx(b.distance(a))
    assert a.distance(a) == 0.0


def test_vector_is_zero():
    assert Vector2().is_zero()
    assert not Vector2(0.0, 0.1).is_zero()


def test_vector_arithmetic_round_trip():
    a, b = Vector2(1.0, 2.0), Vector2(3.5, -1.0)
    assert (a + b) - b == a
    assert a * 2.0 == a + a


def test_intpoint_integer_scaling_stays_integer():
    p = IntPoint(2, 3)
    assert p * 2 == p + p
    assert (p + IntPoint(1, 1)) - IntPoint(1, 1) == p


def test_intpoint_float_scaling_gives_vector():
    assert IntPoint(1, 2) * 1.5 == Vector2(1.5, 3.0)
    assert IntPoint(4, 5).to_vector() == IntPoint(4, 5) * 1.0


def test_defaults_use_index_none():
    assert SlotAvailability().index == INDEX_NONE
    assert TileParameters().tile_index == INDEX_NONE
    assert SpaceQueryResult().upper_left_index == INDEX_NONE
    assert not SpaceQueryResult().has_space


def test_tile_parameters_equality():
    a = TileParameters(IntPoint(1, 2), 5, TileQuadrant.TOP_LEFT)
    assert a == TileParameters(IntPoint(1, 2), 5, TileQuadrant.TOP_LEFT)
    assert a != TileParameters(IntPoint(1, 2), 5, TileQuadrant.BOTTOM_RIGHT)
    assert TileParameters().quadrant is TileQuadrant.INVALID


def test_availability_results_do_not_share_lists():
    first, second = SlotAvailabilityResult(), SlotAvailabilityResult()
    first.slot_availabilities.append(SlotAvailability(3, 1, True))
    assert second.slot_availabilities == []
    assert first.total_room_to_fill == second.total_room_to_fill