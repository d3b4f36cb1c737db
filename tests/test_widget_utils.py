from gridstash.grid_types import IntPoint, Vector2
from gridstash.widget_utils import (
    clamped_widget_position,
    index_from_position,
    is_within_bounds,
    iter_2d,
    position_from_index,
    widget_position,
    widget_size,
)
from gridstash.widgets import Widget

import pytest


@pytest.mark.parametrize("columns", [1, 3, 8])
def test_index_position_round_trip(columns):
    for index in range(columns * 4):
        assert index_from_position(position_from_index(index, columns), columns) == index
        assert 0 <= position_from_index(index, columns).x < columns


def test_negative_index_truncates_toward_zero():
    assert position_from_index(-1, 4) == IntPoint(-1, 0)


def test_iter_2d_covers_rectangle_row_major():
    assert list(iter_2d(list(range(12)), 5, IntPoint(2, 2), 4)) == [5, 6, 9, 10]


def test_iter_2d_skips_out_of_range_cells():
    items = list(range(4))
    covered = list(iter_2d(items, 3, IntPoint(2, 2), 2))
    assert covered == [items[3]]


def test_iter_2d_empty_range_yields_nothing():
    assert list(iter_2d(list(range(6)), 0, IntPoint(0, 0), 3)) == []


def test_geometry_reads_widget():
    widget = Widget(position=Vector2(10.0, 20.0), size=Vector2(30.0, 40.0))
    assert widget_position(widget) == widget.position
    assert widget_size(widget) == widget.size


def test_is_within_bounds_is_inclusive():
    origin, size = Vector2(10.0, 10.0), Vector2(50.0, 20.0)
    assert is_within_bounds(origin, size, origin)
    assert is_within_bounds(origin, size, origin + size)
    assert not is_within_bounds(origin, size, origin + size + Vector2(0.5, 0.0))
    assert not is_within_bounds(origin, size, origin - Vector2(0.0, 0.5))


def test_clamped_position_example():
    assert clamped_widget_position(Vector2(100.0, 100.0), Vector2(30.0, 30.0), Vector2(90.0, -5.0)) == Vector2(70.0, 0.0)


@pytest.mark.parametrize(
    "mouse",
    [Vector2(-20.0, 5.0), Vector2(250.0, 150.0), Vector2(50.0, 50.0), Vector2(190.0, -1.0)],
)
def test_clamped_position_stays_inside(mouse):
    boundary, size = Vector2(200.0, 160.0), Vector2(40.0, 30.0)
    result = clamped_widget_position(boundary, size, mouse)
    assert 0.0 <= result.x <= boundary.x - size.x
    assert 0.0 <= result.y <= boundary.y - size.y


def test_clamped_position_untouched_when_fits():
    mouse = Vector2(12.0, 34.0)
    assert clamped_widget_position(Vector2(500.0, 500.0), Vector2(10.0, 10.0), mouse) == mouse