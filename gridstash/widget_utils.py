"""Grid index arithmetic and widget geometry helpers."""

from __future__ import annotations

from typing import Iterator, Sequence, TypeVar

from gridstash.grid_types import IntPoint, Vector2
from gridstash.widgets import Widget

T = TypeVar("T")


def _truncating_divmod(value: int, divisor: int) -> tuple[int, int]:
    quotient = abs(value) // abs(divisor)
    if (value < 0) != (divisor < 0):
        quotient = -quotient
    return quotient, value - quotient * divisor


def index_from_position(position: IntPoint, columns: int) -> int:
    return position.y * columns + position.x


def position_from_index(index: int, columns: int) -> IntPoint:
    """Column and row of ``index``; division truncates toward zero."""
    row, column = _truncating_divmod(index, columns)
    return IntPoint(column, row)


def widget_position(widget: Widget) -> Vector2:
    return widget.position


def widget_size(widget: Widget) -> Vector2:
    return widget.size


def is_within_bounds(boundary_position: Vector2, widget_size: Vector2, mouse_position: Vector2) -> bool:
    return (
        boundary_position.x <= mouse_position.x <= boundary_position.x + widget_size.x
        and boundary_position.y <= mouse_position.y <= boundary_position.y + widget_size.y
    )


def clamped_widget_position(boundary: Vector2, widget_size: Vector2, mouse_position: Vector2) -> Vector2:
    """Keep a widget of ``widget_size`` placed at the mouse inside ``boundary``."""
    x, y = mouse_position.x, mouse_position.y
    if mouse_position.x + widget_size.x > boundary.x:
        x = boundary.x - widget_size.x
    if mouse_position.x < 0.0:
        x = 0.0
    if mouse_position.y + widget_size.y > boundary.y:
        y = boundary.y - widget_size.y
    if mouse_position.y < 0.0:
        y = 0.0
    return Vector2(x, y)


def iter_2d(items: Sequence[T], index: int, range_2d: IntPoint, columns: int) -> Iterator[T]:
    """Yield the items covered by a ``range_2d`` rectangle whose top-left is ``index``.

    Rows are visited outermost; cells whose index falls outside ``items`` are skipped.
    """
    origin = position_from_index(index, columns)
    for row in range(range_2d.y):
        for column in range(range_2d.x):
            tile_index = index_from_position(origin + IntPoint(column, row), columns)
            if 0 <= tile_index < len(items):
                yield items[tile_index]