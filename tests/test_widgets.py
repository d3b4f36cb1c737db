from gridstash.grid_types import Vector2
from gridstash.widgets import NO_RESOURCE, Brush, Visibility, Widget

import pytest


def test_add_child_sets_parent():
    root, child = Widget(), Widget()
    root.add_child(child)
    assert child.parent is root
    assert root.children == [child]


def test_add_child_moves_between_parents():
    first, second, child = Widget(), Widget(), Widget()
    first.add_child(child)
    second.add_child(child)
    assert first.children == []
    assert second.children == [child]
    assert child.parent is second


def test_cannot_parent_self():
    widget = Widget()
    with pytest.raises(ValueError):
        widget.add_child(widget)


def test_remove_from_parent_detaches_and_leaves_viewport():
    root, child = Widget(), Widget()
    root.add_child(child)
    child.add_to_viewport()
    assert child.in_viewport
    child.remove_from_parent()
    assert child.parent is None
    assert root.children == []
    assert not child.in_viewport


def test_descendants_are_depth_first():
    root, a, b, a1 = Widget(), Widget(), Widget(), Widget()
    root.add_child(a)
    root.add_child(b)
    a.add_child(a1)
    assert list(root.descendants()) == [a, a1, b]


def test_defaults():
    widget = Widget()
    assert widget.visibility is Visibility.VISIBLE
    assert widget.position.is_zero()
    assert not NO_RESOURCE.has_resource
    assert Brush(resource="tex", image_size=Vector2(1.0, 1.0)).has_resource