"""Composite widgets that fragments expand and fill in."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable, Iterator

from gridstash.grid_types import Vector2
from gridstash.tags import EMPTY_TAG, GameplayTag
from gridstash.widgets import Brush, Visibility, Widget


class CompositeBase(Widget):
    """A widget tagged with the fragment tag that fills it."""

    def __init__(self, *, fragment_tag: GameplayTag = EMPTY_TAG, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.fragment_tag = fragment_tag

    def collapse(self) -> None:
        self.visibility = Visibility.COLLAPSED

    def expand(self) -> None:
        self.visibility = Visibility.VISIBLE

    def apply_function(self, function: Callable[[CompositeBase], Any]) -> None:
        """Apply ``function`` to the leaves below; a bare base has none."""


def _nearest_composites(widget: Widget) -> Iterator[CompositeBase]:
    for child in widget.children:
        if isinstance(child, CompositeBase):
            yield child
        else:
            yield from _nearest_composites(child)


class Composite(CompositeBase):
    """A composite holding other composites and leaves."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.composite_children: list[CompositeBase] = []

    def initialize(self) -> None:
        """Gather the composites in this widget's tree and collapse them."""
        self.composite_children = list(_nearest_composites(self))
        for child in self.composite_children:
            child.collapse()

    def apply_function(self, function: Callable[[CompositeBase], Any]) -> None:
        for child in self.composite_children:
            child.apply_function(function)

    def collapse(self) -> None:
        for child in self.composite_children:
            child.collapse()


class Leaf(CompositeBase):
    def apply_function(self, function: Callable[[CompositeBase], Any]) -> None:
        function(self)


class ImageLeaf(Leaf):
    """A leaf showing one image inside a size box."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.image_brush = Brush()
        self.box_size_override: Vector2 | None = None
        self.image_size_override: Vector2 | None = None

    def set_image(self, texture: Any) -> None:
        self.image_brush = replace(self.image_brush, resource=texture)

    def set_box_size(self, size: Vector2) -> None:
        self.box_size_override = size

    def set_image_size(self, size: Vector2) -> None:
        self.image_size_override = size

    def desired_image_size(self) -> Vector2:
        if self.image_size_override is not None:
            return self.image_size_override
        return self.image_brush.image_size


class ItemDescription(Composite):
    """The hover description box, sized by its base size box."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.size_box = self.add_child(Widget())

    def box_size(self) -> Vector2:
        return self.size_box.desired_size