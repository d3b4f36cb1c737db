"""A minimal retained widget tree: visibility, geometry and parenting."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator

from gridstash.grid_types import Vector2


class Visibility(Enum):
    VISIBLE = "Visible"
    COLLAPSED = "Collapsed"
    HIDDEN = "Hidden"
    HIT_TEST_INVISIBLE = "HitTestInvisible"
    SELF_HIT_TEST_INVISIBLE = "SelfHitTestInvisible"


@dataclass(frozen=True)
class Brush:
    """What an image draws: a resource (texture) and the size to draw it at."""

    resource: Any = None
    image_size: Vector2 = Vector2()

    @property
    def has_resource(self) -> bool:
        return self.resource is not None


NO_RESOURCE = Brush()


class Widget:
    """A node in the widget tree with cached viewport geometry."""

    def __init__(
        self,
        *,
        owning_player: Any = None,
        position: Vector2 = Vector2(),
        size: Vector2 = Vector2(),
        desired_size: Vector2 = Vector2(),
        visibility: Visibility = Visibility.VISIBLE,
    ) -> None:
        self.owning_player = owning_player
        self.position = position
        self.size = size
        self.desired_size = desired_size
        self.visibility = visibility
        self.parent: Widget | None = None
        self.children: list[Widget] = []
        self.in_viewport = False

    def add_child(self, child: Widget) -> Widget:
        """Attach ``child`` to this widget, detaching it from any previous parent."""
        if child is self:
            raise ValueError("a widget cannot be its own child")
        child.remove_from_parent()
        child.parent = self
        self.children.append(child)
        return child

    def remove_from_parent(self) -> None:
        if self.parent is not None:
            self.parent.children.remove(self)
            self.parent = None
        self.in_viewport = False

    def add_to_viewport(self) -> None:
        self.in_viewport = True

    def descendants(self) -> Iterator[Widget]:
        """Every widget below this one, depth first, in child order."""
        for child in self.children:
            yield child
            yield from child.descendants()