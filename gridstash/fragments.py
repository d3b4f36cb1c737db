"""Item fragments: the pieces of data that make up an item definition."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from gridstash.composite import CompositeBase, ImageLeaf
from gridstash.grid_types import IntPoint, Vector2
from gridstash.tags import EMPTY_TAG, GameplayTag


@dataclass
class ItemFragment:
    fragment_tag: GameplayTag = EMPTY_TAG


@dataclass
class InventoryItemFragment(ItemFragment):
    """A fragment that can fill in a matching composite widget."""

    def assimilate(self, composite: CompositeBase) -> None:
        if not self.matches_widget_tag(composite):
            return
        composite.expand()

    def matches_widget_tag(self, composite: CompositeBase) -> bool:
        return composite.fragment_tag.matches_exact(self.fragment_tag)


@dataclass
class GridFragment(ItemFragment):
    grid_size: IntPoint = IntPoint(1, 1)
    grid_padding: float = 2.0


@dataclass
class ImageFragment(InventoryItemFragment):
    image: Any = None
    image_size: Vector2 = Vector2(100.0, 100.0)

    def assimilate(self, composite: CompositeBase) -> None:
        super().assimilate(composite)
        if not self.matches_widget_tag(composite):
            return
        if not isinstance(composite, ImageLeaf):
            return
        composite.set_image(self.image)
        composite.set_box_size(self.image_size)
        composite.set_image_size(self.image_size)


@dataclass
class StackableFragment(ItemFragment):
    max_stack: int = 1
    current_stack: int = 1