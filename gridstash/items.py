"""Item definitions, inventory items, actors and the pick-up component."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeVar

from gridstash.composite import CompositeBase
from gridstash.events import Signal
from gridstash.fragments import InventoryItemFragment, ItemFragment
from gridstash.grid_types import ItemCategory
from gridstash.tags import EMPTY_TAG, GameplayTag

F = TypeVar("F", bound=ItemFragment)


@dataclass
class ItemManifest:
    """Everything that defines an item: its fragments, category and item tag."""

    fragments: list[ItemFragment] = field(default_factory=list)
    category: ItemCategory = ItemCategory.NONE
    item_tag: GameplayTag = EMPTY_TAG

    def copy(self) -> ItemManifest:
        """An independent manifest whose fragments can be changed freely."""
        return ItemManifest(
            fragments=[copy.copy(fragment) for fragment in self.fragments],
            category=self.category,
            item_tag=self.item_tag,
        )

    def manifest(self, outer: Any) -> InventoryItem:
        """Create an inventory item owned by ``outer`` from a copy of this manifest."""
        item = InventoryItem(outer=outer)
        item.set_manifest(self)
        return item

    def assimilate_inventory_fragments(self, composite: CompositeBase) -> None:
        """Let every widget-filling fragment fill the leaves of ``composite``."""
        for fragment in self.fragments_of_type(InventoryItemFragment):
            composite.apply_function(fragment.assimilate)

    def fragment(self, fragment_type: type[F]) -> F | None:
        """The first fragment of ``fragment_type`` (or a subtype), if any."""
        return next(iter(self.fragments_of_type(fragment_type)), None)

    def fragment_by_tag(self, fragment_type: type[F], fragment_tag: GameplayTag) -> F | None:
        """The first fragment of ``fragment_type`` whose tag matches exactly."""
        return next(
            (
                fragment
                for fragment in self.fragments_of_type(fragment_type)
                if fragment.fragment_tag.matches_exact(fragment_tag)
            ),
            None,
        )

    def fragments_of_type(self, fragment_type: type[F]) -> list[F]:
        return [fragment for fragment in self.fragments if isinstance(fragment, fragment_type)]


class InventoryItem:
    """An item held in an inventory, with its own copy of a manifest."""

    def __init__(self, manifest: ItemManifest | None = None, *, outer: Any = None) -> None:
        self.outer = outer
        self.manifest = ItemManifest()
        self.total_stack_count = 0
        if manifest is not None:
            self.set_manifest(manifest)

    def set_manifest(self, manifest: ItemManifest) -> None:
        self.manifest = manifest.copy()

    def is_stackable(self) -> bool:
        from gridstash.fragments import StackableFragment

        return self.manifest.fragment(StackableFragment) is not None

    def __repr__(self) -> str:
        return f"InventoryItem({self.manifest.item_tag!s}, stack={self.total_stack_count})"


def get_fragment(item: InventoryItem | None, fragment_type: type[F], fragment_tag: GameplayTag) -> F | None:
    """Look up a tagged fragment on ``item``; no item gives no fragment."""
    if item is None:
        return None
    return item.manifest.fragment_by_tag(fragment_type, fragment_tag)


class NetMode(Enum):
    STANDALONE = "Standalone"
    DEDICATED_SERVER = "DedicatedServer"
    LISTEN_SERVER = "ListenServer"
    CLIENT = "Client"


class Actor:
    """Something in the world that owns components and can be destroyed."""

    def __init__(self, *, has_authority: bool = True, net_mode: NetMode = NetMode.STANDALONE) -> None:
        self.has_authority = has_authority
        self.net_mode = net_mode
        self.components: list[Any] = []
        self.destroyed = False
        self.on_destroyed = Signal()

    def destroy(self) -> None:
        if self.destroyed:
            return
        self.destroyed = True
        self.on_destroyed.emit(self)

    def add_component(self, component: Any) -> Any:
        component.owner = self
        self.components.append(component)
        return component

    def find_component(self, component_type: type) -> Any:
        """The first component that is an instance of ``component_type``, or None."""
        return next((c for c in self.components if isinstance(c, component_type)), None)


class ItemComponent:
    """Makes its owning actor a pick-up carrying an item manifest."""

    def __init__(self, manifest: ItemManifest | None = None) -> None:
        self.manifest = manifest if manifest is not None else ItemManifest()
        self.owner: Actor | None = None
        self.on_picked_up = Signal()

    def picked_up(self) -> None:
        """Announce the pick-up and destroy the owning actor."""
        if self.owner is None:
            raise RuntimeError("item component has no owning actor")
        self.on_picked_up.emit(self)
        self.owner.destroy()