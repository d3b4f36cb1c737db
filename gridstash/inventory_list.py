"""The replicated list of entries that backs an inventory."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from gridstash.items import InventoryItem, ItemComponent
from gridstash.tags import GameplayTag


@dataclass(eq=False)
class InventoryEntry:
    item: InventoryItem | None = None
    replication_key: int = 0


class InventoryList:
    """Entries held by an inventory component, with change tracking for replication."""

    def __init__(self, owning_component: Any = None) -> None:
        self.owning_component = owning_component
        self.entries: list[InventoryEntry] = []
        self.array_replication_key = 0

    def _inventory_component(self) -> Any:
        component = self.owning_component
        if component is None:
            return None
        needed = ("on_item_added", "on_item_removed", "add_rep_subobject")
        return component if all(hasattr(component, name) for name in needed) else None

    def _authoritative_owner(self) -> Any:
        if self.owning_component is None:
            raise RuntimeError("inventory list has no owning component")
        owner = self.owning_component.owner
        if owner is None or not owner.has_authority:
            raise RuntimeError("entries can only be added with authority")
        return owner

    def _mark_item_dirty(self, entry: InventoryEntry) -> None:
        entry.replication_key += 1
        self._mark_array_dirty()

    def _mark_array_dirty(self) -> None:
        self.array_replication_key += 1

    def all_items(self) -> list[InventoryItem]:
        return [entry.item for entry in self.entries if entry.item is not None]

    def post_replicated_add(self, added_indices: Iterable[int]) -> None:
        component = self._inventory_component()
        if component is None:
            return
        for index in added_indices:
            component.on_item_added.emit(self.entries[index].item)

    def pre_replicated_remove(self, removed_indices: Iterable[int]) -> None:
        component = self._inventory_component()
        if component is None:
            return
        for index in removed_indices:
            component.on_item_removed.emit(self.entries[index].item)

    def add_entry(self, item_component: ItemComponent) -> InventoryItem | None:
        """Create an item from the component's manifest and add it."""
        owner = self._authoritative_owner()
        component = self._inventory_component()
        if component is None:
            return None
        entry = InventoryEntry(item_component.manifest.manifest(owner))
        self.entries.append(entry)
        component.add_rep_subobject(entry.item)
        self._mark_item_dirty(entry)
        return entry.item

    def add_item(self, item: InventoryItem) -> InventoryItem:
        self._authoritative_owner()
        entry = InventoryEntry(item)
        self.entries.append(entry)
        self._mark_item_dirty(entry)
        return item

    def remove_entry(self, item: InventoryItem) -> None:
        """Remove every entry holding ``item``."""
        kept = [entry for entry in self.entries if entry.item is not item]
        for _ in range(len(self.entries) - len(kept)):
            self._mark_array_dirty()
        self.entries = kept

    def find_first_item_by_tag(self, tag: GameplayTag) -> InventoryItem | None:
        return next(
            (
                entry.item
                for entry in self.entries
                if entry.item is not None and entry.item.manifest.item_tag.matches_exact(tag)
            ),
            None,
        )