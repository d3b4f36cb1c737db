"""Helpers that reach a player's inventory from anywhere."""

from __future__ import annotations

from typing import Any

from gridstash.component import InventoryComponent
from gridstash.grid_types import ItemCategory
from gridstash.items import InventoryItem, ItemComponent


def get_inventory_component(player_controller: Any) -> InventoryComponent | None:
    if player_controller is None:
        return None
    return player_controller.find_component(InventoryComponent)


def get_item_category(item_component: ItemComponent | None) -> ItemCategory:
    if item_component is None:
        return ItemCategory.NONE
    return item_component.manifest.category


def _inventory_widget(player_controller: Any) -> Any:
    component = get_inventory_component(player_controller)
    if component is None:
        return None
    return component.inventory_widget


def item_hovered(player_controller: Any, item: InventoryItem | None) -> None:
    """Tell the inventory widget an item is hovered, unless an item is being held."""
    widget = _inventory_widget(player_controller)
    if widget is None or widget.has_hover_item():
        return
    widget.on_item_hovered(item)


def item_unhovered(player_controller: Any) -> None:
    widget = _inventory_widget(player_controller)
    if widget is None:
        return
    widget.on_item_unhovered()