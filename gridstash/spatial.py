"""Inventory widgets: the abstract base and the spatial (grid) inventory."""

from __future__ import annotations

from typing import Any, Callable

from gridstash.composite import ItemDescription
from gridstash.events import TimerManager
from gridstash.grid import InventoryGrid
from gridstash.grid_types import ItemCategory, SlotAvailabilityResult, Vector2
from gridstash.interaction import InteractiveInventoryGrid
from gridstash.items import InventoryItem, ItemComponent
from gridstash.utils import get_inventory_component, get_item_category
from gridstash.widget_utils import clamped_widget_position, widget_size
from gridstash.widgets import Visibility, Widget


class InventoryWidgetBase(Widget):
    """An inventory widget that has no room and shows nothing on hover."""

    def has_room_for_item(self, item_component: ItemComponent | None) -> SlotAvailabilityResult:
        return SlotAvailabilityResult()

    def on_item_hovered(self, item: InventoryItem | None) -> None:
        """Hovering an item has no effect here."""

    def on_item_unhovered(self) -> None:
        """Leaving an item has no effect here."""

    def has_hover_item(self) -> bool:
        return False


def _timer_manager_for(owning_player: Any, explicit: TimerManager | None) -> TimerManager:
    if explicit is not None:
        return explicit
    manager = getattr(owning_player, "timer_manager", None)
    return manager if manager is not None else TimerManager()


class SpatialInventoryWidget(InventoryWidgetBase):
    """An inventory shown as a grid, with a delayed description for hovered items."""

    def __init__(
        self,
        *,
        inventory_grid: InventoryGrid | None = None,
        item_description_factory: Callable[..., Any] = ItemDescription,
        item_description_delay: float = 0.5,
        timer_manager: TimerManager | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.canvas_panel = self.add_child(
            Widget(owning_player=self.owning_player, position=self.position, size=self.size)
        )
        if inventory_grid is None:
            inventory_grid = InteractiveInventoryGrid(owning_player=self.owning_player)
        self.inventory_grid = self.canvas_panel.add_child(inventory_grid)
        self.item_description_factory = item_description_factory
        self.item_description_delay = item_description_delay
        self.item_description_widget: Any = None
        self.timer_manager = _timer_manager_for(self.owning_player, timer_manager)
        self._item_description_timer = object()

        component = get_inventory_component(self.owning_player)
        if component is not None:
            self.inventory_grid.bind(component)

    def has_room_for_item(self, item_component: ItemComponent | None) -> SlotAvailabilityResult:
        if get_item_category(item_component) is ItemCategory.EQUIPPABLE:
            return self.inventory_grid.has_room_for_item(item_component)
        return SlotAvailabilityResult()

    def tick(self, mouse_position: Vector2) -> None:
        """Keep the item description next to the cursor, inside the canvas."""
        if self.item_description_widget is None:
            return
        self._place_item_description(self.item_description_widget, self.canvas_panel, mouse_position)

    def on_item_hovered(self, item: InventoryItem) -> None:
        """Hide the description, then fill and show it for ``item`` after the delay."""
        manifest = item.manifest.copy()
        description = self.item_description()
        description.visibility = Visibility.COLLAPSED
        self.timer_manager.clear_timer(self._item_description_timer)

        def reveal() -> None:
            manifest.assimilate_inventory_fragments(description)
            description.visibility = Visibility.HIT_TEST_INVISIBLE

        self.timer_manager.set_timer(reveal, self.item_description_delay, self._item_description_timer)

    def on_item_unhovered(self) -> None:
        self.item_description().visibility = Visibility.COLLAPSED
        self.timer_manager.clear_timer(self._item_description_timer)

    def has_hover_item(self) -> bool:
        return self.inventory_grid.has_hover_item()

    def item_description(self) -> Any:
        """The description widget, created on the canvas on first use."""
        if self.item_description_widget is None:
            self.item_description_widget = self.item_description_factory(owning_player=self.owning_player)
            self.canvas_panel.add_child(self.item_description_widget)
        return self.item_description_widget

    def _place_item_description(self, description: Any, canvas: Widget, mouse_position: Vector2) -> None:
        size = description.box_size()
        description.size = size
        description.position = clamped_widget_position(
            widget_size(canvas), size, mouse_position - Vector2(0.0, size.y)
        )