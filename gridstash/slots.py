"""Grid slots, the item following the cursor, and items placed in the grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from gridstash.events import Signal
from gridstash.grid_types import INDEX_NONE, IntPoint, Vector2
from gridstash.items import InventoryItem
from gridstash.tags import EMPTY_TAG, GameplayTag
from gridstash.widgets import NO_RESOURCE, Brush, Visibility, Widget


class MouseButton(Enum):
    LEFT = "LeftMouseButton"
    RIGHT = "RightMouseButton"
    MIDDLE = "MiddleMouseButton"


@dataclass(frozen=True)
class PointerEvent:
    """A mouse event: the button that caused it and the buttons held down."""

    effecting_button: MouseButton | None = None
    pressed_buttons: frozenset[MouseButton] = field(default_factory=frozenset)
    screen_position: Vector2 = Vector2()

    def is_button_down(self, button: MouseButton) -> bool:
        return button in self.pressed_buttons


class GridSlotState(Enum):
    UNOCCUPIED = 0
    OCCUPIED = 1
    SELECTED = 2
    INVALID = 3


def _stack_text(count: int) -> tuple[str, Visibility]:
    if count > 0:
        return str(count), Visibility.VISIBLE
    return "", Visibility.COLLAPSED


class GridSlot(Widget):
    """One cell of the inventory grid."""

    def __init__(
        self,
        *,
        index: int = INDEX_NONE,
        brush_unoccupied: Brush = NO_RESOURCE,
        brush_occupied: Brush = NO_RESOURCE,
        brush_selected: Brush = NO_RESOURCE,
        brush_invalid: Brush = NO_RESOURCE,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.index = index
        self.stack_count = 0
        self.upper_left_index = INDEX_NONE
        self.available = True
        self.item: InventoryItem | None = None
        self.state = GridSlotState.UNOCCUPIED
        self._brushes = {
            GridSlotState.UNOCCUPIED: brush_unoccupied,
            GridSlotState.OCCUPIED: brush_occupied,
            GridSlotState.SELECTED: brush_selected,
            GridSlotState.INVALID: brush_invalid,
        }
        self.image_brush = brush_unoccupied
        self.on_slot_clicked = Signal()
        self.on_slot_hovered = Signal()
        self.on_slot_unhovered = Signal()

    def on_mouse_enter(self, event: PointerEvent) -> None:
        self.on_slot_hovered.emit(self.index, event)

    def on_mouse_leave(self, event: PointerEvent) -> None:
        self.on_slot_unhovered.emit(self.index, event)

    def on_mouse_button_down(self, event: PointerEvent) -> bool:
        """Announce the click; the event is always handled."""
        self.on_slot_clicked.emit(self.index, event)
        return True

    def _show(self, state: GridSlotState) -> None:
        self.state = state
        self.image_brush = self._brushes[state]

    def set_unoccupied_texture(self) -> None:
        self._show(GridSlotState.UNOCCUPIED)

    def set_occupied_texture(self) -> None:
        self._show(GridSlotState.OCCUPIED)

    def set_selected_texture(self) -> None:
        self._show(GridSlotState.SELECTED)

    def set_invalid_texture(self) -> None:
        self._show(GridSlotState.INVALID)


class HoverItem(Widget):
    """The picked-up item that follows the cursor."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.image_brush = NO_RESOURCE
        self.stack_text = ""
        self.stack_text_visibility = Visibility.VISIBLE
        self.previous_index = INDEX_NONE
        self.grid_dimensions = IntPoint()
        self.item: InventoryItem | None = None
        self.stackable = False
        self.stack_count = 0

    def set_image_brush(self, brush: Brush) -> None:
        self.image_brush = brush

    def update_stack_count(self, count: int) -> None:
        self.stack_count = count
        if count > 0:
            self.stack_text, self.stack_text_visibility = _stack_text(count)
        else:
            self.stack_text_visibility = Visibility.COLLAPSED

    def item_tag(self) -> GameplayTag:
        if self.item is not None:
            return self.item.manifest.item_tag
        return EMPTY_TAG

    def set_stackable(self, stackable: bool) -> None:
        self.stackable = stackable
        if not stackable:
            self.stack_text_visibility = Visibility.COLLAPSED


class SlottedItem(Widget):
    """An item drawn on the grid canvas at its upper-left slot."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.image_brush = NO_RESOURCE
        self.stack_text = ""
        self.stack_text_visibility = Visibility.VISIBLE
        self.grid_index = INDEX_NONE
        self.grid_dimensions = IntPoint()
        self.item: InventoryItem | None = None
        self.stackable = False
        self.on_slotted_item_clicked = Signal()

    def on_mouse_button_down(self, event: PointerEvent) -> bool:
        self.on_slotted_item_clicked.emit(self.grid_index, event)
        return True

    def on_mouse_enter(self, event: PointerEvent) -> None:
        from gridstash.utils import item_hovered

        item_hovered(self.owning_player, self.item)

    def on_mouse_leave(self, event: PointerEvent) -> None:
        from gridstash.utils import item_unhovered

        item_unhovered(self.owning_player)

    def set_stack_count(self, count: int) -> None:
        if count > 0:
            self.stack_text, self.stack_text_visibility = _stack_text(count)
        else:
            self.stack_text_visibility = Visibility.COLLAPSED

    def set_image(self, brush: Brush) -> None:
        self.image_brush = brush