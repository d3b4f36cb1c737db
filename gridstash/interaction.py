"""Mouse interaction on the inventory grid: picking up, placing, stacking, swapping and dragging."""

from __future__ import annotations

from typing import Any, Callable

from gridstash.fragments import GridFragment, ImageFragment, StackableFragment
from gridstash.grid import InventoryGrid
from gridstash.grid_types import INDEX_NONE, IntPoint, Vector2
from gridstash.items import InventoryItem, get_fragment
from gridstash.slots import MouseButton, PointerEvent
from gridstash.tags import GRID_FRAGMENT, IMAGE_FRAGMENT
from gridstash.widget_utils import widget_position, widget_size
from gridstash.widgets import NO_RESOURCE, Brush, Widget

DRAG_THRESHOLD = 5.0


class InteractiveInventoryGrid(InventoryGrid):
    """An inventory grid that reacts to clicks, drags and the cursor position."""

    def __init__(
        self,
        *,
        visible_cursor_factory: Callable[..., Widget] | None = None,
        hidden_cursor_factory: Callable[..., Widget] | None = None,
        viewport_scale: float = 1.0,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.visible_cursor_factory = visible_cursor_factory
        self.hidden_cursor_factory = hidden_cursor_factory
        self.visible_cursor_widget: Widget | None = None
        self.hidden_cursor_widget: Widget | None = None
        self.viewport_scale = viewport_scale

    # --- per-frame and raw mouse input --------------------------------------------

    def tick(self, mouse_position: Vector2) -> None:
        """Follow the cursor over the canvas and refresh the hover highlight."""
        canvas_position = widget_position(self.canvas_panel)
        if self.cursor_exited_canvas(canvas_position, widget_size(self.canvas_panel), mouse_position):
            return
        self.update_tile_parameters(canvas_position, mouse_position)

    def on_mouse_button_up(self, event: PointerEvent) -> bool:
        """Finish a drag by dropping the hovered item; True when the event was handled."""
        if self.is_dragging and self.hovered_item is not None:
            query = self.current_space_query_result
            if query.has_space:
                self.place_at_index(self.item_drop_index)
            elif query.valid_item is not None and self._is_valid_index(query.upper_left_index):
                self._handle_item_placement_on_occupied_slot(query.valid_item, query.upper_left_index)
            self.is_dragging = False
            return True
        self.is_dragging = False
        return False

    def on_mouse_move(self, event: PointerEvent, mouse_position: Vector2) -> bool:
        """Start a drag once the held item moves far enough; the event is never handled."""
        left_down = event.is_button_down(MouseButton.LEFT)
        if left_down and self.hovered_item is not None and not self.is_dragging:
            if self.drag_start_position.is_zero():
                self.drag_start_position = mouse_position
            elif self.drag_start_position.distance(mouse_position) > DRAG_THRESHOLD:
                self.is_dragging = True
        elif not left_down:
            self.drag_start_position = Vector2()
        return False

    # --- clicks -------------------------------------------------------------------

    def _on_grid_slot_clicked(self, grid_index: int, event: PointerEvent) -> None:
        self.on_grid_slot_clicked(grid_index, event)

    def _on_slotted_item_clicked(self, grid_index: int, event: PointerEvent) -> None:
        self.on_slotted_item_clicked(grid_index, event)

    def on_grid_slot_clicked(self, grid_index: int, event: PointerEvent) -> None:
        """Drop the held item at the current drop position, or act on the item in the way."""
        if self.hovered_item is None:
            return
        if not self._is_valid_index(self.item_drop_index):
            return
        query = self.current_space_query_result
        if query.valid_item is not None and self._is_valid_index(query.upper_left_index):
            self.on_slotted_item_clicked(query.upper_left_index, event)
            return
        if self.grid_slots[self.item_drop_index].item is None:
            self.place_at_index(self.item_drop_index)

    def on_slotted_item_clicked(self, grid_index: int, event: PointerEvent) -> None:
        """Pick up, stack onto, or swap with the item placed at ``grid_index``."""
        from gridstash.utils import item_unhovered

        item_unhovered(self.owning_player)

        if not self._is_valid_index(grid_index):
            raise IndexError(f"grid index {grid_index} is out of range")
        clicked_item = self.grid_slots[grid_index].item

        if self.hovered_item is None:
            if event.effecting_button is MouseButton.LEFT and clicked_item is not None:
                self.pick_up_item(clicked_item, grid_index)
            return
        if clicked_item is None:
            return

        if self.is_same_stackable(clicked_item):
            if self._merge_stacks(clicked_item, grid_index):
                return
        self.swap_with_hovered_item(clicked_item, grid_index)

    def _handle_item_placement_on_occupied_slot(self, clicked_item: InventoryItem, grid_index: int) -> None:
        if self._merge_stacks(clicked_item, grid_index):
            return
        self.swap_with_hovered_item(clicked_item, grid_index)

    def _merge_stacks(self, clicked_item: InventoryItem, grid_index: int) -> bool:
        """Combine the held stack with the clicked one; False when a swap should follow."""
        assert self.hovered_item is not None
        stackable_fragment = clicked_item.manifest.fragment(StackableFragment)
        if stackable_fragment is None:
            return False
        clicked_stack_count = self.grid_slots[grid_index].stack_count
        max_stack_size = stackable_fragment.max_stack
        room_in_clicked_slot = max_stack_size - clicked_stack_count
        hovered_stack_count = self.hovered_item.stack_count

        if room_in_clicked_slot == 0 and hovered_stack_count < max_stack_size:
            self._swap_stack_counts(clicked_stack_count, hovered_stack_count, grid_index)
            return True
        if room_in_clicked_slot >= hovered_stack_count:
            self._consume_hovered_item_stacks(clicked_stack_count, hovered_stack_count, grid_index)
            return True
        if room_in_clicked_slot < hovered_stack_count:
            self._fill_in_stack(room_in_clicked_slot, hovered_stack_count - room_in_clicked_slot, grid_index)
            return True
        return room_in_clicked_slot == 0

    def _swap_stack_counts(self, clicked_stack_count: int, hovered_stack_count: int, index: int) -> None:
        assert self.hovered_item is not None
        self.grid_slots[index].stack_count = hovered_stack_count
        self.slotted_items[index].set_stack_count(hovered_stack_count)
        self.hovered_item.update_stack_count(clicked_stack_count)

    def _consume_hovered_item_stacks(self, clicked_stack_count: int, hovered_stack_count: int, index: int) -> None:
        new_count = clicked_stack_count + hovered_stack_count
        grid_slot = self.grid_slots[index]
        grid_slot.stack_count = new_count
        self.slotted_items[index].set_stack_count(new_count)
        self.clear_hovered_item()
        self.show_cursor()

        grid_fragment = grid_slot.item.manifest.fragment(GridFragment) if grid_slot.item is not None else None
        dimensions = grid_fragment.grid_size if grid_fragment else IntPoint(1, 1)
        self.highlight_slots(index, dimensions)

    def _fill_in_stack(self, fill_amount: int, remainder: int, index: int) -> None:
        assert self.hovered_item is not None
        grid_slot = self.grid_slots[index]
        new_count = grid_slot.stack_count + fill_amount
        grid_slot.stack_count = new_count
        self.slotted_items[index].set_stack_count(new_count)
        self.hovered_item.update_stack_count(remainder)

    # --- the held item ------------------------------------------------------------

    def is_same_stackable(self, item: InventoryItem) -> bool:
        """Whether ``item`` is the held item itself, stackable, with the same item tag."""
        if self.hovered_item is None:
            return False
        return (
            item is self.hovered_item.item
            and item.is_stackable()
            and self.hovered_item.item_tag().matches_exact(item.manifest.item_tag)
        )

    def pick_up_item(self, item: InventoryItem, grid_index: int) -> None:
        """Lift ``item`` off the grid at ``grid_index`` onto the cursor."""
        self._assign_hovered_item(item, grid_index, grid_index)
        self.remove_item_from_grid(item, grid_index)

    def _assign_hovered_item(self, item: InventoryItem, grid_index: int, previous_grid_index: int) -> None:
        if self.hovered_item is None:
            self.hovered_item = self.hover_item_factory(owning_player=self.owning_player)
        hovered = self.hovered_item

        grid_fragment = get_fragment(item, GridFragment, GRID_FRAGMENT)
        image_fragment = get_fragment(item, ImageFragment, IMAGE_FRAGMENT)
        if grid_fragment is not None and image_fragment is not None:
            draw_size = self.draw_size(grid_fragment)
            hovered.set_image_brush(Brush(resource=image_fragment.image, image_size=draw_size * self.viewport_scale))
            hovered.grid_dimensions = grid_fragment.grid_size
            hovered.item = item
            hovered.set_stackable(item.is_stackable())
            if self.owning_player is not None:
                self.owning_player.set_mouse_cursor_widget(hovered)

        hovered.previous_index = previous_grid_index
        hovered.update_stack_count(self.grid_slots[grid_index].stack_count if item.is_stackable() else 0)

    def place_at_index(self, index: int) -> None:
        """Put the held item down with its top-left corner at ``index``."""
        if self.hovered_item is None:
            return
        hovered = self.hovered_item
        self._add_item_at_index(hovered.item, index, hovered.stackable, hovered.stack_count)
        self._update_grid_slots(hovered.item, index, hovered.stackable, hovered.stack_count)
        self.clear_hovered_item()

    def clear_hovered_item(self) -> None:
        """Drop the held item from the cursor and restore the normal cursor."""
        if self.hovered_item is None:
            return
        hovered = self.hovered_item
        hovered.item = None
        hovered.previous_index = INDEX_NONE
        hovered.set_stackable(False)
        hovered.update_stack_count(0)
        hovered.set_image_brush(NO_RESOURCE)
        hovered.remove_from_parent()
        self.hovered_item = None
        self.show_cursor()

    def swap_with_hovered_item(self, item: InventoryItem, grid_index: int) -> None:
        """Put the held item at ``grid_index`` and move ``item`` to where the held one came from."""
        if self.hovered_item is None:
            return
        hovered_item = self.hovered_item.item
        hovered_stack_count = self.hovered_item.stack_count
        hovered_stackable = self.hovered_item.stackable
        previous_index = self.hovered_item.previous_index

        clicked_stack_count = self.grid_slots[grid_index].stack_count
        clicked_stackable = item.is_stackable()

        self.remove_item_from_grid(item, grid_index)

        self._add_item_at_index(hovered_item, grid_index, hovered_stackable, hovered_stack_count)
        self._update_grid_slots(hovered_item, grid_index, hovered_stackable, hovered_stack_count)

        if self._is_valid_index(previous_index):
            self._add_item_at_index(item, previous_index, clicked_stackable, clicked_stack_count)
            self._update_grid_slots(item, previous_index, clicked_stackable, clicked_stack_count)

        self.clear_hovered_item()

    # --- cursor -------------------------------------------------------------------

    def _visible_cursor(self) -> Widget | None:
        if self.owning_player is None:
            return None
        if self.visible_cursor_widget is None and self.visible_cursor_factory is not None:
            self.visible_cursor_widget = self.visible_cursor_factory(owning_player=self.owning_player)
        return self.visible_cursor_widget

    def _hidden_cursor(self) -> Widget | None:
        if self.owning_player is None:
            return None
        if self.hidden_cursor_widget is None and self.hidden_cursor_factory is not None:
            self.hidden_cursor_widget = self.hidden_cursor_factory(owning_player=self.owning_player)
        return self.hidden_cursor_widget

    def show_cursor(self) -> None:
        if self.owning_player is None:
            return
        self.owning_player.set_mouse_cursor_widget(self._visible_cursor())

    def hide_cursor(self) -> None:
        if self.owning_player is None:
            return
        self.owning_player.set_mouse_cursor_widget(self._hidden_cursor())

    def _is_valid_index(self, index: int) -> bool:
        return 0 <= index < len(self.grid_slots)