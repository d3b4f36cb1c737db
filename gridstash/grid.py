"""The spatial inventory grid: slot layout, room queries, placement and highlighting."""

from __future__ import annotations

import math
from typing import Any, Callable

from gridstash.fragments import GridFragment, ImageFragment, StackableFragment
from gridstash.grid_types import (
    INDEX_NONE,
    IntPoint,
    ItemCategory,
    SlotAvailability,
    SlotAvailabilityResult,
    SpaceQueryResult,
    TileParameters,
    TileQuadrant,
    Vector2,
)
from gridstash.items import InventoryItem, ItemComponent, ItemManifest, get_fragment
from gridstash.slots import GridSlot, GridSlotState, HoverItem, PointerEvent, SlottedItem
from gridstash.tags import GRID_FRAGMENT, IMAGE_FRAGMENT, GameplayTag
from gridstash.widget_utils import (
    index_from_position,
    is_within_bounds,
    iter_2d,
    position_from_index,
)
from gridstash.widgets import Brush, Widget


class InventoryGrid(Widget):
    """A rows-by-columns grid of slots holding items of one category."""

    def __init__(
        self,
        *,
        rows: int = 1,
        columns: int = 1,
        slot_size: float = 100.0,
        item_category: ItemCategory = ItemCategory.EQUIPPABLE,
        slot_factory: Callable[..., GridSlot] = GridSlot,
        slotted_item_factory: Callable[..., SlottedItem] = SlottedItem,
        hover_item_factory: Callable[..., HoverItem] = HoverItem,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        if rows < 1 or columns < 1:
            raise ValueError("a grid needs at least one row and one column")
        self.rows = rows
        self.columns = columns
        self.slot_size = float(slot_size)
        self.item_category = item_category
        self.slot_factory = slot_factory
        self.slotted_item_factory = slotted_item_factory
        self.hover_item_factory = hover_item_factory

        self.canvas_panel = self.add_child(
            Widget(
                owning_player=self.owning_player,
                position=self.position,
                size=Vector2(columns * self.slot_size, rows * self.slot_size),
            )
        )
        self.grid_slots: list[GridSlot] = []
        self.slotted_items: dict[int, SlottedItem] = {}
        self.hovered_item: HoverItem | None = None
        self.inventory_component: Any = None

        self.tile_parameters = TileParameters()
        self.last_tile_parameters = TileParameters()
        self.item_drop_index = INDEX_NONE
        self.current_space_query_result = SpaceQueryResult()
        self.mouse_within_canvas = False
        self.last_mouse_within_canvas = False
        self.last_highlighted_index = INDEX_NONE
        self.last_highlighted_dimensions = IntPoint()

        self.is_dragging = False
        self.drag_start_position = Vector2()

        self.construct_grid()

    # --- construction and binding -------------------------------------------------

    def construct_grid(self) -> None:
        """Create one slot per cell, laid out row by row on the canvas."""
        for old_slot in self.grid_slots:
            old_slot.remove_from_parent()
        self.grid_slots = []
        for row in range(self.rows):
            for column in range(self.columns):
                slot_position = IntPoint(column, row)
                grid_slot = self.slot_factory(
                    index=index_from_position(slot_position, self.columns),
                    owning_player=self.owning_player,
                    size=Vector2(self.slot_size, self.slot_size),
                    position=slot_position * self.slot_size,
                )
                self.canvas_panel.add_child(grid_slot)
                self.grid_slots.append(grid_slot)
                grid_slot.on_slot_clicked.connect(self._on_grid_slot_clicked)
                grid_slot.on_slot_hovered.connect(self.on_grid_slot_hovered)
                grid_slot.on_slot_unhovered.connect(self.on_grid_slot_unhovered)

    def bind(self, inventory_component: Any) -> None:
        """Follow an inventory component's item-added and stack-changed events."""
        self.inventory_component = inventory_component
        inventory_component.on_item_added.connect(self.add_item)
        inventory_component.on_stack_changed.connect(self.add_stacks)

    def _on_grid_slot_clicked(self, grid_index: int, event: PointerEvent) -> None:
        """Clicks on empty slots; the plain grid has no click interaction."""

    def _on_slotted_item_clicked(self, grid_index: int, event: PointerEvent) -> None:
        """Clicks on placed items; the plain grid has no click interaction."""

    # --- room queries -------------------------------------------------------------

    def has_room_for_item(self, source: ItemComponent | InventoryItem | ItemManifest) -> SlotAvailabilityResult:
        """Work out where an item, a pick-up or a bare manifest would go."""
        if isinstance(source, (ItemComponent, InventoryItem)):
            manifest = source.manifest
        elif isinstance(source, ItemManifest):
            manifest = source
        else:
            raise TypeError(f"cannot look for room for {type(source).__name__}")
        return self._has_room_for_manifest(manifest)

    def _has_room_for_manifest(self, manifest: ItemManifest) -> SlotAvailabilityResult:
        result = SlotAvailabilityResult()
        stackable_fragment = manifest.fragment(StackableFragment)
        result.stackable = stackable_fragment is not None

        amount_to_fill = stackable_fragment.current_stack if stackable_fragment else 1
        max_stack_size = stackable_fragment.max_stack if stackable_fragment else 1
        dimensions = self._dimensions(manifest)

        checked_indices: set[int] = set()
        for grid_slot in self.grid_slots:
            if amount_to_fill <= 0:
                break
            if grid_slot.index in checked_indices:
                continue
            if not self.is_in_grid_bounds(grid_slot.index, dimensions):
                continue

            claimed: set[int] = set()
            if not self._has_room_at_index(
                grid_slot, dimensions, checked_indices, claimed, manifest.item_tag, max_stack_size
            ):
                continue

            fill_amount = self._fill_amount_for_slot(result.stackable, max_stack_size, amount_to_fill, grid_slot)
            if fill_amount == 0:
                continue

            checked_indices |= claimed
            result.total_room_to_fill += fill_amount
            has_item = grid_slot.item is not None
            result.slot_availabilities.append(
                SlotAvailability(
                    index=grid_slot.upper_left_index if has_item else grid_slot.index,
                    amount_to_fill=fill_amount if result.stackable else 0,
                    item_at_index=has_item,
                )
            )

            amount_to_fill -= fill_amount
            result.remainder = amount_to_fill
            if amount_to_fill == 0:
                return result
        return result

    def _has_room_at_index(
        self,
        grid_slot: GridSlot,
        dimensions: IntPoint,
        checked_indices: set[int],
        claimed: set[int],
        item_tag: GameplayTag,
        max_stack_size: int,
    ) -> bool:
        has_room = True
        for sub_slot in iter_2d(self.grid_slots, grid_slot.index, dimensions, self.columns):
            if self._check_slot_constraints(grid_slot, sub_slot, checked_indices, claimed, item_tag, max_stack_size):
                claimed.add(sub_slot.index)
            else:
                has_room = False
        return has_room

    def _check_slot_constraints(
        self,
        grid_slot: GridSlot,
        sub_slot: GridSlot,
        checked_indices: set[int],
        claimed: set[int],
        item_tag: GameplayTag,
        max_stack_size: int,
    ) -> bool:
        if sub_slot.index in checked_indices:
            return False
        if sub_slot.item is None:
            claimed.add(sub_slot.index)
            return True
        if sub_slot.upper_left_index != grid_slot.index:
            return False
        sub_item = sub_slot.item
        if not sub_item.is_stackable():
            return False
        if not sub_item.manifest.item_tag.matches_exact(item_tag):
            return False
        return grid_slot.stack_count < max_stack_size

    def _fill_amount_for_slot(
        self, stackable: bool, max_stack_size: int, amount_to_fill: int, grid_slot: GridSlot
    ) -> int:
        room_in_slot = max_stack_size - self._stack_amount(grid_slot)
        return min(amount_to_fill, room_in_slot) if stackable else 1

    def _stack_amount(self, grid_slot: GridSlot) -> int:
        if grid_slot.upper_left_index != INDEX_NONE:
            return self.grid_slots[grid_slot.upper_left_index].stack_count
        return grid_slot.stack_count

    @staticmethod
    def _dimensions(manifest: ItemManifest) -> IntPoint:
        grid_fragment = manifest.fragment(GridFragment)
        return grid_fragment.grid_size if grid_fragment else IntPoint(1, 1)

    def is_in_grid_bounds(self, starting_index: int, dimensions: IntPoint) -> bool:
        """Whether a ``dimensions`` item could start at ``starting_index``.

        The start must be a slot; the item then fits if either its last column or
        its last row stays within the grid.
        """
        if starting_index < 0 or starting_index >= len(self.grid_slots):
            return False
        end_column = starting_index % self.columns + dimensions.x
        end_row = starting_index // self.columns + dimensions.y
        return end_column <= self.columns or end_row <= self.rows

    # --- placing items ------------------------------------------------------------

    def matches_category(self, item: InventoryItem | None) -> bool:
        return item is not None and item.manifest.category == self.item_category

    def has_hover_item(self) -> bool:
        return self.hovered_item is not None

    def add_item(self, item: InventoryItem) -> None:
        """Place a newly added item wherever there is room for it."""
        if not self.matches_category(item):
            return
        result = self.has_room_for_item(item)
        for availability in result.slot_availabilities:
            self._add_item_at_index(item, availability.index, result.stackable, availability.amount_to_fill)
            self._update_grid_slots(item, availability.index, result.stackable, availability.amount_to_fill)

    def add_stacks(self, result: SlotAvailabilityResult) -> None:
        """Apply a stack change: top up existing stacks, place new ones."""
        if not self.matches_category(result.item):
            return
        for availability in result.slot_availabilities:
            if availability.item_at_index:
                grid_slot = self.grid_slots[availability.index]
                slotted_item = self.slotted_items[availability.index]
                new_count = grid_slot.stack_count + availability.amount_to_fill
                slotted_item.set_stack_count(new_count)
                grid_slot.stack_count = new_count
            else:
                self._add_item_at_index(result.item, availability.index, result.stackable, availability.amount_to_fill)
                self._update_grid_slots(result.item, availability.index, result.stackable, availability.amount_to_fill)

    def _create_slotted_item(
        self,
        item: InventoryItem,
        index: int,
        stackable: bool,
        stack_amount: int,
        grid_fragment: GridFragment,
        image_fragment: ImageFragment,
    ) -> SlottedItem:
        slotted_item = self.slotted_item_factory(owning_player=self.owning_player)
        slotted_item.item = item
        slotted_item.set_image(Brush(resource=image_fragment.image, image_size=self.draw_size(grid_fragment)))
        slotted_item.grid_index = index
        slotted_item.stackable = stackable
        slotted_item.set_stack_count(stack_amount if stackable else 0)
        slotted_item.on_slotted_item_clicked.connect(self._on_slotted_item_clicked)
        return slotted_item

    def _add_item_at_index(self, item: InventoryItem, index: int, stackable: bool, stack_amount: int) -> None:
        grid_fragment = get_fragment(item, GridFragment, GRID_FRAGMENT)
        image_fragment = get_fragment(item, ImageFragment, IMAGE_FRAGMENT)
        if grid_fragment is None or image_fragment is None:
            return
        slotted_item = self._create_slotted_item(item, index, stackable, stack_amount, grid_fragment, image_fragment)
        self._add_slotted_item_to_canvas(index, grid_fragment, slotted_item)
        self.slotted_items[index] = slotted_item

    def _add_slotted_item_to_canvas(self, index: int, grid_fragment: GridFragment, slotted_item: SlottedItem) -> None:
        self.canvas_panel.add_child(slotted_item)
        slotted_item.size = self.draw_size(grid_fragment)
        draw_position = position_from_index(index, self.columns).to_vector() * self.slot_size
        padding = float(grid_fragment.grid_padding)
        slotted_item.position = draw_position + Vector2(padding, padding)

    def _update_grid_slots(self, item: InventoryItem, index: int, stackable: bool, stack_amount: int) -> None:
        if not 0 <= index < len(self.grid_slots):
            raise IndexError(f"grid index {index} is out of range")
        if stackable:
            self.grid_slots[index].stack_count = stack_amount
        grid_fragment = get_fragment(item, GridFragment, GRID_FRAGMENT)
        if grid_fragment is None:
            return
        for grid_slot in iter_2d(self.grid_slots, index, grid_fragment.grid_size, self.columns):
            grid_slot.item = item
            grid_slot.upper_left_index = index
            grid_slot.set_occupied_texture()
            grid_slot.available = False

    def remove_item_from_grid(self, item: InventoryItem, grid_index: int) -> None:
        """Free the slots ``item`` covers from ``grid_index`` and drop its drawing."""
        grid_fragment = get_fragment(item, GridFragment, GRID_FRAGMENT)
        if grid_fragment is None:
            return
        for grid_slot in iter_2d(self.grid_slots, grid_index, grid_fragment.grid_size, self.columns):
            grid_slot.item = None
            grid_slot.upper_left_index = INDEX_NONE
            grid_slot.set_unoccupied_texture()
            grid_slot.available = True
            grid_slot.stack_count = 0
        slotted_item = self.slotted_items.pop(grid_index, None)
        if slotted_item is not None:
            slotted_item.remove_from_parent()

    def draw_size(self, grid_fragment: GridFragment) -> Vector2:
        """Drawn size of an item: its grid size times a slot less padding on each side."""
        icon_tile_width = float(self.slot_size - grid_fragment.grid_padding * 2)
        return grid_fragment.grid_size.to_vector() * icon_tile_width

    # --- hover geometry -----------------------------------------------------------

    def calculate_starting_coordinates(
        self, coordinates: IntPoint, dimensions: IntPoint, quadrant: TileQuadrant
    ) -> IntPoint:
        """Top-left cell for an item of ``dimensions`` centred on the hovered quadrant."""
        even_width = 1 if dimensions.x % 2 == 0 else 0
        even_height = 1 if dimensions.y % 2 == 0 else 0
        base_x = coordinates.x - math.floor(0.5 * dimensions.x)
        base_y = coordinates.y - math.floor(0.5 * dimensions.y)
        if quadrant is TileQuadrant.TOP_LEFT:
            return IntPoint(base_x, base_y)
        if quadrant is TileQuadrant.TOP_RIGHT:
            return IntPoint(base_x + even_width, base_y)
        if quadrant is TileQuadrant.BOTTOM_LEFT:
            return IntPoint(base_x, base_y + even_height)
        if quadrant is TileQuadrant.BOTTOM_RIGHT:
            return IntPoint(base_x + even_width, base_y + even_height)
        return IntPoint(-1, -1)

    def calculate_hovered_coordinates(self, canvas_position: Vector2, mouse_position: Vector2) -> IntPoint:
        return IntPoint(
            int(math.floor((mouse_position.x - canvas_position.x) / self.slot_size)),
            int(math.floor((mouse_position.y - canvas_position.y) / self.slot_size)),
        )

    def determine_hovered_quadrant(self, canvas_position: Vector2, mouse_position: Vector2) -> TileQuadrant:
        local_x = math.fmod(mouse_position.x - canvas_position.x, self.slot_size)
        local_y = math.fmod(mouse_position.y - canvas_position.y, self.slot_size)
        half = self.slot_size / 2
        if local_x < half:
            return TileQuadrant.TOP_LEFT if local_y < half else TileQuadrant.BOTTOM_LEFT
        return TileQuadrant.TOP_RIGHT if local_y < half else TileQuadrant.BOTTOM_RIGHT

    def check_hover_position(self, position: IntPoint, dimensions: IntPoint) -> SpaceQueryResult:
        """Whether an item of ``dimensions`` fits at ``position``, and what single item is in the way."""
        result = SpaceQueryResult()
        start_index = index_from_position(position, self.columns)
        if not self.is_in_grid_bounds(start_index, dimensions):
            return result

        result.has_space = True
        occupied_upper_left: set[int] = set()
        for grid_slot in iter_2d(self.grid_slots, start_index, dimensions, self.columns):
            if grid_slot.item is not None:
                occupied_upper_left.add(grid_slot.upper_left_index)
                result.has_space = False

        if len(occupied_upper_left) == 1:
            (upper_left,) = occupied_upper_left
            result.valid_item = self.grid_slots[upper_left].item
            result.upper_left_index = upper_left
        return result

    def cursor_exited_canvas(self, boundary_position: Vector2, boundary_size: Vector2, location: Vector2) -> bool:
        """Track the cursor; on leaving the canvas clear the highlight and return True."""
        self.last_mouse_within_canvas = self.mouse_within_canvas
        self.mouse_within_canvas = is_within_bounds(boundary_position, boundary_size, location)
        if not self.mouse_within_canvas and self.last_mouse_within_canvas:
            self.unhighlight_slots(self.last_highlighted_index, self.last_highlighted_dimensions)
            return True
        return False

    def update_tile_parameters(self, canvas_position: Vector2, mouse_position: Vector2) -> None:
        if not self.mouse_within_canvas:
            return
        coordinates = self.calculate_hovered_coordinates(canvas_position, mouse_position)
        self.last_tile_parameters = self.tile_parameters
        self.tile_parameters = TileParameters(
            tile_coordinates=coordinates,
            tile_index=index_from_position(coordinates, self.columns),
            quadrant=self.determine_hovered_quadrant(canvas_position, mouse_position),
        )
        self.on_tile_parameters_changed(self.tile_parameters)

    def on_tile_parameters_changed(self, tile_parameters: TileParameters) -> None:
        """Recompute the drop position of the hovered item and highlight accordingly."""
        if self.hovered_item is None:
            return
        dimensions = self.hovered_item.grid_dimensions
        starting = self.calculate_starting_coordinates(
            tile_parameters.tile_coordinates, dimensions, tile_parameters.quadrant
        )
        self.item_drop_index = index_from_position(starting, self.columns)
        self.current_space_query_result = self.check_hover_position(starting, dimensions)

        if self.current_space_query_result.has_space:
            self.highlight_slots(self.item_drop_index, dimensions)
            return
        self.unhighlight_slots(self.item_drop_index, self.last_highlighted_dimensions)

        query = self.current_space_query_result
        if query.valid_item is not None and 0 <= query.upper_left_index < len(self.grid_slots):
            grid_fragment = get_fragment(query.valid_item, GridFragment, GRID_FRAGMENT)
            if grid_fragment is None:
                return
            self.change_hover_type(query.upper_left_index, grid_fragment.grid_size, GridSlotState.INVALID)

    # --- highlighting -------------------------------------------------------------

    def highlight_slots(self, index: int, dimensions: IntPoint) -> None:
        if not self.mouse_within_canvas:
            return
        self.unhighlight_slots(self.last_highlighted_index, self.last_highlighted_dimensions)
        for grid_slot in iter_2d(self.grid_slots, index, dimensions, self.columns):
            grid_slot.set_occupied_texture()
        self.last_highlighted_index = index
        self.last_highlighted_dimensions = dimensions

    def unhighlight_slots(self, index: int, dimensions: IntPoint) -> None:
        for grid_slot in iter_2d(self.grid_slots, index, dimensions, self.columns):
            if grid_slot.available:
                grid_slot.set_unoccupied_texture()
            else:
                grid_slot.set_occupied_texture()

    def change_hover_type(self, index: int, dimensions: IntPoint, state: GridSlotState) -> None:
        self.unhighlight_slots(self.last_highlighted_index, self.last_highlighted_dimensions)
        show = {
            GridSlotState.OCCUPIED: GridSlot.set_occupied_texture,
            GridSlotState.SELECTED: GridSlot.set_selected_texture,
            GridSlotState.INVALID: GridSlot.set_invalid_texture,
            GridSlotState.UNOCCUPIED: GridSlot.set_unoccupied_texture,
        }[state]
        for grid_slot in iter_2d(self.grid_slots, index, dimensions, self.columns):
            show(grid_slot)
        self.last_highlighted_index = index
        self.last_highlighted_dimensions = dimensions

    def on_grid_slot_hovered(self, grid_index: int, event: PointerEvent) -> None:
        if self.hovered_item is not None:
            return
        grid_slot = self.grid_slots[grid_index]
        if grid_slot.available:
            grid_slot.set_occupied_texture()

    def on_grid_slot_unhovered(self, grid_index: int, event: PointerEvent) -> None:
        if self.hovered_item is not None:
            return
        grid_slot = self.grid_slots[grid_index]
        if grid_slot.available:
            grid_slot.set_unoccupied_texture()