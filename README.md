# gridstash

A spatial, grid-based inventory model for games, in plain Python with no
third-party dependencies.

Items are described by an `ItemManifest` (in `gridstash.items`) made of
fragments from `gridstash.fragments`: `GridFragment` (size in tiles and
padding), `ImageFragment` (an image resource and display size) and
`StackableFragment` (maximum and current stack). An `InventoryGrid`
(`gridstash.grid`) lays items out on rows and columns of `GridSlot`s that
track occupancy, stack counts and the upper-left slot of every item.

## What is in the package

- `gridstash.grid.InventoryGrid` — builds its slots when it is created, then
  answers `has_room_for_item(...)` for an `ItemComponent`, an `InventoryItem`
  or a bare `ItemManifest`. Stackable items top up matching stacks before
  claiming empty slots. `add_item`, `add_stacks` and `remove_item_from_grid`
  change what the grid holds; `check_hover_position`,
  `calculate_starting_coordinates`, `determine_hovered_quadrant`,
  `highlight_slots` and friends drive hover highlighting.
- `gridstash.interaction.InteractiveInventoryGrid` — a grid that reacts to
  the mouse: `tick(mouse_position)`, `on_mouse_move`, `on_mouse_button_up`,
  `on_grid_slot_clicked` and `on_slotted_item_clicked` pick items up, place
  them, merge or split stacks, swap items and handle dragging (a drag starts
  after the held item moves more than 5 units).
- `gridstash.inventory_list.InventoryList` — the entries an inventory holds,
  with replication keys bumped on every change.
- `gridstash.component.InventoryComponent` — `try_add_item(item_component)`
  either adds a new entry, tops up an existing stack, or emits
  `on_inventory_full`. It also emits `on_item_added` and `on_stack_changed`.
- `gridstash.spatial.SpatialInventoryWidget` — wraps an inventory grid and
  shows an `ItemDescription` for a hovered item after a delay.
- `gridstash.hud.HUDWidget` and `InfoMessageWidget` — show
  "You can't hold any more items!" when the inventory is full and hide it
  again after `message_duration` seconds.
- `gridstash.player.PlayerController` — an actor owning the components,
  the HUD and the mouse cursor widget.
- `gridstash.events` — `Signal` (multicast handlers) and `TimerManager`
  (one-shot timers that fire only when you call `advance(seconds)`).
- `gridstash.widget_utils` — index/position arithmetic
  (`index_from_position`, `position_from_index`), `iter_2d` over a
  rectangle of cells, `is_within_bounds` and `clamped_widget_position`.
- `gridstash.tags` — `GameplayTag` with exact matching, and the tags
  `GRID_FRAGMENT`, `IMAGE_FRAGMENT`, `STACKABLE_FRAGMENT` and `ZOOM_SHOES`.

## Installation

```
pip install .
```

## Example

```python
from gridstash.fragments import GridFragment, ImageFragment, StackableFragment
from gridstash.grid import InventoryGrid
from gridstash.grid_types import IntPoint, ItemCategory
from gridstash.items import InventoryItem, ItemManifest
from gridstash.tags import GRID_FRAGMENT, IMAGE_FRAGMENT, ZOOM_SHOES

manifest = ItemManifest(
    fragments=[
        GridFragment(fragment_tag=GRID_FRAGMENT, grid_size=IntPoint(1, 1)),
        ImageFragment(fragment_tag=IMAGE_FRAGMENT, image="boots.png"),
        StackableFragment(max_stack=10, current_stack=3),
    ],
    category=ItemCategory.EQUIPPABLE,
    item_tag=ZOOM_SHOES,
)

grid = InventoryGrid(rows=4, columns=6, slot_size=64)

result = grid.has_room_for_item(manifest)
print(result.total_room_to_fill, result.remainder)   # 3 0
print(result.slot_availabilities[0].index)           # 0

item = InventoryItem(manifest)
grid.add_item(item)
print(grid.grid_slots[0].item is item)                # True
print(grid.grid_slots[0].stack_count)                 # 3
```

Fragments are looked up by tag when an item is drawn on the grid, so give
`GridFragment` and `ImageFragment` the `GRID_FRAGMENT` and `IMAGE_FRAGMENT`
tags. The grid only accepts items whose category matches its
`item_category` (equippable by default).

Timers never run on their own:

```python
from gridstash.events import TimerManager

timers = TimerManager()
timers.set_timer(lambda: print("done"), 1.0, "message")
timers.advance(1.0)   # prints "done"
```

## What the package does not do

- It draws nothing. Widgets are plain objects with positions, sizes,
  visibility and brushes; rendering them is up to you.
- It reads no input devices. You pass `PointerEvent`s and mouse positions
  to the grid yourself, and `PlayerController.setup_input` only records the
  binding of the primary interact action.
- It does no networking. Net modes, authority and replication keys are
  tracked as data, but nothing is sent anywhere.
- It stores nothing on disk and has no command-line program.

## Running the tests

```
pip install .[test]
pytest
```