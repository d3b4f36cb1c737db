"""The inventory component: decides how picked-up items enter the inventory."""

from __future__ import annotations

from typing import Any, Callable

from gridstash.events import Signal
from gridstash.fragments import StackableFragment
from gridstash.inventory_list import InventoryList
from gridstash.items import InventoryItem, ItemComponent, NetMode
from gridstash.player import PlayerController
from gridstash.tags import EMPTY_TAG


class InventoryComponent:
    """Holds a player's items and announces additions, removals and stack changes."""

    def __init__(
        self,
        *,
        inventory_widget_factory: Callable[..., Any] | None = None,
        ready_for_replication: bool = True,
        use_registered_subobject_list: bool = True,
    ) -> None:
        self.owner: Any = None
        self.inventory_widget_factory = inventory_widget_factory
        self.ready_for_replication = ready_for_replication
        self.use_registered_subobject_list = use_registered_subobject_list
        self.inventory_list = InventoryList(self)
        self.replicated_subobjects: list[Any] = []
        self.owning_player_controller: PlayerController | None = None
        self.inventory_widget: Any = None

        self.on_item_added = Signal()
        self.on_item_removed = Signal()
        self.on_inventory_full = Signal()
        self.on_stack_changed = Signal()

    def try_add_item(self, item_component: ItemComponent) -> None:
        """Add a pick-up as a new item, top up an existing stack, or report a full inventory."""
        if self.inventory_widget is None:
            raise RuntimeError("inventory component has no inventory widget")
        result = self.inventory_widget.has_room_for_item(item_component)
        result.item = self.inventory_list.find_first_item_by_tag(item_component.manifest.item_tag)

        if result.total_room_to_fill == 0:
            self.on_inventory_full.emit()
            return

        if result.item is not None and result.stackable:
            self.on_stack_changed.emit(result)
            self.server_add_stackable_item(item_component, result.total_room_to_fill, result.remainder)
        elif result.total_room_to_fill > 0:
            self.server_add_new_item(item_component, result.total_room_to_fill if result.stackable else 0)

    def server_add_new_item(self, item_component: ItemComponent, stack_count: int) -> InventoryItem | None:
        item = self.inventory_list.add_entry(item_component)
        if item is None:
            return None
        item.total_stack_count = stack_count
        if self.owner is not None and self.owner.net_mode in (NetMode.LISTEN_SERVER, NetMode.STANDALONE):
            self.on_item_added.emit(item)
        item_component.picked_up()
        return item

    def server_add_stackable_item(self, item_component: ItemComponent | None, stack_count: int, remainder: int) -> None:
        item_tag = item_component.manifest.item_tag if item_component is not None else EMPTY_TAG
        item = self.inventory_list.find_first_item_by_tag(item_tag)
        if item is None or item_component is None:
            return
        item.total_stack_count += stack_count

        if remainder == 0:
            item_component.picked_up()
            return
        stackable_fragment = item_component.manifest.fragment(StackableFragment)
        if stackable_fragment is not None:
            stackable_fragment.current_stack = remainder

    def add_rep_subobject(self, subobject: Any) -> None:
        if not (self.use_registered_subobject_list and self.ready_for_replication and subobject is not None):
            return
        if subobject not in self.replicated_subobjects:
            self.replicated_subobjects.append(subobject)

    def begin_play(self) -> None:
        self.construct_inventory()

    def construct_inventory(self) -> None:
        """Create the inventory widget for a locally controlled owner."""
        if not isinstance(self.owner, PlayerController):
            raise RuntimeError("inventory component must be owned by a player controller")
        self.owning_player_controller = self.owner
        if not self.owner.is_local_controller:
            return
        if self.inventory_widget_factory is None:
            return
        self.inventory_widget = self.inventory_widget_factory(owning_player=self.owner)
        if self.inventory_widget is not None:
            self.inventory_widget.add_to_viewport()