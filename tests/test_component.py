import pytest

from gridstash.component import InventoryComponent
from gridstash.fragments import GridFragment, ImageFragment, StackableFragment
from gridstash.grid_types import ItemCategory
from gridstash.interaction import InteractiveInventoryGrid
from gridstash.items import Actor, ItemComponent, ItemManifest, NetMode
from gridstash.player import PlayerController
from gridstash.spatial import SpatialInventoryWidget
from gridstash.tags import GRID_FRAGMENT, IMAGE_FRAGMENT, STACKABLE_FRAGMENT, ZOOM_SHOES


def _widget_factory(rows, columns):
    def factory(owning_player):
        grid = InteractiveInventoryGrid(rows=rows, columns=columns, owning_player=owning_player)
        return SpatialInventoryWidget(owning_player=owning_player, inventory_grid=grid)

    return factory


def _setup(rows=2, columns=2, **pc_kwargs):
    pc = PlayerController(**pc_kwargs)
    comp = pc.add_component(InventoryComponent(inventory_widget_factory=_widget_factory(rows, columns)))
    comp.begin_play()
    return pc, comp


def _pickup(stack=None):
    fragments = [GridFragment(fragment_tag=GRID_FRAGMENT), ImageFragment(fragment_tag=IMAGE_FRAGMENT)]
    if stack is not None:
        fragments.append(StackableFragment(fragment_tag=STACKABLE_FRAGMENT, max_stack=5, current_stack=stack))
    manifest = ItemManifest(fragments=fragments, category=ItemCategory.EQUIPPABLE, item_tag=ZOOM_SHOES)
    actor = Actor()
    return actor, actor.add_component(ItemComponent(manifest))


def test_adds_new_item_and_destroys_pickup():
    _, comp = _setup()
    actor, ic = _pickup()
    comp.try_add_item(ic)
    items = comp.inventory_list.all_items()
    assert len(items) == 1
    assert items[0].manifest.item_tag == ZOOM_SHOES
    assert actor.destroyed
    assert items[0] in comp.replicated_subobjects
    assert comp.inventory_widget.inventory_grid.grid_slots[0].item is items[0]


def test_full_inventory_is_reported():
    _, comp = _setup(rows=1, columns=1)
    comp.try_add_item(_pickup()[1])
    full = []
    comp.on_inventory_full.connect(lambda: full.append(True))
    actor, ic = _pickup()
    comp.try_add_item(ic)
    assert full == [True]
    assert len(comp.inventory_list.all_items()) == 1
    assert not actor.destroyed


def test_stackable_pickup_tops_up_existing_item():
    _, comp = _setup()
    comp.try_add_item(_pickup(stack=3)[1])
    changes = []
    comp.on_stack_changed.connect(changes.append)
    actor, ic = _pickup(stack=3)
    comp.try_add_item(ic)
    items = comp.inventory_list.all_items()
    assert len(items) == 1
    assert items[0].total_stack_count == 6
    assert len(changes) == 1 and changes[0].item is items[0]
    assert actor.destroyed


def test_remainder_stays_on_pickup():
    _, comp = _setup(rows=1, columns=1)
    comp.try_add_item(_pickup(stack=3)[1])
    actor, ic = _pickup(stack=3)
    comp.try_add_item(ic)
    assert not actor.destroyed
    assert ic.manifest.fragment(StackableFragment).current_stack == 1


def test_client_does_not_broadcast_item_added():
    _, comp = _setup(net_mode=NetMode.CLIENT)
    added = []
    comp.on_item_added.connect(added.append)
    item = comp.server_add_new_item(_pickup()[1], 0)
    assert added == []
    assert comp.inventory_list.all_items() == [item]


def test_stackable_add_without_existing_item_does_nothing():
    _, comp = _setup()
    actor, ic = _pickup(stack=2)
    comp.server_add_stackable_item(ic, 2, 0)
    assert comp.inventory_list.all_items() == []
    assert not actor.destroyed


def test_try_add_without_widget_raises():
    pc = PlayerController()
    comp = pc.add_component(InventoryComponent())
    with pytest.raises(RuntimeError):
        comp.try_add_item(_pickup()[1])


def test_construct_inventory_requires_player_controller():
    comp = Actor().add_component(InventoryComponent())
    with pytest.raises(RuntimeError):
        comp.construct_inventory()


def test_remote_controller_gets_no_widget():
    _, comp = _setup(is_local=False)
    assert comp.inventory_widget is None


def test_add_rep_subobject_respects_readiness():
    comp = InventoryComponent(ready_for_replication=False)
    comp.add_rep_subobject(object())
    ready = InventoryComponent()
    ready.add_rep_subobject(None)
    marker = object()
    ready.add_rep_subobject(marker)
    ready.add_rep_subobject(marker)
    assert comp.replicated_subobjects == []
    assert ready.replicated_subobjects == [marker]