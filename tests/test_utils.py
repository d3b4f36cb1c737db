from gridstash.component import InventoryComponent
from gridstash.grid_types import ItemCategory
from gridstash.items import InventoryItem, ItemComponent, ItemManifest
from gridstash.player import PlayerController
from gridstash.spatial import InventoryWidgetBase
from gridstash.utils import get_inventory_component, get_item_category, item_hovered, item_unhovered


class _RecordingWidget(InventoryWidgetBase):
    def __init__(self, holding=False, **kwargs):
        super().__init__(**kwargs)
        self.holding = holding
        self.hovered = []
        self.unhovered = 0

    def has_hover_item(self):
        return self.holding

    def on_item_hovered(self, item):
        self.hovered.append(item)

    def on_item_unhovered(self):
        self.unhovered += 1


def _controller(widget=None):
    pc = PlayerController()
    comp = pc.add_component(InventoryComponent())
    comp.inventory_widget = widget
    return pc, comp


def test_get_inventory_component():
    pc, comp = _controller()
    assert get_inventory_component(pc) is comp
    assert get_inventory_component(None) is None
    assert get_inventory_component(PlayerController()) is None


def test_get_item_category():
    assert get_item_category(None) is ItemCategory.NONE
    ic = ItemComponent(ItemManifest(category=ItemCategory.EQUIPPABLE))
    assert get_item_category(ic) is ItemCategory.EQUIPPABLE


def test_item_hovered_forwards_to_widget():
    widget = _RecordingWidget()
    pc, _ = _controller(widget)
    item = InventoryItem()
    item_hovered(pc, item)
    assert widget.hovered == [item]


def test_item_hovered_ignored_while_holding_item():
    widget = _RecordingWidget(holding=True)
    pc, _ = _controller(widget)
    item_hovered(pc, InventoryItem())
    assert widget.hovered == []


def test_item_unhovered_forwards_to_widget():
    widget = _RecordingWidget()
    pc, _ = _controller(widget)
    item_unhovered(pc)
    item_unhovered(None)
    assert widget.unhovered == 1


def test_no_widget_is_harmless():
    pc, comp = _controller()
    item_hovered(pc, InventoryItem())
    item_unhovered(pc)
    assert comp.inventory_widget is None