"""The heads-up display and its transient info message."""

from __future__ import annotations

from typing import Any

from gridstash.events import TimerManager
from gridstash.utils import get_inventory_component
from gridstash.widgets import Visibility, Widget

INVENTORY_FULL_MESSAGE = "You can't hold any more items!"


def _timer_manager_for(owning_player: Any, explicit: TimerManager | None) -> TimerManager:
    if explicit is not None:
        return explicit
    manager = getattr(owning_player, "timer_manager", None)
    return manager if manager is not None else TimerManager()


class InfoMessageWidget(Widget):
    """Shows a message that hides itself after ``message_duration`` seconds."""

    def __init__(
        self,
        *,
        message_duration: float = 1.0,
        timer_manager: TimerManager | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.message_duration = message_duration
        self.timer_manager = _timer_manager_for(self.owning_player, timer_manager)
        self.text = ""
        self.message_active = False
        self._message_timer = object()
        self.hide_message()

    def set_message(self, message: str) -> None:
        """Show ``message`` and (re)start the timer that hides it."""
        self.text = message
        if not self.message_active:
            self.show_message()
        self.message_active = True

        def expire() -> None:
            self.hide_message()
            self.message_active = False

        self.timer_manager.set_timer(expire, self.message_duration, self._message_timer)

    def show_message(self) -> None:
        self.visibility = Visibility.VISIBLE

    def hide_message(self) -> None:
        self.visibility = Visibility.COLLAPSED


class HUDWidget(Widget):
    """The on-screen overlay; tells the player when the inventory is full."""

    def __init__(self, *, info_message_widget: InfoMessageWidget | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        if info_message_widget is None:
            info_message_widget = InfoMessageWidget(owning_player=self.owning_player)
        self.info_message_widget: InfoMessageWidget | None = self.add_child(info_message_widget)
        component = get_inventory_component(self.owning_player)
        if component is not None:
            self.bind(component)

    def bind(self, inventory_component: Any) -> None:
        inventory_component.on_inventory_full.connect(self.on_inventory_full)

    def on_inventory_full(self) -> None:
        if self.info_message_widget is None:
            return
        self.info_message_widget.set_message(INVENTORY_FULL_MESSAGE)