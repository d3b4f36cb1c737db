"""The player controller that owns the inventory and the heads-up display."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

from gridstash.events import TimerManager
from gridstash.items import Actor
from gridstash.widgets import Widget

logger = logging.getLogger(__name__)

STARTED = "Started"


class PlayerController(Actor):
    """A player's controller: input mapping, primary interaction and the HUD."""

    def __init__(
        self,
        *,
        is_local: bool = True,
        default_mapping_contexts: Iterable[Any] = (),
        primary_interact_action: Any = None,
        hud_widget_factory: Callable[..., Widget | None] | None = None,
        timer_manager: TimerManager | None = None,
        **actor_kwargs: Any,
    ) -> None:
        super().__init__(**actor_kwargs)
        self.is_local_controller = is_local
        self.default_mapping_contexts = list(default_mapping_contexts)
        self.mapping_contexts: list[tuple[Any, int]] = []
        self.primary_interact_action = primary_interact_action
        self.input_bindings: dict[tuple[Any, str], Callable[[], None]] = {}
        self.hud_widget_factory = hud_widget_factory
        self.hud_widget: Widget | None = None
        self.mouse_cursor_widget: Widget | None = None
        self.timer_manager = timer_manager if timer_manager is not None else TimerManager()

    def begin_play(self) -> None:
        """Register the default input mappings (local players only) and build the HUD."""
        if self.is_local_controller:
            for context in self.default_mapping_contexts:
                self.mapping_contexts.append((context, 0))
        self.construct_hud()

    def setup_input(self) -> None:
        """Bind the primary interact action to :meth:`primary_interact`."""
        self.input_bindings[(self.primary_interact_action, STARTED)] = self.primary_interact

    def primary_interact(self) -> None:
        logger.warning("PrimaryInteract")

    def construct_hud(self) -> None:
        """Create the HUD widget and show it, for local players only."""
        if not self.is_local_controller:
            return
        if self.hud_widget_factory is None:
            self.hud_widget = None
            return
        self.hud_widget = self.hud_widget_factory(owning_player=self)
        if self.hud_widget is not None:
            self.hud_widget.add_to_viewport()

    def set_mouse_cursor_widget(self, widget: Widget | None) -> None:
        self.mouse_cursor_widget = widget