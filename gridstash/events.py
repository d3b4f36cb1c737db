"""Multicast signals and a manually driven timer manager."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import count
from typing import Any, Callable, Hashable


class Signal:
    """A multicast event: every connected handler is called on emit."""

    def __init__(self) -> None:
        self._handlers: list[Callable[..., Any]] = []

    def connect(self, handler: Callable[..., Any]) -> Callable[..., Any]:
        """Bind a handler; binding the same handler twice has no effect."""
        if handler not in self._handlers:
            self._handlers.append(handler)
        return handler

    def disconnect(self, handler: Callable[..., Any]) -> None:
        """Unbind a handler; unknown handlers are ignored."""
        if handler in self._handlers:
            self._handlers.remove(handler)

    def emit(self, *args: Any) -> None:
        """Call every bound handler, in binding order, with the given arguments."""
        for handler in tuple(self._handlers):
            handler(*args)

    def __len__(self) -> int:
        return len(self._handlers)

    def __contains__(self, handler: object) -> bool:
        return handler in self._handlers


@dataclass
class _Timer:
    deadline: float
    sequence: int
    callback: Callable[[], Any]


class TimerManager:
    """One-shot timers keyed by handle, advanced explicitly by the caller."""

    def __init__(self) -> None:
        self._timers: dict[Hashable, _Timer] = {}
        self._now = 0.0
        self._sequence = count()

    @property
    def now(self) -> float:
        return self._now

    def set_timer(self, callback: Callable[[], Any], delay: float, handle: Hashable) -> None:
        """Start (or restart) the timer for ``handle``; a non-positive delay clears it."""
        if delay <= 0:
            self.clear_timer(handle)
            return
        self._timers[handle] = _Timer(self._now + delay, next(self._sequence), callback)

    def clear_timer(self, handle: Hashable) -> None:
        self._timers.pop(handle, None)

    def is_active(self, handle: Hashable) -> bool:
        return handle in self._timers

    def advance(self, seconds: float) -> int:
        """Move time forward, firing due timers in deadline order; return how many fired."""
        if seconds < 0:
            raise ValueError("cannot advance time backwards")
        target = self._now + seconds
        fired = 0
        while True:
            due = [
                (timer.deadline, timer.sequence, handle)
                for handle, timer in self._timers.items()
                if timer.deadline <= target
            ]
            if not due:
                break
            deadline, _, handle = min(due)
            timer = self._timers.pop(handle)
            self._now = deadline
            timer.callback()
            fired += 1
        self._now = target
        return fired