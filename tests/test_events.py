import pytest

from gridstash.events import Signal, TimerManager


def test_emit_calls_handlers_in_order_with_arguments():
    signal = Signal()
    calls = []
    signal.connect(lambda *a: calls.append(("first", *a)))
    signal.connect(lambda *a: calls.append(("second", *a)))
    signal.emit(1, "x")
    assert calls == [("first", 1, "x"), ("second", 1, "x")]


def test_duplicate_connect_is_ignored():
    signal = Signal()
    calls = []

    def handler(value):
        calls.append(value)

    signal.connect(handler)
    signal.connect(handler)
    signal.emit("v")
    assert calls == ["v"]
    assert handler in signal


def test_disconnect_stops_delivery_and_ignores_unknown():
    signal = Signal()
    calls = []

    def handler():
        calls.append("h")

    signal.connect(handler)
    signal.disconnect(handler)
    signal.disconnect(handler)
    signal.emit()
    assert calls == []
    assert handler not in signal


def test_disconnect_during_emit_keeps_iteration_stable():
    signal = Signal()
    calls = []

    def first():
        calls.append("first")
        signal.disconnect(second)

    def second():
        calls.append("second")

    signal.connect(first)
    signal.connect(second)
    signal.emit()
    assert (second in signal) is False
    assert (first in signal) is True
    signal.emit()
    assert calls == ["first", "second", "first"]


def test_timer_fires_after_delay():
    timers = TimerManager()
    fired = []
    timers.set_timer(lambda: fired.append(True), 1.0, "msg")
    timers.advance(0.5)
    assert fired == []
    assert timers.is_active("msg")
    timers.advance(0.5)
    assert fired == [True]
    assert not timers.is_active("msg")


def test_setting_same_handle_restarts_timer():
    timers = TimerManager()
    fired = []
    timers.set_timer(lambda: fired.append("old"), 1.0, "h")
    timers.advance(0.75)
    timers.set_timer(lambda: fired.append("new"), 1.0, "h")
    timers.advance(0.75)
    assert fired == []
    timers.advance(0.25)
    assert fired == ["new"]


def test_clear_timer_prevents_firing():
    timers = TimerManager()
    fired = []
    timers.set_timer(lambda: fired.append(1), 0.5, "h")
    timers.clear_timer("h")
    timers.advance(1.0)
    assert fired == []
    assert not timers.is_active("h")


def test_timers_fire_in_deadline_order():
    timers = TimerManager()
    fired = []
    timers.set_timer(lambda: fired.append("late"), 2.0, "a")
    timers.set_timer(lambda: fired.append("early"), 1.0, "b")
    assert timers.advance(3.0) == len(fired)
    assert fired == ["early", "late"]


def test_callback_can_schedule_within_same_advance():
    timers = TimerManager()
    fired = []

    def first():
        fired.append(("first", timers.now))
        timers.set_timer(lambda: fired.append(("second", timers.now)), 1.0, "next")

    timers.set_timer(first, 1.0, "start")
    fired_count = timers.advance(5.0)
    assert fired_count == 2
    assert not timers.is_active("next")
    assert [name for name, _ in fired] == ["first", "second"]
    assert fired[1][1] - fired[0][1] == pytest.approx(1.0)


def test_non_positive_delay_clears_timer():
    timers = TimerManager()
    timers.set_timer(lambda: None, 1.0, "h")
    timers.set_timer(lambda: None, 0.0, "h")
    assert not timers.is_active("h")


def test_negative_advance_is_rejected():
    with pytest.raises(ValueError):
        TimerManager().advance(-0.1)