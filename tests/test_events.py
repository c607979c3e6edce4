import pytest

from oathquests.events import Signal


def test_emit_calls_callbacks_in_connection_order():
    signal = Signal()
    calls = []
    signal.connect(lambda value: calls.append(("first", value)))
    signal.connect(lambda value: calls.append(("second", value)))
    signal.emit("quest")
    assert calls == [("first", "quest"), ("second", "quest")]


def test_emit_passes_all_arguments():
    signal = Signal()
    received = []
    signal.connect(lambda *args: received.append(args))
    signal.emit(1, "two", None)
    assert received == [(1, "two", None)]


def test_connect_returns_callback_for_decorator_use():
    signal = Signal()
    hits = []

    @signal.connect
    def handler(value):
        hits.append(value)

    signal.emit("x")
    assert hits == ["x"]
    assert handler in signal


def test_disconnect_stops_delivery():
    signal = Signal()
    hits = []
    callback = hits.append
    signal.connect(callback)
    signal.disconnect(callback)
    signal.emit("ignored")
    assert hits == []
    assert len(signal) == 0


def test_disconnect_unknown_callback_raises():
    signal = Signal()
    with pytest.raises(ValueError):
        signal.disconnect(print)


def test_disconnect_during_emit_does_not_skip_others():
    signal = Signal()
    hits = []

    def once(value):
        hits.append(("once", value))
        signal.disconnect(once)

    signal.connect(once)
    signal.connect(lambda value: hits.append(("always", value)))
    signal.emit(1)
    signal.emit(2)
    assert hits == [("once", 1), ("always", 1), ("always", 2)]