import pytest

from eaglecore.events import (
    DEFAULT_PRIORITY,
    ConsumableEventStream,
    EventBus,
    EventListener,
    ImmediateEvent,
)
from eaglecore.input_events import OnKey, OnMouseMove


def _recorder(log, name, consume=False):
    def callback(event):
        log.append((name, event))
        return consume

    return callback


def test_default_priority_value():
    assert DEFAULT_PRIORITY == 0x7FFFFFFF
    bus = EventBus()
    listener = EventListener()
    listener.attach(bus)
    log = []
    bus.subscribe(OnKey, _recorder(log, "explicit"), -1, DEFAULT_PRIORITY - 1)
    listener.subscribe(OnKey, _recorder(log, "default"))
    bus.emit(OnKey(1, 1, 0))
    assert [name for name, _ in log] == ["default", "explicit"]


def test_stream_calls_in_priority_order():
    stream = ConsumableEventStream()
    log = []
    stream.subscribe(_recorder(log, "low"), 1, 1)
    stream.subscribe(_recorder(log, "high"), 2, 10)
    stream.emit("e")
    assert [name for name, _ in log] == ["high", "low"]
    assert stream.listener_ids == [2, 1]


def test_stream_consumed_event_stops():
    stream = ConsumableEventStream()
    log = []
    stream.subscribe(_recorder(log, "first", consume=True), 1, 10)
    stream.subscribe(_recorder(log, "second"), 2, 1)
    stream.emit("e")
    assert log == [("first", "e")]


def test_stream_duplicate_subscribe_raises():
    stream = ConsumableEventStream()
    stream.subscribe(lambda e: False, 1, 0)
    with pytest.raises(ValueError):
        stream.subscribe(lambda e: False, 1, 0)


def test_stream_unsubscribe_unknown_is_ignored():
    stream = ConsumableEventStream()
    stream.subscribe(lambda e: False, 1, 0)
    stream.unsubscribe(99)
    assert stream.listener_ids == [1]


def test_stream_subscribe_during_emit_is_deferred():
    stream = ConsumableEventStream()
    log = []

    def adder(event):
        log.append("adder")
        if len(stream) == 1:
            stream.subscribe(_recorder(log, "late"), 2, 100)
        return False

    stream.subscribe(adder, 1, 0)
    stream.emit("a")
    assert log == ["adder"]
    assert stream.listener_ids == [2, 1]
    stream.emit("b")
    assert log == ["adder", ("late", "b"), "adder"]


def test_stream_unsubscribe_during_emit_is_deferred():
    stream = ConsumableEventStream()
    log = []

    def remover(event):
        stream.unsubscribe(2)
        return False

    stream.subscribe(remover, 1, 10)
    stream.subscribe(_recorder(log, "other"), 2, 1)
    stream.emit("e")
    assert log == [("other", "e")]
    assert stream.listener_ids == [1]


def test_stream_reentrant_emit_raises():
    stream = ConsumableEventStream()
    stream.subscribe(lambda e: stream.emit(e), 1, 0)
    with pytest.raises(RuntimeError):
        stream.emit("e")


def test_bus_routes_by_type():
    bus = EventBus()
    keys, moves = [], []
    bus.subscribe(OnKey, lambda e: keys.append(e), 1)
    bus.subscribe(OnMouseMove, lambda e: moves.append(e), 1)
    bus.emit(OnKey(65, 1, 0))
    assert keys == [OnKey(65, 1, 0)]
    assert moves == []


def test_bus_emit_without_subscribers_is_silent():
    bus = EventBus()
    bus.emit(OnKey(65, 1, 0))
    received = []
    bus.subscribe(OnKey, received.append, 1)
    bus.emit(OnKey(66, 1, 0))
    assert received == [OnKey(66, 1, 0)]


def test_bus_unsubscribe_and_unsubscribe_all():
    bus = EventBus()
    got = []
    bus.subscribe(OnKey, got.append, 1)
    bus.subscribe(OnMouseMove, got.append, 1)
    bus.unsubscribe(OnKey, 1)
    bus.emit(OnKey(1, 1, 0))
    assert got == []
    bus.emit(OnMouseMove(1.0, 2.0))
    assert got == [OnMouseMove(1.0, 2.0)]
    bus.unsubscribe_all(1)
    bus.emit(OnMouseMove(3.0, 4.0))
    assert got == [OnMouseMove(1.0, 2.0)]


def test_immediate_event_calls_all_in_order():
    event = ImmediateEvent()
    log = []
    event.subscribe(lambda a, b: log.append(("one", a, b)), 1)
    event.subscribe(lambda a, b: log.append(("two", a, b)), 2)
    event(1, 2)
    assert log == [("one", 1, 2), ("two", 1, 2)]


def test_immediate_event_errors():
    event = ImmediateEvent()
    event.subscribe(lambda: None, 1)
    with pytest.raises(ValueError):
        event.subscribe(lambda: None, 1)
    with pytest.raises(ValueError):
        event.unsubscribe(2)


def test_immediate_event_unsubscribe_removes_matching_callback():
    event = ImmediateEvent()
    log = []
    event.subscribe(lambda: log.append("one"), 1)
    event.subscribe(lambda: log.append("two"), 2)
    event.unsubscribe(1)
    event.emit()
    assert log == ["two"]
    assert len(event) == 1


def test_immediate_event_subscribe_while_emitting_raises():
    event = ImmediateEvent()
    event.subscribe(lambda: event.subscribe(lambda: None, 5), 1)
    with pytest.raises(RuntimeError):
        event.emit()


def test_listener_ids_are_sequential_and_unique():
    first = EventListener()
    second = EventListener()
    third = EventListener()
    ids = [first.id, second.id, third.id]
    assert len(set(ids)) == 3
    assert second.id == first.id + 1
    assert third.id == second.id + 1


def test_listener_receive_routes_to_receiver():
    class Receiver:
        def __init__(self):
            self.events = []

        def receive(self, event):
            self.events.append(event)
            return False

    bus = EventBus()
    listener = EventListener()
    listener.attach(bus)
    receiver = Receiver()
    listener.receive(OnKey, receiver)
    bus.emit(OnKey(1, 1, 0))
    assert receiver.events == [OnKey(1, 1, 0)]


def test_listener_detach_drops_subscriptions():
    bus = EventBus()
    listener = EventListener()
    listener.attach(bus)
    got = []
    listener.subscribe(OnKey, got.append)
    listener.detach()
    bus.emit(OnKey(1, 1, 0))
    assert got == []
    assert listener.bus is None


def test_listener_attach_to_new_bus_detaches_old():
    old, new = EventBus(), EventBus()
    listener = EventListener()
    listener.attach(old)
    got = []
    listener.subscribe(OnKey, got.append)
    listener.attach(new)
    old.emit(OnKey(1, 1, 0))
    assert got == []
    assert listener.bus is new


def test_listener_unsubscribe_one_type():
    bus = EventBus()
    listener = EventListener()
    listener.attach(bus)
    got = []
    listener.subscribe(OnKey, got.append)
    listener.unsubscribe(OnKey)
    bus.emit(OnKey(1, 1, 0))
    assert got == []


def test_listener_without_bus_raises():
    listener = EventListener()
    with pytest.raises(RuntimeError):
        listener.subscribe(OnKey, lambda e: False)


def test_listener_destroy_leaves_immediate_events():
    event = ImmediateEvent()
    log = []
    with EventListener() as listener:
        listener.subscribe_immediate(event, lambda: log.append("hit"))
        event.emit()
    event.emit()
    assert log == ["hit"]
    assert len(event) == 0


def test_listener_unsubscribe_immediate():
    event = ImmediateEvent()
    listener = EventListener()
    log = []
    listener.subscribe_immediate(event, lambda: log.append("hit"))
    listener.unsubscribe_immediate(event)
    event.emit()
    listener.destroy()
    assert log == []
    assert len(event) == 0