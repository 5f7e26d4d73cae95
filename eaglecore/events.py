"""Event bus with prioritised, consumable streams and immediate events."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Any, Callable

DEFAULT_PRIORITY = 0x7FFFFFFF


@dataclass
class _Listener:
    id: int
    priority: int
    callback: Callable[[Any], Any]


class ConsumableEventStream:
    """Ordered listeners for one event type; a truthy return consumes the event."""

    def __init__(self) -> None:
        self._listeners: list[_Listener] = []
        self._to_subscribe: list[_Listener] = []
        self._to_unsubscribe: set[int] = set()
        self._emitting = False

    def __len__(self) -> int:
        return len(self._listeners)

    @property
    def listener_ids(self) -> list[int]:
        """Ids of the active listeners, in call order."""
        return [listener.id for listener in self._listeners]

    def emit(self, event: Any) -> None:
        """Call listeners in priority order until one returns a truthy value."""
        if self._emitting:
            raise RuntimeError("Tried to emit an event that was already being emitted.")
        self._emitting = True
        try:
            for listener in self._listeners:
                if listener.callback(event):
                    break
        finally:
            self._emitting = False

        if self._to_unsubscribe:
            kept = []
            for listener in self._listeners:
                if listener.id in self._to_unsubscribe:
                    self._to_unsubscribe.discard(listener.id)
                else:
                    kept.append(listener)
            self._listeners = kept
        if self._to_subscribe:
            self._listeners.extend(self._to_subscribe)
            self._to_subscribe.clear()
        self.sort()

    def subscribe(self, callback: Callable[[Any], Any], listener_id: int, priority: int = DEFAULT_PRIORITY) -> None:
        """Add a listener; while emitting, it joins after the emission ends."""
        if any(listener.id == listener_id for listener in self._listeners):
            raise ValueError(
                "Tried to subscribe to an event with a listener that was already subscribed."
            )
        listener = _Listener(listener_id, priority, callback)
        if self._emitting:
            self._to_subscribe.append(listener)
        else:
            self._listeners.append(listener)
            self.sort()

    def unsubscribe(self, listener_id: int) -> None:
        """Remove a listener; unknown ids are ignored."""
        index = next(
            (i for i, listener in enumerate(self._listeners) if listener.id == listener_id),
            None,
        )
        if index is None:
            return
        if self._emitting:
            self._to_unsubscribe.add(listener_id)
        else:
            del self._listeners[index]

    def sort(self) -> None:
        """Order listeners by descending priority."""
        self._listeners.sort(key=lambda listener: listener.priority, reverse=True)


class EventBus:
    """Routes events to a stream per event type."""

    def __init__(self) -> None:
        self._streams: dict[type, ConsumableEventStream] = {}

    def emit(self, event: Any) -> None:
        """Deliver an event to the listeners of its type, if any."""
        stream = self._streams.get(type(event))
        if stream is not None:
            stream.emit(event)

    def subscribe(
        self,
        event_type: type,
        callback: Callable[[Any], Any],
        listener_id: int,
        priority: int = DEFAULT_PRIORITY,
    ) -> None:
        """Subscribe a callback to events of ``event_type``."""
        stream = self._streams.setdefault(event_type, ConsumableEventStream())
        stream.subscribe(callback, listener_id, priority)

    def unsubscribe(self, event_type: type, listener_id: int) -> None:
        """Remove a listener from one event type."""
        stream = self._streams.get(event_type)
        if stream is not None:
            stream.unsubscribe(listener_id)

    def unsubscribe_all(self, listener_id: int) -> None:
        """Remove a listener from every event type."""
        for stream in self._streams.values():
            stream.unsubscribe(listener_id)


class ImmediateEvent:
    """A signal whose callbacks all run, in subscription order."""

    def __init__(self) -> None:
        self._callbacks: list[Callable[..., Any]] = []
        self._listeners: list[int] = []
        self._emitting = False

    def __len__(self) -> int:
        return len(self._listeners)

    def __call__(self, *args: Any) -> None:
        self.emit(*args)

    def emit(self, *args: Any) -> None:
        """Call every subscribed callback with ``args``."""
        if self._emitting:
            raise RuntimeError("Attempted to emit an event that was already being emitted.")
        self._emitting = True
        try:
            for callback in self._callbacks:
                callback(*args)
        finally:
            self._emitting = False

    def subscribe(self, callback: Callable[..., Any], listener_id: int) -> None:
        """Add a callback under ``listener_id``."""
        if self._emitting:
            raise RuntimeError("Attempted to subscribe on an event that is currently emitting.")
        if listener_id in self._listeners:
            raise ValueError(
                "Tried to subscribe to an event with a listener that was already subscribed."
            )
        self._listeners.append(listener_id)
        self._callbacks.append(callback)

    def unsubscribe(self, listener_id: int) -> None:
        """Remove the callback registered under ``listener_id``."""
        if self._emitting:
            raise RuntimeError("Attempted to unsubscribe from an event that is currently emitting.")
        try:
            index = self._listeners.index(listener_id)
        except ValueError:
            raise ValueError(
                "Attempted to unsubscribe from an event with a listener that is not subscribed."
            ) from None
        del self._listeners[index]
        del self._callbacks[index]


class EventListener:
    """A subscriber identity bound to one bus and any number of immediate events."""

    _ids = itertools.count()

    def __init__(self) -> None:
        self.id: int = next(EventListener._ids)
        self._bus: EventBus | None = None
        self._immediate_events: list[ImmediateEvent] = []

    def __enter__(self) -> EventListener:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.destroy()

    @property
    def bus(self) -> EventBus | None:
        """The attached bus, or None."""
        return self._bus

    def attach(self, bus: EventBus) -> None:
        """Attach to a bus, detaching from any previous one."""
        if self._bus is not None:
            self.detach()
        self._bus = bus

    def detach(self) -> None:
        """Drop every bus subscription and forget the bus."""
        if self._bus is not None:
            self._bus.unsubscribe_all(self.id)
        self._bus = None

    def destroy(self) -> None:
        """Detach from the bus and from every immediate event."""
        self.detach()
        for event in self._immediate_events:
            event.unsubscribe(self.id)
        self._immediate_events.clear()

    def _require_bus(self) -> EventBus:
        if self._bus is None:
            raise RuntimeError("Listener is not attached to an event bus.")
        return self._bus

    def receive(self, event_type: type, receiver: Any, priority: int = DEFAULT_PRIORITY) -> None:
        """Route events of ``event_type`` to ``receiver.receive``."""
        self._require_bus().subscribe(
            event_type, lambda event: receiver.receive(event), self.id, priority
        )

    def subscribe(
        self, event_type: type, callback: Callable[[Any], Any], priority: int = DEFAULT_PRIORITY
    ) -> None:
        """Subscribe a callback on the attached bus."""
        self._require_bus().subscribe(event_type, callback, self.id, priority)

    def unsubscribe(self, event_type: type) -> None:
        """Unsubscribe from one event type on the attached bus."""
        self._require_bus().unsubscribe(event_type, self.id)

    def subscribe_immediate(self, event: ImmediateEvent, callback: Callable[..., Any]) -> None:
        """Subscribe to an immediate event, remembered for ``destroy``."""
        event.subscribe(callback, self.id)
        self._immediate_events.append(event)

    def unsubscribe_immediate(self, event: ImmediateEvent) -> None:
        """Unsubscribe from an immediate event."""
        event.unsubscribe(self.id)
        self._immediate_events.remove(event)