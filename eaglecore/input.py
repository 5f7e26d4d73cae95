"""Keyboard and mouse state tracked from bus events."""

from __future__ import annotations

from functools import singledispatchmethod
from typing import Any, ClassVar

from .events import EventBus, EventListener
from .input_events import OnKey, OnMouseButton, OnMouseMove, OnMouseScrolled
from .keycodes import KeyAction

Position = tuple[float, float]


class Input:
    """Per-frame keyboard and mouse state fed by input events."""

    _instance: ClassVar[Input | None] = None

    def __init__(self) -> None:
        self._down_keys: set[int] = set()
        self._pressed_keys: set[int] = set()
        self._released_keys: set[int] = set()
        self._down_buttons: set[int] = set()
        self._pressed_buttons: set[int] = set()
        self._released_buttons: set[int] = set()
        self._mouse_position: Position = (0.0, 0.0)
        self._mouse_delta: Position = (0.0, 0.0)
        self._scroll_delta: Position = (0.0, 0.0)
        self._listener = EventListener()
        self._first_mouse_move = True

    @classmethod
    def instance(cls) -> Input:
        """The shared input state, created on first use."""
        if Input._instance is None:
            Input._instance = cls()
        return Input._instance

    def init(self, bus: EventBus) -> None:
        """Start listening to input events on ``bus``."""
        self._listener.attach(bus)
        for event_type in (OnKey, OnMouseMove, OnMouseButton, OnMouseScrolled):
            self._listener.receive(event_type, self)

    def deinit(self) -> None:
        """Stop listening to input events."""
        self._listener.detach()

    def refresh(self) -> None:
        """Forget the per-frame pressed/released sets and deltas."""
        self._released_keys.clear()
        self._pressed_keys.clear()
        self._pressed_buttons.clear()
        self._released_buttons.clear()
        self._mouse_delta = (0.0, 0.0)
        self._scroll_delta = (0.0, 0.0)

    def key_pressed(self, key: int) -> bool:
        """Whether ``key`` was pressed since the last refresh."""
        return key in self._pressed_keys

    def key_down(self, key: int) -> bool:
        """Whether ``key`` is held down."""
        return key in self._down_keys

    def key_released(self, key: int) -> bool:
        """Whether ``key`` was released since the last refresh."""
        return key in self._released_keys

    def mouse_button_down(self, button: int) -> bool:
        """Whether ``button`` is held down."""
        return button in self._down_buttons

    def mouse_button_pressed(self, button: int) -> bool:
        """Whether ``button`` was pressed since the last refresh."""
        return button in self._pressed_buttons

    def mouse_button_released(self, button: int) -> bool:
        """Whether ``button`` was released since the last refresh."""
        return button in self._released_buttons

    def mouse_position(self) -> Position:
        """The last known cursor position."""
        return self._mouse_position

    def mouse_move_delta(self) -> Position:
        """The cursor movement of the last move event since the refresh."""
        return self._mouse_delta

    def mouse_scroll_delta(self) -> Position:
        """The last scroll amount since the refresh."""
        return self._scroll_delta

    def mouse_x(self) -> float:
        """The cursor's x coordinate."""
        return self._mouse_position[0]

    def mouse_y(self) -> float:
        """The cursor's y coordinate."""
        return self._mouse_position[1]

    @singledispatchmethod
    def receive(self, event: Any) -> bool:
        """Update state from an input event; never consumes it."""
        return False

    @receive.register(OnKey)
    def _receive_key(self, event: OnKey) -> bool:
        if event.action == KeyAction.PRESS:
            self._down_keys.add(event.key)
            self._pressed_keys.add(event.key)
        elif event.action == KeyAction.RELEASE:
            self._down_keys.discard(event.key)
            self._released_keys.add(event.key)
        return False

    @receive.register(OnMouseMove)
    def _receive_mouse_move(self, event: OnMouseMove) -> bool:
        if self._first_mouse_move:
            self._mouse_position = (event.x, event.y)
            self._first_mouse_move = False
        last_x, last_y = self._mouse_position
        self._mouse_delta = (event.x - last_x, event.y - last_y)
        self._mouse_position = (event.x, event.y)
        return False

    @receive.register(OnMouseButton)
    def _receive_mouse_button(self, event: OnMouseButton) -> bool:
        if event.action == KeyAction.PRESS:
            self._down_buttons.add(event.key)
            self._pressed_buttons.add(event.key)
        elif event.action == KeyAction.RELEASE:
            self._down_buttons.discard(event.key)
            self._released_buttons.add(event.key)
        return False

    @receive.register(OnMouseScrolled)
    def _receive_scroll(self, event: OnMouseScrolled) -> bool:
        self._scroll_delta = (event.x, event.y)
        return False