"""Windows that turn native callbacks into bus events."""

from __future__ import annotations

import logging
import math
import queue
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable

from .events import EventBus
from .input_events import (
    OnKey,
    OnKeyTyped,
    OnMouseButton,
    OnMouseMove,
    OnMouseScrolled,
    OnWindowClose,
    OnWindowFocus,
    OnWindowLostFocus,
    OnWindowResized,
)

_log = logging.getLogger("eagle")


class Cursor(Enum):
    """Standard cursor shapes."""

    ARROW = 0
    TEXT = 1
    CROSSHAIR = 2
    HAND = 3
    HORI_RESIZE = 4
    VERT_RESIZE = 5


def _ratio(numerator: int, denominator: int) -> float:
    if denominator:
        return numerator / denominator
    return math.nan if numerator == 0 else math.inf


class Window(ABC):
    """A surface the application draws to and receives input from."""

    @abstractmethod
    def pool_events(self) -> None:
        """Process pending native events without blocking."""

    @abstractmethod
    def is_minimized(self) -> bool:
        """Whether the window currently has no visible area."""

    @abstractmethod
    def wait_native_events(self) -> None:
        """Block until native events arrive, then process them."""

    @abstractmethod
    def set_cursor_shape(self, cursor: Cursor) -> None:
        """Change the cursor shape."""

    @abstractmethod
    def set_cursor_visible(self, visible: bool) -> None:
        """Show or hide the cursor."""

    @abstractmethod
    def width(self) -> int:
        """Window width."""

    @abstractmethod
    def height(self) -> int:
        """Window height."""

    @abstractmethod
    def framebuffer_width(self) -> int:
        """Framebuffer width in pixels."""

    @abstractmethod
    def framebuffer_height(self) -> int:
        """Framebuffer height in pixels."""

    @abstractmethod
    def framebuffer_width_scale(self) -> float:
        """Framebuffer width over window width."""

    @abstractmethod
    def framebuffer_height_scale(self) -> float:
        """Framebuffer height over window height."""


class DesktopWindow(Window):
    """A desktop window; native callbacks arrive through ``post``."""

    def __init__(self, width: int, height: int, title: str = "Eagle") -> None:
        self.title = title
        self._width = width
        self._height = height
        self._framebuffer_width = width
        self._framebuffer_height = height
        self._bus: EventBus | None = None
        self._pending: queue.SimpleQueue[tuple[Callable[..., Any], tuple[Any, ...]]] = (
            queue.SimpleQueue()
        )
        self._cursors: set[Cursor] = set()
        self._cursor = Cursor.ARROW
        self._cursor_visible = True

    @property
    def cursor(self) -> Cursor:
        """The current cursor shape."""
        return self._cursor

    @property
    def cursor_visible(self) -> bool:
        """Whether the cursor is shown."""
        return self._cursor_visible

    def init(self, bus: EventBus) -> None:
        """Open the window and start emitting its events on ``bus``."""
        _log.debug("Initializing window!")
        self._bus = bus
        self._cursors = set(Cursor)
        _log.debug("Window initialized!")

    def destroy(self) -> None:
        """Release cursors and drop pending native events."""
        self._cursors.clear()
        while True:
            try:
                self._pending.get_nowait()
            except queue.Empty:
                break

    def post(self, callback: Callable[..., Any], *args: Any) -> None:
        """Queue a native callback to run on the next event processing."""
        self._pending.put((callback, args))

    def _drain(self) -> None:
        while True:
            try:
                callback, args = self._pending.get_nowait()
            except queue.Empty:
                return
            callback(*args)

    def pool_events(self) -> None:
        """Run every queued native callback."""
        self._drain()

    def is_minimized(self) -> bool:
        return self._width == 0 or self._height == 0

    def wait_native_events(self) -> None:
        """Block until a callback is queued, then run it and any others."""
        callback, args = self._pending.get()
        callback(*args)
        self._drain()

    def set_cursor_shape(self, cursor: Cursor) -> None:
        """Use ``cursor`` if available, otherwise the arrow."""
        self._cursor = cursor if cursor in self._cursors else Cursor.ARROW

    def set_cursor_visible(self, visible: bool) -> None:
        self._cursor_visible = visible

    def _emit(self, event: Any) -> None:
        if self._bus is None:
            raise RuntimeError("window is not initialised")
        self._bus.emit(event)

    def handle_resize(
        self, width: int, height: int, framebuffer_width: int, framebuffer_height: int
    ) -> None:
        """Record a new size; emit a resize event unless minimised."""
        self._width = width
        self._height = height
        self._framebuffer_width = framebuffer_width
        self._framebuffer_height = framebuffer_height
        if width != 0 and height != 0:
            self._emit(OnWindowResized(width, height))

    def handle_focus(self, focused: bool) -> None:
        self._emit(OnWindowFocus() if focused else OnWindowLostFocus())

    def handle_close(self) -> None:
        self._emit(OnWindowClose())

    def handle_cursor_position(self, x: float, y: float) -> None:
        self._emit(OnMouseMove(float(x), float(y)))

    def handle_scroll(self, x: float, y: float) -> None:
        self._emit(OnMouseScrolled(float(x), float(y)))

    def handle_mouse_button(self, button: int, action: int, mods: int) -> None:
        self._emit(OnMouseButton(button, action, mods))

    def handle_key(self, key: int, scancode: int, action: int, mods: int) -> None:
        self._emit(OnKey(key, action, mods))

    def handle_char(self, codepoint: int) -> None:
        self._emit(OnKeyTyped(codepoint))

    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return self._height

    def framebuffer_width(self) -> int:
        return self._framebuffer_width

    def framebuffer_height(self) -> int:
        return self._framebuffer_height

    def framebuffer_width_scale(self) -> float:
        return _ratio(self._framebuffer_width, self._width)

    def framebuffer_height_scale(self) -> float:
        return _ratio(self._framebuffer_height, self._height)


class AndroidWindow(Window):
    """A mobile window whose surface comes and goes with the activity."""

    def __init__(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._surface_ready = False
        self._pending: queue.SimpleQueue[tuple[Callable[..., Any], tuple[Any, ...]]] = (
            queue.SimpleQueue()
        )

    def init(self) -> None:
        """Make the surface ready; does nothing if it already is."""
        if self._surface_ready:
            return
        self._surface_ready = True

    def destroy(self) -> None:
        """Release the surface; does nothing if there is none."""
        if not self._surface_ready:
            return
        self._surface_ready = False

    def post(self, callback: Callable[..., Any], *args: Any) -> None:
        """Queue a native callback for the event loop."""
        self._pending.put((callback, args))

    def pool_events(self) -> None:
        """Run at most one queued callback without blocking."""
        try:
            callback, args = self._pending.get_nowait()
        except queue.Empty:
            return
        callback(*args)

    def is_surface_ready(self) -> bool:
        return self._surface_ready

    def is_minimized(self) -> bool:
        return False

    def wait_native_events(self) -> None:
        """Events are polled by the loop; nothing to wait for here."""

    def set_cursor_shape(self, cursor: Cursor) -> None:
        """Touch screens have no cursor; the shape is ignored."""

    def set_cursor_visible(self, visible: bool) -> None:
        """Touch screens have no cursor; visibility is ignored."""

    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return self._height

    def framebuffer_width(self) -> int:
        return self.width()

    def framebuffer_height(self) -> int:
        return self.height()

    def framebuffer_width_scale(self) -> float:
        return 1.0

    def framebuffer_height_scale(self) -> float:
        return 1.0