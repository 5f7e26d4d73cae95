"""Input and window event records emitted on the event bus."""

from dataclasses import dataclass


@dataclass(frozen=True)
class OnMouseMove:
    """The cursor moved to (x, y)."""

    x: float
    y: float


@dataclass(frozen=True)
class OnMouseButton:
    """A mouse button changed state."""

    key: int
    action: int
    mods: int


@dataclass(frozen=True)
class OnMouseScrolled:
    """The scroll wheel moved by (x, y)."""

    x: float
    y: float


@dataclass(frozen=True)
class OnKey:
    """A keyboard key changed state."""

    key: int
    action: int
    mods: int


@dataclass(frozen=True)
class OnKeyTyped:
    """A character was typed; ``key`` is its code point."""

    key: int


@dataclass(frozen=True)
class OnWindowResized:
    """The window was resized."""

    width: int
    height: int


@dataclass(frozen=True)
class OnWindowClose:
    """The window was asked to close."""


@dataclass(frozen=True)
class OnWindowFocus:
    """The window gained focus."""


@dataclass(frozen=True)
class OnWindowLostFocus:
    """The window lost focus."""


@dataclass(frozen=True)
class OnWindowMove:
    """The window was moved."""