"""Desktop and mobile applications that drive a delegate's main loop."""

from __future__ import annotations

from enum import IntEnum

from .application import Application, ApplicationDelegate
from .asset_file_system import AssetFileSystem, AssetManager
from .events import EventBus
from .file_system import DesktopFileSystem
from .window import AndroidWindow, DesktopWindow


class AppCommand(IntEnum):
    """Lifecycle commands delivered to a mobile application."""

    INPUT_CHANGED = 0
    INIT_WINDOW = 1
    TERM_WINDOW = 2
    WINDOW_RESIZED = 3
    WINDOW_REDRAW_NEEDED = 4
    CONTENT_RECT_CHANGED = 5
    GAINED_FOCUS = 6
    LOST_FOCUS = 7
    CONFIG_CHANGED = 8
    LOW_MEMORY = 9
    START = 10
    RESUME = 11
    SAVE_STATE = 12
    PAUSE = 13
    STOP = 14
    DESTROY = 15


class DesktopApplication(Application):
    """An application with a desktop window and local file access."""

    def __init__(self, width: int, height: int, delegate: ApplicationDelegate) -> None:
        super().__init__()
        self._delegate = delegate
        self._window = DesktopWindow(width, height)
        self._event_bus = EventBus()
        self._quit = False
        DesktopFileSystem.init()

    def run(self) -> None:
        """Open the window and step the delegate until asked to quit."""
        self._window.init(self._event_bus)
        self._delegate.init()
        while not self._quit:
            self._window.pool_events()
            self._delegate.step()
        self._delegate.destroy()
        self._window.destroy()

    def quit(self) -> None:
        self._quit = True

    def window(self) -> DesktopWindow:
        return self._window

    def event_bus(self) -> EventBus:
        return self._event_bus

    def delegate(self) -> ApplicationDelegate:
        return self._delegate


class AndroidApplication(Application):
    """A mobile application driven by lifecycle commands and an asset manager."""

    def __init__(
        self,
        width: int,
        height: int,
        delegate: ApplicationDelegate,
        asset_manager: AssetManager,
    ) -> None:
        super().__init__()
        self._delegate = delegate
        self._window = AndroidWindow(width, height)
        self._event_bus = EventBus()
        self._quit = False
        AssetFileSystem.init(asset_manager)

    def handle_app_cmd(self, command: int) -> None:
        """React to a lifecycle command; unknown commands are ignored."""
        try:
            command = AppCommand(command)
        except ValueError:
            return
        if command is AppCommand.INIT_WINDOW:
            self._window.init()
        elif command is AppCommand.TERM_WINDOW:
            self._window.destroy()
        elif command is AppCommand.DESTROY:
            self.quit()

    def run(self) -> None:
        """Step the delegate while the surface is ready, until asked to quit."""
        delegate_ready = False
        while not self._quit:
            self._window.pool_events()
            if not self._window.is_surface_ready():
                continue
            if not delegate_ready:
                self._delegate.init()
                delegate_ready = True
            self._delegate.step()
        self._delegate.destroy()
        self._window.destroy()

    def quit(self) -> None:
        self._quit = True

    def window(self) -> AndroidWindow:
        return self._window

    def event_bus(self) -> EventBus:
        return self._event_bus

    def delegate(self) -> ApplicationDelegate:
        return self._delegate