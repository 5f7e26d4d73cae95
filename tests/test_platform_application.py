import io

from eaglecore.application import Application, ApplicationDelegate
from eaglecore.asset_file_system import AssetFileSystem
from eaglecore.file_system import DesktopFileSystem, FileSystem
from eaglecore.input_events import OnKey, OnWindowResized
from eaglecore.keycodes import Key, KeyAction
from eaglecore.platform_application import (
    AndroidApplication,
    AppCommand,
    DesktopApplication,
)


class RecordingDelegate(ApplicationDelegate):
    def __init__(self, steps_before_quit=1):
        self.calls = []
        self.app = None
        self.steps_before_quit = steps_before_quit

    def init(self):
        self.calls.append("init")

    def step(self):
        self.calls.append("step")
        if self.calls.count("step") >= self.steps_before_quit:
            self.app.quit()

    def destroy(self):
        self.calls.append("destroy")


class Assets:
    def __init__(self, files):
        self.files = files

    def open(self, path):
        data = self.files.get(path)
        return None if data is None else io.BytesIO(data)


def test_desktop_constructor_sets_globals():
    delegate = RecordingDelegate()
    app = DesktopApplication(640, 480, delegate)
    assert Application.instance() is app
    assert isinstance(FileSystem.instance(), DesktopFileSystem)
    assert app.delegate() is delegate
    assert app.window().width() == 640
    assert app.window().height() == 480


def test_desktop_run_lifecycle():
    delegate = RecordingDelegate(steps_before_quit=3)
    app = DesktopApplication(100, 50, delegate)
    delegate.app = app
    app.run()
    assert delegate.calls == ["init", "step", "step", "step", "destroy"]


def test_desktop_run_delivers_window_events_to_bus():
    delegate = RecordingDelegate(steps_before_quit=1)
    app = DesktopApplication(100, 50, delegate)
    delegate.app = app
    received = []
    app.event_bus().subscribe(OnKey, lambda e: received.append(e), 1)
    app.event_bus().subscribe(OnWindowResized, lambda e: received.append(e), 2)
    window = app.window()
    window.post(window.handle_key, Key.A, 0, KeyAction.PRESS, 0)
    window.post(window.handle_resize, 200, 100, 400, 200)
    app.run()
    assert received == [OnKey(Key.A, KeyAction.PRESS, 0), OnWindowResized(200, 100)]
    assert window.width() == 200
    assert window.framebuffer_width_scale() == 2.0


def test_android_constructor_installs_asset_file_system():
    delegate = RecordingDelegate()
    app = AndroidApplication(10, 20, delegate, Assets({"a": b"xyz"}))
    assert Application.instance() is app
    fs = FileSystem.instance()
    assert isinstance(fs, AssetFileSystem)
    assert fs.read_bytes("a") == b"xyz"


def test_android_run_waits_for_surface_then_steps():
    delegate = RecordingDelegate(steps_before_quit=2)
    app = AndroidApplication(10, 20, delegate, Assets({}))
    delegate.app = app
    app.window().post(app.handle_app_cmd, AppCommand.INIT_WINDOW)
    app.run()
    assert delegate.calls == ["init", "step", "step", "destroy"]
    assert app.window().is_surface_ready() is False


def test_android_destroy_command_ends_loop_without_init():
    delegate = RecordingDelegate()
    app = AndroidApplication(10, 20, delegate, Assets({}))
    delegate.app = app
    app.window().post(app.handle_app_cmd, AppCommand.DESTROY)
    app.run()
    assert delegate.calls == ["destroy"]


def test_android_window_commands_toggle_surface():
    app = AndroidApplication(10, 20, RecordingDelegate(), Assets({}))
    app.handle_app_cmd(AppCommand.INIT_WINDOW)
    assert app.window().is_surface_ready() is True
    app.handle_app_cmd(AppCommand.PAUSE)
    assert app.window().is_surface_ready() is True
    app.handle_app_cmd(AppCommand.TERM_WINDOW)
    assert app.window().is_surface_ready() is False


def test_android_unknown_command_is_ignored():
    delegate = RecordingDelegate()
    app = AndroidApplication(10, 20, delegate, Assets({}))
    delegate.app = app
    app.handle_app_cmd(999)
    assert app.window().is_surface_ready() is False
    app.window().post(app.handle_app_cmd, int(AppCommand.DESTROY))
    app.run()
    assert delegate.calls == ["destroy"]


def test_android_window_has_unit_scale():
    app = AndroidApplication(30, 40, RecordingDelegate(), Assets({}))
    window = app.window()
    assert window.framebuffer_width() == window.width() == 30
    assert window.framebuffer_height_scale() == 1.0