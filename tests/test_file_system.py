import pytest

from eaglecore.file_system import DesktopFileSystem, FileSystem


def test_init_installs_working_desktop_file_system(tmp_path):
    path = tmp_path / "config.txt"
    path.write_text("eagle", encoding="utf-8")
    DesktopFileSystem.init()
    assert FileSystem.instance().read_text(str(path)) == "eagle"


def test_read_bytes(tmp_path):
    path = tmp_path / "shader.spv"
    payload = bytes(range(256))
    path.write_bytes(payload)
    DesktopFileSystem.init()
    assert FileSystem.instance().read_bytes(str(path)) == payload


def test_read_text(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("hello\nworld", encoding="utf-8")
    assert DesktopFileSystem().read_text(str(path)) == "hello\nworld"


def test_read_empty_file(tmp_path):
    path = tmp_path / "empty"
    path.write_bytes(b"")
    assert DesktopFileSystem().read_bytes(str(path)) == b""


def test_missing_file_raises(tmp_path):
    missing = str(tmp_path / "missing.bin")
    with pytest.raises(OSError, match="failed to open file"):
        DesktopFileSystem().read_bytes(missing)
    with pytest.raises(OSError, match="failed to open file"):
        DesktopFileSystem().read_text(missing)