"""File system that reads packaged assets through an asset manager."""

from __future__ import annotations

from typing import Any, BinaryIO, Protocol

from .file_system import FileSystem


class AssetManager(Protocol):
    """Anything that opens named assets as binary streams."""

    def open(self, path: str) -> BinaryIO | None: ...


class AssetFileSystem(FileSystem):
    """Reads files from an asset manager instead of the local disk."""

    def __init__(self, asset_manager: AssetManager) -> None:
        self._asset_manager = asset_manager

    @classmethod
    def init(cls, asset_manager: AssetManager) -> None:
        """Install an asset file system over ``asset_manager`` as the shared instance."""
        FileSystem._instance = cls(asset_manager)

    def _open(self, path: str) -> Any:
        try:
            stream = self._asset_manager.open(path)
        except (OSError, LookupError) as exc:
            raise OSError(f"failed to open file: {path}") from exc
        if stream is None:
            raise OSError(f"failed to open file: {path}")
        return stream

    def read_bytes(self, path: str) -> bytes:
        """Read a whole asset as bytes."""
        stream = self._open(path)
        try:
            return bytes(stream.read())
        finally:
            stream.close()

    def read_text(self, path: str) -> str:
        """Read a whole asset as UTF-8 text."""
        return self.read_bytes(path).decode("utf-8")