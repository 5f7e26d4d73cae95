"""Access to application files through a process-wide file system."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar


class FileSystem(ABC):
    """Reads application files; one implementation is installed at a time."""

    _instance: ClassVar[FileSystem | None] = None

    @classmethod
    def instance(cls) -> FileSystem | None:
        """The installed file system, or None."""
        return FileSystem._instance

    @abstractmethod
    def read_bytes(self, path: str) -> bytes:
        """Read a whole file as bytes."""

    @abstractmethod
    def read_text(self, path: str) -> str:
        """Read a whole file as text."""


class DesktopFileSystem(FileSystem):
    """Reads files from the local disk."""

    @classmethod
    def init(cls) -> None:
        """Install a desktop file system as the shared instance."""
        FileSystem._instance = cls()

    def read_bytes(self, path: str) -> bytes:
        try:
            with open(path, "rb") as file:
                return file.read()
        except OSError as exc:
            raise OSError(f"failed to open file: {path}") from exc

    def read_text(self, path: str) -> str:
        try:
            with open(path, encoding="utf-8") as file:
                return file.read()
        except OSError as exc:
            raise OSError(f"failed to open file: {path}") from exc