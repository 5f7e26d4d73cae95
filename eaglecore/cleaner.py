"""Deferred per-frame clean-up of dirty objects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar


class Cleanable(ABC):
    """An object that needs flushing for each frame index until clean."""

    @abstractmethod
    def is_dirty(self) -> bool:
        """Whether more flushing is needed."""

    @abstractmethod
    def flush(self, index: int) -> None:
        """Bring the data for frame ``index`` up to date."""


class Cleaner:
    """Process-wide queue of dirty objects."""

    _dirty: ClassVar[list[Cleanable]] = []

    @classmethod
    def flush(cls, index: int) -> None:
        """Flush every queued object; keep only those still dirty."""
        still_dirty = []
        for obj in Cleaner._dirty:
            obj.flush(index)
            if obj.is_dirty():
                still_dirty.append(obj)
        Cleaner._dirty = still_dirty

    @classmethod
    def push(cls, obj: Cleanable) -> None:
        """Queue an object unless it is already queued."""
        if not any(queued is obj for queued in Cleaner._dirty):
            Cleaner._dirty.append(obj)

    @classmethod
    def clear(cls) -> None:
        """Drop every queued object."""
        Cleaner._dirty = []