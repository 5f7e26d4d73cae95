"""CPU-side staging buffer for graphics data."""

from __future__ import annotations

from abc import ABC, abstractmethod


class GraphicsBuffer(ABC):
    """Growable byte storage that a backend uploads to the device."""

    def __init__(self) -> None:
        self._data = bytearray()
        self._size = 0

    def insert(self, data: bytes) -> None:
        """Append ``data`` after the current contents."""
        self.copy_from(data, self._size)

    def copy_from(self, data: bytes, offset: int = 0) -> None:
        """Write ``data`` at ``offset``; the size grows by its length."""
        view = memoryview(data).cast("B")
        end = offset + view.nbytes
        if offset < 0 or end > len(self._data):
            raise ValueError(
                f"write of {view.nbytes} bytes at offset {offset} exceeds capacity {len(self._data)}"
            )
        self._data[offset:end] = view
        self._size += view.nbytes

    def reserve(self, size: int) -> None:
        """Grow the capacity to ``size`` bytes, keeping the contents."""
        if size <= len(self._data):
            return
        grown = bytearray(size)
        grown[: self._size] = self._data[: self._size]
        self._data = grown

    def clear(self) -> None:
        """Forget the contents; the capacity is kept."""
        self._size = 0

    def size(self) -> int:
        """Number of bytes written."""
        return self._size

    def capacity(self) -> int:
        """Number of bytes reserved."""
        return len(self._data)

    def data(self) -> bytes:
        """The written bytes."""
        return bytes(self._data[: self._size])

    @abstractmethod
    def upload(self) -> None:
        """Send the contents to the device."""