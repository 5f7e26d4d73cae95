"""Device memory buffers that are mapped, written, bound and copied."""

from __future__ import annotations

import logging
from dataclasses import dataclass

_log = logging.getLogger("eagle")

WHOLE_SIZE = None


@dataclass(frozen=True)
class BufferCreateInfo:
    """How a buffer is used and what memory properties it wants."""

    usage_flags: int = 0
    memory_flags: int = 0


class DeviceBuffer:
    """A block of device memory with host mapping and binding."""

    def __init__(self, info: BufferCreateInfo) -> None:
        self.info = info
        self._memory: bytearray | None = None
        self._mapped: memoryview | None = None
        self._bound_offset: int | None = None
        self._size = 0

    @classmethod
    def create_buffer(
        cls, info: BufferCreateInfo, size: int, data: bytes | None = None
    ) -> DeviceBuffer:
        """Allocate a buffer of ``size`` bytes, optionally filled with ``data``, and bind it."""
        _log.debug("Creating buffer")
        if size <= 0:
            raise ValueError(f"buffer size must be positive, got {size}")
        buffer = cls(info)
        buffer._memory = bytearray(size)
        buffer._size = size
        if data is not None:
            payload = memoryview(data).cast("B")
            if payload.nbytes > size:
                raise ValueError(
                    f"initial data of {payload.nbytes} bytes does not fit in {size} bytes"
                )
            buffer.map()
            buffer.copy_to(payload)
            buffer.unmap()
        buffer.bind()
        _log.debug("Buffer created")
        return buffer

    @classmethod
    def copy_buffer(
        cls, src: DeviceBuffer, dst: DeviceBuffer, size: int, offset: int = 0
    ) -> None:
        """Copy the first ``size`` bytes of ``src`` into ``dst`` at ``offset``."""
        _log.debug("Copying buffer")
        source = src._require_memory()
        target = dst._require_memory()
        if size < 0 or size > len(source):
            raise ValueError(f"copy of {size} bytes exceeds source size {len(source)}")
        if offset < 0 or offset + size > len(target):
            raise ValueError(
                f"copy of {size} bytes at offset {offset} exceeds destination size {len(target)}"
            )
        target[offset : offset + size] = source[:size]
        _log.debug("Buffer copied")

    def _require_memory(self) -> bytearray:
        if self._memory is None:
            raise RuntimeError("buffer has no allocated memory")
        return self._memory

    def _resolve_range(self, size: int | None, offset: int) -> tuple[int, int]:
        memory = self._require_memory()
        if offset < 0 or offset > len(memory):
            raise ValueError(f"offset {offset} outside buffer of {len(memory)} bytes")
        end = len(memory) if size is None else offset + size
        if size is not None and (size < 0 or end > len(memory)):
            raise ValueError(
                f"range of {size} bytes at offset {offset} exceeds buffer of {len(memory)} bytes"
            )
        return offset, end

    def map(self, size: int | None = WHOLE_SIZE, offset: int = 0) -> None:
        """Map ``size`` bytes from ``offset`` (to the end by default) for host access."""
        start, end = self._resolve_range(size, offset)
        if self._mapped is not None:
            raise RuntimeError("buffer memory is already mapped")
        self._mapped = memoryview(self._require_memory())[start:end]

    def unmap(self) -> None:
        """Release the host mapping, if any."""
        if self._mapped is not None:
            self._mapped.release()
            self._mapped = None

    def bind(self, offset: int = 0) -> None:
        """Bind the buffer to its memory starting at ``offset``."""
        memory = self._require_memory()
        if offset < 0 or offset >= len(memory):
            raise ValueError(f"bind offset {offset} outside buffer of {len(memory)} bytes")
        self._bound_offset = offset

    def copy_to(self, data: bytes) -> None:
        """Write ``data`` to the start of the mapped region."""
        if self._mapped is None:
            raise RuntimeError("buffer memory is not mapped")
        payload = memoryview(data).cast("B")
        if payload.nbytes > self._mapped.nbytes:
            raise ValueError(
                f"{payload.nbytes} bytes do not fit in mapped region of {self._mapped.nbytes}"
            )
        self._mapped[: payload.nbytes] = payload

    def flush(self, size: int | None = WHOLE_SIZE, offset: int = 0) -> None:
        """Make host writes in the given range visible to the device."""
        self._resolve_range(size, offset)
        if self._mapped is None:
            raise RuntimeError("only mapped memory can be flushed")

    def destroy(self) -> None:
        """Free the buffer's memory."""
        self.unmap()
        self._memory = None
        self._bound_offset = None

    def size(self) -> int:
        """Allocated size in bytes."""
        return self._size

    def data(self) -> memoryview | None:
        """The mapped region, or None when unmapped."""
        return self._mapped