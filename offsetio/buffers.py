"""In-memory byte buffers with positioned reads and writes."""

from __future__ import annotations

import io
import sys

from .base import ReadAt, Size, WriteAt


def _check(pos: int, n: int = 0) -> None:
    if pos < 0:
        raise ValueError("position must not be negative")
    if n < 0:
        raise ValueError("byte count must not be negative")


class FixedBuffer(ReadAt, WriteAt, Size):
    """A fixed-length view over a bytes-like object.

    Writes go into the underlying object when it is mutable and never
    extend it; read-only objects refuse writes.
    """

    def __init__(self, data) -> None:
        self.data = data
        self._view = memoryview(data).cast("B")

    def __len__(self) -> int:
        return len(self._view)

    def __bytes__(self) -> bytes:
        return self._view.tobytes()

    def read_at(self, pos: int, n: int) -> bytes:
        _check(pos, n)
        if pos >= len(self._view):
            return b""
        return self._view[pos:pos + n].tobytes()

    def write_at(self, pos: int, data) -> int:
        _check(pos)
        if self._view.readonly:
            raise io.UnsupportedOperation("buffer is read-only")
        if pos >= len(self._view):
            return 0
        source = memoryview(data).cast("B")
        count = min(len(source), len(self._view) - pos)
        self._view[pos:pos + count] = source[:count]
        return count

    def flush(self) -> None:
        """Nothing is buffered."""

    def size(self) -> int:
        return len(self._view)


class GrowableBuffer(ReadAt, WriteAt, Size):
    """A bytearray that grows when written past its end.

    A bytearray passed in is used directly, so writes are visible to it.
    """

    def __init__(self, data=b"") -> None:
        self.data = data if isinstance(data, bytearray) else bytearray(data)

    def __len__(self) -> int:
        return len(self.data)

    def __bytes__(self) -> bytes:
        return bytes(self.data)

    def read_at(self, pos: int, n: int) -> bytes:
        _check(pos, n)
        if pos >= len(self.data):
            return b""
        return bytes(self.data[pos:pos + n])

    def write_at(self, pos: int, data) -> int:
        _check(pos)
        if pos > sys.maxsize:
            raise ValueError("buffer size too big")
        source = memoryview(data).cast("B")
        if pos > len(self.data):
            self.data.extend(bytes(pos - len(self.data)))
        self.data[pos:pos + len(source)] = source
        return len(source)

    def flush(self) -> None:
        """Nothing is buffered."""

    def size(self) -> int:
        return len(self.data)