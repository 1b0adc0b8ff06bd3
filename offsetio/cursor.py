"""Stream adapters that give positioned I/O objects a current position."""

from __future__ import annotations

import io

from .base import ReadAt, WriteAt


class Cursor(io.RawIOBase):
    """A raw stream over a positioned reader or writer.

    The cursor keeps its own position and turns each read or write into a
    positioned call on ``inner``. The end of ``inner`` is not known, so
    seeking relative to the end is not supported; see SizeCursor.
    """

    def __init__(self, inner, pos: int = 0) -> None:
        super().__init__()
        if pos < 0:
            raise ValueError("position must not be negative")
        self.inner = inner
        self._pos = pos
        self._closing = False

    def _check_open(self) -> None:
        if self.closed:
            raise ValueError("I/O operation on closed cursor")

    def readable(self) -> bool:
        self._check_open()
        return isinstance(self.inner, ReadAt)

    def writable(self) -> bool:
        self._check_open()
        return isinstance(self.inner, WriteAt)

    def seekable(self) -> bool:
        self._check_open()
        return True

    def readinto(self, b) -> int:
        if not self.readable():
            raise io.UnsupportedOperation("underlying object is not readable")
        view = memoryview(b).cast("B")
        data = self.inner.read_at(self._pos, len(view))
        view[:len(data)] = data
        self._pos += len(data)
        return len(data)

    def write(self, b) -> int:
        if not self.writable():
            raise io.UnsupportedOperation("underlying object is not writable")
        written = self.inner.write_at(self._pos, memoryview(b).cast("B"))
        self._pos += written
        return written

    def flush(self) -> None:
        super().flush()
        if not self._closing and isinstance(self.inner, WriteAt):
            self.inner.flush()

    def close(self) -> None:
        """Close the cursor without touching the underlying object."""
        self._closing = True
        super().close()

    def tell(self) -> int:
        self._check_open()
        return self._pos

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        self._check_open()
        if whence == io.SEEK_SET:
            target = offset
        elif whence == io.SEEK_CUR:
            target = self._pos + offset
        elif whence == io.SEEK_END:
            raise io.UnsupportedOperation("seek from unknown end")
        else:
            raise ValueError(f"invalid whence value: {whence}")
        if target < 0:
            raise ValueError("seek to a negative position")
        self._pos = target
        return self._pos


class SizeCursor(Cursor):
    """A Cursor whose inner object knows its size, so it can seek from the end."""

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        if whence != io.SEEK_END:
            return super().seek(offset, whence)
        self._check_open()
        total = self.inner.size()
        if total is None:
            raise io.UnsupportedOperation("seek from unknown end")
        target = total + offset
        if target < 0:
            raise ValueError("seek to a negative position")
        self._pos = target
        return self._pos