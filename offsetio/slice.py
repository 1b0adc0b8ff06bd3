"""A bounded window onto another positioned reader or writer."""

from __future__ import annotations

from .base import ReadAt, Size, WriteAt


class Slice(ReadAt, WriteAt, Size):
    """A view of ``size`` bytes of ``inner``, starting at ``offset``.

    With ``size`` of None the view is unbounded past its offset. Positions
    given to the slice are relative to its offset. Operations on ``inner``
    directly are not confined to the window.
    """

    def __init__(self, inner, offset: int = 0, size: int | None = None) -> None:
        if offset < 0:
            raise ValueError("offset must not be negative")
        if size is not None and size < 0:
            raise ValueError("size must not be negative")
        self.inner = inner
        self.offset = offset
        self.limit = size

    @classmethod
    def to_end(cls, inner, offset: int = 0) -> "Slice":
        """Create a slice from ``offset`` to the current end of ``inner``."""
        total = inner.size()
        if total is None:
            raise ValueError("unknown base size")
        if offset > total:
            raise ValueError("offset lies beyond the end of the base")
        return cls(inner, offset, total - offset)

    def _available(self, pos: int, n: int) -> int:
        if pos < 0:
            raise ValueError("position must not be negative")
        if self.limit is None:
            return n
        if pos >= self.limit:
            return 0
        return min(n, self.limit - pos)

    def read_at(self, pos: int, n: int) -> bytes:
        if n < 0:
            raise ValueError("byte count must not be negative")
        return self.inner.read_at(pos + self.offset, self._available(pos, n))

    def write_at(self, pos: int, data) -> int:
        view = memoryview(data).cast("B")
        count = self._available(pos, len(view))
        return self.inner.write_at(pos + self.offset, view[:count])

    def flush(self) -> None:
        self.inner.flush()

    def size(self) -> int | None:
        return self.limit

    def __repr__(self) -> str:
        return f"Slice({self.inner!r}, offset={self.offset}, size={self.limit})"