"""Interfaces for reading and writing bytes at explicit offsets."""

from __future__ import annotations

from abc import ABC, abstractmethod


class WriteZeroError(OSError):
    """Raised when a sink accepts no bytes before a whole buffer is written."""


class ReadAt(ABC):
    """A source that can be read at any offset without moving a position."""

    @abstractmethod
    def read_at(self, pos: int, n: int) -> bytes:
        """Read up to ``n`` bytes starting at ``pos``.

        Fewer bytes (possibly none) come back at the end of the data.
        """

    def read_exact_at(self, pos: int, n: int) -> bytes:
        """Read exactly ``n`` bytes starting at ``pos``.

        Raises EOFError if the data ends first. Interrupted reads are retried.
        """
        if n < 0:
            raise ValueError("byte count must not be negative")
        chunks: list[bytes] = []
        remaining = n
        while remaining:
            try:
                chunk = self.read_at(pos, remaining)
            except InterruptedError:
                continue
            if not chunk:
                break
            chunks.append(chunk)
            pos += len(chunk)
            remaining -= len(chunk)
        if remaining > 0:
            raise EOFError("failed to fill whole buffer")
        return b"".join(chunks)


class WriteAt(ABC):
    """A sink that can be written at any offset without moving a position.

    Writing beyond the end extends the sink; the gap is filled with zeros.
    """

    @abstractmethod
    def write_at(self, pos: int, data) -> int:
        """Write bytes from ``data`` at ``pos``; return how many were written."""

    def write_all_at(self, pos: int, data) -> None:
        """Write all of ``data`` at ``pos``.

        Raises WriteZeroError if the sink stops accepting bytes.
        Interrupted writes are retried.
        """
        view = memoryview(data).cast("B")
        while len(view):
            try:
                written = self.write_at(pos, view)
            except InterruptedError:
                continue
            if written == 0:
                raise WriteZeroError("failed to write whole buffer")
            view = view[written:]
            pos += written

    @abstractmethod
    def flush(self) -> None:
        """Push any buffered data to its destination."""


class Size(ABC):
    """An object whose size in bytes may be known."""

    @abstractmethod
    def size(self) -> int | None:
        """Return the size in bytes, or None when it is unknown."""