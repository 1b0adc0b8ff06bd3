"""Positioned reads and writes on open files."""

from __future__ import annotations

import contextlib
import os
import stat
import sys
from typing import BinaryIO, Iterator

from .base import ReadAt, Size, WriteAt

_HAS_POSITIONAL = hasattr(os, "pread") and hasattr(os, "pwrite")


def _fileno(file) -> int | None:
    try:
        return file.fileno()
    except (AttributeError, OSError, ValueError):
        return None


class FileAt(ReadAt, WriteAt, Size):
    """Positioned I/O on a binary file object.

    Where the platform offers positional system calls they are used, so the
    file's own position is never touched; otherwise the position is saved
    and restored around each operation. For consistent mixing with ordinary
    reads, use unbuffered files.
    """

    def __init__(self, file: BinaryIO) -> None:
        self.file = file
        self._fd = _fileno(file) if _HAS_POSITIONAL else None

    @contextlib.contextmanager
    def _preserved_position(self) -> Iterator[None]:
        saved = self.file.tell()
        try:
            yield
        finally:
            self.file.seek(saved)

    def read_at(self, pos: int, n: int) -> bytes:
        if n < 0:
            raise ValueError("byte count must not be negative")
        if self._fd is not None:
            self.file.flush()
            return os.pread(self._fd, n, pos)
        with self._preserved_position():
            self.file.seek(pos)
            return self.file.read(n) or b""

    def write_at(self, pos: int, data) -> int:
        if self._fd is not None:
            self.file.flush()
            return os.pwrite(self._fd, data, pos)
        with self._preserved_position():
            self.file.seek(pos)
            written = self.file.write(data)
        return 0 if written is None else written

    def flush(self) -> None:
        self.file.flush()

    def size(self) -> int | None:
        fd = _fileno(self.file)
        if fd is not None:
            self.file.flush()
            info = os.fstat(fd)
            return info.st_size if stat.S_ISREG(info.st_mode) else None
        if not self.file.seekable():
            return None
        with self._preserved_position():
            return self.file.seek(0, os.SEEK_END)


class RandomAccessFile(FileAt):
    """A file wrapper tuned for reads and writes in random order.

    On Linux the kernel is advised that access will be random.
    """

    def __init__(self, file: BinaryIO) -> None:
        super().__init__(file)
        if self._fd is not None and sys.platform.startswith("linux"):
            with contextlib.suppress(OSError, AttributeError):
                os.posix_fadvise(self._fd, 0, 0, os.POSIX_FADV_RANDOM)
        self._start = None if self._fd is not None else file.tell()

    @classmethod
    def open(cls, path, mode: str = "rb") -> "RandomAccessFile":
        """Open ``path`` unbuffered in a binary ``mode`` for random access."""
        if "b" not in mode:
            raise ValueError("random access requires a binary mode")
        file = open(path, mode, buffering=0)
        try:
            return cls(file)
        except BaseException:
            file.close()
            raise

    def into_inner(self) -> BinaryIO:
        """Return the wrapped file with its original position in place."""
        if self._start is not None:
            self.file.seek(self._start)
        return self.file

    def close(self) -> None:
        self.file.close()

    def __enter__(self) -> "RandomAccessFile":
        return self

    def __exit__(self, *args) -> None:
        self.close()