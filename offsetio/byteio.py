"""Reading and writing numbers at offsets with a chosen byte order."""

from __future__ import annotations

import struct
from enum import Enum

from .base import ReadAt, WriteAt, WriteZeroError

_FLOAT_CODES = {4: "f", 8: "d"}


class ByteOrder(str, Enum):
    """Byte order of encoded numbers."""

    BIG = "big"
    LITTLE = "little"

    @property
    def struct_prefix(self) -> str:
        return ">" if self is ByteOrder.BIG else "<"


def _check_nbytes(nbytes: int) -> None:
    if not 1 <= nbytes <= 8:
        raise ValueError("integer width must be between 1 and 8 bytes")


def _float_format(width: int, order) -> str:
    try:
        code = _FLOAT_CODES[width]
    except KeyError:
        raise ValueError("float width must be 4 or 8 bytes") from None
    return ByteOrder(order).struct_prefix + code


def _decode_int(data: bytes, order, signed: bool) -> int:
    return int.from_bytes(data, ByteOrder(order).value, signed=signed)


def _encode_int(value: int, nbytes: int, order, signed: bool) -> bytes:
    _check_nbytes(nbytes)
    return value.to_bytes(nbytes, ByteOrder(order).value, signed=signed)


def read_int_at(source, pos: int, nbytes: int, order, signed: bool = False) -> int:
    """Read an ``nbytes``-wide integer at ``pos`` of a positioned reader."""
    _check_nbytes(nbytes)
    return _decode_int(source.read_exact_at(pos, nbytes), order, signed)


def write_int_at(sink, pos: int, value: int, nbytes: int, order, signed: bool = False) -> None:
    """Write ``value`` as an ``nbytes``-wide integer at ``pos``.

    Raises OverflowError if the value does not fit.
    """
    sink.write_all_at(pos, _encode_int(value, nbytes, order, signed))


def read_float_at(source, pos: int, width: int, order) -> float:
    """Read a 4- or 8-byte floating point number at ``pos``."""
    fmt = _float_format(width, order)
    return struct.unpack(fmt, source.read_exact_at(pos, width))[0]


def write_float_at(sink, pos: int, value: float, width: int, order) -> None:
    """Write a 4- or 8-byte floating point number at ``pos``."""
    fmt = _float_format(width, order)
    sink.write_all_at(pos, struct.pack(fmt, value))


class ByteIo(ReadAt, WriteAt):
    """Reads and writes numbers in one fixed byte order.

    ``inner`` may be a positioned reader or writer, used by the ``*_at``
    methods, or a stream with ``read``/``write``, used by the others.
    """

    def __init__(self, inner, order) -> None:
        self.inner = inner
        self.order = ByteOrder(order)

    def __repr__(self) -> str:
        return f"ByteIo({self.inner!r}, {self.order.value!r})"

    # Positioned and stream delegation.

    def read_at(self, pos: int, n: int) -> bytes:
        return self.inner.read_at(pos, n)

    def write_at(self, pos: int, data) -> int:
        return self.inner.write_at(pos, data)

    def flush(self) -> None:
        self.inner.flush()

    def read(self, n: int = -1):
        return self.inner.read(n)

    def write(self, data):
        return self.inner.write(data)

    # Stream helpers.

    def _read_exact(self, n: int) -> bytes:
        chunks: list[bytes] = []
        remaining = n
        while remaining:
            try:
                chunk = self.inner.read(remaining)
            except InterruptedError:
                continue
            if not chunk:
                break
            chunks.append(bytes(chunk))
            remaining -= len(chunk)
        if remaining > 0:
            raise EOFError("failed to fill whole buffer")
        return b"".join(chunks)

    def _write_all(self, data: bytes) -> None:
        view = memoryview(data)
        while len(view):
            try:
                written = self.inner.write(view)
            except InterruptedError:
                continue
            if not written:
                raise WriteZeroError("failed to write whole buffer")
            view = view[written:]

    def _read_int(self, nbytes: int, signed: bool) -> int:
        _check_nbytes(nbytes)
        return _decode_int(self._read_exact(nbytes), self.order, signed)

    def _write_int(self, n: int, nbytes: int, signed: bool) -> None:
        self._write_all(_encode_int(n, nbytes, self.order, signed))

    def _read_float(self, width: int) -> float:
        fmt = _float_format(width, self.order)
        return struct.unpack(fmt, self._read_exact(width))[0]

    def _write_float(self, n: float, width: int) -> None:
        self._write_all(struct.pack(_float_format(width, self.order), n))

    # Stream reads.

    def read_u8(self) -> int:
        return self._read_int(1, False)

    def read_i8(self) -> int:
        return self._read_int(1, True)

    def read_u16(self) -> int:
        return self._read_int(2, False)

    def read_i16(self) -> int:
        return self._read_int(2, True)

    def read_u32(self) -> int:
        return self._read_int(4, False)

    def read_i32(self) -> int:
        return self._read_int(4, True)

    def read_u64(self) -> int:
        return self._read_int(8, False)

    def read_i64(self) -> int:
        return self._read_int(8, True)

    def read_uint(self, nbytes: int) -> int:
        return self._read_int(nbytes, False)

    def read_int(self, nbytes: int) -> int:
        return self._read_int(nbytes, True)

    def read_f32(self) -> float:
        return self._read_float(4)

    def read_f64(self) -> float:
        return self._read_float(8)

    # Stream writes.

    def write_u8(self, n: int) -> None:
        self._write_int(n, 1, False)

    def write_i8(self, n: int) -> None:
        self._write_int(n, 1, True)

    def write_u16(self, n: int) -> None:
        self._write_int(n, 2, False)

    def write_i16(self, n: int) -> None:
        self._write_int(n, 2, True)

    def write_u32(self, n: int) -> None:
        self._write_int(n, 4, False)

    def write_i32(self, n: int) -> None:
        self._write_int(n, 4, True)

    def write_u64(self, n: int) -> None:
        self._write_int(n, 8, False)

    def write_i64(self, n: int) -> None:
        self._write_int(n, 8, True)

    def write_uint(self, n: int, nbytes: int) -> None:
        self._write_int(n, nbytes, False)

    def write_int(self, n: int, nbytes: int) -> None:
        self._write_int(n, nbytes, True)

    def write_f32(self, n: float) -> None:
        self._write_float(n, 4)

    def write_f64(self, n: float) -> None:
        self._write_float(n, 8)

    # Positioned reads.

    def read_u8_at(self, pos: int) -> int:
        return read_int_at(self.inner, pos, 1, self.order, False)

    def read_i8_at(self, pos: int) -> int:
        return read_int_at(self.inner, pos, 1, self.order, True)

    def read_u16_at(self, pos: int) -> int:
        return read_int_at(self.inner, pos, 2, self.order, False)

    def read_i16_at(self, pos: int) -> int:
        return read_int_at(self.inner, pos, 2, self.order, True)

    def read_u32_at(self, pos: int) -> int:
        return read_int_at(self.inner, pos, 4, self.order, False)

    def read_i32_at(self, pos: int) -> int:
        return read_int_at(self.inner, pos, 4, self.order, True)

    def read_u64_at(self, pos: int) -> int:
        return read_int_at(self.inner, pos, 8, self.order, False)

    def read_i64_at(self, pos: int) -> int:
        return read_int_at(self.inner, pos, 8, self.order, True)

    def read_uint_at(self, pos: int, nbytes: int) -> int:
        return read_int_at(self.inner, pos, nbytes, self.order, False)

    def read_int_at(self, pos: int, nbytes: int) -> int:
        return read_int_at(self.inner, pos, nbytes, self.order, True)

    def read_f32_at(self, pos: int) -> float:
        return read_float_at(self.inner, pos, 4, self.order)

    def read_f64_at(self, pos: int) -> float:
        return read_float_at(self.inner, pos, 8, self.order)

    # Positioned writes.

    def write_u8_at(self, pos: int, n: int) -> None:
        write_int_at(self.inner, pos, n, 1, self.order, False)

    def write_i8_at(self, pos: int, n: int) -> None:
        write_int_at(self.inner, pos, n, 1, self.order, True)

    def write_u16_at(self, pos: int, n: int) -> None:
        write_int_at(self.inner, pos, n, 2, self.order, False)

    def write_i16_at(self, pos: int, n: int) -> None:
        write_int_at(self.inner, pos, n, 2, self.order, True)

    def write_u32_at(self, pos: int, n: int) -> None:
        write_int_at(self.inner, pos, n, 4, self.order, False)

    def write_i32_at(self, pos: int, n: int) -> None:
        write_int_at(self.inner, pos, n, 4, self.order, True)

    def write_u64_at(self, pos: int, n: int) -> None:
        write_int_at(self.inner, pos, n, 8, self.order, False)

    def write_i64_at(self, pos: int, n: int) -> None:
        write_int_at(self.inner, pos, n, 8, self.order, True)

    def write_uint_at(self, pos: int, n: int, nbytes: int) -> None:
        write_int_at(self.inner, pos, n, nbytes, self.order, False)

    def write_int_at(self, pos: int, n: int, nbytes: int) -> None:
        write_int_at(self.inner, pos, n, nbytes, self.order, True)

    def write_f32_at(self, pos: int, n: float) -> None:
        write_float_at(self.inner, pos, n, 4, self.order)

    def write_f64_at(self, pos: int, n: float) -> None:
        write_float_at(self.inner, pos, n, 8, self.order)