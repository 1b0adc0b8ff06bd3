# offsetio

Read and write at an offset without changing any current position, in the
manner of `pread()` and `pwrite()`.

- No seeking is needed before a random-access read or write.
- Reads never change the object they read from.

It is a library only; it has no command-line interface.

## Installing

```
pip install offsetio
```

## The three protocols

`offsetio.base` defines three abstract classes:

- `ReadAt.read_at(pos, n)` returns up to `n` bytes starting at `pos` (fewer,
  or none, at the end of the data). `read_exact_at(pos, n)` returns exactly
  `n` bytes or raises `EOFError`; reads that raise `InterruptedError` are
  retried.
- `WriteAt.write_at(pos, data)` writes some of `data` at `pos` and returns the
  count written. `write_all_at(pos, data)` writes all of it, retrying
  interrupted writes, and raises `WriteZeroError` (a subclass of `OSError`)
  if the sink accepts no bytes. `flush()` pushes out anything buffered.
- `Size.size()` returns the size in bytes, or `None` when it is unknown.

## Implementations

- `offsetio.buffers.FixedBuffer(data)` wraps any bytes-like object. Reads past
  its end return nothing; writes go into the object and stop at its end.
  A read-only object such as `bytes` refuses writes with
  `io.UnsupportedOperation`.
- `offsetio.buffers.GrowableBuffer(data=b"")` grows on writes past its end,
  filling any gap with zeros. A `bytearray` passed in is used directly and is
  available as `.data`.
- `offsetio.files.FileAt(file)` wraps an open binary file. Where the platform
  has `os.pread`/`os.pwrite` they are used and the file position is never
  touched; otherwise the position is saved and restored around each call.
  `size()` is `None` for anything that is not a regular file.
- `offsetio.files.RandomAccessFile` is a `FileAt` that, on Linux, advises the
  kernel that access will be random. `RandomAccessFile.open(path, mode="rb")`
  opens a file unbuffered (the mode must be binary); the object works as a
  context manager, and `into_inner()` hands back the wrapped file.

```python
from offsetio.files import RandomAccessFile

with RandomAccessFile.open("pi.txt") as raf:
    sector = raf.read_at(2048, 512)
```

## Views and streams

- `offsetio.slice.Slice(inner, offset=0, size=None)` is a window into another
  object; positions are relative to `offset`, and with `size=None` the window
  is unbounded. `Slice.to_end(inner, offset)` runs to the current end of
  `inner` and raises `ValueError` when that size is unknown.
- `offsetio.cursor.Cursor(inner, pos=0)` turns a positioned object into an
  ordinary `io.RawIOBase` stream with its own position. It cannot seek from
  the end (`io.UnsupportedOperation`). `SizeCursor` can, using the inner
  object's `size()`. Closing a cursor does not close the inner object.

```python
from offsetio.buffers import GrowableBuffer
from offsetio.slice import Slice

buf = GrowableBuffer(bytes([0, 1, 2, 3, 4, 5]))
Slice(buf, 2, None).write_all_at(3, bytes([9, 9, 9]))
# buf.data is now bytearray(b"\x00\x01\x02\x03\x04\t\t\t")
```

## Numbers at offsets

`offsetio.byteio` reads and writes integers of 1 to 8 bytes and 4- or 8-byte
floats at offsets, in a `ByteOrder` (`BIG` or `LITTLE`):

- `read_int_at(source, pos, nbytes, order, signed=False)`
- `write_int_at(sink, pos, value, nbytes, order, signed=False)`, raising
  `OverflowError` when the value does not fit
- `read_float_at(source, pos, width, order)`
- `write_float_at(sink, pos, value, width, order)`

```python
from offsetio.buffers import FixedBuffer
from offsetio.byteio import ByteOrder, read_int_at

data = FixedBuffer(bytearray([0, 5, 254, 212, 0, 3]))
read_int_at(data, 2, 2, ByteOrder.BIG, True)  # -300
```

`ByteIo(inner, order)` fixes the byte order once. Its `*_at` methods
(`read_u16_at(pos)`, `write_i32_at(pos, n)`, `read_f64_at(pos)`, ...) work on
a positioned `inner`; its stream methods (`read_u16()`, `write_i32(n)`,
`read_f64()`, ...) work on an `inner` with `read`/`write`, such as a `Cursor`,
and raise `EOFError` when the stream ends early.