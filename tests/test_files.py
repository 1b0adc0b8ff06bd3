import io
import os
import tempfile

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from offsetio.base import ReadAt
from offsetio.buffers import GrowableBuffer
from offsetio.files import FileAt, RandomAccessFile

PI_TEXT = b"3.14159265358979323846264338327950288419716939937510\n"


@pytest.fixture
def pi_path(tmp_path):
    path = tmp_path / "pi.txt"
    path.write_bytes(PI_TEXT)
    return path


def test_read_at(pi_path):
    with open(pi_path, "rb") as f:
        assert FileAt(f).read_exact_at(10, 4) == b"3589"


def test_mixed_read(pi_path):
    with open(pi_path, "rb") as f:
        assert f.read(4) == b"3.14"
        assert FileAt(f).read_exact_at(18, 4) == b"3846"
        assert f.read(4) == b"1592"


class ReadCustom(ReadAt):
    def __init__(self, inner, error):
        self.inner = inner
        self.error = error
        self.fail = True

    def read_at(self, pos, n):
        fail = self.fail
        self.fail = not fail
        if fail:
            raise self.error
        return self.inner.read_at(pos, n)


def test_read_fails(pi_path):
    with open(pi_path, "rb") as f:
        file = FileAt(f)
        interrupt = ReadCustom(file, InterruptedError("interrupt!"))
        assert interrupt.read_exact_at(10, 4) == b"3589"

        fail = ReadCustom(file, OSError("random fail"))
        with pytest.raises(OSError, match="random fail"):
            fail.read_exact_at(10, 4)

        with pytest.raises(EOFError):
            file.read_exact_at(1000000000, 4)


def test_size(pi_path):
    with open(pi_path, "rb") as f:
        assert FileAt(f).size() == len(PI_TEXT)


def test_size_of_pipe_is_unknown():
    read_fd, write_fd = os.pipe()
    os.close(write_fd)
    with open(read_fd, "rb", buffering=0) as f:
        assert FileAt(f).size() is None


def test_write_past_end_fills_zeros(tmp_path):
    path = tmp_path / "out.bin"
    with open(path, "w+b", buffering=0) as f:
        file = FileAt(f)
        file.write_all_at(3, b"z")
        file.flush()
        assert f.tell() == 0
    assert path.read_bytes() == b"\x00\x00\x00z"


def test_file_without_descriptor_keeps_position():
    f = io.BytesIO(b"abc")
    f.seek(1)
    file = FileAt(f)
    file.write_all_at(5, b"xy")
    assert f.getvalue() == b"abc\x00\x00xy"
    assert file.read_exact_at(0, 2) == b"ab"
    assert file.size() == 7
    assert f.tell() == 1


def test_shared_refs():
    with tempfile.TemporaryFile() as tmp:
        raf = RandomAccessFile(tmp)
        raf.write_at(1, bytes([1, 2, 3, 4]))
        assert raf.read_exact_at(0, 3) == bytes([0, 1, 2])


def test_random_access_file_open(pi_path):
    with RandomAccessFile.open(pi_path) as raf:
        assert raf.read_at(2, 4) == b"1415"
        assert raf.size() == len(PI_TEXT)
        inner = raf.file
    assert inner.closed


def test_random_access_file_write_mode(pi_path):
    with RandomAccessFile.open(pi_path, "r+b") as raf:
        raf.write_all_at(0, b"X")
    assert pi_path.read_bytes() == b"X" + PI_TEXT[1:]


def test_random_access_file_rejects_text_mode(pi_path):
    with pytest.raises(ValueError):
        RandomAccessFile.open(pi_path, "r")


def test_into_inner_keeps_position(pi_path):
    with open(pi_path, "rb") as f:
        f.seek(7)
        raf = RandomAccessFile(f)
        raf.read_exact_at(20, 3)
        inner = raf.into_inner()
        assert inner is f
        assert inner.tell() == 7


def _read_exact(f, n):
    data = bytearray()
    while len(data) < n:
        chunk = f.read(n - len(data))
        if not chunk:
            return None
        data += chunk
    return bytes(data)


_OPS = st.lists(
    st.one_of(
        st.tuples(st.just("write_all"), st.binary(max_size=64)),
        st.tuples(
            st.just("write_all_at"),
            st.integers(min_value=0, max_value=12344),
            st.binary(max_size=64),
        ),
        st.tuples(st.just("read_exact"), st.integers(min_value=0, max_value=200)),
        st.tuples(
            st.just("read_exact_at"),
            st.integers(min_value=0, max_value=2**40),
            st.integers(min_value=0, max_value=200),
        ),
        st.tuples(st.just("seek"), st.integers(min_value=0, max_value=12344)),
        st.tuples(st.just("flush")),
    ),
    max_size=30,
)


@settings(max_examples=60, deadline=None)
@given(_OPS)
def test_file_matches_model(ops):
    model = GrowableBuffer()
    model_pos = 0
    with tempfile.TemporaryFile(buffering=0) as f:
        file = FileAt(f)
        for op in ops:
            match op:
                case ("write_all", data):
                    model.write_all_at(model_pos, data)
                    model_pos += len(data)
                    assert f.write(data) == len(data)
                case ("write_all_at", at, data):
                    model.write_all_at(at, data)
                    file.write_all_at(at, data)
                case ("read_exact", n):
                    if n == 0:
                        expected = b""
                    elif model_pos + n > len(model):
                        expected = None
                        model_pos = len(model)
                    else:
                        expected = model.read_exact_at(model_pos, n)
                        model_pos += n
                    assert _read_exact(f, n) == expected
                case ("read_exact_at", at, n):
                    try:
                        expected = model.read_exact_at(at, n)
                    except EOFError:
                        with pytest.raises(EOFError):
                            file.read_exact_at(at, n)
                    else:
                        assert file.read_exact_at(at, n) == expected
                case ("seek", pos):
                    model_pos = min(pos, len(model))
                    assert f.seek(model_pos) == model_pos
                case ("flush",):
                    file.flush()
        assert file.size() == len(model)
        assert file.read_exact_at(0, len(model)) == bytes(model)