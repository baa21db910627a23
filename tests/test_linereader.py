import io

import pytest

from pyftls.linereader import BUFFER_SIZE, LineReader


class _RecordingStream:
    def __init__(self, data):
        self._inner = io.BytesIO(data)
        self.sizes = []

    def read(self, n):
        self.sizes.append(n)
        return self._inner.read(n)


@pytest.mark.parametrize("size", [1, 2, 5, 7, 64])
def test_text_lines_round_trip(size):
    data = "first line\nsecond\n\nlast without newline"
    lines = list(LineReader(io.StringIO(data), size))
    assert "".join(lines) == data
    assert lines == data.splitlines(keepends=True)


@pytest.mark.parametrize("size", [1, 3, 5, 100])
def test_binary_lines_round_trip(size):
    data = b"alpha\nbeta\ngamma\n"
    lines = list(LineReader(io.BytesIO(data), size))
    assert lines == data.splitlines(keepends=True)
    assert all(line.endswith(b"\n") for line in lines)


def test_returns_none_after_end():
    reader = LineReader(io.StringIO("only\n"))
    assert reader.next_line() == "only\n"
    assert reader.next_line() is None
    assert reader.next_line() is None


def test_empty_stream_gives_nothing():
    reader = LineReader(io.BytesIO(b""))
    assert reader.next_line() is None
    assert list(LineReader(io.StringIO(""))) == []


def test_reads_use_buffer_size():
    stream = _RecordingStream(b"one\ntwo\nthree\n")
    lines = list(LineReader(stream, 3))
    assert lines == [b"one\n", b"two\n", b"three\n"]
    assert set(stream.sizes) == {3}


def test_default_buffer_size():
    stream = _RecordingStream(b"x\n")
    LineReader(stream).next_line()
    assert stream.sizes[0] == BUFFER_SIZE


@pytest.mark.parametrize("size", [0, -1])
def test_rejects_non_positive_buffer(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a"), size)