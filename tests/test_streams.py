import io
import os

import pytest

from dcdump.exceptions import WriteError
from dcdump.layout import MAX_OFFSET
from dcdump.streams import Stream, Sink, copy_stream


class NotSeekable(object):

    def __init__(self, data):
        self.data = io.BytesIO(data)

    def read(self, n=-1):
        return self.data.read(n)

    def seekable(self):
        return False


def test_bytes_stream():
    stream = Stream(b'\x01\x02\x03')

    assert stream.size == 3
    assert stream.max_size == 3
    assert stream.read(1) == b'\x01'


def test_path_stream(tmp_path):
    path = tmp_path / 'input.bin'
    path.write_bytes(b'\x00' * 1234)

    with Stream(path) as stream:
        assert stream.size == 1234
        assert stream.read() == b'\x00' * 1234

    assert stream.obj.closed


def test_missing_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        Stream(str(tmp_path / 'missing'))


def test_stream_size_from_position():
    data = io.BytesIO(b'0123456789')
    data.seek(4)

    stream = Stream(data)

    assert stream.size == 6
    assert stream.read() == b'456789'


def test_file_object_is_not_closed():
    data = io.BytesIO(b'abc')

    Stream(data).close()

    assert not data.closed


def test_not_seekable_stream():
    stream = Stream(NotSeekable(b'abc'))

    assert stream.size is None
    assert stream.max_size == MAX_OFFSET


def test_wrong_stream_object():
    with pytest.raises(ValueError):
        Stream(1.0)


def test_sink_file_object():
    output = io.BytesIO()
    sink = Sink(output)

    assert sink.write(b'kebab') == 5
    sink.close()

    assert output.getvalue() == b'kebab'
    assert not output.closed


def test_sink_path(tmp_path):
    path = tmp_path / 'out.txt'

    with Sink(str(path)) as sink:
        sink.write(b'data')

    assert path.read_bytes() == b'data'


def test_sink_fd(tmp_path):
    path = tmp_path / 'out.txt'
    fd = os.open(str(path), os.O_WRONLY | os.O_CREAT)
    try:
        sink = Sink(fd)
        sink.write(b'\x00\x01')
        sink.flush()
    finally:
        os.close(fd)

    assert path.read_bytes() == b'\x00\x01'


def test_sink_partial_write():
    class Partial:
        def write(self, data):
            return len(data) - 1

    with pytest.raises(WriteError) as excinfo:
        Sink(Partial()).write(b'abcd')

    assert excinfo.value.expected == 4
    assert excinfo.value.written == 3


def test_sink_failing_write():
    class Failing:
        def write(self, data):
            raise OSError('no space left on device')

    with pytest.raises(WriteError) as excinfo:
        Sink(Failing()).write(b'abcd')

    assert isinstance(excinfo.value.__cause__, OSError)


def test_wrong_sink_object():
    with pytest.raises(ValueError):
        Sink(object())


def test_copy_stream():
    seen = []
    destination = io.BytesIO()

    count = copy_stream(Stream(b'hello'), destination, lambda byte, offset: seen.append((byte, offset)), buffer_size=2)

    assert count == 5
    assert destination.getvalue() == b'hello'
    assert seen == [(ord(c), idx) for idx, c in enumerate('hello')]


def test_copy_stream_without_destination():
    seen = []

    count = copy_stream(NotSeekable(b'xy'), None, lambda byte, offset: seen.append(offset))

    assert count == 2
    assert seen == [0, 1]


def test_copy_stream_buffer_size():
    with pytest.raises(ValueError):
        copy_stream(Stream(b'x'), None, print, buffer_size=0)
