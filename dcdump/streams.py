import io
import os
import logging

from .exceptions import WriteError
from .layout import MAX_OFFSET


logger = logging.getLogger(__name__)

BUFFER_SIZE = 1024


class Stream(object):
    '''This is a simple wrapper around bytes/path/file object to
    uniform its properties: mainly we need to know how many bytes
    are available to size the dump.'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        if isinstance(obj, os.PathLike):
            obj = os.fspath(obj)

        self.obj = obj
        self.owned = False
        self.size = None

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, self.init_file)

        init_method()

        self.size = self._discover_size()

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def __repr__(self):
        return '<%s(%r, size=%r)>' % (self.__class__.__name__, self.obj, self.size)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def init_str(self):
        '''We think this is a path'''
        logger.debug('opening path \'%s\'', self.obj)
        self.obj = open(self.obj, 'rb')
        self.owned = True

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)

    init_bytearray = init_bytes

    def init_int(self):
        '''We think this is a file descriptor'''
        self.obj = os.fdopen(self.obj, 'rb', closefd=False)
        self.owned = True

    def init_file(self):
        if not hasattr(self.obj, 'read'):
            raise ValueError('\'%s\' is the wrong kind of object to read from' % self.obj.__class__.__name__)

    def _discover_size(self):
        '''Bytes left from the actual position, None if it can't be known.'''
        seekable = getattr(self.obj, 'seekable', None)
        if seekable is None or not seekable():
            return None

        position = self.obj.tell()
        end = self.obj.seek(0, io.SEEK_END)
        self.obj.seek(position)

        return end - position

    @property
    def max_size(self) -> int:
        return self.size if self.size is not None else MAX_OFFSET

    def close(self):
        if self.owned:
            self.obj.close()


class Sink(object):
    '''Destination for ordered writes of bytes.

    A write is either complete or it raises WriteError: no retry is
    attempted, that is left to the object wrapped.'''
    def __init__(self, obj):
        if isinstance(obj, os.PathLike):
            obj = os.fspath(obj)

        self.obj = obj
        self.owned = False

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, self.init_file)

        init_method()

    def __repr__(self):
        return '<%s(%r)>' % (self.__class__.__name__, self.obj)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def init_str(self):
        logger.debug('opening path \'%s\' for writing', self.obj)
        self.obj = open(self.obj, 'wb')
        self.owned = True

    def init_int(self):
        fd = self.obj
        self._write = lambda data: os.write(fd, data)

    def init_file(self):
        if not hasattr(self.obj, 'write'):
            raise ValueError('\'%s\' is the wrong kind of object to write to' % self.obj.__class__.__name__)

    def _write(self, data):
        return self.obj.write(data)

    def write(self, data: bytes) -> int:
        try:
            written = self._write(data)
        except OSError as e:
            raise WriteError(len(data)) from e

        # some file objects return None
        if written is None:
            written = len(data)

        if written != len(data):
            raise WriteError(len(data), written)

        return written

    def flush(self):
        flush = getattr(self.obj, 'flush', None)
        if flush is None:
            return

        try:
            flush()
        except OSError as e:
            raise WriteError(0) from e

    def close(self):
        if self.owned:
            self.obj.close()


def copy_stream(source, destination, callback, buffer_size: int = BUFFER_SIZE) -> int:
    '''Copy source into destination calling callback(byte, offset) for each byte.

    The destination can be None, in this case the data is only passed to the callback.'''
    if buffer_size <= 0:
        raise ValueError(f'buffer size must be positive, not {buffer_size}')

    offset = 0
    while True:
        chunk = source.read(buffer_size)
        if not chunk:
            break

        if destination is not None:
            destination.write(chunk)

        for byte in chunk:
            callback(byte, offset)
            offset += 1

    logger.debug('copied %d bytes', offset)

    return offset
