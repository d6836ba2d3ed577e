"""
Rendering of the dump: one line for each byte of the input.

The per-byte work happens in render_byte(), that takes the state of the
run (layout, output sink and the line/column counters) and a single byte
with its offset, writes the line to the sink and moves the counters.

A DumpState is callable, so it can be handed directly to copy_stream()
as the callback for each byte.
"""
import logging
from typing import NamedTuple

from bitstring import Bits

from .control import is_printable, is_control, name_for_control_code, UNKNOWN
from .exceptions import FieldOverflow
from .layout import compute_layout, digit_count
from .streams import Stream, Sink, copy_stream


logger = logging.getLogger(__name__)

SEPARATOR = ' : '
PRINTABLE_WIDTH = 4


class RenderedLine(NamedTuple):
    offset: str
    line_number: str
    column: str
    binary: str
    octal: str
    decimal: str
    hexadecimal: str
    printable: str

    def __str__(self):
        return SEPARATOR.join((
            ' '.join((self.offset, self.line_number, self.column)),
            self.binary,
            self.octal,
            self.decimal,
            self.hexadecimal,
            self.printable.ljust(PRINTABLE_WIDTH),
        ))

    @classmethod
    def parse(cls, text: str) -> "RenderedLine":
        '''Split a line back into its fields using their position.'''
        text = text.rstrip('\n')
        try:
            counters, binary, octal, decimal, hexadecimal, printable = text.split(SEPARATOR, 5)
            offset, line_number, column = counters.split(' ')
        except ValueError:
            raise ValueError(f'malformed dump line {text!r}') from None

        # the only printable value made of spaces is the space itself
        printable = printable.rstrip(' ') or ' '

        return cls(offset, line_number, column, binary, octal, decimal, hexadecimal, printable)


def printable_field(byte: int) -> str:
    if is_printable(byte):
        return chr(byte)

    if is_control(byte):
        return name_for_control_code(byte)

    return UNKNOWN


class DumpState(object):
    '''Everything that a run needs to carry from one byte to the next.

    A sink given by the caller is only flushed on close, one built here
    from a path or a file descriptor is closed too.'''

    def __init__(self, sink, max_size: int):
        self.owns_sink = not isinstance(sink, Sink)
        self.sink = Sink(sink) if self.owns_sink else sink
        self.layout = compute_layout(max_size)
        self.line_number = 1
        self.column = 1
        self.closed = False

    def __repr__(self):
        return '<%s(line_number=%d, column=%d, layout=%r)>' % (
            self.__class__.__name__, self.line_number, self.column, self.layout)

    def __call__(self, byte: int, offset: int) -> RenderedLine:
        return render_byte(self, byte, offset)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        if not self.closed:
            self.sink.flush()
            if self.owns_sink:
                self.sink.close()
            self.closed = True


def render_byte(state: DumpState, byte: int, offset: int) -> RenderedLine:
    if state.closed:
        raise ValueError('rendering on a closed dump state')

    if not 0 <= byte <= 0xff:
        raise ValueError(f'{byte} is not a byte value')

    if offset < 0:
        raise ValueError(f'negative offset {offset}')

    width = state.layout.field_width

    for name, value in (('offset', offset), ('line number', state.line_number), ('column', state.column)):
        if digit_count(value) > width:
            raise FieldOverflow(name, value, width)

    line = RenderedLine(
        offset=f'{offset:0{width}d}',
        line_number=f'{state.line_number:0{width}d}',
        column=f'{state.column:0{width}d}',
        binary=Bits(uint=byte, length=8).bin,
        octal=f'0{byte:03o}',
        decimal=f'{byte:03d}',
        hexadecimal=f'0x{byte:02X}',
        printable=printable_field(byte),
    )

    state.sink.write((str(line) + '\n').encode('ascii'))

    if byte == 0x0a:
        state.line_number += 1
        state.column = 1
    else:
        state.column += 1

    return line


def dump(source, sink, destination=None, max_size=None) -> int:
    '''Dump every byte of source into sink, copying the data into destination if any.

    When max_size is not given it's derived from the source, falling back
    to the biggest offset possible when the source is not seekable.

    It returns the number of bytes dumped.'''
    owned = not isinstance(source, Stream)
    stream = Stream(source) if owned else source
    owns_destination = destination is not None and not isinstance(destination, Sink)

    try:
        if max_size is None:
            max_size = stream.max_size

        if owns_destination:
            destination = Sink(destination)

        logger.debug('dumping %r with max size %d', stream, max_size)

        with DumpState(sink, max_size) as state:
            count = copy_stream(stream, destination, state)

        if destination is not None:
            destination.flush()
    finally:
        if owned:
            stream.close()
        if owns_destination and isinstance(destination, Sink):
            destination.close()

    return count
