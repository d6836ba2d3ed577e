"""
Layout of a dump line.

Every line of a run has the same shape

    OOOO LLLL CCCC : 10110010 : 0262 : 178 : 0xB2 : ????

where the first three fields (offset, line number and column) are wide as
the number of decimal digits of the biggest offset possible for the input;
all the other fields have a fixed size.
"""
import logging
from typing import NamedTuple

from .exceptions import InvalidSize


logger = logging.getLogger(__name__)

# largest value of an off_t: used when the size of the input is not known
MAX_OFFSET = 2 ** 63 - 1

# 3 * "%0*d " where * is the field width
# ": 11111111 " for binary (11)
# ": 0### " for octal (7)
# ": ### " for decimal (6)
# ": 0x## " for hex (8)
# ": ????" for the printable value (6)
# newline/terminator (1)
BINARY_SIZE = 11
OCTAL_SIZE = 7
DECIMAL_SIZE = 6
HEX_SIZE = 8
PRINTABLE_SIZE = 6
TERMINATOR_SIZE = 1


class Layout(NamedTuple):
    field_width: int
    line_capacity: int


def digit_count(n: int) -> int:
    '''Number of base-10 digits of n.

    Computed on the string representation since log10() loses precision
    for big values (999999999999999999 would result in 19).'''
    if n < 0:
        raise ValueError(f'digit count of negative number {n}')

    return len(str(n))


def compute_layout(max_size: int) -> Layout:
    if isinstance(max_size, bool) or not isinstance(max_size, int) or max_size < 0:
        raise InvalidSize(max_size)

    field_width = max(1, digit_count(max_size))
    line_capacity = (3 * (field_width + 1)) \
        + BINARY_SIZE + OCTAL_SIZE + DECIMAL_SIZE + HEX_SIZE + PRINTABLE_SIZE + TERMINATOR_SIZE

    logger.debug('layout for max size %d: field width %d, line capacity %d', max_size, field_width, line_capacity)

    return Layout(field_width, line_capacity)
