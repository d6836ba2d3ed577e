class DumpException(Exception):
    '''Base class to extend in order to throw exception in dcdump.'''
    pass


class InvalidSize(DumpException, ValueError):
    '''The maximum size used to build a layout makes no sense.'''

    def __init__(self, size):
        self.size = size
        super().__init__(f'invalid maximum size {size!r}')


class WriteError(DumpException):
    '''The output sink refused the data or accepted only part of it.'''

    def __init__(self, expected, written=None):
        self.expected = expected
        self.written = written
        if written is None:
            msg = f'failed to write {expected} bytes'
        else:
            msg = f'partial write: {written} of {expected} bytes'
        super().__init__(msg)


class FieldOverflow(DumpException):
    '''A counter needs more digits than the layout reserved for it.

    This is a contract violation: whoever sized the layout passed a
    maximum smaller than the actual data.'''

    def __init__(self, field, value, width):
        self.field = field
        self.value = value
        self.width = width
        super().__init__(f'{field} {value} does not fit in {width} digits')


class ConfigError(DumpException):
    pass
