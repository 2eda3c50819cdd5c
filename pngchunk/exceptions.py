class PngChunkException(Exception):
    '''Base class to extend in order to throw exception in pngchunk.

    It takes a keyword argument that represents the chain of the fields that
    caused the exception.
    '''

    def __init__(self, *args, chain=None):
        self.chain = chain if chain is not None else []
        super().__init__(*args)


class ChunkTypeException(PngChunkException):
    pass


class BadByteException(ChunkTypeException):

    def __init__(self, byte, **kwargs):
        self.byte = byte
        super().__init__(f'bad byte: {byte}', **kwargs)


class BadLengthException(ChunkTypeException):

    def __init__(self, value, length, **kwargs):
        self.value = value
        self.length = length
        super().__init__(f'bad length for {value!r} is {length}', **kwargs)


class ChunkException(PngChunkException):
    pass


class UnpackException(ChunkException):
    '''The stream doesn't have enough data for the field we are reading.'''
    pass


class MaxLengthException(ChunkException):

    def __init__(self, length, **kwargs):
        self.length = length
        super().__init__(f'length {length} is too long', **kwargs)


class InvalidChunkTypeException(ChunkException):
    pass


class InvalidChunkDataException(UnpackException):
    '''The data available is shorter than what the length field declares.'''

    def __init__(self, actual, expected, **kwargs):
        self.actual = actual
        self.expected = expected
        chain = kwargs.get('chain') or ['data']
        super().__init__(f'{chain[-1]} (len {actual}) is the wrong length (expected {expected})', **kwargs)


class InvalidCrcException(ChunkException):

    def __init__(self, provided, expected, **kwargs):
        self.provided = provided
        self.expected = expected
        super().__init__(f'invalid crc 0x{provided:08x} (expected 0x{expected:08x})', **kwargs)
