'''
# Chunk

This is the main data structure of the format: the 4 fields represent
a chunk into the file. Each integer field is intended big-endian.

    .--------.------.------------------.-----.
    | length | type | data             | crc |
    '--------'------'------------------'-----'
        4       4        length           4

The crc field is network-byte-order CRC-32 computed over the chunk type and
chunk data, but not the length.
'''
import logging

from . import fields
from .chunk_type import ChunkType
from .common import crc
from .enum import Compliant, Endianess
from .exceptions import (
    ChunkTypeException,
    InvalidChunkTypeException,
    InvalidCrcException,
    MaxLengthException,
)
from .streams import Stream


logger = logging.getLogger(__name__)


MAX_LENGTH = 0xffffffff


class Chunk(object):
    '''Immutable record made of length, type, data and crc.

    Building it from a type and some data computes length and crc, so it can't
    be in an inconsistent state; use unpack() to obtain one from raw bytes.
    '''

    length_field = fields.StructField('I', name='length', endianess=Endianess.BIG_ENDIAN)
    type_field   = fields.StringField(ChunkType.SIZE, name='type')
    crc_field    = crc.CRCField(name='crc', endianess=Endianess.BIG_ENDIAN)  # network byte order

    __slots__ = ('_length', '_chunk_type', '_data', '_crc')

    def __init__(self, chunk_type, data=b''):
        if not isinstance(chunk_type, ChunkType):
            chunk_type = ChunkType(chunk_type)

        if isinstance(data, (int, str)):
            raise TypeError(f'data must be bytes-like, not {data.__class__.__name__}')

        data = bytes(data)

        if len(data) > MAX_LENGTH:
            raise MaxLengthException(len(data), chain=['data'])

        self._set(len(data), chunk_type, data, self.crc_field.calculate(chunk_type.raw, data))

    def _set(self, length, chunk_type, data, crc):
        object.__setattr__(self, '_length', length)
        object.__setattr__(self, '_chunk_type', chunk_type)
        object.__setattr__(self, '_data', data)
        object.__setattr__(self, '_crc', crc)

    def __setattr__(self, name, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __reduce__(self):
        return (self.__class__, (self._chunk_type, self._data))

    @classmethod
    def unpack(cls, stream, compliant=Compliant.NONE) -> "Chunk":
        '''Take raw data and transform it into a Chunk.

        The stream can be raw bytes, a path or a Stream instance; in the latter case
        the cursor is left just after the crc so that the caller can go on
        reading whatever follows. Trailing data is never touched. A stream
        opened here is closed before returning.

        Every step fails fast raising an exception, no partial chunk is returned.
        '''
        if isinstance(stream, Stream):
            return cls._unpack(stream, compliant)

        with Stream(stream) as owned:
            return cls._unpack(owned, compliant)

    @classmethod
    def _unpack(cls, stream, compliant):
        logger.debug('unpacking \'%s\' from %r' % (cls.__name__, stream))

        length = cls.length_field.unpack(stream)
        if length > MAX_LENGTH:
            raise MaxLengthException(length, chain=['length'])

        raw_type = cls.type_field.unpack(stream)
        try:
            chunk_type = ChunkType.from_bytes(raw_type)
        except ChunkTypeException as e:
            raise InvalidChunkTypeException(f'invalid chunk type {raw_type!r}', chain=['type']) from e

        if compliant & Compliant.RESERVED and not chunk_type.is_valid():
            raise InvalidChunkTypeException(f'chunk type \'{chunk_type}\' has the reserved bit set', chain=['type'])

        data = fields.DataField(length, name='data').unpack(stream)

        provided_crc = cls.crc_field.unpack(stream)
        true_crc = cls.crc_field.calculate(chunk_type.raw, data)
        if provided_crc != true_crc:
            raise InvalidCrcException(provided_crc, true_crc, chain=['crc'])

        logger.debug('unpacked chunk \'%s\' with %d bytes of data' % (chunk_type, length))

        chunk = cls.__new__(cls)
        chunk._set(length, chunk_type, data, provided_crc)

        return chunk

    def pack(self) -> bytes:
        return b''.join([
            self.length_field.pack(self._length),
            self.type_field.pack(self._chunk_type.raw),
            self._data,
            self.crc_field.pack(self._crc),
        ])

    @property
    def raw(self) -> bytes:
        return self.pack()

    def __bytes__(self):
        return self.pack()

    @property
    def length(self) -> int:
        return self._length

    @property
    def chunk_type(self) -> ChunkType:
        return self._chunk_type

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def crc(self) -> int:
        return self._crc

    @property
    def size(self) -> int:
        '''Number of bytes of the packed chunk.'''
        return self.length_field.size + self.type_field.size + self._length + self.crc_field.size

    def data_as_str(self) -> str:
        return self._data.decode('utf-8')

    def __eq__(self, other):
        if not isinstance(other, Chunk):
            return NotImplemented

        return (self._length, self._chunk_type, self._data, self._crc) == \
            (other._length, other._chunk_type, other._data, other._crc)

    def __hash__(self):
        return hash((self._length, self._chunk_type, self._data, self._crc))

    def __repr__(self):
        return '<%s(length=%d,type=%s,crc=0x%08x)>' % (
            self.__class__.__name__,
            self._length,
            self._chunk_type,
            self._crc,
        )

    def __str__(self):
        return (
            'Chunk {\n'
            f'  Length: {self._length}\n'
            f'  Type: {self._chunk_type}\n'
            f'  Data: {len(self._data)} bytes\n'
            f'  Crc: {self._crc}\n'
            '}\n'
        )
