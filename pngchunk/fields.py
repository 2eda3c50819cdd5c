"""
A Field is "fundamental" datatype from the format point of view, something directly
packable/unpackable from a stream.

The fields here are stateless: they know how to encode a value into bytes and
how to read it back from a Stream, the values themselves live into the Chunk.
"""
import logging
import struct

from .enum import Endianess
from .exceptions import UnpackException, InvalidChunkDataException


class Field(object):
    """Base class to subclass from"""

    def __init__(self, name=None, endianess=Endianess.LITTLE_ENDIAN):
        self.logger = logging.getLogger(__name__)
        self.name = name
        self.endianess = endianess

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, self.name)

    def _get_size(self):
        raise NotImplementedError(f"method {self.__class__.__name__}._get_size() not implemented")

    size = property(
        fget=lambda self: self._get_size(),
    )

    def _read(self, stream) -> bytes:
        offset = stream.tell()
        raw = stream.read(self.size)
        self.logger.debug('read %d bytes for field \'%s\' at offset %d' % (len(raw), self.name, offset))

        return raw

    def pack(self, value) -> bytes:
        raise NotImplementedError('you need to implement this in the subclass')

    def unpack(self, stream):
        raise NotImplementedError('you need to implement this in the subclass')


class StructField(Field):
    """
    Simplest of the fields: mimic the behaviour of the struct module packing/unpacking
    integers to/from bytes.
    """

    def __init__(self, format, **kw):
        self.format = format
        super().__init__(**kw)

    def __repr__(self):
        return '<%s(%s, %s)>' % (self.__class__.__name__, self.name, self.get_format())

    def get_format(self):
        return '%s%s' % ('<' if self.endianess == Endianess.LITTLE_ENDIAN else '>', self.format)

    def _get_size(self):
        return struct.calcsize(self.get_format())

    def pack(self, value) -> bytes:
        return struct.pack(self.get_format(), value)

    def unpack(self, stream) -> int:
        raw = self._read(stream)
        try:
            value = struct.unpack(self.get_format(), raw)[0]
        except struct.error as e:
            raise UnpackException(f'field \'{self.name}\' needs {self.size} bytes, {len(raw)} available',
                                  chain=[self.name]) from e

        return value


class StringField(Field):
    """Represent a contiguous chunk of bytes."""

    def __init__(self, n, **kw):
        self.length = n
        super().__init__(**kw)

    def __len__(self):
        return self.length

    def _get_size(self):
        return self.length

    def pack(self, value) -> bytes:
        if len(value) != self.length:
            raise ValueError(f'you are trying to set a value with the wrong size (that is {self.length} bytes)')

        return bytes(value)

    def unpack(self, stream) -> bytes:
        raw = self._read(stream)
        if len(raw) != self.length:
            raise UnpackException(f'field \'{self.name}\' needs {self.length} bytes, {len(raw)} available',
                                  chain=[self.name])

        return raw


class DataField(StringField):
    """The payload of a chunk: its length comes from the length field so
    a short read means the declared length doesn't match the data."""

    def unpack(self, stream) -> bytes:
        raw = self._read(stream)
        if len(raw) != self.length:
            raise InvalidChunkDataException(len(raw), self.length, chain=[self.name])

        return raw
