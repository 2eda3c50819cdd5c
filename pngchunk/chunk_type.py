'''
# Chunk type

Four bytes restricted to the ASCII letters; the case of each letter (that is,
the bit 5 of each byte) is used to encode a property of the chunk

 1. ancillary bit (first letter): uppercase means critical
 2. private bit (second letter): uppercase means public
 3. reserved bit (third letter): must be uppercase to conform to the format
 4. safe-to-copy bit (fourth letter): lowercase means safe to copy

See <http://www.libpng.org/pub/png/spec/1.2/PNG-Structure.html#Chunk-naming-conventions>.
'''
from bitstring import Bits

from .enum import ChunkTypeFlag
from .exceptions import BadByteException, BadLengthException


class ChunkType(object):
    '''Immutable value representing the type of a chunk.

    Being constructed doesn't mean being valid: "Rust" is made of letters
    but has the reserved bit set, so is_valid() returns False.'''

    SIZE = 4
    CASE_BIT = 2  # bit 5 counting from the MSB side of the byte

    __slots__ = ('_data',)

    def __init__(self, value):
        if isinstance(value, str):
            data = self._from_str(value)
        else:
            data = self._from_bytes(value)

        object.__setattr__(self, '_data', data)

    def __setattr__(self, name, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __reduce__(self):
        return (self.__class__, (self._data,))

    @classmethod
    def from_bytes(cls, value) -> "ChunkType":
        return cls(cls._from_bytes(value))

    @classmethod
    def from_str(cls, value: str) -> "ChunkType":
        return cls(value)

    @classmethod
    def _from_bytes(cls, value) -> bytes:
        if isinstance(value, int):
            raise TypeError(f'{cls.__name__} needs 4 bytes, not an integer')

        data = bytes(value)

        if len(data) != cls.SIZE:
            raise BadLengthException(data, len(data))

        for byte in data:
            if not cls.is_valid_byte(byte):
                raise BadByteException(byte)

        return data

    @classmethod
    def _from_str(cls, value: str) -> bytes:
        # the length is on the encoded bytes, not on the characters
        encoded = value.encode('utf-8')

        if len(encoded) != cls.SIZE:
            raise BadLengthException(value, len(encoded))

        return cls._from_bytes(encoded)

    @staticmethod
    def is_valid_byte(byte: int) -> bool:
        return (0x41 <= byte <= 0x5a) or (0x61 <= byte <= 0x7a)

    @property
    def raw(self) -> bytes:
        return self._data

    def __bytes__(self):
        return self._data

    def __str__(self):
        return self._data.decode('latin1')

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, str(self))

    def __eq__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented

        return self._data == other._data

    def __hash__(self):
        return hash(self._data)

    def _is_lowercase(self, index: int) -> bool:
        return Bits(self._data)[index * 8 + self.CASE_BIT]

    def is_critical(self) -> bool:
        return not self._is_lowercase(0)

    def is_public(self) -> bool:
        return not self._is_lowercase(1)

    def is_reserved_bit_valid(self) -> bool:
        return not self._is_lowercase(2)

    def is_safe_to_copy(self) -> bool:
        # NOTE: the polarity is the opposite of the other bits
        return self._is_lowercase(3)

    def is_valid(self) -> bool:
        return self.is_reserved_bit_valid() and all(self.is_valid_byte(_) for _ in self._data)

    @property
    def flags(self) -> ChunkTypeFlag:
        flags = ChunkTypeFlag.NONE
        for flag, predicate in (
            (ChunkTypeFlag.CRITICAL, self.is_critical),
            (ChunkTypeFlag.PUBLIC, self.is_public),
            (ChunkTypeFlag.RESERVED_VALID, self.is_reserved_bit_valid),
            (ChunkTypeFlag.SAFE_TO_COPY, self.is_safe_to_copy),
        ):
            if predicate():
                flags |= flag

        return flags
