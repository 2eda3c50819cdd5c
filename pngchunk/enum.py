from enum import Enum, Flag, auto


class Endianess(Enum):
    LITTLE_ENDIAN = auto()
    BIG_ENDIAN    = auto()


class Compliant(Flag):
    '''It indicates which degree of compliantness the data must reflect the format'''
    NONE     = 0
    RESERVED = 1 << 0  # refuse chunk types with the reserved bit set


class ChunkTypeFlag(Flag):
    '''The properties encoded in the case of the four letters of a chunk type.'''
    NONE           = 0
    CRITICAL       = 1 << 0
    PUBLIC         = 1 << 1
    RESERVED_VALID = 1 << 2
    SAFE_TO_COPY   = 1 << 3
