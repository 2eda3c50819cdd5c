"""
# PNG-like chunks for humans.

A chunk is a self-describing binary record: a length, a four letters type,
the data and a CRC protecting type and data.

Two basic main operations are defined for a chunk

 1. unpack(): reading the binary data and build a validated, immutable
    representation of that; any inconsistency raises an exception
    deriving from PngChunkException.

 2. pack(): encode the representation into binary data.

Building a chunk from a type and some data can't fail: length and crc are
computed, not indicated.
"""
from .chunk import Chunk
from .chunk_type import ChunkType
from .enum import ChunkTypeFlag, Compliant
from .exceptions import (
    PngChunkException,
    ChunkTypeException,
    BadByteException,
    BadLengthException,
    ChunkException,
    UnpackException,
    MaxLengthException,
    InvalidChunkTypeException,
    InvalidChunkDataException,
    InvalidCrcException,
)
from .streams import Stream
