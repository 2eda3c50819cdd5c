import copy
import pickle

import pytest

from pngchunk.chunk_type import ChunkType
from pngchunk.enum import ChunkTypeFlag
from pngchunk.exceptions import BadByteException, BadLengthException, ChunkTypeException


def test_chunk_type_from_bytes():
    chunk_type = ChunkType.from_bytes([82, 117, 83, 116])

    assert chunk_type.raw == bytes([82, 117, 83, 116])
    assert bytes(chunk_type) == b'RuSt'


def test_chunk_type_from_str():
    expected = ChunkType.from_bytes([82, 117, 83, 116])
    actual = ChunkType.from_str('RuSt')

    assert actual == expected
    assert hash(actual) == hash(expected)
    assert ChunkType('RuSt') == expected
    assert ChunkType(b'RuSt') == expected


def test_chunk_type_case_is_preserved():
    assert ChunkType.from_str('RuSt') != ChunkType.from_str('RUST')


@pytest.mark.parametrize('value,critical,public,reserved,safe', [
    ('RuSt', True,  False, True,  True),
    ('ruSt', False, False, True,  True),
    ('RUSt', True,  True,  True,  True),
    ('Rust', True,  False, False, True),
    ('RuST', True,  False, True,  False),
    ('IHDR', True,  True,  True,  False),
    ('tEXt', False, True,  True,  True),
])
def test_chunk_type_bits(value, critical, public, reserved, safe):
    chunk_type = ChunkType.from_str(value)

    assert chunk_type.is_critical() == critical
    assert chunk_type.is_public() == public
    assert chunk_type.is_reserved_bit_valid() == reserved
    assert chunk_type.is_safe_to_copy() == safe


def test_chunk_type_flags():
    assert ChunkType.from_str('RuSt').flags == \
        ChunkTypeFlag.CRITICAL | ChunkTypeFlag.RESERVED_VALID | ChunkTypeFlag.SAFE_TO_COPY
    assert ChunkType.from_str('IEND').flags == \
        ChunkTypeFlag.CRITICAL | ChunkTypeFlag.PUBLIC | ChunkTypeFlag.RESERVED_VALID
    assert ChunkType.from_str('abcd').flags == ChunkTypeFlag.SAFE_TO_COPY


def test_chunk_type_is_valid():
    assert ChunkType.from_str('RuSt').is_valid()


def test_chunk_type_constructed_but_not_valid():
    """The reserved bit doesn't prevent the construction but the type is not valid."""
    chunk_type = ChunkType.from_str('Rust')

    assert not chunk_type.is_valid()


def test_chunk_type_digit():
    with pytest.raises(BadByteException) as excinfo:
        ChunkType.from_str('Ru1t')

    assert excinfo.value.byte == ord('1')


@pytest.mark.parametrize('raw,bad', [
    (b'Ru1t', 0x31),
    (b'R St', 0x20),
    (b'Ru!t', 0x21),
    (b'\x00uSt', 0x00),
    (b'RuS\xff', 0xff),
    (b'Ru[@', 0x5b),
])
def test_chunk_type_from_bytes_bad_byte(raw, bad):
    with pytest.raises(BadByteException) as excinfo:
        ChunkType.from_bytes(raw)

    assert excinfo.value.byte == bad


def test_chunk_type_reports_first_bad_byte():
    with pytest.raises(BadByteException) as excinfo:
        ChunkType.from_bytes(b'R12t')

    assert excinfo.value.byte == ord('1')


@pytest.mark.parametrize('value', ['RuS', 'RuStY', '', 'Ru1'])
def test_chunk_type_from_str_bad_length(value):
    """The length is checked before the content."""
    with pytest.raises(BadLengthException) as excinfo:
        ChunkType.from_str(value)

    assert excinfo.value.value == value
    assert excinfo.value.length == len(value)


def test_chunk_type_length_counts_bytes():
    # 'é' is two bytes in UTF-8 so the length is right but the byte is not
    with pytest.raises(BadByteException) as excinfo:
        ChunkType.from_str('Rué')

    assert excinfo.value.byte == 0xc3

    with pytest.raises(BadLengthException) as excinfo:
        ChunkType.from_str('RuSé')

    assert excinfo.value.length == 5


def test_chunk_type_from_bytes_bad_length():
    with pytest.raises(ChunkTypeException):
        ChunkType.from_bytes(b'RuStR')


def test_chunk_type_string():
    chunk_type = ChunkType.from_str('RuSt')

    assert str(chunk_type) == 'RuSt'
    assert repr(chunk_type) == '<ChunkType(RuSt)>'
    assert ChunkType.from_str(str(chunk_type)) == chunk_type


def test_chunk_type_immutable():
    chunk_type = ChunkType.from_str('RuSt')

    with pytest.raises(AttributeError):
        chunk_type._data = b'IEND'

    assert chunk_type.raw == b'RuSt'


def test_chunk_type_copy():
    chunk_type = ChunkType.from_str('RuSt')

    assert copy.copy(chunk_type) == chunk_type
    assert copy.deepcopy(chunk_type) == chunk_type
    assert pickle.loads(pickle.dumps(chunk_type)) == chunk_type
    assert pickle.loads(pickle.dumps(chunk_type)).is_safe_to_copy()


def test_chunk_type_from_integer():
    with pytest.raises(TypeError):
        ChunkType(4)

    with pytest.raises(TypeError):
        ChunkType.from_bytes(4)
