import struct

import pytest


MESSAGE = b'This is where your secret message will be!'
CRC = 2882656334


def build_raw(length, chunk_type, data, crc):
    return struct.pack('>I', length) + chunk_type + data + struct.pack('>I', crc)


@pytest.fixture
def message():
    return MESSAGE


@pytest.fixture
def raw_chunk():
    """The packed chunk of type 'RuSt' containing the secret message."""
    return build_raw(len(MESSAGE), b'RuSt', MESSAGE, CRC)
