#!/usr/bin/env python3
'''
Hide a message into a chunk and read it back.

 $ chunktool.py encode /tmp/secret.chunk RuSt 'this is a secret'
 $ chunktool.py print /tmp/secret.chunk
 $ chunktool.py decode /tmp/secret.chunk
'''
import logging
import os
import sys

from pngchunk import Chunk, ChunkType, Stream
from pngchunk.exceptions import PngChunkException


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


def usage(progname):
    print(f'''usage: {progname} encode <path> <chunk type> <message>
       {progname} decode <path>
       {progname} print <path>''')
    sys.exit(1)


def encode(path, chunk_type, message):
    chunk = Chunk(ChunkType.from_str(chunk_type), message.encode('utf-8'))

    if not chunk.chunk_type.is_valid():
        logger.warning(f'chunk type \'{chunk.chunk_type}\' has the reserved bit set')

    with open(path, 'wb') as f:
        f.write(chunk.pack())

    logger.info(f'written {chunk!r} to \'{path}\'')


def read_chunk(path):
    with Stream(path) as stream:
        chunk = Chunk.unpack(stream)
        trailing = stream.read_all()

    if trailing:
        logger.debug(f'ignoring {len(trailing)} bytes after the chunk')

    return chunk


def decode(path):
    chunk = read_chunk(path)
    print(chunk.data_as_str())


def dump(path):
    chunk = read_chunk(path)
    print(chunk, end='')
    print(f'  flags: {chunk.chunk_type.flags}')


if __name__ == '__main__':
    if len(sys.argv) < 3:
        usage(sys.argv[0])

    command, path = sys.argv[1:3]

    try:
        if command == 'encode' and len(sys.argv) == 5:
            encode(path, sys.argv[3], sys.argv[4])
        elif command == 'decode':
            decode(path)
        elif command == 'print':
            dump(path)
        else:
            usage(sys.argv[0])
    except (PngChunkException, UnicodeDecodeError) as e:
        logger.error(f'failed to handle \'{path}\': {e}')
        sys.exit(2)
