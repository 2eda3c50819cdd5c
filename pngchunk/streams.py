import io
import os
import logging


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around bytes/file object to
    uniform its properties: the chunk reads sequentially from it
    and leaves the cursor just after the data it consumed.'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        if isinstance(obj, os.PathLike):
            obj = os.fspath(obj)

        self._type = type(obj)
        self.obj = obj

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, None)

        if init_method is None:
            raise ValueError('\'%s\' is the wrong kind of object to stream from' % self._type.__name__)

        init_method()

    def __getattr__(self, name):
        if name == 'obj':
            raise AttributeError(name)

        return getattr(self.obj, name)

    def __repr__(self):
        return '<%s(%s @ %d)>' % (self.__class__.__name__, self._type.__name__, self.obj.tell())

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def init_str(self):
        '''We think this is a path'''
        logger.debug('opening path \'%s\'' % self.obj)
        self.obj = open(self.obj, 'rb')

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)

    def init_bytearray(self):
        self.obj = io.BytesIO(bytes(self.obj))

    def init_memoryview(self):
        self.obj = io.BytesIO(self.obj.tobytes())

    def seek(self, offset):
        if not isinstance(offset, int):
            raise ValueError('\'%s\' is the wrong kind of offset to use' % offset.__class__.__name__)

        self.obj.seek(offset)

    def read_all(self):
        '''Returns all the data from the actual offset to the end.'''
        return self.obj.read()

    def close(self):
        self.obj.close()
