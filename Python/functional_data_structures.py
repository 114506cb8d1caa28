class Singleton:
    """Class with a single instance"""

    def __new__(cls):
        obj = object.__new__(cls)
        cls.__new__ = lambda _: obj
        return obj


class NullMap(Singleton):
    """The empty Map"""

    @staticmethod
    def is_empty():
        return True

    def insert(self, key, value):
        return Map(key, value, self)

    @staticmethod
    def lookup(key):
        raise KeyError(key)

    @staticmethod
    def get(_key, default=None):
        return default

    @staticmethod
    def __iter__():
        return iter([])

    @staticmethod
    def __len__():
        return 0

    def __repr__(self):
        return '{}'


class Map(tuple):
    """Functional mapping of keys to values.

    This container type is immutable and persistent: inserting returns a new
    map that shares its tail with the old one. Keys are compared with ==, the
    most recent insertion of a key shadows older ones.
    """

    def __new__(cls, key=None, value=None, tail=None):
        if key is None:
            return NullMap()
        return super().__new__(cls, (key, value, tail))

    @staticmethod
    def is_empty():
        return False

    def insert(self, key, value):
        return Map(key, value, self)

    def lookup(self, key):
        if self._key == key:
            return self._value
        return self._next.lookup(key)

    def get(self, key, default=None):
        try:
            return self.lookup(key)
        except KeyError:
            return default

    @property
    def _key(self):
        return self[0]

    @property
    def _value(self):
        return self[1]

    @property
    def _next(self):
        return self[2]

    def __iter__(self):
        yield self._key, self._value
        yield from iter(self._next)

    def __len__(self):
        return 1 + len(self._next)

    def __setattr__(self, *args, **kwargs):
        raise TypeError("'{}' object does not support item assignment".format(type(self).__name__))

    def __repr__(self):
        return '{' + ', '.join('{}:= {}'.format(k, v) for k, v in self) + '}'
