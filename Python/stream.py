"""
A stream is an iterator of assignments. A goal maps one assignment to a
stream of assignments that extend it; goals are chained by feeding every item
of one stream into the next goal.

The deduction goals are deterministic, so their streams hold at most one
item. Searches that must find exactly one match do not take the first hit;
they report a Nothing, One or Many outcome and let the caller decide what an
empty or ambiguous result means.
"""

from functional_data_structures import Singleton


class Nothing(Singleton):
    """Outcome of a search without matches"""

    @staticmethod
    def found():
        return False

    def __repr__(self):
        return 'Nothing()'


class One:
    """Outcome of a search with exactly one match"""

    def __init__(self, value):
        self.value = value

    @staticmethod
    def found():
        return True

    def __eq__(self, other):
        return isinstance(other, One) and self.value == other.value

    def __repr__(self):
        return 'One({!r})'.format(self.value)


class Many:
    """Outcome of a search with more than one match.

    Only the first two matches are pulled from the stream.
    """

    def __init__(self, values):
        self.values = values

    @staticmethod
    def found():
        return False

    def __repr__(self):
        return 'Many({!r})'.format(self.values)


def take(n, stream):
    for _, item in zip(range(n), stream):
        yield item


def unique(stream):
    items = list(take(2, stream))
    if not items:
        return Nothing()
    if len(items) == 1:
        return One(items[0])
    return Many(items)


def append_map(func, stream):
    for s in stream:
        yield from func(s)
