"""Seven-slot wire sets and the canonical seven-segment font.

A SegmentSet is indexed by wire id 0..6. Inside a reading the ids are the
scrambled wires; after translation through a WireMapping the same type holds
canonical segments a..g, in that order.
"""

from collections import namedtuple
from types import MappingProxyType

from errors import ParseError, UnknownPatternError

WIRE_COUNT = 7
LETTERS = 'abcdefg'


class SegmentSet(tuple):
    """Immutable set of active wires stored as seven booleans"""

    def __new__(cls, active=(False,) * WIRE_COUNT):
        active = tuple(bool(x) for x in active)
        if len(active) != WIRE_COUNT:
            raise ValueError("expected {} wire slots, got {}".format(WIRE_COUNT, len(active)))
        return super().__new__(cls, active)

    @classmethod
    def from_wires(cls, wires):
        wires = set(wires)
        return cls(i in wires for i in range(WIRE_COUNT))

    @classmethod
    def parse(cls, token):
        """Read the letter notation, e.g. 'acf'"""
        wires = []
        for char in token:
            if char not in LETTERS:
                raise ParseError("unexpected wire letter {!r} in {!r}".format(char, token))
            wire = LETTERS.index(char)
            if wire in wires:
                raise ParseError("wire letter {!r} repeated in {!r}".format(char, token))
            wires.append(wire)
        return cls.from_wires(wires)

    def size(self):
        return sum(self)

    def wires(self):
        return [i for i, active in enumerate(self) if active]

    def contains_all(self, wires):
        return all(self[w] for w in wires)

    def symmetric_difference(self, other):
        return SegmentSet(x != y for x, y in zip(self, other))

    __xor__ = symmetric_difference

    def __setattr__(self, *args, **kwargs):
        raise TypeError("'{}' object does not support item assignment".format(type(self).__name__))

    def __str__(self):
        return ''.join(LETTERS[i] for i in self.wires())

    def __repr__(self):
        return 'SegmentSet({!r})'.format(str(self))


Reading = namedtuple('Reading', 'patterns outputs')

# canonical segments lit by each digit, indexed by digit
FONT = ('abcefg', 'cf', 'acdeg', 'acdfg', 'bcdf', 'abdfg', 'abdefg', 'acf', 'abcdefg', 'abcdfg')

DIGIT_TABLE = MappingProxyType({SegmentSet.parse(segments): digit for digit, segments in enumerate(FONT)})

# sizes that only one digit has: 1, 7, 4 and 8
UNIQUE_SIZES = MappingProxyType({2: 1, 3: 7, 4: 4, 7: 8})


def canonical_pattern(digit):
    return SegmentSet.parse(FONT[digit])


def digit_of(canonical):
    try:
        return DIGIT_TABLE[canonical]
    except KeyError:
        raise UnknownPatternError(canonical) from None
