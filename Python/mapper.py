"""Deduce which scrambled wire drives which canonical segment.

The deduction only looks at the digits 1, 4, 7, 8 and the three size-6
patterns, and relies on how the seven-segment font nests:

    7 = 1 + a            6 lacks c, 0 lacks d, 9 lacks e
    4 = 1 + b + d        1 = c + f

Each step is a goal; conj runs them in order on one Assignment.
"""

import logging

from classifier import classify
from core import SEGMENTS, WIRES, is_var, run_goal, variables
from errors import DeductionError
from goals import conj, difference, last_pattern, last_wire, odd_one_out
from segments import LETTERS, SegmentSet
from stream import unique

log = logging.getLogger(__name__)

a, b, c, d, e, f, g = SEGMENTS
zero, six, nine = variables("zero, six, nine")


class WireMapping(tuple):
    """Bijection from scrambled wire id to canonical segment letter.

    Stored as the seven segment letters indexed by wire id, so
    WireMapping('cfgabde') sends wire 0 to segment c, wire 1 to f and so on.
    """

    def __new__(cls, segments):
        segments = tuple(segments)
        if sorted(segments) != list(LETTERS):
            raise ValueError("not a bijection onto segments a-g: {!r}".format(''.join(segments)))
        return super().__new__(cls, segments)

    @classmethod
    def from_assignment(cls, s):
        segments = [None] * len(WIRES)
        for segment in SEGMENTS:
            segments[s.walk(segment)] = str(segment)
        return cls(segments)

    def segment_of(self, wire):
        return self[wire]

    def wire_of(self, segment):
        return self.index(str(segment))

    def translate(self, pattern):
        """Move a pattern from wire space into canonical segment space"""
        return SegmentSet.from_wires(LETTERS.index(self[w]) for w in pattern.wires())

    def scramble(self, canonical):
        """Move a canonical pattern into this reading's wire space"""
        return SegmentSet.from_wires(self.wire_of(LETTERS[i]) for i in canonical.wires())

    def __setattr__(self, *args, **kwargs):
        raise TypeError("'{}' object does not support item assignment".format(type(self).__name__))

    def __str__(self):
        return ''.join(self)

    def __repr__(self):
        return 'WireMapping({!r})'.format(str(self))


def deduction(patterns):
    """Build the goal that binds every segment variable of a classified reading"""
    cf = patterns.one.wires()
    bd = (patterns.one ^ patterns.four).wires()
    return conj(
        difference(a, patterns.seven, patterns.one),
        odd_one_out(six, patterns.six_wire, cf, present=f, absent=c, label="segment 6"),
        odd_one_out(zero, patterns.six_wire, bd, present=b, absent=d, label="segment 0",
                    excluding=(six,)),
        last_pattern(nine, patterns.six_wire, excluding=(six, zero)),
        difference(e, patterns.eight, nine),
        last_wire(g),
    )


def map_wires(patterns):
    """Derive the wire mapping of a reading from its ten digit patterns"""
    classified = classify(patterns)

    outcome = unique(run_goal(deduction(classified)))
    if not outcome.found():
        raise DeductionError("no consistent wire mapping")

    s = outcome.value
    if not s.is_complete():
        raise DeductionError("segments left unassigned: {}".format(
            ', '.join(str(v) for v in SEGMENTS if is_var(s.walk(v)))))

    mapping = WireMapping.from_assignment(s)
    log.debug("wires %s map to segments %s", LETTERS, mapping)
    return mapping
