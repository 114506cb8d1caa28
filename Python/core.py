import sympy as sy

from functional_data_structures import Map, Singleton
from segments import WIRE_COUNT

variables = sy.symbols
Variable = sy.Symbol

# one logic variable per canonical segment, bound to the wire that drives it
SEGMENTS = variables("a, b, c, d, e, f, g")

WIRES = tuple(range(WIRE_COUNT))


def is_var(x):
    return isinstance(x, Variable)


def is_segment(x):
    return is_var(x) and x in SEGMENTS


class InvalidAssignment(Singleton):
    @staticmethod
    def is_valid():
        return False

    def extend(self, *_args, **_kwargs):
        return self

    def __repr__(self):
        return 'InvalidAssignment()'


class Assignment:
    """Partial solution of one reading.

    Binds logic variables to values: segment variables to wire ids, digit
    variables to the pattern that shows the digit. Segment bindings always
    form a partial bijection; an extension that would break it, or rebind a
    variable to something else, yields InvalidAssignment.
    """

    def __init__(self, bindings=Map()):
        if isinstance(bindings, dict):
            self.bindings = Map()
            for k, v in bindings.items():
                self.bindings = self.bindings.insert(k, v)
        else:
            self.bindings = bindings

    @staticmethod
    def is_valid():
        return True

    def walk(self, var):
        if not is_var(var):
            return var
        return self.bindings.get(var, var)

    def claimed_wires(self):
        return {wire for var, wire in self.bindings if is_segment(var)}

    def segment_of(self, wire):
        for var, value in self.bindings:
            if is_segment(var) and value == wire:
                return var
        raise KeyError(wire)

    def extend(self, var, value):
        bound = self.walk(var)
        if not is_var(bound):
            return self if bound == value else InvalidAssignment()
        if is_segment(var) and value in self.claimed_wires():
            return InvalidAssignment()
        return Assignment(self.bindings.insert(var, value))

    def is_complete(self):
        return all(not is_var(self.walk(segment)) for segment in SEGMENTS)

    def reify(self, vs):
        return tuple(self.walk(v) for v in vs)

    def __eq__(self, other):
        return isinstance(other, Assignment) and dict(self.bindings) == dict(other.bindings)

    def __hash__(self):
        return hash(frozenset(self.bindings))

    def __repr__(self):
        return 'Assignment({})'.format(self.bindings)


def run_goal(goal):
    return goal(Assignment())
