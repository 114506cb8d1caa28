from core import WIRES
from errors import DeductionError
from stream import append_map, unique


def make_goal(func):
    """Decorator that turns a function of the form f(Assignment, ...) into
    a goal-creating function.

    For example:
        @make_goal
        def bind(s, var, value):
            ...

    is equivalent to
        def bind(var, value):
            def goal(s):
                ...
            return goal
    """

    def wrap(*args, **kwargs):
        def goal(s):
            return func(s, *args, **kwargs)

        return goal

    if func.__doc__ is not None:
        wrap.__doc__ = "produce a " + func.__doc__
    return wrap


@make_goal
def conj(s, subgoal1, *subgoals):
    """goal that succeeds if all of its subgoals succeed, in order"""
    stream = subgoal1(s)
    for g in subgoals:
        stream = append_map(g, stream)
    yield from stream


@make_goal
def bind(s, var, value):
    """goal that succeeds if var can be bound to value"""
    s = s.extend(var, value)
    if s.is_valid():
        yield s


@make_goal
def difference(s, segment, pattern, other):
    """goal that binds segment to the one wire lit in exactly one of two patterns"""
    wires = (s.walk(pattern) ^ s.walk(other)).wires()
    if len(wires) != 1:
        raise DeductionError("expected singleton difference")
    yield from bind(segment, wires[0])(s)


@make_goal
def odd_one_out(s, digit, patterns, pair, present, absent, label, excluding=()):
    """goal that binds digit to the only pattern lacking a wire of pair

    The wire of pair that the pattern does light is bound to present, the
    other one to absent. Patterns already bound to a digit in excluding are
    not candidates.
    """
    if len(pair) != 2:
        raise DeductionError("expected a pair of wires, got {}".format(len(pair)))
    taken = [s.walk(d) for d in excluding]
    outcome = unique(p for p in patterns if p not in taken and not p.contains_all(pair))
    if not outcome.found():
        raise DeductionError("{} ambiguous".format(label))

    pattern = outcome.value
    lit, unlit = pair if pattern[pair[0]] else reversed(pair)
    yield from conj(bind(digit, pattern),
                    bind(present, lit),
                    bind(absent, unlit))(s)


@make_goal
def last_pattern(s, digit, patterns, excluding):
    """goal that binds digit to the only pattern no digit in excluding took"""
    taken = [s.walk(d) for d in excluding]
    outcome = unique(p for p in patterns if p not in taken)
    if not outcome.found():
        raise DeductionError("no single pattern left for {}".format(digit))
    yield from bind(digit, outcome.value)(s)


@make_goal
def last_wire(s, segment):
    """goal that binds segment to the only wire no segment claims"""
    claimed = s.claimed_wires()
    outcome = unique(w for w in WIRES if w not in claimed)
    if not outcome.found():
        raise DeductionError("no single wire left for segment {}".format(segment))
    yield from bind(segment, outcome.value)(s)
