import pytest

from core import SEGMENTS, Assignment, InvalidAssignment, is_segment, run_goal, variables
from errors import DeductionError
from goals import bind, conj, difference, last_pattern, last_wire, make_goal, odd_one_out
from segments import SegmentSet

a, b, c, d, e, f, g = SEGMENTS


def test_segment_variables():
    x = variables("x")
    assert [str(v) for v in SEGMENTS] == list("abcdefg")
    assert is_segment(a)
    assert not is_segment(x)
    assert not is_segment(0)


def test_walk():
    x = variables("x")
    s = Assignment({a: 3, x: SegmentSet.parse("ab")})
    assert s.walk(a) == 3
    assert s.walk(x) == SegmentSet.parse("ab")
    assert s.walk(b) is b
    assert s.walk(5) == 5


def test_extend():
    s = Assignment().extend(a, 3)
    assert s == Assignment({a: 3})
    assert s.extend(a, 3) is s


def test_extend_rejects_rebinding():
    s = Assignment({a: 3})
    assert s.extend(a, 4) is InvalidAssignment()


def test_extend_rejects_claimed_wire():
    s = Assignment({a: 3})
    assert s.extend(b, 3) is InvalidAssignment()


def test_claimed_wire_check_ignores_digit_variables():
    six = variables("six")
    s = Assignment({six: 3})
    assert s.extend(a, 3).is_valid()


def test_invalid_assignment_stays_invalid():
    assert InvalidAssignment().extend(a, 0) is InvalidAssignment()
    assert not InvalidAssignment().is_valid()


def test_segment_of():
    s = Assignment({a: 3, c: 0})
    assert s.segment_of(0) == c
    with pytest.raises(KeyError):
        s.segment_of(1)


def test_is_complete_and_reify():
    s = Assignment(dict(zip(SEGMENTS, range(7))))
    assert s.is_complete()
    assert s.reify((b, a)) == (1, 0)
    assert not Assignment({a: 0}).is_complete()


def test_make_goal():
    assert bind.__doc__ == "produce a goal that succeeds if var can be bound to value"

    @make_goal
    def all_wires(s, segment):
        for wire in range(7):
            yield s.extend(segment, wire)

    assert len(list(all_wires(a)(Assignment()))) == 7


def test_bind():
    assert list(bind(a, 1)(Assignment())) == [Assignment({a: 1})]
    assert list(bind(a, 1)(Assignment({b: 1}))) == []


def test_conj():
    goal = conj(bind(a, 1), bind(b, 2))
    assert list(run_goal(goal)) == [Assignment({a: 1, b: 2})]


def test_conj_fails_on_conflict():
    goal = conj(bind(a, 1), bind(b, 1))
    assert list(run_goal(goal)) == []


def test_difference():
    goal = difference(a, SegmentSet.parse("dab"), SegmentSet.parse("ab"))
    assert list(run_goal(goal)) == [Assignment({a: 3})]


def test_difference_walks_digit_variables():
    nine = variables("nine")
    goal = conj(bind(nine, SegmentSet.parse("abcdef")),
                difference(e, SegmentSet.parse("abcdefg"), nine))
    [s] = run_goal(goal)
    assert s.walk(e) == 6


def test_difference_must_be_a_single_wire():
    goal = difference(a, SegmentSet.parse("abc"), SegmentSet.parse("a"))
    with pytest.raises(DeductionError, match="expected singleton difference"):
        list(run_goal(goal))


def test_odd_one_out():
    six = variables("six")
    patterns = [SegmentSet.parse(p) for p in ("abcefg", "abdefg", "abcdfg")]
    goal = odd_one_out(six, patterns, [2, 5], present=f, absent=c, label="segment 6")
    [s] = run_goal(goal)
    assert s.walk(six) == SegmentSet.parse("abdefg")
    assert s.walk(f) == 5
    assert s.walk(c) == 2


def test_odd_one_out_pair_order_does_not_matter():
    six = variables("six")
    patterns = [SegmentSet.parse(p) for p in ("abcefg", "abdefg", "abcdfg")]
    goal = odd_one_out(six, patterns, [5, 2], present=f, absent=c, label="segment 6")
    [s] = run_goal(goal)
    assert (s.walk(f), s.walk(c)) == (5, 2)


def test_odd_one_out_skips_excluded_patterns():
    six, zero = variables("six, zero")
    patterns = [SegmentSet.parse(p) for p in ("abcefg", "abdefg", "abcdfg")]
    goal = conj(bind(six, patterns[1]),
                odd_one_out(zero, patterns, [1, 3], present=b, absent=d, label="segment 0",
                            excluding=(six,)))
    [s] = run_goal(goal)
    assert s.walk(zero) == SegmentSet.parse("abcefg")
    assert (s.walk(b), s.walk(d)) == (1, 3)


def test_odd_one_out_without_candidate():
    six = variables("six")
    patterns = [SegmentSet.parse(p) for p in ("abcefg", "abcdef", "abcdfg")]
    goal = odd_one_out(six, patterns, [2, 5], present=f, absent=c, label="segment 6")
    with pytest.raises(DeductionError, match="segment 6 ambiguous"):
        list(run_goal(goal))


def test_odd_one_out_with_two_candidates():
    six = variables("six")
    patterns = [SegmentSet.parse(p) for p in ("abcefg", "abdefg", "abcdeg")]
    goal = odd_one_out(six, patterns, [2, 5], present=f, absent=c, label="segment 6")
    with pytest.raises(DeductionError, match="segment 6 ambiguous"):
        list(run_goal(goal))


def test_last_pattern():
    six, zero, nine = variables("six, zero, nine")
    patterns = [SegmentSet.parse(p) for p in ("abcefg", "abdefg", "abcdfg")]
    goal = conj(bind(six, patterns[1]),
                bind(zero, patterns[0]),
                last_pattern(nine, patterns, excluding=(six, zero)))
    [s] = run_goal(goal)
    assert s.walk(nine) == patterns[2]


def test_last_wire():
    s = Assignment(dict(zip(SEGMENTS[:6], (6, 5, 4, 3, 2, 0))))
    [s] = last_wire(g)(s)
    assert s.walk(g) == 1


def test_last_wire_needs_exactly_one_free_wire():
    with pytest.raises(DeductionError):
        list(last_wire(g)(Assignment({a: 0})))
