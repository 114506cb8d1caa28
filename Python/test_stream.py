from stream import Many, Nothing, One, append_map, take, unique


def numbers():
    n = 0
    while True:
        yield n
        n += 1


def test_take_stops_early():
    assert list(take(3, numbers())) == [0, 1, 2]
    assert list(take(3, iter([7]))) == [7]


def test_take_does_not_pull_past_n():
    stream = numbers()
    list(take(2, stream))
    assert next(stream) == 2


def test_unique_nothing():
    assert unique(iter([])) is Nothing()
    assert not Nothing().found()


def test_unique_one():
    outcome = unique(iter(["x"]))
    assert outcome == One("x")
    assert outcome.found()
    assert outcome.value == "x"


def test_unique_many_on_infinite_stream():
    outcome = unique(numbers())
    assert isinstance(outcome, Many)
    assert not outcome.found()
    assert outcome.values == [0, 1]


def test_append_map():
    stream = append_map(lambda n: iter([n, -n]), iter([1, 2]))
    assert list(stream) == [1, -1, 2, -2]


def test_append_map_drops_empty_results():
    stream = append_map(lambda n: iter([n] if n % 2 else []), iter(range(5)))
    assert list(stream) == [1, 3]
