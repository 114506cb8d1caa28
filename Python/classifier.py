from collections import defaultdict, namedtuple

from errors import ClassificationError

ClassifiedPatterns = namedtuple('ClassifiedPatterns', 'one seven four eight six_wire five_wire')

# active-wire counts of the digits 0-9, sorted
EXPECTED_SIZES = [2, 3, 4, 5, 5, 5, 6, 6, 6, 7]


def classify(patterns):
    """Sort the ten digit patterns of a reading by size.

    Returns the patterns of 1, 7, 4 and 8, which have unique sizes, and the
    size-6 (0, 6, 9) and size-5 (2, 3, 5) groups in input order.
    """
    patterns = tuple(patterns)

    sizes = sorted(p.size() for p in patterns)
    if sizes != EXPECTED_SIZES:
        raise ClassificationError("expected pattern sizes {}, got {}".format(EXPECTED_SIZES, sizes))
    if len(set(patterns)) != len(patterns):
        raise ClassificationError("digit patterns are not distinct")

    by_size = defaultdict(list)
    for p in patterns:
        by_size[p.size()].append(p)

    return ClassifiedPatterns(one=by_size[2][0],
                              seven=by_size[3][0],
                              four=by_size[4][0],
                              eight=by_size[7][0],
                              six_wire=tuple(by_size[6]),
                              five_wire=tuple(by_size[5]))
