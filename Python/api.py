import logging

from errors import DecodeError, ParseError
from mapper import map_wires
from segments import UNIQUE_SIZES, Reading, SegmentSet
from unscrambler import read_output

log = logging.getLogger(__name__)

PATTERN_COUNT = 10
OUTPUT_COUNT = 4


def parse_line(line):
    try:
        patterns, outputs = line.split('|')
    except ValueError:
        raise ParseError("expected '<patterns> | <outputs>', got {!r}".format(line)) from None

    patterns = tuple(map(SegmentSet.parse, patterns.split()))
    outputs = tuple(map(SegmentSet.parse, outputs.split()))

    if len(patterns) != PATTERN_COUNT:
        raise ParseError("expected {} digit patterns, got {}".format(PATTERN_COUNT, len(patterns)))
    if len(outputs) != OUTPUT_COUNT:
        raise ParseError("expected {} output patterns, got {}".format(OUTPUT_COUNT, len(outputs)))
    return Reading(patterns, outputs)


def parse(text):
    return [parse_line(line) for line in text.splitlines() if line.strip()]


def count_unique_outputs(readings):
    """Count output patterns that show a 1, 4, 7 or 8"""
    return sum(1 for reading in readings for p in reading.outputs if p.size() in UNIQUE_SIZES)


def decode(reading):
    return read_output(map_wires(reading.patterns), reading.outputs)


def decode_all(readings, skip_invalid=False):
    """Decode readings one at a time.

    A reading that cannot be decoded ends the iteration with its DecodeError,
    unless skip_invalid is set; then it is logged and left out.
    """
    for n, reading in enumerate(readings, 1):
        try:
            yield decode(reading)
        except DecodeError as e:
            if not skip_invalid:
                raise
            log.warning("skipping reading %d: %s", n, e)


def total_output(readings, skip_invalid=False):
    return sum(decode_all(readings, skip_invalid=skip_invalid))
