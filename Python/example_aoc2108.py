# https://adventofcode.com/2021/day/8

import argparse
import logging
import sys

from api import count_unique_outputs, parse, total_output
from errors import DecodeError

log = logging.getLogger(__name__)

EXAMPLE = """be cfbegad cbdgef fgaecd cgeb fdcge agebfd fecdb fabcd edb | fdgacbe cefdb cefbgd gcbe
edbfga begcd cbg gc gcadebf fbgde acbgfd abcde gfcbed gfec | fcgedb cgb dgebacf gc
fgaebd cg bdaec gdafb agbcfd gdcbef bgcad gfac gcb cdgabef | cg cg fdcagb cbg
fbegcd cbd adcefb dageb afcb bc aefdc ecdab fgdeca fcdbega | efabcd cedba gadfec cb
aecbfdg fbg gf bafeg dbefa fcge gcbea fcaegb dgceab fcbdga | gecf egdcabf bgf bfgea
fgeab ca afcebg bdacfeg cfaedg gcfdb baec bfadeg bafgc acf | gebdcfa ecba ca fadegcb
dbcfg fgd bdegcaf fgec aegbdf ecdfab fbedc dacgb gdcebf gf | cefg dcbef fcge gbcadfe
bdfegc cbegaf gecbf dfcage bdacg ed bedf ced adcbefg gebcd | ed bcgafe cdgba cbgef
egadfb cdbfeg cegd fecab cgb gbdefca cg fgcdab egfdb bfceg | gbdfcae bgc cg cgb
gcafb gcf dcaebfg ecagb gf abcdeg gaef cafbge fdbac fegbdc | fgae cfgab fg bagce"""


def main(argv=None):
    parser = argparse.ArgumentParser(description="Decode scrambled seven-segment displays")
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"),
                        help="Puzzle input (default: the built-in example)")
    parser.add_argument("--part", type=int, choices=(1, 2), help="Only solve this part")
    parser.add_argument("--skip-invalid", action="store_true",
                        help="Leave out readings that cannot be decoded instead of stopping")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show every derived wire mapping")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='[%(levelname)s] %(name)s: %(message)s')

    if args.input is None:
        text = EXAMPLE
    else:
        with args.input:
            text = args.input.read()

    try:
        readings = parse(text)
        log.debug("parsed %d readings", len(readings))
        if args.part in (None, 1):
            print("part 1:", count_unique_outputs(readings))
        if args.part in (None, 2):
            print("part 2:", total_output(readings, skip_invalid=args.skip_invalid))
    except DecodeError as e:
        print("error: {}".format(e), file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
