class DecodeError(Exception):
    """A reading that cannot be decoded"""


class ParseError(DecodeError):
    """Puzzle text that does not describe a reading"""


class ClassificationError(DecodeError):
    """Digit patterns whose sizes do not match the seven-segment font"""


class DeductionError(DecodeError):
    """A deduction step found no candidate or more than one"""


class UnknownPatternError(DecodeError):
    """A remapped pattern that no digit lights up"""

    def __init__(self, pattern):
        super().__init__("no digit lights segments '{}'".format(pattern))
        self.pattern = pattern
