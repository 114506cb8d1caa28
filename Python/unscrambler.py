from segments import digit_of


def read_digit(mapping, pattern):
    return digit_of(mapping.translate(pattern))


def read_output(mapping, outputs):
    """Read the output patterns as one decimal number, first pattern first"""
    number = 0
    for pattern in outputs:
        number = number * 10 + read_digit(mapping, pattern)
    return number
