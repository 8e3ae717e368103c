"""Reading the numbers to sort from command-line arguments."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

INT_MIN = -2147483648
INT_MAX = 2147483647
_DIGITS = "0123456789"


class InputError(ValueError):
    """The arguments do not describe a valid set of numbers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def parse_number(text: str) -> int:
    """Read one signed decimal integer that must fit in 32 bits.

    An optional sign may lead, and every sign must be followed by a digit;
    anything else that is not a digit is an error.
    """
    for position, char in enumerate(text):
        if char in "+-":
            following = text[position + 1 : position + 2]
            if not following or following not in _DIGITS:
                raise InputError()
    sign = 1
    digits = text
    if digits[:1] in ("+", "-") and digits:
        if digits[0] == "-":
            sign = -1
        digits = digits[1:]
    if any(char not in _DIGITS for char in digits):
        raise InputError()
    value = sign * int(digits) if digits else 0
    if not INT_MIN <= value <= INT_MAX:
        raise InputError()
    return value


def check_unique(values: Iterable[int]) -> list[int]:
    """Return the values as a list, raising InputError if any repeats."""
    values = list(values)
    if len(set(values)) != len(values):
        raise InputError()
    return values


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn the program's arguments into the numbers to sort.

    A single argument holds the numbers separated by spaces; several
    arguments hold one number each.
    """
    args = list(args)
    if len(args) == 1:
        words = [word for word in args[0].split(" ") if word]
    else:
        words = args
    return check_unique(parse_number(word) for word in words)