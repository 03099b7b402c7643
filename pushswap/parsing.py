"""Reading the command-line numbers into the ranks that fill stack a."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from pushswap.text import split, strtrim

__all__ = [
    "InputError",
    "parse_int",
    "split_args",
    "has_duplicates",
    "normalize",
    "parse_input",
    "input_is_empty",
]

INT_MIN = -(1 << 31)
INT_MAX = (1 << 31) - 1

_INT_PATTERN = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]+)")


class InputError(ValueError):
    """The arguments do not describe a valid list of distinct integers."""


def parse_int(text: str) -> int:
    """Read *text* as a whole 32-bit signed decimal integer.

    Leading whitespace and one sign are allowed; anything after the digits,
    or a value out of range, raises InputError.
    """
    match = _INT_PATTERN.fullmatch(text)
    if match is None:
        raise InputError(f"not an integer: {text!r}")
    sign, digits = match.groups()
    value = -int(digits) if sign == "-" else int(digits)
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(f"integer out of range: {text!r}")
    return value


def split_args(argv: Iterable[str]) -> list[str]:
    """Split each argument on spaces and gather the words in order.

    An argument with no words in it raises InputError.
    """
    words: list[str] = []
    for arg in argv:
        parts = split(arg, " ")
        if not parts:
            raise InputError(f"empty argument: {arg!r}")
        words.extend(parts)
    return words


def has_duplicates(values: Sequence[int]) -> bool:
    """True when some value appears more than once."""
    return len(set(values)) != len(values)


def normalize(values: Sequence[int]) -> list[int]:
    """Replace each value by its rank, 0 for the smallest.

    The values must be distinct.
    """
    if has_duplicates(values):
        raise InputError("duplicate values cannot be ranked")
    ranks = {value: rank for rank, value in enumerate(sorted(values))}
    return [ranks[value] for value in values]


def parse_input(args: Iterable[str]) -> list[int]:
    """Parse words into distinct integers and return their ranks."""
    values = [parse_int(arg) for arg in args]
    if has_duplicates(values):
        raise InputError("duplicate values")
    return normalize(values)


def input_is_empty(argv: Sequence[str]) -> bool:
    """True when the only argument holds nothing but whitespace."""
    return len(argv) == 1 and strtrim(argv[0], " \t\n\r") == ""