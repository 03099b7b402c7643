"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

import operator
import re

__all__ = [
    "is_alnum",
    "is_alpha",
    "is_ascii",
    "is_digit",
    "is_print",
    "to_lower",
    "to_upper",
    "atoi",
    "itoa",
]

_INT_BITS = 32
_INT_RANGE = 1 << _INT_BITS
_INT_MIN = -(1 << (_INT_BITS - 1))

_ATOI_PATTERN = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


def _code(c: int | str) -> int:
    """Return the character code of *c*, given as a one-character string or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def is_alpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _map_case(c: int | str, low: str, high: str, shift: int) -> int | str:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_lower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; leave anything else alone.

    The result has the same type as the argument.
    """
    return _map_case(c, "A", "Z", 32)


def to_upper(c: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; leave anything else alone.

    The result has the same type as the argument.
    """
    return _map_case(c, "a", "z", -32)


def atoi(text: str) -> int:
    """Read a leading decimal integer from *text*.

    Leading whitespace and one sign are accepted, reading stops at the first
    non-digit, and text without digits gives 0. The result wraps around to
    the 32-bit signed range as a machine int would.
    """
    match = _ATOI_PATTERN.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    return (value - _INT_MIN) % _INT_RANGE + _INT_MIN


def itoa(n: int) -> str:
    """Return the decimal representation of *n*."""
    return str(operator.index(n))