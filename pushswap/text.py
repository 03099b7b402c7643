"""String helpers: splitting, searching, copying, comparing and trimming."""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence
from itertools import islice, zip_longest

__all__ = [
    "split",
    "strchr",
    "strdup",
    "striteri",
    "strjoin",
    "strlcat",
    "strlcpy",
    "strlen",
    "strmapi",
    "strncmp",
    "strnstr",
    "strrchr",
    "strtrim",
    "substr",
]

_NUL = "\0"


def _char(c: int | str) -> str:
    """Return *c* as a one-character string; an int is taken as a byte code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) & 0xFF)


def _non_negative(value: int, name: str) -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative: {value}")
    return value


def split(s: str, sep: int | str) -> list[str]:
    """Split *s* on the character *sep*, dropping empty words."""
    return [word for word in s.split(_char(sep)) if word]


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first *c* in *s*, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last *c* in *s*, or None.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of *s*."""
    return str(s)


def strlen(s: str) -> int:
    """Return the number of characters in *s*."""
    return len(s)


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], str | None]
) -> MutableSequence[str]:
    """Call *func* with each index and character of *chars*.

    A character returned by *func* replaces the one passed in; None leaves it.
    The sequence is changed in place and returned.
    """
    for index, ch in enumerate(chars):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement
    return chars


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string made of *func* applied to each index and character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def strjoin(first: str, second: str) -> str:
    """Return *first* followed by *second*."""
    return first + second


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy *src* into a buffer of *size* characters, terminator included.

    Returns the copied text and the full length of *src*; the copy is
    truncated when the length reaches *size*.
    """
    size = _non_negative(size, "size")
    copied = src[: size - 1] if size else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dst* in a buffer of *size* characters, terminator included.

    Returns the resulting text and the length the full result would have had.
    When *dst* already fills the buffer nothing is appended and the length
    reported counts only *size* characters of it.
    """
    size = _non_negative(size, "size")
    kept = min(len(dst), size)
    if kept < size:
        dst = dst + src[: size - kept - 1]
    return dst, kept + len(src)


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most *n* characters; return the difference of the first
    unequal pair of codes, or 0. The end of a string counts as code 0."""
    n = _non_negative(n, "n")
    pairs = zip_longest(first, second, fillvalue=_NUL)
    for left, right in islice(pairs, n):
        if left != right or left == _NUL:
            return ord(left) - ord(right)
    return 0


def strnstr(haystack: str, needle: str, n: int) -> int | None:
    """Return the index of *needle* lying wholly within the first *n*
    characters of *haystack*, or None. An empty needle is found at 0."""
    n = _non_negative(n, "n")
    if not needle:
        return 0
    index = haystack.find(needle, 0, n)
    return None if index < 0 else index


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in *charset* from both ends of *s*."""
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most *length* characters of *s* beginning at *start*.

    A start past the end gives an empty string.
    """
    start = _non_negative(start, "start")
    length = _non_negative(length, "length")
    if start > len(s):
        return ""
    return s[start : start + length]