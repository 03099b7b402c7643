"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import operator
import sys
from typing import TextIO

from pushswap.chars import itoa

__all__ = ["put_char", "put_str", "put_endl", "put_nbr"]


def _stream(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: int | str, stream: TextIO | None = None) -> None:
    """Write one character, given as a string or a byte code, to *stream*."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    else:
        ch = chr(operator.index(c) & 0xFF)
    _stream(stream).write(ch)


def put_str(s: str | None, stream: TextIO | None = None) -> None:
    """Write *s* to *stream*; None writes nothing."""
    if s is None:
        return
    _stream(stream).write(s)


def put_endl(s: str | None, stream: TextIO | None = None) -> None:
    """Write *s* followed by a newline; None writes nothing at all."""
    if s is None:
        return
    out = _stream(stream)
    out.write(s)
    out.write("\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal representation of *n* to *stream*."""
    _stream(stream).write(itoa(n))