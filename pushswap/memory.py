"""Byte-buffer helpers: fill, search, compare and copy."""

from __future__ import annotations

import operator

__all__ = ["bzero", "calloc", "memchr", "memcmp", "memcpy", "memmove", "memset"]

_SIZE_MAX = (1 << 64) - 1


def _check_length(n: int, *buffers) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"length must not be negative: {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"length {n} exceeds buffer of {len(buffer)} bytes")
    return n


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Set the first *n* bytes of *buffer* to the low byte of *c*."""
    n = _check_length(n, buffer)
    buffer[:n] = bytes([operator.index(c) & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first *n* bytes of *buffer* to zero."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of *count* elements of *size* bytes.

    Raises MemoryError when the total does not fit a 64-bit size.
    """
    count, size = operator.index(count), operator.index(size)
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > _SIZE_MAX:
        raise MemoryError(f"allocation of {count} x {size} bytes overflows")
    return bytearray(total)


def memchr(data: bytes | bytearray, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to the low byte of *c* within
    the first *n* bytes of *data*, or None."""
    n = _check_length(n, data)
    index = bytes(data[:n]).find(operator.index(c) & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes | bytearray, second: bytes | bytearray, n: int) -> int:
    """Compare the first *n* bytes; return the difference of the first unequal
    pair as unsigned bytes, or 0."""
    n = _check_length(n, first, second)
    for left, right in zip(first[:n], second[:n]):
        if left != right:
            return left - right
    return 0


def memcpy(dst: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first *n* bytes of *src* into the start of *dst*."""
    n = _check_length(n, dst, src)
    dst[:n] = src[:n]
    return dst


def memmove(buffer: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy *n* bytes inside *buffer* from offset *src* to offset *dst*,
    correct even when the two regions overlap."""
    dst, src = operator.index(dst), operator.index(src)
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    n = _check_length(n)
    if max(dst, src) + n > len(buffer):
        raise ValueError("move runs past the end of the buffer")
    buffer[dst:dst + n] = bytes(buffer[src:src + n])
    return buffer