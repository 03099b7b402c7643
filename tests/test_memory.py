import pytest

from pushswap.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_bzero_clears_prefix_only():
    buf = bytearray(b"abcdef")
    bzero(buf, 3)
    assert buf == bytes(3) + b"def"


def test_bzero_with_zero_length_changes_nothing():
    buf = bytearray(b"xyz")
    bzero(buf, 0)
    assert buf == b"xyz"


def test_calloc_is_zero_filled():
    buf = calloc(3, 4)
    assert buf == bytes(3 * 4)
    assert isinstance(buf, bytearray)


def test_calloc_empty():
    assert len(calloc(0, 8)) == 0
    assert len(calloc(8, 0)) == 0


def test_calloc_overflow_raises():
    with pytest.raises(MemoryError):
        calloc(1 << 40, 1 << 40)


def test_calloc_negative_raises():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memchr_finds_first_match():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == data.index(b"l")


def test_memchr_respects_length():
    data = b"hello"
    assert memchr(data, ord("o"), 4) is None
    assert memchr(data, ord("z"), len(data)) is None


def test_memchr_uses_low_byte():
    data = bytes([0x10, 0xFF, 0x20])
    assert memchr(data, -1, len(data)) == 1
    assert memchr(data, 0x110, len(data)) == 0


def test_memcmp_equal_and_ordering():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 2) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_bytes_are_unsigned():
    assert memcmp(b"\xff", b"\x00", 1) == 255
    assert memcmp(b"\x00", b"\x80", 1) < 0


def test_memcmp_length_past_end_raises():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


def test_memcpy_copies_prefix():
    dst = bytearray(b"......")
    result = memcpy(dst, b"abcdef", 3)
    assert result is dst
    assert dst == b"abc..."


def test_memcpy_negative_length_raises():
    with pytest.raises(ValueError):
        memcpy(bytearray(4), b"abcd", -1)


def test_memmove_overlap_forward():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == b"ababcd"


def test_memmove_overlap_backward():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == b"cdefef"


def test_memmove_same_region_is_identity():
    buf = bytearray(b"abcdef")
    memmove(buf, 1, 1, 5)
    assert buf == b"abcdef"


def test_memmove_past_end_raises():
    with pytest.raises(ValueError):
        memmove(bytearray(b"abc"), 1, 0, 3)


def test_memset_uses_low_byte_and_returns_buffer():
    buf = bytearray(b"zzzzz")
    result = memset(buf, 0x141, 3)
    assert result is buf
    assert buf[:3] == bytes([0x41]) * 3
    assert buf[3:] == b"zz"


def test_memset_length_past_end_raises():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)