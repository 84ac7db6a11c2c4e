import pytest

from okeyshell.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_only():
    buf = bytearray(5)
    result = memset(buf, ord("a"), 3)
    assert result is buf
    assert buf == bytearray(b"aaa\x00\x00")


def test_memset_truncates_value_to_byte():
    buf = bytearray(2)
    memset(buf, 0x141, 2)
    assert buf == bytearray(b"AA")


def test_memset_rejects_length_beyond_buffer():
    with pytest.raises(IndexError):
        memset(bytearray(2), 1, 3)


def test_memset_rejects_negative_length():
    with pytest.raises(ValueError):
        memset(bytearray(2), 1, -1)


def test_bzero_clears_prefix():
    buf = bytearray(b"hello")
    bzero(buf, 2)
    assert buf == bytearray(b"\x00\x00llo")


def test_bzero_whole_buffer_equals_calloc():
    buf = bytearray(b"xyz")
    assert bzero(buf, len(buf)) == calloc(1, 3)


def test_memcpy_copies_count_bytes():
    dest = bytearray(b"-----")
    memcpy(dest, b"abcdef", 3)
    assert dest == bytearray(b"abc--")


def test_memcpy_round_trip_full_length():
    src = b"payload"
    dest = bytearray(len(src))
    assert bytes(memcpy(dest, src, len(src))) == src


def test_memcpy_rejects_short_source():
    with pytest.raises(IndexError):
        memcpy(bytearray(5), b"ab", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == bytearray(b"cdefef")


def test_memmove_out_of_range():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first_occurrence():
    assert memchr(b"hello", ord("l"), 5) == 2


def test_memchr_respects_count():
    assert memchr(b"hello", ord("o"), 4) is None


def test_memchr_truncates_value():
    assert memchr(b"abc", 0x100 + ord("c"), 3) == 2


def test_memcmp_equal_is_zero():
    assert memcmp(b"same", b"same", 4) == 0


def test_memcmp_sign_follows_first_difference():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_is_antisymmetric():
    assert memcmp(b"\x01\xff", b"\x01\x00", 2) == -memcmp(b"\x01\x00", b"\x01\xff", 2)


def test_memcmp_stops_at_count():
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_treats_bytes_unsigned():
    assert memcmp(b"\xff", b"\x00", 1) > 0


def test_calloc_size_and_zeroes():
    buf = calloc(3, 4)
    assert len(buf) == 12
    assert all(byte == 0 for byte in buf)


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)