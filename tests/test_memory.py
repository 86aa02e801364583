import pytest

from cubkit.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_partial():
    buf = bytearray(b"hello")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxxlo")


def test_memset_uses_low_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytearray([0x41] * 4)


def test_memset_too_long():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero():
    buf = bytearray(b"abcd")
    bzero(buf, 2)
    assert buf == bytearray(b"\x00\x00cd")


def test_calloc_zeroed_and_sized():
    buf = calloc(3, 4)
    assert len(buf) == 12
    assert all(b == 0 for b in buf)
    assert calloc(0, 8) == bytearray()


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 2)


def test_memcpy():
    dst = bytearray(b"......")
    result = memcpy(dst, b"abcdef", 4)
    assert result is dst
    assert dst == bytearray(b"abcd..")


def test_memcpy_zero_length_keeps_dst():
    dst = bytearray(b"keep")
    memcpy(dst, b"xxxx", 0)
    assert dst == bytearray(b"keep")


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == bytearray(b"cdefef")


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_found_and_missing():
    data = b"hello world"
    assert memchr(data, ord("o"), len(data)) == data.index(b"o")
    assert memchr(data, ord("w"), 5) is None
    assert memchr(data, ord("z"), len(data)) is None


def test_memchr_low_byte():
    data = b"\x00\x41"
    assert memchr(data, 0x141, 2) == 1


def test_memcmp_equal_and_ordering():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_unsigned_bytes():
    assert memcmp(b"\xff", b"\x00", 1) == 255


def test_memcmp_antisymmetric():
    pairs = [(b"aaa", b"aab"), (b"\x80x", b"\x7fx"), (b"same", b"same")]
    for a, b in pairs:
        assert memcmp(a, b, len(a)) == -memcmp(b, a, len(a))