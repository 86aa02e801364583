import pytest

from cubkit.cstring import (
    split,
    strchr,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("text", ["", "a", "hello world", "cub3D"])
def test_strlen_matches_len(text):
    assert strlen(text) == len(text)


def test_strlen_stops_at_nul():
    assert strlen("abc\0def") == 3
    assert strlen(b"xy\0z") == 2


def test_strchr_finds_first():
    text = "need one map file"
    assert strchr(text, "e") == text.index("e")
    assert strchr(text, ord("m")) == text.index("m")


def test_strchr_missing_and_terminator():
    assert strchr("abc", "z") is None
    assert strchr("abc", "\0") == 3
    assert strchr("abc", 0) == 3


def test_strrchr_finds_last():
    text = "need one map file"
    assert strrchr(text, "e") == text.rindex("e")
    assert strrchr(text, "q") is None
    assert strrchr("abc", "\0") == 3


def test_strchr_rejects_long_char():
    with pytest.raises(TypeError):
        strchr("abc", "ab")


def test_strncmp_equal_and_prefix():
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("abcd", "abcx", 3) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_difference_of_first_mismatch():
    assert strncmp("abd", "abc", 3) == ord("d") - ord("c")
    assert strncmp("ab", "abc", 3) == -ord("c")
    assert strncmp("abc", "ab", 3) == ord("c")


def test_strncmp_negative_n():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_basic():
    hay = "parse_input load_file"
    assert strnstr(hay, "load", len(hay)) == hay.index("load")
    assert strnstr(hay, "load", None) == hay.index("load")


def test_strnstr_respects_length():
    hay = "parse_input load_file"
    pos = hay.index("load")
    assert strnstr(hay, "load", pos + 3) is None
    assert strnstr(hay, "load", pos + 4) == pos


def test_strnstr_edge_cases():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("", "a", 5) is None
    assert strnstr("abc", "a", 0) is None
    assert strnstr("abc", "zz", 3) is None


def test_substr():
    assert substr("hello world", 6, 5) == "world"
    assert substr("hello", 2, 100) == "llo"
    assert substr("hello", 5, 3) == ""
    assert substr("hello", 1, 0) == ""
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin():
    assert strjoin("cub", "3D") == "cub" + "3D"
    assert strjoin("", "") == ""


@pytest.mark.parametrize(
    "text, charset",
    [("  map.cub \n", " \n"), ("xxaxx", "x"), ("", "ab"), ("aaa", "a"), ("abc", "")],
)
def test_strtrim_matches_strip(text, charset):
    result = strtrim(text, charset)
    assert result == text.strip(charset)
    if result:
        assert result[0] not in charset and result[-1] not in charset


def test_split_drops_empty_words():
    assert split(",,a,,b,", ",") == ["a", "b"]
    assert split("", ",") == []
    assert split(",,,", ",") == []
    assert split("NO ./north.xpm", " ") == ["NO", "./north.xpm"]


def test_split_roundtrip():
    words = ["F", "220,100,0"]
    assert split(" ".join(words), " ") == words


def test_split_on_nul_keeps_whole():
    assert split("abc", "\0") == ["abc"]
    assert split("", "\0") == []


def test_strmapi_passes_index():
    result = strmapi("abcd", lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert result == "AbCd"
    assert strmapi("", lambda i, ch: ch) == ""


def test_striteri_modifies_in_place():
    chars = list("abc")
    seen = []

    def visit(index, ch):
        seen.append(index)
        return ch.upper() if index == 1 else None

    striteri(chars, visit)
    assert chars == ["a", "B", "c"]
    assert seen == [0, 1, 2]


def test_striteri_stops_at_nul():
    chars = ["a", "\0", "b"]
    striteri(chars, lambda i, ch: "z")
    assert chars == ["z", "\0", "b"]


def test_strlcpy_fits():
    dst = bytearray(10)
    assert strlcpy(dst, b"hello", len(dst)) == 5
    assert dst[:6] == b"hello\0"


def test_strlcpy_truncates():
    dst = bytearray(b"XXXXXXXX")
    assert strlcpy(dst, b"hello", 3) == 5
    assert dst[:3] == b"he\0"
    assert dst[3:] == b"XXXXX"


def test_strlcpy_size_zero_leaves_buffer():
    dst = bytearray(b"abc")
    assert strlcpy(dst, b"hello", 0) == 5
    assert dst == bytearray(b"abc")


def test_strlcpy_size_too_large():
    with pytest.raises(ValueError):
        strlcpy(bytearray(2), b"a", 5)


def test_strlcat_appends():
    dst = bytearray(b"cub\0" + bytes(6))
    assert strlcat(dst, b"3D", len(dst)) == 5
    assert dst[:6] == b"cub3D\0"


def test_strlcat_truncates():
    dst = bytearray(b"ab\0" + bytes(2))
    assert strlcat(dst, b"cdef", 5) == 6
    assert dst == bytearray(b"abcd\0")


def test_strlcat_size_below_dst_length():
    dst = bytearray(b"abcdef\0")
    assert strlcat(dst, b"xyz", 3) == 3 + 3
    assert dst == bytearray(b"abcdef\0")