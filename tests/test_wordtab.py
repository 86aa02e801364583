import pytest

from cubkit.wordtab import find, find_unquoted, split_words


def test_find_locates_first_occurrence():
    assert find("abcabc", "ca", 6) == 2


def test_find_missing_gives_none():
    assert find("abcdef", "xy", 6) is None


def test_find_needle_longer_than_limit():
    assert find("abcdef", "abc", 2) is None


def test_find_stops_at_nul():
    assert find("ab\0cd", "cd", 5) is None


def test_find_empty_needle_rejected():
    with pytest.raises(ValueError):
        find("abc", "", 3)


def test_find_unquoted_skips_quoted_text():
    text = '"/*" x /*'
    assert find_unquoted(text, "/*", len(text)) == text.rindex("/*")


def test_find_unquoted_matches_outside_quotes():
    assert find_unquoted("ab//cd", "//", 6) == 2


def test_find_unquoted_only_quoted_gives_none():
    text = '"//"'
    assert find_unquoted(text, "//", len(text)) is None


def test_find_unquoted_needle_longer_than_limit():
    assert find_unquoted("abc", "abc", 1) is None


def test_split_words_spaces_and_tabs():
    assert split_words("  16\t16  2 1 ") == ["16", "16", "2", "1"]


def test_split_words_keeps_newlines_inside_words():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_split_words_blank_is_empty():
    assert split_words(" \t ") == []