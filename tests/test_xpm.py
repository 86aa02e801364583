import pytest

from cubkit.colors import lookup_color
from cubkit.xpm import (
    TRANSPARENT,
    Image,
    XpmError,
    color_code,
    extract_strings,
    parse_xpm,
    parse_xpm_file,
    strip_comments,
    text_to_rgb,
)

XPM_TEXT = """/* XPM */
static char *test_xpm[] = {
/* columns rows colors chars-per-pixel */
"3 2 2 1",
"# c #FF0000",
". c None",
/* pixels */
"#.#",
".#."
};
"""


def test_strip_comments_block_keeps_length():
    text = "a /* b */ c"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result.split() == ["a", "c"]


def test_strip_comments_line_comment_blanks_newline():
    text = "a // b\nc"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "\n" not in result
    assert result.split() == ["a", "c"]


def test_strip_comments_leaves_quoted_markers():
    text = '"/* x */" "// y"'
    assert strip_comments(text) == text


def test_extract_strings_in_order():
    assert extract_strings('x "one" y "two" "z') == ["one", "two"]


def test_color_code_distinguishes_keys():
    assert color_code("a", 1) == ord("a")
    assert color_code("ab", 2) != color_code("ba", 2)
    assert color_code("abX", 2) == color_code("ab", 2)


def test_color_code_short_text():
    with pytest.raises(XpmError):
        color_code("a", 2)


def test_text_to_rgb_hex():
    assert text_to_rgb("#00ff00") == 0x00FF00


def test_text_to_rgb_named_and_case():
    assert text_to_rgb("RED") == lookup_color("red")


def test_text_to_rgb_with_suffix():
    assert text_to_rgb("light", "grey") == lookup_color("light grey")


def test_text_to_rgb_none_and_unknown():
    assert text_to_rgb("None") == -1
    assert text_to_rgb("no-such-colour") == 0


def test_parse_xpm_file(tmp_path):
    path = tmp_path / "test.xpm"
    path.write_text(XPM_TEXT, encoding="latin-1")
    image = parse_xpm_file(path)
    assert (image.width, image.height) == (3, 2)
    assert image.pixels == [
        0xFF0000, TRANSPARENT, 0xFF0000,
        TRANSPARENT, 0xFF0000, TRANSPARENT,
    ]


def test_parse_xpm_matches_file_parse(tmp_path):
    path = tmp_path / "same.xpm"
    path.write_text(XPM_TEXT, encoding="latin-1")
    direct = parse_xpm(extract_strings(strip_comments(XPM_TEXT)))
    assert parse_xpm_file(path) == direct


def test_parse_xpm_two_chars_per_pixel():
    image = parse_xpm(["2 1 2 2", "aa c #000010", "bb c #000020", "bbaa"])
    assert image == Image(2, 1, [0x000020, 0x000010])


def test_short_keys_later_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.pixels == [0x000002]


def test_long_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert image.pixels == [0x000001]


def test_undefined_key_gives_zero():
    image = parse_xpm(["2 1 1 1", "a c #0000ff", "az"])
    assert image.pixels == [0x0000FF, 0]


@pytest.mark.parametrize("header", ["0 1 1 1", "1 1 1", "1 x 1 1", "1 1 1 0"])
def test_bad_header(header):
    with pytest.raises(XpmError):
        parse_xpm([header, "a c #000000", "a"])


def test_truncated_data():
    with pytest.raises(XpmError):
        parse_xpm(["1 2 1 1", "a c #000000", "a"])


def test_colour_line_without_key():
    with pytest.raises(XpmError):
        parse_xpm(["1 1 1 1", "a s #000000", "a"])


def test_short_pixel_row():
    with pytest.raises(XpmError):
        parse_xpm(["3 1 1 1", "a c #000000", "aa"])


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        parse_xpm_file(tmp_path / "absent.xpm")