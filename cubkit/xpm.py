"""Reading XPM images into 32-bit pixel buffers."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from cubkit.ascii import atoi
from cubkit.colors import lookup_color
from cubkit.wordtab import find, find_unquoted, split_words

TRANSPARENT = 0xFF000000
"""Pixel value written for the colour ``None``."""

_NAME_BUFFER = 64
_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]*)")


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


@dataclass
class Image:
    """A decoded image: row-major 0xAARRGGBB pixels, top row first."""

    width: int
    height: int
    pixels: list[int] = field(default_factory=list)


def strip_comments(text: str) -> str:
    """Blank out C comments that lie outside double quotes.

    Block comments are handled first, then line comments; a line comment
    is blanked together with the newline that ends it. The length of the
    text is kept.
    """
    while (begin := find_unquoted(text, "/*", len(text))) is not None:
        end = find(text[begin + 2:], "*/", len(text) - begin - 2)
        span = len(text) - begin if end is None else end + 4
        text = text[:begin] + " " * span + text[begin + span:]
    while (begin := find_unquoted(text, "//", len(text))) is not None:
        end = find(text[begin + 2:], "\n", len(text) - begin - 2)
        span = len(text) - begin if end is None else end + 3
        text = text[:begin] + " " * span + text[begin + span:]
    return text


def _iter_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        start = text.find('"', pos)
        if start < 0:
            return
        end = text.find('"', start + 1)
        if end < 0:
            return
        yield text[start + 1:end]
        pos = end + 1


def extract_strings(text: str) -> list[str]:
    """Return the contents of each double-quoted string in *text*, in order."""
    return list(_iter_strings(text))


def color_code(text: str, cpp: int) -> int:
    """Pack the first *cpp* characters of *text* into one integer key."""
    if cpp <= 0:
        raise ValueError("cpp must be positive")
    if len(text) < cpp:
        raise XpmError(f"expected {cpp} characters, got {text!r}")
    result = 0
    for ch in text[:cpp]:
        result = (result << 8) + ord(ch)
    return result


def text_to_rgb(name: str, suffix: str | None = None) -> int:
    """Colour value of an XPM colour specification.

    ``#rrggbb`` is read as hexadecimal. Otherwise the name, joined with
    *suffix* by a space when one is given, is looked up in the colour
    table; unknown names give 0 and ``None`` gives -1.
    """
    if name.startswith("#"):
        match = _HEX_PREFIX.match(name, 1)
        sign, digits = match.groups()
        value = int(digits, 16) if digits else 0
        return -value if sign == "-" else value
    if suffix is not None:
        name = f"{name} {suffix}"[:_NAME_BUFFER - 1]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"bad XPM header {line!r}")
    values = tuple(atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError(f"bad XPM header {line!r}")
    return values


def parse_xpm(lines: Iterable[str]) -> Image:
    """Decode an XPM image from its strings: header, colours, then pixel rows."""
    source = iter(lines)
    width, height, ncolors, cpp = _read_header(_next_line(source, "header"))
    # With one or two characters per pixel a later definition replaces an
    # earlier one; with more, the first definition of a key is kept.
    later_wins = cpp <= 2
    palette: dict[int, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "colour table")
        words = split_words(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour line without 'c' key: {line!r}") from None
        if index >= len(words):
            raise XpmError(f"colour line without a value: {line!r}")
        suffix = words[index + 1] if index + 1 < len(words) else None
        rgb = text_to_rgb(words[index], suffix)
        key = color_code(line, cpp)
        if later_wins:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    pixels: list[int] = []
    for _ in range(height):
        line = _next_line(source, "pixel rows")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        for x in range(width):
            color = palette.get(color_code(line[cpp * x:], cpp), 0)
            if color == -1:
                color = TRANSPARENT
            pixels.append(color & 0xFFFFFFFF)
    return Image(width, height, pixels)


def parse_xpm_file(path: str | os.PathLike[str]) -> Image:
    """Read and decode an XPM file."""
    with open(path, encoding="latin-1") as handle:
        text = handle.read()
    return parse_xpm(extract_strings(strip_comments(text)))