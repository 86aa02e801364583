"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

from cubkit.ascii import itoa
from cubkit.cstring import strlen


def _stream(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: int | str, stream: TextIO | None = None) -> None:
    """Write one character; an int is truncated to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        ch = c
    elif isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    else:
        ch = chr(c & 0xFF)
    _stream(stream).write(ch)


def put_str(s: str, stream: TextIO | None = None) -> None:
    """Write *s* up to its first NUL."""
    _stream(stream).write(s[:strlen(s)])


def put_endl(s: str, stream: TextIO | None = None) -> None:
    """Write *s* up to its first NUL, followed by a newline."""
    out = _stream(stream)
    put_str(s, out)
    out.write("\n")


def put_number(n: int, stream: TextIO | None = None) -> None:
    """Write a 32-bit signed integer in decimal."""
    _stream(stream).write(itoa(n))