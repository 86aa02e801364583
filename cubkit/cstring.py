"""String helpers with NUL-terminated string semantics.

Text arguments are ordinary Python strings. A NUL character inside one is
treated as the end of the string, as a terminated character array would be.
Searches return indices, or None where nothing is found. ``strlcpy`` and
``strlcat`` work on ``bytearray`` buffers, because they write into
fixed-size storage.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_NUL = "\0"


def _char(c: int | str) -> str:
    """Normalise *c* to a one-character string, truncating ints to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return chr(c & 0xFF)


def _terminated(s: str) -> str:
    """Return *s* up to, not including, its first NUL."""
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def _cbytes(data: bytes | bytearray) -> bytes:
    """Return the bytes of *data* up to, not including, its first NUL."""
    end = data.find(0)
    return bytes(data if end < 0 else data[:end])


def _check_count(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def strlen(s: str | bytes | bytearray) -> int:
    """Number of characters before the first NUL, or the whole length."""
    end = s.find(_NUL) if isinstance(s, str) else s.find(0)
    return len(s) if end < 0 else end


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first *c* in *s*; searching for NUL finds the terminator."""
    target = _char(c)
    text = _terminated(s)
    if target == _NUL:
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last *c* in *s*; searching for NUL finds the terminator."""
    target = _char(c)
    text = _terminated(s)
    if target == _NUL:
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters; return the difference of the first mismatch."""
    _check_count(n, "n")
    a_text, b_text = _terminated(s1), _terminated(s2)
    for index in range(min(n, max(len(a_text), len(b_text)))):
        a = ord(a_text[index]) if index < len(a_text) else 0
        b = ord(b_text[index]) if index < len(b_text) else 0
        if a != b:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int | None) -> int | None:
    """Find *needle* wholly within the first *length* characters of *haystack*.

    An empty needle matches at 0. A *length* of None searches the whole
    haystack.
    """
    hay = _terminated(haystack)
    pattern = _terminated(needle)
    if not pattern:
        return 0
    if length is None:
        length = len(hay)
    _check_count(length, "length")
    if length == 0 or not hay:
        return None
    index = hay.find(pattern, 0, min(length, len(hay)))
    return None if index < 0 else index


def substr(s: str, start: int, length: int) -> str:
    """At most *length* characters of *s* from *start*; empty past the end."""
    _check_count(start, "start")
    _check_count(length, "length")
    text = _terminated(s)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return _terminated(s1) + _terminated(s2)


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in *charset* from both ends of *s*."""
    return _terminated(s).strip(_terminated(charset))


def split(s: str, sep: int | str) -> list[str]:
    """Split *s* on *sep*, dropping empty words."""
    delimiter = _char(sep)
    text = _terminated(s)
    if delimiter == _NUL:
        return [text] if text else []
    return [word for word in text.split(delimiter) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(_terminated(s)))


def striteri(s: MutableSequence[str], func: Callable[[int, str], str | None]) -> None:
    """Apply ``func(index, char)`` to each character of *s* in place.

    Iteration stops at a NUL element. A non-None return value replaces the
    character at that index.
    """
    for index, ch in enumerate(s):
        if ch == _NUL:
            break
        replacement = func(index, ch)
        if replacement is not None:
            s[index] = replacement


def strlcpy(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Copy *src* into *dst* within *size* bytes, always NUL-terminating.

    Returns the length of *src*, so a result of *size* or more means the
    copy was truncated.
    """
    _check_count(size, "size")
    if size > len(dst):
        raise ValueError(f"size {size} exceeds buffer size {len(dst)}")
    source = _cbytes(src)
    if len(source) + 1 <= size:
        dst[:len(source) + 1] = source + b"\0"
    elif size != 0:
        dst[:size - 1] = source[:size - 1]
        dst[size - 1] = 0
    return len(source)


def strlcat(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Append *src* to the string in *dst*, keeping the total within *size* bytes.

    Returns the length of the string it tried to create.
    """
    _check_count(size, "size")
    if size > len(dst):
        raise ValueError(f"size {size} exceeds buffer size {len(dst)}")
    source = _cbytes(src)
    terminator = dst.find(0, 0, size)
    start = size if terminator < 0 else terminator
    room = max(size - start - 1, 0)
    piece = source[:room]
    if piece:
        dst[start:start + len(piece)] = piece
        dst[start + len(piece)] = 0
    return start + len(source)