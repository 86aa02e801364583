"""Substring search and word splitting on NUL-terminated text."""

from __future__ import annotations

from cubkit.cstring import strlen


def _body(text: str) -> str:
    return text[:strlen(text)]


def find(text: str, needle: str, limit: int) -> int | None:
    """Index of the first *needle* in *text*, or None.

    Nothing is found when *needle* is longer than *limit*. The search
    itself runs up to the first NUL of *text*.
    """
    pattern = _body(needle)
    if not pattern:
        raise ValueError("needle must not be empty")
    if len(pattern) > limit:
        return None
    index = _body(text).find(pattern)
    return None if index < 0 else index


def find_unquoted(text: str, needle: str, limit: int) -> int | None:
    """Index of the first *needle* in *text* that lies outside double quotes.

    A double quote toggles the quoted state before a match is tried at
    that position. Nothing is found when *needle* is longer than *limit*.
    """
    pattern = _body(needle)
    if not pattern:
        raise ValueError("needle must not be empty")
    if len(pattern) > limit:
        return None
    body = _body(text)
    quoted = False
    for pos in range(len(body) - len(pattern) + 1):
        if body[pos] == '"':
            quoted = not quoted
        if not quoted and body.startswith(pattern, pos):
            return pos
    return None


def split_words(text: str) -> list[str]:
    """Split *text* on spaces and tabs, dropping empty words."""
    return [word for word in _body(text).replace("\t", " ").split(" ") if word]