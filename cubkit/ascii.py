"""ASCII character classification, case mapping and integer/text conversion."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _code(c: int | str) -> int:
    """Return the character code of *c*, given as an int or a one-character str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise TypeError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return c


def is_alpha(c: int | str) -> bool:
    """True for the letters A-Z and a-z."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for the decimal digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(c) <= 126


def to_lower(c: int | str) -> int | str:
    """Map A-Z to a-z; other values are returned unchanged, in the type given."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Map a-z to A-Z; other values are returned unchanged, in the type given."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is read, then digits
    are consumed until the first non-digit. Text without digits yields 0.
    """
    rest = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not ("0" <= ch <= "9"):
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return sign * result


def itoa(n: int) -> str:
    """Render a 32-bit signed integer as decimal text."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    digits = []
    magnitude = abs(n)
    while True:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(chr(ord("0") + digit))
        if magnitude == 0:
            break
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))