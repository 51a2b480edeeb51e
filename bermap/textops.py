"""Building, splitting and converting strings.

Every function returns a new value and leaves its arguments alone, except
``striteri``, which rewrites a mutable sequence of characters in place.
Sizes and offsets that make no sense (negative ones) raise ``ValueError``.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import takewhile
from typing import Optional

_WHITESPACE = " \t\n\v\f\r"
_LONG_MAX = 2**63 - 1
_LONG_SPAN = 2**64


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def _as_long(value: int) -> int:
    """Wrap ``value`` into the signed 64-bit range."""
    return (value + 2**63) % _LONG_SPAN - 2**63


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A start at or beyond the end gives an empty string.
    """
    _require_str(s, "s")
    if start < 0 or length < 0:
        raise ValueError(f"start and length must not be negative: {start}, {length}")
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return _require_str(s1, "s1") + _require_str(s2, "s2")


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``s``."""
    _require_str(s, "s")
    _require_str(charset, "charset")
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the single character ``sep``, dropping empty pieces."""
    _require_str(s, "s")
    _require_str(sep, "sep")
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def striteri(s: MutableSequence[str], f: Callable[[int, str], Optional[str]]) -> None:
    """Call ``f(index, char)`` on each character of ``s`` in order.

    When ``f`` returns a character it replaces the one at that index;
    ``None`` leaves it as it was.
    """
    for index, char in enumerate(s):
        replacement = f(index, char)
        if replacement is not None:
            s[index] = replacement


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return the string made of ``f(index, char)`` for each character of ``s``."""
    _require_str(s, "s")
    return "".join(f(index, char) for index, char in enumerate(s))


def atoi(text: str) -> int:
    """Read a decimal integer from the start of ``text``.

    Leading whitespace is skipped and one sign is accepted; reading stops
    at the first non-digit. Text with no digits gives 0. On overflow the
    result is -1 for a positive number and 0 for a negative one.
    """
    rest = _require_str(text, "text").lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    result = 0
    for digit in takewhile(lambda ch: "0" <= ch <= "9", rest):
        result *= 10
        if result >= _LONG_MAX:
            return 0 if negative else -1
        result += ord(digit) - ord("0")
    return _as_long(-result if negative else result)


def itoa(n: int) -> str:
    """Return ``n`` written in decimal, with a minus sign when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)