"""String searching, comparison and bounded copying.

Strings are plain ``str`` values. Searches return an index or ``None``.
The bounded copies return the resulting text together with the length the
full result would have had, so callers can tell when it was truncated.
"""

from __future__ import annotations

from typing import NamedTuple, Optional, Union

CharLike = Union[int, str]

_NUL = "\0"


class Copied(NamedTuple):
    """Result of a bounded copy: the text written and the length it aimed for."""

    text: str
    length: int

    @property
    def truncated(self) -> bool:
        """True when the whole result did not fit in the given size."""
        return len(self.text) < self.length


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"negative size: {size}")


def strlen(s: str) -> int:
    """Number of characters in ``s``."""
    return len(s)


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``; searching for NUL finds the end."""
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    if ch == _NUL:
        return len(s)
    return None


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``; searching for NUL finds the end."""
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; the end of a string counts as code 0.

    Returns the difference of the first differing codes, or 0.
    """
    _check_size(n)
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Index of the first ``needle`` lying wholly within ``haystack[:n]``, or None."""
    _check_size(n)
    width = len(needle)
    if len(haystack) < width:
        return None
    if not needle:
        return 0
    for i in range(min(n, len(haystack))):
        if i + width > len(haystack):
            return None
        if i + width <= n and haystack.startswith(needle, i):
            return i
    return None


def strlcpy(dst: str, src: str, size: int) -> Copied:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    With ``size`` 0 nothing is written and ``dst`` comes back unchanged.
    """
    _check_size(size)
    if size == 0:
        return Copied(dst, len(src))
    return Copied(src[: size - 1], len(src))


def strlcat(dst: str, src: str, size: int) -> Copied:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    If ``dst`` already fills the buffer it is returned unchanged and the
    length reported is ``len(src) + size``.
    """
    _check_size(size)
    dst_len = len(dst)
    src_len = len(src)
    if dst_len >= size:
        return Copied(dst, src_len + size)
    room = size - dst_len - 1
    return Copied(dst + src[:room], src_len + dst_len)