"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

from typing import Optional, TextIO, Union


def putchar_fd(c: Union[int, str], stream: TextIO) -> None:
    """Write one character, given as a one-character str or a byte code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        stream.write(c)
        return
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    stream.write(chr(c & 0xFF))


def putstr_fd(s: Optional[str], stream: TextIO) -> None:
    """Write ``s``; ``None`` writes nothing."""
    if s is None:
        return
    stream.write(s)


def putendl_fd(s: str, stream: TextIO) -> None:
    """Write ``s`` followed by a newline."""
    stream.write(s)
    stream.write("\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write ``n`` in decimal, with a leading minus sign when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    stream.write(str(n))