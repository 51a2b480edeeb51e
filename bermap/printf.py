"""A small printf with the conversions c, s, p, d, i, u, x, X and %.

Flags, widths and precisions are not understood. An unknown conversion
produces nothing and consumes no argument.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

_UINT_MASK = 2**32 - 1
_ADDRESS_MASK = 2**64 - 1
_NULL_STRING = "(null)"
_NULL_POINTER = "0x0"


def _int32(value: int) -> int:
    return (value + 2**31) % 2**32 - 2**31


def _require_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} needs an int, got {type(value).__name__}")
    return value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return _NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s needs a str, got {type(value).__name__}")
    return value


def _address(value: Any) -> str:
    if value is None or value == 0:
        return _NULL_POINTER
    if isinstance(value, int) and not isinstance(value, bool):
        address = value
    else:
        address = id(value)
    return "0x" + format(address & _ADDRESS_MASK, "x")


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise ValueError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return _string(value)
    if spec == "p":
        return _address(value)
    number = _require_int(value, spec)
    if spec in "di":
        return str(_int32(number))
    if spec == "u":
        return str(number & _UINT_MASK)
    return format(number & _UINT_MASK, spec)


def format_printf(fmt: str, *args: Any) -> str:
    """Return the text ``fmt`` produces with ``args`` filled in."""
    if fmt is None:
        raise TypeError("format must not be None")
    pieces = []
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)