"""Byte-buffer operations over mutable buffers such as ``bytearray``.

Functions that fill or copy work in place on the first ``n`` bytes and
return the destination buffer. Sizes out of range raise ``ValueError``.
"""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]


def _check_span(n: int, *buffers: ReadableBuffer) -> None:
    if n < 0:
        raise ValueError(f"negative length: {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of size {len(buf)}")


def memset(buf: Buffer, c: int, n: int) -> Buffer:
    """Set the first ``n`` bytes of ``buf`` to ``c`` taken as an unsigned byte."""
    _check_span(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: Buffer, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError(f"negative allocation: {count} x {size}")
    return bytearray(count * size)


def memchr(buf: ReadableBuffer, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` (as unsigned) in ``buf[:n]``, or None."""
    _check_span(n, buf)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: ReadableBuffer, b: ReadableBuffer, n: int) -> int:
    """Difference of the first unequal bytes within ``n``, or 0 if all are equal."""
    _check_span(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dst: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` to the start of ``dst``."""
    _check_span(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(dst: Buffer, src: ReadableBuffer, n: int) -> Buffer:
    """Copy ``n`` bytes from ``src`` to ``dst``; the two may overlap."""
    _check_span(n, dst, src)
    # Taking a copy of the source first makes overlapping views safe.
    data = bytes(src[:n])
    dst[:n] = data
    return dst