"""Checks that a map is rectangular, walled in and holds the right elements."""

from __future__ import annotations

import os
from typing import Union

from bermap.grid import MapError, count_elements, is_element_row, split_rows

PathLike = Union[str, "os.PathLike[str]"]


def check_shape(rows: list[str]) -> None:
    """Raise MapError unless all rows have the same length."""
    if not rows:
        raise MapError("map has no rows")
    widths = {len(row) for row in rows}
    if len(widths) > 1:
        raise MapError("rows are not all the same length")


def check_border(rows: list[str]) -> None:
    """Raise MapError unless the map is closed in by walls ('1')."""
    if not rows or not rows[0]:
        raise MapError("map is empty")
    width = len(rows[0])
    wall = "1" * width
    if rows[0] != wall or rows[-1][:width] != wall:
        raise MapError("top and bottom rows must be walls")
    for row in rows:
        if len(row) < width or row[0] != "1" or row[width - 1] != "1":
            raise MapError("left and right columns must be walls")


def check_arena(rows: list[str]) -> None:
    """Raise MapError unless the inner rows hold only known elements and the
    map has at least one collectible, exactly one exit and one player."""
    for row in rows[1:-1]:
        if not is_element_row(row):
            raise MapError(f"unknown element in row {row!r}")
    counts = count_elements(rows)
    if counts.collectibles < 1:
        raise MapError("map needs at least one collectible")
    if counts.exits != 1:
        raise MapError(f"map needs exactly one exit, got {counts.exits}")
    if counts.players != 1:
        raise MapError(f"map needs exactly one player, got {counts.players}")


def check_data(rows: list[str]) -> None:
    """Check the border, then the contents."""
    check_border(rows)
    check_arena(rows)


def load_map(path: PathLike) -> list[str]:
    """Read the map at ``path``, check it and return its rows."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError(f"cannot read map: {exc}") from exc
    rows = split_rows(text)
    check_shape(rows)
    check_data(rows)
    return rows