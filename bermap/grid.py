"""Turning map text into rows and inspecting what the rows hold."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from itertools import chain

ELEMENTS = frozenset("01CEP")
MIN_ROWS = 3
MIN_WIDTH = 3


class MapError(ValueError):
    """A map that cannot be used."""


@dataclass(frozen=True)
class ElementCounts:
    """How many collectibles, exits and player starts a map holds."""

    collectibles: int = 0
    exits: int = 0
    players: int = 0


def split_rows(text: str) -> list[str]:
    """Split map text into rows, one per newline-terminated line.

    The map needs at least three rows and its first row at least three
    characters. Text after the last newline is not a complete row.
    """
    if "\n" not in text:
        raise MapError("map has no complete row")
    *rows, tail = text.split("\n")
    if tail:
        raise MapError("last row is not terminated by a newline")
    if len(rows) < MIN_ROWS:
        raise MapError(f"map needs at least {MIN_ROWS} rows, got {len(rows)}")
    if len(rows[0]) < MIN_WIDTH:
        raise MapError(f"map needs at least {MIN_WIDTH} columns, got {len(rows[0])}")
    return rows


def is_element_row(row: str) -> bool:
    """True when every character of ``row`` is one of 0, 1, C, E or P."""
    return all(ch in ELEMENTS for ch in row)


def count_elements(rows: list[str]) -> ElementCounts:
    """Count the collectibles, exits and player starts over all rows."""
    counts = Counter(chain.from_iterable(rows))
    return ElementCounts(
        collectibles=counts["C"],
        exits=counts["E"],
        players=counts["P"],
    )