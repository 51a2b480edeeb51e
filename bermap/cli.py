"""Command line entry: check a .ber map file given as the only argument."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from bermap.grid import MapError
from bermap.validate import load_map

EXTENSION = ".ber"
BAD_EXTENSION_MESSAGE = "⚠️ Le fichier n'a pas l'extension .ber"
INVALID_MAP_MESSAGE = "⚠️ La map n'est pas valide"


def check_extension(name: str) -> bool:
    """True when ``name`` ends in '.ber' and has something before it."""
    return len(name) > len(EXTENSION) and name.endswith(EXTENSION)


def parse(path: str) -> list[str]:
    """Check the file name and the map it holds; return the map's rows."""
    if not check_extension(path):
        raise MapError(BAD_EXTENSION_MESSAGE)
    try:
        return load_map(path)
    except MapError as exc:
        raise MapError(INVALID_MAP_MESSAGE) from exc


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Validate the map named on the command line; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return 1
    try:
        parse(args[0])
    except MapError as exc:
        sys.stderr.write("Error\n")
        sys.stdout.write(f"{exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())