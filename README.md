# bermap

`bermap` checks tile maps stored in `.ber` files. A map is a rectangle of
characters, one row per line, and every row ends in a newline:

```
11111
1P0C1
100E1
11111
```

Each character stands for one tile:

| Character | Tile        |
|-----------|-------------|
| `1`       | wall        |
| `0`       | empty floor |
| `C`       | collectible |
| `E`       | exit        |
| `P`       | player      |

A map is valid when all of the following hold:

- the file name ends in `.ber` and has at least one character before it;
- the file can be read, and its last row ends in a newline;
- there are at least three rows, and the first row is at least three tiles wide;
- every row is the same width;
- the top row, the bottom row, the first column and the last column are all walls;
- the rows between the top and bottom hold only `0`, `1`, `C`, `E` and `P`;
- there is at least one collectible, exactly one exit and exactly one player.

The file is read as Latin-1 text, with line endings left as they are.

## Installation

```
pip install .
```

## Command line

```
bermap path/to/level.ber
```

The same check can be run with `python -m bermap.cli path/to/level.ber`.

The command needs exactly one argument. If the map is valid it prints nothing
and exits with status 0. If it is not, it writes `Error` to standard error,
prints one of these messages on standard output, and exits with status 1:

- `⚠️ Le fichier n'a pas l'extension .ber` when the name does not end in `.ber`;
- `⚠️ La map n'est pas valide` for any other problem with the file or the map.

Called with any other number of arguments, it exits with status 1 and prints
nothing.

## Library

```python
from bermap.validate import load_map
from bermap.grid import MapError, count_elements

try:
    rows = load_map("level.ber")
except MapError as exc:
    print("invalid map:", exc)
else:
    counts = count_elements(rows)
    print(len(rows), "rows,", counts.collectibles, "collectibles")
```

The modules:

- `bermap.grid` splits map text into rows (`split_rows`), checks that a row
  holds only known tiles (`is_element_row`) and counts collectibles, exits and
  players (`count_elements`, which returns an `ElementCounts` with the fields
  `collectibles`, `exits` and `players`). Problems raise `MapError`, a
  subclass of `ValueError`.
- `bermap.validate` runs the checks one by one (`check_shape`,
  `check_border`, `check_arena`, and `check_data`, which runs the border and
  arena checks). Each raises `MapError` with a message saying what is wrong.
  `load_map` reads a file, runs every check and returns the rows.
- `bermap.cli` holds the command's logic: `check_extension` tells whether a
  name is acceptable, `parse` checks a file and returns its rows, and `main`
  returns the exit status.

The package also includes small helpers that act like the classic C library
routines on Python values:

- `bermap.ctype`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_lower`, `to_upper`, for character codes or one-character
  strings;
- `bermap.memory`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`,
  `memcpy`, `memmove`, over `bytearray` and `memoryview` buffers;
- `bermap.strings`: `strlen`, `strdup`, `strchr`, `strrchr`, `strncmp`,
  `strnstr`, and the bounded copies `strlcpy` and `strlcat`, which return a
  `Copied` value holding the text and the length aimed for;
- `bermap.textops`: `substr`, `strjoin`, `strtrim`, `split`, `striteri`,
  `strmapi`, `atoi`, `itoa`;
- `bermap.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`,
  which write to a text stream;
- `bermap.printf`: `format_printf` returns the text for a format using the
  conversions `c`, `s`, `p`, `d`, `i`, `u`, `x`, `X` and `%`; `printf` writes
  it to standard output and returns its length.

## What it does not do

`bermap` only checks maps. It does not open a window, draw tiles or play the
map as a game, and it does not check that the player can actually reach every
collectible and the exit.

## Running the tests

```
pip install ".[test]"
pytest
```