import pytest

from bermap.grid import MapError
from bermap.validate import (
    check_arena,
    check_border,
    check_data,
    check_shape,
    load_map,
)

VALID_ROWS = ["1111111", "1PC0CE1", "1000001", "1111111"]


def write_map(tmp_path, text, name="map.ber"):
    path = tmp_path / name
    path.write_bytes(text.encode("latin-1"))
    return path


def test_load_map_returns_rows(tmp_path):
    path = write_map(tmp_path, "\n".join(VALID_ROWS) + "\n")
    assert load_map(path) == VALID_ROWS


def test_load_map_accepts_str_path(tmp_path):
    path = write_map(tmp_path, "\n".join(VALID_ROWS) + "\n")
    assert load_map(str(path)) == VALID_ROWS


def test_load_map_missing_file(tmp_path):
    with pytest.raises(MapError):
        load_map(tmp_path / "absent.ber")


def test_load_map_rejects_crlf(tmp_path):
    path = write_map(tmp_path, "\r\n".join(VALID_ROWS) + "\r\n")
    with pytest.raises(MapError):
        load_map(path)


def test_load_map_rejects_ragged_rows(tmp_path):
    path = write_map(tmp_path, "11111\n1PCE1\n1001\n11111\n")
    with pytest.raises(MapError):
        load_map(path)


def test_load_map_rejects_missing_final_newline(tmp_path):
    path = write_map(tmp_path, "\n".join(VALID_ROWS))
    with pytest.raises(MapError):
        load_map(path)


def test_check_shape_passes_rectangular_rows():
    check_shape(VALID_ROWS)
    assert {len(row) for row in VALID_ROWS} == {len(VALID_ROWS[0])}


def test_check_shape_rejects_ragged_rows():
    with pytest.raises(MapError):
        check_shape(["111", "11", "111"])


def test_check_shape_rejects_no_rows():
    with pytest.raises(MapError):
        check_shape([])


@pytest.mark.parametrize(
    "rows",
    [
        ["1101", "1PE1", "1111"],
        ["1111", "1PE1", "1011"],
        ["1111", "0PE1", "1111"],
        ["1111", "1PE0", "1111"],
        ["1111", "1PE1", "111"],
    ],
)
def test_check_border_rejects_gaps(rows):
    with pytest.raises(MapError):
        check_border(rows)


def test_check_border_rejects_empty_map():
    with pytest.raises(MapError):
        check_border([])


def test_check_border_ignores_inner_contents():
    rows = ["1111", "1XY1", "1111"]
    check_border(rows)
    with pytest.raises(MapError):
        check_arena(rows)


@pytest.mark.parametrize(
    "rows",
    [
        ["11111", "1P0E1", "11111"],
        ["11111", "1PCC1", "11111"],
        ["11111", "1CCE1", "11111"],
        ["111111", "1PCEE1", "111111"],
        ["111111", "1PPCE1", "111111"],
        ["111111", "1PCE21", "111111"],
    ],
)
def test_check_arena_rejects_bad_contents(rows):
    with pytest.raises(MapError):
        check_arena(rows)


def test_check_data_accepts_valid_rows():
    rows = list(VALID_ROWS)
    check_data(rows)
    assert rows == VALID_ROWS


def test_check_data_checks_border_first():
    with pytest.raises(MapError, match="wall"):
        check_data(["0111", "1PE1", "1111"])