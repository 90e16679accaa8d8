import numpy as np
import pandas as pd
import pytest

from sudoku_solver import MalformedInputError
from sudoku_solver.grid.parser import normalize_board, normalize_cell, parse_puzzle, rows_to_board

from .cases import EASY


def test_parse_puzzle_returns_seeds_in_row_major_order():
    seeds = parse_puzzle(EASY)

    assert len(seeds) == 30
    assert seeds[0] == ((0, 0), 5)
    assert seeds[1] == ((0, 1), 3)
    assert seeds[2] == ((0, 4), 7)
    assert seeds[-1] == ((8, 8), 9)
    coords = [c for c, _ in seeds]
    assert coords == sorted(coords)


def test_parse_puzzle_empty_grid_has_no_seeds():
    assert parse_puzzle("." * 81) == []


def test_parse_puzzle_custom_blank_marker():
    zeros = EASY.replace(".", "0")
    assert parse_puzzle(zeros, blank_marker="0") == parse_puzzle(EASY)


def test_parse_puzzle_accepts_sequence_of_chars():
    assert parse_puzzle(list(EASY)) == parse_puzzle(EASY)


@pytest.mark.parametrize("length", [0, 80, 82, 162])
def test_parse_puzzle_rejects_wrong_length(length):
    with pytest.raises(MalformedInputError, match="invalid puzzle size"):
        parse_puzzle("." * length)


@pytest.mark.parametrize("bad", ["0", "x", " ", "-", "*"])
def test_parse_puzzle_rejects_invalid_characters(bad):
    puzzle = "." * 40 + bad + "." * 40
    with pytest.raises(MalformedInputError, match="at index 40"):
        parse_puzzle(puzzle)


def test_parse_puzzle_rejects_multi_char_items():
    items = ["."] * 81
    items[3] = "12"
    with pytest.raises(MalformedInputError):
        parse_puzzle(items)


def test_parse_puzzle_dot_is_invalid_when_marker_changes():
    with pytest.raises(MalformedInputError):
        parse_puzzle(EASY, blank_marker="0")


def test_malformed_input_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse_puzzle("123")


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, "."),
        (float("nan"), "."),
        (pd.NA, "."),
        (0, "."),
        ("", "."),
        (" ", "."),
        ("0", "."),
        (".", "."),
        (5, "5"),
        (np.int64(7), "7"),
        (3.0, "3"),
        (" 4 ", "4"),
        ("9", "9"),
    ],
)
def test_normalize_cell(value, expected):
    assert normalize_cell(value) == expected


def test_normalize_cell_keeps_invalid_values_for_later_rejection():
    assert normalize_cell("ab") == "ab"
    assert normalize_cell(12) == "12"
    assert normalize_cell(True) == "True"


def _easy_board():
    rows = []
    for r in range(9):
        row = []
        for ch in EASY[r * 9:(r + 1) * 9]:
            row.append(None if ch == "." else int(ch))
        rows.append(row)
    return rows


def test_normalize_board_round_trips_to_puzzle_string():
    df = pd.DataFrame(_easy_board())
    assert normalize_board(df) == EASY


def test_normalize_board_mixed_blank_values():
    rows = _easy_board()
    rows[0][2] = ""
    rows[0][3] = "0"
    rows[0][5] = "."
    rows[1][0] = "6"
    df = pd.DataFrame(rows, dtype=object)
    assert normalize_board(df) == EASY


def test_normalize_board_rejects_wrong_shape():
    df = pd.DataFrame([[None] * 9] * 8)
    with pytest.raises(MalformedInputError, match="invalid board shape"):
        normalize_board(df)


def test_normalize_board_rejects_bad_cell():
    rows = _easy_board()
    rows[4][4] = 10
    df = pd.DataFrame(rows, dtype=object)
    with pytest.raises(MalformedInputError, match="row 4, column 4"):
        normalize_board(df)


def test_rows_to_board():
    df = rows_to_board(_easy_board())
    assert df.shape == (9, 9)
    assert normalize_board(df) == EASY


def test_rows_to_board_rejects_short_row():
    rows = _easy_board()
    rows[8] = rows[8][:5]
    with pytest.raises(MalformedInputError, match="row 8 has 5 cells"):
        rows_to_board(rows)


def test_rows_to_board_rejects_missing_rows():
    with pytest.raises(MalformedInputError, match="expected 9 rows"):
        rows_to_board(_easy_board()[:8])
