import pandas as pd

from sudoku_solver import render_grid
from sudoku_solver.postprocess.render_result import (
    BORDER,
    build_result,
    solution_to_grid,
)
from sudoku_solver.types import Solution

from .cases import EASY_SOLUTION

SOLUTION = Solution(digits=tuple(int(ch) for ch in EASY_SOLUTION), brute_forces=3)

EXPECTED_GRID = """\
+-------+-------+-------+
| 5 3 4 | 6 7 8 | 9 1 2 |
| 6 7 2 | 1 9 5 | 3 4 8 |
| 1 9 8 | 3 4 2 | 5 6 7 |
+-------+-------+-------+
| 8 5 9 | 7 6 1 | 4 2 3 |
| 4 2 6 | 8 5 3 | 7 9 1 |
| 7 1 3 | 9 2 4 | 8 5 6 |
+-------+-------+-------+
| 9 6 1 | 5 3 7 | 2 8 4 |
| 2 8 7 | 4 1 9 | 6 3 5 |
| 3 4 5 | 2 8 6 | 1 7 9 |
+-------+-------+-------+"""


def test_border():
    assert BORDER == "+-------+-------+-------+"


def test_render_grid():
    assert render_grid(SOLUTION) == EXPECTED_GRID
    assert str(SOLUTION) == EXPECTED_GRID


def test_row_representation():
    assert SOLUTION.row_representation() == EASY_SOLUTION


def test_solution_to_grid():
    grid = solution_to_grid(SOLUTION)
    assert grid.shape == (9, 9)
    assert grid[4, 4] == 5
    assert grid.sum() == 45 * 9


def test_build_result():
    result = build_result(SOLUTION)

    assert result["solved_board"][1] == [6, 7, 2, 1, 9, 5, 3, 4, 8]
    assert isinstance(result["solved_board"], list)
    assert result["row_representation"] == EASY_SOLUTION
    assert result["brute_forces"] == 3
    assert result["used_brute_force"] is True
    assert result["shape"] == (9, 9)


def test_build_result_keeps_original_labels():
    df = pd.DataFrame([[None] * 9] * 9, index=list("abcdefghi"))
    result = build_result(SOLUTION, original_df=df)
    assert result["solved_board"][8] == [3, 4, 5, 2, 8, 6, 1, 7, 9]
