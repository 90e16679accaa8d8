# -*- coding: utf-8 -*-
"""
解いた結果をもとに表示用の情報を構築するモジュールです。
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd

from ..config import GRID_SIZE, SQUARE_SIZE
from ..types import Solution

BORDER = "+" + "+".join(["-" * (2 * SQUARE_SIZE + 1)] * SQUARE_SIZE) + "+"


def row_representation(solution: Solution) -> str:
    """81 文字の数字列（出力ファイルの1行分）を返します。"""
    return solution.row_representation()


def render_grid(solution: Solution) -> str:
    """
    3×3 のブロックごとに区切った、人が読むための盤面文字列を返します。

    例（1行目まで）::

        +-------+-------+-------+
        | 5 3 4 | 6 7 8 | 9 1 2 |
    """
    lines: List[str] = []
    for row_idx, row in enumerate(solution.rows()):
        if row_idx % SQUARE_SIZE == 0:
            lines.append(BORDER)
        parts: List[str] = []
        for col_idx, value in enumerate(row):
            if col_idx % SQUARE_SIZE == 0:
                parts.append("| ")
            parts.append(f"{value} ")
        parts.append("|")
        lines.append("".join(parts))
    lines.append(BORDER)
    return "\n".join(lines)


def solution_to_grid(solution: Solution) -> np.ndarray:
    """shape = (9, 9) の int 配列にします。"""
    return np.array(solution.digits, dtype=int).reshape(GRID_SIZE, GRID_SIZE)


def build_result(
    solution: Solution,
    original_df: Optional[pd.DataFrame] = None,
) -> Dict[str, Any]:

    solved_grid = solution_to_grid(solution)
    rows, cols = solved_grid.shape

    if original_df is not None:
        solved_df = pd.DataFrame(
            solved_grid,
            index=original_df.index,
            columns=original_df.columns,
        )
        solved_board = solved_df.values.tolist()
    else:
        solved_board = solved_grid.tolist()

    return {
        "solved_board": solved_board,  # ★ DataFrameを返さない
        "row_representation": row_representation(solution),
        "brute_forces": solution.brute_forces,
        "used_brute_force": solution.used_brute_force,
        "shape": (rows, cols),
    }
