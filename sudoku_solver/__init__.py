# sudoku_solver/__init__.py
# -*- coding: utf-8 -*-
"""
sudoku_solver パッケージの入口となるモジュールです。

solver_core/solve_batch.py や api_proto/local_api.py などから:

    from sudoku_solver import solve

と呼び出されることを想定しています。

ここでは、81 文字の問題を受け取り、
1. 入力の検証と seed（最初から入っている数字）の取り出し
2. seed を1つずつ fill()（制約伝播もここで走る）
3. 空きマスが残っていればバックトラック探索
4. 出力用の Solution の構築
を順番に呼び出します。
"""

from __future__ import annotations

from typing import Any, Dict, Sequence, Union

import pandas as pd

from .config import BLANK_MARKER
from .csp.propagation import fill
from .csp.search import brute_force_search
from .csp.state import GridState
from .errors import (
    AlreadyFilledError,
    ColumnConflictError,
    ConflictError,
    ContradictionError,
    MalformedInputError,
    NothingToSearchError,
    PropagationError,
    RowConflictError,
    SquareConflictError,
    SudokuError,
    UnsolvableError,
)
from .grid.parser import normalize_board, parse_puzzle
from .logging_utils import get_logger
from .postprocess.render_result import build_result, render_grid
from .types import Solution

logger = get_logger()

__all__ = [
    "solve",
    "solve_board",
    "build_solution",
    "Solution",
    "render_grid",
    "SudokuError",
    "MalformedInputError",
    "PropagationError",
    "ConflictError",
    "RowConflictError",
    "ColumnConflictError",
    "SquareConflictError",
    "AlreadyFilledError",
    "ContradictionError",
    "UnsolvableError",
    "NothingToSearchError",
]


def build_solution(state: GridState) -> Solution:
    """全マス埋まった GridState を、出力用の Solution に変換します。"""
    digits = state.digits()
    if 0 in digits:
        raise ValueError("grid is not completely filled")
    return Solution(digits=tuple(digits), brute_forces=state.brute_force_fills)


def solve(
    puzzle: Union[str, Sequence[str]],
    blank_marker: str = BLANK_MARKER,
) -> Solution:
    """
    数独を1問解くメイン関数。

    Parameters
    ----------
    puzzle : str or sequence of str
        1〜9 と空きマス記号からなる 81 文字。
    blank_marker : str
        空きマス記号（既定は "."）。

    Returns
    -------
    Solution
        81 マスの数字と、探索で埋めたマスの数。

    Raises
    ------
    MalformedInputError
        長さが 81 でない、または不正な文字を含む。
    RowConflictError, ColumnConflictError, SquareConflictError, AlreadyFilledError
        最初から入っている数字どうしが矛盾している。
    UnsolvableError
        解が存在しない。
    """
    # 1) 入力の検証（不正なら1マスも埋めずに終わる）
    seeds = parse_puzzle(puzzle, blank_marker)

    # 2) seed を入力順に埋める。ここでの失敗はそのまま呼び出し元へ
    state = GridState()
    try:
        for coords, value in seeds:
            fill(state, coords, value)
    except ContradictionError as exc:
        raise UnsolvableError(str(exc)) from exc

    logger.debug(
        "seeded %d cells, %d unfilled after propagation",
        len(seeds),
        state.unfilled_cells,
    )

    # 3) 伝播だけで埋まらなければ探索
    if not state.is_solved:
        state = brute_force_search(state)

    solution = build_solution(state)
    logger.debug("solved with %d brute-force fills", solution.brute_forces)
    return solution


def solve_board(df: pd.DataFrame) -> Dict[str, Any]:
    """
    9×9 の DataFrame の盤面を解き、表示用の dict を返します。

    空きマスは None / NaN / "" / "." / "0" のいずれでも構いません。
    """
    puzzle = normalize_board(df)
    solution = solve(puzzle)
    return build_result(solution, original_df=df)
