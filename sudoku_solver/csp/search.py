# -*- coding: utf-8 -*-
"""
バックトラック探索を行うモジュールです。

制約伝播だけでは埋まらないマスが残ったときに使います。

ざっくり流れ
------------
1. 候補が最も少ない空きマスを選ぶ（MRV。同数なら行優先で先に見つかったもの）
2. そのマスの候補を1つずつ試す
   - 盤面を clone() し、その枝の中で fill() する（伝播も走る）
   - 矛盾（PropagationError）が出たら、その枝を捨てて次の候補へ
   - うまくいったら、その枝で 1 に戻って再帰
3. 最初に全マス埋まった枝をそのまま返す（解の一意性は確かめない）

すべての候補が失敗したら、その局面は解けない（None）として呼び出し元に戻ります。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..config import SEARCH_DEBUG_ENABLED, SEARCH_LOG_INTERVAL
from ..errors import NothingToSearchError, PropagationError, UnsolvableError
from ..logging_utils import get_logger, get_search_debug_logger
from ..types import CellCoord, describe_coords
from .propagation import fill
from .state import GridState

logger = get_logger()


@dataclass
class SearchContext:
    """
    探索全体で共有する情報をまとめたクラスです。
    """

    nodes_visited: int = 0
    backtracks: int = 0
    debug_logger: Optional[logging.Logger] = None


def choose_next_cell(state: GridState) -> Optional[CellCoord]:
    """
    次に分岐するマスを選びます。

    MRV（Minimum Remaining Values）ヒューリスティック：
    - 空きマスのうち、候補数が最も少ないもの
    - 同じなら、行優先で先に見つかったもの
    """
    best: Optional[CellCoord] = None
    best_size = 0
    for coords, cell in state.iter_unfilled():
        size = len(cell.candidates)
        if best is None or size < best_size:
            best = coords
            best_size = size
    return best


def brute_force_search(state: GridState, debug: bool = SEARCH_DEBUG_ENABLED) -> GridState:
    """
    探索のエントリポイントです。

    Parameters
    ----------
    state : GridState
        伝播が止まった（空きマスが残っている）盤面。この関数は state を書き換えません。
    debug : bool
        True なら推測・バックトラックを探索トレース用ロガーに書き出します。

    Returns
    -------
    GridState
        全マス埋まった盤面（枝のコピー）。brute_force_fills に探索で埋めた数が入ります。

    Raises
    ------
    NothingToSearchError
        空きマスがない盤面が渡された。
    UnsolvableError
        すべての枝が失敗した。
    """
    if state.is_solved or choose_next_cell(state) is None:
        raise NothingToSearchError("no unfilled cell was found")

    ctx = SearchContext(debug_logger=get_search_debug_logger() if debug else None)

    solved = _search(state, ctx)

    logger.info(
        "[search] done: nodes_visited=%d, backtracks=%d, solved=%s",
        ctx.nodes_visited,
        ctx.backtracks,
        solved is not None,
    )

    if solved is None:
        raise UnsolvableError("all branches exhausted")
    return solved


def _search(state: GridState, ctx: SearchContext) -> Optional[GridState]:
    if state.is_solved:
        return state

    ctx.nodes_visited += 1
    if ctx.nodes_visited % SEARCH_LOG_INTERVAL == 0:
        logger.info(
            "[search] nodes_visited = %d, backtracks = %d, unfilled = %d",
            ctx.nodes_visited,
            ctx.backtracks,
            state.unfilled_cells,
        )

    coords = choose_next_cell(state)
    if coords is None:
        raise NothingToSearchError("no unfilled cell was found")
    cell = state.cell(coords)

    for candidate in list(cell.candidates):
        branch = state.clone()
        try:
            fill(branch, coords, candidate)
        except PropagationError as exc:
            ctx.backtracks += 1
            if ctx.debug_logger:
                ctx.debug_logger.debug(
                    "Backtrack: %s != %d (%s)", describe_coords(coords), candidate, exc
                )
            continue

        branch.brute_force_fills += 1
        if ctx.debug_logger:
            ctx.debug_logger.debug("Guess: %s = %d", describe_coords(coords), candidate)

        solved = _search(branch, ctx)
        if solved is not None:
            return solved

        ctx.backtracks += 1
        if ctx.debug_logger:
            ctx.debug_logger.debug(
                "Backtrack: %s != %d (subtree exhausted)", describe_coords(coords), candidate
            )

    return None
