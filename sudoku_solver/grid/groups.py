# -*- coding: utf-8 -*-
"""
行・列・ブロック（グループ）の座標を扱うモジュールです。

ブロックは (row // 3, col // 3) の 3×3 座標で表します。
"""

from __future__ import annotations

from functools import lru_cache
from typing import List, Tuple

from ..config import GRID_SIZE, SQUARE_SIZE
from ..types import GROUP_COLUMN, GROUP_ROW, GROUP_SQUARE, CellCoord


def cell_to_square(coords: CellCoord) -> Tuple[int, int]:
    """マスの座標から、そのマスが属するブロックの座標を返します。"""
    return coords[0] // SQUARE_SIZE, coords[1] // SQUARE_SIZE


def index_to_square_offset(idx: int) -> Tuple[int, int]:
    """0..8 の通し番号を、ブロック内の (row, col) に変換します。"""
    return idx // SQUARE_SIZE, idx % SQUARE_SIZE


@lru_cache(maxsize=None)
def square_cells(square: Tuple[int, int]) -> Tuple[CellCoord, ...]:
    """ブロックに含まれる 9 マスを行優先で返します。"""
    cells: List[CellCoord] = []
    for idx in range(GRID_SIZE):
        dr, dc = index_to_square_offset(idx)
        cells.append((square[0] * SQUARE_SIZE + dr, square[1] * SQUARE_SIZE + dc))
    return tuple(cells)


def group_cells(group: str, coords: CellCoord) -> Tuple[CellCoord, ...]:
    """
    coords を含む行・列・ブロックのいずれかに属する 9 マスを返します。

    Parameters
    ----------
    group : str
        "row" / "column" / "square" のいずれか。
    coords : (row, col)
        基準になるマス。
    """
    row, col = coords
    if group == GROUP_ROW:
        return tuple((row, c) for c in range(GRID_SIZE))
    if group == GROUP_COLUMN:
        return tuple((r, col) for r in range(GRID_SIZE))
    if group == GROUP_SQUARE:
        return square_cells(cell_to_square(coords))
    raise ValueError(f"unknown group: {group!r}")


def peers(coords: CellCoord) -> Tuple[CellCoord, ...]:
    """同じ行・列・ブロックにある他のマス（重複なしで 20 マス）を返します。"""
    seen = set()
    out: List[CellCoord] = []
    for group in (GROUP_ROW, GROUP_COLUMN, GROUP_SQUARE):
        for cell in group_cells(group, coords):
            if cell != coords and cell not in seen:
                seen.add(cell)
                out.append(cell)
    return tuple(out)
