# -*- coding: utf-8 -*-
"""
盤面の状態（GridState）を表すモジュールです。

GridState は次のものをまとめて持ちます。
- 9×9 の各マス（Filled / Unfilled）
- value_occurrences     : 行・列・ブロックごとに「その数字がもう置かれたか」
- candidate_occurrences : 行・列・ブロックごとに「その数字を候補に持つ空きマスの数」
- unfilled_cells        : まだ埋まっていないマスの数
- brute_force_fills     : 探索で埋めたマスの数

出現カウンタのおかげで、ネイキッドシングル・ヒドゥンシングルを
盤面全体を見直さずに O(1) で検出できます。

探索では枝ごとに clone() した独立のコピーを使います。
枝同士で状態を共有してはいけません。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

import numpy as np

from ..config import GRID_SIZE, SQUARE_SIZE
from ..grid.groups import cell_to_square
from ..types import (
    GROUP_COLUMN,
    GROUP_ROW,
    GROUP_SQUARE,
    Cell,
    CellCoord,
    Filled,
    Unfilled,
)


@dataclass
class Occurrences:
    """
    行・列・ブロックの3種類のカウンタを名前付きで持つクラスです。

    Attributes
    ----------
    row : numpy.ndarray
        shape = (9, 9)。[行番号, 数字 - 1]
    col : numpy.ndarray
        shape = (9, 9)。[列番号, 数字 - 1]
    sqr : numpy.ndarray
        shape = (3, 3, 9)。[ブロック行, ブロック列, 数字 - 1]
    """

    row: np.ndarray
    col: np.ndarray
    sqr: np.ndarray

    @classmethod
    def filled_with(cls, value, dtype) -> "Occurrences":
        return cls(
            row=np.full((GRID_SIZE, GRID_SIZE), value, dtype=dtype),
            col=np.full((GRID_SIZE, GRID_SIZE), value, dtype=dtype),
            sqr=np.full((SQUARE_SIZE, SQUARE_SIZE, GRID_SIZE), value, dtype=dtype),
        )

    def lane(self, group: str, coords: CellCoord) -> np.ndarray:
        """
        coords を含むグループの、数字ごとのカウンタ（長さ 9 のビュー）を返します。

        ビューなので、書き換えるとこの Occurrences 自体が更新されます。
        """
        if group == GROUP_ROW:
            return self.row[coords[0]]
        if group == GROUP_COLUMN:
            return self.col[coords[1]]
        if group == GROUP_SQUARE:
            sr, sc = cell_to_square(coords)
            return self.sqr[sr, sc]
        raise ValueError(f"unknown group: {group!r}")

    def copy(self) -> "Occurrences":
        return Occurrences(row=self.row.copy(), col=self.col.copy(), sqr=self.sqr.copy())


def new_value_occurrences() -> Occurrences:
    """どの数字もまだ置かれていない状態（すべて False）。"""
    return Occurrences.filled_with(False, bool)


def new_candidate_occurrences() -> Occurrences:
    """どのグループでも、どの数字も 9 マスが候補に持っている状態。"""
    return Occurrences.filled_with(GRID_SIZE, np.int8)


def _empty_cells() -> List[List[Cell]]:
    return [[Unfilled() for _ in range(GRID_SIZE)] for _ in range(GRID_SIZE)]


@dataclass
class GridState:
    """
    1問を解く間の盤面の状態です。

    propagation.fill() などによってその場で書き換えられます。
    一度 Filled になったマスが同じ GridState の中で元に戻ることはありません。
    """

    cells: List[List[Cell]] = field(default_factory=_empty_cells)
    value_occurrences: Occurrences = field(default_factory=new_value_occurrences)
    candidate_occurrences: Occurrences = field(
        default_factory=new_candidate_occurrences
    )
    unfilled_cells: int = GRID_SIZE * GRID_SIZE
    brute_force_fills: int = 0

    @property
    def is_solved(self) -> bool:
        return self.unfilled_cells == 0

    def cell(self, coords: CellCoord) -> Cell:
        return self.cells[coords[0]][coords[1]]

    def clone(self) -> "GridState":
        """
        探索の枝用に、独立したコピーを作ります。

        Filled は変更不可なので共有し、Unfilled は候補集合ごと複製します。
        """
        cells: List[List[Cell]] = []
        for row in self.cells:
            cells.append(
                [
                    c if isinstance(c, Filled) else Unfilled(set(c.candidates))
                    for c in row
                ]
            )
        return GridState(
            cells=cells,
            value_occurrences=self.value_occurrences.copy(),
            candidate_occurrences=self.candidate_occurrences.copy(),
            unfilled_cells=self.unfilled_cells,
            brute_force_fills=self.brute_force_fills,
        )

    def iter_unfilled(self) -> Iterator[tuple[CellCoord, Unfilled]]:
        """空きマスを行優先で列挙します。"""
        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                cell = self.cells[r][c]
                if isinstance(cell, Unfilled):
                    yield (r, c), cell

    def digits(self) -> List[int]:
        """81 マスの数字を行優先で返します（空きマスは 0）。"""
        out: List[int] = []
        for row in self.cells:
            for cell in row:
                out.append(cell.value if isinstance(cell, Filled) else 0)
        return out

    def value_at(self, coords: CellCoord) -> Optional[int]:
        cell = self.cell(coords)
        return cell.value if isinstance(cell, Filled) else None
