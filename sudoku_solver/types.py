# -*- coding: utf-8 -*-
"""
数独 solver で使う主なデータ構造（型）をまとめたモジュールです。

dataclass を使うことで、
「この構造体はどんなフィールドを持っているのか」を
分かりやすく表現しています。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Set, Tuple, Union

from .config import DIGITS, GRID_SIZE

# グリッド上の座標を表す型 (row, col)
CellCoord = Tuple[int, int]

# ==== グループ（制約の単位）=================================================
# 行・列・ブロックの3種類。ヒドゥンシングルの判定で
# 「このグループは見なくてよい」という指定にも使います。
GROUP_ROW = "row"
GROUP_COLUMN = "column"
GROUP_SQUARE = "square"

# ignore 専用: 3グループとも判定しない
GROUP_ALL = "all"

GROUPS: Tuple[str, ...] = (GROUP_ROW, GROUP_COLUMN, GROUP_SQUARE)


@dataclass(frozen=True)
class Filled:
    """
    数字が確定したマスを表すクラスです。

    一度確定したマスは変更できません（frozen）。
    """

    value: int


@dataclass
class Unfilled:
    """
    まだ数字が決まっていないマスを表すクラスです。

    Attributes
    ----------
    candidates : set of int
        このマスにまだ入る可能性のある数字の集合。
        空集合になったら矛盾です（空のまま放置してはいけません）。
    """

    candidates: Set[int] = field(default_factory=lambda: set(DIGITS))


Cell = Union[Filled, Unfilled]


@dataclass(frozen=True)
class Solution:
    """
    解き終わった盤面を表すクラスです。

    Attributes
    ----------
    digits : tuple of int
        81 マス分の数字（行優先）。すべて 1〜9。
    brute_forces : int
        探索（総当たり）で埋めたマスの数。論理だけで解けた場合は 0。
    """

    digits: Tuple[int, ...]
    brute_forces: int = 0

    @property
    def used_brute_force(self) -> bool:
        return self.brute_forces > 0

    def rows(self) -> List[List[int]]:
        """9×9 の二重リストとして返します。"""
        return [
            list(self.digits[r * GRID_SIZE:(r + 1) * GRID_SIZE])
            for r in range(GRID_SIZE)
        ]

    def row_representation(self) -> str:
        """81 文字の数字列として返します。"""
        return "".join(str(d) for d in self.digits)

    def __str__(self) -> str:
        from .postprocess.render_result import render_grid

        return render_grid(self)


def describe_coords(coords: CellCoord) -> str:
    """ログやエラーメッセージ用に (row, col) を "r1c2" 形式にします。"""
    return f"r{coords[0] + 1}c{coords[1] + 1}"
