# -*- coding: utf-8 -*-
"""
入力の盤面を内部表現に変換するモジュールです。

主な役割:
- 81 文字の文字列を「最初に埋める数字（seed）」のリストに変換
- pandas.DataFrame の盤面を 81 文字の文字列に正規化
"""

from __future__ import annotations

from typing import Any, List, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from ..config import BLANK_MARKER, BOARD_BLANK_VALUES, GRID_SIZE
from ..errors import MalformedInputError
from ..types import CellCoord

# seed として受け付ける文字
DIGIT_CHARS = "123456789"

Seed = Tuple[CellCoord, int]


def parse_puzzle(
    puzzle: Union[str, Sequence[str]],
    blank_marker: str = BLANK_MARKER,
) -> List[Seed]:
    """
    81 文字の入力を、((row, col), value) のリストに変換します。

    前後の空白の除去などは行いません。1 文字でも不正な文字があれば、
    解き始める前に MalformedInputError を投げます。

    Parameters
    ----------
    puzzle : str or sequence of str
        1〜9 の数字と空きマス記号だけからなる 81 文字。
    blank_marker : str
        空きマスを表す記号。

    Returns
    -------
    list of ((row, col), value)
        入力順（行優先）に並んだ seed。
    """
    size = GRID_SIZE * GRID_SIZE
    if len(puzzle) != size:
        raise MalformedInputError(
            f"invalid puzzle size: expected {size} cells, got {len(puzzle)}"
        )

    seeds: List[Seed] = []
    for idx, ch in enumerate(puzzle):
        if isinstance(ch, str) and len(ch) == 1 and ch in DIGIT_CHARS:
            seeds.append((divmod(idx, GRID_SIZE), int(ch)))
        elif ch != blank_marker:
            raise MalformedInputError(
                f"invalid character in puzzle: {ch!r} at index {idx}"
            )
    return seeds


def normalize_cell(x: Any, blank_marker: str = BLANK_MARKER) -> str:
    """
    DataFrame の個々のセルの値を、1 文字の内部表現に変換します。

    変換ルール
    ----------
    - None / NaN / BOARD_BLANK_VALUES: 空きマス記号
    - 整数、整数値の float（5.0 など）: "5"
    - それ以外: 前後の空白を取った文字列（不正なら後で弾かれる）
    """
    if x is None or x is pd.NA:
        return blank_marker
    if isinstance(x, float) and pd.isna(x):
        return blank_marker

    if isinstance(x, (bool, np.bool_)):
        return str(x)
    if isinstance(x, (int, np.integer)):
        x = int(x)
        return str(x) if x != 0 else blank_marker
    if isinstance(x, float) and x.is_integer():
        return normalize_cell(int(x), blank_marker)

    s = str(x)
    if s in BOARD_BLANK_VALUES:
        return blank_marker
    s = s.strip()
    if s in BOARD_BLANK_VALUES:
        return blank_marker
    return s


def normalize_board(df: pd.DataFrame, blank_marker: str = BLANK_MARKER) -> str:
    """
    9×9 の DataFrame を、行優先の 81 文字の文字列に変換します。

    Parameters
    ----------
    df : pandas.DataFrame
        入力の盤面データ。

    Returns
    -------
    str
        parse_puzzle() にそのまま渡せる文字列。
    """
    if df.shape != (GRID_SIZE, GRID_SIZE):
        raise MalformedInputError(
            f"invalid board shape: expected ({GRID_SIZE}, {GRID_SIZE}), got {df.shape}"
        )

    chars: List[str] = []
    for i in range(GRID_SIZE):
        for j in range(GRID_SIZE):
            ch = normalize_cell(df.iat[i, j], blank_marker)
            if len(ch) != 1:
                raise MalformedInputError(
                    f"invalid cell value at row {i}, column {j}: {ch!r}"
                )
            chars.append(ch)

    return "".join(chars)


def rows_to_board(rows: Sequence[Sequence[Any]]) -> pd.DataFrame:
    """
    9×9 の二重リスト（API の board など）を DataFrame にします。

    pandas.DataFrame は短い行を None で埋めてしまうので、
    DataFrame にする前に各行の長さを確認します。
    """
    if len(rows) != GRID_SIZE:
        raise MalformedInputError(
            f"invalid board shape: expected {GRID_SIZE} rows, got {len(rows)}"
        )
    for i, row in enumerate(rows):
        if len(row) != GRID_SIZE:
            raise MalformedInputError(
                f"invalid board shape: row {i} has {len(row)} cells, expected {GRID_SIZE}"
            )
    return pd.DataFrame([list(row) for row in rows])
