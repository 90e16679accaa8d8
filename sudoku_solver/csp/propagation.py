# -*- coding: utf-8 -*-
"""
制約伝播（propagation）を行うモジュールです。

ここでの制約伝播は、独立したデータ構造ではなく
fill() と remove_candidate() の相互再帰そのものです。

1. fill() で数字を置くと、同じ行・列・ブロックの 20 マスから
   その数字を候補から外す（remove_candidate）
2. 候補を外した結果、
   - 候補が 1 つだけ残ったマス（ネイキッドシングル）
   - グループ内でその数字を置けるマスが 1 つだけになった（ヒドゥンシングル）
   が見つかれば、その場で fill() する
3. 2 の fill() がさらに候補を外す……

という連鎖を、fill() の呼び出しの中で同期的に最後までたどります。
作業キューは使わず、再帰の深さは高々 81 回の fill() 分です。

連鎖の途中で矛盾が見つかった場合は PropagationError の
サブクラスを投げます。盤面はその時点で中途半端な状態になるので、
呼び出し側（探索）はその GridState を捨てます。
"""

from __future__ import annotations

from typing import Optional

from ..config import GRID_SIZE
from ..errors import (
    CONFLICT_ERRORS,
    AlreadyFilledError,
    ContradictionError,
)
from ..grid.groups import cell_to_square, group_cells, square_cells
from ..types import (
    GROUP_ALL,
    GROUP_COLUMN,
    GROUP_ROW,
    GROUP_SQUARE,
    GROUPS,
    CellCoord,
    Filled,
    Unfilled,
)
from .state import GridState


def fill(state: GridState, coords: CellCoord, value: int) -> None:
    """
    空きマスに数字を置き、その結果をすべて伝播させます。

    - すでに同じ数字が入っていれば何もしない
    - 別の数字が入っていれば AlreadyFilledError
    - 行・列・ブロックにすでに value があれば
      RowConflictError / ColumnConflictError / SquareConflictError
    """
    if not 1 <= value <= GRID_SIZE:
        raise ValueError(f"value out of range: {value}")

    row, col = coords
    current = state.cells[row][col]
    if isinstance(current, Filled):
        if current.value != value:
            raise AlreadyFilledError(coords, current.value, value)
        return

    idx = value - 1
    placed = state.value_occurrences
    for group in GROUPS:
        if placed.lane(group, coords)[idx]:
            raise CONFLICT_ERRORS[group](coords, value)
    for group in GROUPS:
        placed.lane(group, coords)[idx] = True

    former_candidates = current.candidates
    state.cells[row][col] = Filled(value)
    state.unfilled_cells -= 1

    # 同じ行・列・ブロックから value を候補として外す
    square = square_cells(cell_to_square(coords))
    for i in range(GRID_SIZE):
        remove_candidate(state, (row, i), value, GROUP_ROW)
        remove_candidate(state, (i, col), value, GROUP_COLUMN)
        remove_candidate(state, square[i], value, GROUP_SQUARE)

    # このマスが持っていた候補は、もうどのグループの候補にも数えない。
    # value 自体は置いたばかりなので、ヒドゥンシングルの判定は不要。
    for candidate in former_candidates:
        decrement_occurrences(
            state,
            coords,
            candidate,
            GROUP_ALL if candidate == value else None,
        )


def remove_candidate(
    state: GridState,
    coords: CellCoord,
    digit: int,
    ignore: Optional[str] = None,
) -> None:
    """
    マスの候補から digit を外します。

    Parameters
    ----------
    ignore : str or None
        ヒドゥンシングルの判定を省略するグループ。
        fill() が「この行から外している」ときの "row" などで、
        そのグループにはすでに digit が置かれているので見直す必要がありません。
    """
    cell = state.cells[coords[0]][coords[1]]
    if not isinstance(cell, Unfilled) or digit not in cell.candidates:
        return

    cell.candidates.discard(digit)
    if not cell.candidates:
        raise ContradictionError(coords, digit)

    # ネイキッドシングル
    if len(cell.candidates) == 1:
        (leftover,) = cell.candidates
        fill(state, coords, leftover)

    decrement_occurrences(state, coords, digit, ignore)


def decrement_occurrences(
    state: GridState,
    coords: CellCoord,
    digit: int,
    ignore: Optional[str] = None,
) -> None:
    """
    マスから digit の候補が消えたことを、行・列・ブロックのカウンタに反映します。

    カウンタが 1 になったグループはヒドゥンシングルなので、
    そのグループで digit を候補に持つ残り 1 マスを探して fill() します。
    カウンタが 0 になったのに digit がまだ置かれていなければ矛盾です。
    """
    idx = digit - 1
    counts = state.candidate_occurrences

    for group in GROUPS:
        counts.lane(group, coords)[idx] -= 1

    if ignore == GROUP_ALL:
        return

    for group in GROUPS:
        if group == ignore:
            continue

        remaining = counts.lane(group, coords)[idx]
        if remaining == 1:
            for target in group_cells(group, coords):
                cell = state.cells[target[0]][target[1]]
                if isinstance(cell, Unfilled) and digit in cell.candidates:
                    fill(state, target, digit)
        elif remaining == 0 and not state.value_occurrences.lane(group, coords)[idx]:
            raise ContradictionError(coords, digit, group)
