# -*- coding: utf-8 -*-
"""
solver が投げる例外をまとめたモジュールです。

どの例外も「その場でやり直す」ことはしません。
探索（search）の内側で起きた PropagationError だけは、
「この枝はダメだった」という合図として探索側で握りつぶされ、
次の候補に進みます。
"""

from __future__ import annotations

from typing import Optional

from .types import (
    GROUP_COLUMN,
    GROUP_ROW,
    GROUP_SQUARE,
    CellCoord,
    describe_coords,
)


class SudokuError(Exception):
    """solver が投げる例外の基底クラス。"""


class MalformedInputError(SudokuError, ValueError):
    """入力の長さが 81 でない、または使えない文字が含まれている。"""


class PropagationError(SudokuError):
    """fill / remove_candidate の連鎖の途中で起きる失敗の基底クラス。"""


class ConflictError(PropagationError):
    """同じグループに同じ数字を2つ置こうとした。"""

    group: str = ""

    def __init__(self, coords: CellCoord, value: int) -> None:
        self.coords = coords
        self.value = value
        super().__init__(
            f"fill results in {self.group} conflict: "
            f"{value} at {describe_coords(coords)}"
        )


class RowConflictError(ConflictError):
    group = GROUP_ROW


class ColumnConflictError(ConflictError):
    group = GROUP_COLUMN


class SquareConflictError(ConflictError):
    group = GROUP_SQUARE


CONFLICT_ERRORS = {
    GROUP_ROW: RowConflictError,
    GROUP_COLUMN: ColumnConflictError,
    GROUP_SQUARE: SquareConflictError,
}


class AlreadyFilledError(PropagationError):
    """すでに別の数字で埋まっているマスを書き換えようとした。"""

    def __init__(self, coords: CellCoord, current: int, value: int) -> None:
        self.coords = coords
        self.current = current
        self.value = value
        super().__init__(
            f"cannot change already filled in cell {describe_coords(coords)}: "
            f"{current} -> {value}"
        )


class ContradictionError(PropagationError):
    """
    候補が尽きた。

    - group が None: マスの候補集合が空になった
    - group が指定あり: そのグループで digit を置けるマスがなくなった
    """

    def __init__(
        self, coords: CellCoord, digit: int, group: Optional[str] = None
    ) -> None:
        self.coords = coords
        self.digit = digit
        self.group = group
        if group is None:
            message = f"no candidates left at {describe_coords(coords)}"
        else:
            message = (
                f"no cell left for {digit} in the {group} "
                f"of {describe_coords(coords)}"
            )
        super().__init__(message)


class UnsolvableError(SudokuError):
    """探索ですべての枝を試しても解が見つからなかった。"""


class NothingToSearchError(SudokuError):
    """空きマスがないのに探索が呼ばれた（呼び出し側の誤用）。"""
