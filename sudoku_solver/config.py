# -*- coding: utf-8 -*-
"""
sudoku_solver 全体で共通して使う設定値をまとめたモジュールです。

実運用時には、ここを編集することで
- 空きマスを表す記号
- ログの出力レベル
- 探索ログの出力間隔
- 探索トレース（推測・バックトラック）のファイル出力
などを簡単に変更できます。
"""

from __future__ import annotations

from typing import Tuple

# ==== 盤面の形 =============================================================

# 盤面の一辺のマス数（9×9 のみ対応）
GRID_SIZE: int = 9

# ブロック（3×3 の四角）の一辺のマス数
SQUARE_SIZE: int = 3

# 盤面に入る数字
DIGITS: Tuple[int, ...] = tuple(range(1, GRID_SIZE + 1))

# ==== 入力関連 =============================================================

# 81 文字の入力で「空きマス」を表す記号
BLANK_MARKER: str = "."

# DataFrame の盤面で「空きマス」とみなす値（None / NaN は常に空きマス扱い）
BOARD_BLANK_VALUES: Tuple[str, ...] = ("", ".", "0", " ")

# ==== ログ関連 =============================================================

# sudoku_solver ロガーの出力レベル
LOG_LEVEL: str = "INFO"

# 探索で何ノードごとに進捗ログを出すか
SEARCH_LOG_INTERVAL: int = 1000

# 推測・バックトラックを1手ずつファイルに書き出すかどうか。
# 1問あたり数千行になることもあるので、普段は False にしておきます。
SEARCH_DEBUG_ENABLED: bool = False

# 探索トレースの保存先
SEARCH_DEBUG_LOG_DIR: str = "logs"
SEARCH_DEBUG_LOG_FILE: str = "search_debug.log"
