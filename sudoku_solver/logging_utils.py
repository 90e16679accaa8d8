# -*- coding: utf-8 -*-
"""
ログ出力の設定を行うモジュールです。

初学者向けポイント:
- 「ログ」とは、プログラムの実行状況を記録するメッセージのことです。
- 開発中やデバッグ時に「どこまで処理が進んだか」「何が起きたか」を
  確認するのに役立ちます。
"""

from __future__ import annotations

import logging
import os

from .config import LOG_LEVEL, SEARCH_DEBUG_LOG_DIR, SEARCH_DEBUG_LOG_FILE

# sudoku_solver パッケージ共通で使うロガー名
LOGGER_NAME = "sudoku_solver"

# 探索トレース専用のロガー名
SEARCH_DEBUG_LOGGER_NAME = "sudoku_solver.search_debug"


def get_logger() -> logging.Logger:
    """
    sudoku_solver 全体で共通して使う logger を返します。

    すでに handler（出力先）が設定されていない場合は、
    標準出力（コンソール）に LOG_LEVEL のログを表示するように設定します。
    """
    logger = logging.getLogger(LOGGER_NAME)

    # まだハンドラが設定されていなければ、簡単な設定を行う
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(LOG_LEVEL)

    return logger


def get_search_debug_logger(log_dir: str = SEARCH_DEBUG_LOG_DIR) -> logging.Logger:
    """
    探索の推測・バックトラックを1手ずつ記録するファイルロガーを返します。

    同じ log_dir で2回呼ばれた場合は、既存のハンドラをそのまま使います。
    """
    logger = logging.getLogger(SEARCH_DEBUG_LOGGER_NAME)

    log_file = os.path.abspath(os.path.join(log_dir, SEARCH_DEBUG_LOG_FILE))
    for handler in logger.handlers:
        if getattr(handler, "baseFilename", None) == log_file:
            return logger  # すでに初期化済み

    # 出力先が変わった場合は古いハンドラを外す
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(logging.DEBUG)

    os.makedirs(log_dir, exist_ok=True)

    fh = logging.FileHandler(log_file, encoding="utf-8")
    fh.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    fh.setFormatter(formatter)

    logger.addHandler(fh)

    # 他ロガーへの伝播禁止（stdout に出さない）
    logger.propagate = False

    return logger
