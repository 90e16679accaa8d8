# -*- coding: utf-8 -*-
"""
問題ファイル（1行1問のテキスト）を読み込むモジュールです。

今回の仕様：
- 1行に 81 文字の問題が1つ
- 前後の空白は取り除き、空行は読み飛ばす
- 中身の検証（文字種・長さ）は solve() 側で行う

戻り値：
- puzzle : 問題文字列
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd


def load_puzzles(path: str | Path) -> pd.DataFrame:
    """
    問題ファイルを読み込み、'puzzle' 列を持つ DataFrame にして返します。

    Parameters
    ----------
    path : str or Path
        テキストファイルのパス。

    Returns
    -------
    pandas.DataFrame
        'puzzle' 列（str）を持つ DataFrame。index は 0 からの連番。
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Puzzle file not found: {p}")

    # 1行をそのまま1問として扱う（カンマや引用符もそのまま残す）
    lines = p.read_text(encoding="utf-8-sig").splitlines()
    df = pd.DataFrame({"puzzle": pd.Series(lines, dtype=str)})

    df["puzzle"] = df["puzzle"].astype(str).str.strip()

    # 空白だけの行を落とす
    df = df[df["puzzle"] != ""]

    # index を 0 から振り直しておくと扱いやすい
    df = df.reset_index(drop=True)

    return df
