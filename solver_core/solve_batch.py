# solver_core/solve_batch.py
# -*- coding: utf-8 -*-
"""
問題ファイルをまとめて解くバッチ処理です。

使い方:

    sudoku-solve puzzles.txt [solutions.txt]

- 1行1問の問題を順に解く
- 出力ファイルを指定した場合は、既存のファイルを置き換えて1行1解で書き出す
- 最後に「解いた数」「探索なしで解けた数」を表示する
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

import pandas as pd

from sudoku_solver import SudokuError, solve
from sudoku_solver.logging_utils import get_logger
from sudoku_solver.puzzles.loader import load_puzzles

logger = get_logger()


@dataclass
class BatchReport:
    input_path: Path
    output_path: Optional[Path]
    total_solved: int
    solved_without_brute_force: int
    results: pd.DataFrame


def solve_puzzles(puzzles: Iterable[str]) -> pd.DataFrame:
    """
    問題を順に解き、'puzzle' / 'solution' / 'brute_forces' 列の DataFrame を返します。

    1問でも失敗したら、その時点で例外をそのまま投げます。
    """
    rows: List[dict] = []
    for i, puzzle in enumerate(puzzles):
        try:
            solution = solve(puzzle)
        except SudokuError:
            logger.error("puzzle #%d failed: %s", i + 1, puzzle)
            raise
        rows.append(
            {
                "puzzle": puzzle,
                "solution": solution.row_representation(),
                "brute_forces": solution.brute_forces,
            }
        )
    return pd.DataFrame(rows, columns=["puzzle", "solution", "brute_forces"])


def solve_file(
    input_path: str | Path,
    output_path: str | Path | None = None,
) -> BatchReport:
    in_path = Path(input_path)
    out_path = Path(output_path) if output_path is not None else None

    logger.info("=== solve_file() START === %s", in_path)
    puzzles_df = load_puzzles(in_path)
    logger.info("Loaded %d puzzles.", len(puzzles_df))

    results = solve_puzzles(puzzles_df["puzzle"])

    if out_path is not None:
        if out_path.exists():
            out_path.unlink()
        lines = "".join(s + "\n" for s in results["solution"])
        out_path.write_text(lines, encoding="utf-8")
        logger.info("Wrote %d solutions to %s", len(results), out_path)

    total = len(results)
    without_bf = int((results["brute_forces"] == 0).sum()) if total else 0

    logger.info(
        "=== solve_file() END === total=%d, without_brute_force=%d", total, without_bf
    )
    return BatchReport(
        input_path=in_path,
        output_path=out_path,
        total_solved=total,
        solved_without_brute_force=without_bf,
        results=results,
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudoku-solve",
        description="Solve 9x9 sudoku puzzles, one 81-character puzzle per line.",
    )
    parser.add_argument("input", help="input file with one puzzle per line")
    parser.add_argument(
        "output", nargs="?", default=None, help="file to write solutions to"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        report = solve_file(args.input, args.output)
    except FileNotFoundError as e:
        logger.error("%s", e)
        return 1
    except SudokuError as e:
        logger.error("Solver error: %s", e)
        return 1

    print(f"Input file: {report.input_path}")
    if report.output_path is not None:
        print(f"Output file: {report.output_path}")
    print(f"Total solved: {report.total_solved}")
    print(f"Without brute-force: {report.solved_without_brute_force}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
