# -*- coding: utf-8 -*-
"""
sudoku_solver.grid パッケージ

盤面（グリッド）の入力と形に関する処理をまとめたサブパッケージです。
- parser.py : 81 文字の文字列や DataFrame から内部表現への変換
- groups.py : 行・列・ブロックに属するマスの列挙
"""
