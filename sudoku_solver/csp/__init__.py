# -*- coding: utf-8 -*-
"""
sudoku_solver.csp パッケージ

制約充足（CSP）として数独を解く処理をまとめています。

主に以下の役割を持つモジュールから構成されています。
- state.py       : 盤面の状態（各マスの候補と出現カウンタ）
- propagation.py : 制約伝播（fill と候補削除の連鎖）
- search.py      : 深さ優先のバックトラック探索
"""
