from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from sudoku_solver import MalformedInputError, SudokuError, solve, solve_board
from sudoku_solver.grid.parser import rows_to_board
from sudoku_solver.logging_utils import get_logger
from sudoku_solver.postprocess.render_result import build_result

logger = get_logger()

app = FastAPI()

class SolveRequest(BaseModel):
    puzzle: str | None = None  # 81 chars, "." for blanks
    board: list[list[str | int | None]] | None = None  # 9x9 2D array

@app.post("/api/solve")
def api_solve(request: SolveRequest):
    """
    Solver API endpoint.
    Receives either an 81-character puzzle or a 9x9 grid and returns the solved board.
    """
    if (request.puzzle is None) == (request.board is None):
        raise HTTPException(status_code=400, detail="Specify exactly one of 'puzzle' or 'board'.")

    try:
        if request.board is not None:
            # 2D配列をDataFrameに変換（行の長さもここで確認）
            df = rows_to_board(request.board)
            result = solve_board(df)
        else:
            result = build_result(solve(request.puzzle))
    except MalformedInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SudokuError as e:
        logger.info("Unsolvable request: %s", e)
        raise HTTPException(status_code=422, detail=str(e))

    return {"status": "ok", **result}
