from fastapi.testclient import TestClient

from api_proto.local_api import app

from .cases import EASY, EASY_SOLUTION, HARD_17, UNSOLVABLE

client = TestClient(app)


def _board(puzzle):
    return [
        [None if ch == "." else int(ch) for ch in puzzle[r * 9:(r + 1) * 9]]
        for r in range(9)
    ]


def test_solve_puzzle_string():
    res = client.post("/api/solve", json={"puzzle": EASY})

    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "ok"
    assert body["row_representation"] == EASY_SOLUTION
    assert body["brute_forces"] == 0
    assert body["used_brute_force"] is False
    assert body["shape"] == [9, 9]


def test_solve_board():
    res = client.post("/api/solve", json={"board": _board(HARD_17)})

    assert res.status_code == 200
    body = res.json()
    assert body["used_brute_force"] is True
    assert len(body["solved_board"]) == 9


def test_requires_exactly_one_input():
    assert client.post("/api/solve", json={}).status_code == 400
    both = {"puzzle": EASY, "board": _board(EASY)}
    assert client.post("/api/solve", json=both).status_code == 400


def test_malformed_puzzle():
    res = client.post("/api/solve", json={"puzzle": "123"})
    assert res.status_code == 400
    assert "invalid puzzle size" in res.json()["detail"]


def test_malformed_board():
    res = client.post("/api/solve", json={"board": [[1, 2, 3]]})
    assert res.status_code == 400


def test_conflicting_puzzle():
    res = client.post("/api/solve", json={"puzzle": "55" + "." * 79})
    assert res.status_code == 422
    assert "row conflict" in res.json()["detail"]


def test_unsolvable_puzzle():
    res = client.post("/api/solve", json={"puzzle": UNSOLVABLE})
    assert res.status_code == 422


def test_ragged_board():
    board = _board(EASY)
    board[8] = board[8][:5]

    res = client.post("/api/solve", json={"board": board})

    assert res.status_code == 400
    assert "row 8" in res.json()["detail"]


def test_board_with_long_row():
    board = _board(EASY)
    board[0] = board[0] + [None]
    assert client.post("/api/solve", json={"board": board}).status_code == 400
