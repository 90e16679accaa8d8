import logging

import pytest

from sudoku_solver.csp.propagation import fill
from sudoku_solver.csp.state import GridState
from sudoku_solver.grid.parser import parse_puzzle
from sudoku_solver.types import Filled, Unfilled, GROUPS
from sudoku_solver.grid.groups import group_cells


@pytest.fixture
def empty_state():
    """A fresh grid with every cell unfilled"""
    return GridState()


@pytest.fixture
def seeded_state():
    """Build a grid by feeding a puzzle's clues through fill()"""
    def _seed(puzzle):
        state = GridState()
        for coords, value in parse_puzzle(puzzle):
            fill(state, coords, value)
        return state
    return _seed


@pytest.fixture
def check_counters():
    """Assert that both occurrence-counter families match the live cells"""
    def _check(state):
        for r in range(9):
            for c in range(9):
                for group in GROUPS:
                    cells = [state.cell(coords) for coords in group_cells(group, (r, c))]
                    for digit in range(1, 10):
                        hosts = sum(
                            1 for cell in cells
                            if isinstance(cell, Unfilled) and digit in cell.candidates
                        )
                        placed = any(
                            isinstance(cell, Filled) and cell.value == digit
                            for cell in cells
                        )
                        assert state.candidate_occurrences.lane(group, (r, c))[digit - 1] == hosts
                        assert bool(state.value_occurrences.lane(group, (r, c))[digit - 1]) == placed
        unfilled = sum(1 for _ in state.iter_unfilled())
        assert state.unfilled_cells == unfilled
    return _check


@pytest.fixture
def check_fixed_point():
    """Assert that no naked or hidden single is left for propagation to find"""
    def _check(state):
        for _, cell in state.iter_unfilled():
            assert len(cell.candidates) >= 2
        for r in range(9):
            for c in range(9):
                for group in GROUPS:
                    cells = [state.cell(coords) for coords in group_cells(group, (r, c))]
                    for digit in range(1, 10):
                        if any(isinstance(x, Filled) and x.value == digit for x in cells):
                            continue
                        hosts = sum(
                            1 for x in cells
                            if isinstance(x, Unfilled) and digit in x.candidates
                        )
                        assert hosts != 1, (group, (r, c), digit)
    return _check


@pytest.fixture(autouse=True)
def _quiet_solver_logs():
    logging.getLogger("sudoku_solver").setLevel(logging.WARNING)
    yield
