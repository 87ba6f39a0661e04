"""Solver test suite — parametric scrambles.

Scrambles are pre-built JSON fixtures under ``<project_root>/fixtures/``.
Every test is hard-killed by ``pytest-timeout`` (configured in
``pyproject.toml``). The returned move list is replayed through the real
game engine to verify correctness.
"""

from __future__ import annotations

import json
import threading
from pathlib import Path

import pytest

from backend.engine.gameplay.game import GamePlay
from backend.engine.gamesolver.solver import SearchCancelled, Solver, get_solution, search
from backend.models.cube import Cube
from backend.models.moves import ALL_MOVES, Move

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"


# -- fixture loaders ----------------------------------------------------------


def _load(name: str) -> list[dict]:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


def _ids(data: dict) -> str:
    return data["id"]


_SCRAMBLES = _load("scrambles.json")


# -- helpers ------------------------------------------------------------------


def _cube_from_data(data: dict) -> Cube:
    return Cube.solved().apply_moves(Move(token) for token in data["scramble"])


# -- tests --------------------------------------------------------------------


@pytest.mark.parametrize("data", _SCRAMBLES, ids=_ids)
def test_solve_scramble(data: dict) -> None:
    cube = _cube_from_data(data)

    moves = get_solution(cube)

    assert isinstance(moves, list), "get_solution() must return a list of Move"
    assert all(isinstance(m, Move) for m in moves)
    assert len(moves) <= len(data["scramble"]), (
        f"Solution longer than the scramble ({data['id']})"
    )
    if data["optimal"] is not None:
        assert len(moves) == data["optimal"], data["id"]

    game = GamePlay.from_cube(cube)
    game.apply_solution(moves)
    assert game.is_won, f"Cube not solved after {len(moves)} moves ({data['id']})"


def test_solved_cube_needs_no_moves() -> None:
    assert get_solution(Cube.solved()) == []
    assert Solver.solve(Cube.solved()) == []


@pytest.mark.parametrize("move", ALL_MOVES, ids=str)
def test_single_move_is_undone_by_its_inverse(move: Move) -> None:
    cube = Cube.solved().apply_move(move)

    assert get_solution(cube) == [move.inverse]


def test_hint_is_first_solution_move() -> None:
    cube = Cube.solved().apply_moves([Move.D, Move.F])

    assert Solver.hint(cube) == Move.F_PRIME
    assert Solver.hint(Cube.solved()) is None


def test_restricted_move_set_reports_no_path() -> None:
    cube = Cube.solved().apply_move(Move.L)

    assert search(cube, moves=[Move.F, Move.F_PRIME]) is None
    assert not Solver.is_solvable(cube, moves=[Move.F, Move.F_PRIME])
    assert Solver.is_solvable(cube)


def test_restricted_move_set_still_solves_its_own_scrambles() -> None:
    cube = Cube.solved().apply_moves([Move.D, Move.D])

    assert search(cube, moves=[Move.D]) == [Move.D, Move.D]


def test_cancelled_search_raises() -> None:
    cancel = threading.Event()
    cancel.set()

    with pytest.raises(SearchCancelled):
        search(Cube.solved().apply_move(Move.F), cancel=cancel)


def test_solver_is_deterministic() -> None:
    cube = Cube.solved().apply_moves([Move.L, Move.F, Move.D_PRIME])

    assert get_solution(cube) == get_solution(cube)
