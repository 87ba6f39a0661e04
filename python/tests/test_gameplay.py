"""Session tests — moves, undo, and replaying solutions."""

from __future__ import annotations

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.models.cube import Cube
from backend.models.moves import Move


def test_new_session_is_scrambled() -> None:
    game = GamePlay(5, seed=1)

    assert not game.is_won
    assert len(game.scramble) == 5
    assert game.state.moves == 0


def test_move_records_history() -> None:
    game = GamePlay.from_cube(Cube.solved())

    assert game.move(Move.F)
    assert game.move(Move.D_PRIME)
    assert game.state.history == [Move.F, Move.D_PRIME]
    assert game.cube == Cube.solved().apply_moves([Move.F, Move.D_PRIME])


def test_invalid_move_is_rejected() -> None:
    game = GamePlay.from_cube(Cube.solved())

    assert not game.move("F")  # type: ignore[arg-type]
    assert game.state.moves == 0


def test_undo_restores_previous_cube() -> None:
    game = GamePlay.from_cube(Cube.solved())
    game.move(Move.L)
    game.move(Move.F)

    assert game.undo()
    assert game.cube == Cube.solved().apply_move(Move.L)
    assert game.undo()
    assert game.is_won
    assert not game.undo()


def test_solver_solution_wins_the_game() -> None:
    game = GamePlay(6, seed=11)

    applied = game.apply_solution(Solver.solve(game.cube))

    assert game.is_won
    assert applied == game.state.moves
    assert applied <= 6


def test_elapsed_time_stops_when_paused() -> None:
    game = GamePlay.from_cube(Cube.solved())
    game.state.pause()
    frozen = game.state.elapsed_time

    assert game.state.elapsed_time == frozen
    game.state.resume()
    assert game.state.elapsed_time >= frozen
