"""Core session logic — turns layers and checks the solved condition."""

from __future__ import annotations

from typing import Iterable

from backend.engine.gamegenerator import CubeGenerator
from backend.engine.gamestate import GameState
from backend.models.cube import Cube
from backend.models.moves import Move


class GamePlay:
    """Orchestrates a single cube session."""

    def __init__(self, scramble_length: int, seed: int | None = None) -> None:
        cube, self.scramble = CubeGenerator.generate(scramble_length, seed)
        self.state = GameState(cube)

    @classmethod
    def from_cube(cls, cube: Cube) -> "GamePlay":
        """Create a session from an existing cube (e.g. a hand-made scramble)."""
        obj = object.__new__(cls)
        obj.scramble = []
        obj.state = GameState(cube)
        return obj

    # -- movement -------------------------------------------------------------

    def move(self, move: Move) -> bool:
        """Turn a layer. Returns False if *move* is not a valid move."""
        if not isinstance(move, Move):
            return False
        self.state.record(self.state.cube.apply_move(move), move)
        return True

    def apply_solution(self, moves: Iterable[Move]) -> int:
        """Apply every move in *moves* and return how many were applied."""
        count = 0
        for move in moves:
            if not self.move(move):
                raise ValueError(f"Invalid move in solution: {move!r}")
            count += 1
        return count

    def undo(self) -> bool:
        """Revert the last move. Returns False if nothing was made yet."""
        last = self.state.pop()
        if last is None:
            return False
        self.state.cube = self.state.cube.apply_move(last.inverse)
        return True

    # -- queries --------------------------------------------------------------

    @property
    def cube(self) -> Cube:
        return self.state.cube

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
