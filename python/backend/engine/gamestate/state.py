"""Tracks the state of a cube session in progress."""

from __future__ import annotations

import time

from backend.models.cube import Cube
from backend.models.moves import Move


class GameState:
    """Holds the current cube, the moves made, and elapsed time."""

    def __init__(self, cube: Cube) -> None:
        self.cube = cube
        self.history: list[Move] = []
        self._start_time: float = time.time()
        self._elapsed_banked: float = 0.0
        self._running: bool = True

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (time.time() - self._start_time)
        return self._elapsed_banked

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += time.time() - self._start_time
            self._running = False

    def resume(self) -> None:
        if not self._running:
            self._start_time = time.time()
            self._running = True

    # -- moves ----------------------------------------------------------------

    @property
    def moves(self) -> int:
        return len(self.history)

    def record(self, cube: Cube, move: Move) -> None:
        self.cube = cube
        self.history.append(move)

    def pop(self) -> Move | None:
        """Forget the last recorded move and return it."""
        return self.history.pop() if self.history else None

    @property
    def is_solved(self) -> bool:
        return self.cube.is_solved()
