"""Generates scrambled cubes."""

from __future__ import annotations

import logging
import random

from backend.models.cube import Cube
from backend.models.moves import ALL_MOVES, Move, format_moves

logger = logging.getLogger(__name__)


class CubeGenerator:
    """Creates scrambled cubes by applying random moves to the solved state."""

    @staticmethod
    def solved() -> Cube:
        return Cube.solved()

    @staticmethod
    def scramble(
        cube: Cube, length: int, rng: random.Random | None = None
    ) -> tuple[Cube, list[Move]]:
        """Apply *length* random moves to *cube*.

        Returns the scrambled cube and the moves that were applied.
        """
        if length < 0:
            raise ValueError(f"Scramble length must be non-negative, got {length}.")
        rng = rng or random.Random()
        moves = [rng.choice(ALL_MOVES) for _ in range(length)]
        logger.debug("Scramble: %s", format_moves(moves))
        return cube.apply_moves(moves), moves

    @staticmethod
    def generate(length: int, seed: int | None = None) -> tuple[Cube, list[Move]]:
        """Return a random scrambled cube that is not already solved.

        A zero *length* returns the solved cube.
        """
        rng = random.Random(seed)
        while True:
            cube, moves = CubeGenerator.scramble(CubeGenerator.solved(), length, rng)
            # Random moves can cancel out
            if length == 0 or not cube.is_solved():
                return cube, moves
