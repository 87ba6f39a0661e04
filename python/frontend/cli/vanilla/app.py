"""Vanilla terminal frontend — no third-party dependencies.

Prints a cube slot by slot, scrambles it, solves it and prints it again.
"""

from __future__ import annotations

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.models.cube import Cube
from backend.models.facelet import NUM_SLOTS, facelet_label, slot_label
from backend.models.moves import Move, format_moves


# -- rendering ----------------------------------------------------------------


def render_cube(cube: Cube) -> str:
    """Return one ``[slot] = colours`` line per slot and the verdict."""
    lines = [
        f"[{slot_label(slot)}] = {facelet_label(cube.slots[slot])}"
        for slot in range(NUM_SLOTS)
    ]
    lines.append("SOLVED" if cube.is_solved() else "UNSOLVED")
    return "\n".join(lines)


def _section(title: str, cube: Cube) -> None:
    print(f"{title}:")
    print(render_cube(cube))
    print()


# -- public entry point -------------------------------------------------------


def run(scramble_length: int, seed: int | None = None, moves: list[Move] | None = None) -> None:
    """Scramble a new cube, solve it, and print every stage."""
    _section("Initial cube", Cube.solved())

    if moves is not None:
        game = GamePlay.from_cube(Cube.solved().apply_moves(moves))
        game.scramble = list(moves)
    else:
        game = GamePlay(scramble_length, seed)
    print(f"Scramble: {format_moves(game.scramble) or '(none)'}")
    _section("Jumbled up cube", game.cube)

    solution = Solver.solve(game.cube)
    game.apply_solution(solution)
    _section("Solved cube", game.cube)
    print(f"Solution: {format_moves(solution) or '(none)'}")
    print(f"Moves to solve: {len(solution)}")
