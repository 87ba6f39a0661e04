"""Pocket cube solver — breadth-first search over cube states.

Every state has one outgoing edge per move and all edges cost the same,
so the first solved state dequeued is at minimum distance from the start.
The path is rebuilt by walking parent pointers back to the start.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from typing import Iterable

from backend.models.cube import Cube
from backend.models.moves import ALL_MOVES, Move, move_tables

logger = logging.getLogger(__name__)


class SearchCancelled(RuntimeError):
    """Raised when a search is stopped through its cancel event."""


def search(
    start: Cube,
    moves: Iterable[Move] = ALL_MOVES,
    cancel: threading.Event | None = None,
) -> list[Move] | None:
    """Return a shortest move sequence taking *start* to a solved cube.

    Returns ``[]`` if *start* is already solved and ``None`` if no solved
    state is reachable with *moves*. When *cancel* is set the search stops
    at the next dequeue with ``SearchCancelled``.
    """
    moves = tuple(moves)
    tables = move_tables()

    frontier: deque[Cube] = deque([start])
    parents: dict[Cube, tuple[Cube, Move | None]] = {start: (start, None)}
    target: Cube | None = None

    while frontier:
        if cancel is not None and cancel.is_set():
            raise SearchCancelled(f"Search cancelled after {len(parents)} states.")

        u = frontier.popleft()
        if u.is_solved():
            target = u
            break

        for move in moves:
            v = u.apply_move(move, tables)
            if v not in parents:
                parents[v] = (u, move)
                frontier.append(v)

    logger.debug("Search visited %d states, %d left in frontier", len(parents), len(frontier))

    if target is None:
        return None

    path: list[Move] = []
    node = target
    while node != start:
        parent, move = parents[node]
        path.append(move)
        node = parent
    path.reverse()
    return path


def get_solution(start: Cube, cancel: threading.Event | None = None) -> list[Move]:
    """Return a shortest solution for *start*, or ``[]`` if none exists."""
    path = search(start, cancel=cancel)
    if path is None:
        logger.warning("No path to a solved state from %s", start)
        return []
    logger.debug("Found %d-move solution", len(path))
    return path


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(cube: Cube) -> list[Move]:
        """Return a move sequence that solves *cube*, or ``[]`` if already solved."""
        if cube.is_solved():
            return []
        return get_solution(cube)

    @staticmethod
    def hint(cube: Cube) -> Move | None:
        """Return the single best next move, or ``None`` if solved."""
        if cube.is_solved():
            return None

        moves = Solver.solve(cube)
        return moves[0] if moves else None

    @staticmethod
    def is_solvable(cube: Cube, moves: Iterable[Move] = ALL_MOVES) -> bool:
        """Return True if *cube* can reach a solved state using *moves*."""
        return search(cube, moves) is not None
