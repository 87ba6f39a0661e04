"""The six base moves and their slot permutation tables."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from enum import StrEnum
from operator import itemgetter
from typing import Callable, Iterable

from backend.models.facelet import NUM_SLOTS, slot_from_coordinates

logger = logging.getLogger(__name__)


class Move(StrEnum):
    F = "F"
    F_PRIME = "F'"
    D = "D"
    D_PRIME = "D'"
    L = "L"
    L_PRIME = "L'"

    @property
    def layer(self) -> str:
        return self.value[0]

    @property
    def clockwise(self) -> bool:
        return not self.value.endswith("'")

    @property
    def inverse(self) -> Move:
        if self.clockwise:
            return Move(self.value + "'")
        return Move(self.layer)


ALL_MOVES: tuple[Move, ...] = tuple(Move)


def parse_moves(text: str) -> list[Move]:
    """Parse a whitespace separated sequence such as ``"F L' D"``.

    Raises ``ValueError`` on an unknown token.
    """
    moves: list[Move] = []
    for token in text.split():
        try:
            moves.append(Move(token))
        except ValueError:
            raise ValueError(
                f"Unknown move {token!r}; expected one of "
                f"{', '.join(m.value for m in Move)}."
            ) from None
    return moves


def format_moves(moves: Iterable[Move]) -> str:
    return " ".join(m.value for m in moves)


# -- geometry -----------------------------------------------------------------

Cubelet = tuple[int, int, int]

# Each clockwise turn moves four cubelets one step along a cycle and
# relabels their facings: facing f ends up facing FACINGS[f].
_CLOCKWISE_TURNS: dict[Move, tuple[tuple[Cubelet, ...], tuple[int, int, int]]] = {
    Move.F: (((0, 0, 0), (0, 0, 1), (0, 1, 1), (0, 1, 0)), (0, 2, 1)),
    Move.L: (((0, 0, 0), (0, 0, 1), (1, 0, 1), (1, 0, 0)), (2, 1, 0)),
    Move.D: (((0, 0, 0), (0, 1, 0), (1, 1, 0), (1, 0, 0)), (1, 0, 2)),
}


def _turn_table(cycle: tuple[Cubelet, ...], facings: tuple[int, int, int]) -> tuple[int, ...]:
    table = list(range(NUM_SLOTS))
    for i, src in enumerate(cycle):
        dst = cycle[(i + 1) % len(cycle)]
        for face, new_face in enumerate(facings):
            table[slot_from_coordinates(*src, face)] = slot_from_coordinates(*dst, new_face)
    return tuple(table)


def _inverse(table: tuple[int, ...]) -> tuple[int, ...]:
    inv = [0] * len(table)
    for i, v in enumerate(table):
        inv[v] = i
    return tuple(inv)


@dataclass(frozen=True)
class MoveTables:
    """Immutable permutation tables for every ``Move``.

    ``permutations[m][i]`` is the slot whose facelet lands in slot ``i``
    when ``m`` is applied.
    """

    permutations: dict[Move, tuple[int, ...]]
    _getters: dict[Move, Callable[[tuple[int, ...]], tuple[int, ...]]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        getters = {m: itemgetter(*table) for m, table in self.permutations.items()}
        object.__setattr__(self, "_getters", getters)

    @classmethod
    def build(cls) -> MoveTables:
        permutations: dict[Move, tuple[int, ...]] = {}
        for move, (cycle, facings) in _CLOCKWISE_TURNS.items():
            table = _turn_table(cycle, facings)
            permutations[move] = table
            permutations[move.inverse] = _inverse(table)
        return cls(permutations={m: permutations[m] for m in Move})

    def permute(self, slots: tuple[int, ...], move: Move) -> tuple[int, ...]:
        return self._getters[move](slots)


_tables: MoveTables | None = None
_tables_lock = threading.Lock()


def move_tables() -> MoveTables:
    """Return the shared ``MoveTables``, building them on first use.

    Safe to call from several threads; the tables are built exactly once.
    """
    global _tables
    if _tables is None:
        with _tables_lock:
            if _tables is None:
                _tables = MoveTables.build()
                logger.debug("Built permutation tables for %d moves", len(_tables.permutations))
    return _tables
