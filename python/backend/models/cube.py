"""Cube state model for the 2×2×2 puzzle."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import Iterable

from backend.models.facelet import (
    NUM_SLOTS,
    Color,
    canonical_slot,
    primary_color,
    slot_from_coordinates,
    solved_facelet,
)
from backend.models.moves import Move, MoveTables, move_tables

logger = logging.getLogger(__name__)

_SOLVED_SLOTS: tuple[int, ...] = tuple(solved_facelet(s) for s in range(NUM_SLOTS))
_CANONICAL: tuple[int, ...] = tuple(canonical_slot(s) for s in range(NUM_SLOTS))


@dataclass(frozen=True, slots=True)
class Cube:
    """An immutable cube configuration.

    ``slots[i]`` is the facelet identifier held by slot ``i``. Two cubes are
    equal when all 24 entries match; the hash is the tuple hash, so the
    cube can key a dict.
    """

    slots: tuple[int, ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls) -> Cube:
        """Return a brand new cube with every face a single colour."""
        return cls(_SOLVED_SLOTS)

    @classmethod
    def from_slots(cls, slots: Iterable[int]) -> Cube:
        """Create a cube from 24 facelet identifiers in slot order.

        The identifiers must be a rearrangement of a solved cube's.
        """
        values = tuple(slots)
        if len(values) != NUM_SLOTS:
            raise ValueError(f"Expected {NUM_SLOTS} slots, got {len(values)}.")
        if Counter(values) != Counter(_SOLVED_SLOTS):
            raise ValueError("Slots are not a permutation of the solved cube's facelets.")
        return cls(values)

    # -- moves ----------------------------------------------------------------

    def apply_move(self, move: Move, tables: MoveTables | None = None) -> Cube:
        """Return the cube obtained by turning a layer.

        Anything that is not a ``Move`` leaves the cube unchanged.
        """
        if not isinstance(move, Move):
            logger.debug("Ignoring invalid move %r", move)
            return self
        tables = tables or move_tables()
        return Cube(tables.permute(self.slots, move))

    def apply_moves(self, moves: Iterable[Move]) -> Cube:
        cube = self
        tables = move_tables()
        for move in moves:
            cube = cube.apply_move(move, tables)
        return cube

    # -- queries --------------------------------------------------------------

    def color_at(self, slot: int) -> Color:
        return primary_color(self.slots[slot])

    def face_colors(self, face: int, side: int) -> tuple[Color, ...]:
        """Return the four colours on one face.

        *face* is the facing axis and *side* the coordinate along it; the
        colours are ordered by the two remaining axes, lowest axis first.
        """
        first, second = (axis for axis in range(3) if axis != face)
        colors: list[Color] = []
        for a in (0, 1):
            for b in (0, 1):
                coords = [0, 0, 0]
                coords[face], coords[first], coords[second] = side, a, b
                colors.append(self.color_at(slot_from_coordinates(*coords, face)))
        return tuple(colors)

    def is_solved(self) -> bool:
        """Check that each face shows a single colour."""
        slots = self.slots
        for slot in range(NUM_SLOTS):
            if primary_color(slots[slot]) != primary_color(slots[_CANONICAL[slot]]):
                return False
        return True
