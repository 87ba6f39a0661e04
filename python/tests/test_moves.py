"""Move and permutation table tests."""

from __future__ import annotations

import threading

import pytest

from backend.models.facelet import NUM_SLOTS, slot_from_coordinates
from backend.models.moves import (
    ALL_MOVES,
    Move,
    MoveTables,
    format_moves,
    move_tables,
    parse_moves,
)


def test_six_moves_in_fixed_order() -> None:
    assert [m.value for m in ALL_MOVES] == ["F", "F'", "D", "D'", "L", "L'"]


@pytest.mark.parametrize("move", ALL_MOVES, ids=str)
def test_inverse_is_an_involution(move: Move) -> None:
    assert move.inverse is not move
    assert move.inverse.inverse is move
    assert move.inverse.layer == move.layer
    assert move.inverse.clockwise != move.clockwise


@pytest.mark.parametrize("move", ALL_MOVES, ids=str)
def test_tables_are_permutations(move: Move) -> None:
    table = move_tables().permutations[move]

    assert sorted(table) == list(range(NUM_SLOTS))


@pytest.mark.parametrize("move", [Move.F, Move.D, Move.L], ids=str)
def test_counter_clockwise_table_inverts_clockwise(move: Move) -> None:
    tables = move_tables()
    cw = tables.permutations[move]
    ccw = tables.permutations[move.inverse]

    assert all(ccw[cw[i]] == i for i in range(NUM_SLOTS))


@pytest.mark.parametrize("move", [Move.F, Move.D, Move.L], ids=str)
def test_turn_moves_exactly_twelve_slots(move: Move) -> None:
    table = move_tables().permutations[move]

    assert sum(1 for i, v in enumerate(table) if i != v) == 12


def test_front_turn_geometry() -> None:
    table = move_tables().permutations[Move.F]

    # FLD x-facing takes from FLU x-facing; FLD y-facing takes from FLU z-facing.
    assert table[slot_from_coordinates(0, 0, 0, 0)] == slot_from_coordinates(0, 0, 1, 0)
    assert table[slot_from_coordinates(0, 0, 0, 1)] == slot_from_coordinates(0, 0, 1, 2)
    # Back layer does not move.
    assert table[slot_from_coordinates(1, 1, 1, 2)] == slot_from_coordinates(1, 1, 1, 2)


def test_move_tables_built_once() -> None:
    results: list[MoveTables] = []
    threads = [threading.Thread(target=lambda: results.append(move_tables())) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert all(r is move_tables() for r in results)


def test_build_is_deterministic() -> None:
    assert MoveTables.build().permutations == move_tables().permutations


def test_parse_and_format() -> None:
    moves = parse_moves("F  L' D\tD'")

    assert moves == [Move.F, Move.L_PRIME, Move.D, Move.D_PRIME]
    assert format_moves(moves) == "F L' D D'"
    assert parse_moves("") == []


def test_parse_rejects_unknown_tokens() -> None:
    with pytest.raises(ValueError, match="Unknown move 'R'"):
        parse_moves("F R")
