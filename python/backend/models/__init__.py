from backend.models.cube import Cube
from backend.models.facelet import Axis, Color
from backend.models.moves import ALL_MOVES, Move, MoveTables, format_moves, move_tables, parse_moves

__all__ = [
    "ALL_MOVES",
    "Axis",
    "Color",
    "Cube",
    "Move",
    "MoveTables",
    "format_moves",
    "move_tables",
    "parse_moves",
]
