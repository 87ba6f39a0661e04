"""Slot and facelet encodings for the 2×2×2 cube.

The cube skeleton has 24 fixed *slots*: 8 corner positions × 3 facings.
A corner position is given by three binary coordinates::

    x: Front = 0, Back  = 1
    y: Left  = 0, Right = 1
    z: Down  = 0, Up    = 1

and the facing axis is 0 (X), 1 (Y) or 2 (Z).

A *facelet identifier* packs three 3-bit colours: the colour shown by the
facelet followed by the colours of the two other facelets on the same
corner cubelet, in cyclic facing order.
"""

from __future__ import annotations

from enum import IntEnum

NUM_SLOTS = 24
NUM_FACINGS = 3

_COLOR_BITS = 3
_COLOR_MASK = 0x7


class Color(IntEnum):
    RED = 0
    GREEN = 1
    BLUE = 2
    CYAN = 3
    MAGENTA = 4
    YELLOW = 5

    @property
    def letter(self) -> str:
        return self.name[0]


class Axis(IntEnum):
    X = 0
    Y = 1
    Z = 2


# Colour of each half of each axis on a brand new cube: (low half, high half).
FACE_COLORS: tuple[tuple[Color, Color], ...] = (
    (Color.RED, Color.GREEN),      # X: front, back
    (Color.BLUE, Color.CYAN),      # Y: left, right
    (Color.MAGENTA, Color.YELLOW),  # Z: down, up
)

# Letters for (low, high) on each axis, used in slot labels.
_AXIS_LETTERS: tuple[tuple[str, str], ...] = (("F", "B"), ("L", "R"), ("D", "U"))


# -- slots --------------------------------------------------------------------


def slot_from_coordinates(x: int, y: int, z: int, face: int) -> int:
    """Return the slot index for the facelet of cubelet (x, y, z) facing *face*."""
    return (x << 2 | y << 1 | z) * NUM_FACINGS + face


def coordinates_from_slot(slot: int) -> tuple[int, int, int, int]:
    cubelet, face = divmod(slot, NUM_FACINGS)
    return (cubelet >> 2) & 1, (cubelet >> 1) & 1, cubelet & 1, face


def canonical_slot(slot: int) -> int:
    """Return the reference slot for the face that *slot* belongs to.

    The reference slot lies on the same face (same facing axis and same
    coordinate along it) with the other two coordinates pinned to 0.
    """
    coords = coordinates_from_slot(slot)
    face = coords[3]
    pinned = [0, 0, 0]
    pinned[face] = coords[face]
    return slot_from_coordinates(pinned[0], pinned[1], pinned[2], face)


def slot_label(slot: int) -> str:
    """Return a label such as ``F(L)D``.

    The three letters name the cubelet's position; the facing axis letter
    is wrapped in parentheses.
    """
    *coords, face = coordinates_from_slot(slot)
    parts = [_AXIS_LETTERS[axis][c] for axis, c in enumerate(coords)]
    parts[face] = f"({parts[face]})"
    return "".join(parts)


# -- facelets -----------------------------------------------------------------


def facelet_id(primary: Color, second: Color, third: Color) -> int:
    return (primary << (2 * _COLOR_BITS)) | (second << _COLOR_BITS) | third


def primary_color(fid: int) -> Color:
    return Color((fid >> (2 * _COLOR_BITS)) & _COLOR_MASK)


def facelet_colors(fid: int) -> tuple[Color, Color, Color]:
    """Return all three colours packed in *fid*, primary first."""
    return (
        Color((fid >> (2 * _COLOR_BITS)) & _COLOR_MASK),
        Color((fid >> _COLOR_BITS) & _COLOR_MASK),
        Color(fid & _COLOR_MASK),
    )


def facelet_label(fid: int) -> str:
    return "".join(c.letter for c in facelet_colors(fid))


def solved_facelet(slot: int) -> int:
    """Return the facelet a brand new cube holds in *slot*."""
    *coords, face = coordinates_from_slot(slot)
    cubelet = [FACE_COLORS[axis][c] for axis, c in enumerate(coords)]
    return facelet_id(
        cubelet[face],
        cubelet[(face + 1) % NUM_FACINGS],
        cubelet[(face + 2) % NUM_FACINGS],
    )
