"""Cross-platform single-keypress reader for CLI frontends.

Maps layer keys to cube moves without requiring Enter: lower case turns
a layer clockwise, upper case counter-clockwise.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- shared key mapping --------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "f": "F",
    "F": "F'",
    "l": "L",
    "L": "L'",
    "d": "D",
    "D": "D'",
    "q": "quit",
    "Q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "scramble",
    "R": "scramble",
    "u": "undo",
    "U": "undo",
    "h": "help",
    "?": "help",
    "v": "solve",
    "V": "solve",
    "n": "hint",
    "N": "hint",
    "\r": "enter",
    "\n": "enter",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    return _KEY_MAP.get(ch, ch if ch.isprintable() else "")


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "F", "F'", "L", "L'", "D", "D'"  — layer turns
        "quit"                           — q / Ctrl-C / Escape
        "scramble"                       — r
        "undo"                           — u
        "help"                           — h / ?
        "solve"                          — v (auto-solve)
        "hint"                           — n (next best move)
        "enter"                          — Enter / Return
        "<char>"                         — unmapped printable char
        ""                               — unrecognised key
    """
    ch = _getch()

    # Escape sequences (arrow keys etc.) are swallowed
    if ch == "\x1b":
        ch2 = _getch()
        if ch2 == "[":
            _getch()
            return ""
        return "quit"  # bare Escape

    return resolve(ch)
