#!/usr/bin/env python3
"""Pocket Cube (2×2×2) solver.

Usage::

    python main.py                      # interactive menu
    python main.py -f vanilla -n 10     # scramble 10 moves, solve, print
    python main.py -f vanilla -m "F L' D"
    python main.py -f rich --seed 7     # Rich study screen
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

DEFAULT_SCRAMBLE = 8
MAX_SCRAMBLE = 200


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
        force=True,
    )


def _parse_scramble(value: Optional[str]):
    if value is None:
        return None
    from backend.models.moves import parse_moves

    try:
        return parse_moves(value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="'-m' / '--moves'") from exc


def _ask_length() -> int:
    raw = input(f"  Scramble length (0-{MAX_SCRAMBLE}, default {DEFAULT_SCRAMBLE}): ").strip()
    try:
        length = int(raw or DEFAULT_SCRAMBLE)
        if not 0 <= length <= MAX_SCRAMBLE:
            raise ValueError
    except ValueError:
        print(f"  Invalid length — using {DEFAULT_SCRAMBLE}.")
        length = DEFAULT_SCRAMBLE
    return length


def _menu_loop() -> None:
    while True:
        print()
        print("  ====================================")
        print("        P O C K E T   C U B E         ")
        print("  ====================================")
        print()
        print("  1.  Scramble and solve  (Vanilla Terminal)")
        print("  2.  Study               (Rich Terminal)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice in ("1", "2"):
            length = _ask_length()
            mod = importlib.import_module(
                {"1": _RUNNERS[Frontend.vanilla], "2": _RUNNERS[Frontend.rich]}[choice]
            )
            mod.run(scramble_length=length)

        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    scramble: int = typer.Option(
        DEFAULT_SCRAMBLE, "-n", "--scramble",
        min=0, max=MAX_SCRAMBLE,
        help="Number of random moves used to scramble the cube.",
    ),
    moves: Optional[str] = typer.Option(
        None, "-m", "--moves",
        help="Explicit scramble, e.g. \"F L' D\". Overrides --scramble.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for the random scramble.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search details.",
    ),
) -> None:
    """Pocket Cube (2×2×2) solver."""
    _setup_logging(verbose)
    scramble_moves = _parse_scramble(moves)

    if frontend is None:
        _menu_loop()
        return

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(scramble_length=scramble, seed=seed, moves=scramble_moves)


if __name__ == "__main__":
    app()
