"""Rich terminal frontend — coloured faces, tables, and panels.

Uses the ``rich`` library for styled output and the shared input handler
for single-key layer turns. Starts from a scrambled cube; scramble, hint,
undo and auto-solve are available.
"""

from __future__ import annotations

import sys
import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gamegenerator import CubeGenerator
from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.models.cube import Cube
from backend.models.facelet import Axis, Color
from backend.models.moves import Move, format_moves
from frontend.cli.input_handler import get_key

console = Console()

_STYLES: dict[Color, str] = {
    Color.RED: "red",
    Color.GREEN: "green",
    Color.BLUE: "blue",
    Color.CYAN: "cyan",
    Color.MAGENTA: "magenta",
    Color.YELLOW: "yellow",
}

# (title, facing axis, side)
_FACES: tuple[tuple[str, Axis, int], ...] = (
    ("Front", Axis.X, 0),
    ("Back", Axis.X, 1),
    ("Left", Axis.Y, 0),
    ("Right", Axis.Y, 1),
    ("Down", Axis.Z, 0),
    ("Up", Axis.Z, 1),
)


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


# -- cube rendering -----------------------------------------------------------


def _render_face(colors: tuple[Color, ...]) -> Text:
    text = Text()
    for i, color in enumerate(colors):
        text.append("██", style=_STYLES[color])
        if i % 2 == 1 and i < len(colors) - 1:
            text.append("\n")
    return text


def render_cube(cube: Cube) -> Table:
    """Return a Rich Table showing the six faces as 2×2 colour blocks."""
    table = Table(
        show_header=True,
        header_style="bold",
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for title, _, _ in _FACES:
        table.add_column(title, justify="center")
    table.add_row(*(_render_face(cube.face_colors(axis, side)) for _, axis, side in _FACES))
    return table


# -- solver helpers -----------------------------------------------------------


def _apply_hint(game: GamePlay) -> str:
    hint = Solver.hint(game.cube)
    if hint is None:
        return "[green]Already solved![/green]"
    game.move(hint)
    return f"[cyan]Hint:[/cyan] turned [bold]{hint.value}[/bold]"


def _auto_solve(game: GamePlay) -> str:
    with console.status("[cyan]Searching…[/cyan]"):
        moves = Solver.solve(game.cube)

    if not moves:
        if game.is_won:
            return "[green]Already solved![/green]"
        return "[red]No solution found.[/red]"

    for i, move in enumerate(moves):
        game.move(move)
        console.clear()

        progress = Text()
        progress.append(f"  Solving… move {i + 1}/{len(moves)} ", style="bold cyan")
        progress.append(f"({move.value})", style="dim")

        panel = Panel(
            Align.center(render_cube(game.cube)),
            title="[bold cyan]Auto-Solve[/bold cyan]",
            border_style="cyan",
            padding=(1, 2),
        )
        console.print()
        console.print(Align.center(panel))
        console.print(Align.center(progress))
        sys.stdout.flush()
        time.sleep(0.3)

    return f"[bold green]Solved in {len(moves)} moves:[/bold green] {format_moves(moves)}"


# -- screens ------------------------------------------------------------------


def _draw_study(game: GamePlay, status: str = "") -> None:
    console.clear()

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(game.state.elapsed_time), style="bold yellow")
    stats.append("    State: ", style="dim")
    if game.is_won:
        stats.append("SOLVED", style="bold green")
    else:
        stats.append("UNSOLVED", style="bold red")

    controls = Text()
    controls.append("  f l d", style="bold cyan")
    controls.append("  turn   ", style="dim")
    controls.append("F L D", style="bold cyan")
    controls.append("  turn back   ", style="dim")
    controls.append("R", style="bold yellow")
    controls.append("  scramble   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  hint   ", style="dim")
    controls.append("V", style="bold cyan")
    controls.append("  solve   ", style="dim")
    controls.append("U", style="bold cyan")
    controls.append("  undo   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    panel = Panel(
        Group(Align.center(render_cube(game.cube)), Text(""), Align.center(stats)),
        title="[bold yellow]Pocket Cube  2×2×2[/bold yellow]",
        border_style="yellow",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


# -- game loop ----------------------------------------------------------------


def _study_game(game: GamePlay, scramble_length: int) -> None:
    status = ""
    if game.scramble:
        status = f"[yellow]Scramble:[/yellow] {format_moves(game.scramble)}"

    while True:
        _draw_study(game, status)
        status = ""
        key = get_key()

        if key in {m.value for m in Move}:
            game.move(Move(key))
        elif key == "scramble":
            game = GamePlay(scramble_length)
            status = f"[yellow]Scrambled:[/yellow] {format_moves(game.scramble)}"
        elif key == "hint":
            status = _apply_hint(game)
        elif key == "solve":
            status = _auto_solve(game)
        elif key == "undo":
            if not game.undo():
                status = "[dim]Nothing to undo.[/dim]"
        elif key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return


# -- public entry point -------------------------------------------------------


def run(scramble_length: int, seed: int | None = None, moves: list[Move] | None = None) -> None:
    """Launch the Rich study screen on a scrambled cube."""
    if moves is not None:
        game = GamePlay.from_cube(CubeGenerator.solved().apply_moves(moves))
        game.scramble = list(moves)
    else:
        game = GamePlay(scramble_length, seed)
    _study_game(game, scramble_length)
