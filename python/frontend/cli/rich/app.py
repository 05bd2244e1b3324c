"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler and backend as the vanilla CLI.
"""

from __future__ import annotations

import time
from datetime import datetime
from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.engine.progress import Progress
from backend.models.board import Board
from backend.models.cell import Cell
from backend.models.highscore import HighScoreEntry, HighScoreManager
from backend.models.level import Level, level_index, level_title, next_level_number
from frontend.cli.input_handler import get_key, to_direction
from frontend.cli.messages import apply_hint, progress_description

console = Console()

_GLYPHS: dict[Cell, tuple[str, str]] = {
    Cell.WALL: ("██", "bright_blue"),
    Cell.FLOOR: ("  ", ""),
    Cell.TARGET: ("()", "bold yellow"),
    Cell.PIECE: ("[]", "bold white"),
    Cell.PIECE_ON_TARGET: ("[]", "bold green"),
    Cell.AGENT: (":3", "bold cyan"),
    Cell.AGENT_ON_TARGET: (":3", "bold cyan on #665c00"),
}

_PROGRESS_STYLES: dict[Progress, str] = {
    Progress.PERFECT: "bold green",
    Progress.GREAT: "green",
    Progress.OKAY: "yellow",
    Progress.DOOM: "bold red",
}


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Text:
    """Return a Rich Text block with one two-character glyph per cell."""
    text = Text()
    for r, row in enumerate(board.cells):
        if r:
            text.append("\n")
        for cell in row:
            glyph, style = _GLYPHS[cell]
            text.append(glyph, style=style)
    return text


def _controls() -> Text:
    controls = Text()
    for key, label in (
        ("↑↓←→/WASD", "move"),
        ("U", "undo"),
        ("R", "restart"),
        ("N", "hint"),
        ("V", "solve"),
        ("Q", "back"),
    ):
        controls.append(f"  {key}", style="bold cyan")
        controls.append(f" {label} ", style="dim")
    return controls


# -- solver helpers -----------------------------------------------------------


def _auto_solve(game: GamePlay, number: int) -> str:
    moves = Solver.solve_path(game.state.board)

    if moves is None:
        return "[red]No way to win from here. Press R to try again.[/red]"
    if not moves:
        return "[green]Already solved![/green]"

    game.assisted = True
    for i, direction in enumerate(moves):
        game.move(direction)
        console.clear()

        progress = Text()
        progress.append(f"  Solving… move {i + 1}/{len(moves)} ", style="bold cyan")
        progress.append(f"({direction.value})", style="dim")

        panel = Panel(
            Align.center(_render_board(game.state.board)),
            title=f"[bold cyan]Auto-Solve  Level {number}[/bold cyan]",
            border_style="cyan",
            padding=(1, 2),
        )
        console.print()
        console.print(Align.center(panel))
        console.print(Align.center(progress))
        time.sleep(0.08)

    return f"[bold green]Solved in {len(moves)} moves![/bold green]"


# -- menu screen --------------------------------------------------------------


def _draw_menu(levels: list[Level], sel: int, manager: HighScoreManager) -> None:
    console.clear()
    level = levels[sel]
    number = sel + 1

    heading = Text()
    heading.append(f"Level {number}/{len(levels)}  ", style="bold yellow")
    heading.append(level.title, style="bold")

    byline = Text(
        f"by {level.author} ({level.collection})" if level.author else "",
        style="dim",
    )

    best = manager.best(number)
    best_line = Text(style="dim")
    if best is not None:
        best_line.append(f"Best: {best.moves} moves")
        if best.is_perfect:
            best_line.append(" ★", style="bold green")

    opts = Text()
    opts.append("  1", style="bold cyan")
    opts.append("  Play    ")
    opts.append("H", style="dim bold")
    opts.append("  Best results    ", style="dim")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Align.center(heading),
        Align.center(byline),
        Align.center(best_line),
        Text(""),
        Align.center(_render_board(level.board())),
        Text(""),
        Align.center(Text("← →  change level", style="dim")),
        Align.center(opts),
    )

    panel = Panel(
        body,
        title="[bold]F E E D   T H E   C A T[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )

    console.print()
    console.print(Align.center(panel))


# -- game screens -------------------------------------------------------------


def _draw_game(game: GamePlay, number: int, status: str = "") -> None:
    console.clear()

    description = Text(progress_description(game), style=_PROGRESS_STYLES[game.progress])

    panel = Panel(
        Align.center(_render_board(game.state.board)),
        title=f"[bold cyan]Level {number}: {escape(game.level.title)}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(description))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(_controls()))


def _draw_win(game: GamePlay, number: int) -> None:
    console.clear()

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("You won!", style="bold green")
    congrats.append("  The cat is fed.  ", style="green")
    congrats.append("★\n", style="bold yellow")

    group = Group(
        Align.center(_render_board(game.state.board)),
        Align.center(congrats),
        Align.center(Text(progress_description(game), style="bold")),
    )

    panel = Panel(
        group,
        title=f"[bold green]Level {number}: {escape(game.level.title)}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))


def _draw_unsolvable(game: GamePlay, number: int) -> None:
    console.clear()
    panel = Panel(
        Align.center(_render_board(game.state.board)),
        title=f"[bold red]Unsolvable level! ({number})[/bold red]",
        border_style="red",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(Text("\n  Press any key to go back.\n", style="dim")))
    get_key()


def _draw_highscores(manager: HighScoreManager, levels: list[Level]) -> None:
    """Full-screen best-results view (used from the menu)."""
    console.clear()

    numbers = manager.get_all_levels()
    parts: list[Align] = []

    if not numbers:
        parts.append(Align.center(Text("  Nothing finished yet.", style="dim")))
    for number in numbers:
        title = level_title(levels, number)
        hs_table = Table(
            title=f"Level {number}: {escape(title)}",
            title_style="bold cyan",
            box=rich.box.ROUNDED,
            border_style="dim",
            show_lines=False,
        )
        hs_table.add_column("#", justify="right", style="dim", width=3)
        hs_table.add_column("Moves", justify="right", style="yellow")
        hs_table.add_column("Min", justify="right", style="dim")
        hs_table.add_column("Date", style="dim")
        hs_table.add_column("", style="bold green")

        for i, e in enumerate(manager.get_scores(number)[:5], 1):
            hs_table.add_row(
                str(i),
                str(e.moves),
                str(e.min_moves),
                e.date,
                "★" if e.is_perfect else "",
            )
        parts.append(Align.center(hs_table))

    panel = Panel(
        Group(*parts),
        title="[bold]BEST  RESULTS[/bold]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(Text("\n  Press any key to go back.\n", style="dim")))
    get_key()


# -- game loop ----------------------------------------------------------------


def _play_level(levels: list[Level], index: int, manager: HighScoreManager) -> int | None:
    """Play one level. Returns the index to play next, or None to go back."""
    number = index + 1
    game = GamePlay.from_level(levels[index])
    if not game.is_solvable:
        _draw_unsolvable(game, number)
        return None

    status = ""
    while not game.is_won:
        _draw_game(game, number, status)
        status = ""
        key = get_key()

        direction = to_direction(key)
        if direction is not None:
            game.move(direction)
        elif key == "undo":
            if not game.undo():
                status = "[dim]Nothing to undo.[/dim]"
        elif key == "restart":
            game.reset()
        elif key == "hint":
            message, moved = apply_hint(game)
            status = f"[cyan]{message}[/cyan]" if moved else f"[yellow]{message}[/yellow]"
        elif key == "solve":
            status = _auto_solve(game, number)
        elif key == "quit":
            return None

    # -- win ---------------------------------------------------------------
    _draw_win(game, number)
    if game.assisted:
        console.print(
            Align.center(Text("\n  Solved with help, so this run isn't saved.", style="dim"))
        )
    else:
        manager.add_score(
            number,
            HighScoreEntry(
                moves=game.state.moves,
                min_moves=game.min_moves,
                date=datetime.now().strftime("%Y-%m-%d %H:%M"),
            ),
        )

    console.print(
        Align.center(
            Text(
                "\n  Press Enter for the next level, R to replay, Q to go back.\n",
                style="dim",
            )
        )
    )

    while True:
        key = get_key()
        if key == "enter":
            return next_level_number(index, len(levels)) - 1
        if key == "restart":
            return index
        if key == "quit":
            return None


# -- menu loop ----------------------------------------------------------------


def _menu_loop(levels: list[Level], data_dir: Path, start: int) -> None:
    manager = HighScoreManager(data_dir / "highscores.json")
    sel = start

    while True:
        _draw_menu(levels, sel, manager)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print("  [bold]Goodbye![/bold]\n")
            return
        elif key == "left":
            sel = max(0, sel - 1)
        elif key == "right":
            sel = min(len(levels) - 1, sel + 1)
        elif key in ("1", "enter"):
            next_index = _play_level(levels, sel, manager)
            while next_index is not None:
                sel = next_index
                next_index = _play_level(levels, sel, manager)
        elif key == "scores":
            _draw_highscores(manager, levels)


# -- public entry point -------------------------------------------------------


def run(levels: list[Level], data_dir: Path, level_number: int = 1) -> None:
    """Launch the Rich CLI with interactive menu."""
    _menu_loop(levels, data_dir, level_index(level_number, len(levels)))
