"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
Includes a built-in menu for level selection, play and best results.
"""

from __future__ import annotations

import sys
import time
from datetime import datetime
from pathlib import Path

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.models.board import Board
from backend.models.cell import Cell
from backend.models.highscore import HighScoreEntry, HighScoreManager
from backend.models.level import Level, level_index, level_title, next_level_number
from frontend.cli.input_handler import get_key, to_direction
from frontend.cli.messages import apply_hint, progress_description


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_B = "\033[34m"      # blue
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset

_GLYPHS: dict[Cell, str] = {
    Cell.WALL: f"{_B}██{_R}",
    Cell.FLOOR: "  ",
    Cell.TARGET: f"{_Y}(){_R}",
    Cell.PIECE: f"{_BOLD}[]{_R}",
    Cell.PIECE_ON_TARGET: f"{_G}[]{_R}",
    Cell.AGENT: f"{_C}:3{_R}",
    Cell.AGENT_ON_TARGET: f"{_C}:{_Y}3{_R}",
}


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> str:
    """Return an ANSI-coloured text representation of the board."""
    return "\n".join(
        "  " + "".join(_GLYPHS[cell] for cell in row) for row in board.cells
    )


# -- solver helpers -----------------------------------------------------------


def _auto_solve(game: GamePlay, number: int) -> str:
    """Run the solver and animate moves.  Returns a status message."""
    moves = Solver.solve_path(game.state.board)

    if moves is None:
        return f"{_Y}No way to win from here. Press R to try again.{_R}"
    if not moves:
        return f"{_G}Already solved!{_R}"

    game.assisted = True
    for i, direction in enumerate(moves):
        game.move(direction)
        _clear()
        print(f"  {_C}=== Solving level {number}… ==={_R}")
        print()
        print(_render_board(game.state.board))
        print()
        print(f"  Move {i + 1}/{len(moves)}  ({direction.value})")
        sys.stdout.flush()
        time.sleep(0.08)

    return f"{_G}Solved in {len(moves)} moves!{_R}"


# -- menu screen --------------------------------------------------------------


def _show_menu(levels: list[Level], sel: int, manager: HighScoreManager) -> None:
    _clear()
    level = levels[sel]
    number = sel + 1
    print()
    print(f"  {_BOLD}======================================{_R}")
    print(f"  {_BOLD}       F E E D   T H E   C A T        {_R}")
    print(f"  {_BOLD}======================================{_R}")
    print()
    print(f"    Level {_Y}{number}{_R}/{len(levels)}: {_BOLD}{level.title}{_R}")
    if level.author:
        print(f"    {_DIM}by {level.author} ({level.collection}){_R}")
    best = manager.best(number)
    if best is not None:
        star = f" {_G}★{_R}" if best.is_perfect else ""
        print(f"    {_DIM}Best: {best.moves} moves{_R}{star}")
    print(f"    {_DIM}← → to change{_R}")
    print()
    print(f"    {_C}1{_R}  Play")
    print(f"    {_DIM}H{_R}  Best results")
    print(f"    {_DIM}Q{_R}  Quit")
    print()


# -- game screens -------------------------------------------------------------


def _show_game(game: GamePlay, number: int, status: str = "") -> None:
    _clear()
    print(f"  {_C}=== Level {number}: {game.level.title} ==={_R}")
    print()
    print(_render_board(game.state.board))
    print()
    print(f"  {progress_description(game)}")
    print()
    print(
        f"  {_C}WASD{_R}/{_C}Arrows{_R}: move  |  "
        f"{_C}U{_R}: undo  |  "
        f"{_C}R{_R}: restart  |  "
        f"{_C}N{_R}: hint  |  "
        f"{_C}V{_R}: solve  |  "
        f"{_C}Q{_R}: back"
    )
    if status:
        print(f"  {status}")
    sys.stdout.flush()


def _show_win(game: GamePlay, number: int) -> None:
    _clear()
    print(f"  {_G}=== Level {number}: {game.level.title} ==={_R}")
    print()
    print(_render_board(game.state.board))
    print()
    print(f"  {_G}★ You won! The cat is fed. ★{_R}")
    print(f"  {progress_description(game)}")


def _show_unsolvable(game: GamePlay, number: int) -> None:
    _clear()
    print(f"  {_Y}=== Level {number}: {game.level.title} ==={_R}")
    print()
    print(_render_board(game.state.board))
    print()
    print(f"  {_Y}Unsolvable level!{_R}")
    print(f"\n  {_DIM}Press any key to go back.{_R}")
    get_key()


def _show_highscores(manager: HighScoreManager, levels: list[Level]) -> None:
    _clear()
    print()
    print(f"  {_BOLD}=== BEST RESULTS ==={_R}")
    numbers = manager.get_all_levels()
    if not numbers:
        print(f"\n  {_DIM}Nothing finished yet.{_R}")
    for number in numbers:
        title = level_title(levels, number)
        print(f"\n  {_C}--- Level {number}: {title} ---{_R}")
        for i, e in enumerate(manager.get_scores(number)[:5], 1):
            star = f" {_G}★{_R}" if e.is_perfect else ""
            print(
                f"  {i:>2}. {_Y}{e.moves:>4}{_R} moves "
                f"{_DIM}(min {e.min_moves}, {e.date}){_R}{star}"
            )
    print(f"\n  {_DIM}Press any key to go back.{_R}")
    get_key()


# -- game loop ----------------------------------------------------------------


def _play_level(levels: list[Level], index: int, manager: HighScoreManager) -> int | None:
    """Play one level. Returns the index to play next, or None to go back."""
    number = index + 1
    game = GamePlay.from_level(levels[index])
    if not game.is_solvable:
        _show_unsolvable(game, number)
        return None

    status = ""
    while not game.is_won:
        _show_game(game, number, status)
        status = ""
        key = get_key()

        direction = to_direction(key)
        if direction is not None:
            game.move(direction)
        elif key == "undo":
            if not game.undo():
                status = f"{_DIM}Nothing to undo.{_R}"
        elif key == "restart":
            game.reset()
        elif key == "hint":
            status, _ = apply_hint(game)
        elif key == "solve":
            status = _auto_solve(game, number)
        elif key == "quit":
            return None

    # -- win ---------------------------------------------------------------
    _show_win(game, number)
    if game.assisted:
        print(f"\n  {_DIM}Solved with help, so this run isn't saved.{_R}")
    else:
        manager.add_score(
            number,
            HighScoreEntry(
                moves=game.state.moves,
                min_moves=game.min_moves,
                date=datetime.now().strftime("%Y-%m-%d %H:%M"),
            ),
        )
    print(f"\n  Press {_C}Enter{_R} for the next level, {_C}R{_R} to replay, {_C}Q{_R} to go back.")

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
        _show_menu(levels, sel, manager)
        key = get_key()

        if key == "quit":
            _clear()
            print("  Goodbye!\n")
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
            _show_highscores(manager, levels)


# -- public entry point -------------------------------------------------------


def run(levels: list[Level], data_dir: Path, level_number: int = 1) -> None:
    """Launch the vanilla CLI with interactive menu."""
    _menu_loop(levels, data_dir, level_index(level_number, len(levels)))
