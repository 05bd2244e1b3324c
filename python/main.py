#!/usr/bin/env python3
"""Feed the Cat: a push-block puzzle.

Usage::

    python main.py                 # vanilla terminal, level 1
    python main.py -f rich -l 3    # Rich terminal, level 3
    python main.py --validate      # check every level can be solved
    python main.py --scores        # view best results
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path

import typer

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent  # push-puzzle/
DATA_DIR = PROJECT_ROOT / "data"
LEVELS_FILE = DATA_DIR / "levels.json"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.errors import PuzzleError  # noqa: E402
from backend.models.level import Level, level_title, load_levels  # noqa: E402

logger = logging.getLogger("push_puzzle")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


class LogLevel(StrEnum):
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"


# -- helpers ------------------------------------------------------------------


def _load(path: Path) -> list[Level]:
    try:
        levels = load_levels(path)
    except (OSError, ValueError) as exc:
        # LevelFormatError and json.JSONDecodeError are both ValueErrors.
        typer.echo(f"Could not load levels from {path}: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    if not levels:
        typer.echo(f"No levels in {path}.", err=True)
        raise typer.Exit(code=1)
    return levels


def _validate(levels: list[Level]) -> None:
    from backend.engine.gamesolver import Solver

    for number, level in enumerate(levels, 1):
        try:
            min_moves = Solver.validate(level)
        except PuzzleError as exc:
            typer.echo(f"  {number:>3}. {exc}", err=True)
            raise typer.Exit(code=1) from exc
        typer.echo(f"  {number:>3}. {level.title}: solvable in {min_moves} moves.")


def _print_highscores(levels: list[Level]) -> None:
    from backend.models.highscore import HighScoreManager

    manager = HighScoreManager(DATA_DIR / "highscores.json")
    numbers = manager.get_all_levels()

    print("\n  === BEST RESULTS ===")
    if not numbers:
        print("  Nothing finished yet.\n")
        return
    for number in numbers:
        title = level_title(levels, number)
        print(f"\n  --- Level {number}: {title} ---")
        for i, e in enumerate(manager.get_scores(number)[:10], 1):
            star = "  *" if e.is_perfect else ""
            print(f"  {i:>2}. {e.moves:>4} moves  (min {e.min_moves}, {e.date}){star}")
    print()


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Terminal frontend to launch.",
    ),
    level: int = typer.Option(
        1, "-l", "--level",
        help="Level number to start on (clamped to the available levels).",
    ),
    levels_file: Path = typer.Option(
        LEVELS_FILE, "--levels",
        help="JSON file with the levels to play.",
    ),
    validate: bool = typer.Option(
        False, "--validate",
        help="Solve every level, report the minimum moves and exit.",
    ),
    scores: bool = typer.Option(
        False, "--scores",
        help="Show best results and exit.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        help="Logging verbosity.",
    ),
) -> None:
    """Feed the Cat: push every bag of food into a bowl."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    levels = _load(levels_file)
    logger.debug("Starting with %d levels", len(levels))

    if validate:
        _validate(levels)
        return

    if scores:
        _print_highscores(levels)
        return

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(levels=levels, data_dir=DATA_DIR, level_number=level)


if __name__ == "__main__":
    app()
