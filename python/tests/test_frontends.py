"""Terminal frontends driven with scripted keypresses."""

from __future__ import annotations

from pathlib import Path
from types import ModuleType

import pytest

from backend.engine.gameplay import GamePlay
from backend.models.highscore import HighScoreManager
from backend.models.level import Level
from frontend.cli.rich import app as rich_app
from frontend.cli.vanilla import app as vanilla_app

HALLWAY = ("######", "#    #", "#@$ .#", "#    #", "######")

_APPS = [vanilla_app, rich_app]


def _app_ids(mod: ModuleType) -> str:
    return mod.__name__.split(".")[-2]


def _play(
    mod: ModuleType, keys: list[str], tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> tuple[int | None, HighScoreManager]:
    """Play the hallway level with *keys* and return (next index, results)."""
    pressed = iter(keys)
    monkeypatch.setattr(mod, "get_key", lambda: next(pressed))
    monkeypatch.setattr(mod.time, "sleep", lambda _: None)
    manager = HighScoreManager(tmp_path / "highscores.json")
    levels = [Level(title="Hallway", lines=HALLWAY)]
    return mod._play_level(levels, 0, manager), manager


@pytest.mark.parametrize("mod", _APPS, ids=_app_ids)
def test_own_win_is_saved(mod, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    next_index, manager = _play(mod, ["right", "right", "quit"], tmp_path, monkeypatch)
    assert next_index is None
    best = manager.best(1)
    assert best is not None
    assert best.moves == 2 and best.is_perfect


@pytest.mark.parametrize("mod", _APPS, ids=_app_ids)
def test_auto_solved_win_is_not_saved(
    mod, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _, manager = _play(mod, ["solve", "quit"], tmp_path, monkeypatch)
    assert manager.best(1) is None
    assert manager.get_all_levels() == []


@pytest.mark.parametrize("mod", _APPS, ids=_app_ids)
def test_hinted_win_is_not_saved(mod, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _, manager = _play(mod, ["hint", "right", "quit"], tmp_path, monkeypatch)
    assert manager.best(1) is None


@pytest.mark.parametrize("mod", _APPS, ids=_app_ids)
def test_restart_after_hint_counts_again(
    mod, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    keys = ["hint", "restart", "right", "right", "enter"]
    next_index, manager = _play(mod, keys, tmp_path, monkeypatch)
    assert next_index == 0  # wraps back to the only level
    assert manager.best(1).moves == 2


def test_rich_titles_are_not_markup(capsys: pytest.CaptureFixture[str]) -> None:
    level = Level(title="[/bold] Oops [red]", lines=HALLWAY)
    game = GamePlay.from_level(level)

    rich_app._draw_game(game, 1)
    game.move(rich_app.to_direction("right"))
    game.move(rich_app.to_direction("right"))
    rich_app._draw_win(game, 1)

    out = capsys.readouterr().out
    assert "[/bold] Oops [red]" in out
