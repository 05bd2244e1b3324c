"""Level loading, validation and navigation."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from backend.errors import LevelFormatError
from backend.models.cell import Cell
from backend.models.level import (
    Level,
    level_index,
    level_title,
    load_levels,
    next_level_number,
)


def _entry(**overrides) -> dict:
    entry = {
        "title": "First Bowl",
        "collection": "Starters",
        "collectionUrl": "https://example.org/starters",
        "author": "Someone",
        "authorUrl": "https://example.org/someone",
        "lines": ["#####", "#.$@#", "#####"],
    }
    entry.update(overrides)
    return entry


def _write(tmp_path: Path, data) -> Path:
    path = tmp_path / "levels.json"
    path.write_text(json.dumps(data))
    return path


def test_load_levels(tmp_path: Path) -> None:
    levels = load_levels(_write(tmp_path, [_entry(), _entry(title="Again", license="CC0")]))

    assert [lvl.title for lvl in levels] == ["First Bowl", "Again"]
    first = levels[0]
    assert first.collection_url == "https://example.org/starters"
    assert first.author_url == "https://example.org/someone"
    assert first.license is None
    assert levels[1].license == "CC0"
    assert first.board().cell_at(1, 2) is Cell.PIECE


@pytest.mark.parametrize(
    "entry",
    [
        _entry(lines=["#####", "#.$@#", "####"]),
        _entry(lines=["#####", "#.$@X", "#####"]),
        _entry(lines=["#####", "#.$ #", "#####"]),
        _entry(lines=["#####", "#@$@#", "#####"]),
        _entry(lines="#.$@#"),
        {"lines": ["#####", "#.$@#", "#####"]},
        "not an object",
    ],
    ids=["ragged", "unknown-symbol", "no-agent", "two-agents", "lines-not-list",
         "no-title", "not-object"],
)
def test_bad_entries_are_rejected(tmp_path: Path, entry) -> None:
    with pytest.raises(LevelFormatError):
        load_levels(_write(tmp_path, [entry]))


def test_error_names_the_level(tmp_path: Path) -> None:
    path = _write(tmp_path, [_entry(title="Broken", lines=["###", "#@"])])
    with pytest.raises(LevelFormatError, match="Broken"):
        load_levels(path)


def test_file_must_hold_a_list(tmp_path: Path) -> None:
    with pytest.raises(LevelFormatError):
        load_levels(_write(tmp_path, {"title": "nope"}))


@pytest.mark.parametrize(
    ("number", "expected"),
    [(1, 0), (3, 2), (5, 4), (99, 4), (0, 0), (-3, 0)],
)
def test_level_index_clamps(number: int, expected: int) -> None:
    assert level_index(number, 5) == expected


def test_level_index_needs_levels() -> None:
    with pytest.raises(ValueError):
        level_index(1, 0)


def test_next_level_wraps() -> None:
    assert next_level_number(0, 5) == 2
    assert next_level_number(3, 5) == 5
    assert next_level_number(4, 5) == 1


def test_level_title_out_of_range() -> None:
    levels = [Level(title="One", lines=("@",)), Level(title="Two", lines=("@",))]
    assert level_title(levels, 1) == "One"
    assert level_title(levels, 2) == "Two"
    assert level_title(levels, 0) == "?"
    assert level_title(levels, -1) == "?"
    assert level_title(levels, 3) == "?"
