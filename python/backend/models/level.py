"""Level entries and the bundled level file."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from backend.errors import LevelFormatError
from backend.models.board import Board

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Level:
    """A single entry of ``levels.json``.

    Everything but ``lines`` is descriptive metadata shown to the player.
    """

    title: str
    lines: tuple[str, ...]
    collection: str = ""
    collection_url: str = ""
    author: str = ""
    author_url: str = ""
    license: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> Level:
        if not isinstance(data, dict):
            raise LevelFormatError(f"Level entry must be an object, got {data!r}.")
        title = data.get("title")
        if not isinstance(title, str) or not title:
            raise LevelFormatError("Level entry has no title.")
        lines = data.get("lines")
        if not isinstance(lines, list) or not all(isinstance(l, str) for l in lines):
            raise LevelFormatError(f"Level {title!r}: 'lines' must be a list of strings.")

        level = cls(
            title=title,
            lines=tuple(lines),
            collection=data.get("collection", ""),
            collection_url=data.get("collectionUrl", ""),
            author=data.get("author", ""),
            author_url=data.get("authorUrl", ""),
            license=data.get("license"),
        )
        level.check()
        return level

    def board(self) -> Board:
        """Build the starting board for this level."""
        try:
            return Board.from_lines(self.lines)
        except LevelFormatError as exc:
            raise LevelFormatError(f"Level {self.title!r}: {exc}") from None

    def check(self) -> None:
        """Raise ``LevelFormatError`` unless the level has exactly one agent."""
        agents = self.board().agent_count()
        if agents != 1:
            raise LevelFormatError(
                f"Level {self.title!r} has {agents} agents, expected exactly one."
            )


# -- loading ------------------------------------------------------------------


def load_levels(path: Path) -> list[Level]:
    """Read and validate every level in the JSON file at *path*."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise LevelFormatError(f"{path}: expected a JSON array of levels.")
    levels = [Level.from_dict(entry) for entry in data]
    logger.info("Loaded %d levels from %s", len(levels), path)
    return levels


# -- navigation ---------------------------------------------------------------


def level_index(number: int, count: int) -> int:
    """Turn a 1-based level number into a list index, clamping to range."""
    if count < 1:
        raise ValueError("There are no levels.")
    return min(max(1, number), count) - 1


def next_level_number(index: int, count: int) -> int:
    """The 1-based number of the level after *index*, wrapping to the first."""
    return (index + 1) % count + 1


def level_title(levels: list[Level], number: int) -> str:
    """Title of the 1-based level *number*, or ``"?"`` if there is no such level."""
    if 1 <= number <= len(levels):
        return levels[number - 1].title
    return "?"
