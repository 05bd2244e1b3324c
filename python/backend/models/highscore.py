"""Best results per level, persisted as JSON."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class HighScoreEntry:
    moves: int
    min_moves: int
    date: str

    @property
    def is_perfect(self) -> bool:
        return self.moves == self.min_moves


class HighScoreManager:
    """Loads, saves, and queries finished runs keyed by level number."""

    def __init__(self, filepath: Path) -> None:
        self.filepath = filepath
        self._scores: dict[str, list[HighScoreEntry]] = {}
        self._load()

    # -- persistence ----------------------------------------------------------

    def _load(self) -> None:
        if not self.filepath.exists():
            return
        data = json.loads(self.filepath.read_text())
        for level_key, entries in data.items():
            self._scores[level_key] = [HighScoreEntry(**e) for e in entries]
        logger.debug("Loaded results for %d levels", len(self._scores))

    def save(self) -> None:
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        data = {
            level_key: [asdict(e) for e in entries]
            for level_key, entries in self._scores.items()
        }
        self.filepath.write_text(json.dumps(data, indent=2) + "\n")

    # -- queries --------------------------------------------------------------

    def add_score(self, level_number: int, entry: HighScoreEntry) -> None:
        entries = self._scores.setdefault(str(level_number), [])
        entries.append(entry)
        entries.sort(key=lambda e: (e.moves, e.date))
        self.save()

    def get_scores(self, level_number: int) -> list[HighScoreEntry]:
        return self._scores.get(str(level_number), [])

    def best(self, level_number: int) -> HighScoreEntry | None:
        scores = self.get_scores(level_number)
        return scores[0] if scores else None

    def get_all_levels(self) -> list[int]:
        return sorted(int(k) for k in self._scores)
