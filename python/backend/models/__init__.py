from backend.models.board import Board, Direction
from backend.models.cell import Cell
from backend.models.highscore import HighScoreEntry, HighScoreManager
from backend.models.level import Level, load_levels

__all__ = [
    "Board",
    "Cell",
    "Direction",
    "HighScoreEntry",
    "HighScoreManager",
    "Level",
    "load_levels",
]
