"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

from backend.models.board import Board


class GameState:
    """Holds the current board, the start board, moves and history.

    Boards are immutable, so history is just the list of earlier boards.
    """

    def __init__(self, board: Board) -> None:
        self.start = board
        self.board = board
        self.moves: int = 0
        self._history: list[Board] = []

    # -- moves ----------------------------------------------------------------

    def advance(self, board: Board) -> None:
        """Make *board* current, counting it as one move."""
        self._history.append(self.board)
        self.board = board
        self.moves += 1

    def rewind(self) -> bool:
        """Step back one move. Returns False when there is nothing to undo."""
        if not self._history:
            return False
        self.board = self._history.pop()
        self.moves -= 1
        return True

    def reset(self) -> None:
        self.board = self.start
        self.moves = 0
        self._history.clear()

    # -- queries --------------------------------------------------------------

    @property
    def can_undo(self) -> bool:
        return bool(self._history)

    @property
    def is_solved(self) -> bool:
        return self.board.unfilled_target_count() == 0
