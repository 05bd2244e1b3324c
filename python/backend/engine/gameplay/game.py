"""Core gameplay logic — processes moves and tracks progress."""

from __future__ import annotations

from backend.engine.gamerules import move as apply_move
from backend.engine.gamesolver import Solver
from backend.engine.gamestate import GameState
from backend.engine.progress import Progress, compute_progress
from backend.models.board import Board, Direction
from backend.models.level import Level


class GamePlay:
    """Orchestrates a single play-through of a level.

    The start board is solved once for ``min_moves``; after every accepted
    move the current board is solved again for ``min_moves_remaining``.
    """

    def __init__(self, board: Board, level: Level | None = None) -> None:
        self.level = level
        self.state = GameState(board)
        self.min_moves: int | None = Solver.solve(board)
        self.min_moves_remaining: int | None = self.min_moves
        # Set once a hint or auto-solve has moved for the player.
        self.assisted = False

    @classmethod
    def from_level(cls, level: Level) -> GamePlay:
        return cls(level.board(), level=level)

    @classmethod
    def from_board(cls, board: Board) -> GamePlay:
        return cls(board)

    # -- movement -------------------------------------------------------------

    def move(self, direction: Direction) -> bool:
        """Walk (or push) in *direction*.

        Returns True if the board changed. Blocked moves don't count.
        """
        board = self.state.board
        new_board = apply_move(board, direction)
        if new_board == board:
            return False

        self.state.advance(new_board)
        self._refresh()
        return True

    def undo(self) -> bool:
        if not self.state.rewind():
            return False
        self._refresh()
        return True

    def reset(self) -> None:
        self.state.reset()
        self.min_moves_remaining = self.min_moves
        self.assisted = False

    # -- queries --------------------------------------------------------------

    @property
    def is_solvable(self) -> bool:
        """Whether the level itself can be won from its start."""
        return self.min_moves is not None

    @property
    def is_won(self) -> bool:
        return self.state.is_solved

    @property
    def unfilled_targets(self) -> int:
        return self.state.board.unfilled_target_count()

    @property
    def progress(self) -> Progress:
        if self.min_moves is None:
            return Progress.DOOM
        return compute_progress(
            self.min_moves, self.state.moves, self.min_moves_remaining
        )

    # -- helpers --------------------------------------------------------------

    def _refresh(self) -> None:
        self.min_moves_remaining = Solver.solve(self.state.board)
