"""Exceptions raised by the puzzle backend."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for all backend errors."""


class LevelFormatError(PuzzleError, ValueError):
    """Level source lines are malformed (ragged rows, unknown symbols...)."""


class InvalidState(PuzzleError):
    """A board is missing something a query requires, e.g. the agent."""


class InvalidTransition(PuzzleError):
    """A cell was asked to gain or lose an agent or piece it can't.

    Never raised by a correct transition function on a valid board.
    """


class UnsolvableLevelError(PuzzleError):
    """A level has no sequence of moves that fills every target."""
