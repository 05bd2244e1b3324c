"""Canonical keys for board deduplication."""

from __future__ import annotations

from backend.models.board import Board

# Not a cell symbol, so rows can't run into each other.
ROW_SEPARATOR = "\n"


def key_of(board: Board) -> str:
    """Return a string equal for two boards iff their cells are equal."""
    return ROW_SEPARATOR.join("".join(row) for row in board.cells)
