"""Move rules: how the agent walks and pushes pieces."""

from __future__ import annotations

from collections.abc import Iterator

from backend.models.board import Board, Direction
from backend.models.cell import (
    Cell,
    drop_piece,
    is_open,
    is_piece,
    lift_piece,
    place,
    remove,
)


def _cell_or_wall(board: Board, row: int, col: int) -> Cell:
    # Off-board counts as wall, so a level without a border can't crash us.
    if board.contains(row, col):
        return board.cells[row][col]
    return Cell.WALL


def move(board: Board, direction: Direction) -> Board:
    """Return the board after the agent tries to step in *direction*.

    The agent walks onto floor or targets, and pushes a single piece when
    the cell beyond it is open. Anything else (a wall, or a piece backed by
    a wall or another piece) leaves the board as it was: callers find out
    whether a move happened by comparing the result with *board*.
    """
    dr, dc = direction.offset
    ar, ac = board.agent_position()
    tr, tc = ar + dr, ac + dc
    to_cell = _cell_or_wall(board, tr, tc)

    if is_open(to_cell):
        return board.replace({
            (ar, ac): remove(board.cells[ar][ac]),
            (tr, tc): place(to_cell),
        })

    if is_piece(to_cell):
        lr, lc = tr + dr, tc + dc
        landing = _cell_or_wall(board, lr, lc)
        # Only the one cell past the piece is looked at, so two pieces in
        # a row never move.
        if is_open(landing):
            return board.replace({
                (ar, ac): remove(board.cells[ar][ac]),
                (tr, tc): place(lift_piece(to_cell)),
                (lr, lc): drop_piece(landing),
            })

    return board


def successors(board: Board) -> Iterator[tuple[Direction, Board]]:
    """Yield ``(direction, board)`` for every direction, blocked ones included."""
    for direction in Direction:
        yield direction, move(board, direction)
