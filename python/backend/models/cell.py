"""Cell kinds and the rules for putting things on top of targets.

Targets are one axis, occupants (agent / piece / nothing) the other. The
two are folded into a single tile value so a board is just a grid of
symbols. See http://www.sokobano.de/wiki/index.php?title=Level_format
"""

from __future__ import annotations

from enum import StrEnum

from backend.errors import InvalidTransition


class Cell(StrEnum):
    WALL = "#"
    FLOOR = " "
    TARGET = "."
    PIECE = "$"
    PIECE_ON_TARGET = "*"
    AGENT = "@"
    AGENT_ON_TARGET = "+"


AGENT_CELLS = frozenset({Cell.AGENT, Cell.AGENT_ON_TARGET})
PIECE_CELLS = frozenset({Cell.PIECE, Cell.PIECE_ON_TARGET})
TARGET_CELLS = frozenset({Cell.TARGET, Cell.PIECE_ON_TARGET, Cell.AGENT_ON_TARGET})
OPEN_CELLS = frozenset({Cell.FLOOR, Cell.TARGET})


# -- queries ------------------------------------------------------------------


def is_agent(cell: Cell) -> bool:
    return cell in AGENT_CELLS


def is_piece(cell: Cell) -> bool:
    return cell in PIECE_CELLS


def is_target(cell: Cell) -> bool:
    return cell in TARGET_CELLS


def is_open(cell: Cell) -> bool:
    """True for cells the agent can walk into or a piece can land on."""
    return cell in OPEN_CELLS


# -- agent composition ---------------------------------------------------------


def place(cell: Cell) -> Cell:
    """Return *cell* with the agent added to it."""
    if cell is Cell.FLOOR:
        return Cell.AGENT
    if cell is Cell.TARGET:
        return Cell.AGENT_ON_TARGET
    raise InvalidTransition(f"Can't add the agent to {cell.name}")


def remove(cell: Cell) -> Cell:
    """Return *cell* with the agent taken off it."""
    if cell is Cell.AGENT:
        return Cell.FLOOR
    if cell is Cell.AGENT_ON_TARGET:
        return Cell.TARGET
    raise InvalidTransition(f"Can't remove the agent from {cell.name}")


# -- piece composition ---------------------------------------------------------


def drop_piece(cell: Cell) -> Cell:
    if cell is Cell.FLOOR:
        return Cell.PIECE
    if cell is Cell.TARGET:
        return Cell.PIECE_ON_TARGET
    raise InvalidTransition(f"Can't push a piece onto {cell.name}")


def lift_piece(cell: Cell) -> Cell:
    """Return what is left of *cell* once its piece is pushed away.

    A target keeps being a target: ``*`` becomes ``.``, not floor.
    """
    if cell is Cell.PIECE:
        return Cell.FLOOR
    if cell is Cell.PIECE_ON_TARGET:
        return Cell.TARGET
    raise InvalidTransition(f"There is no piece on {cell.name}")
