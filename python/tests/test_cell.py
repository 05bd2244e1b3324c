"""Cell composition rules."""

from __future__ import annotations

import pytest

from backend.errors import InvalidTransition
from backend.models.cell import (
    Cell,
    drop_piece,
    is_agent,
    is_open,
    is_piece,
    is_target,
    lift_piece,
    place,
    remove,
)


def test_symbols_match_level_format() -> None:
    assert "".join(Cell) == "# .$*@+"


@pytest.mark.parametrize(
    ("before", "after"),
    [(Cell.FLOOR, Cell.AGENT), (Cell.TARGET, Cell.AGENT_ON_TARGET)],
)
def test_place(before: Cell, after: Cell) -> None:
    assert place(before) is after


@pytest.mark.parametrize(
    "cell",
    [Cell.WALL, Cell.PIECE, Cell.PIECE_ON_TARGET, Cell.AGENT, Cell.AGENT_ON_TARGET],
)
def test_place_fails_closed(cell: Cell) -> None:
    with pytest.raises(InvalidTransition):
        place(cell)


@pytest.mark.parametrize(
    ("before", "after"),
    [(Cell.AGENT, Cell.FLOOR), (Cell.AGENT_ON_TARGET, Cell.TARGET)],
)
def test_remove(before: Cell, after: Cell) -> None:
    assert remove(before) is after


@pytest.mark.parametrize(
    "cell",
    [Cell.WALL, Cell.FLOOR, Cell.TARGET, Cell.PIECE, Cell.PIECE_ON_TARGET],
)
def test_remove_fails_closed(cell: Cell) -> None:
    with pytest.raises(InvalidTransition):
        remove(cell)


def test_pieces_keep_targets() -> None:
    assert drop_piece(Cell.FLOOR) is Cell.PIECE
    assert drop_piece(Cell.TARGET) is Cell.PIECE_ON_TARGET
    assert lift_piece(Cell.PIECE) is Cell.FLOOR
    assert lift_piece(Cell.PIECE_ON_TARGET) is Cell.TARGET
    with pytest.raises(InvalidTransition):
        drop_piece(Cell.PIECE)
    with pytest.raises(InvalidTransition):
        lift_piece(Cell.AGENT)


def test_predicates() -> None:
    assert {c for c in Cell if is_agent(c)} == {Cell.AGENT, Cell.AGENT_ON_TARGET}
    assert {c for c in Cell if is_piece(c)} == {Cell.PIECE, Cell.PIECE_ON_TARGET}
    assert {c for c in Cell if is_open(c)} == {Cell.FLOOR, Cell.TARGET}
    assert {c for c in Cell if is_target(c)} == {
        Cell.TARGET,
        Cell.PIECE_ON_TARGET,
        Cell.AGENT_ON_TARGET,
    }
