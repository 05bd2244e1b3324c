"""Game sessions: counting moves, undo, reset and live progress."""

from __future__ import annotations

from backend.engine.gameplay import GamePlay
from backend.engine.progress import Progress
from backend.models.board import Board, Direction
from backend.models.level import Level

HALLWAY = ("######", "#    #", "#@$ .#", "#    #", "######")


def _game() -> GamePlay:
    return GamePlay.from_level(Level(title="Hallway", lines=HALLWAY))


def test_new_game_knows_its_minimum() -> None:
    game = _game()
    assert game.min_moves == 2
    assert game.min_moves_remaining == 2
    assert game.state.moves == 0
    assert game.unfilled_targets == 1
    assert game.progress is Progress.PERFECT
    assert game.is_solvable
    assert not game.is_won
    assert game.level.title == "Hallway"


def test_blocked_moves_are_not_counted() -> None:
    game = _game()
    start = game.state.board
    assert game.move(Direction.LEFT) is False
    assert game.state.moves == 0
    assert game.state.board is start
    assert not game.state.can_undo


def test_detour_is_great_then_undo_is_perfect_again() -> None:
    game = _game()
    assert game.move(Direction.UP) is True
    assert game.state.moves == 1
    assert game.min_moves_remaining == 3
    assert game.progress is Progress.GREAT

    assert game.undo() is True
    assert game.state.moves == 0
    assert game.min_moves_remaining == 2
    assert game.progress is Progress.PERFECT
    assert game.undo() is False


def test_perfect_win() -> None:
    game = _game()
    game.move(Direction.RIGHT)
    game.move(Direction.RIGHT)
    assert game.is_won
    assert game.unfilled_targets == 0
    assert game.state.moves == 2
    assert game.min_moves_remaining == 0
    assert game.progress is Progress.PERFECT


def test_pushing_into_the_top_row_is_doom() -> None:
    game = _game()
    for direction in (Direction.DOWN, Direction.RIGHT, Direction.UP):
        assert game.move(direction)
    assert game.state.board.to_lines()[1] == "# $  #"
    assert game.min_moves_remaining is None
    assert game.progress is Progress.DOOM

    game.reset()
    assert game.state.moves == 0
    assert game.state.board == Board.from_lines(HALLWAY)
    assert game.progress is Progress.PERFECT
    assert not game.state.can_undo


def test_unsolvable_start() -> None:
    game = GamePlay.from_board(Board.from_lines(["#####", "#.@$#", "#####"]))
    assert game.min_moves is None
    assert not game.is_solvable
    assert game.progress is Progress.DOOM
    assert game.level is None


def test_assisted_flag_clears_on_reset() -> None:
    game = _game()
    assert game.assisted is False
    game.assisted = True
    game.move(Direction.RIGHT)
    assert game.assisted is True
    game.reset()
    assert game.assisted is False
