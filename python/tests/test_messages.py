"""Player-facing status lines."""

from __future__ import annotations

from backend.engine.gameplay import GamePlay
from backend.models.board import Board, Direction
from backend.models.level import Level
from frontend.cli.messages import apply_hint, progress_description

HALLWAY = ("######", "#    #", "#@$ .#", "#    #", "######")


def _game() -> GamePlay:
    return GamePlay.from_level(Level(title="Hallway", lines=HALLWAY))


def test_descriptions_follow_the_game() -> None:
    game = _game()
    assert progress_description(game) == "You can beat this level in 2 moves."

    game.move(Direction.UP)
    assert progress_description(game).startswith("Moves so far: 1")

    game.reset()
    game.move(Direction.RIGHT)
    game.move(Direction.RIGHT)
    assert progress_description(game) == "You took a perfect 2 moves!"


def test_suboptimal_win() -> None:
    game = _game()
    for direction in (Direction.UP, Direction.DOWN, Direction.RIGHT, Direction.RIGHT):
        game.move(direction)
    assert game.is_won
    assert progress_description(game) == "You took 4 moves; it can be done in 2."


def test_unsolvable() -> None:
    game = GamePlay.from_board(Board.from_lines(["#####", "#.@$#", "#####"]))
    assert progress_description(game) == "Unsolvable level!"
    message, moved = apply_hint(game)
    assert not moved


def test_hint_makes_the_best_move() -> None:
    game = _game()
    message, moved = apply_hint(game)
    assert moved
    assert message == "Hint: moved right"
    assert game.state.moves == 1
    assert game.min_moves_remaining == 1


def test_hint_marks_the_game_assisted() -> None:
    game = _game()
    assert not game.assisted
    apply_hint(game)
    assert game.assisted
