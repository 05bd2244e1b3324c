"""Player-facing text shared by the terminal frontends."""

from __future__ import annotations

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import Solver
from backend.engine.progress import Progress

PROGRESS_FACES: dict[Progress, str] = {
    Progress.PERFECT: "=^.^=  purrfect",
    Progress.GREAT: "=^_^=  great",
    Progress.OKAY: "=o_o=  okay",
    Progress.DOOM: "=O_O=  doomed, try again",
}


def progress_description(game: GamePlay) -> str:
    """One line describing where the player stands."""
    moves = game.state.moves
    min_moves = game.min_moves
    if min_moves is None:
        return "Unsolvable level!"
    if moves == 0:
        return f"You can beat this level in {min_moves} moves."
    if game.is_won:
        if moves == min_moves:
            return f"You took a perfect {moves} moves!"
        return f"You took {moves} moves; it can be done in {min_moves}."
    return f"Moves so far: {moves}   {PROGRESS_FACES[game.progress]}"


def apply_hint(game: GamePlay) -> tuple[str, bool]:
    """Apply a solver hint to *game*.

    Returns the status message and whether a move was made.
    """
    board = game.state.board
    if game.is_won:
        return "Already solved!", False
    hint = Solver.hint(board)
    if hint is None:
        return "No way to win from here. Press R to try again.", False
    game.move(hint)
    game.assisted = True
    return f"Hint: moved {hint.value}", True
