"""Push puzzle solver.

A textbook breadth-first search over whole boards: every state reachable
in ``d`` moves is looked at before any reachable in ``d + 1``, so the
first winning board taken off the queue is a shortest solution.

There is no pruning, no deadlock detection and nothing is cached between
calls. Push-block puzzles are PSPACE-complete in general; a big level
will simply take a long time.
"""

from __future__ import annotations

import logging
from collections import deque

from backend.engine.gamerules import successors
from backend.engine.gamesolver.canonical import key_of
from backend.errors import UnsolvableLevelError
from backend.models.board import Board, Direction
from backend.models.level import Level

logger = logging.getLogger(__name__)

# key -> (parent key, move that led here); the start maps to (None, None)
_Parents = dict[str, tuple[str | None, Direction | None]]


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(board: Board) -> int | None:
        """Return the minimum number of moves to win, or ``None`` if unsolvable."""
        start_key = key_of(board)
        visited = {start_key}
        queue: deque[tuple[Board, str, int]] = deque([(board, start_key, 0)])

        while queue:
            current, current_key, depth = queue.popleft()

            if current.unfilled_target_count() == 0:
                logger.debug("Solved in %d moves (%d states seen)", depth, len(visited))
                return depth

            for _, neighbor in successors(current):
                neighbor_key = key_of(neighbor)
                if neighbor_key == current_key or neighbor_key in visited:
                    continue
                visited.add(neighbor_key)
                queue.append((neighbor, neighbor_key, depth + 1))

        logger.debug("Unsolvable (%d states seen)", len(visited))
        return None

    @staticmethod
    def solve_path(board: Board) -> list[Direction] | None:
        """Return a shortest move sequence that wins, or ``None`` if unsolvable.

        An already solved board gives ``[]``.
        """
        start_key = key_of(board)
        parents: _Parents = {start_key: (None, None)}
        queue: deque[tuple[Board, str]] = deque([(board, start_key)])

        while queue:
            current, current_key = queue.popleft()

            if current.unfilled_target_count() == 0:
                return Solver._walk_back(parents, current_key)

            for direction, neighbor in successors(current):
                neighbor_key = key_of(neighbor)
                if neighbor_key in parents:
                    continue
                parents[neighbor_key] = (current_key, direction)
                queue.append((neighbor, neighbor_key))

        return None

    @staticmethod
    def hint(board: Board) -> Direction | None:
        """Return the first move of a shortest solution.

        ``None`` if the board is already solved or can't be solved.
        """
        path = Solver.solve_path(board)
        return path[0] if path else None

    @staticmethod
    def is_solvable(board: Board) -> bool:
        return Solver.solve(board) is not None

    @staticmethod
    def validate(level: Level) -> int:
        """Return the level's minimum move count, raising if it can't be solved."""
        board = level.board()
        solution = Solver.solve(board)
        if solution is None:
            raise UnsolvableLevelError(f"Unsolvable level {level.title!r}:\n{board}")
        logger.info("Level %s is solvable in %d moves.", level.title, solution)
        return solution

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _walk_back(parents: _Parents, key: str) -> list[Direction]:
        moves: list[Direction] = []
        parent, direction = parents[key]
        while parent is not None:
            moves.append(direction)
            parent, direction = parents[parent]
        moves.reverse()
        return moves
