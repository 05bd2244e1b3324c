"""Board model for the push puzzle."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum

from backend.errors import InvalidState, LevelFormatError
from backend.models.cell import Cell, is_agent, is_piece

_SYMBOLS = {c.value: c for c in Cell}


class Direction(StrEnum):
    """Where the agent walks. Values double as the CLI / key names."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]


_OFFSETS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


@dataclass(frozen=True)
class Board:
    """An immutable rectangular grid of cells.

    Every move produces a new ``Board``; two boards are equal when their
    cells are equal position for position.
    """

    cells: tuple[tuple[Cell, ...], ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Board:
        """Create a board from level source lines, one character per cell.

        Example::

            Board.from_lines(["#####", "#.$@#", "#####"])
        """
        rows: list[tuple[Cell, ...]] = []
        for r, line in enumerate(lines):
            try:
                rows.append(tuple(_SYMBOLS[ch] for ch in line))
            except KeyError as exc:
                raise LevelFormatError(
                    f"Unknown cell symbol {exc.args[0]!r} on line {r}."
                ) from None
        if not rows or not rows[0]:
            raise LevelFormatError("A level needs at least one non-empty line.")
        width = len(rows[0])
        for r, row in enumerate(rows):
            if len(row) != width:
                raise LevelFormatError(
                    f"Line {r} is {len(row)} cells wide, expected {width}."
                )
        return cls(cells=tuple(rows))

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> tuple[int, int]:
        """(rows, columns)"""
        return len(self.cells), len(self.cells[0])

    def contains(self, row: int, col: int) -> bool:
        rows, cols = self.size
        return 0 <= row < rows and 0 <= col < cols

    def cell_at(self, row: int, col: int) -> Cell:
        if not self.contains(row, col):
            raise InvalidState(f"({row}, {col}) is outside the board.")
        return self.cells[row][col]

    def agent_position(self) -> tuple[int, int]:
        """Return the (row, col) of the agent, on a target or not."""
        rows, cols = self.size
        for c in range(cols):
            for r in range(rows):
                if is_agent(self.cells[r][c]):
                    return r, c
        raise InvalidState("Could not find the agent on the board.")

    def unfilled_target_count(self) -> int:
        """Targets not yet covered by a piece. Zero means the level is won."""
        return sum(
            cell is Cell.TARGET or cell is Cell.AGENT_ON_TARGET
            for row in self.cells
            for cell in row
        )

    def piece_count(self) -> int:
        return sum(is_piece(cell) for row in self.cells for cell in row)

    def agent_count(self) -> int:
        return sum(is_agent(cell) for row in self.cells for cell in row)

    # -- functional updates ---------------------------------------------------

    def replace(self, changes: Mapping[tuple[int, int], Cell]) -> Board:
        """Return a new board with *changes* applied.

        Rows that don't change are shared with this board.
        """
        rows = list(self.cells)
        touched: dict[int, list[Cell]] = {}
        for (r, c), cell in changes.items():
            if not self.contains(r, c):
                raise InvalidState(f"({r}, {c}) is outside the board.")
            if r not in touched:
                touched[r] = list(rows[r])
            touched[r][c] = cell
        for r, row in touched.items():
            rows[r] = tuple(row)
        return Board(cells=tuple(rows))

    def copy(self) -> Board:
        return Board(cells=tuple(tuple(row) for row in self.cells))

    def to_lines(self) -> list[str]:
        return ["".join(row) for row in self.cells]

    def __str__(self) -> str:
        return "\n".join(self.to_lines())
