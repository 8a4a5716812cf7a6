"""Numpy-backed 3x3 board."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from quickplay.games.tictactoe.models import BOARD_CELLS, WINNING_LINES, Cell, Mark

_LINES = np.array(WINNING_LINES, dtype=np.intp)


@dataclass(slots=True)
class TicTacToeBoard:
    """Flat 9-cell board in row-major order."""

    cells: np.ndarray = field(default_factory=lambda: np.zeros(BOARD_CELLS, dtype=np.int8))

    def in_bounds(self, index: int) -> bool:
        return 0 <= index < BOARD_CELLS

    def is_empty(self, index: int) -> bool:
        return bool(self.cells[index] == Cell.EMPTY)

    def place(self, index: int, mark: Mark) -> None:
        """Place a mark; the caller checks bounds and emptiness."""
        if not self.in_bounds(index) or not self.is_empty(index):
            raise ValueError(f"Cell {index} is not available.")
        self.cells[index] = mark.cell

    def is_full(self) -> bool:
        return not bool(np.any(self.cells == Cell.EMPTY))

    def winning_line(self) -> tuple[tuple[int, int, int], Mark] | None:
        """Return the first completed triple in fixed order, with its mark."""
        values = self.cells[_LINES]
        complete = (values[:, 0] != Cell.EMPTY) & np.all(values == values[:, :1], axis=1)
        hits = np.flatnonzero(complete)
        if hits.size == 0:
            return None
        first = int(hits[0])
        return WINNING_LINES[first], Mark(Cell(int(values[first, 0])).name)

    def clear(self) -> None:
        self.cells[:] = Cell.EMPTY

    def snapshot(self) -> tuple[Cell, ...]:
        return tuple(Cell(int(value)) for value in self.cells)
