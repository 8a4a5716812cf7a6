"""Tic-tac-toe domain models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, StrEnum

BOARD_CELLS = 9

WINNING_LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


class Cell(IntEnum):
    """Cell contents; values are stored in the numpy board."""

    EMPTY = 0
    X = 1
    O = 2  # noqa: E741

    @property
    def symbol(self) -> str:
        return "" if self is Cell.EMPTY else self.name


class Mark(StrEnum):
    """Player mark."""

    X = "X"
    O = "O"  # noqa: E741

    @property
    def cell(self) -> Cell:
        return Cell[self.value]

    @property
    def other(self) -> Mark:
        return Mark.O if self is Mark.X else Mark.X


class GameStatus(StrEnum):
    """Round status."""

    PLAYING = "PLAYING"
    WON = "WON"
    DRAW = "DRAW"


@dataclass(slots=True)
class Scoreboard:
    """Running tally for the lifetime of an engine."""

    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0

    def record_win(self, mark: Mark) -> None:
        if mark is Mark.X:
            self.x_wins += 1
        else:
            self.o_wins += 1

    def record_draw(self) -> None:
        self.draws += 1

    def reset(self) -> None:
        self.x_wins = 0
        self.o_wins = 0
        self.draws = 0
