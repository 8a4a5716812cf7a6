"""Two-player tic-tac-toe."""

from quickplay.games.tictactoe.board import TicTacToeBoard
from quickplay.games.tictactoe.engine import TicTacToeEngine
from quickplay.games.tictactoe.models import (
    WINNING_LINES,
    Cell,
    GameStatus,
    Mark,
    Scoreboard,
)

__all__ = [
    "Cell",
    "GameStatus",
    "Mark",
    "Scoreboard",
    "TicTacToeBoard",
    "TicTacToeEngine",
    "WINNING_LINES",
]
