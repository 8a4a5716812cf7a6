"""Hot-seat tic-tac-toe state machine."""

from __future__ import annotations

import logging

from quickplay.games.tictactoe.board import TicTacToeBoard
from quickplay.games.tictactoe.models import Cell, GameStatus, Mark, Scoreboard

logger = logging.getLogger(__name__)


class TicTacToeEngine:
    """Turn order, win/draw detection and the running scoreboard."""

    def __init__(self) -> None:
        self._board = TicTacToeBoard()
        self._scoreboard = Scoreboard()
        self._next_mark = Mark.X
        self._status = GameStatus.PLAYING
        self._winner: Mark | None = None
        self._winning_line: tuple[int, int, int] | None = None

    @property
    def board(self) -> tuple[Cell, ...]:
        return self._board.snapshot()

    @property
    def next_mark(self) -> Mark:
        return self._next_mark

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def winner(self) -> Mark | None:
        return self._winner

    @property
    def winning_line(self) -> tuple[int, int, int] | None:
        return self._winning_line

    @property
    def scoreboard(self) -> Scoreboard:
        """Copy of the running tally."""
        return Scoreboard(
            x_wins=self._scoreboard.x_wins,
            o_wins=self._scoreboard.o_wins,
            draws=self._scoreboard.draws,
        )

    def move(self, index: int) -> bool:
        """Place the current mark at `index`; return whether the move was taken."""
        if self._status is not GameStatus.PLAYING:
            return False
        if not self._board.in_bounds(index) or not self._board.is_empty(index):
            logger.debug("tictactoe_move_rejected index=%s", index)
            return False

        mark = self._next_mark
        self._board.place(index, mark)
        self._next_mark = mark.other

        found = self._board.winning_line()
        if found is not None:
            line, winner = found
            self._status = GameStatus.WON
            self._winner = winner
            self._winning_line = line
            self._scoreboard.record_win(winner)
            logger.info("tictactoe_won winner=%s line=%s", winner.value, line)
        elif self._board.is_full():
            self._status = GameStatus.DRAW
            self._scoreboard.record_draw()
            logger.info("tictactoe_draw")
        return True

    def restart(self) -> None:
        """Clear the board for a new round; the scoreboard is kept."""
        self._board.clear()
        self._next_mark = Mark.X
        self._status = GameStatus.PLAYING
        self._winner = None
        self._winning_line = None

    def reset_scores(self) -> None:
        """Zero the scoreboard and start a new round."""
        self._scoreboard.reset()
        self.restart()
