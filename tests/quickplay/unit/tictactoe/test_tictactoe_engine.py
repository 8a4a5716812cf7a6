from __future__ import annotations

import pytest

from quickplay.games.tictactoe import WINNING_LINES, Cell, GameStatus, Mark, TicTacToeEngine


def _play(engine: TicTacToeEngine, moves: list[int]) -> None:
    for index in moves:
        assert engine.move(index)


def _filler_moves(line: tuple[int, int, int]) -> list[int]:
    """Two O replies off `line`; two marks can never complete a triple."""
    return [cell for cell in range(9) if cell not in line][:2]


def test_top_row_scenario() -> None:
    engine = TicTacToeEngine()
    _play(engine, [0, 4, 1, 3, 2])

    assert engine.status is GameStatus.WON
    assert engine.winner is Mark.X
    assert engine.winning_line == (0, 1, 2)
    assert engine.board[:3] == (Cell.X, Cell.X, Cell.X)
    assert engine.scoreboard.x_wins == 1
    assert engine.scoreboard.o_wins == 0


@pytest.mark.parametrize("line", WINNING_LINES)
def test_every_winning_triple_is_detected_for_x(line: tuple[int, int, int]) -> None:
    engine = TicTacToeEngine()
    o_first, o_second = _filler_moves(line)
    _play(engine, [line[0], o_first, line[1], o_second, line[2]])

    assert engine.status is GameStatus.WON
    assert engine.winner is Mark.X
    assert engine.winning_line == line


@pytest.mark.parametrize("line", WINNING_LINES)
def test_every_winning_triple_is_detected_for_o(line: tuple[int, int, int]) -> None:
    engine = TicTacToeEngine()
    # X plays on cells outside `line` that never form a triple of their own.
    x_cells = [c for c in range(9) if c not in line]
    picked: list[int] = []
    for cell in x_cells:
        trial = set(picked) | {cell}
        if not any(set(other) <= trial for other in WINNING_LINES):
            picked.append(cell)
        if len(picked) == 3:
            break
    assert len(picked) == 3
    _play(engine, [picked[0], line[0], picked[1], line[1], picked[2], line[2]])

    assert engine.status is GameStatus.WON
    assert engine.winner is Mark.O
    assert engine.winning_line == line
    assert engine.scoreboard.o_wins == 1


def test_full_board_without_triple_is_a_draw() -> None:
    engine = TicTacToeEngine()
    # X O X / X O O / O X X
    _play(engine, [0, 1, 2, 4, 3, 5, 7, 6, 8])

    assert engine.status is GameStatus.DRAW
    assert engine.winner is None
    assert engine.scoreboard.draws == 1


def test_completing_a_line_on_the_last_cell_is_a_win_not_a_draw() -> None:
    engine = TicTacToeEngine()
    # X O X / O X O / O X X  -> X completes the 0-4-8 diagonal on move nine.
    _play(engine, [0, 1, 2, 3, 4, 5, 7, 6, 8])

    assert engine.status is GameStatus.WON
    assert engine.winner is Mark.X
    assert engine.scoreboard.draws == 0


def test_rejected_moves_leave_state_untouched() -> None:
    engine = TicTacToeEngine()
    assert engine.move(4)
    assert not engine.move(4)
    assert not engine.move(-1)
    assert not engine.move(9)
    assert engine.next_mark is Mark.O
    assert engine.board.count(Cell.EMPTY) == 8


def test_moves_after_game_over_are_rejected() -> None:
    engine = TicTacToeEngine()
    _play(engine, [0, 4, 1, 3, 2])
    board = engine.board
    assert not engine.move(8)
    assert engine.board == board


def test_restart_keeps_scoreboard_and_reset_scores_zeroes_it() -> None:
    engine = TicTacToeEngine()
    _play(engine, [0, 4, 1, 3, 2])
    engine.restart()

    assert engine.status is GameStatus.PLAYING
    assert engine.next_mark is Mark.X
    assert engine.winner is None
    assert engine.winning_line is None
    assert all(cell is Cell.EMPTY for cell in engine.board)
    assert engine.scoreboard.x_wins == 1

    _play(engine, [0, 1, 2, 4, 3, 5, 7, 6, 8])
    assert engine.scoreboard.draws == 1

    engine.reset_scores()
    assert engine.scoreboard.x_wins == 0
    assert engine.scoreboard.draws == 0
    assert engine.status is GameStatus.PLAYING


def test_scoreboard_property_is_a_copy() -> None:
    engine = TicTacToeEngine()
    engine.scoreboard.x_wins = 10
    assert engine.scoreboard.x_wins == 0
