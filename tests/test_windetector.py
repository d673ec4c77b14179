"""Unit tests for win detection."""

from tictactoe.core.board import Board, Player
from tictactoe.core.windetector import NO_WINNER, WINNING_LINES, Outcome, evaluate, outcome

X, O, _ = Player.X, Player.O, Player.EMPTY


def test_empty_board_has_no_winner():
    assert evaluate(Board.empty()) == NO_WINNER
    assert outcome(Board.empty()) == Outcome.PLAYING


def test_every_line_wins_for_either_player():
    for line in WINNING_LINES:
        for player in (X, O):
            cells = [_] * 9
            for i in line:
                cells[i] = player
            result = evaluate(Board(cells))
            assert result.winner == player
            assert result.line == line


def test_row_column_and_diagonal():
    row = Board([X, X, X, O, O, _, _, _, _])
    col = Board([O, X, _, O, X, _, O, _, X])
    diag = Board([X, O, O, _, X, _, _, _, X])
    anti = Board([X, X, O, _, O, _, O, _, X])

    assert evaluate(row).winner == X
    assert evaluate(col).winner == O
    assert evaluate(diag).winner == X
    assert evaluate(anti).winner == O


def test_mixed_line_is_not_a_win():
    board = Board([X, O, X, _, _, _, _, _, _])
    assert not evaluate(board).has_winner


def test_full_board_without_line_is_draw():
    # X O X / O X O / O X O
    board = Board([X, O, X, O, X, O, O, X, O])
    assert board.is_full()
    assert evaluate(board) == NO_WINNER
    assert outcome(board) == Outcome.DRAW


def test_full_board_with_line_is_won_not_draw():
    board = Board([X, X, X, O, O, X, X, O, O])
    assert board.is_full()
    assert outcome(board) == Outcome.WON


def test_evaluate_is_pure():
    board = Board([X, O, _, _, X, O, _, _, X])
    before = board.cells()
    assert evaluate(board) == evaluate(board)
    assert board.cells() == before
