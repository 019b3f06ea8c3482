"""Tests for win detection and the window enumeration."""

import pytest

from connectfour.core.board import Board
from connectfour.core.rules import (
    apply_move,
    check_winner,
    check_winner_with_line,
    has_won,
    is_draw,
    legal_moves,
    winning_line,
    windows,
)
from connectfour.types import Player


def test_window_count_standard_board():
    # 24 horizontal + 21 vertical + 12 + 12 diagonal
    assert len(windows(6, 7)) == 69


def test_window_order_starts_each_direction_where_expected():
    ws = windows(6, 7)
    assert ws[0] == ((0, 0), (0, 1), (0, 2), (0, 3))
    assert ws[24] == ((0, 0), (1, 0), (2, 0), (3, 0))
    assert ws[45] == ((3, 0), (2, 1), (1, 2), (0, 3))
    assert ws[57] == ((0, 0), (1, 1), (2, 2), (3, 3))


def test_no_winner_on_empty(empty):
    assert not has_won(empty, Player.ONE)
    assert not has_won(empty, Player.TWO)
    assert winning_line(empty, Player.ONE) is None
    assert check_winner(empty) is None


def test_horizontal_win():
    board = Board.from_rows([
        ".......",
        ".......",
        ".......",
        ".......",
        "222....",
        "1111...",
    ])
    assert has_won(board, Player.ONE)
    assert not has_won(board, Player.TWO)
    assert winning_line(board, Player.ONE) == ((5, 0), (5, 1), (5, 2), (5, 3))


def test_vertical_win():
    board = Board.from_rows([
        ".......",
        ".......",
        "2......",
        "2......",
        "2..1...",
        "2.11...",
    ])
    assert winning_line(board, Player.TWO) == ((2, 0), (3, 0), (4, 0), (5, 0))


def test_diagonal_up_right_win():
    board = Board.from_rows([
        ".......",
        ".......",
        "...2...",
        "..21...",
        ".211...",
        "2111...",
    ])
    assert winning_line(board, Player.TWO) == ((5, 0), (4, 1), (3, 2), (2, 3))
    assert not has_won(board, Player.ONE)


def test_diagonal_down_right_win():
    board = Board.from_rows([
        ".......",
        ".......",
        "1......",
        "21.....",
        "221....",
        "2221...",
    ])
    assert winning_line(board, Player.ONE) == ((2, 0), (3, 1), (4, 2), (5, 3))
    assert not has_won(board, Player.TWO)


def test_first_line_in_scan_order_is_reported():
    board = Board.from_rows([
        ".......",
        ".......",
        "1......",
        "1......",
        "12.....",
        "11112..",
    ])
    # horizontal is scanned before vertical
    line = winning_line(board, Player.ONE)
    assert line == ((5, 0), (5, 1), (5, 2), (5, 3))
    assert winning_line(board, Player.ONE) == line
    assert check_winner_with_line(board) == (Player.ONE, line)


def test_win_is_kept_by_further_moves():
    board = Board.from_rows([
        ".......",
        ".......",
        ".......",
        ".......",
        "222....",
        "1111...",
    ])
    for player in Player:
        for col in legal_moves(board):
            assert has_won(apply_move(board, col, player), Player.ONE)


def test_draw_board(draw_board):
    assert check_winner(draw_board) is None
    assert is_draw(draw_board)


def test_full_board_with_winner_is_not_draw():
    board = Board.from_rows([
        "1122112",
        "2211221",
        "1122112",
        "2211221",
        "1122112",
        "1111221",
    ])
    assert has_won(board, Player.ONE)
    assert not is_draw(board)


@pytest.mark.parametrize("player", list(Player))
def test_small_board_has_no_windows(player):
    board = Board(rows=3, cols=3)
    assert windows(3, 3) == ()
    assert not has_won(board, player)


def test_window_length_follows_connect_n():
    from connectfour.config import CONNECT_N

    assert windows(6, 7) == windows(6, 7, CONNECT_N)
    assert all(len(w) == CONNECT_N for w in windows(6, 7))
    # tic-tac-toe sized: 3 rows, 3 columns, 2 diagonals
    three = windows(3, 3, 3)
    assert len(three) == 8
    assert three[6] == ((2, 0), (1, 1), (0, 2))
