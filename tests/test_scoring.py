"""Tests for the heuristic evaluator."""

import pytest

from connectfour.core.board import Board
from connectfour.core.scoring import center_bias, evaluate, score_window
from connectfour.types import Player

ONE, TWO = Player.ONE, Player.TWO


@pytest.mark.parametrize(
    "cells, expected",
    [
        ([TWO, TWO, TWO, TWO], 100),
        ([TWO, TWO, TWO, None], 5),
        ([None, TWO, TWO, None], 2),
        ([ONE, ONE, ONE, None], -4),
        ([ONE, ONE, None, None], 0),  # opponent twos are not penalized
        ([TWO, TWO, ONE, None], 0),
        ([TWO, None, None, None], 0),
        ([None, None, None, None], 0),
        ([TWO, TWO, TWO, ONE], 0),
    ],
)
def test_score_window(cells, expected):
    assert score_window(cells, TWO) == expected


def test_empty_board_scores_zero(empty):
    assert evaluate(empty) == 0


def test_center_disc_bonus():
    board = Board.from_rows(["......."] * 5 + ["...2..."])
    assert center_bias(board, TWO) == 3
    assert evaluate(board) == 3
    assert evaluate(board, ONE) == 0


def test_own_three_in_a_row():
    board = Board.from_rows(["......."] * 5 + ["222...."])
    # [0..3] is three + empty (+5), [1..4] is two + two empty (+2)
    assert evaluate(board) == 7


def test_opponent_three_in_a_row():
    board = Board.from_rows(["......."] * 5 + ["111...."])
    # only [0..3] counts: the opponent two in [1..4] scores nothing
    assert evaluate(board) == -4


def test_perspective_is_a_parameter():
    board = Board.from_rows(["......."] * 5 + ["111...."])
    assert evaluate(board, ONE) == 7
