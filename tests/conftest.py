"""Shared board fixtures."""

import pytest

from connectfour.core.board import Board

# Full 6x7 board with no four-in-a-row for either side.
DRAW_ROWS = [
    "1122112",
    "2211221",
    "1122112",
    "2211221",
    "1122112",
    "2211221",
]


@pytest.fixture
def empty():
    return Board()


@pytest.fixture
def draw_board():
    return Board.from_rows(DRAW_ROWS)
