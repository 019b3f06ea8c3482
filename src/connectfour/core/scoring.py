from __future__ import annotations
from typing import Sequence

from connectfour.config import (
    CENTER_WEIGHT,
    COMPUTER,
    WINDOW_FOUR,
    WINDOW_OPP_THREE,
    WINDOW_THREE,
    WINDOW_TWO,
)
from connectfour.core.board import Board
from connectfour.core.rules import windows
from connectfour.types import Cell, Player


def score_window(cells: Sequence[Cell], player: Player) -> int:
    """
    Score one 4-cell window for `player`.

    Opponent twos are deliberately not penalized; only an opponent three
    with a free cell counts against the player.
    """
    p_count = sum(1 for v in cells if v == player)
    o_count = sum(1 for v in cells if v == player.other)
    e_count = sum(1 for v in cells if v is None)

    score = 0

    if p_count == 4:
        score += WINDOW_FOUR
    elif p_count == 3 and e_count == 1:
        score += WINDOW_THREE
    elif p_count == 2 and e_count == 2:
        score += WINDOW_TWO

    if o_count == 3 and e_count == 1:
        score += WINDOW_OPP_THREE

    return score


def center_bias(board: Board, player: Player) -> int:
    center = board.cols // 2
    return CENTER_WEIGHT * sum(1 for r in range(board.rows) if board.grid[r][center] == player)


def evaluate(board: Board, player: Player = COMPUTER) -> int:
    g = board.grid
    score = center_bias(board, player)
    for line in windows(board.rows, board.cols):
        score += score_window([g[r][c] for (r, c) in line], player)
    return score
