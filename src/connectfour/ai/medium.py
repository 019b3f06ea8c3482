from __future__ import annotations

import random
from typing import Optional

from connectfour.config import COMPUTER
from connectfour.core.board import Board
from connectfour.core.rules import has_won
from connectfour.errors import NoMoveAvailableError
from connectfour.types import Move, Player


def winning_move(board: Board, player: Player) -> Optional[Move]:
    """Lowest legal column that completes four for `player`, if any."""
    for c in board.valid_moves():
        if has_won(board.drop(c, player), player):
            return c
    return None


def choose_medium(board: Board, me: Player = COMPUTER, rng: Optional[random.Random] = None) -> Move:
    """
    One-ply tactical play:
      1) Play an immediate winning move if available
      2) Block the opponent's immediate winning move
      3) Take the center column
      4) Otherwise random valid move

    No forks or double threats are detected.
    """
    moves = board.valid_moves()
    if not moves:
        raise NoMoveAvailableError()

    # 1) win now
    m = winning_move(board, me)
    if m is not None:
        return m

    # 2) block opponent win
    m = winning_move(board, me.other)
    if m is not None:
        return m

    # 3) center preference
    center = board.cols // 2
    if center in moves:
        return Move(center)

    # 4) random fallback
    return (rng or random).choice(moves)
