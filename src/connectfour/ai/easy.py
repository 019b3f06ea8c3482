from __future__ import annotations
import random
from typing import Optional

from connectfour.core.board import Board
from connectfour.errors import NoMoveAvailableError
from connectfour.types import Move


def choose_easy(board: Board, rng: Optional[random.Random] = None) -> Move:
    moves = board.valid_moves()
    if not moves:
        raise NoMoveAvailableError()
    return (rng or random).choice(moves)
