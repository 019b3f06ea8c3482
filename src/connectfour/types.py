# src/connectfour/types.py

from __future__ import annotations
from enum import Enum, IntEnum
from typing import NewType, Optional, Tuple


class Player(IntEnum):
    ONE = 1  # human
    TWO = 2  # computer

    @property
    def other(self) -> "Player":
        return Player.TWO if self is Player.ONE else Player.ONE


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def label(self) -> str:
        return self.value.capitalize()


Cell = Optional[Player]
Move = NewType("Move", int)   # column index 0..cols-1
Coord = Tuple[int, int]       # (row, col)
WinLine = Tuple[Coord, ...]   # CONNECT_N coordinates
