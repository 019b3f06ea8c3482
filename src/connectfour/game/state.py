from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from connectfour.config import HUMAN
from connectfour.core.board import Board
from connectfour.types import Difficulty, Player, WinLine


@dataclass(slots=True)
class GameState:
    board: Board = field(default_factory=Board)
    current: Player = HUMAN
    difficulty: Optional[Difficulty] = None
    last_status: str = "You move first."
    winning_line: Optional[WinLine] = None
    outcome: Optional[str] = None  # "win" | "loss" | "draw", from the human's side
