from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

from connectfour.config import HUMAN
from connectfour.core.board import Board
from connectfour.core.rules import check_winner_with_line, is_draw
from connectfour.types import Player, WinLine


def winner_with_line(board: Board) -> Optional[Tuple[Player, WinLine]]:
    return check_winner_with_line(board)


def draw(board: Board) -> bool:
    return is_draw(board)


def outcome_for(winner: Optional[Player], human: Player = HUMAN) -> str:
    if winner is None:
        return "draw"
    return "win" if winner == human else "loss"


def win_percentage(wins: int, games: int) -> int:
    """Whole-number win rate, halves rounded up; 0 before any game."""
    if games <= 0:
        return 0
    return (wins * 200 + games) // (2 * games)


@dataclass
class SessionScore:
    """Human's running record for this process."""
    wins: int = 0
    losses: int = 0
    draws: int = 0

    @property
    def total_games(self) -> int:
        return self.wins + self.losses + self.draws

    @property
    def win_rate(self) -> int:
        return win_percentage(self.wins, self.total_games)

    def record(self, outcome: str) -> None:
        if outcome == "win":
            self.wins += 1
        elif outcome == "loss":
            self.losses += 1
        elif outcome == "draw":
            self.draws += 1
        else:
            raise ValueError(f"Unknown outcome: {outcome!r}")

    def __str__(self) -> str:
        return f"W-D-L {self.wins}-{self.draws}-{self.losses} ({self.total_games} games, {self.win_rate}% won)"
