from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from connectfour.ai.base import SearchStats
from connectfour.ai.easy import choose_easy
from connectfour.ai.medium import choose_medium
from connectfour.ai.minimax import choose_hard
from connectfour.config import COMPUTER, SEARCH_DEPTH
from connectfour.core.board import Board
from connectfour.game.state import GameState
from connectfour.types import Difficulty, Move, Player


DESCRIPTIONS: Dict[Difficulty, str] = {
    Difficulty.EASY: "Random moves",
    Difficulty.MEDIUM: "Blocks & attacks",
    Difficulty.HARD: "Minimax search",
}


def parse_difficulty(raw: str) -> Difficulty:
    s = raw.strip().lower()
    by_number = {"1": Difficulty.EASY, "2": Difficulty.MEDIUM, "3": Difficulty.HARD}
    if s in by_number:
        return by_number[s]
    try:
        return Difficulty(s)
    except ValueError:
        raise ValueError(f"Unknown difficulty: {raw!r}. Use easy, medium or hard.") from None


# Adapters share one keyword signature (board, me, rng, stats); each takes what it uses.
def _easy(board: Board, *, rng: Optional[random.Random] = None, **_) -> Move:
    return choose_easy(board, rng)


def _medium(board: Board, *, me: Player = COMPUTER, rng: Optional[random.Random] = None, **_) -> Move:
    return choose_medium(board, me, rng)


def _hard(
    board: Board,
    *,
    me: Player = COMPUTER,
    rng: Optional[random.Random] = None,
    stats: Optional[SearchStats] = None,
) -> Move:
    return choose_hard(board, me, SEARCH_DEPTH, rng, stats)


STRATEGIES: Dict[Difficulty, Callable[..., Move]] = {
    Difficulty.EASY: _easy,
    Difficulty.MEDIUM: _medium,
    Difficulty.HARD: _hard,
}


def choose_move(
    board: Board,
    difficulty: Difficulty,
    me: Player = COMPUTER,
    rng: Optional[random.Random] = None,
    stats: Optional[SearchStats] = None,
) -> Move:
    """Single entry point for an AI turn."""
    return STRATEGIES[Difficulty(difficulty)](board, me=me, rng=rng, stats=stats)


@dataclass
class ComputerAgent:
    """
    Game-loop adapter around choose_move.
    Plays whichever side is to move in the given state.
    """
    difficulty: Difficulty = Difficulty.MEDIUM
    name: str = ""
    rng: random.Random = field(default_factory=random.Random)
    last_info: dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.difficulty = Difficulty(self.difficulty)
        if not self.name:
            self.name = f"{self.difficulty.label} AI"

    def choose_move(self, state: GameState) -> Move:
        stats = SearchStats()
        t0 = time.perf_counter()
        move = choose_move(state.board, self.difficulty, state.current, self.rng, stats)
        elapsed = time.perf_counter() - t0

        self.last_info = {
            "depth": stats.max_depth,
            "nodes": stats.nodes,
            "cutoffs": stats.cutoffs,
            "eval": stats.root_score,
            "move_col": int(move) + 1,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        return move
