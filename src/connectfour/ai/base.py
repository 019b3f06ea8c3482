from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Protocol

from connectfour.game.state import GameState
from connectfour.types import Move


class Agent(Protocol):
    name: str

    def choose_move(self, state: GameState) -> Move:
        ...


@dataclass(slots=True)
class SearchStats:
    nodes: int = 0
    cutoffs: int = 0
    max_depth: int = 0
    root_score: Optional[float] = None  # set only when a search actually ran
