from __future__ import annotations

import csv
from dataclasses import asdict, dataclass, fields
from datetime import datetime
from pathlib import Path
from typing import Optional

from connectfour.game.state import GameState


@dataclass(frozen=True)
class GameRecord:
    """One finished game, from the human's side. Quit games are never recorded."""
    played_at: str
    difficulty: str
    outcome: str
    plies: int


HISTORY_COLUMNS = [f.name for f in fields(GameRecord)]


def record_for(state: GameState, when: Optional[datetime] = None) -> GameRecord:
    if state.outcome is None:
        raise ValueError("Game has no result yet.")
    if state.difficulty is None:
        raise ValueError("Game has no difficulty.")

    stamp = (when or datetime.now()).isoformat(timespec="seconds")
    return GameRecord(
        played_at=stamp,
        difficulty=state.difficulty.value,
        outcome=state.outcome,
        plies=state.board.disc_count(),
    )


def append_record(path: Path, record: GameRecord) -> Path:
    """Append one row, writing the header when the file is new or empty."""
    path.parent.mkdir(parents=True, exist_ok=True)
    new_file = not path.exists() or path.stat().st_size == 0

    with open(path, "a", newline="") as f:
        w = csv.DictWriter(f, fieldnames=HISTORY_COLUMNS)
        if new_file:
            w.writeheader()
        w.writerow(asdict(record))
    return path
