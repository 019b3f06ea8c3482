from __future__ import annotations

from pathlib import Path

import pandas as pd

from connectfour.game.history import HISTORY_COLUMNS
from connectfour.types import Difficulty

OUTCOMES = ("win", "draw", "loss")
LEVELS = tuple(d.value for d in Difficulty)


def load_history(path: Path) -> pd.DataFrame:
    """
    Read a game history CSV written by `connectfour --history`.
    Rows with an unknown difficulty or outcome are dropped; the rest come
    back in play order with `played_at` parsed and `plies` numeric.
    """
    if not path.exists():
        raise FileNotFoundError(f"History CSV not found: {path}")

    df = pd.read_csv(path, dtype=str)
    df.columns = [c.strip() for c in df.columns]

    missing = [c for c in HISTORY_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"History CSV missing columns: {missing}. Columns: {list(df.columns)}")

    df = df[HISTORY_COLUMNS].copy()
    for col in ("difficulty", "outcome"):
        df[col] = df[col].fillna("").str.strip().str.lower()
    df = df[df["difficulty"].isin(LEVELS) & df["outcome"].isin(OUTCOMES)].copy()

    df["played_at"] = pd.to_datetime(df["played_at"], errors="coerce")
    df["plies"] = pd.to_numeric(df["plies"], errors="coerce")

    # Stable, so games sharing a timestamp keep file order
    df = df.sort_values("played_at", kind="stable", na_position="first")
    return df.reset_index(drop=True)
