from __future__ import annotations

from typing import Iterable, Optional

import pandas as pd

from connectfour.game.results import win_percentage

from ..io.load_history import LEVELS

PROFILE_COLUMNS = ["difficulty", "games", "wins", "draws", "losses", "win_rate", "avg_plies"]


def filter_difficulty(df: pd.DataFrame, levels: Optional[Iterable[str]]) -> pd.DataFrame:
    if not levels:
        return df
    keep = {str(getattr(lv, "value", lv)) for lv in levels}
    return df[df["difficulty"].isin(keep)].reset_index(drop=True)


def _row(label: str, games: pd.DataFrame) -> dict:
    counts = games["outcome"].value_counts()
    wins, draws, losses = (int(counts.get(o, 0)) for o in ("win", "draw", "loss"))
    plies = games["plies"].mean() if len(games) else 0.0
    return {
        "difficulty": label,
        "games": len(games),
        "wins": wins,
        "draws": draws,
        "losses": losses,
        "win_rate": win_percentage(wins, len(games)),
        "avg_plies": round(float(plies), 1),
    }


def profile_table(df: pd.DataFrame) -> pd.DataFrame:
    """One row per difficulty plus an "all" row; win_rate is a whole percent."""
    rows = [_row(level, df[df["difficulty"] == level]) for level in LEVELS]
    rows.append(_row("all", df))
    return pd.DataFrame(rows, columns=PROFILE_COLUMNS)


def rolling_win_rate(df: pd.DataFrame, window: int = 10) -> pd.DataFrame:
    """Win rate (%) over the last `window` games, one row per game played."""
    if window < 1:
        raise ValueError("window must be >= 1")
    won = (df["outcome"] == "win").astype(float) * 100.0
    return pd.DataFrame({
        "game": range(1, len(df) + 1),
        "difficulty": df["difficulty"].to_numpy(),
        "win_rate": won.rolling(window, min_periods=1).mean().round(1).to_numpy(),
    })


def streaks(df: pd.DataFrame) -> dict:
    if df.empty:
        return {"current_outcome": None, "current_length": 0, "longest_win": 0}

    outcome = df["outcome"].reset_index(drop=True)
    run_id = (outcome != outcome.shift()).cumsum()
    runs = outcome.groupby(run_id).agg(["first", "size"])
    win_runs = runs.loc[runs["first"] == "win", "size"]

    return {
        "current_outcome": runs["first"].iloc[-1],
        "current_length": int(runs["size"].iloc[-1]),
        "longest_win": int(win_runs.max()) if not win_runs.empty else 0,
    }
