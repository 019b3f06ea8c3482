from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd

OUTCOME_COLORS = {"wins": "tab:green", "draws": "tab:gray", "losses": "tab:red"}


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    out = outdir / filename
    fig.savefig(out, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return out


def plot_record_by_difficulty(table: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """Stacked wins / draws / losses per difficulty, win rate printed on top."""
    per_level = table[table["difficulty"] != "all"]
    if per_level.empty or per_level["games"].sum() == 0:
        return None

    labels = per_level["difficulty"].str.capitalize()
    fig, ax = plt.subplots(figsize=(6, 4))
    bottom = pd.Series(0, index=per_level.index)
    for col, color in OUTCOME_COLORS.items():
        ax.bar(labels, per_level[col], bottom=bottom, label=col, color=color)
        bottom = bottom + per_level[col]

    for x, (games, rate) in enumerate(zip(per_level["games"], per_level["win_rate"])):
        if games:
            ax.annotate(f"{rate}%", (x, games), ha="center", va="bottom", fontsize=9)

    ax.set_title("Record by difficulty")
    ax.set_ylabel("games")
    ax.legend()

    return _finish(fig, outdir, "record_by_difficulty.png", show=show)


def plot_win_rate_trend(trend: pd.DataFrame, outdir: Path, window: int, *, show: bool) -> Path | None:
    if trend.empty:
        return None

    fig, ax = plt.subplots(figsize=(8, 4))
    ax.plot(trend["game"], trend["win_rate"], color="tab:blue")
    ax.set_ylim(0, 100)
    ax.set_title(f"Win rate, last {window} games")
    ax.set_xlabel("game")
    ax.set_ylabel("win rate (%)")

    return _finish(fig, outdir, f"win_rate_trend_{window}.png", show=show)
