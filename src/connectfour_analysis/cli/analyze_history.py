from __future__ import annotations

import argparse
from pathlib import Path

from connectfour.ai.pick import parse_difficulty

from ..io.load_history import load_history
from ..metrics.profile import filter_difficulty, profile_table, rolling_win_rate, streaks
from ..plots.chart import plot_record_by_difficulty, plot_win_rate_trend


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Win / loss profile from a Connect 4 game history CSV.")
    ap.add_argument("--history", type=str, default="data/history.csv", help="CSV written by `connectfour --history`")
    ap.add_argument("--difficulty", type=parse_difficulty, nargs="+", default=None, help="Only these tiers (default: all)")
    ap.add_argument("--window", type=int, default=10, help="Games per rolling win-rate window")

    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    ap.add_argument("--no-plots", action="store_true", help="Print tables only")
    return ap


def win_rate_bar(pct: int, width: int = 20) -> str:
    filled = round(width * pct / 100)
    return "[" + "#" * filled + "." * (width - filled) + "]"


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    path = Path(args.history)
    df = filter_difficulty(load_history(path), args.difficulty)

    print(f"\nLoaded: {path}")
    print(f"Games: {len(df):,}")

    table = profile_table(df)
    overall = table.iloc[-1]

    print("\n=== Profile ===")
    print(table.to_string(index=False))

    print(f"\nWin rate: {overall['win_rate']}% {win_rate_bar(int(overall['win_rate']))}")
    st = streaks(df)
    if st["current_outcome"] is not None:
        print(f"Current streak: {st['current_length']} x {st['current_outcome']} | Longest win streak: {st['longest_win']}")

    if args.no_plots:
        return 0

    outdir = Path(args.outdir)
    plot_record_by_difficulty(table, outdir, show=args.show)
    plot_win_rate_trend(rolling_win_rate(df, args.window), outdir, args.window, show=args.show)

    if not args.show:
        print(f"\nSaved figures to: {outdir.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
