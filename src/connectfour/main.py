from __future__ import annotations

import argparse
from pathlib import Path

from connectfour.ai.pick import parse_difficulty
from connectfour.ui.menu import run_menu


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play Connect 4 against the computer.")
    ap.add_argument("--difficulty", "-d", type=parse_difficulty, default=None, help="easy, medium or hard (skips the menu)")
    ap.add_argument("--no-thinking", action="store_true", help="Skip the AI thinking pause")
    ap.add_argument("--history", type=Path, default=None, help="Append finished games to this CSV (off by default)")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    try:
        score = run_menu(args.difficulty, show_thinking=not args.no_thinking, history=args.history)
    except (KeyboardInterrupt, EOFError):
        print("\nBye.")
        return 0

    print(f"\nFinal session: {score}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
