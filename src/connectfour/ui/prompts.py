from __future__ import annotations
from typing import Optional

from connectfour.types import Move

QUIT_WORDS = frozenset({"q", "quit", "exit"})
YES_WORDS = frozenset({"y", "yes"})
NO_WORDS = frozenset({"n", "no"})


def parse_move(raw: str, cols: int) -> Optional[Move]:
    """1-based column text to a Move; None means the player quit."""
    text = raw.strip().lower()
    if text in QUIT_WORDS:
        return None
    try:
        number = int(text)
    except ValueError:
        raise ValueError("Invalid input. Enter a column number or q.") from None
    if not 1 <= number <= cols:
        raise ValueError(f"Column must be between 1 and {cols}.")
    return Move(number - 1)


def parse_yes_no(raw: str, default: bool = True) -> bool:
    text = raw.strip().lower()
    if text in YES_WORDS:
        return True
    if text in NO_WORDS:
        return False
    return default
