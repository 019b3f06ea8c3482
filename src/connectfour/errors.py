# src/connectfour/errors.py

from __future__ import annotations


class InvalidMoveError(ValueError):
    """Column is out of range or already full."""

    def __init__(self, column: int, reason: str) -> None:
        super().__init__(reason)
        self.column = column


class NoMoveAvailableError(ValueError):
    """A strategy was asked to move on a full board."""

    def __init__(self) -> None:
        super().__init__("No valid moves.")
