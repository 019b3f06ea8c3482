# src/connectfour/core/board.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from connectfour.config import ROWS, COLS
from connectfour.errors import InvalidMoveError
from connectfour.types import Cell, Player, Move

Grid = Tuple[Tuple[Cell, ...], ...]

_SYMBOLS = {".": None, "1": Player.ONE, "X": Player.ONE, "2": Player.TWO, "O": Player.TWO}


@dataclass(frozen=True, slots=True)
class Board:
    """
    Immutable Connect Four grid. Row 0 is the top row.

    Every move returns a new Board, so search branches never share a grid.
    """
    rows: int = ROWS
    cols: int = COLS
    grid: Grid = ()

    def __post_init__(self) -> None:
        if not self.grid:
            empty: Grid = tuple(tuple(None for _ in range(self.cols)) for _ in range(self.rows))
            object.__setattr__(self, "grid", empty)
        elif len(self.grid) != self.rows or any(len(row) != self.cols for row in self.grid):
            raise ValueError(f"Grid must be {self.rows}x{self.cols}.")

    @classmethod
    def from_rows(cls, lines: Iterable[str]) -> "Board":
        """
        Build a board from text rows, top row first.
        '.' is empty, '1'/'X' is Player.ONE, '2'/'O' is Player.TWO.
        """
        rows = [line.replace(" ", "") for line in lines]
        if not rows:
            raise ValueError("Board needs at least one row.")
        try:
            grid = tuple(tuple(_SYMBOLS[ch.upper()] for ch in line) for line in rows)
        except KeyError as e:
            raise ValueError(f"Unknown cell symbol: {e.args[0]!r}") from None

        board = cls(rows=len(grid), cols=len(grid[0]), grid=grid)
        for c in range(board.cols):
            for r in range(board.rows - 1):
                if grid[r][c] is not None and grid[r + 1][c] is None:
                    raise ValueError(f"Floating disc at row {r}, column {c}.")
        return board

    def cell(self, r: int, c: int) -> Cell:
        return self.grid[r][c]

    def valid_moves(self) -> List[Move]:
        return [Move(c) for c in range(self.cols) if self.grid[0][c] is None]

    def is_full(self) -> bool:
        return all(self.grid[0][c] is not None for c in range(self.cols))

    def disc_count(self) -> int:
        return sum(1 for row in self.grid for p in row if p is not None)

    def drop_row(self, col: int) -> Optional[int]:
        if col < 0 or col >= self.cols:
            return None
        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][col] is None:
                return r
        return None

    def drop(self, col: Move, player: Player) -> "Board":
        c = int(col)
        if c < 0 or c >= self.cols:
            raise InvalidMoveError(c, "Column out of range.")
        r = self.drop_row(c)
        if r is None:
            raise InvalidMoveError(c, "Column is full.")

        row = list(self.grid[r])
        row[c] = player
        grid = self.grid[:r] + (tuple(row),) + self.grid[r + 1:]
        return Board(self.rows, self.cols, grid)

    def __str__(self) -> str:
        marks = {None: ".", Player.ONE: "1", Player.TWO: "2"}
        return "\n".join("".join(marks[p] for p in row) for row in self.grid)
