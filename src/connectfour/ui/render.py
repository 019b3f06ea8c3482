from __future__ import annotations
from typing import Iterable, Optional, Set

from connectfour.config import CLEAR_SCREEN
from connectfour.core.board import Board
from connectfour.types import Cell, Coord, Player
from connectfour.ui.colors import c, BOLD, DIM, FG_CYAN, FG_GRAY, FG_RED, FG_YELLOW, REVERSE


def _piece(cell: Cell) -> str:
    if cell is None:
        return c("·", FG_GRAY)
    if cell == Player.ONE:
        return c("●", FG_RED)
    return c("●", FG_YELLOW)


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def board_lines(board: Board, highlight: Optional[Iterable[Coord]] = None) -> list[str]:
    hl: Set[Coord] = set(highlight) if highlight else set()

    lines = [c("   " + " ".join(str(i + 1) for i in range(board.cols)), DIM)]
    for r in range(board.rows):
        parts = []
        for col in range(board.cols):
            p = _piece(board.grid[r][col])
            if (r, col) in hl:
                p = c(p, REVERSE)
            parts.append(p)
        lines.append(" | " + " ".join(parts) + " |")
    lines.append(c("   " + "—" * (2 * board.cols - 1), DIM))
    return lines


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    print(c("CONNECT 4", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    for line in board_lines(board, highlight):
        print(line)

    print(c(f"   {c('●', FG_RED)} You   {c('●', FG_YELLOW)} AI", DIM))
    print(c(f"   Enter 1-{board.cols} to drop. Enter q to quit.", DIM))
