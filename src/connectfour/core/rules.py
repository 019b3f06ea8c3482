from __future__ import annotations
from functools import lru_cache
from typing import List, Optional, Tuple

from connectfour.config import COLS, CONNECT_N, ROWS
from connectfour.core.board import Board
from connectfour.types import Move, Player, WinLine


@lru_cache(maxsize=None)
def windows(rows: int, cols: int, n: int = CONNECT_N) -> Tuple[WinLine, ...]:
    """
    Every n-cell window on a rows x cols grid, in the fixed scan order:
    horizontal, vertical, diagonal up-right, diagonal down-right.
    Win detection and the heuristic both walk this list, so winning_line
    results are reproducible.
    """
    out: List[WinLine] = []
    span = range(n)

    # Horizontal
    for r in range(rows):
        for c in range(cols - n + 1):
            out.append(tuple((r, c + k) for k in span))

    # Vertical
    for r in range(rows - n + 1):
        for c in range(cols):
            out.append(tuple((r + k, c) for k in span))

    # Diagonal up-right (row decreases as col increases)
    for r in range(n - 1, rows):
        for c in range(cols - n + 1):
            out.append(tuple((r - k, c + k) for k in span))

    # Diagonal down-right
    for r in range(rows - n + 1):
        for c in range(cols - n + 1):
            out.append(tuple((r + k, c + k) for k in span))

    return tuple(out)


def empty_board(rows: int = ROWS, cols: int = COLS) -> Board:
    return Board(rows, cols)


def legal_moves(board: Board) -> List[Move]:
    return board.valid_moves()


def apply_move(board: Board, column: int, player: Player) -> Board:
    return board.drop(Move(column), player)


def drop_row(board: Board, column: int) -> Optional[int]:
    return board.drop_row(column)


def is_full(board: Board) -> bool:
    return board.is_full()


def winning_line(board: Board, player: Player) -> Optional[WinLine]:
    g = board.grid
    for line in windows(board.rows, board.cols):
        if all(g[r][c] == player for (r, c) in line):
            return line
    return None


def has_won(board: Board, player: Player) -> bool:
    return winning_line(board, player) is not None


def check_winner_with_line(board: Board) -> Optional[Tuple[Player, WinLine]]:
    g = board.grid
    for line in windows(board.rows, board.cols):
        (r0, c0) = line[0]
        p = g[r0][c0]
        if p is not None and all(g[r][c] == p for (r, c) in line[1:]):
            return p, line
    return None


def check_winner(board: Board) -> Optional[Player]:
    res = check_winner_with_line(board)
    return res[0] if res else None


def is_draw(board: Board) -> bool:
    return board.is_full() and check_winner(board) is None
