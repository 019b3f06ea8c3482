from __future__ import annotations

from math import inf
import random
from typing import Optional, Tuple

from connectfour.ai.base import SearchStats
from connectfour.config import COMPUTER, SEARCH_DEPTH, WIN_SCORE
from connectfour.core.board import Board
from connectfour.core.rules import has_won
from connectfour.core.scoring import evaluate
from connectfour.errors import NoMoveAvailableError
from connectfour.types import Move, Player


def _terminal_score(board: Board, me: Player) -> Optional[float]:
    if has_won(board, me):
        return float(WIN_SCORE)
    if has_won(board, me.other):
        return float(-WIN_SCORE)
    if board.is_full():
        return 0.0
    return None


def minimax(
    board: Board,
    depth: int,
    alpha: float,
    beta: float,
    maximizing: bool,
    me: Player = COMPUTER,
    rng: Optional[random.Random] = None,
    stats: Optional[SearchStats] = None,
) -> Tuple[Optional[Move], float]:
    """
    Depth-limited minimax with alpha-beta pruning.

    Returns (column, score) from `me`'s perspective. Terminal and frontier
    positions return no column. Children are scanned in ascending column
    order and only a strict improvement replaces the current best, so the
    lowest column wins ties.
    """
    if stats is not None:
        stats.nodes += 1

    term = _terminal_score(board, me)
    if term is not None:
        return None, term
    if depth == 0:
        return None, float(evaluate(board, me))

    moves = board.valid_moves()
    to_play = me if maximizing else me.other

    # Fallback column, replaced by the first real score.
    best_move: Move = (rng or random).choice(moves)

    if maximizing:
        value = -inf
        for m in moves:
            _, score = minimax(board.drop(m, to_play), depth - 1, alpha, beta, False, me, rng, stats)
            if score > value:
                value = score
                best_move = m
            alpha = max(alpha, value)
            if alpha >= beta:
                if stats is not None:
                    stats.cutoffs += 1
                break
        return best_move, value

    value = inf
    for m in moves:
        _, score = minimax(board.drop(m, to_play), depth - 1, alpha, beta, True, me, rng, stats)
        if score < value:
            value = score
            best_move = m
        beta = min(beta, value)
        if alpha >= beta:
            if stats is not None:
                stats.cutoffs += 1
            break
    return best_move, value


def choose_hard(
    board: Board,
    me: Player = COMPUTER,
    depth: int = SEARCH_DEPTH,
    rng: Optional[random.Random] = None,
    stats: Optional[SearchStats] = None,
) -> Move:
    moves = board.valid_moves()
    if not moves:
        raise NoMoveAvailableError()

    # Opening shortcut: first disc (either side) goes to the center.
    center = Move(board.cols // 2)
    if board.disc_count() <= 1 and center in moves:
        return center

    if stats is not None:
        stats.max_depth = depth

    best_move, score = minimax(board, depth, -inf, inf, True, me, rng, stats)
    if stats is not None:
        stats.root_score = score
    return best_move if best_move is not None else moves[0]
