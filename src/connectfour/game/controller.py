from __future__ import annotations

import time

from connectfour.ai.base import Agent
from connectfour.config import AI_THINK_DELAY_SEC, HUMAN
from connectfour.game.results import draw, outcome_for, winner_with_line
from connectfour.game.state import GameState
from connectfour.types import Move, Player
from connectfour.ui.effects import pad_thinking
from connectfour.ui.prompts import parse_move
from connectfour.ui.render import render


def _who(player: Player) -> str:
    return "You" if player == HUMAN else "AI"


def apply_turn(state: GameState, move: Move) -> GameState:
    """
    Drop a disc for the side to move, then settle the game if it ended.
    Raises InvalidMoveError (a ValueError) and leaves the state untouched
    when the column cannot take a disc.
    """
    board = state.board.drop(move, state.current)
    state.board = board

    w = winner_with_line(board)
    if w is not None:
        player, line = w
        state.winning_line = line
        state.outcome = outcome_for(player)
        state.last_status = "You win!" if state.outcome == "win" else "AI wins. Better luck next time!"
        return state

    if draw(board):
        state.outcome = "draw"
        state.last_status = "It's a draw!"
        return state

    state.current = state.current.other
    return state


def _status_line(state: GameState, computer: Agent) -> str:
    header = f"You vs {computer.name} | Turn: {_who(state.current)}"
    if state.last_status:
        return f"{header}\n{state.last_status}"
    return header


def _ai_status(computer: Agent, move: Move) -> str:
    info = getattr(computer, "last_info", None)
    if not (info and info.get("nodes")):
        return f"{computer.name} chose {int(move) + 1}"

    status = (
        f"{computer.name} chose {info.get('move_col')} | "
        f"d={info.get('depth')} | "
        f"nodes={info.get('nodes')} | "
        f"cut={info.get('cutoffs')} | "
    )
    if info.get("eval") is not None:
        status += f"eval={info['eval']:+.0f} | "
    return status + f"{info.get('time_ms')}ms"


def run_game(computer: Agent, show_thinking: bool = True) -> GameState:
    """
    Play one interactive game. The human always moves first.
    Returns the final state; outcome is None if the human quit.
    """
    state = GameState(difficulty=getattr(computer, "difficulty", None))
    delay = AI_THINK_DELAY_SEC.get(getattr(state.difficulty, "value", ""), 0.4)

    while state.outcome is None:
        render(state.board, _status_line(state, computer))

        try:
            if state.current == HUMAN:
                raw = input("Your move: ")
                move = parse_move(raw, state.board.cols)
                if move is None:
                    state.last_status = "Game quit."
                    render(state.board, _status_line(state, computer))
                    return state
                state.last_status = f"You chose {int(move) + 1}"
            else:
                t0 = time.perf_counter()
                move = computer.choose_move(state)
                if show_thinking:
                    pad_thinking(f"{computer.name} is thinking", delay, time.perf_counter() - t0)
                state.last_status = _ai_status(computer, move)

            apply_turn(state, move)

        except ValueError as e:
            state.last_status = str(e)

    render(state.board, _status_line(state, computer), highlight=state.winning_line)
    return state
