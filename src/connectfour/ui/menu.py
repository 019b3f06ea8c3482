from __future__ import annotations

from pathlib import Path
from typing import Optional

from connectfour.ai.pick import DESCRIPTIONS, ComputerAgent, Difficulty, parse_difficulty
from connectfour.game.controller import run_game
from connectfour.game.history import append_record, record_for
from connectfour.game.results import SessionScore
from connectfour.ui.colors import c, BOLD, FG_GREEN
from connectfour.ui.prompts import parse_yes_no


def ask_difficulty(default: Difficulty = Difficulty.MEDIUM) -> Difficulty:
    print(c("Select difficulty:", BOLD))
    for i, d in enumerate(Difficulty, start=1):
        print(f"{i}) {d.label:<7} {DESCRIPTIONS[d]}")

    while True:
        raw = input(f"Choice (default {default.label}): ").strip()
        if not raw:
            return default
        try:
            return parse_difficulty(raw)
        except ValueError as e:
            print(e)


def run_menu(
    difficulty: Optional[Difficulty] = None,
    show_thinking: bool = True,
    history: Optional[Path] = None,
) -> SessionScore:
    """
    Play games until the human stops. With `history`, every finished game
    is appended to that CSV for `connectfour-profile`.
    """
    score = SessionScore()
    chosen = difficulty or ask_difficulty()

    while True:
        state = run_game(ComputerAgent(chosen), show_thinking=show_thinking)
        if state.outcome is None:
            break

        score.record(state.outcome)
        if history is not None:
            append_record(history, record_for(state))
        print(c(f"Session: {score}", FG_GREEN))

        if not parse_yes_no(input("Play again? [Y/n] ")):
            break
        if not parse_yes_no(input(f"Keep {chosen.label}? [Y/n] ")):
            chosen = ask_difficulty(chosen)

    return score
