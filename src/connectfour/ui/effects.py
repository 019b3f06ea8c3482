from __future__ import annotations
import itertools
import time
from typing import Optional

from connectfour.config import AI_THINKING_SPINNER

FRAME_SEC = 0.08


def pad_thinking(
    label: str,
    delay_sec: float,
    spent_sec: float = 0.0,
    spinner: Optional[bool] = None,
) -> float:
    """
    Hold an AI move back until at least delay_sec has passed, counting the
    time its search already took. A slow Hard search adds no extra wait.
    Returns the seconds actually waited.
    """
    remaining = delay_sec - spent_sec
    if remaining <= 0:
        return 0.0

    if not (AI_THINKING_SPINNER if spinner is None else spinner):
        time.sleep(remaining)
        return remaining

    deadline = time.monotonic() + remaining
    for frame in itertools.cycle("|/-\\"):
        left = deadline - time.monotonic()
        if left <= 0:
            break
        print(f"\r{label}... {frame}", end="", flush=True)
        time.sleep(min(FRAME_SEC, left))
    print("\r" + " " * (len(label) + 6) + "\r", end="", flush=True)
    return remaining
