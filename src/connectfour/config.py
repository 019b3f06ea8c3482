# src/connectfour/config.py

from __future__ import annotations

from connectfour.types import Player

ROWS = 6
COLS = 7
CONNECT_N = 4

HUMAN = Player.ONE
COMPUTER = Player.TWO

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# “AI thinking” effect (seconds), keyed by difficulty name
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = {"easy": 0.4, "medium": 0.4, "hard": 0.8}

# Hard AI
SEARCH_DEPTH = 5
WIN_SCORE = 100_000_000

# Heuristic window weights (maximizing player's perspective)
WINDOW_FOUR = 100
WINDOW_THREE = 5
WINDOW_TWO = 2
WINDOW_OPP_THREE = -4
CENTER_WEIGHT = 3
