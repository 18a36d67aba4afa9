# src/connect4_tui/config.py

from __future__ import annotations

ROWS = 6
COLS = 7

# Turn order
FIRST_PLAYER = "red"

# Canvas geometry (canvas units, not terminal cells)
CELL_SIZE = 40.0
CELL_PITCH = 50.0

# UI
BOARD_TITLE = "4 in a row"
PLAYER_COLORS = {"red": "red", "blue": "blue"}
PLAYER_TITLES = {"red": "Red player", "blue": "Blue player"}
NEUTRAL_COLOR = "white"
BOARD_RATIO = 19     # ~95% of the screen height
CONTROLS_RATIO = 1   # ~5%, split between the two player panels
CONTROLS_MIN_HEIGHT = 3

# Input loop
QUIT_KEY = "q"
TICK_RATE_SEC = 0.016

# Logging (the live display owns the screen, so logs only go to a file)
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
