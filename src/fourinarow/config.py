# src/fourinarow/config.py

from __future__ import annotations

ROWS = 6
COLS = 7
CONNECT_N = 4

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# Search
SEARCH_DEPTH = 3  # plies, root move included
WIN_SCORE = 1000

# Logging (stderr); user-facing output stays on stdout
LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
