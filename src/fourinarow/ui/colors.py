from __future__ import annotations
from fourinarow import config

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"

FG_RED = "\033[31m"
FG_YELLOW = "\033[33m"
FG_CYAN = "\033[36m"
FG_GRAY = "\033[90m"

MARKER_COLORS = {"X": FG_RED, "O": FG_YELLOW}


def c(s: str, code: str) -> str:
    # Read at call time so --no-color can switch it off.
    if not config.USE_COLOR:
        return s
    return f"{code}{s}{RESET}"
