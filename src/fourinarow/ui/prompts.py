from __future__ import annotations
from typing import Callable, Optional

from fourinarow.errors import InvalidColumn, QuitGame
from fourinarow.types import Mode, Move

Ask = Callable[[str], str]

QUIT_WORDS = {"q", "quit", "exit"}


def parse_column(raw: str, cols: int) -> Move:
    """1-based text from a prompt -> 0-based column."""
    s = raw.strip().lower()
    if s in QUIT_WORDS:
        raise QuitGame()
    try:
        col = int(s) - 1
    except ValueError:
        raise InvalidColumn(f"Invalid input. Please enter a number between 1 and {cols}.") from None
    if col < 0 or col >= cols:
        raise InvalidColumn(f"Invalid input. Please enter a number between 1 and {cols}.", col)
    return Move(col)


def parse_mode(raw: str) -> Optional[Mode]:
    s = raw.strip()
    if s == "1":
        return "two_player"
    if s == "2":
        return "vs_computer"
    return None


def ask_mode(ask: Ask = input) -> Mode:
    print("Select game mode:")
    print("1) Two players")
    print("2) One player against the computer")
    while True:
        mode = parse_mode(ask("Enter your choice (1 or 2): "))
        if mode is not None:
            return mode


def ask_play_again(ask: Ask = input) -> bool:
    return ask("Play again? (y/n): ").strip().lower() in {"y", "yes"}
