# src/fourinarow/types.py

from __future__ import annotations
from typing import Literal, Optional, NewType

Marker = Literal["X", "O"]
Cell = Optional[Marker]
Move = NewType("Move", int)   # column index 0..6

Mode = Literal["two_player", "vs_computer"]
Phase = Literal["idle", "awaiting_move", "won", "draw"]


def other(marker: Marker) -> Marker:
    return "O" if marker == "X" else "X"
