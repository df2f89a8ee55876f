from __future__ import annotations
from typing import Protocol

from fourinarow.core.board import Board
from fourinarow.types import Marker, Move


class Player(Protocol):
    """Anything that can pick a column for its marker on the current board."""

    name: str
    marker: Marker

    def choose_column(self, board: Board) -> Move:
        ...
