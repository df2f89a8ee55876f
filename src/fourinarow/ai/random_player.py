from __future__ import annotations
import random
from dataclasses import dataclass, field

from fourinarow.core.board import Board
from fourinarow.errors import MoveError
from fourinarow.types import Marker, Move


@dataclass(slots=True)
class RandomPlayer:
    name: str = "Random"
    marker: Marker = "O"
    rng: random.Random = field(default_factory=random.Random)

    def choose_column(self, board: Board) -> Move:
        moves = board.valid_moves()
        if not moves:
            raise MoveError("No available columns.")
        return self.rng.choice(moves)
