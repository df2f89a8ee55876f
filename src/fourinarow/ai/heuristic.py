from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from fourinarow.core.board import Board
from fourinarow.core.rules import has_four_in_a_row
from fourinarow.errors import MoveError
from fourinarow.game.actions import available_columns, simulated_move
from fourinarow.types import Marker, Move, other

logger = logging.getLogger(__name__)


def winning_column(board: Board, marker: Marker) -> Optional[Move]:
    """Lowest column where dropping ``marker`` completes four in a row."""
    for c in available_columns(board):
        with simulated_move(board, c, marker):
            if has_four_in_a_row(board, marker):
                return c
    return None


@dataclass(slots=True)
class HeuristicPlayer:
    """
    Older one-ply strategy, kept as an opponent for self-play:
      1) Play an immediate winning move if available
      2) Block the opponent's immediate winning move
      3) Take the center column
      4) Otherwise a random legal column
    """
    name: str = "Heuristic"
    marker: Marker = "O"
    rng: random.Random = field(default_factory=random.Random)
    last_info: dict = field(default_factory=dict)

    def choose_column(self, board: Board) -> Move:
        moves = available_columns(board)
        if not moves:
            raise MoveError("No available columns.")

        m = winning_column(board, self.marker)
        reason = "win"
        if m is None:
            m = winning_column(board, other(self.marker))
            reason = "block"
        if m is None:
            center = Move(board.cols // 2)
            if center in moves:
                m, reason = center, "center"
            else:
                m, reason = self.rng.choice(moves), "random"

        self.last_info = {"move_col": int(m) + 1, "reason": reason}
        logger.debug("%s plays column %d (%s)", self.name, m + 1, reason)
        return m
