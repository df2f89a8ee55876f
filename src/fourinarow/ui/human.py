from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Callable

from fourinarow.core.board import Board
from fourinarow.errors import ColumnFull, MoveError
from fourinarow.game.actions import is_column_available
from fourinarow.types import Marker, Move
from fourinarow.ui.prompts import Ask, parse_column

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class HumanPlayer:
    name: str = "Player 1"
    marker: Marker = "X"
    ask: Ask = field(default=input)
    notify: Callable[[str], None] = field(default=print)

    def choose_column(self, board: Board) -> Move:
        """Re-prompt until the text names a column that can take a disc."""
        while True:
            raw = self.ask(f"{self.name} ({self.marker}), enter a column (1-{board.cols}): ")
            try:
                col = parse_column(raw, board.cols)
                if not is_column_available(board, col):
                    raise ColumnFull(f"Column {col + 1} is full. Choose a different column.", col)
            except MoveError as e:
                logger.info("%s entered %r: %s", self.name, raw, e)
                self.notify(str(e))
                continue
            return col
