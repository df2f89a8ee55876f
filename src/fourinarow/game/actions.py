from __future__ import annotations
import logging
from contextlib import contextmanager
from typing import Iterator, List

from fourinarow.core.board import Board
from fourinarow.errors import ColumnFull, InvalidColumn
from fourinarow.types import Marker, Move

logger = logging.getLogger(__name__)


def is_column_available(board: Board, col: int) -> bool:
    return board.in_range(col) and not board.is_column_full(col)


def available_columns(board: Board) -> List[Move]:
    return board.valid_moves()


def check_column(board: Board, col: int) -> None:
    """Raise the matching MoveError if ``col`` cannot take a disc."""
    if not board.in_range(col):
        raise InvalidColumn(f"Column must be between 1 and {board.cols}.", col)
    if board.is_column_full(col):
        raise ColumnFull(f"Column {col + 1} is full. Choose a different column.", col)


def apply_move(board: Board, move: Move, marker: Marker) -> int:
    check_column(board, move)
    row = board.drop_disc(move, marker)
    logger.debug("%s -> column %d (row %d)", marker, int(move) + 1, row)
    return row


def undo_move(board: Board, move: Move) -> None:
    board.remove_top_disc(move)


@contextmanager
def simulated_move(board: Board, move: Move, marker: Marker) -> Iterator[int]:
    """
    Drop ``marker`` into ``move`` for the duration of the block.
    The disc is removed on exit however the block is left.
    """
    row = board.drop_disc(move, marker)
    try:
        yield row
    finally:
        board.remove_top_disc(move)
