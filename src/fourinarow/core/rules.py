from __future__ import annotations
from typing import Iterator, Optional, List, Tuple

from fourinarow.config import CONNECT_N
from fourinarow.core.board import Board
from fourinarow.types import Marker

Coord = Tuple[int, int]  # (row, col)

# (d_row, d_col) per orientation; row 0 is the top
DIRECTIONS: Tuple[Coord, ...] = (
    (0, 1),    # horizontal
    (1, 0),    # vertical
    (-1, 1),   # diagonal up-right (bottom-left to top-right)
    (1, 1),    # diagonal down-right (top-left to bottom-right)
)


def windows(board: Board, n: int = CONNECT_N) -> Iterator[List[Coord]]:
    """Every length-n line of cells on the board, all four orientations."""
    for dr, dc in DIRECTIONS:
        for r in range(board.rows):
            for c in range(board.cols):
                end_r = r + dr * (n - 1)
                end_c = c + dc * (n - 1)
                if 0 <= end_r < board.rows and 0 <= end_c < board.cols:
                    yield [(r + dr * i, c + dc * i) for i in range(n)]


def winning_line(board: Board, marker: Marker) -> Optional[List[Coord]]:
    g = board.grid
    for line in windows(board):
        if all(g[r][c] == marker for r, c in line):
            return line
    return None


def has_four_in_a_row(board: Board, marker: Marker) -> bool:
    return winning_line(board, marker) is not None


def is_draw(board: Board) -> bool:
    return (
        board.is_full()
        and not has_four_in_a_row(board, "X")
        and not has_four_in_a_row(board, "O")
    )
