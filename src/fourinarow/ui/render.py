from __future__ import annotations
from typing import List, Optional, Iterable, Tuple, Set

from fourinarow import config
from fourinarow.core.board import Board
from fourinarow.types import Cell
from fourinarow.ui.colors import c, BOLD, DIM, FG_CYAN, FG_GRAY, MARKER_COLORS, REVERSE

Coord = Tuple[int, int]


def _piece(cell: Cell, highlighted: bool = False) -> str:
    if cell is None:
        return c("·", FG_GRAY)
    if highlighted:
        return c(cell, REVERSE + MARKER_COLORS[cell]) if config.USE_COLOR else cell.lower()
    return c(cell, MARKER_COLORS[cell])


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def board_lines(board: Board, highlight: Optional[Iterable[Coord]] = None) -> List[str]:
    """Text rows for the board; never touches the grid."""
    hl: Set[Coord] = set(highlight) if highlight else set()

    lines = [c("   " + " ".join(str(i + 1) for i in range(board.cols)), DIM)]
    for r in range(board.rows):
        parts = [_piece(board.grid[r][col], (r, col) in hl) for col in range(board.cols)]
        lines.append(" | " + " ".join(parts) + " |")
    lines.append(c("   " + "—" * (2 * board.cols - 1), DIM))
    return lines


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    print(c("FOUR IN A ROW", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    for line in board_lines(board, highlight):
        print(line)
    print(c(f"   Enter 1-{board.cols} to drop. Enter q to quit.", DIM))
