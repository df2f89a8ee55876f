# src/fourinarow/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from fourinarow.config import ROWS, COLS
from fourinarow.errors import ColumnFull, InvalidColumn
from fourinarow.types import Cell, Marker, Move


@dataclass(slots=True)
class Board:
    """
    Row-major grid. Row 0 is the visual top, row ``rows - 1`` the bottom,
    so a dropped disc settles at the highest free row index.
    """
    rows: int = ROWS
    cols: int = COLS
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[None for _ in range(self.cols)] for _ in range(self.rows)]
        elif len(self.grid) != self.rows or any(len(row) != self.cols for row in self.grid):
            raise ValueError(f"Grid must be {self.rows}x{self.cols}.")
        else:
            # Own the cells; never alias a caller's lists.
            self.grid = [row[:] for row in self.grid]

    def copy(self) -> "Board":
        return Board(self.rows, self.cols, [row[:] for row in self.grid])

    def cell_at(self, row: int, col: int) -> Cell:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"Cell ({row}, {col}) is off the board.")
        return self.grid[row][col]

    def in_range(self, col: int) -> bool:
        return 0 <= col < self.cols

    def is_column_full(self, col: int) -> bool:
        if not self.in_range(col):
            raise InvalidColumn(f"Column must be between 1 and {self.cols}.", col)
        return self.grid[0][col] is not None

    def valid_moves(self) -> List[Move]:
        return [Move(c) for c in range(self.cols) if self.grid[0][c] is None]

    def is_full(self) -> bool:
        return all(cell is not None for row in self.grid for cell in row)

    def is_empty(self) -> bool:
        return all(cell is None for row in self.grid for cell in row)

    def height(self, col: int) -> int:
        """Number of discs stacked in ``col``."""
        return sum(1 for r in range(self.rows) if self.grid[r][col] is not None)

    def drop_disc(self, col: int, marker: Marker) -> int:
        c = int(col)
        if not self.in_range(c):
            raise InvalidColumn(f"Column must be between 1 and {self.cols}.", c)

        for r in range(self.rows - 1, -1, -1):
            if self.grid[r][c] is None:
                self.grid[r][c] = marker
                return r

        raise ColumnFull(f"Column {c + 1} is full.", c)

    def remove_top_disc(self, col: int) -> None:
        """
        Remove the top-most piece from a column.
        Only valid straight after a matching drop_disc (search apply/undo).
        """
        c = int(col)
        for r in range(self.rows):
            if self.grid[r][c] is not None:
                self.grid[r][c] = None
                return
        raise ValueError(f"Cannot undo: column {c + 1} is empty.")
