from __future__ import annotations

from typing import Callable, List

import pytest

from fourinarow.core.board import Board

# Full board, no four in a row anywhere.
DRAW_ROWS = [
    "XXOOXXO",
    "OOXXOOX",
    "XXOOXXO",
    "OOXXOOX",
    "XXOOXXO",
    "OOXXOOX",
]


def _board_from_rows(rows: List[str]) -> Board:
    """Rows top to bottom; '.' is empty."""
    grid = [[None if ch == "." else ch for ch in row] for row in rows]
    return Board(rows=len(rows), cols=len(rows[0]), grid=grid)


@pytest.fixture
def make_board() -> Callable[[List[str]], Board]:
    return _board_from_rows


@pytest.fixture
def draw_board() -> Board:
    return _board_from_rows(DRAW_ROWS)


class ScriptedPlayer:
    """Plays a fixed list of columns and counts how often it was asked."""

    def __init__(self, name: str, marker: str, columns: List[int]) -> None:
        self.name = name
        self.marker = marker
        self._columns = list(columns)
        self.calls = 0

    def choose_column(self, board: Board) -> int:
        self.calls += 1
        if not self._columns:
            raise AssertionError(f"{self.name} was asked for more moves than scripted")
        return self._columns.pop(0)


@pytest.fixture
def scripted() -> Callable[..., ScriptedPlayer]:
    return ScriptedPlayer
