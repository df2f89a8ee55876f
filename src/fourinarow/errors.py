# src/fourinarow/errors.py

from __future__ import annotations


class MoveError(ValueError):
    """A column that cannot take a disc right now."""

    def __init__(self, message: str, column: int | None = None) -> None:
        super().__init__(message)
        self.column = column


class InvalidColumn(MoveError):
    pass


class ColumnFull(MoveError):
    pass


class QuitGame(Exception):
    """Raised from a prompt when the human asks to leave the game."""
