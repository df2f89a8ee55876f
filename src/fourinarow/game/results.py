from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, List, Tuple

from fourinarow.types import Marker

Coord = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class GameResult:
    winner: Optional[Marker]
    winner_name: Optional[str]
    x_name: str
    o_name: str
    first: Marker
    moves: int
    line: Optional[List[Coord]] = None
    abandoned: bool = False
    x_search_ms: int = 0
    o_search_ms: int = 0

    @property
    def is_draw(self) -> bool:
        return self.winner is None and not self.abandoned

    def as_record(self) -> dict:
        """Flat row for tabulating many games."""
        return {
            "x": self.x_name,
            "o": self.o_name,
            "first": self.first,
            "winner": self.winner or ("abandoned" if self.abandoned else "draw"),
            "winner_name": self.winner_name,
            "moves": self.moves,
            "x_search_ms": self.x_search_ms,
            "o_search_ms": self.o_search_ms,
        }
