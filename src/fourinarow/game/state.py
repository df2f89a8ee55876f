from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING

from fourinarow.core.board import Board
from fourinarow.types import Mode, Phase

if TYPE_CHECKING:
    from fourinarow.ai.base import Player


@dataclass(slots=True)
class GameSession:
    player_a: "Player"
    player_b: "Player"
    active: "Player"
    mode: Mode = "two_player"
    board: Board = field(default_factory=Board)
    phase: Phase = "idle"
    winner: Optional["Player"] = None
    moves: int = 0
    last_status: str = ""
    abandoned: bool = False

    @property
    def is_over(self) -> bool:
        return self.phase in ("won", "draw") or self.abandoned

    def opponent_of(self, player: "Player") -> "Player":
        return self.player_b if player is self.player_a else self.player_a

    def switch_player(self) -> None:
        self.active = self.opponent_of(self.active)
