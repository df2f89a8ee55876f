from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Dict, Optional

from fourinarow.config import SEARCH_DEPTH, WIN_SCORE
from fourinarow.core.board import Board
from fourinarow.core.rules import has_four_in_a_row
from fourinarow.errors import MoveError
from fourinarow.game.actions import available_columns, simulated_move
from fourinarow.types import Marker, Move, other

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SearchResult:
    column: Move
    score: int
    scores: Dict[int, int]
    nodes: int
    depth: int
    time_ms: int


@dataclass(slots=True)
class _Tally:
    nodes: int = 0


def terminal_score(board: Board, own: Marker) -> Optional[int]:
    """+WIN_SCORE / -WIN_SCORE for a decided position, None otherwise."""
    if has_four_in_a_row(board, other(own)):
        return -WIN_SCORE
    if has_four_in_a_row(board, own):
        return WIN_SCORE
    return None


def minimax(
    board: Board,
    depth: int,
    maximizing: bool,
    to_play: Marker,
    own: Marker,
    tally: Optional[_Tally] = None,
) -> int:
    """
    Plain fixed-depth minimax scored from ``own``'s side.
    Leaves (depth exhausted, full board, or a four-in-a-row) are scored statically.
    """
    if tally is not None:
        tally.nodes += 1

    term = terminal_score(board, own)
    if term is not None:
        return term
    if depth <= 0 or board.is_full():
        return 0

    best: Optional[int] = None
    for m in available_columns(board):
        with simulated_move(board, m, to_play):
            score = minimax(board, depth - 1, not maximizing, other(to_play), own, tally)

        if best is None:
            best = score
        elif maximizing:
            best = max(best, score)
        else:
            best = min(best, score)

    return 0 if best is None else best


def search(board: Board, own: Marker, depth: int, rng: random.Random) -> SearchResult:
    if depth < 1:
        raise ValueError("Search depth must be at least 1.")

    moves = available_columns(board)
    if not moves:
        raise MoveError("No available columns.")

    start = time.perf_counter()
    tally = _Tally()
    scores: Dict[int, int] = {}

    for m in moves:
        with simulated_move(board, m, own):
            scores[int(m)] = minimax(board, depth - 1, False, other(own), own, tally)

    best_score = max(scores.values())
    candidates = [c for c, s in scores.items() if s == best_score]
    column = Move(rng.choice(candidates))

    elapsed_ms = max(1, int((time.perf_counter() - start) * 1000))
    logger.debug(
        "%s search d=%d nodes=%d scores=%s -> column %d",
        own, depth, tally.nodes, scores, column + 1,
    )
    return SearchResult(
        column=column,
        score=best_score,
        scores=scores,
        nodes=tally.nodes,
        depth=depth,
        time_ms=elapsed_ms,
    )


def choose_column(board: Board, own: Marker, depth: int, rng: random.Random) -> Move:
    return search(board, own, depth, rng).column


@dataclass(slots=True)
class ComputerPlayer:
    name: str = "Computer"
    marker: Marker = "O"
    depth: int = SEARCH_DEPTH
    rng: random.Random = field(default_factory=random.Random)

    # Stats of the most recent search
    last_info: dict = field(default_factory=dict)

    def choose_column(self, board: Board) -> Move:
        result = search(board, self.marker, self.depth, self.rng)
        self.last_info = {
            "move_col": int(result.column) + 1,
            "depth": result.depth,
            "nodes": result.nodes,
            "eval": result.score,
            "scores": result.scores,
            "time_ms": result.time_ms,
        }
        return result.column
