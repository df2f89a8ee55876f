from __future__ import annotations

import logging
import random
from typing import Callable, Iterable, Optional, Tuple

from fourinarow.ai.base import Player
from fourinarow.core.board import Board
from fourinarow.core.rules import has_four_in_a_row, winning_line
from fourinarow.errors import MoveError, QuitGame
from fourinarow.game.actions import apply_move
from fourinarow.game.results import GameResult
from fourinarow.game.state import GameSession
from fourinarow.types import Mode, Phase

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]
Renderer = Callable[[Board, str, Optional[Iterable[Coord]]], None]
Notify = Callable[[str], None]


def new_session(
    player_a: Player,
    player_b: Player,
    mode: Mode,
    rng: random.Random,
    board: Optional[Board] = None,
) -> GameSession:
    """
    Two humans: player A always opens.
    Against the computer: the opener is drawn at random.
    """
    if player_a.marker == player_b.marker:
        raise ValueError("Players need distinct markers.")

    first = rng.choice([player_a, player_b]) if mode == "vs_computer" else player_a
    session = GameSession(
        player_a=player_a,
        player_b=player_b,
        active=first,
        mode=mode,
        board=board if board is not None else Board(),
        last_status=f"{first.name} ({first.marker}) starts.",
    )
    logger.info("New %s game: %s vs %s, %s first", mode, player_a.name, player_b.name, first.name)
    return session


def _status_with_players(session: GameSession, status: str) -> str:
    a, b = session.player_a, session.player_b
    header = f"{a.marker}: {a.name} | {b.marker}: {b.name} | Turn: {session.active.name}"
    if status:
        return f"{header}\n{status}"
    return header


def _settle(session: GameSession) -> bool:
    """Move to a terminal phase if the board already decides the game."""
    for p in (session.player_a, session.player_b):
        if has_four_in_a_row(session.board, p.marker):
            session.phase = "won"
            session.winner = p
            session.last_status = f"{p.name} wins!"
            return True
    if session.board.is_full():
        session.phase = "draw"
        session.last_status = "It's a draw!"
        return True
    return False


def play_turn(session: GameSession, notify: Optional[Notify] = None) -> Phase:
    """
    Run one turn: ask the active player for a column until one is placed,
    then settle win / draw or hand the turn over.
    """
    if session.is_over:
        return session.phase

    if session.phase == "idle":
        session.phase = "awaiting_move"
        if _settle(session):
            return session.phase

    player = session.active
    board = session.board

    while True:
        move = player.choose_column(board)
        try:
            apply_move(board, move, player.marker)
            break
        except MoveError as e:
            logger.info("%s rejected column %s: %s", player.name, int(move) + 1, e)
            if notify is not None:
                notify(str(e))

    session.moves += 1
    info = getattr(player, "last_info", None)
    if info and "move_col" in info:
        session.last_status = f"{player.name} chose column {info['move_col']}"
    else:
        session.last_status = f"{player.name} chose column {int(move) + 1}"

    if has_four_in_a_row(board, player.marker):
        session.phase = "won"
        session.winner = player
        session.last_status = f"{player.name} wins!"
    elif board.is_full():
        session.phase = "draw"
        session.last_status = "It's a draw!"
    else:
        session.switch_player()

    return session.phase


def run_game(
    session: GameSession,
    renderer: Optional[Renderer] = None,
    notify: Optional[Notify] = None,
) -> GameResult:
    first = session.active
    search_ms = {"X": 0, "O": 0}

    def show(highlight: Optional[Iterable[Coord]] = None) -> None:
        if renderer is not None:
            renderer(session.board, _status_with_players(session, session.last_status), highlight)

    show()
    while not session.is_over:
        mover = session.active
        try:
            play_turn(session, notify)
        except QuitGame:
            session.abandoned = True
            session.last_status = f"{mover.name} quit the game."
            break

        info = getattr(mover, "last_info", None)
        if info and "time_ms" in info:
            search_ms[mover.marker] += int(info["time_ms"])

        if not session.is_over:
            show()

    line = None
    if session.winner is not None:
        line = winning_line(session.board, session.winner.marker)
    show(line)

    if session.abandoned:
        logger.info("Game abandoned after %d moves", session.moves)
    elif session.winner is not None:
        logger.info("%s wins after %d moves", session.winner.name, session.moves)
    else:
        logger.info("Draw after %d moves", session.moves)

    by_marker = {p.marker: p for p in (session.player_a, session.player_b)}
    return GameResult(
        winner=session.winner.marker if session.winner else None,
        winner_name=session.winner.name if session.winner else None,
        x_name=by_marker["X"].name,
        o_name=by_marker["O"].name,
        first=first.marker,
        moves=session.moves,
        line=line,
        abandoned=session.abandoned,
        x_search_ms=search_ms["X"],
        o_search_ms=search_ms["O"],
    )
