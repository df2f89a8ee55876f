from __future__ import annotations

import random

from fourinarow.ai.base import Player
from fourinarow.ai.minimax import ComputerPlayer
from fourinarow.config import SEARCH_DEPTH
from fourinarow.game.controller import new_session, run_game
from fourinarow.game.results import GameResult
from fourinarow.types import Mode
from fourinarow.ui.human import HumanPlayer
from fourinarow.ui.prompts import Ask, ask_mode, ask_play_again
from fourinarow.ui.render import render


def build_players(mode: Mode, rng: random.Random, depth: int = SEARCH_DEPTH, ask: Ask = input) -> tuple[Player, Player]:
    p1 = HumanPlayer(name="Player 1", marker="X", ask=ask)
    if mode == "vs_computer":
        p2: Player = ComputerPlayer(name="Computer", marker="O", depth=depth, rng=rng)
    else:
        p2 = HumanPlayer(name="Player 2", marker="O", ask=ask)
    return p1, p2


def announce(result: GameResult) -> None:
    if result.abandoned:
        print("Game quit.")
    elif result.winner_name:
        print(f"{result.winner_name} wins!")
    else:
        print("It's a draw!")


def run_menu(rng: random.Random, depth: int = SEARCH_DEPTH, ask: Ask = input) -> None:
    while True:
        mode = ask_mode(ask)
        p1, p2 = build_players(mode, rng, depth, ask)
        print(f"\nStarting game: {p1.name} vs {p2.name}\n")

        session = new_session(p1, p2, mode, rng)
        result = run_game(session, renderer=render, notify=print)
        announce(result)

        if result.abandoned or not ask_play_again(ask):
            return
        print()
