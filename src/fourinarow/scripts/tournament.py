from __future__ import annotations

import logging
import random
from typing import Callable, List

from fourinarow.ai.base import Player
from fourinarow.game.controller import new_session, run_game
from fourinarow.game.results import GameResult
from fourinarow.types import Marker

logger = logging.getLogger(__name__)

# (marker, rng) -> player
PlayerFactory = Callable[[Marker, random.Random], Player]


def play_single_game(player_x: Player, player_o: Player, rng: random.Random) -> GameResult:
    # Headless; the opener is drawn at random as in the one-computer mode.
    session = new_session(player_x, player_o, "vs_computer", rng)
    return run_game(session)


def play_match(make_x: PlayerFactory, make_o: PlayerFactory, games: int = 10, seed: int | None = None) -> List[GameResult]:
    rng = random.Random(seed)
    results: List[GameResult] = []

    for i in range(games):
        result = play_single_game(make_x("X", rng), make_o("O", rng), rng)
        results.append(result)
        logger.info("Game %d/%d: %s", i + 1, games, result.winner or "draw")

    return results


def tally(results: List[GameResult]) -> dict:
    wins = {"X": 0, "O": 0, "draw": 0}
    for r in results:
        wins[r.winner or "draw"] += 1
    return wins


def main(games: int = 5) -> None:
    from fourinarow.ai.heuristic import HeuristicPlayer
    from fourinarow.ai.minimax import ComputerPlayer

    results = play_match(
        lambda m, rng: ComputerPlayer(name="Minimax", marker=m, rng=rng),
        lambda m, rng: HeuristicPlayer(name="Heuristic", marker=m, rng=rng),
        games=games,
    )
    wins = tally(results)

    print("\n=== MATCH RESULTS ===")
    print(f"X wins:    {wins['X']}")
    print(f"O wins:    {wins['O']}")
    print(f"Draws:     {wins['draw']}")


if __name__ == "__main__":
    main(5)
