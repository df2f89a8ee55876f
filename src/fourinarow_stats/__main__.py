from __future__ import annotations

import argparse
import random
from functools import partial
from pathlib import Path

from fourinarow.ai.base import Player
from fourinarow.ai.heuristic import HeuristicPlayer
from fourinarow.ai.minimax import ComputerPlayer
from fourinarow.ai.random_player import RandomPlayer
from fourinarow.config import LOG_LEVEL, SEARCH_DEPTH
from fourinarow.log import configure_logging
from fourinarow.scripts.tournament import play_match
from fourinarow.types import Marker

from .metrics.summarize import SummaryConfig, first_mover_summary, games_frame, standings
from .plots import plot_standings

KINDS = ("minimax", "heuristic", "random")


def make_player(kind: str, depth: int, label: str, marker: Marker, rng: random.Random) -> Player:
    if kind == "minimax":
        return ComputerPlayer(name=label, marker=marker, depth=depth, rng=rng)
    if kind == "heuristic":
        return HeuristicPlayer(name=label, marker=marker, rng=rng)
    if kind == "random":
        return RandomPlayer(name=label, marker=marker, rng=rng)
    raise ValueError(f"Unknown player kind: {kind}")


def _label(kind: str, depth: int) -> str:
    return f"Minimax (d{depth})" if kind == "minimax" else kind.capitalize()


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play computer-vs-computer games and summarize the results.")
    ap.add_argument("--x", choices=KINDS, default="minimax", help="Player holding X")
    ap.add_argument("--o", choices=KINDS, default="heuristic", help="Player holding O")
    ap.add_argument("--depth", type=int, default=SEARCH_DEPTH, help="Search depth for minimax players")
    ap.add_argument("--games", type=int, default=20, help="Number of games")
    ap.add_argument("--seed", type=int, default=None, help="Seed for reproducible matches")
    ap.add_argument("--metric", type=str, default="win_rate", help="Ranking metric (win_rate, wins, avg_moves, avg_search_ms)")
    ap.add_argument("--figure", type=str, default=None, help="Save a results chart to this path")
    ap.add_argument("--show", action="store_true", help="Show the chart instead of saving")
    ap.add_argument("--log-level", type=str, default=LOG_LEVEL)
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    configure_logging(args.log_level)

    x_label = _label(args.x, args.depth)
    o_label = _label(args.o, args.depth)
    if x_label == o_label:
        x_label, o_label = f"{x_label} X", f"{o_label} O"

    results = play_match(
        partial(make_player, args.x, args.depth, x_label),
        partial(make_player, args.o, args.depth, o_label),
        games=args.games,
        seed=args.seed,
    )
    games = games_frame(results)

    cfg = SummaryConfig(metric=args.metric)  # type: ignore[arg-type]
    table = standings(games, cfg)

    print(f"\nPlayed: {len(games):,} games  ({x_label} as X, {o_label} as O)")
    print("\n=== Standings ===")
    print(table.to_string(index=False))

    openers = first_mover_summary(games)
    if not openers.empty:
        print("\n=== Opening side ===")
        print(openers.to_string(index=False))

    if args.show or args.figure:
        out = Path(args.figure) if args.figure else None
        plot_standings(table, out, show=args.show)
        if out is not None and not args.show:
            print(f"\nSaved figure to: {out.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
