from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal

import pandas as pd

from fourinarow.game.results import GameResult


MetricKey = Literal["win_rate", "wins", "games", "avg_moves", "avg_search_ms"]

STANDINGS_COLS = [
    "name",
    "games", "wins", "draws", "losses",
    "win_rate",
    "avg_moves",
    "avg_search_ms",
]


@dataclass(frozen=True)
class SummaryConfig:
    metric: MetricKey = "win_rate"
    top_n: int = 20


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def games_frame(results: Iterable[GameResult]) -> pd.DataFrame:
    """One row per game."""
    rows = [r.as_record() for r in results]
    return pd.DataFrame(rows, columns=["x", "o", "first", "winner", "winner_name", "moves", "x_search_ms", "o_search_ms"])


def _per_player(games: pd.DataFrame) -> pd.DataFrame:
    # Two rows per game, one from each seat.
    sides = []
    for marker, name_col, ms_col in (("X", "x", "x_search_ms"), ("O", "o", "o_search_ms")):
        side = pd.DataFrame({
            "name": games[name_col],
            "moves": games["moves"],
            "search_ms": games[ms_col],
            "win": games["winner"] == marker,
            "draw": games["winner"] == "draw",
        })
        side["loss"] = ~(side["win"] | side["draw"])
        sides.append(side)
    return pd.concat(sides, ignore_index=True)


def standings(games: pd.DataFrame, cfg: SummaryConfig = SummaryConfig()) -> pd.DataFrame:
    if games.empty:
        return pd.DataFrame(columns=["rk", *STANDINGS_COLS])

    per = _per_player(games)
    out = per.groupby("name").agg(
        games=("win", "size"),
        wins=("win", "sum"),
        draws=("draw", "sum"),
        losses=("loss", "sum"),
        avg_moves=("moves", "mean"),
        avg_search_ms=("search_ms", "mean"),
    ).reset_index()

    out["win_rate"] = out["wins"] / out["games"]
    out = out[STANDINGS_COLS]
    _require_cols(out, [cfg.metric])

    # Lower is better only for time
    ascending = cfg.metric == "avg_search_ms"
    out = out.sort_values(cfg.metric, ascending=ascending).head(cfg.top_n).reset_index(drop=True)
    out.insert(0, "rk", range(1, len(out) + 1))
    return out


def first_mover_summary(games: pd.DataFrame) -> pd.DataFrame:
    """How often the opener won, by seat."""
    if games.empty:
        return pd.DataFrame(columns=["first", "games", "opener_wins", "opener_win_rate"])
    g = games.assign(opener_won=games["winner"] == games["first"])
    out = g.groupby("first").agg(games=("opener_won", "size"), opener_wins=("opener_won", "sum")).reset_index()
    out["opener_win_rate"] = out["opener_wins"] / out["games"]
    return out
