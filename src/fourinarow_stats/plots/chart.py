from __future__ import annotations

from pathlib import Path

import pandas as pd
import matplotlib.pyplot as plt


def plot_standings(table: pd.DataFrame, out: Path | None, *, show: bool) -> None:
    """Stacked win / draw / loss bars per player."""
    if table.empty or "name" not in table.columns:
        return

    names = table["name"].astype(str)
    wins = table["wins"].astype(float)
    draws = table["draws"].astype(float)
    losses = table["losses"].astype(float)

    fig = plt.figure(figsize=(8, 5))
    plt.bar(names, wins, label="wins")
    plt.bar(names, draws, bottom=wins, label="draws")
    plt.bar(names, losses, bottom=wins + draws, label="losses")
    plt.title("Match results")
    plt.xlabel("player")
    plt.ylabel("games")
    plt.legend()
    plt.xticks(rotation=30, ha="right")

    if show:
        plt.show()
    elif out is not None:
        out.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(out, dpi=200, bbox_inches="tight")
    plt.close(fig)
