from .chart import plot_standings

__all__ = [
    "plot_standings",
]
