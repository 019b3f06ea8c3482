from .chart import (
    plot_record_by_difficulty,
    plot_win_rate_trend,
)

__all__ = [
    "plot_record_by_difficulty",
    "plot_win_rate_trend",
]
