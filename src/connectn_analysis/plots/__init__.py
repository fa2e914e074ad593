from .chart import plot_metric_bar

__all__ = [
    "plot_metric_bar",
]
