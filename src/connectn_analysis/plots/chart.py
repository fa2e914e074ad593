from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd


def plot_metric_bar(df: pd.DataFrame, outdir: Path, metric: str, *, show: bool = False) -> Path | None:
    if "name" not in df.columns or metric not in df.columns:
        return None
    if not pd.api.types.is_numeric_dtype(df[metric]):
        return None

    ranked = df[["name", metric]].dropna().sort_values(metric, ascending=False)

    fig = plt.figure(figsize=(6, 4))
    plt.bar(ranked["name"].astype(str), ranked[metric].astype(float))
    plt.title(f"{metric} by difficulty")
    plt.xlabel("difficulty")
    plt.ylabel(metric)

    if show:
        plt.show()
        return None

    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"bar_{metric}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return path
