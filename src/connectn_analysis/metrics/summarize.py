from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

import pandas as pd


MetricKey = Literal[
    "ppg",
    "points",
    "wins",
    "avg_ms_per_move",
    "nodes",
]


@dataclass(frozen=True)
class SummaryConfig:
    metric: MetricKey = "ppg"
    min_games: int = 0


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def ranked_table(df: pd.DataFrame, cfg: SummaryConfig) -> pd.DataFrame:
    _require_cols(df, ["name", cfg.metric])

    out = df.copy()
    if cfg.min_games > 0:
        _require_cols(out, ["games"])
        out = out[out["games"].fillna(0) >= cfg.min_games].copy()

    # Lower is better only for speed
    ascending = (cfg.metric == "avg_ms_per_move")
    out = out.sort_values(cfg.metric, ascending=ascending).reset_index(drop=True)
    out.insert(0, "rk", range(1, len(out) + 1))
    return out


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number")
    if num.empty:
        return pd.DataFrame()
    return num.describe().T
