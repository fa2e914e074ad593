# src/connectn/config.py

from __future__ import annotations
from dataclasses import dataclass

ROWS = 6
COLS = 7
CONNECT_N = 4

# Search depth (plies below each root candidate) for the strong tier
MINIMAX_DEPTH = 5

# League / analysis output
RESULTS_DIR = "data/results"
FIGURES_DIR = "data/figures"
RESULTS_PATTERN = "league_results_*.csv"


@dataclass(frozen=True, slots=True)
class EngineConfig:
    columns: int = COLS
    rows: int = ROWS
    win_length: int = CONNECT_N
    depth: int = MINIMAX_DEPTH

    def __post_init__(self) -> None:
        if self.columns < 1 or self.rows < 1:
            raise ValueError(f"Board must be at least 1x1, got {self.columns}x{self.rows}.")
        if self.win_length < 1:
            raise ValueError(f"win_length must be >= 1, got {self.win_length}.")
        if self.depth < 0:
            raise ValueError(f"depth must be >= 0, got {self.depth}.")

    @property
    def center(self) -> int:
        return self.columns // 2


DEFAULT_CONFIG = EngineConfig()
