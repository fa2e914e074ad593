from __future__ import annotations

from dataclasses import dataclass

from connectn.types import Difficulty


@dataclass
class Agg:
    games: int = 0
    points: float = 0.0
    wins: int = 0
    losses: int = 0
    draws: int = 0

    moves: int = 0
    time_ms: int = 0
    nodes: int = 0


@dataclass(frozen=True)
class GameResult:
    first: Difficulty
    second: Difficulty
    winner: Difficulty | None
    plies: int
    seed: int
