"""
Round-robin league between the difficulty tiers.

Every pairing plays `games_per_pair` games with seats alternating; each game
starts from a couple of seeded random plies so the deterministic tiers do not
replay the same line. Results are aggregated per tier into a pandas DataFrame
and can be exported as league_results_<timestamp>.csv.
"""

from __future__ import annotations

import itertools
import logging
import random
import time
from concurrent.futures import ProcessPoolExecutor
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pandas as pd

from connectn.ai.selector import MoveSelector
from connectn.config import DEFAULT_CONFIG, RESULTS_DIR, EngineConfig
from connectn.game.controller import play_game
from connectn.types import Difficulty, Player

from .league_types import Agg, GameResult

logger = logging.getLogger(__name__)

OPENING_PLIES = 2

RESULT_COLUMNS = [
    "name",
    "games", "wins", "draws", "losses",
    "points", "ppg",
    "avg_ms_per_move",
    "moves", "time_ms", "nodes",
]


def ppg(a: Agg) -> float:
    return (a.points / a.games) if a.games else 0.0


def avg_ms_per_move(a: Agg) -> float:
    return (a.time_ms / a.moves) if a.moves else 0.0


def play_one(args: Tuple[Difficulty, Difficulty, EngineConfig, int]) -> Tuple[GameResult, Dict[Player, Dict[str, int]]]:
    first, second, config, seed = args

    # Each seat gets its own selector so the seats never share a random stream
    sel_first = MoveSelector(config=config, rng=random.Random(seed + 101))
    sel_second = MoveSelector(config=config, rng=random.Random(seed + 202))

    record = play_game(
        sel_first.agent_for(first),
        sel_second.agent_for(second),
        config=config,
        opening_moves=OPENING_PLIES,
        rng=random.Random(seed),
    )

    if record.winner is Player.FIRST:
        winner = first
    elif record.winner is Player.SECOND:
        winner = second
    else:
        winner = None

    result = GameResult(first=first, second=second, winner=winner, plies=len(record.moves), seed=seed)
    return result, record.stats


def schedule(games_per_pair: int, seed: int, config: EngineConfig) -> List[Tuple[Difficulty, Difficulty, EngineConfig, int]]:
    jobs = []
    for i, (a, b) in enumerate(itertools.combinations(list(Difficulty), 2)):
        base_seed = seed + 1000 * i
        for g in range(games_per_pair):
            if g % 2 == 0:
                jobs.append((a, b, config, base_seed + g))
            else:
                jobs.append((b, a, config, base_seed + g))
    return jobs


def add_result(table: Dict[Difficulty, Agg], result: GameResult, stats: Dict[Player, Dict[str, int]]) -> None:
    a = table[result.first]
    b = table[result.second]
    a.games += 1
    b.games += 1

    for agg, seat in ((a, Player.FIRST), (b, Player.SECOND)):
        s = stats[seat]
        agg.moves += s["moves"]
        agg.time_ms += s["time_ms"]
        agg.nodes += s["nodes"]

    if result.winner is None:
        a.draws += 1
        b.draws += 1
        a.points += 0.5
        b.points += 0.5
    elif result.winner is result.first:
        a.wins += 1
        b.losses += 1
        a.points += 1.0
    else:
        b.wins += 1
        a.losses += 1
        b.points += 1.0


def standings(table: Dict[Difficulty, Agg]) -> pd.DataFrame:
    rows = []
    for tier, a in table.items():
        rows.append({
            "name": str(tier),
            "games": a.games,
            "wins": a.wins,
            "draws": a.draws,
            "losses": a.losses,
            "points": a.points,
            "ppg": round(ppg(a), 4),
            "avg_ms_per_move": round(avg_ms_per_move(a), 3),
            "moves": a.moves,
            "time_ms": a.time_ms,
            "nodes": a.nodes,
        })
    df = pd.DataFrame(rows, columns=RESULT_COLUMNS)
    return df.sort_values(["ppg", "wins"], ascending=False).reset_index(drop=True)


def run_league(
    games_per_pair: int = 2,
    config: EngineConfig = DEFAULT_CONFIG,
    seed: int = 1234,
    max_workers: Optional[int] = None,
) -> pd.DataFrame:
    jobs = schedule(games_per_pair, seed, config)
    table: Dict[Difficulty, Agg] = {tier: Agg() for tier in Difficulty}

    start = time.perf_counter()
    if max_workers is not None and max_workers > 1:
        with ProcessPoolExecutor(max_workers=max_workers) as ex:
            outcomes = list(ex.map(play_one, jobs))
    else:
        outcomes = [play_one(job) for job in jobs]

    for result, stats in outcomes:
        add_result(table, result, stats)

    logger.info("League of %d games finished in %.2fs", len(jobs), time.perf_counter() - start)
    return standings(table)


def export_csv(df: pd.DataFrame, results_dir: Path = Path(RESULTS_DIR)) -> Path:
    results_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    path = results_dir / f"league_results_{stamp}.csv"
    df.to_csv(path, index=False)
    return path
