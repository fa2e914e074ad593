from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field, replace
from typing import Dict, List, Optional

from connectn.ai.base import Agent
from connectn.ai.selector import MoveSelector
from connectn.config import DEFAULT_CONFIG, EngineConfig
from connectn.core.rules import apply_move, create_initial_state, legal_columns
from connectn.game.codec import Session
from connectn.game.state import GameState
from connectn.types import Move, Player

logger = logging.getLogger(__name__)

# The computer always plays the second seat in a session
COMPUTER_SEAT = Player.SECOND


def play_human_move(session: Session, column: int, config: EngineConfig = DEFAULT_CONFIG) -> Session:
    if session.state.current is COMPUTER_SEAT:
        # Not the human's turn
        return session
    new_state = apply_move(session.state, column, config.win_length)
    if new_state is session.state:
        # Rejected move: nothing to record
        return session
    return replace(
        session,
        state=new_state,
        newest_piece_column=column,
        newest_computer_piece_column=None,
    )


def play_computer_move(session: Session, selector: MoveSelector) -> Session:
    state = session.state
    if state.terminal or state.current is not COMPUTER_SEAT:
        return session

    move = selector.select_move(state, session.difficulty)
    return replace(
        session,
        state=apply_move(state, move, selector.config.win_length),
        newest_computer_piece_column=int(move),
    )


@dataclass
class GameRecord:
    winner: Optional[Player]
    moves: List[int] = field(default_factory=list)
    stats: Dict[Player, Dict[str, int]] = field(default_factory=dict)
    final_state: Optional[GameState] = None


def play_game(
    agent_first: Agent,
    agent_second: Agent,
    config: EngineConfig = DEFAULT_CONFIG,
    opening_moves: int = 0,
    rng: Optional[random.Random] = None,
) -> GameRecord:
    """
    Play one headless game between two agents.

    `opening_moves` random plies are played first (from `rng`) so repeated games
    between deterministic agents do not all follow the same line.
    """
    rng = rng if rng is not None else random.Random()
    state = create_initial_state(config)
    record = GameRecord(
        winner=None,
        stats={p: {"moves": 0, "time_ms": 0, "nodes": 0} for p in Player},
    )

    for _ in range(opening_moves):
        moves = legal_columns(state.board)
        if state.terminal or not moves:
            break
        move = rng.choice(moves)
        state = apply_move(state, move, config.win_length)
        record.moves.append(int(move))

    while not state.terminal:
        agent = agent_first if state.current is Player.FIRST else agent_second

        t0 = time.perf_counter()
        move: Move = agent.choose_move(state)
        elapsed_ms = max(1, int((time.perf_counter() - t0) * 1000))

        info = getattr(agent, "last_info", None) or {}
        side_stats = record.stats[state.current]
        side_stats["moves"] += 1
        side_stats["time_ms"] += elapsed_ms
        side_stats["nodes"] += int(info.get("nodes", 0))

        next_state = apply_move(state, move, config.win_length)
        if next_state is state:
            raise ValueError(f"{agent.name} returned illegal column {move}.")
        state = next_state
        record.moves.append(int(move))

    record.winner = state.winner
    record.final_state = state
    logger.debug("Game over after %d plies, winner=%s", len(record.moves), state.winner)
    return record
