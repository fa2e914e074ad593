from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, Optional

from connectn.ai.base import Agent
from connectn.ai.minimax_agent import MinimaxAgent
from connectn.ai.random_agent import RandomAgent
from connectn.ai.tactical_agent import TacticalAgent
from connectn.config import DEFAULT_CONFIG, EngineConfig
from connectn.core.rules import legal_columns
from connectn.game.state import GameState
from connectn.types import Difficulty, Move

logger = logging.getLogger(__name__)


@dataclass
class MoveSelector:
    """
    Dispatch a difficulty tier to its strategy:
      WEAK     -> uniform random legal column
      MODERATE -> win now, else block, else random
      STRONG   -> minimax with alpha-beta at config.depth

    The random source is shared by the weak and moderate tiers; pass a seeded
    random.Random to make them reproducible.
    """
    config: EngineConfig = DEFAULT_CONFIG
    rng: random.Random = field(default_factory=random.Random)

    agents: Dict[Difficulty, Agent] = field(init=False)

    def __post_init__(self) -> None:
        self.agents = {
            Difficulty.WEAK: RandomAgent(name="Weak", rng=self.rng),
            Difficulty.MODERATE: TacticalAgent(name="Moderate", win_length=self.config.win_length, rng=self.rng),
            Difficulty.STRONG: MinimaxAgent(name="Strong", config=self.config),
        }

    def agent_for(self, difficulty: Difficulty) -> Agent:
        return self.agents[Difficulty(difficulty)]

    def select_move(self, state: GameState, difficulty: Difficulty) -> Move:
        if state.terminal or not legal_columns(state.board):
            raise ValueError("No valid moves: select_move called on a finished game.")

        agent = self.agent_for(difficulty)
        move = agent.choose_move(state)
        logger.debug("%s tier chose column %s for %s", agent.name, move, state.current)
        return move


def select_move(
    state: GameState,
    difficulty: Difficulty,
    config: EngineConfig = DEFAULT_CONFIG,
    rng: Optional[random.Random] = None,
) -> Move:
    selector = MoveSelector(config=config, rng=rng if rng is not None else random.Random())
    return selector.select_move(state, difficulty)
