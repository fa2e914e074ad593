from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from typing import Optional

from connectn.ai.random_agent import RandomAgent
from connectn.config import CONNECT_N
from connectn.core.rules import apply_move, legal_columns
from connectn.game.state import GameState
from connectn.types import Move, Player, other


@dataclass(slots=True)
class TacticalAgent:
    """
    Cheap one-ply tactical agent:
      1) Play an immediate winning move if available
      2) Block the opponent's immediate winning move
      3) Otherwise a uniformly random valid move

    Every check goes through apply_move and looks at the resulting winner;
    there is no deeper search.
    """
    name: str = "Tactical"
    win_length: int = CONNECT_N
    rng: random.Random = field(default_factory=random.Random)

    def _winning_move(self, state: GameState, player: Player) -> Optional[Move]:
        if state.current is not player:
            state = replace(state, current=player)
        for c in legal_columns(state.board):
            if apply_move(state, c, self.win_length).winner is player:
                return c
        return None

    def choose_move(self, state: GameState) -> Move:
        if state.terminal or not legal_columns(state.board):
            raise ValueError("No valid moves.")

        me = state.current

        # 1) win now
        m = self._winning_move(state, me)
        if m is not None:
            return m

        # 2) block opponent win
        m = self._winning_move(state, other(me))
        if m is not None:
            return m

        # 3) random fallback
        return RandomAgent(rng=self.rng).choose_move(state)
