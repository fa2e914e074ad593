from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List

from connectn.ai.selector import MoveSelector
from connectn.config import DEFAULT_CONFIG, EngineConfig
from connectn.core import rules
from connectn.core.board import Board
from connectn.game.state import GameState
from connectn.types import Difficulty, Move, Player


@dataclass
class ConnectN:
    """One game configuration bound to the rules engine and the move selector."""
    config: EngineConfig = DEFAULT_CONFIG
    rng: random.Random = field(default_factory=random.Random)

    selector: MoveSelector = field(init=False)

    def __post_init__(self) -> None:
        self.selector = MoveSelector(config=self.config, rng=self.rng)

    def create_initial_state(self) -> GameState:
        return rules.create_initial_state(self.config)

    def legal_columns(self, board: Board) -> List[Move]:
        return rules.legal_columns(board)

    def apply_move(self, state: GameState, column: int) -> GameState:
        return rules.apply_move(state, column, self.config.win_length)

    def check_win(self, board: Board, player: Player) -> bool:
        return rules.check_win(board, player, self.config.win_length)

    def is_full(self, board: Board) -> bool:
        return rules.is_full(board)

    def select_move(self, state: GameState, difficulty: Difficulty) -> Move:
        return self.selector.select_move(state, difficulty)
