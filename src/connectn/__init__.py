from connectn.ai.selector import MoveSelector, select_move
from connectn.config import DEFAULT_CONFIG, EngineConfig
from connectn.core.board import Board
from connectn.core.rules import apply_move, check_win, create_initial_state, is_full, legal_columns
from connectn.engine import ConnectN
from connectn.game.state import GameState
from connectn.types import Difficulty, Outcome, Player

__all__ = [
    "Board",
    "ConnectN",
    "DEFAULT_CONFIG",
    "Difficulty",
    "EngineConfig",
    "GameState",
    "MoveSelector",
    "Outcome",
    "Player",
    "apply_move",
    "check_win",
    "create_initial_state",
    "is_full",
    "legal_columns",
    "select_move",
]
