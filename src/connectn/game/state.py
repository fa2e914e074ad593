from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from connectn.core.board import Board
from connectn.types import Outcome, Player


@dataclass(frozen=True, slots=True)
class GameState:
    board: Board
    current: Player = Player.FIRST
    winner: Optional[Player] = None
    terminal: bool = False

    def __post_init__(self) -> None:
        if self.winner is not None and not self.terminal:
            raise ValueError("A state with a winner must be terminal.")

    @property
    def outcome(self) -> Outcome:
        if self.winner is not None:
            return Outcome.WON
        if self.terminal:
            return Outcome.DRAWN
        return Outcome.IN_PROGRESS

    @property
    def is_draw(self) -> bool:
        return self.terminal and self.winner is None
