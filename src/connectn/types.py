# src/connectn/types.py

from __future__ import annotations
from enum import StrEnum
from typing import Optional, NewType


class Player(StrEnum):
    FIRST = "first"
    SECOND = "second"

    @property
    def symbol(self) -> str:
        return "X" if self is Player.FIRST else "O"


class Difficulty(StrEnum):
    WEAK = "weak"
    MODERATE = "moderate"
    STRONG = "strong"


class Outcome(StrEnum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


Cell = Optional[Player]
Move = NewType("Move", int)   # column index 0..columns-1


def other(p: Player) -> Player:
    return Player.SECOND if p is Player.FIRST else Player.FIRST
