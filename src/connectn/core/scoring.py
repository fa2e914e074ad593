from __future__ import annotations
from functools import lru_cache
from typing import List, Tuple

from connectn.config import CONNECT_N
from connectn.core.board import Board
from connectn.core.rules import DIRECTIONS, Coord
from connectn.types import Cell, Player

CENTER_WEIGHT = 6

WIN_SCORE = 100_000
THREE_SCORE = 100
TWO_SCORE = 10

# Opponent near-wins weigh ten times more than our own (defensive bias)
OPP_WIN_PENALTY = 100_000
OPP_THREE_PENALTY = 1_000
OPP_TWO_PENALTY = 10


@lru_cache(maxsize=32)
def windows(cols: int, rows: int, win_length: int) -> Tuple[Tuple[Coord, ...], ...]:
    """
    All on-board windows of `win_length` cells, one per (direction, start cell).
    Windows that would run off the board are dropped.
    """
    out: List[Tuple[Coord, ...]] = []
    for dc, dr in DIRECTIONS:
        for c in range(cols):
            for r in range(rows):
                end_c = c + (win_length - 1) * dc
                end_r = r + (win_length - 1) * dr
                if 0 <= end_c < cols and 0 <= end_r < rows:
                    out.append(tuple((c + i * dc, r + i * dr) for i in range(win_length)))
    return tuple(out)


def score_window(cells: List[Cell], player: Player, opponent: Player, win_length: int = CONNECT_N) -> int:
    p_count = cells.count(player)
    o_count = cells.count(opponent)
    e_count = cells.count(None)

    score = 0

    if p_count == win_length:
        score += WIN_SCORE
    elif p_count == win_length - 1 and e_count == 1:
        score += THREE_SCORE
    elif p_count == win_length - 2 and e_count == 2:
        score += TWO_SCORE

    if o_count == win_length:
        score -= OPP_WIN_PENALTY
    elif o_count == win_length - 1 and e_count == 1:
        score -= OPP_THREE_PENALTY
    elif o_count == win_length - 2 and e_count == 2:
        score -= OPP_TWO_PENALTY

    return score


def evaluate(board: Board, player: Player, opponent: Player, win_length: int = CONNECT_N) -> int:
    g = board.grid

    # center column preference, only our own pieces count
    center = board.cols // 2
    score = CENTER_WEIGHT * sum(1 for cell in g[center] if cell == player)

    for window in windows(board.cols, board.rows, win_length):
        cells = [g[c][r] for (c, r) in window]
        score += score_window(cells, player, opponent, win_length)

    return score
