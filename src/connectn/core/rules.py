from __future__ import annotations
import logging
from dataclasses import replace
from typing import List, Optional, Tuple

from connectn.config import CONNECT_N, DEFAULT_CONFIG, EngineConfig
from connectn.core.board import Board
from connectn.game.state import GameState
from connectn.types import Move, Player, other

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]  # (col, row)

# Forward probes: horizontal, vertical, diagonal down-right, diagonal up-right
DIRECTIONS: Tuple[Coord, ...] = ((1, 0), (0, 1), (1, 1), (1, -1))


def create_initial_state(config: EngineConfig = DEFAULT_CONFIG) -> GameState:
    return GameState(
        board=Board(cols=config.columns, rows=config.rows),
        current=Player.FIRST,
        winner=None,
        terminal=False,
    )


def legal_columns(board: Board) -> List[Move]:
    return board.valid_moves()


def is_full(board: Board) -> bool:
    return board.is_full()


def winning_line(board: Board, player: Player, win_length: int = CONNECT_N) -> Optional[List[Coord]]:
    """
    Return the first run of `win_length` cells owned by `player`, or None.

    Every owned cell is probed in the four forward directions only; a line is
    found from its first cell, and re-found from later cells of a longer run.
    """
    g = board.grid
    cols, rows = board.cols, board.rows

    for c in range(cols):
        for r in range(rows):
            if g[c][r] != player:
                continue
            if win_length <= 1:
                return [(c, r)]

            for dc, dr in DIRECTIONS:
                count = 1
                cc, rr = c + dc, r + dr
                while 0 <= cc < cols and 0 <= rr < rows and g[cc][rr] == player:
                    count += 1
                    if count == win_length:
                        return [(c + i * dc, r + i * dr) for i in range(win_length)]
                    cc += dc
                    rr += dr
    return None


def check_win(board: Board, player: Player, win_length: int = CONNECT_N) -> bool:
    return winning_line(board, player, win_length) is not None


def apply_move(state: GameState, column: int, win_length: int = CONNECT_N) -> GameState:
    """
    Drop the current player's piece into `column` and return the successor state.

    Out-of-range columns, full columns and terminal states are no-ops: the input
    state itself is returned, never an exception. The turn only advances when the
    move does not end the game.
    """
    board = state.board
    if state.terminal or not (0 <= column < board.cols) or board.grid[column][0] is not None:
        logger.debug("Ignoring move in column %s (terminal=%s)", column, state.terminal)
        return state

    new_board = board.copy()
    new_board.drop(Move(column), state.current)

    won = check_win(new_board, state.current, win_length)
    terminal = won or new_board.is_full()

    return replace(
        state,
        board=new_board,
        current=state.current if terminal else other(state.current),
        winner=state.current if won else None,
        terminal=terminal,
    )
