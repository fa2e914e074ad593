from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from math import inf

from connectn.config import DEFAULT_CONFIG, EngineConfig
from connectn.core.board import Board
from connectn.core.rules import check_win, legal_columns
from connectn.core.scoring import evaluate
from connectn.game.state import GameState
from connectn.types import Move, Player, other

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class MinimaxAgent:
    """
    Depth-limited minimax with alpha-beta pruning.

    The root orders candidates center-first to tighten the window; interior
    nodes walk legal columns in ascending order. Scores are always taken from
    the root player's point of view, only the maximizing flag alternates.
    A move that wins on the spot is played without searching the rest.

    The search works on a single copy of the board with drop/undo, so the
    caller's state is never touched.
    """
    name: str = "Minimax AI"
    config: EngineConfig = DEFAULT_CONFIG
    prune: bool = True

    # Stats
    last_info: dict = field(default_factory=dict)

    _nodes: int = 0
    _cutoffs: int = 0

    def choose_move(self, state: GameState) -> Move:
        return self.best_move(state)

    def best_move(self, state: GameState) -> Move:
        me: Player = state.current
        opp = other(me)

        moves = legal_columns(state.board)
        if state.terminal or not moves:
            raise ValueError("No valid moves.")

        center = state.board.cols // 2
        # sorted() is stable, so equal distances keep ascending column order
        root_moves = sorted(moves, key=lambda m: abs(int(m) - center))

        start = time.perf_counter()
        self._nodes = 0
        self._cutoffs = 0

        board = state.board.copy()
        best_move = root_moves[0]
        best_score = -inf

        for m in root_moves:
            ended = self._play(board, m, me)
            if ended and check_win(board, me, self.config.win_length):
                # winning now beats any line found deeper
                best_score = evaluate(board, me, opp, self.config.win_length)
                best_move = m
                board.undo(m)
                break

            score = self._search(board, self.config.depth, -inf, inf, False, me, opp, ended)
            board.undo(m)

            if score > best_score:
                best_score = score
                best_move = m

        elapsed = time.perf_counter() - start
        self.last_info = {
            "depth": self.config.depth,
            "nodes": self._nodes,
            "cutoffs": self._cutoffs,
            "eval": int(best_score) if best_score not in (inf, -inf) else best_score,
            "move_col": int(best_move),
            "time_ms": max(1, int(elapsed * 1000)),
        }
        logger.debug("%s picked column %s: %s", self.name, best_move, self.last_info)

        return best_move

    def minimax(
        self,
        state: GameState,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
        player: Player,
        opponent: Player,
    ) -> float:
        return self._search(state.board.copy(), depth, alpha, beta, maximizing, player, opponent, state.terminal)

    def _play(self, board: Board, col: Move, mover: Player) -> bool:
        """Drop a piece and report whether the position is now terminal."""
        board.drop(col, mover)
        return check_win(board, mover, self.config.win_length) or board.is_full()

    def _search(
        self,
        board: Board,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
        player: Player,
        opponent: Player,
        terminal: bool,
    ) -> float:
        self._nodes += 1

        if depth == 0 or terminal:
            return evaluate(board, player, opponent, self.config.win_length)

        moves = legal_columns(board)
        if not moves:
            return evaluate(board, player, opponent, self.config.win_length)

        if maximizing:
            v = -inf
            for m in moves:
                ended = self._play(board, m, player)
                score = self._search(board, depth - 1, alpha, beta, False, player, opponent, ended)
                board.undo(m)

                v = max(v, score)
                alpha = max(alpha, score)
                if self.prune and beta <= alpha:
                    self._cutoffs += 1
                    break
            return v

        v = inf
        for m in moves:
            ended = self._play(board, m, opponent)
            score = self._search(board, depth - 1, alpha, beta, True, player, opponent, ended)
            board.undo(m)

            v = min(v, score)
            beta = min(beta, score)
            if self.prune and beta <= alpha:
                self._cutoffs += 1
                break
        return v
