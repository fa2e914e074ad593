import random
from dataclasses import replace
from math import inf

import pytest

from connectn.ai.minimax_agent import MinimaxAgent
from connectn.ai.random_agent import RandomAgent
from connectn.ai.tactical_agent import TacticalAgent
from connectn.config import EngineConfig
from connectn.core.rules import apply_move, legal_columns
from connectn.core.scoring import evaluate
from connectn.types import Player, other

from positions import play

MID_GAME = [
    [3, 3, 2, 4],
    [0, 1, 2, 3, 4, 5, 6, 3],
    [3, 2, 3, 4, 2, 4, 1],
    [6, 5, 4, 3, 2],
    [3, 3, 3, 3, 2, 4],
]


@pytest.mark.parametrize("depth", [1, 2, 3])
def test_takes_immediate_horizontal_win(depth):
    # first player holds columns 0-2 on the bottom row; second threatens column 6
    state = play([0, 6, 1, 6, 2, 6])
    assert state.current is Player.FIRST
    agent = MinimaxAgent(config=EngineConfig(depth=depth))
    assert agent.best_move(state) == 3


@pytest.mark.parametrize("depth", [1, 2, 3])
def test_takes_immediate_win_in_single_open_column(depth):
    state = play([0, 1, 0, 1, 0, 2])
    assert state.current is Player.FIRST
    agent = MinimaxAgent(config=EngineConfig(depth=depth))
    assert agent.best_move(state) == 0


@pytest.mark.parametrize("depth", [1, 2])
def test_blocks_opponent_threat(depth):
    state = play([0, 6, 1, 6, 2])
    assert state.current is Player.SECOND
    agent = MinimaxAgent(config=EngineConfig(depth=depth))
    assert agent.best_move(state) == 3


@pytest.mark.parametrize("moves", MID_GAME)
def test_pruning_does_not_change_result(moves):
    state = play(moves)
    assert not state.terminal

    config = EngineConfig(depth=3)
    pruned = MinimaxAgent(config=config, prune=True)
    full = MinimaxAgent(config=config, prune=False)

    assert pruned.best_move(state) == full.best_move(state)
    assert pruned.last_info["nodes"] <= full.last_info["nodes"]
    assert full.last_info["cutoffs"] == 0

    me, opp = state.current, other(state.current)
    for m in legal_columns(state.board):
        nxt = apply_move(state, m)
        a = pruned.minimax(nxt, config.depth, -inf, inf, False, me, opp)
        b = full.minimax(nxt, config.depth, -inf, inf, False, me, opp)
        assert a == b


def test_pruning_cuts_something():
    state = play(MID_GAME[0])
    agent = MinimaxAgent(config=EngineConfig(depth=3))
    agent.best_move(state)
    assert agent.last_info["cutoffs"] > 0


def test_search_leaves_state_untouched(shallow):
    state = play(MID_GAME[2])
    snapshot = state.board.copy()
    MinimaxAgent(config=shallow).best_move(state)
    assert state.board == snapshot


def test_depth_zero_prefers_center_on_empty_board():
    agent = MinimaxAgent(config=EngineConfig(depth=0))
    assert agent.best_move(play([])) == 3
    assert agent.last_info["move_col"] == 3
    assert agent.last_info["eval"] == 6


def test_minimax_on_terminal_state_is_static_eval():
    state = play([0, 6, 1, 6, 2, 6, 3])
    agent = MinimaxAgent()
    score = agent.minimax(state, 5, -inf, inf, True, Player.FIRST, Player.SECOND)
    assert score == evaluate(state.board, Player.FIRST, Player.SECOND)
    assert agent._nodes == 1


def test_no_moves_raises():
    state = play([0, 1, 0, 1, 0, 1, 0])
    full = replace(state, board=state.board.copy())
    for col in full.board.grid:
        for r in range(len(col)):
            col[r] = col[r] or Player.SECOND
    with pytest.raises(ValueError):
        MinimaxAgent().best_move(full)


def test_moderate_takes_win_before_block():
    state = play([0, 6, 1, 6, 2, 6])
    assert TacticalAgent().choose_move(state) == 3


def test_moderate_blocks():
    state = play([0, 6, 1, 6, 2])
    assert TacticalAgent().choose_move(state) == 3


def _winning_columns(state):
    return [m for m in legal_columns(state.board) if apply_move(state, m).winner is state.current]


@pytest.mark.parametrize("depth", [1, 2, 3])
def test_always_takes_an_available_win(depth):
    rng = random.Random(2024 + depth)
    agent = MinimaxAgent(config=EngineConfig(depth=depth))
    checked = 0
    for _ in range(300):
        state = play([])
        for _ in range(rng.randint(6, 24)):
            if state.terminal:
                break
            state = apply_move(state, rng.choice(legal_columns(state.board)))
        if state.terminal:
            continue
        wins = _winning_columns(state)
        if not wins:
            continue
        checked += 1
        assert agent.best_move(state) in wins
    assert checked > 0


def test_default_depth_takes_win_over_delayed_double_threat():
    state = play([0, 0, 0, 0, 0, 4, 2, 2, 6, 0, 5, 1, 5, 2, 4, 2, 3, 3, 5])
    assert not state.terminal
    wins = _winning_columns(state)
    assert wins
    assert MinimaxAgent().best_move(state) in wins


@pytest.mark.parametrize("agent", [MinimaxAgent(), TacticalAgent(), RandomAgent()])
def test_agents_refuse_a_won_game(agent):
    state = play([0, 1, 0, 1, 0, 1, 0])
    assert state.terminal and legal_columns(state.board)
    with pytest.raises(ValueError):
        agent.choose_move(state)
