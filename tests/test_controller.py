import random

from connectn.ai.random_agent import RandomAgent
from connectn.ai.selector import MoveSelector
from connectn.config import EngineConfig
from connectn.game.codec import Session, new_session
from connectn.game.controller import GameRecord, play_computer_move, play_game, play_human_move
from connectn.types import Difficulty, Player

from positions import play


def test_human_then_computer_turn():
    session = new_session(difficulty=Difficulty.WEAK)
    session = play_human_move(session, 3)
    assert session.newest_piece_column == 3
    assert session.newest_computer_piece_column is None
    assert session.state.current is Player.SECOND

    session = play_computer_move(session, MoveSelector(rng=random.Random(9)))
    assert session.newest_computer_piece_column in range(7)
    assert session.newest_piece_column == 3
    assert session.state.current is Player.FIRST
    assert session.state.board.piece_count() == 2


def test_rejected_human_move_keeps_session():
    session = new_session()
    assert play_human_move(session, 9) is session


def test_computer_waits_for_its_turn():
    session = new_session()
    assert play_computer_move(session, MoveSelector()) is session


def test_computer_blocks_with_moderate():
    session = Session(state=play([0, 6, 1, 6, 2]), difficulty=Difficulty.MODERATE)
    session = play_computer_move(session, MoveSelector(rng=random.Random(0)))
    assert session.newest_computer_piece_column == 3


def test_headless_game_runs_to_the_end():
    config = EngineConfig()
    record = play_game(
        RandomAgent(rng=random.Random(1)),
        RandomAgent(rng=random.Random(2)),
        config=config,
        opening_moves=2,
        rng=random.Random(3),
    )
    assert isinstance(record, GameRecord)
    assert record.final_state.terminal
    assert record.winner is record.final_state.winner
    assert len(record.moves) == record.final_state.board.piece_count()
    assert record.stats[Player.FIRST]["moves"] + record.stats[Player.SECOND]["moves"] == len(record.moves) - 2

    # replaying the recorded columns gives the same final position
    assert play(record.moves) == record.final_state


def test_headless_game_with_search(shallow):
    selector = MoveSelector(config=shallow, rng=random.Random(4))
    record = play_game(
        selector.agent_for(Difficulty.STRONG),
        selector.agent_for(Difficulty.MODERATE),
        config=shallow,
    )
    assert record.final_state.terminal
    assert record.stats[Player.FIRST]["nodes"] > 0


def test_human_cannot_move_for_the_computer():
    session = Session(state=play([3]))
    assert session.state.current is Player.SECOND
    assert play_human_move(session, 4) is session
