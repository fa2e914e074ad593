from connectn.core.board import Board
from connectn.core.scoring import evaluate, score_window, windows
from connectn.types import Player

F, S = Player.FIRST, Player.SECOND


def _board(first=(), second=()) -> Board:
    b = Board()
    for c, r in first:
        b.grid[c][r] = F
    for c, r in second:
        b.grid[c][r] = S
    return b


def test_window_count_standard_board():
    # 24 horizontal, 21 vertical, 12 per diagonal
    assert len(windows(7, 6, 4)) == 69
    assert all(len(w) == 4 for w in windows(7, 6, 4))


def test_windows_too_long_for_board():
    assert windows(3, 3, 4) == ()


def test_empty_board_scores_zero():
    assert evaluate(Board(), F, S) == 0


def test_center_bonus_only_for_player():
    b = _board(first=[(3, 5)])
    assert evaluate(b, F, S) == 6
    assert evaluate(b, S, F) == 0


def test_open_two():
    b = _board(first=[(0, 5), (1, 5)])
    assert evaluate(b, F, S) == 10
    assert evaluate(b, S, F) == -10


def test_opponent_three_weighs_more_than_own_three():
    b = _board(second=[(0, 5), (1, 5), (2, 5)])
    assert evaluate(b, F, S) == -1000 - 10
    assert evaluate(b, S, F) == 100 + 10


def test_completed_line():
    b = _board(first=[(0, 5), (1, 5), (2, 5), (3, 5)])
    # full window, the shifted three and two, center piece
    assert evaluate(b, F, S) == 100_000 + 100 + 10 + 6


def test_mixed_window_scores_nothing():
    assert score_window([F, S, None, None], F, S) == 0
    assert score_window([F, F, S, None], F, S) == 0


def test_window_table():
    assert score_window([F, F, F, F], F, S) == 100_000
    assert score_window([F, F, F, None], F, S) == 100
    assert score_window([F, None, F, None], F, S) == 10
    assert score_window([S, S, S, S], F, S) == -100_000
    assert score_window([S, None, S, S], F, S) == -1000
    assert score_window([None, S, None, S], F, S) == -10
    assert score_window([F, F, F], F, S, win_length=3) == 100_000
