# tests/test_bot.py
import random

import pytest

from checkers.bot import (BOT_CONFIG, NoLegalMoveError, ScoredCandidate, _break_ties, calculate_best_plays,
                          choose_move, exposure_multiplier, is_killable, opponent_play_value, select_play,
                          weighted_responses)
from checkers.constants import PLAYER_O, PLAYER_X
from checkers.movements import Move
from checkers.play import playable_pieces


def _playable(board, player, starts_top):
    return playable_pieces(board, player, board.locate_pieces(player), starts_top)


def test_direct_points_cover_captures_kings_and_threats(board_from):
    board = board_from({(5, 0): 'x', (5, 4): 'x', (4, 1): 'O', (4, 5): 'o'})
    scored = calculate_best_plays(board, PLAYER_X, False, _playable(board, PLAYER_X, False), simulating=True)
    assert scored == [
        ScoredCandidate(0, 0, 3),  # takes the king
        ScoredCandidate(1, 0, 3),  # quiet step, plus the threat on (5, 4)
        ScoredCandidate(1, 1, 4),  # capture, plus the threat on (5, 4)
    ]


def test_promotion_earns_points(board_from):
    board = board_from({(1, 2): 'x', (6, 7): 'o'})
    scored = calculate_best_plays(board, PLAYER_X, False, _playable(board, PLAYER_X, False), simulating=True)
    assert [c.points for c in scored] == [3, 3]


def test_is_killable(board_from):
    board = board_from({(5, 4): 'x', (4, 5): 'o'})
    assert is_killable(board, PLAYER_X, False, (5, 4))
    board.set_piece((6, 3), board.get_piece(5, 4).copy())
    assert not is_killable(board, PLAYER_X, False, (5, 4))


def test_opponent_play_value(board_from):
    board = board_from({(5, 4): 'x', (4, 5): 'o'})
    value = opponent_play_value(board, PLAYER_X, False, (5, 4))
    assert value.killable
    assert value.result == 4  # capture (2) plus escaping the threat on (4, 5) (2)

    lone = board_from({(5, 4): 'x'})
    assert opponent_play_value(lone, PLAYER_X, False, (5, 4)) == (0, False)


def test_bot_prefers_capture(board_from):
    board = board_from({(5, 0): 'x', (7, 6): 'x', (4, 1): 'o'})
    piece, move = select_play(board, PLAYER_X, False, rng=random.Random(3))
    assert piece == (5, 0)
    assert move == Move((3, 2), ((4, 1),))


def test_tie_break_prefers_move_setting_up_a_capture(board_from):
    # Both steps from (6, 1) are quiet and safe; only (5, 2) threatens the piece on (4, 1).
    board = board_from({(6, 1): 'x', (4, 1): 'o', (3, 2): 'o', (6, 3): 'o'})
    scored = calculate_best_plays(board, PLAYER_X, False, _playable(board, PLAYER_X, False))
    points = {(c.piece, c.option): c.points for c in scored}
    assert points[(0, 1)] > points[(0, 0)]

    for seed in range(5):
        piece, move = select_play(board, PLAYER_X, False, rng=random.Random(seed))
        assert (piece, move) == ((6, 1), Move((5, 2), ()))


def test_select_play_does_not_touch_board(board_from):
    board = board_from({(5, 0): 'x', (7, 6): 'x', (4, 1): 'o', (2, 5): 'O'})
    before = board.copy()
    select_play(board, PLAYER_X, False, rng=random.Random(0))
    assert board == before


def test_choose_move_plays_on_board(board_from):
    board = board_from({(5, 0): 'x', (4, 1): 'o'})
    piece, move = choose_move(board, PLAYER_X, False, rng=random.Random(0))
    assert (piece, move) == ((5, 0), Move((3, 2), ((4, 1),)))
    assert board.locate_pieces(PLAYER_O) == []
    assert board.locate_pieces(PLAYER_X) == [(3, 2)]


def test_no_legal_move_is_a_defect(board_from):
    board = board_from({(0, 1): 'x', (3, 4): 'o'})
    with pytest.raises(NoLegalMoveError):
        select_play(board, PLAYER_X, False)
    with pytest.raises(AssertionError):
        choose_move(board, PLAYER_X, False)


def test_config_weights_are_used(board_from):
    board = board_from({(1, 2): 'x', (6, 7): 'o'})
    config = dict(BOT_CONFIG, PROMOTION_VALUE=10)
    scored = calculate_best_plays(board, PLAYER_X, False, _playable(board, PLAYER_X, False),
                                  simulating=True, config=config)
    assert [c.points for c in scored] == [11, 11]


def _points_by_destination(board, player, starts_top, scored):
    options = {p.index: p.options for p in _playable(board, player, starts_top)}
    return {options[c.piece][c.option].coordinate: c.points for c in scored}


def _weighted_by_destination(board, player, starts_top):
    playable = _playable(board, player, starts_top)
    options = {p.index: p.options for p in playable}
    weighted = weighted_responses(board, player, starts_top, playable)
    return {options[piece][option].coordinate: value for (piece, option), value in weighted.items()}


def test_threatened_king_is_worth_more(board_from):
    board = board_from({(5, 4): 'X', (4, 5): 'o'})
    scored = calculate_best_plays(board, PLAYER_X, False, _playable(board, PLAYER_X, False), simulating=True)
    # Every king move escapes the threat from (4, 5), worth 3 for a king.
    assert _points_by_destination(board, PLAYER_X, False, scored) == {
        (4, 3): 4, (3, 6): 5, (6, 3): 4, (6, 5): 4,
    }


def test_bot_does_not_hang_a_piece(board_from):
    board = board_from({(5, 2): 'x', (3, 0): 'o', (0, 7): 'o'})
    for seed in range(10):
        piece, move = select_play(board, PLAYER_X, False, rng=random.Random(seed))
        assert (piece, move) == ((5, 2), Move((4, 3), ()))


def test_tie_break_rewards_only_the_safe_quiet_move(board_from):
    # Stepping to (4, 1) lets (3, 0) jump it; (4, 3) is out of reach.
    board = board_from({(5, 2): 'x', (3, 0): 'o', (0, 7): 'o'})
    playable = _playable(board, PLAYER_X, False)
    assert playable[0].options == [Move((4, 1), ()), Move((4, 3), ())]

    points = {(0, 0): 1, (0, 1): 1}
    _break_ties(board, PLAYER_X, False, playable, points, BOT_CONFIG)
    assert points == {(0, 0): 1, (0, 1): 1 + BOT_CONFIG["SAFE_QUIET_BONUS"]}


def test_exposed_piece_doubles_the_reply(board_from):
    board = board_from({(5, 2): 'x', (3, 0): 'o', (0, 7): 'o'})
    # The capture on (4, 1) scores 2 for the opponent, doubled since it takes the mover.
    assert _weighted_by_destination(board, PLAYER_X, False) == {(4, 1): 4, (4, 3): 1}

    scored = calculate_best_plays(board, PLAYER_X, False, _playable(board, PLAYER_X, False))
    # Quiet 1, tie-break (+1 for the safe step), then -(rank - 2).
    assert _points_by_destination(board, PLAYER_X, False, scored) == {(4, 1): 2, (4, 3): 4}


def test_exposed_king_triples_the_reply(board_from):
    board = board_from({(5, 2): 'X', (3, 0): 'o', (0, 7): 'o'})
    # Taking the king scores 3, tripled; every other step leaves a quiet reply.
    assert _weighted_by_destination(board, PLAYER_X, False) == {
        (4, 1): 9, (4, 3): 1, (6, 1): 1, (6, 3): 1,
    }


def test_multi_capture_halves_the_exposure(board_from):
    board = board_from({(6, 1): 'x', (5, 2): 'o', (3, 4): 'o', (1, 6): 'o', (0, 7): 'o'})
    weighted = _weighted_by_destination(board, PLAYER_X, False)
    # Single capture: the reply scores 4 (capture plus escaping a threat), doubled.
    assert weighted[(4, 3)] == 8
    # Double capture: the reply scores 2 and the doubling is halved away.
    assert weighted[(2, 5)] == 2


def test_exposure_multiplier(board_from):
    board = board_from({(4, 1): 'x', (3, 3): 'X'})
    single, double = Move((4, 1), ((5, 2),)), Move((4, 1), ((5, 2), (3, 2)))
    assert exposure_multiplier(board, single, killable=False) == 1
    assert exposure_multiplier(board, single, killable=True) == 2
    assert exposure_multiplier(board, double, killable=True) == 1
    assert exposure_multiplier(board, Move((3, 3), ()), killable=True) == 3
