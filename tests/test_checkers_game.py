# tests/test_checkers_game.py
import argparse
import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from checkers.bot import select_play
from checkers.checkers_game import CheckersGame
from checkers.constants import PLAYER_O, PLAYER_X, SQUARE_SIZE
from checkers.match import BOT, HUMAN
from checkers.movements import Move


def _square(row, col):
    return (col * SQUARE_SIZE + SQUARE_SIZE // 2, row * SQUARE_SIZE + SQUARE_SIZE // 2)


@pytest.fixture
def make_game():
    pygame.font.init()

    def make(seats, board_text=None):
        return CheckersGame(None, argparse.Namespace(seed=0), seats, board_text)
    yield make
    pygame.font.quit()


def test_clicks_reach_every_chain_to_the_same_square(make_game, board_from):
    board = board_from({(6, 2): 'X', (5, 1): 'o', (3, 1): 'o', (5, 3): 'o', (3, 3): 'o'})
    game = make_game({PLAYER_X: HUMAN, PLAYER_O: HUMAN}, board.to_text())

    game._handle_board_click(_square(6, 2))
    game._handle_board_click(_square(2, 2))
    assert game.pending_moves == [Move((2, 2), ((5, 1), (3, 1))), Move((2, 2), ((5, 3), (3, 3)))]
    assert game.match.record.plays == []

    game._cycle_pending()
    game._handle_board_click(_square(2, 2))
    assert game.match.board.locate_pieces(PLAYER_O) == [(3, 1), (5, 1)]
    assert game.match.current_player == PLAYER_O
    assert game.pending_moves == []


def test_single_move_plays_on_first_click(make_game):
    game = make_game({PLAYER_X: HUMAN, PLAYER_O: HUMAN})
    game._handle_board_click(_square(5, 0))
    game._handle_board_click(_square(4, 1))
    assert game.match.record.plays[0]['destination'] == [4, 1]


def test_bot_move_dropped_when_seat_turns_human(make_game):
    game = make_game({PLAYER_X: BOT, PLAYER_O: HUMAN})
    game.bot_is_thinking = True
    game.bot_move_queue.put(select_play(game.match.board, PLAYER_X, False, rng=random.Random(0)))
    game._toggle_seat(PLAYER_X)

    game._check_for_bot_move()
    assert not game.bot_is_thinking
    assert game.match.record.plays == []
    assert game.match.current_player == PLAYER_X


def test_bot_move_applied_for_bot_seat(make_game):
    game = make_game({PLAYER_X: BOT, PLAYER_O: HUMAN})
    game.bot_is_thinking = True
    game.bot_move_queue.put(select_play(game.match.board, PLAYER_X, False, rng=random.Random(0)))

    game._check_for_bot_move()
    assert len(game.match.record.plays) == 1
    assert game.match.current_player == PLAYER_O
