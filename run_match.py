# run_match.py
# This script runs a headless match between two bots, swapping starting
# sides every game, and logs the running score.

import argparse
import json
import logging
import random

from checkers.board import load_board
from checkers.constants import PLAYER_O, PLAYER_X
from checkers.debug import add_debug_arguments, setup_logging
from checkers.match import Match
from checkers.play import Status

logger = logging.getLogger('gameflow')

MOVE_LIMIT = 300


class HeadlessGame:
    """Plays a bot-vs-bot checkers game without any front-end."""

    def __init__(self, match, rng=None, move_limit=MOVE_LIMIT):
        self.match = match
        self.rng = rng or random.Random()
        self.move_limit = move_limit

    def play_game(self):
        """Plays until the game ends, returning the winner ('o', 'x') or 'draw'."""
        for _ in range(self.move_limit):
            game_status = self.match.status()
            if game_status.result == Status.FINISHED:
                logger.info(f"Game over. Winner: {game_status.winner.upper()}")
                return game_status.winner
            if game_status.result == Status.TIED:
                logger.info("Game over. Neither side can move.")
                return 'draw'
            self.match.bot_move(rng=self.rng)

        logger.info(f"Game over. {self.move_limit} move limit reached. Declaring a draw.")
        return 'draw'


def run_match(args):
    setup_logging(args)
    rng = random.Random(args.seed)

    board_text = None
    if args.board:
        with open(args.board, 'r') as f:
            board_text = f.read()

    scores = {PLAYER_O: 0, PLAYER_X: 0, 'draw': 0}
    match = None
    records = []
    for i in range(args.games):
        logger.info(f"--- Starting Game {i + 1} / {args.games} ---")
        if match is None:
            match = Match(board=load_board(board_text) if board_text else None)
        else:
            match = match.rematch()
        winner = HeadlessGame(match, rng, args.move_limit).play_game()
        scores[winner] += 1
        records.append(match.record.to_dict())
        logger.info(f"Score= o: {scores[PLAYER_O]} - x: {scores[PLAYER_X]} - Draws: {scores['draw']}")

    logger.info("Match finished.")
    if args.record:
        with open(args.record, 'w') as f:
            json.dump(records, f, indent=1)
        logger.info(f"Game records written to {args.record}.")
    return scores


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description="Run a series of bot-vs-bot checkers games.")
    parser.add_argument('--games', type=int, default=2, help='Number of games to play.')
    parser.add_argument('--move-limit', type=int, default=MOVE_LIMIT, help='Moves before a game is drawn.')
    parser.add_argument('--board', type=str, default=None, help='Path to a text board for the first game.')
    parser.add_argument('--record', type=str, default=None, help='Write the game records as JSON to this path.')
    parser.add_argument('--seed', type=int, default=None, help='Seed for the bots\' random tie-breaks.')
    add_debug_arguments(parser)

    args = parser.parse_args()
    run_match(args)
