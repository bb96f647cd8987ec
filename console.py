# console.py
# Text front-end: plays a game at the terminal, with either seat human or bot.

import argparse
import logging
import random
import sys

from checkers.board import load_board
from checkers.commands import Command, HELP_TEXT, parse_command
from checkers.constants import PLAYER_O, PLAYER_X
from checkers.debug import add_debug_arguments, setup_logging
from checkers.match import Match, HUMAN, BOT
from checkers.notation import find_label_index, to_label
from checkers.play import Status

logger = logging.getLogger('gameflow')


class ConsoleGame:
    def __init__(self, seats, board_text=None, rng=None, input_func=input, output=print):
        self.seats = seats
        self.rng = rng or random.Random()
        self.input = input_func
        self.print = output
        board = load_board(board_text) if board_text else None
        self.match = Match(board=board)

    def prompt(self, message='> '):
        """Reads an answer, handling special commands until a real one is typed."""
        while True:
            response = self.input(message).strip()
            command = parse_command(response)
            if command == Command.HELP:
                self.print(HELP_TEXT)
            elif command == Command.BOARD:
                self.print_board()
            elif response:
                return response

    def ask_yes_no(self, message):
        while True:
            response = self.prompt(message).lower()
            if response in ('y', 'n'):
                return response == 'y'

    def ask_index(self, coords, allows_back=False):
        """0-based index into `coords`, or -1 for "go back"."""
        while True:
            response = self.prompt()
            if allows_back and response == '0':
                return -1
            label_index = find_label_index(coords, response)
            if label_index > -1:
                return label_index
            if response.isdigit() and 1 <= int(response) <= len(coords):
                return int(response) - 1

    def print_board(self):
        self.print()
        self.print(self.match.board.to_text())
        self.print()

    def run(self):
        self.print()
        self.print('Welcome to a new game of * CHECKERS *')
        self.print()
        self.print(f'- Player "{PLAYER_X}" will always move first')
        self.print('- Each time a new game starts, the starting sides swap')
        self.print()
        if not self.ask_yes_no('Ready to start? (y/n) '):
            self.print('See you next time!')
            return

        while True:
            self.play_game()
            if not self.ask_yes_no('Do you want to play again? (y/n) '):
                break
            self.match = self.match.rematch()
        self.print()
        self.print('See you next time!')

    def play_game(self):
        self.print_board()
        self.print(HELP_TEXT)
        while True:
            game_status = self.match.status()
            if game_status.result == Status.FINISHED:
                self.print(f'* The WINNER is "{game_status.winner}" !! *')
                logger.info(f"Game finished, winner: {game_status.winner}.")
                return game_status
            if game_status.result == Status.TIED:
                self.print('* The game is TIED !! *')
                logger.info("Game tied.")
                return game_status

            player = self.match.current_player
            self.print(f'- Player "{player}" | turn {self.match.turn_number} -')
            if self.seats[player] == BOT:
                piece, move = self.match.bot_move(rng=self.rng)
                self.print(f'Bot moved {to_label(piece)} to {to_label(move.coordinate)}')
            else:
                self.human_turn()
            self.print_board()

    def human_turn(self):
        controller = self.match.controller()
        while True:
            self.print()
            self.print('Select a piece to play:')
            for i, coord in enumerate(controller.locations):
                self.print(f'{i + 1}) {to_label(coord)}')
            selection = controller.select(self.ask_index(controller.locations))

            self.print('Select a place to play into:')
            self.print('0) go back')
            for i, move in enumerate(selection.options):
                killed = ''
                if move.captured:
                    killed = f" // Pieces killed: {', '.join(to_label(c) for c in move.captured)}"
                self.print(f'{i + 1}) {to_label(move.coordinate)}{killed}')
            option = self.ask_index([move.coordinate for move in selection.options], allows_back=True)
            if option == -1:
                continue
            self.match.play(selection.piece, selection.options[option])
            return


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play checkers in the terminal.")
    parser.add_argument('--board', type=str, default=None, help='Path to a text board to start from.')
    parser.add_argument(f'--{PLAYER_X}', dest=PLAYER_X, choices=(HUMAN, BOT), default=HUMAN, help='Who plays x.')
    parser.add_argument(f'--{PLAYER_O}', dest=PLAYER_O, choices=(HUMAN, BOT), default=BOT, help='Who plays o.')
    parser.add_argument('--seed', type=int, default=None, help='Seed for the bot\'s random tie-breaks.')
    add_debug_arguments(parser)
    args = parser.parse_args(argv)
    setup_logging(args)

    board_text = None
    if args.board:
        with open(args.board, 'r') as f:
            board_text = f.read()

    seats = {PLAYER_X: getattr(args, PLAYER_X), PLAYER_O: getattr(args, PLAYER_O)}
    game = ConsoleGame(seats, board_text=board_text, rng=random.Random(args.seed))
    try:
        game.run()
    except (KeyboardInterrupt, EOFError):
        print()
        print('See you next time!')
    return 0


if __name__ == '__main__':
    sys.exit(main())
