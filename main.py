# main.py
import pygame
import logging
import sys
import argparse

from checkers.constants import SCREEN_WIDTH, SCREEN_HEIGHT, PLAYER_O, PLAYER_X
from checkers.checkers_game import CheckersGame
from checkers.debug import setup_logging, add_debug_arguments
from checkers.match import HUMAN, BOT
from game_states import PlayerSelectionScreen

SCREEN_SIZE = (SCREEN_WIDTH, SCREEN_HEIGHT)
logger = logging.getLogger('gameflow')


class App:
    def __init__(self, args, board_text=None):
        self.args = args
        self.board_text = board_text
        pygame.init()
        self.screen = pygame.display.set_mode(SCREEN_SIZE)
        pygame.display.set_caption("Checkers")
        self.clock = pygame.time.Clock()
        self.running = True

        seats = {PLAYER_X: args.x, PLAYER_O: args.o}
        self.states = {
            "player_selection": PlayerSelectionScreen(self.screen, seats),
            "game": CheckersGame(self.screen, self.args, seats, board_text),
        }
        self.state = self.states["player_selection"]

    def run(self):
        while self.running:
            self.handle_events()
            self.update()
            self.draw()
            self.clock.tick(60)

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            self.state.handle_event(event)

    def update(self):
        self.state.update()
        if self.state.done:
            self._handle_state_transition()

    def draw(self):
        self.state.draw(self.screen)
        pygame.display.flip()

    def _handle_state_transition(self):
        if isinstance(self.state, PlayerSelectionScreen):
            seats = self.state.seats
            self.state.reset()
            self.states["game"] = CheckersGame(self.screen, self.args, seats, self.board_text)
            self.state = self.states["game"]
        elif isinstance(self.state, CheckersGame):
            self.state = self.states["player_selection"]


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description="A checkers game with a heuristic bot.")
    add_debug_arguments(parser)
    parser.add_argument('--board', type=str, default=None, help='Path to a text board to start from.')
    parser.add_argument('--x', choices=(HUMAN, BOT), default=HUMAN, help='Who plays x (moves first).')
    parser.add_argument('--o', choices=(HUMAN, BOT), default=BOT, help='Who plays o.')
    parser.add_argument('--seed', type=int, default=None, help='Seed for the bot\'s random tie-breaks.')

    args = parser.parse_args()
    setup_logging(args)

    board_text = None
    if args.board:
        with open(args.board, 'r') as f:
            board_text = f.read()

    main_app = App(args, board_text)
    main_app.run()

    pygame.quit()
    sys.exit()
