# checkers/checkers_game.py
import pygame
import logging
import threading
import queue
import random
from .board import load_board
from .bot import select_play
from .constants import (SQUARE_SIZE, ROWS, COLS, BOARD_RECT, SIDE_MENU_RECT, PLAYER_O, PLAYER_X,
                        COLOR_PANEL_BG, COLOR_TEXT, COLOR_BG, DARK_YELLOW, COLOR_PLAYER)
from .match import Match, HUMAN, BOT
from .notation import to_label
from .play import Status
from game_states import Button

logger = logging.getLogger('gameflow')


class CheckersGame:
    def __init__(self, screen, args, seats=None, board_text=None):
        self.screen = screen
        self.args = args
        self.board_text = board_text
        # Seats & bot threading
        self.seats = dict(seats or {PLAYER_X: HUMAN, PLAYER_O: BOT})
        self.rng = random.Random(getattr(args, 'seed', None))
        self.bot_move_queue = queue.Queue()
        self.bot_is_thinking = False
        # Game state
        board = load_board(board_text) if board_text else None
        self.match = Match(board=board)
        self.selection = None
        self.pending_moves, self.pending_index = [], 0
        self.last_move = None
        self.game_status = self.match.status()
        self.board_flipped = False
        # UI
        self.font = pygame.font.SysFont("Consolas", 18)
        self.large_font = pygame.font.SysFont("Consolas", 24)
        self.done, self.next_state = False, None
        self._create_buttons()

    def _create_buttons(self):
        x = SIDE_MENU_RECT.left + 15
        y_bottom = SIDE_MENU_RECT.bottom - 220
        button_width = SIDE_MENU_RECT.width - 30
        button_height = 40
        spacing = 50

        self.buttons = {
            "x_seat": Button("<>", (x + button_width - 32, 20), (32, 32), self._toggle_seat, PLAYER_X),
            "o_seat": Button("<>", (x + button_width - 32, 70), (32, 32), self._toggle_seat, PLAYER_O),
            "menu": Button("Menu", (x, y_bottom), (button_width, button_height), self.back_to_menu),
            "reset": Button("Reset", (x, y_bottom + spacing), (button_width, button_height), self.reset),
            "flip_board": Button("Flip Board", (x, y_bottom + spacing * 2), (button_width, button_height), self.flip_board),
            "undo": Button("Undo", (x, y_bottom + spacing * 3), (button_width, button_height), self.undo),
        }

    @property
    def is_over(self):
        return self.game_status.result != Status.ONGOING

    def handle_event(self, event):
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            pos = event.pos
            if SIDE_MENU_RECT.collidepoint(pos):
                for btn in self.buttons.values():
                    if btn.is_clicked(pos):
                        btn.click()
            elif BOARD_RECT.collidepoint(pos):
                if self.seats[self.match.current_player] == HUMAN:
                    self._handle_board_click(pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 3:
            self._cycle_pending()

    def update(self):
        self._check_for_bot_move()
        if self.seats[self.match.current_player] == BOT and not self.bot_is_thinking and not self.is_over:
            self._start_bot_move()

    def draw(self, screen):
        screen.fill(COLOR_BG)
        highlights = set()
        if self.pending_moves:
            move = self.pending_moves[self.pending_index]
            highlights.update((self.selection.piece, move.coordinate) + move.captured)
        elif self.selection:
            highlights.add(self.selection.piece)
            highlights.update(move.coordinate for move in self.selection.options)
        elif self.last_move:
            highlights.update(self.last_move)
        self.match.board.draw(screen, self.board_flipped, highlights)
        self._draw_side_panel()

    def reset(self):
        self.__init__(self.screen, self.args, self.seats, self.board_text)

    def back_to_menu(self):
        self.done, self.next_state = True, "player_selection"

    def flip_board(self):
        self.board_flipped = not self.board_flipped

    def _toggle_seat(self, player):
        self.seats[player] = BOT if self.seats[player] == HUMAN else HUMAN
        self.selection = None
        self.pending_moves, self.pending_index = [], 0

    def undo(self):
        if self.bot_is_thinking:
            return
        # Take back plays until a human is to move again.
        while self.match.undo():
            if self.seats[self.match.current_player] == HUMAN:
                break
        self.selection, self.last_move = None, None
        self.pending_moves, self.pending_index = [], 0
        self.game_status = self.match.status()

    def _draw_side_panel(self):
        pygame.draw.rect(self.screen, COLOR_PANEL_BG, SIDE_MENU_RECT)
        pygame.draw.line(self.screen, (20, 20, 20), SIDE_MENU_RECT.topleft, SIDE_MENU_RECT.bottomleft, 2)
        x = SIDE_MENU_RECT.left + 15
        for i, player in enumerate((PLAYER_X, PLAYER_O)):
            label = self.large_font.render(f"{player}: {self.seats[player]}", True, COLOR_PLAYER[player])
            self.screen.blit(label, (x, 25 + i * 50))

        if self.game_status.result == Status.FINISHED:
            status_text = f"Winner: {self.game_status.winner}"
        elif self.game_status.result == Status.TIED:
            status_text = "Tied game"
        elif self.bot_is_thinking:
            status_text = "Bot is thinking..."
        elif self.pending_moves:
            status_text = f"Chain {self.pending_index + 1}/{len(self.pending_moves)}, right-click: next"
        else:
            status_text = f"Turn {self.match.turn_number}: {self.match.current_player}"
        status_surf = self.large_font.render(status_text, True, DARK_YELLOW)
        self.screen.blit(status_surf, (x, 130))

        for i, play in enumerate(self.match.record.plays[-12:]):
            text = f"{play['player']} {to_label(play['piece']['location'])}-{to_label(play['destination'])}"
            if play['captured']:
                text += f" x{len(play['captured'])}"
            surf = self.font.render(text, True, COLOR_TEXT)
            self.screen.blit(surf, (x, 170 + i * 20))

        for btn in self.buttons.values():
            btn.draw(self.screen)

    def _handle_board_click(self, pos):
        if self.bot_is_thinking or self.is_over:
            return
        row, col = pos[1] // SQUARE_SIZE, pos[0] // SQUARE_SIZE
        if self.board_flipped:
            row, col = ROWS - 1 - row, COLS - 1 - col

        # A second click on the landing square plays the chain on show.
        if self.pending_moves and self.pending_moves[0].coordinate == (row, col):
            self._apply_move(self.selection.piece, self.pending_moves[self.pending_index])
            return
        self.pending_moves, self.pending_index = [], 0

        if self.selection:
            matching = self.selection.moves_to((row, col))
            if len(matching) == 1:
                self._apply_move(self.selection.piece, matching[0])
                return
            if matching:
                self.pending_moves = matching
                return

        controller = self.match.controller()
        if (row, col) in controller.locations:
            self.selection = controller.select(controller.locations.index((row, col)))
        else:
            self.selection = None

    def _cycle_pending(self):
        """Shows the next capture chain ending on the chosen square."""
        if self.pending_moves:
            self.pending_index = (self.pending_index + 1) % len(self.pending_moves)

    def _apply_move(self, piece, move):
        self.match.play(piece, move)
        self.selection = None
        self.pending_moves, self.pending_index = [], 0
        self.last_move = (piece, move.coordinate)
        self.game_status = self.match.status()

    def _start_bot_move(self):
        self.bot_is_thinking = True
        player = self.match.current_player
        thread = threading.Thread(
            target=self._run_bot_calculation,
            args=(self.match.board.copy(), player, self.match.starts_top(player), self.bot_move_queue),
            daemon=True
        )
        thread.start()

    def _run_bot_calculation(self, board, player, starts_top, results):
        try:
            results.put(select_play(board, player, starts_top, rng=self.rng))
        except Exception as e:
            logger.error(f"BOT_THREAD: CRITICAL ERROR: {e}", exc_info=True)
            results.put(None)

    def _check_for_bot_move(self):
        if self.bot_is_thinking and not self.bot_move_queue.empty():
            result = self.bot_move_queue.get()
            self.bot_is_thinking = False
            if result and self.seats[self.match.current_player] != BOT:
                logger.info(f"Discarding bot move for {self.match.current_player}; the seat is now human.")
            elif result:
                self._apply_move(*result)
