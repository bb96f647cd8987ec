# game_states.py
import pygame
import logging
from checkers.constants import (COLOR_BG, COLOR_BUTTON, COLOR_BUTTON_HOVER, COLOR_TEXT, SCREEN_WIDTH,
                                PLAYER_O, PLAYER_X)
from checkers.match import HUMAN, BOT

logger = logging.getLogger('gameflow')


class Button:
    """A simple, clickable button class that can accept arguments for its callback."""
    def __init__(self, text, pos, size, callback, callback_args=None):
        self.text = text
        self.pos = pos
        self.size = size
        self.callback = callback
        self.callback_args = callback_args
        self.rect = pygame.Rect(pos, size)
        self.font = pygame.font.SysFont(None, 24)
        self.hovered = False

    def draw(self, screen):
        mouse_pos = pygame.mouse.get_pos()
        self.hovered = self.rect.collidepoint(mouse_pos)
        button_color = COLOR_BUTTON_HOVER if self.hovered else COLOR_BUTTON
        pygame.draw.rect(screen, button_color, self.rect)
        text_surf = self.font.render(self.text, True, COLOR_TEXT)
        text_rect = text_surf.get_rect(center=self.rect.center)
        screen.blit(text_surf, text_rect)

    def is_clicked(self, pos):
        return self.rect.collidepoint(pos)

    def click(self):
        if self.callback_args is not None:
            self.callback(self.callback_args)
        else:
            self.callback()


class BaseState:
    """A base class for all game states."""
    def __init__(self):
        self.done = False
    def handle_event(self, event):
        pass
    def update(self):
        pass
    def draw(self, screen):
        pass
    def reset(self):
        self.done = False


class PlayerSelectionScreen(BaseState):
    """The main menu: pick who sits on each side, then start."""
    def __init__(self, screen, seats=None):
        super().__init__()
        self.screen = screen
        self.font = pygame.font.SysFont('Arial', 36)
        self.next_state = "game"
        self.seats = dict(seats or {PLAYER_X: HUMAN, PLAYER_O: BOT})
        x = SCREEN_WIDTH / 2 - 125
        self.buttons = [
            Button('', (x, 250), (250, 50), self.toggle_seat, PLAYER_X),
            Button('', (x, 320), (250, 50), self.toggle_seat, PLAYER_O),
            Button('Start Game', (x, 420), (250, 50), self.start_game),
        ]
        self._refresh_labels()

    def _refresh_labels(self):
        self.buttons[0].text = f"x: {self.seats[PLAYER_X]}"
        self.buttons[1].text = f"o: {self.seats[PLAYER_O]}"

    def toggle_seat(self, player):
        self.seats[player] = BOT if self.seats[player] == HUMAN else HUMAN
        self._refresh_labels()

    def start_game(self):
        logger.info(f"Starting game: x is {self.seats[PLAYER_X]}, o is {self.seats[PLAYER_O]}.")
        self.done = True

    def handle_event(self, event):
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            for button in self.buttons:
                if button.is_clicked(event.pos):
                    button.click()

    def draw(self, screen):
        screen.fill(COLOR_BG)
        title_text = self.font.render("Checkers", True, COLOR_TEXT)
        screen.blit(title_text, (screen.get_width() / 2 - title_text.get_width() / 2, 150))
        for button in self.buttons:
            button.draw(screen)
