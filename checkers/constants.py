# checkers/constants.py
# This file defines constants used throughout the application, including
# UI dimensions, colors, and the board symbols used by the text format.

import pygame

# --- UI Layout & Dimensions ---
SCREEN_WIDTH, SCREEN_HEIGHT = 960, 720
BOARD_SIZE = 720
BOARD_RECT = pygame.Rect(0, 0, BOARD_SIZE, BOARD_SIZE)
SIDE_MENU_WIDTH = SCREEN_WIDTH - BOARD_SIZE
SIDE_MENU_RECT = pygame.Rect(BOARD_SIZE, 0, SIDE_MENU_WIDTH, SCREEN_HEIGHT)

# --- Board Dimensions ---
ROWS, COLS = 8, 8
SQUARE_SIZE = BOARD_SIZE // COLS

# --- Players & Symbols ---
# Lowercase symbols mark normal pieces, uppercase marks kings.
PLAYER_O, PLAYER_X = 'o', 'x'
PLAYERS = (PLAYER_O, PLAYER_X)
EMPTY_CELL = '-'
COLUMN_LABELS = ('A', 'B', 'C', 'D', 'E', 'F', 'G', 'H')
ROW_LABELS = ('1', '2', '3', '4', '5', '6', '7', '8')

# --- Colors ---
COLOR_BG = (50, 50, 50)
COLOR_PANEL_BG = (65, 65, 65)
COLOR_TEXT = (248, 248, 242)
COLOR_BUTTON = (90, 90, 90)
COLOR_BUTTON_HOVER = (110, 110, 110)
COLOR_SQUARE_DARK = (55, 55, 55)
COLOR_SQUARE_LIGHT = (180, 180, 180)
DARK_YELLOW = (200, 180, 0)
GREY = (128, 128, 128)
COLOR_PLAYER = {
    PLAYER_O: (248, 248, 242),
    PLAYER_X: (255, 85, 85),
}


def opponent_of(player):
    return PLAYER_X if player == PLAYER_O else PLAYER_O
