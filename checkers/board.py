# checkers/board.py
import copy
import logging

import pygame

from .constants import (ROWS, COLS, SQUARE_SIZE, PLAYERS, EMPTY_CELL, COLUMN_LABELS, ROW_LABELS,
                        COLOR_SQUARE_DARK, COLOR_SQUARE_LIGHT, DARK_YELLOW)
from .piece import Piece

board_logger = logging.getLogger('board')

VALID_SYMBOLS = (EMPTY_CELL,) + PLAYERS


class BoardLoadError(ValueError):
    """Raised when a text board cannot be turned into a Board."""


class Board:
    def __init__(self):
        self.board = [[0 for _ in range(COLS)] for _ in range(ROWS)]

    def get_piece(self, row, col):
        if 0 <= row < ROWS and 0 <= col < COLS:
            return self.board[row][col]
        return None

    def set_piece(self, coord, piece):
        self.board[coord[0]][coord[1]] = piece

    def clear(self, coord):
        self.board[coord[0]][coord[1]] = 0

    def locate_pieces(self, player):
        """
        Returns the coordinates of every piece owned by `player`, scanning rows
        top to bottom and columns left to right. Callers number pieces in this
        order, so it must stay stable.
        """
        locations = []
        for r, row in enumerate(self.board):
            for c, piece in enumerate(row):
                if piece and piece.player == player:
                    locations.append((r, c))
        return locations

    def cell_is_king(self, coord):
        piece = self.get_piece(*coord)
        return bool(piece) and piece.king

    def set_starting_position(self, player, starts_top):
        rows = range(0, 3) if starts_top else range(ROWS - 3, ROWS)
        for row in rows:
            for col in range(COLS):
                if (row + col) % 2 == 1:
                    self.board[row][col] = Piece(player)
                else:
                    self.board[row][col] = 0

    def set_custom_starting_position(self, player, custom):
        """`custom` is a list of coordinates, or a bool meaning "starts on top"."""
        if isinstance(custom, bool):
            self.set_starting_position(player, custom)
            return
        for r, c in custom:
            self.board[r][c] = Piece(player)

    def copy(self):
        new_board = Board()
        new_board.board = copy.deepcopy(self.board)
        return new_board

    def to_text(self):
        lines = ['    ' + '   '.join(COLUMN_LABELS)]
        for r, row in enumerate(self.board):
            cells = ' | '.join(piece.symbol if piece else EMPTY_CELL for piece in row)
            lines.append(f"{ROW_LABELS[r]} | {cells} | {ROW_LABELS[r]}")
        lines.append(lines[0])
        return '\n'.join(lines)

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self.board == other.board

    def __str__(self):
        return self.to_text()

    def draw(self, win, flipped=False, highlights=()):
        win.fill(COLOR_SQUARE_LIGHT, (0, 0, COLS * SQUARE_SIZE, ROWS * SQUARE_SIZE))
        for r in range(ROWS):
            for c in range(COLS):
                draw_r, draw_c = (ROWS - 1 - r, COLS - 1 - c) if flipped else (r, c)
                if (r + c) % 2 == 1:
                    pygame.draw.rect(win, COLOR_SQUARE_DARK,
                                     (draw_c * SQUARE_SIZE, draw_r * SQUARE_SIZE, SQUARE_SIZE, SQUARE_SIZE))
                if (r, c) in highlights:
                    pygame.draw.rect(win, DARK_YELLOW,
                                     (draw_c * SQUARE_SIZE, draw_r * SQUARE_SIZE, SQUARE_SIZE, SQUARE_SIZE), 3)
                piece = self.board[r][c]
                if piece:
                    piece.draw(win, draw_r, draw_c)


def empty_board():
    return Board()


def locate_pieces(board, player):
    return board.locate_pieces(player)


def parse_board(text):
    """
    Builds a Board from its text form. Only lines holding exactly eight
    '|'-separated cells count as rows, so labels and headers are ignored.
    """
    if not text:
        raise BoardLoadError("No board given.")

    rows = []
    for line in text.split('\n'):
        cells = [cell.strip() for cell in line.strip().split('|')[1:9]]
        if len(cells) == COLS:
            rows.append(cells)

    if len(rows) != ROWS:
        raise BoardLoadError(f"Expected {ROWS} rows, found {len(rows)}.")
    bad = [cell for row in rows for cell in row if cell.lower() not in VALID_SYMBOLS]
    if bad:
        raise BoardLoadError(f"Invalid cell symbols: {', '.join(repr(b) for b in bad)}.")
    if all(cell == EMPTY_CELL for row in rows for cell in row):
        raise BoardLoadError("The board has no pieces.")

    board = Board()
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if cell != EMPTY_CELL:
                board.board[r][c] = Piece.from_symbol(cell)
    return board


def load_board(text):
    """Parses `text`, returning None (and logging why) when it is not a valid board."""
    try:
        return parse_board(text)
    except BoardLoadError as e:
        board_logger.warning(f"Failed to load custom board: {e}")
        return None


def new_game_board(top_player, bottom_player):
    board = Board()
    board.set_starting_position(top_player, True)
    board.set_starting_position(bottom_player, False)
    return board
