# checkers/piece.py
import math
from enum import Enum

import pygame

from .constants import SQUARE_SIZE, GREY, DARK_YELLOW, COLOR_PLAYER


class Rank(Enum):
    NORMAL = 'normal'
    KING = 'king'


class Piece:
    PADDING = 15
    OUTLINE = 2

    def __init__(self, player, rank=Rank.NORMAL):
        self.player = player
        self.rank = rank

    @property
    def king(self):
        return self.rank == Rank.KING

    @property
    def symbol(self):
        """Text symbol of the piece: uppercase for kings."""
        return self.player.upper() if self.king else self.player

    @classmethod
    def from_symbol(cls, symbol):
        return cls(symbol.lower(), Rank.KING if symbol.isupper() else Rank.NORMAL)

    def copy(self):
        """Creates a new, independent Piece instance with the same attributes."""
        return Piece(self.player, self.rank)

    def make_king(self):
        self.rank = Rank.KING

    def __eq__(self, other):
        if not isinstance(other, Piece):
            return NotImplemented
        return self.player == other.player and self.rank == other.rank

    def __hash__(self):
        return hash((self.player, self.rank))

    def __repr__(self):
        return f"Piece({self.symbol!r})"

    def draw(self, win, r, c):
        x = SQUARE_SIZE * c + SQUARE_SIZE // 2
        y = SQUARE_SIZE * r + SQUARE_SIZE // 2
        radius = SQUARE_SIZE // 2 - self.PADDING
        pygame.draw.circle(win, GREY, (x, y), radius + self.OUTLINE)
        pygame.draw.circle(win, COLOR_PLAYER[self.player], (x, y), radius)
        if self.king:
            num_points = 5
            outer_radius = radius - 8
            inner_radius = outer_radius // 2
            angle = math.pi / num_points
            points = []
            for i in range(num_points * 2):
                rad = outer_radius if i % 2 == 0 else inner_radius
                current_angle = i * angle - (math.pi / 2)
                points.append((x + rad * math.cos(current_angle), y + rad * math.sin(current_angle)))
            pygame.draw.polygon(win, DARK_YELLOW, points)
