# tests/conftest.py
import pytest

from checkers.board import Board
from checkers.piece import Piece


def make_board(pieces):
    """Board from {(row, col): symbol}; uppercase symbols are kings."""
    board = Board()
    for coord, symbol in pieces.items():
        board.set_piece(coord, Piece.from_symbol(symbol))
    return board


@pytest.fixture
def board_from():
    return make_board
