# tests/test_board.py
import pytest

from checkers.board import Board, BoardLoadError, empty_board, load_board, locate_pieces, new_game_board, parse_board
from checkers.constants import PLAYER_O, PLAYER_X
from checkers.piece import Piece, Rank


def test_empty_board_is_eight_by_eight_and_empty():
    board = empty_board()
    assert len(board.board) == 8
    assert all(len(row) == 8 for row in board.board)
    assert all(cell == 0 for row in board.board for cell in row)
    assert board.get_piece(8, 0) is None
    assert board.get_piece(0, -1) is None


def test_starting_positions_fill_dark_squares():
    board = new_game_board(PLAYER_O, PLAYER_X)
    top = board.locate_pieces(PLAYER_O)
    bottom = board.locate_pieces(PLAYER_X)
    assert len(top) == 12 and len(bottom) == 12
    assert all(r < 3 and (r + c) % 2 == 1 for r, c in top)
    assert all(r > 4 and (r + c) % 2 == 1 for r, c in bottom)


def test_locate_pieces_scans_row_major(board_from):
    board = board_from({(4, 5): 'x', (1, 2): 'X', (4, 1): 'x', (3, 0): 'o'})
    assert locate_pieces(board, PLAYER_X) == [(1, 2), (4, 1), (4, 5)]
    assert board.locate_pieces(PLAYER_O) == [(3, 0)]


def test_cell_is_king(board_from):
    board = board_from({(1, 2): 'X', (4, 1): 'x'})
    assert board.cell_is_king((1, 2))
    assert not board.cell_is_king((4, 1))
    assert not board.cell_is_king((0, 0))


def test_custom_starting_position_with_coordinates_and_flag():
    board = Board()
    board.set_custom_starting_position(PLAYER_X, [(5, 0), (6, 1)])
    assert board.locate_pieces(PLAYER_X) == [(5, 0), (6, 1)]
    assert board.get_piece(5, 0) == Piece(PLAYER_X, Rank.NORMAL)

    board.set_custom_starting_position(PLAYER_O, True)
    assert len(board.locate_pieces(PLAYER_O)) == 12


def test_copy_is_independent(board_from):
    board = board_from({(5, 0): 'x'})
    clone = board.copy()
    clone.get_piece(5, 0).make_king()
    clone.clear((5, 0))
    assert board.get_piece(5, 0) == Piece(PLAYER_X)


def test_parse_board_reads_printed_board(board_from):
    board = board_from({(0, 1): 'o', (7, 6): 'X'})
    parsed = parse_board(board.to_text())
    assert parsed == board
    assert parsed.cell_is_king((7, 6))


def test_parse_board_ignores_labels():
    rows = ['| - | - | - | - | - | - | - | - |'] * 8
    rows[2] = '3 | - | o | - | - | - | - | - | - | 3'
    parsed = parse_board('   A   B\n' + '\n'.join(rows))
    assert parsed.locate_pieces(PLAYER_O) == [(2, 1)]


@pytest.mark.parametrize("text", [
    "",
    "| - | x | - | - | - | - | - | - |",
    "\n".join(["| - | q | - | - | - | - | - | - |"] * 8),
    "\n".join(["| - | - | - | - | - | - | - | - |"] * 8),
])
def test_malformed_boards_fail_to_load(text):
    with pytest.raises(BoardLoadError):
        parse_board(text)
    assert load_board(text) is None
