# checkers/__init__.py
from .board import Board, BoardLoadError, empty_board, load_board, locate_pieces, parse_board
from .bot import NoLegalMoveError, choose_move, select_play
from .match import Match
from .movements import Move, adjacent_positions, calculate_movement
from .play import InvalidSelectionError, Status, get_game_status, manage_play
from .piece import Piece, Rank
