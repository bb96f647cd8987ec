# checkers/play.py
# Turn handling: selecting and executing moves, and deciding whether the game is over.

import logging
from collections import namedtuple
from enum import Enum

from .constants import ROWS, opponent_of
from .movements import calculate_movement

logger = logging.getLogger('gameflow')

PlayableOption = namedtuple('PlayableOption', ['piece', 'index', 'options'])
GameStatus = namedtuple('GameStatus', ['result', 'winner'])


class Status(Enum):
    ONGOING = 'waiting'
    FINISHED = 'finished'
    TIED = 'tied'


class InvalidSelectionError(IndexError):
    """A piece or move index outside the offered list."""


def _check_index(index, items, what):
    if not isinstance(index, int) or not 0 <= index < len(items):
        raise InvalidSelectionError(f"Invalid {what} index {index!r}; {len(items)} available.")


def promotion_row(starts_top):
    """The far row, where a player's normal pieces become kings."""
    return ROWS - 1 if starts_top else 0


class Selection:
    def __init__(self, controller, piece):
        self.controller = controller
        self.piece = piece
        self.options = calculate_movement(controller.board, controller.player, piece, controller.starts_top)

    def moves_to(self, coord):
        """Every option landing on `coord`; distinct capture chains can share a landing square."""
        return [move for move in self.options if move.coordinate == coord]

    def execute(self, option_index):
        """Applies the chosen move to the board and returns it."""
        _check_index(option_index, self.options, "move")
        move = self.options[option_index]
        board = self.controller.board
        moving_piece = board.get_piece(*self.piece)

        for coord in move.captured:
            board.clear(coord)
        board.clear(self.piece)
        board.set_piece(move.coordinate, moving_piece)

        if move.coordinate[0] == promotion_row(self.controller.starts_top) and not moving_piece.king:
            moving_piece.make_king()
            logger.debug(f"{self.controller.player} piece promoted at {move.coordinate}.")
        return move


class PlayController:
    def __init__(self, board, player, starts_top):
        self.board = board
        self.player = player
        self.starts_top = starts_top
        self.locations = board.locate_pieces(player)

    def select(self, piece_index):
        _check_index(piece_index, self.locations, "piece")
        return Selection(self, self.locations[piece_index])

    def play(self, piece, move):
        """Executes `move` for the piece at `piece`, resolving both to indices."""
        if piece not in self.locations:
            raise InvalidSelectionError(f"No {self.player} piece at {piece}.")
        selection = self.select(self.locations.index(piece))
        if move not in selection.options:
            raise InvalidSelectionError(f"{move} is not a legal move for {piece}.")
        return selection.execute(selection.options.index(move))

    def playable_pieces(self):
        return playable_pieces(self.board, self.player, self.locations, self.starts_top)


def manage_play(board, player, starts_top):
    return PlayController(board, player, starts_top)


def playable_pieces(board, player, locations, starts_top):
    """Pairs each piece with its moves, keeping only pieces that can move."""
    options = (PlayableOption(piece, i, calculate_movement(board, player, piece, starts_top))
               for i, piece in enumerate(locations))
    return [option for option in options if option.options]


def simulate_play(board, player, starts_top, piece_index, option_index):
    """Plays a move on a copy of `board` and returns the copy."""
    board_copy = board.copy()
    manage_play(board_copy, player, starts_top).select(piece_index).execute(option_index)
    return board_copy


def can_move(board, player, starts_top):
    return any(calculate_movement(board, player, piece, starts_top) for piece in board.locate_pieces(player))


def get_game_status(board, player, starts_top):
    opponent = opponent_of(player)

    for side in (player, opponent):
        if not board.locate_pieces(side):
            return GameStatus(Status.FINISHED, opponent_of(side))

    if can_move(board, player, starts_top):
        return GameStatus(Status.ONGOING, None)

    if can_move(board, opponent, not starts_top):
        return GameStatus(Status.FINISHED, opponent)
    return GameStatus(Status.TIED, None)

