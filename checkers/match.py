# checkers/match.py
# A single game session: who sits on top, who moves first, whose turn it is,
# plus a record of every play for dumping once the game is over.

import logging

from .board import new_game_board
from .bot import choose_move
from .constants import PLAYERS, PLAYER_O, PLAYER_X, opponent_of
from .notation import format_move
from .play import Status, get_game_status, manage_play

logger = logging.getLogger('gameflow')

HUMAN, BOT = 'human', 'bot'


class GameRecord:
    def __init__(self, first_player, top_player, board):
        self.first_player = first_player
        self.top_player = top_player
        self.winner = None
        self.status = 'playing'
        self.initial_pieces = {
            player: [{'location': list(coord), 'is_king': board.cell_is_king(coord)}
                     for coord in board.locate_pieces(player)]
            for player in PLAYERS
        }
        self.plays = []

    def add_action(self, board, player, piece, move):
        """Called after `move` was executed on `board`."""
        self.plays.append({
            'player': player,
            'piece': {'location': list(piece), 'is_king': board.cell_is_king(move.coordinate)},
            'destination': list(move.coordinate),
            'captured': [list(coord) for coord in move.captured],
        })

    def set_result(self, game_status):
        self.status = game_status.result.value if game_status.result != Status.ONGOING else 'playing'
        self.winner = game_status.winner

    def to_dict(self):
        return {
            'first_player': self.first_player,
            'top_player': self.top_player,
            'winner': self.winner,
            'status': self.status,
            'initial_pieces': self.initial_pieces,
            'plays': list(self.plays),
        }


class Match:
    """
    Holds the player order for one game. The top player's normal pieces
    advance down the board (increasing row index), the other side's up.
    """

    def __init__(self, top_player=PLAYER_O, first_player=PLAYER_X, board=None, play_count=0):
        if top_player not in PLAYERS or first_player not in PLAYERS:
            raise ValueError(f"Players must be among {PLAYERS}.")
        self.top_player = top_player
        self.bottom_player = opponent_of(top_player)
        self.first_player = first_player
        self.board = board if board is not None else new_game_board(self.top_player, self.bottom_player)
        self.turn_counter = play_count
        self.current_player = first_player if play_count % 2 == 0 else opponent_of(first_player)
        self.record = GameRecord(first_player, top_player, self.board)
        self.history = []

    def starts_top(self, player):
        return player == self.top_player

    @property
    def turn_number(self):
        return self.turn_counter // 2 + 1

    def status(self):
        game_status = get_game_status(self.board, self.current_player, self.starts_top(self.current_player))
        if game_status.result != Status.ONGOING:
            self.record.set_result(game_status)
        return game_status

    def controller(self):
        return manage_play(self.board, self.current_player, self.starts_top(self.current_player))

    def play(self, piece, move):
        """Executes a move for the side to move and passes the turn."""
        self.history.append((self.board.copy(), self.current_player, self.turn_counter))
        self.controller().play(piece, move)
        self._finish_turn(piece, move)
        return move

    def bot_move(self, rng=None):
        self.history.append((self.board.copy(), self.current_player, self.turn_counter))
        piece, move = choose_move(self.board, self.current_player, self.starts_top(self.current_player), rng=rng)
        self._finish_turn(piece, move)
        return piece, move

    def _finish_turn(self, piece, move):
        self.record.add_action(self.board, self.current_player, piece, move)
        logger.debug(f"Turn {self.turn_number}, {self.current_player}: {format_move(piece, move)}")
        self.turn_counter += 1
        self.current_player = opponent_of(self.current_player)

    def undo(self):
        """Takes back the last play. Returns False when there is nothing to undo."""
        if not self.history:
            return False
        self.board, self.current_player, self.turn_counter = self.history.pop()
        self.record.plays.pop()
        self.record.status, self.record.winner = 'playing', None
        return True

    def rematch(self):
        """A fresh match with the starting sides swapped; the first mover stays the same."""
        return Match(top_player=self.bottom_player, first_player=self.first_player)
