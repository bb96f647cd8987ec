# checkers/movements.py
# Move generation: diagonal neighbours, quiet steps and capture chains.

import logging
from collections import namedtuple

from .constants import opponent_of

moves_logger = logging.getLogger('moves')

UP, DOWN, BOTH = 'up', 'down', 'both'
VERTICAL_STEP = {UP: -1, DOWN: 1}

# `coordinate` is the landing square, `captured` the jumped-over squares in order.
Move = namedtuple('Move', ['coordinate', 'captured'])


def _is_open(board, opponent, r, c):
    piece = board.get_piece(r, c)
    if piece is None:
        return False
    return not piece or piece.player == opponent


def adjacent_positions(board, opponent, coord, direction=BOTH):
    """
    Diagonal neighbours of `coord` that are empty or held by `opponent`.
    Returns {UP: [...], DOWN: [...]}, left before right; a direction that
    was not asked for is None.
    """
    r, c = coord
    found = {UP: None, DOWN: None}
    for vertical, dr in VERTICAL_STEP.items():
        if direction not in (BOTH, vertical):
            continue
        found[vertical] = [(r + dr, c + dc) for dc in (-1, 1) if _is_open(board, opponent, r + dr, c + dc)]
    return found


def forward_direction(starts_top):
    return DOWN if starts_top else UP


def calculate_movement(board, player, piece, starts_top):
    """Returns every legal Move for the piece at `piece`."""
    opponent = opponent_of(player)
    is_king = board.cell_is_king(piece)
    direction = BOTH if is_king else forward_direction(starts_top)

    moves = []
    for entries in adjacent_positions(board, opponent, piece, direction).values():
        for entry in entries or ():
            if board.get_piece(*entry):
                heading = (entry[0] - piece[0], entry[1] - piece[1])
                moves.extend(calculate_jumps(board, opponent, entry, heading, is_king))
            else:
                moves.append(Move(entry, ()))

    moves_logger.debug(f"{len(moves)} move(s) for {player} piece at {piece}.")
    return moves


def calculate_jumps(board, opponent, over, heading, is_king, captured=()):
    """
    Capture chains starting with a jump over the opponent piece at `over`,
    travelling along `heading` (a (row, col) unit step). Every landing square
    yields its own Move, followed by the longer chains reachable from it.

    Captured pieces stay on the board while the chain is explored: they block
    landings and are never jumped twice. `captured` is a tuple so each branch
    only carries its own ancestors.
    """
    landing = (over[0] + heading[0], over[1] + heading[1])
    target = board.get_piece(*landing)
    if target is None or target:
        return []

    chain = captured + (over,)
    moves = [Move(landing, chain)]

    # Normal pieces keep the vertical direction they jumped in.
    direction = BOTH if is_king else (UP if heading[0] < 0 else DOWN)
    for entries in adjacent_positions(board, opponent, landing, direction).values():
        for entry in entries or ():
            if entry in chain or not board.get_piece(*entry):
                continue
            next_heading = (entry[0] - landing[0], entry[1] - landing[1])
            moves.extend(calculate_jumps(board, opponent, entry, next_heading, is_king, chain))
    return moves
