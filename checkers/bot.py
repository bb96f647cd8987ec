# checkers/bot.py
# The heuristic bot: every legal move gets points for what it captures, what it
# saves from capture and whether it crowns a king, then one simulated reply from
# the opponent penalises moves that hand over a strong answer.

import logging
import random
from collections import namedtuple

from .constants import opponent_of
from .notation import format_move
from .play import manage_play, playable_pieces, promotion_row, simulate_play

bot_logger = logging.getLogger('bot')

# ======================================================================================
# --- SCORING WEIGHTS ---
# ======================================================================================

BOT_CONFIG = {
    "CAPTURE_VALUE": 2,
    "KING_CAPTURE_VALUE": 3,
    "THREAT_VALUE": 2,
    "KING_THREAT_VALUE": 3,
    "QUIET_VALUE": 1,
    "PROMOTION_VALUE": 2,
    "FUTURE_CAPTURE_MULTIPLIER": 2,
    "SAFE_QUIET_BONUS": 1,
    "EXPOSED_MULTIPLIER": 2,
    "EXPOSED_KING_MULTIPLIER": 3,
    "MULTI_CAPTURE_DIVISOR": 2,
    "PENALTY_OFFSET": 2,
}

ScoredCandidate = namedtuple('ScoredCandidate', ['piece', 'option', 'points'])
OpponentPlayValue = namedtuple('OpponentPlayValue', ['result', 'killable'])


class NoLegalMoveError(AssertionError):
    """The bot was asked to move a side that has no legal move."""


def get_opponent_playable_pieces(board, player, starts_top):
    opponent = opponent_of(player)
    return playable_pieces(board, opponent, board.locate_pieces(opponent), not starts_top)


def _moves_capturing(pieces_options, coord):
    return [move for playable in pieces_options for move in playable.options if coord in move.captured]


def is_killable(board, player, starts_top, coord):
    """Whether any opponent move on `board` captures the piece at `coord`."""
    return bool(_moves_capturing(get_opponent_playable_pieces(board, player, starts_top), coord))


def _threat_points(board, piece, opponent_options, config):
    threatening = _moves_capturing(opponent_options, piece)
    if not threatening:
        return 0
    value = config["KING_THREAT_VALUE"] if board.cell_is_king(piece) else config["THREAT_VALUE"]
    return value * sum(len(move.captured) for move in threatening)


def calculate_best_plays(board, player, starts_top, pieces_options, simulating=False, config=BOT_CONFIG):
    """
    Scores every move in `pieces_options` and returns ScoredCandidate entries,
    where `piece` is PlayableOption.index and `option` the move's index.

    With `simulating` set only the direct points are computed; the top-level
    call also runs the tie-break and the opponent-response penalty, which
    score the opponent's options in simulating mode.
    """
    far_row = promotion_row(starts_top)
    opponent_options = get_opponent_playable_pieces(board, player, starts_top)
    points = {}

    for playable in pieces_options:
        threat = _threat_points(board, playable.piece, opponent_options, config)
        is_king = board.cell_is_king(playable.piece)
        for i, move in enumerate(playable.options):
            score = threat
            if move.captured:
                kills_king = any(board.cell_is_king(c) for c in move.captured)
                value = config["KING_CAPTURE_VALUE"] if kills_king else config["CAPTURE_VALUE"]
                score += value * len(move.captured)
            else:
                score += config["QUIET_VALUE"]
            if not is_king and move.coordinate[0] == far_row:
                score += config["PROMOTION_VALUE"]
            points[(playable.index, i)] = score

    if not simulating and points:
        _break_ties(board, player, starts_top, pieces_options, points, config)
        _apply_response_penalties(board, player, starts_top, pieces_options, points, config)

    return [ScoredCandidate(piece, option, score) for (piece, option), score in points.items()]


def _break_ties(board, player, starts_top, pieces_options, points, config):
    best = max(points.values())
    tied = [key for key, score in points.items() if score == best]
    if len(tied) < 2:
        return

    lookup = {playable.index: playable for playable in pieces_options}
    for key in tied:
        piece_index, option_index = key
        move = lookup[piece_index].options[option_index]
        simulated = simulate_play(board, player, starts_top, piece_index, option_index)

        own_next = playable_pieces(simulated, player, simulated.locate_pieces(player), starts_top)
        future_captures = [len(m.captured) for playable in own_next for m in playable.options if m.captured]
        if future_captures:
            points[key] += config["FUTURE_CAPTURE_MULTIPLIER"] * max(future_captures) + len(future_captures) - 1

        if best == config["QUIET_VALUE"] and not is_killable(simulated, player, starts_top, move.coordinate):
            points[key] += config["SAFE_QUIET_BONUS"]

    bot_logger.debug(f"Tie-break over {len(tied)} move(s) at {best} point(s).")


def opponent_play_value(board, player, starts_top, moved_to, config=BOT_CONFIG):
    """
    Best total the opponent can score on `board` (already showing the
    player's move), and whether any of its replies captures the piece that
    just landed on `moved_to`.
    """
    opponent = opponent_of(player)
    opponent_options = get_opponent_playable_pieces(board, player, starts_top)
    if not opponent_options:
        return OpponentPlayValue(0, False)

    scored = calculate_best_plays(board, opponent, not starts_top, opponent_options,
                                  simulating=True, config=config)
    return OpponentPlayValue(max(c.points for c in scored), bool(_moves_capturing(opponent_options, moved_to)))


def exposure_multiplier(simulated, move, killable, config=BOT_CONFIG):
    """How much the opponent's best reply weighs when it can take the piece that just moved."""
    if not killable:
        return 1
    if simulated.cell_is_king(move.coordinate):
        multiplier = config["EXPOSED_KING_MULTIPLIER"]
    else:
        multiplier = config["EXPOSED_MULTIPLIER"]
    if len(move.captured) > 1:
        multiplier /= config["MULTI_CAPTURE_DIVISOR"]
    return multiplier


def weighted_responses(board, player, starts_top, pieces_options, config=BOT_CONFIG):
    """Maps each (piece index, option index) to the opponent's weighted best reply."""
    weighted = {}
    for playable in pieces_options:
        for option_index, move in enumerate(playable.options):
            simulated = simulate_play(board, player, starts_top, playable.index, option_index)
            response = opponent_play_value(simulated, player, starts_top, move.coordinate, config)
            weighted[(playable.index, option_index)] = \
                response.result * exposure_multiplier(simulated, move, response.killable, config)
    return weighted


def _apply_response_penalties(board, player, starts_top, pieces_options, points, config):
    weighted = weighted_responses(board, player, starts_top, pieces_options, config)

    # The two weakest replies earn a bonus, stronger ones an increasing penalty.
    ranking = sorted(set(weighted.values()))
    for key, value in weighted.items():
        points[key] -= ranking.index(value) - config["PENALTY_OFFSET"]


def select_play(board, player, starts_top, rng=None, config=BOT_CONFIG):
    """Picks the bot's move without touching `board`. Returns (piece, move)."""
    rng = rng or random
    controller = manage_play(board, player, starts_top)
    pieces_options = controller.playable_pieces()
    if not pieces_options:
        bot_logger.error(f"Bot asked to move for {player} with no legal moves.")
        raise NoLegalMoveError(f"{player} has no legal moves.")

    scored = calculate_best_plays(board, player, starts_top, pieces_options, config=config)
    top = max(c.points for c in scored)
    best = [c for c in scored if c.points == top]
    choice = rng.choice(best)

    lookup = {playable.index: playable for playable in pieces_options}
    piece = controller.locations[choice.piece]
    move = lookup[choice.piece].options[choice.option]
    bot_logger.debug(f"{player}: {len(scored)} candidate(s), {len(best)} at {top} point(s); "
                     f"playing {format_move(piece, move)}.")
    return piece, move


def choose_move(board, player, starts_top, rng=None, config=BOT_CONFIG):
    """Picks the bot's move and plays it on `board`. Returns (piece, move)."""
    piece, move = select_play(board, player, starts_top, rng=rng, config=config)
    manage_play(board, player, starts_top).play(piece, move)
    return piece, move
