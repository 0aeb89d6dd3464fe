"""
One-ply move evaluation for the Pente computer opponent.

Every open intersection is tried once for the mover and once for its
opponent. Each trial places a stone, reads the win/capture/build signals
back from the board and undoes the stone, so the board is left exactly as
it was found. The best of both perspectives is recommended: the best place
to play for ourselves, or the best place to deny the opponent.
"""
import logging
import random
from collections import namedtuple
from enum import Enum
from typing import List, Optional, Tuple

from ..core.board import Board
from ..core.codes import ReturnCode
from ..core.position import WIN_LENGTH, SECOND_MOVE_DISTANCE, center_index, format_position
from ..core.scanner import EMPTY
from .config import EvaluatorConfig

logger = logging.getLogger(__name__)


class MoveReason(Enum):
    """Why a move was chosen."""
    UNKNOWN = 'unknown'
    WIN = 'win'
    CAPTURE = 'capture'
    BUILD = 'build'
    BOARD_RESTRICTION = 'board_restriction'


EvaluatedMove = namedtuple('EvaluatedMove', ['position', 'score', 'color', 'reason'])


def classify(score: int, config: EvaluatorConfig) -> MoveReason:
    """Map an evaluation score onto the reason it most likely came from."""
    if score >= config.win_weight:
        return MoveReason.WIN
    elif score >= config.capture_weight:
        return MoveReason.CAPTURE
    elif score > 0:
        return MoveReason.BUILD
    return MoveReason.UNKNOWN


def evaluate_move(board: Board, color: int, mover: int,
                  config: Optional[EvaluatorConfig] = None) -> EvaluatedMove:
    """
    Score the stone that was just placed on the board.

    Args:
        board: Board whose last move is the stone to score
        color: Color of that stone
        mover: Color of the player we are choosing a move for
        config: Scoring weights

    Returns:
        EvaluatedMove: Position, score, color and reason
    """
    config = config or EvaluatorConfig()
    row, col = board.last_move
    win_lines = board.win_lines

    score = config.win_weight * win_lines

    # Shorter blocks are weighted by length squared; the running block count
    # means a stone that extends a long block also pays for the shorter ones
    block_count = 0
    for n in range(WIN_LENGTH - 1, 1, -1):
        block_count += board.count_n_in_a_row(n, row, col) - win_lines
        score += config.build_weight * block_count * n * n

    # Prefer building our own blocks over breaking up theirs
    if block_count > 0 and color == mover:
        score += config.build_weight

    # Only avoid exposing our own stones, not theirs
    if score < config.win_weight and color == mover:
        score -= config.capture_weight * board.count_potential_captures(color, row, col)

    score += config.capture_weight * board.captured_pairs

    return EvaluatedMove(position=(row, col), score=score, color=color,
                         reason=classify(score, config))


def ring_positions(size: int) -> List[Tuple[int, int]]:
    """
    Intersections on the center row and column at the second-move distance.

    On a 19x19 board these are J7, M10, J13 and G10.
    """
    center = center_index(size)
    return [
        (center - SECOND_MOVE_DISTANCE, center),
        (center, center + SECOND_MOVE_DISTANCE),
        (center + SECOND_MOVE_DISTANCE, center),
        (center, center - SECOND_MOVE_DISTANCE),
    ]


def _simulate(board: Board, color: int, position: Tuple[int, int], mover: int,
              config: EvaluatorConfig) -> Optional[EvaluatedMove]:
    """Place, evaluate and undo a stone; None if the board rejects it."""
    if board.place_stone(color, position) != ReturnCode.SUCCESS:
        return None
    try:
        return evaluate_move(board, color, mover, config)
    finally:
        board.undo_move()


def recommend_move(board: Board, mover: int, opponent: int,
                   rng: Optional[random.Random] = None,
                   config: Optional[EvaluatorConfig] = None) -> Optional[EvaluatedMove]:
    """
    Recommend where the mover should place its next stone.

    Args:
        board: Current board, left unmodified
        mover: Color to move
        opponent: Color of the other player
        rng: Source for tie-breaks and the second-move ring choice
        config: Scoring weights

    Returns:
        EvaluatedMove or None: Recommended move, None if nowhere is playable
    """
    config = config or EvaluatorConfig()
    rng = rng or random.Random()

    our_best = None
    their_best = None
    top_moves = []

    for row in range(board.size):
        for col in range(board.size):
            our_move = _simulate(board, mover, (row, col), mover, config)
            if our_move is None:
                continue
            their_move = _simulate(board, opponent, (row, col), mover, config)
            if their_move is None:
                continue

            if our_best is None or our_move.score >= our_best.score:
                our_best = our_move
                top_moves.append(our_move)
            if their_best is None or their_move.score >= their_best.score:
                their_best = their_move
                top_moves.append(their_move)

    if our_best is None:
        return None

    # Winning outranks everything else
    if our_best.reason == MoveReason.WIN:
        _log_choice(our_best)
        return our_best

    best = our_best if our_best.score > their_best.score else their_best

    tied = [move for move in top_moves if move.score == best.score]
    if len(tied) > 1:
        best = rng.choice(tied)

    # Only the center is playable
    if board.outer_bounds == 0:
        best = best._replace(reason=MoveReason.BOARD_RESTRICTION)

    # Second stone of the first player, stay close to the center
    if board.inner_bounds == SECOND_MOVE_DISTANCE:
        ring = [(r, c) for r, c in ring_positions(board.size) if board.state[r, c] == EMPTY]
        best = best._replace(reason=MoveReason.BOARD_RESTRICTION,
                             position=rng.choice(ring or ring_positions(board.size)))

    _log_choice(best)
    return best


def reason_message(move: EvaluatedMove, mover: int) -> str:
    """
    Explain a recommendation in plain English.

    Args:
        move: Recommended move
        mover: Color the recommendation was made for

    Returns:
        str: e.g. "to win" or "to prevent a capture"
    """
    if move.reason == MoveReason.BOARD_RESTRICTION:
        return "because of a board restriction, no other moves available"
    if move.reason == MoveReason.UNKNOWN:
        return "as no move stands out"

    prefix = "to " if move.color == mover else "to prevent a "
    return prefix + move.reason.value


def _log_choice(move: EvaluatedMove) -> None:
    logger.debug("Recommending %s (score %d, %s)",
                 format_position(*move.position), move.score, move.reason.value)
