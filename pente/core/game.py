"""
Game implementation for Pente.
"""
import logging

from .board import Board, WHITE, BLACK, PIECE_SYMBOLS, SYMBOL_PIECES, opponent_of
from .codes import ReturnCode
from .position import BOARD_SIZE, WIN_LENGTH, SECOND_MOVE_DISTANCE

logger = logging.getLogger(__name__)

# Captured pairs needed to win the round
CAPTURE_WIN_PAIRS = 5
# Length of the structures worth a point at the end of a round
STRUCTURE_LENGTH = 4
# Stone count assumed for a loaded game that already had captures
LOADED_CAPTURE_PLY = 3


class Game:
    """
    Manages a single Pente round.

    Handles turn management, the opening placement restrictions, captured
    pair tallies and round end detection. Tournament bookkeeping across
    rounds is left to the caller.
    """

    def __init__(self, board_size=BOARD_SIZE):
        """
        Initialize a new Pente round.

        Args:
            board_size (int): Board size (default 19)
        """
        self.board = Board(board_size)
        self.current_player = WHITE  # White goes first
        self.ply_count = 0
        self.captured_pairs = {WHITE: 0, BLACK: 0}
        self.win_lines = 0
        self._winner = None
        self._is_draw = False
        self._apply_board_restriction()

    @property
    def game_state(self):
        """
        Get the current game state.

        Returns:
            str: One of 'ongoing', 'win', 'draw'
        """
        if self._winner is not None:
            return 'win'
        elif self._is_draw:
            return 'draw'
        else:
            return 'ongoing'

    @property
    def winner(self):
        """
        Get the winner of the round.

        Returns:
            int or None: Winner (1 for white, -1 for black) or None if no winner
        """
        return self._winner

    @property
    def next_player(self):
        return opponent_of(self.current_player)

    def make_move(self, position):
        """
        Make a move for the current player.

        Args:
            position (str or tuple): Label like "J10" or a (row, col) pair

        Returns:
            ReturnCode: SUCCESS, or why the move was rejected
        """
        # Can't make moves once the round is over
        if self._winner is not None:
            return ReturnCode.ALREADY_WINNER
        if self._is_draw:
            return ReturnCode.FULL_BOARD

        status = self.board.place_stone(self.current_player, position)
        if status != ReturnCode.SUCCESS:
            return status

        self.captured_pairs[self.current_player] += self.board.captured_pairs

        if self._check_round_end():
            return ReturnCode.SUCCESS

        # Round continues, switch to next player
        self.ply_count += 1
        self._apply_board_restriction()
        self.current_player = self.next_player
        return ReturnCode.SUCCESS

    def round_scores(self):
        """
        Score the round for both players.

        The winner gets 5 points per five in a row completed by the winning
        move. Each player gets a point per captured pair and per structure
        of exactly 4 stones left on the board.

        Returns:
            dict: Points keyed by color
        """
        scores = {}
        for color in (WHITE, BLACK):
            points = self.captured_pairs[color]
            points += self.board.count_uninterrupted(STRUCTURE_LENGTH, color)
            if color == self._winner:
                points += self.win_lines * WIN_LENGTH
            scores[color] = points
        return scores

    def snapshot(self):
        """
        Capture the round state in a JSON-serializable form.

        Returns:
            dict: Board rows, next player and captured pairs
        """
        return {
            'board': self.board.to_rows(),
            'current_player': PIECE_SYMBOLS[self.current_player],
            'captured_pairs': {
                PIECE_SYMBOLS[color]: pairs for color, pairs in self.captured_pairs.items()
            },
        }

    def load_snapshot(self, snapshot):
        """
        Restore a round from snapshot(), e.g. after loading a saved game.

        Nothing changes unless the whole snapshot is valid.

        Args:
            snapshot (dict): Output of snapshot()

        Returns:
            ReturnCode: SUCCESS, or the board/validation failure
        """
        try:
            current_player = SYMBOL_PIECES[snapshot['current_player']]
            captured = {
                SYMBOL_PIECES[symbol]: int(pairs)
                for symbol, pairs in snapshot['captured_pairs'].items()
            }
            rows = snapshot['board']
        except (KeyError, TypeError, ValueError, AttributeError):
            return ReturnCode.INVALID_BOARD

        if current_player not in (WHITE, BLACK):
            return ReturnCode.INVALID_BOARD
        if set(captured) != {WHITE, BLACK} or min(captured.values()) < 0:
            return ReturnCode.INVALID_BOARD
        if max(captured.values()) >= CAPTURE_WIN_PAIRS:
            return ReturnCode.ALREADY_WINNER

        status = self.board.set_board(rows)
        if status != ReturnCode.SUCCESS:
            return status

        self.current_player = current_player
        self.captured_pairs = captured
        self.win_lines = 0
        self._winner = None
        self._is_draw = False
        self.ply_count = self._estimate_ply()
        self._apply_board_restriction()
        return ReturnCode.SUCCESS

    def _estimate_ply(self):
        """Plies played so far; only matters while the opening restrictions apply."""
        if any(pairs > 0 for pairs in self.captured_pairs.values()):
            return LOADED_CAPTURE_PLY
        return self.board.size * self.board.size - self.board.empty_left

    def _apply_board_restriction(self):
        """Set where the current ply may be placed."""
        size = self.board.size
        if self.ply_count == 0:
            # First stone must go on the center
            self.board.set_bounds(0, 0)
        elif self.ply_count == 2:
            self.board.set_bounds(SECOND_MOVE_DISTANCE, size)
        else:
            self.board.set_bounds(0, size)

    def _check_round_end(self):
        """
        Check the last move for five in a row, five captured pairs or a full board.

        Returns:
            bool: True if the round is over
        """
        mover = self.current_player
        if self.board.win_lines > 0:
            self.win_lines = self.board.win_lines
            self._winner = mover
            logger.info("%s wins the round with %d line(s) of %d",
                        PIECE_SYMBOLS[mover], self.win_lines, WIN_LENGTH)
        elif self.captured_pairs[mover] >= CAPTURE_WIN_PAIRS:
            self._winner = mover
            logger.info("%s wins the round by capturing %d pairs",
                        PIECE_SYMBOLS[mover], self.captured_pairs[mover])
        elif self.board.is_board_full():
            self._is_draw = True
            logger.info("Board is full, round ends in a draw")

        return self.game_state != 'ongoing'
