"""
Board implementation for Pente.
"""
import logging
import numbers
from collections import namedtuple

import numpy as np

from .codes import ReturnCode
from .position import (
    BOARD_SIZE, WIN_LENGTH, CAPTURE_LENGTH,
    is_valid_position, distance_from_center, parse_position, format_position,
)
from .scanner import (
    EMPTY, ROW_DELTAS, COL_DELTAS, NUM_LANES,
    color_sequences, count_run, lane_counts,
)

logger = logging.getLogger(__name__)

WHITE = 1
BLACK = -1

# Character form used when a board is persisted
EMPTY_SYMBOL = 'O'
PIECE_SYMBOLS = {EMPTY: EMPTY_SYMBOL, WHITE: 'W', BLACK: 'B'}
SYMBOL_PIECES = {symbol: piece for piece, symbol in PIECE_SYMBOLS.items()}

MIN_BOARD_SIZE = 7

# Everything needed to restore the board to its state before a move
MoveRecord = namedtuple('MoveRecord', [
    'position', 'previous_sequences', 'captured_pairs', 'win_lines', 'empty_left',
])


def opponent_of(color):
    """Return the other side's color."""
    return -color


def _is_integer(value):
    # numpy integer scalars count as Integral, bool does not count as an index
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


class Board:
    """
    Represents a Pente board with capture rules and exact undo.

    Board state representation:
    - 0: empty intersection
    - 1: white stone (moves first)
    - -1: black stone

    A stone may only be placed if its Chebyshev distance from the center
    lies within [inner_bounds, outer_bounds]. Every committed placement
    pushes a MoveRecord onto the history so it can be undone exactly.
    """

    def __init__(self, size=BOARD_SIZE):
        """
        Initialize an empty board.

        Args:
            size (int): Number of intersections per side (default 19)
        """
        if size < MIN_BOARD_SIZE:
            raise ValueError(f"Board size must be at least {MIN_BOARD_SIZE}, got {size}")

        self.size = size
        self.state = np.zeros((size, size), dtype=np.int8)
        self.inner_bounds = 0
        self.outer_bounds = size
        self.history = []
        self._current = self._blank_record(size * size)

    @staticmethod
    def _blank_record(empty_left):
        return MoveRecord(position=None, previous_sequences=(), captured_pairs=0,
                          win_lines=0, empty_left=empty_left)

    # Queries

    @property
    def empty_left(self):
        """Number of empty intersections remaining."""
        return self._current.empty_left

    @property
    def win_lines(self):
        """Winning lines completed by the last move."""
        return self._current.win_lines

    @property
    def captured_pairs(self):
        """Pairs captured by the last move."""
        return self._current.captured_pairs

    @property
    def last_position(self):
        """Label of the last placed stone, or None if there is no last move."""
        if self._current.position is None:
            return None
        return format_position(*self._current.position)

    @property
    def last_move(self):
        """(row, col) of the last placed stone, or None."""
        return self._current.position

    @property
    def history_depth(self):
        return len(self.history)

    def is_board_full(self):
        return self._current.empty_left <= 0

    def is_winner(self):
        return self._current.win_lines > 0

    def is_game_over(self):
        """The board is over once it is full or the last move made five in a row."""
        return self.is_board_full() or self.is_winner()

    def get_legal_moves(self):
        """
        Get all positions where a stone may currently be placed.

        Returns:
            list: (row, col) tuples of empty intersections inside the active bounds
        """
        if self.is_game_over():
            return []

        legal_moves = []
        for row in range(self.size):
            for col in range(self.size):
                if self.state[row, col] == EMPTY and self._within_bounds(row, col):
                    legal_moves.append((row, col))
        return legal_moves

    def snapshot_grid(self):
        """Return a copy of the board state for serialization."""
        return self.state.copy()

    def to_rows(self):
        """
        Render the board as character rows, row 0 first.

        Returns:
            list: One string per row using 'O', 'W' and 'B'
        """
        return [''.join(PIECE_SYMBOLS[int(cell)] for cell in row) for row in self.state]

    # Mutators

    def place_stone(self, color, position):
        """
        Place a stone, resolving captures and wins.

        Args:
            color (int): Player (1 for white, -1 for black)
            position (str or tuple): Label like "J10" or a (row, col) pair

        Returns:
            ReturnCode: SUCCESS, or the first check that failed
        """
        coords = self._resolve_position(position)
        if coords is None or color not in (WHITE, BLACK):
            return ReturnCode.PARSE_ERROR
        row, col = coords

        if not is_valid_position(row, col, self.size):
            return ReturnCode.OUT_OF_BOUNDS
        if not self._within_bounds(row, col):
            return ReturnCode.BOUNDS_RESTRICTED
        if self.state[row, col] != EMPTY:
            return ReturnCode.OCCUPIED
        if self.is_winner():
            return ReturnCode.ALREADY_WINNER
        if self.is_board_full():
            return ReturnCode.FULL_BOARD

        self.state[row, col] = color
        # Sequences are stored before captures so undo can put captured stones back
        previous_sequences = tuple(color_sequences(self.state, WIN_LENGTH, row, col))
        win_lines = self.count_n_in_a_row(WIN_LENGTH, row, col)
        captured_pairs = self._capture_pairs(color, row, col)

        self._current = MoveRecord(
            position=(row, col),
            previous_sequences=previous_sequences,
            captured_pairs=captured_pairs,
            win_lines=win_lines,
            empty_left=self._current.empty_left - 1 + captured_pairs * CAPTURE_LENGTH,
        )
        self.history.append(self._current)
        return ReturnCode.SUCCESS

    def undo_move(self):
        """
        Undo the most recent placement, restoring any captured stones.

        Returns:
            ReturnCode: SUCCESS or NO_PRIOR_MOVES
        """
        if not self.history:
            return ReturnCode.NO_PRIOR_MOVES

        record = self.history.pop()
        row, col = record.position
        self._write_sequences(record.previous_sequences, row, col)
        self.state[row, col] = EMPTY

        previous_position = self.history[-1].position if self.history else None
        self._current = self._blank_record(
            record.empty_left + 1 - record.captured_pairs * CAPTURE_LENGTH
        )._replace(position=previous_position)

        logger.debug("Undid move at %s", format_position(row, col))
        return ReturnCode.SUCCESS

    def set_bounds(self, inner_bounds, outer_bounds):
        """
        Restrict placements to a distance window around the center.

        Args:
            inner_bounds (int): Minimum Chebyshev distance, 0 for no restriction
            outer_bounds (int): Maximum Chebyshev distance, board size for no restriction

        Returns:
            ReturnCode: SUCCESS or INVALID_BOUNDS
        """
        for bound in (inner_bounds, outer_bounds):
            if not 0 <= bound <= self.size:
                return ReturnCode.INVALID_BOUNDS

        self.inner_bounds = inner_bounds
        self.outer_bounds = outer_bounds
        return ReturnCode.SUCCESS

    def set_board(self, grid):
        """
        Replace the whole board, e.g. with a saved game.

        The board is left untouched unless every check passes.

        Args:
            grid: size rows of size cells; cells are -1/0/1 or 'B'/'O'/'W'

        Returns:
            ReturnCode: SUCCESS, INVALID_BOARD, ALREADY_WINNER or FULL_BOARD
        """
        candidate = self._coerce_grid(grid)
        if candidate is None:
            logger.debug("Rejected board: wrong shape or unknown cell values")
            return ReturnCode.INVALID_BOARD

        probe = Board(self.size)
        probe.state = candidate
        for row, col in zip(*np.nonzero(candidate)):
            if probe.count_n_in_a_row(WIN_LENGTH, row, col) > 0:
                logger.debug("Rejected board: winning line through %s", format_position(row, col))
                return ReturnCode.ALREADY_WINNER

        empty_left = int(np.count_nonzero(candidate == EMPTY))
        if empty_left == 0:
            logger.debug("Rejected board: no empty intersections")
            return ReturnCode.FULL_BOARD

        self.state = candidate
        self.history = []
        self._current = self._blank_record(empty_left)
        return ReturnCode.SUCCESS

    def reset(self):
        """Clear the board back to an empty, unrestricted state."""
        self.state = np.zeros((self.size, self.size), dtype=np.int8)
        self.inner_bounds = 0
        self.outer_bounds = self.size
        self.history = []
        self._current = self._blank_record(self.size * self.size)

    # Pattern counting

    def count_n_in_a_row(self, n, row, col):
        """
        Count the independent n-in-a-rows running through (row, col).

        A single long run is not counted more than once per n stones, but
        a run of 2n stones through the intersection counts as two.

        Args:
            n (int): Run length to look for (at least 2)
            row (int): Row of the stone
            col (int): Column of the stone

        Returns:
            int: Number of n-in-a-rows across all 4 lanes
        """
        if n < 2:
            return 0

        total = 0
        for count in lane_counts(self.state, n, row, col):
            # Lanes share the center stone; only an even split of 2n keeps both halves
            if count > 0 and (count // 2) % n != 0:
                count -= 1
            total += count // n
        return total

    def count_potential_captures(self, color, row, col):
        """
        Count the lanes where a stone of color at (row, col) could be captured next ply.

        E.g. "OWWB" or "BWWO" through the intersection for white.

        Args:
            color (int): Color of the stone at (row, col)
            row (int): Row index
            col (int): Column index

        Returns:
            int: Number of vulnerable lanes (0-4)
        """
        pattern_length = CAPTURE_LENGTH + 2
        sequences = color_sequences(self.state, CAPTURE_LENGTH + 1, row, col)
        count = 0
        for d in range(NUM_LANES):
            line = tuple(reversed(sequences[d + NUM_LANES][1:])) + (color,) + sequences[d][1:]
            windows = (line[i:i + pattern_length] for i in range(len(line) - pattern_length + 1))
            if any(self._is_vulnerable(window, color) for window in windows):
                count += 1
        return count

    def count_uninterrupted(self, n, color):
        """
        Count structures of exactly n stones in a row for one color.

        Runs longer than n (including five in a row) do not count.

        Args:
            n (int): Structure length
            color (int): Color to count for

        Returns:
            int: Number of uninterrupted n-stone structures on the board
        """
        if n < 1 or n > self.size - 1:
            return 0

        total = 0
        rows, cols = np.nonzero(self.state == color)
        for row, col in zip(rows, cols):
            for count in lane_counts(self.state, n + 1, row, col):
                if count - 1 == n:
                    total += 1

        # Each stone of a structure counted it once
        return total // n

    # Helpers

    def _within_bounds(self, row, col):
        distance = distance_from_center(row, col, self.size)
        return self.inner_bounds <= distance <= self.outer_bounds

    @staticmethod
    def _resolve_position(position):
        if isinstance(position, str):
            return parse_position(position)
        try:
            row, col = position
        except (TypeError, ValueError):
            return None
        if not (_is_integer(row) and _is_integer(col)):
            return None
        return (int(row), int(col))

    @staticmethod
    def _is_vulnerable(window, color):
        first, *middle, last = window
        if any(cell != color for cell in middle):
            return False
        first_open = first == EMPTY
        last_open = last == EMPTY
        first_enemy = first not in (EMPTY, color)
        last_enemy = last not in (EMPTY, color)
        return (first_open and last_enemy) or (first_enemy and last_open)

    def _capture_pairs(self, color, row, col):
        """
        Remove every opposing pair bracketed by the stone just placed.

        Returns:
            int: Number of pairs captured
        """
        sequence_length = CAPTURE_LENGTH + 2
        captured = 0
        for seq, dr, dc in zip(color_sequences(self.state, sequence_length, row, col),
                               ROW_DELTAS, COL_DELTAS):
            if len(seq) != sequence_length or seq[0] != seq[-1]:
                continue
            middle = seq[1:-1]
            if count_run(middle) != CAPTURE_LENGTH or middle[0] == color:
                continue

            for step in range(1, CAPTURE_LENGTH + 1):
                self.state[row + dr * step, col + dc * step] = EMPTY
            captured += 1

        if captured:
            logger.debug("Move at %s captured %d pair(s)", format_position(row, col), captured)
        return captured

    def _write_sequences(self, sequences, row, col):
        for seq, dr, dc in zip(sequences, ROW_DELTAS, COL_DELTAS):
            for step, cell in enumerate(seq):
                self.state[row + dr * step, col + dc * step] = cell

    def _coerce_grid(self, grid):
        """Convert rows of ints or symbols into a board state, or None if malformed."""
        try:
            rows = list(grid)
        except TypeError:
            return None
        if len(rows) != self.size:
            return None

        candidate = np.zeros((self.size, self.size), dtype=np.int8)
        for r, row in enumerate(rows):
            try:
                cells = list(row)
            except TypeError:
                return None
            if len(cells) != self.size:
                return None
            for c, cell in enumerate(cells):
                value = self._coerce_cell(cell)
                if value is None:
                    return None
                candidate[r, c] = value
        return candidate

    @staticmethod
    def _coerce_cell(cell):
        if isinstance(cell, str):
            return SYMBOL_PIECES.get(cell.upper())
        if not _is_integer(cell):
            return None
        value = int(cell)
        return value if value in (EMPTY, WHITE, BLACK) else None
