"""
Outcome codes returned by every mutating board and game operation.
"""
from enum import Enum

from .position import BOARD_SIZE


class ReturnCode(Enum):
    """Closed set of outcomes; callers branch on these instead of catching exceptions."""
    SUCCESS = 'success'
    PARSE_ERROR = 'parse_error'
    OUT_OF_BOUNDS = 'out_of_bounds'
    BOUNDS_RESTRICTED = 'bounds_restricted'
    OCCUPIED = 'occupied'
    ALREADY_WINNER = 'already_winner'
    NO_PRIOR_MOVES = 'no_prior_moves'
    INVALID_BOARD = 'invalid_board'
    FULL_BOARD = 'full_board'
    INVALID_BOUNDS = 'invalid_bounds'


_MESSAGES = {
    ReturnCode.SUCCESS: "",
    ReturnCode.PARSE_ERROR: "Could not parse input: format should be <letter><number> (e.g. 'A1', 'J10')!",
    ReturnCode.OUT_OF_BOUNDS: "Invalid move: position is off the board!",
    ReturnCode.BOUNDS_RESTRICTED: "Invalid move: position is outside the allowed distance from the center!",
    ReturnCode.OCCUPIED: "Space occupied: cannot place a stone on an occupied intersection!",
    ReturnCode.ALREADY_WINNER: "Already a winner: cannot place a stone once the round is won!",
    ReturnCode.NO_PRIOR_MOVES: "No previous moves: nothing to undo!",
    ReturnCode.INVALID_BOARD: f"Invalid board: board must be {BOARD_SIZE}x{BOARD_SIZE} of 'W', 'B' or 'O'!",
    ReturnCode.FULL_BOARD: "Full board: cannot place a stone on a full board!",
    ReturnCode.INVALID_BOUNDS: "Invalid bounds: bounds must be within the board size!",
}


def get_message(code):
    """
    Get the console message for an outcome code.
    
    Args:
        code (ReturnCode): Outcome to describe
        
    Returns:
        str: Human readable message, empty for SUCCESS
    """
    return _MESSAGES[code]
