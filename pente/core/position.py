"""
Board coordinates for Pente.

Positions are (row, column) index pairs. Players address them with labels
such as "J10": a column letter followed by a 1-indexed row number.
"""

BOARD_SIZE = 19
CENTER_POSITION = "J10"

# Stones in a row needed to win, and stones in a capturable pair
WIN_LENGTH = 5
CAPTURE_LENGTH = 2

# Minimum distance from the center for the first player's second stone
SECOND_MOVE_DISTANCE = 3

COLUMN_OFFSET = ord('A')
ROW_OFFSET = 1

MIN_LABEL_LENGTH = 2
MAX_LABEL_LENGTH = 3


def is_valid_position(row, col, size=BOARD_SIZE):
    """
    Check that a row and column index lie on the board.
    
    Args:
        row (int): Row index
        col (int): Column index
        size (int): Board size
        
    Returns:
        bool: True if both indices are in [0, size)
    """
    return 0 <= row < size and 0 <= col < size


def center_index(size=BOARD_SIZE):
    """Index of the center row/column."""
    return size // 2


def distance_from_center(row, col, size=BOARD_SIZE):
    """
    Chebyshev distance of a position from the center intersection.
    
    Args:
        row (int): Row index
        col (int): Column index
        size (int): Board size
        
    Returns:
        int: max(|row - center|, |col - center|)
    """
    center = center_index(size)
    return max(abs(row - center), abs(col - center))


def parse_position(label):
    """
    Parse a position label like "J10" into board indices.
    
    Bounds are not checked here; "Z99" parses to (98, 25).
    
    Args:
        label (str): Column letter followed by a 1-2 digit row number
        
    Returns:
        tuple: (row, col) or None if the label cannot be parsed
    """
    if not isinstance(label, str):
        return None
    if not MIN_LABEL_LENGTH <= len(label) <= MAX_LABEL_LENGTH:
        return None
        
    row_text = label[1:]
    if not row_text.isdecimal():
        return None
    if not label[0].isalpha():
        return None
        
    row = int(row_text) - ROW_OFFSET
    col = ord(label[0].upper()) - COLUMN_OFFSET
    return (row, col)


def format_position(row, col):
    """
    Convert board indices back into a label.
    
    Args:
        row (int): Row index
        col (int): Column index
        
    Returns:
        str: Label such as "J10" for (9, 9)
    """
    return chr(col + COLUMN_OFFSET) + str(row + ROW_OFFSET)
