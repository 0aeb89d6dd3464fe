"""
Directional sequence scanning over a board state.

Every higher level check (wins, captures, structures) reads the board
through these helpers. They never modify the state they are given.
"""
from .position import is_valid_position

EMPTY = 0

# N, NE, E, SE, S, SW, W, NW. Direction d and d + 4 are opposites.
ROW_DELTAS = (1, 1, 0, -1, -1, -1, 0, 1)
COL_DELTAS = (0, 1, 1, 1, 0, -1, -1, -1)
NUM_DIRECTIONS = len(ROW_DELTAS)
NUM_LANES = NUM_DIRECTIONS // 2


def color_sequences(state, n, row, col):
    """
    Collect up to n cell values radiating out from (row, col) in all 8 directions.
    
    Each sequence starts with the cell itself and is cut short at the edge of
    the board.
    
    Args:
        state (np.ndarray): Square board state
        n (int): Maximum sequence length
        row (int): Starting row
        col (int): Starting column
        
    Returns:
        list: 8 tuples of cell values, in N, NE, E, SE, S, SW, W, NW order
    """
    size = state.shape[0]
    sequences = []
    for dr, dc in zip(ROW_DELTAS, COL_DELTAS):
        cells = []
        for step in range(n):
            r, c = row + dr * step, col + dc * step
            if not is_valid_position(r, c, size):
                break
            cells.append(int(state[r, c]))
        sequences.append(tuple(cells))
    return sequences


def count_run(sequence):
    """
    Count the leading cells that match the first cell of a sequence.
    
    The first cell always counts once. Counting stops at the first
    mismatch or the first empty cell after it.
    
    Args:
        sequence (tuple): Cell values starting at the origin cell
        
    Returns:
        int: Length of the leading run
    """
    if not sequence:
        return 0
        
    first = sequence[0]
    count = 1
    for cell in sequence[1:]:
        if cell != first or cell == EMPTY:
            break
        count += 1
    return count


def lane_counts(state, n, row, col):
    """
    Combine opposite directions into the 4 lanes through (row, col).
    
    The origin stone is counted by both halves, so a lane total of k
    represents k - 1 stones in a line.
    
    Returns:
        list: Lane totals for N-S, NE-SW, E-W and SE-NW
    """
    sequences = color_sequences(state, n, row, col)
    return [
        count_run(sequences[d]) + count_run(sequences[d + NUM_LANES])
        for d in range(NUM_LANES)
    ]
