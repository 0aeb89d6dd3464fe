"""
Tests for directional sequence scanning.
"""
import numpy as np
from pente.core.scanner import color_sequences, count_run, lane_counts, NUM_DIRECTIONS


def empty_state(size=19):
    return np.zeros((size, size), dtype=np.int8)


def test_sequences_from_center_have_full_length():
    """Test that every direction yields n cells away from the edges."""
    sequences = color_sequences(empty_state(), 5, 9, 9)

    assert len(sequences) == NUM_DIRECTIONS
    for seq in sequences:
        assert seq == (0, 0, 0, 0, 0)


def test_direction_order():
    """Test that directions come back in N, NE, E, SE, S, SW, W, NW order."""
    state = empty_state()
    neighbours = [(10, 9), (10, 10), (9, 10), (8, 10), (8, 9), (8, 8), (9, 8), (10, 8)]
    for value, (row, col) in enumerate(neighbours, start=1):
        state[row, col] = value

    sequences = color_sequences(state, 2, 9, 9)

    for direction, seq in enumerate(sequences):
        assert seq == (0, direction + 1)


def test_sequences_stop_at_edge():
    """Test that sequences are cut short at the board edge."""
    sequences = color_sequences(empty_state(), 3, 0, 0)

    lengths = [len(seq) for seq in sequences]
    # N, NE and E stay on the board; everything heading down or left leaves it
    assert lengths == [3, 3, 3, 1, 1, 1, 1, 1]


def test_sequences_start_with_origin():
    """Test that the origin cell is the first entry of every sequence."""
    state = empty_state()
    state[4, 4] = -1

    for seq in color_sequences(state, 4, 4, 4):
        assert seq[0] == -1


def test_scanning_does_not_mutate():
    """Test that scanning leaves the state untouched."""
    state = empty_state()
    state[9, 9] = 1
    state[9, 10] = -1
    before = state.copy()

    color_sequences(state, 5, 9, 9)
    lane_counts(state, 5, 9, 9)

    assert np.array_equal(state, before)


def test_count_run():
    """Test leading run counting."""
    assert count_run(()) == 0
    assert count_run((1,)) == 1
    assert count_run((1, 1, 1, -1)) == 3
    assert count_run((1, 0, 1)) == 1
    assert count_run((-1, -1)) == 2
    assert count_run((1, 1, 0, 1, 1)) == 2


def test_count_run_empty_origin_counts_once():
    """Test that an empty origin is counted but never extended."""
    assert count_run((0, 0, 0)) == 1
    assert count_run((0, 1)) == 1


def test_lane_counts_share_origin():
    """Test that both halves of a lane count the origin stone."""
    state = empty_state()
    state[9, 9] = 1

    assert lane_counts(state, 5, 9, 9) == [2, 2, 2, 2]

    # Add two stones to the east and one to the west
    state[9, 10] = 1
    state[9, 11] = 1
    state[9, 8] = 1

    assert lane_counts(state, 5, 9, 9) == [2, 2, 5, 2]


def test_lane_counts_capped_by_length():
    """Test that lane halves never exceed the scan length."""
    state = empty_state()
    state[9, :] = 1

    assert lane_counts(state, 3, 9, 9)[2] == 6
