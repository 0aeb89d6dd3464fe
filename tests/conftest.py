"""
Shared fixtures for the Pente tests.
"""
import pytest


def no_win_pattern(size=19):
    """
    Fill a board so no line has 5 stones and no pair is bracketed.

    Rows alternate colors; columns and diagonals repeat runs of 3 and 1.
    """
    rows = []
    for row in range(size):
        shift = 0 if row % 4 == 3 else 1
        rows.append(''.join('W' if (col + shift) % 2 else 'B' for col in range(size)))
    return rows


@pytest.fixture
def full_rows():
    """Rows of a full board without a winner."""
    return no_win_pattern()


@pytest.fixture
def one_empty_rows():
    """Rows of a board without a winner where only A1 (a white square) is empty."""
    rows = no_win_pattern()
    rows[0] = 'O' + rows[0][1:]
    return rows
