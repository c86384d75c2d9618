# --- File: queenslab/validator.py ---
from itertools import combinations

from queenslab.models import CellState, ValidationResult, check_grid


def _in_conflict(q1, q2):
    if q1.row == q2.row or q1.col == q2.col:
        return True
    if q1.region == q2.region:
        return True
    # Touching diagonally (king's move)
    return abs(q1.row - q2.row) == 1 and abs(q1.col - q2.col) == 1


def find_conflicts(grid):
    """Returns the set of (row, col) of every marker that breaks a rule with another marker."""
    check_grid(grid)
    queens = [cell for row in grid for cell in row if cell.state is CellState.MARKED]
    conflicts = set()
    for q1, q2 in combinations(queens, 2):
        if _in_conflict(q1, q2):
            conflicts.add((q1.row, q1.col))
            conflicts.add((q2.row, q2.col))
    return conflicts


def validate_board(grid):
    """
    Checks a player's board without modifying it.

    The board is valid only when no two markers conflict and exactly one
    marker per row has been placed, so an unfinished board is never valid.

    :param grid: A square list of rows of Cell objects.
    :returns: A ValidationResult with the conflicting cells.
    :raises InvalidGridError: if the grid is malformed.
    """
    conflicts = find_conflicts(grid)
    marked = sum(1 for row in grid for cell in row if cell.state is CellState.MARKED)
    return ValidationResult(not conflicts and marked == len(grid), conflicts)
