"""**********************************************************************************
 * Title: solver.py
 * -------------------------------------------------------------------------------
 * Description:
 * Backtracking solver used as the solvability check during level generation.
 * One marker is placed per row, top to bottom, trying columns left to right.
 * A column is rejected when it is already used, when it touches the previous
 * row's marker diagonally, or when its region already holds a marker. The
 * partial assignment is an explicit list of per-row columns (-1 for rows not
 * yet placed), walked iteratively so deep boards never hit the interpreter's
 * recursion limit.
 **********************************************************************************"""

from typing import List, Optional

from queenslab.constants import UNASSIGNED


def _can_place(placement, region_grid, row, col):
    """Checks a candidate (row, col) against the markers in rows 0..row-1."""
    if row > 0 and abs(placement[row - 1] - col) == 1:
        return False
    region = region_grid[row][col]
    for r in range(row):
        placed_col = placement[r]
        if placed_col == col or region_grid[r][placed_col] == region:
            return False
    return True


def solve_placement(region_grid: List[List[int]], size: Optional[int] = None) -> Optional[List[int]]:
    """
    Finds the first legal placement in row-major search order.

    :param list region_grid: A size x size matrix of region ids.
    :param int size: Grid dimension; defaults to len(region_grid).
    :returns: A list mapping each row to its marker's column, or None when no
        placement exists.
    """
    if size is None:
        size = len(region_grid)
    placement = [UNASSIGNED] * size
    row = 0
    while 0 <= row < size:
        # Resume after the column this row held before backtracking into it.
        start = placement[row] + 1
        placement[row] = UNASSIGNED
        for col in range(start, size):
            if _can_place(placement, region_grid, row, col):
                placement[row] = col
                break
        if placement[row] == UNASSIGNED:
            row -= 1
        else:
            row += 1
    return placement if row == size else None


def placement_to_marker_grid(placement: List[int]) -> List[List[int]]:
    size = len(placement)
    grid = [[0] * size for _ in range(size)]
    for row, col in enumerate(placement):
        grid[row][col] = 1
    return grid


def find_valid_solution(region_grid: List[List[int]], size: int) -> Optional[List[List[int]]]:
    """Returns the witness as a 0/1 marker grid, or None if the layout is unsolvable."""
    placement = solve_placement(region_grid, size)
    if placement is None:
        return None
    return placement_to_marker_grid(placement)


def staircase_placement(size: int) -> List[int]:
    """
    A placement that satisfies the column-per-region fallback layout: odd
    columns first, then even ones. Consecutive rows always differ by at least
    two columns for size 1 and size >= 4; sizes 2 and 3 admit no placement.
    """
    return list(range(1, size, 2)) + list(range(0, size, 2))


def is_valid_placement(placement: List[int], region_grid: List[List[int]]) -> bool:
    """Full rule check of a complete placement against a region layout."""
    size = len(region_grid)
    if len(placement) != size or sorted(placement) != list(range(size)):
        return False
    regions = {region_grid[row][col] for row, col in enumerate(placement)}
    if len(regions) != size:
        return False
    return all(abs(placement[r] - placement[r + 1]) != 1 for r in range(size - 1))
