"""**********************************************************************************
 * Title: puzzle_handler.py
 * -------------------------------------------------------------------------------
 * Description:
 * Conversions between the engine's objects and the plain data the outside
 * world exchanges: the comma-separated "task string" of region ids, the JSON
 * payloads received by the API, and the dictionaries sent back to it.
 **********************************************************************************"""

import math
import logging

from queenslab.models import CellState, Cell, InvalidGridError, check_region_grid

_STATE_VALUES = tuple(state.value for state in CellState)


def encode_task_string(region_grid):
    """Flattens a region grid to comma-separated ids in row-major order."""
    return ",".join(str(cell) for row in region_grid for cell in row)


def parse_and_validate_grid(task_string):
    """
    Parses a task string back into a square region grid.

    :param str task_string: Comma-separated region ids.
    :returns: A (region_grid, dim) tuple, or (None, None) when the string is
        empty, holds non-integers, or its length is not a perfect square.
    :rtype: tuple
    """
    if not task_string: return None, None
    try:
        nums = [int(n) for n in task_string.split(',')]
        dim = math.isqrt(len(nums))
        if dim**2 != len(nums):
            logging.warning("Invalid grid dimensions: not a perfect square.")
            return None, None
        return [nums[i*dim:(i+1)*dim] for i in range(dim)], dim
    except (ValueError, TypeError):
        logging.error("Failed to parse grid string into numbers.")
        return None, None


def grid_from_payload(region_grid, player_grid=None):
    """
    Builds a board of Cell objects from the API's JSON shapes.

    :param list region_grid: Square matrix of region ids.
    :param list player_grid: Optional matrix of cell states (0 empty,
        1 marked, 2 excluded) of the same shape.
    :raises InvalidGridError: if either matrix is malformed.
    """
    size = check_region_grid(region_grid)
    if player_grid is None:
        player_grid = [[CellState.EMPTY.value] * size for _ in range(size)]
    if not isinstance(player_grid, list) or len(player_grid) != size:
        raise InvalidGridError(f"Player grid must have {size} rows.")

    grid = []
    for r in range(size):
        states = player_grid[r]
        if not isinstance(states, list) or len(states) != size:
            raise InvalidGridError(f"Player grid row {r} does not have {size} cells.")
        row = []
        for c in range(size):
            value = states[c]
            # JSON true/false would otherwise match 1/0.
            if isinstance(value, bool) or not isinstance(value, int) or value not in _STATE_VALUES:
                raise InvalidGridError(f"Unknown cell state {value!r} at ({r}, {c}).")
            row.append(Cell(r, c, region_grid[r][c], CellState(value)))
        grid.append(row)
    return grid


def level_to_dict(level):
    region_grid = level.region_grid()
    return {
        'size': level.size,
        'regionGrid': region_grid,
        'task': encode_task_string(region_grid),
    }


def result_to_dict(result):
    return {
        'isValid': result.is_valid,
        'conflicts': [list(pos) for pos in sorted(result.conflicts)],
    }
