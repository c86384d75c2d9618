"""**********************************************************************************
 * Title: models.py
 * -------------------------------------------------------------------------------
 * Description:
 * The shared board representation used by the generator, the validator and
 * the API layer. A board is a square grid of cells; each cell knows its
 * position, the color region it belongs to, and the player's mark on it.
 * Also holds the shape checks that reject malformed grids before any rule
 * evaluation happens.
 **********************************************************************************"""

import copy
from enum import Enum
from typing import FrozenSet, Iterable, List, Optional, Tuple

from queenslab.constants import STATE_EMPTY, STATE_MARKED, STATE_EXCLUDED


class CellState(Enum):
    """Player state of a single cell."""
    EMPTY = STATE_EMPTY
    MARKED = STATE_MARKED       # A queen
    EXCLUDED = STATE_EXCLUDED   # Player's "no queen here" note


class InvalidGridError(ValueError):
    """Raised when a grid's shape or region ids disagree with its size."""


class Cell:
    def __init__(self, row: int, col: int, region: int, state: CellState = CellState.EMPTY):
        self.row = row
        self.col = col
        self.region = region
        self.state = state

    def __eq__(self, other):
        if not isinstance(other, Cell):
            return NotImplemented
        return (self.row, self.col, self.region, self.state) == (other.row, other.col, other.region, other.state)

    def __repr__(self):
        return f"Cell(row={self.row}, col={self.col}, region={self.region}, state={self.state.name})"


Grid = List[List[Cell]]
Position = Tuple[int, int]


def build_grid(region_grid: List[List[int]]) -> Grid:
    """Creates an all-empty grid from a matrix of region ids."""
    return [
        [Cell(row, col, region) for col, region in enumerate(region_row)]
        for row, region_row in enumerate(region_grid)
    ]


def place_markers(grid: Grid, positions: Iterable[Position]) -> Grid:
    """Returns a copy of `grid` with every given (row, col) set to MARKED."""
    board = copy.deepcopy(grid)
    for row, col in positions:
        board[row][col].state = CellState.MARKED
    return board


def check_region_grid(region_grid, size: Optional[int] = None) -> int:
    """
    Verifies that a region id matrix is square and that every id lies in
    [0, size). Returns the size.

    :raises InvalidGridError: if the matrix is malformed.
    """
    if not isinstance(region_grid, (list, tuple)):
        raise InvalidGridError("Region grid must be a list of rows.")
    if size is None:
        size = len(region_grid)
    if len(region_grid) != size:
        raise InvalidGridError(f"Expected {size} rows, got {len(region_grid)}.")
    for r, row in enumerate(region_grid):
        if not isinstance(row, (list, tuple)) or len(row) != size:
            raise InvalidGridError(f"Row {r} does not have {size} cells.")
        for c, region in enumerate(row):
            if isinstance(region, bool) or not isinstance(region, int):
                raise InvalidGridError(f"Region id at ({r}, {c}) is not an integer.")
            if not 0 <= region < size:
                raise InvalidGridError(f"Region id {region} at ({r}, {c}) is outside [0, {size}).")
    return size


def check_grid(grid: Grid) -> int:
    """
    Verifies a grid of cells: square, each cell at the position it claims,
    known states, region ids within range. Returns the size.

    :raises InvalidGridError: if the grid is malformed.
    """
    if not isinstance(grid, (list, tuple)):
        raise InvalidGridError("Grid must be a list of rows.")
    size = len(grid)
    for r, row in enumerate(grid):
        if not isinstance(row, (list, tuple)) or len(row) != size:
            raise InvalidGridError(f"Row {r} does not have {size} cells.")
        for c, cell in enumerate(row):
            if not isinstance(cell, Cell):
                raise InvalidGridError(f"Entry at ({r}, {c}) is not a Cell.")
            if (cell.row, cell.col) != (r, c):
                raise InvalidGridError(f"Cell at ({r}, {c}) claims position ({cell.row}, {cell.col}).")
            if not isinstance(cell.state, CellState):
                raise InvalidGridError(f"Cell at ({r}, {c}) has unknown state {cell.state!r}.")
            if isinstance(cell.region, bool) or not isinstance(cell.region, int) or not 0 <= cell.region < size:
                raise InvalidGridError(f"Region id {cell.region!r} at ({r}, {c}) is outside [0, {size}).")
    return size


class Level:
    """
    A generated puzzle: its size and its region layout with every cell empty.

    The level itself is never modified. Each read of `grid` returns a new deep
    copy, which is the board a player marks up.
    """

    def __init__(self, size: int, grid: Grid):
        self._size = size
        self._grid = copy.deepcopy(grid)

    @property
    def size(self) -> int:
        return self._size

    @property
    def grid(self) -> Grid:
        return copy.deepcopy(self._grid)

    def region_grid(self) -> List[List[int]]:
        return [[cell.region for cell in row] for row in self._grid]

    def __eq__(self, other):
        if not isinstance(other, Level):
            return NotImplemented
        return self._size == other._size and self._grid == other._grid

    def __repr__(self):
        return f"Level(size={self._size})"


class ValidationResult:
    """Outcome of a board check: overall validity plus every conflicting cell."""

    def __init__(self, is_valid: bool, conflicts: Iterable[Position] = ()):
        self.is_valid = is_valid
        self.conflicts: FrozenSet[Position] = frozenset(conflicts)

    def __eq__(self, other):
        if not isinstance(other, ValidationResult):
            return NotImplemented
        return self.is_valid == other.is_valid and self.conflicts == other.conflicts

    def __repr__(self):
        return f"ValidationResult(is_valid={self.is_valid}, conflicts={sorted(self.conflicts)})"
