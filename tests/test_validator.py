import copy

import pytest

from queenslab.models import Cell, CellState, InvalidGridError, ValidationResult, build_grid, place_markers
from queenslab.solver import staircase_placement
from queenslab.validator import validate_board, find_conflicts


def test_empty_board_has_no_conflicts_but_is_not_valid(column_grid):
    result = validate_board(column_grid(5))

    assert result == ValidationResult(False, [])


def test_same_row_conflict(column_grid):
    board = place_markers(column_grid(5), [(0, 0), (0, 1)])

    result = validate_board(board)

    assert not result.is_valid
    assert {(0, 0), (0, 1)} <= result.conflicts


def test_same_column_conflict():
    board = place_markers(build_grid([[0, 0], [1, 1]]), [(0, 0), (1, 0)])

    assert find_conflicts(board) == {(0, 0), (1, 0)}


def test_same_region_conflict():
    regions = [
        [0, 1, 1, 1],
        [2, 2, 2, 1],
        [3, 0, 3, 3],
        [0, 2, 3, 0],
    ]
    # Different rows and columns, not touching, both in region 0.
    board = place_markers(build_grid(regions), [(0, 0), (2, 1), (1, 3)])

    assert find_conflicts(board) == {(0, 0), (2, 1)}


def test_diagonal_touch_conflict(column_grid):
    board = place_markers(column_grid(5), [(0, 0), (1, 1)])

    result = validate_board(board)

    assert result.conflicts == {(0, 0), (1, 1)}
    assert not result.is_valid


def test_distant_diagonal_is_allowed(column_grid):
    board = place_markers(column_grid(5), [(0, 0), (2, 2)])

    assert find_conflicts(board) == set()


def test_only_conflicting_markers_are_reported(column_grid):
    board = place_markers(column_grid(6), [(0, 0), (0, 3), (5, 5)])

    assert validate_board(board).conflicts == {(0, 0), (0, 3)}


def test_one_marker_short_is_not_valid(column_grid):
    placement = staircase_placement(5)
    board = place_markers(column_grid(5), list(enumerate(placement))[:-1])

    result = validate_board(board)

    assert result.conflicts == frozenset()
    assert not result.is_valid


def test_complete_solution_is_valid(column_grid):
    board = place_markers(column_grid(6), enumerate(staircase_placement(6)))

    assert validate_board(board) == ValidationResult(True)


def test_excluded_cells_are_ignored(column_grid):
    board = place_markers(column_grid(4), enumerate(staircase_placement(4)))
    for row in board:
        for cell in row:
            if cell.state is CellState.EMPTY:
                cell.state = CellState.EXCLUDED

    assert validate_board(board).is_valid


def test_validation_is_idempotent_and_pure(column_grid):
    board = place_markers(column_grid(5), [(0, 0), (1, 1), (3, 3)])
    before = copy.deepcopy(board)

    first = validate_board(board)
    second = validate_board(board)

    assert first == second
    assert board == before


def test_all_cells_marked(column_grid):
    board = place_markers(column_grid(3), [(r, c) for r in range(3) for c in range(3)])

    result = validate_board(board)

    assert len(result.conflicts) == 9
    assert not result.is_valid


def test_rejects_region_id_out_of_range():
    board = build_grid([[0, 1], [1, 2]])

    with pytest.raises(InvalidGridError):
        validate_board(board)


def test_rejects_non_square_grid():
    board = build_grid([[0, 1], [1, 0]])
    board[1].append(Cell(1, 2, 0))

    with pytest.raises(InvalidGridError):
        validate_board(board)


def test_rejects_misplaced_cell(column_grid):
    board = column_grid(3)
    board[1][1] = Cell(2, 2, 1)

    with pytest.raises(InvalidGridError):
        validate_board(board)
