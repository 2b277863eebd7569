import pytest

from consoleapps.sudoku import BORDER, PUZZLE, format_grid, is_valid_move, solve

DIGITS = set(range(1, 10))


def _boxes(grid):
    for top in (0, 3, 6):
        for left in (0, 3, 6):
            yield {grid[r][c] for r in range(top, top + 3) for c in range(left, left + 3)}


def test_solution_satisfies_all_constraints():
    solved = solve(PUZZLE)
    assert all(set(row) == DIGITS for row in solved)
    assert all({row[c] for row in solved} == DIGITS for c in range(9))
    assert all(box == DIGITS for box in _boxes(solved))


def test_solution_keeps_given_clues():
    solved = solve(PUZZLE)
    for r in range(9):
        for c in range(9):
            if PUZZLE[r][c]:
                assert solved[r][c] == PUZZLE[r][c]


def test_solve_does_not_modify_input():
    grid = [list(row) for row in PUZZLE]
    solve(grid)
    assert grid == [list(row) for row in PUZZLE]


def test_solved_grid_is_fixed_point():
    solved = solve(PUZZLE)
    assert solve(solved) == solved


def test_unsolvable_grid_raises():
    grid = [[0] * 9 for _ in range(9)]
    grid[0] = [1, 2, 3, 4, 5, 6, 7, 8, 0]
    grid[5][8] = 9
    with pytest.raises(ValueError):
        solve(grid)


def test_bad_shape_raises():
    with pytest.raises(ValueError):
        solve([[0] * 9 for _ in range(8)])


def test_bad_value_raises():
    grid = [[0] * 9 for _ in range(9)]
    grid[3][3] = 10
    with pytest.raises(ValueError):
        solve(grid)


def test_is_valid_move_checks_row_column_and_box():
    assert not is_valid_move(PUZZLE, 0, 2, 5)  # row
    assert not is_valid_move(PUZZLE, 2, 0, 6)  # column
    assert not is_valid_move(PUZZLE, 2, 2, 2)  # box
    assert is_valid_move(PUZZLE, 0, 2, 4)


def test_format_grid_layout():
    text = format_grid(PUZZLE)
    lines = text.split("\n")
    assert len(lines) == 13
    assert lines[0] == BORDER and lines[-1] == BORDER
    assert lines[4] == "|-------+-------+-------|"
    assert lines[1].startswith("| 5 3   ")


def test_format_solved_grid_has_no_blanks():
    lines = format_grid(solve(PUZZLE)).split("\n")
    cell_lines = [line for line in lines if line.startswith("| ")]
    assert len(cell_lines) == 9
    assert all("   " not in line for line in cell_lines)