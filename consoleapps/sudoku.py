"""Backtracking solver for 9x9 sudoku puzzles."""

from __future__ import annotations

import argparse
from typing import Sequence

N = 9
BORDER = "+-------+-------+-------+"
BAND_SEPARATOR = "|-------+-------+-------|"

PUZZLE: tuple[tuple[int, ...], ...] = (
    (5, 3, 0, 0, 0, 0, 0, 0, 0),
    (6, 2, 0, 3, 0, 0, 0, 0, 0),
    (0, 9, 0, 0, 4, 0, 1, 0, 0),
    (0, 5, 0, 4, 8, 0, 2, 9, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 4, 3, 0, 1, 2, 0, 5, 0),
    (0, 0, 8, 0, 5, 0, 0, 1, 0),
    (0, 0, 0, 0, 0, 6, 0, 3, 9),
    (0, 0, 0, 0, 0, 0, 0, 6, 2),
)

Grid = Sequence[Sequence[int]]


def _check_grid(grid: Grid) -> None:
    if len(grid) != N or any(len(row) != N for row in grid):
        raise ValueError("a sudoku grid has 9 rows of 9 cells")
    if any(not 0 <= value <= N for row in grid for value in row):
        raise ValueError("sudoku cells hold 0 (empty) or a digit from 1 to 9")


def is_valid_move(grid: Grid, row: int, col: int, value: int) -> bool:
    """Tell whether value is absent from the cell's row, column and box."""
    if value in grid[row]:
        return False
    if any(line[col] == value for line in grid):
        return False
    top = row - row % 3
    left = col - col % 3
    return all(
        grid[r][c] != value for r in range(top, top + 3) for c in range(left, left + 3)
    )


def solve(grid: Grid) -> list[list[int]]:
    """Return a solved copy of the grid, filling empty cells in reading order."""
    _check_grid(grid)
    work = [list(row) for row in grid]
    empties = [(r, c) for r in range(N) for c in range(N) if work[r][c] == 0]

    def fill(index: int) -> bool:
        if index == len(empties):
            return True
        row, col = empties[index]
        for value in range(1, N + 1):
            if is_valid_move(work, row, col, value):
                work[row][col] = value
                if fill(index + 1):
                    return True
                work[row][col] = 0
        return False

    if not fill(0):
        raise ValueError("the puzzle has no solution")
    return work


def format_grid(grid: Grid) -> str:
    """Draw the grid with box borders, leaving empty cells blank."""
    _check_grid(grid)
    lines = [BORDER]
    for r, row in enumerate(grid):
        parts = ["| "]
        for c, value in enumerate(row):
            parts.append(f"{value} " if value else "  ")
            if c % 3 == 2:
                parts.append("| ")
        lines.append("".join(parts))
        if r % 3 == 2 and r != N - 1:
            lines.append(BAND_SEPARATOR)
    lines.append(BORDER)
    return "\n".join(lines)


def main(argv=None) -> int:
    argparse.ArgumentParser(description="Solve a sample sudoku puzzle.").parse_args(argv)
    print(format_grid(PUZZLE))
    try:
        solved = solve(PUZZLE)
    except ValueError:
        print(format_grid(PUZZLE))
        return 1
    print(format_grid(solved))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())