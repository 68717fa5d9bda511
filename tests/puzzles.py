"""Shared puzzle fixtures for the test suite."""

from src.sudoku.model import Grid

SOLVED_ROWS = [
    [1, 2, 3, 4, 5, 6, 7, 8, 9],
    [4, 5, 6, 7, 8, 9, 1, 2, 3],
    [7, 8, 9, 1, 2, 3, 4, 5, 6],
    [2, 1, 4, 3, 6, 5, 8, 9, 7],
    [3, 6, 5, 8, 9, 7, 2, 1, 4],
    [8, 9, 7, 2, 1, 4, 3, 6, 5],
    [5, 3, 1, 6, 4, 2, 9, 7, 8],
    [6, 4, 2, 9, 7, 8, 5, 3, 1],
    [9, 7, 8, 5, 3, 1, 6, 4, 2],
]

SOLVED = Grid.from_rows(SOLVED_ROWS)
SOLVED_TEXT = "".join(str(v) for row in SOLVED_ROWS for v in row)


def blank(grid: Grid, *indices: int) -> Grid:
    for index in indices:
        grid = grid.with_value(index, 0)
    return grid


def duplicate_in_row() -> Grid:
    return Grid.empty().with_value(0, 5).with_value(1, 5)
