"""Child-candidate generation: first blank cell, digits in ascending order."""

from typing import Iterator, Optional

from .model import CELLS, SIZE, Grid


def choose_blank(grid: Grid) -> Optional[int]:
    # Row-major, lowest index first.
    for index, value in enumerate(grid):
        if value == 0:
            return index
    return None


def first_child(grid: Grid, blank_index: int) -> Grid:
    _check_index(blank_index)
    return grid.with_value(blank_index, 1)


def next_sibling(prev_child: Grid, blank_index: int) -> Optional[Grid]:
    """Copy of ``prev_child`` with the branching cell bumped by one; None after 9."""
    _check_index(blank_index)
    value = prev_child[blank_index]
    if not 1 <= value <= SIZE:
        raise ValueError(f"cell {blank_index} holds {value}, expected a generated digit")
    if value == SIZE:
        return None
    return prev_child.with_value(blank_index, value + 1)


def children(grid: Grid, blank_index: int) -> Iterator[Grid]:
    child: Optional[Grid] = first_child(grid, blank_index)
    while child is not None:
        yield child
        child = next_sibling(child, blank_index)


def _check_index(blank_index: int) -> None:
    if not 0 <= blank_index < CELLS:
        raise ValueError(f"blank index {blank_index} outside 0..{CELLS - 1}")
