"""Validity (reject) and completeness (accept) checks for candidate grids."""

from dataclasses import dataclass
from typing import Optional

from .model import GROUPS, SIZE, Grid

_GROUP_KINDS = ("row", "column", "box")


@dataclass(frozen=True)
class Conflict:
    """A repeated non-zero value inside one row, column, or box (0-based group)."""

    kind: str
    group: int
    value: int

    def __str__(self) -> str:
        return f"{self.kind} {self.group + 1} contains {self.value} more than once"


def find_conflict(grid: Grid) -> Optional[Conflict]:
    """
    Scan rows, then columns, then boxes with a tally indexed 1..9.
    Returns the first duplicate found, or None when every group is valid.
    Blank cells (0) never count towards a violation.
    """
    for position, group in enumerate(GROUPS):
        tally = [0] * (SIZE + 1)
        for index in group:
            value = grid[index]
            if not value:
                continue
            tally[value] += 1
            if tally[value] > 1:
                kind = _GROUP_KINDS[position // SIZE]
                return Conflict(kind=kind, group=position % SIZE, value=value)
    return None


def reject(grid: Grid) -> bool:
    """True iff some row, column, or box repeats a non-zero value."""
    return find_conflict(grid) is not None


def accept(grid: Grid) -> bool:
    """True iff no cell is blank. Only meaningful once ``reject`` is False."""
    return 0 not in grid.cells
