"""Grid data structure and the row/column/box index layout."""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple

SIZE = 9
BOX = 3
CELLS = SIZE * SIZE

Group = Tuple[int, ...]


def index_of(row: int, col: int) -> int:
    return row * SIZE + col


def position_of(index: int) -> Tuple[int, int]:
    return divmod(index, SIZE)


def box_of(index: int) -> int:
    row, col = position_of(index)
    return (row // BOX) * BOX + col // BOX


ROWS: Tuple[Group, ...] = tuple(
    tuple(index_of(r, c) for c in range(SIZE)) for r in range(SIZE)
)
COLUMNS: Tuple[Group, ...] = tuple(
    tuple(index_of(r, c) for r in range(SIZE)) for c in range(SIZE)
)
# Box b covers rows 3*(b // 3).. and columns 3*(b % 3)..
BOXES: Tuple[Group, ...] = tuple(
    tuple(
        index_of(BOX * (b // BOX) + i, BOX * (b % BOX) + j)
        for i in range(BOX)
        for j in range(BOX)
    )
    for b in range(SIZE)
)
GROUPS: Tuple[Group, ...] = ROWS + COLUMNS + BOXES


@dataclass(frozen=True)
class Grid:
    """Fixed 81-cell puzzle in row-major order; 0 marks a blank cell.

    Grids are immutable. ``with_value`` hands back a new grid, so every
    search node owns an independent copy and observers only ever get a
    read-only view.
    """

    cells: Tuple[int, ...]

    def __post_init__(self) -> None:
        cells = tuple(self.cells)
        if len(cells) != CELLS:
            raise ValueError(f"Grid needs {CELLS} cells, got {len(cells)}")
        for index, value in enumerate(cells):
            if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= SIZE:
                raise ValueError(f"cell {index} must be an int in 0..{SIZE}, got {value!r}")
        object.__setattr__(self, "cells", cells)

    @classmethod
    def empty(cls) -> "Grid":
        return cls((0,) * CELLS)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]]) -> "Grid":
        rows = [list(r) for r in rows]
        if len(rows) != SIZE or any(len(r) != SIZE for r in rows):
            raise ValueError(f"expected {SIZE} rows of {SIZE} values")
        return cls(tuple(v for r in rows for v in r))

    def __getitem__(self, index: int) -> int:
        return self.cells[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.cells)

    def __len__(self) -> int:
        return CELLS

    def with_value(self, index: int, value: int) -> "Grid":
        cells = list(self.cells)
        cells[index] = value
        return Grid(tuple(cells))

    def row(self, r: int) -> Tuple[int, ...]:
        return tuple(self.cells[i] for i in ROWS[r])

    def column(self, c: int) -> Tuple[int, ...]:
        return tuple(self.cells[i] for i in COLUMNS[c])

    def box(self, b: int) -> Tuple[int, ...]:
        return tuple(self.cells[i] for i in BOXES[b])

    def to_rows(self) -> List[List[int]]:
        return [list(self.row(r)) for r in range(SIZE)]

    def blanks(self) -> int:
        return self.cells.count(0)
