"""Puzzle parser: convert raw text into a Grid.

Cells are filled left to right, top to bottom. Digits 1-9 are taken as
given; ``0`` or any other non-whitespace character is a blank. Whitespace
is skipped and never counts as a cell. Anything after the 81st cell is
ignored.
"""

from .errors import InputTooShort
from .model import CELLS, Grid

_GIVEN = frozenset("123456789")


def parse_grid(text: str) -> Grid:
    cells = []
    for ch in text:
        if ch.isspace():
            continue
        cells.append(int(ch) if ch in _GIVEN else 0)
        if len(cells) == CELLS:
            return Grid(tuple(cells))
    raise InputTooShort(found=len(cells), required=CELLS)
