"""Grid model, constraint checks, and backtracking search for 9x9 Sudoku."""

__version__ = "0.1.0"

from .model import Grid
from .constraints import accept, reject
from .candidates import choose_blank, first_child, next_sibling
from .solver_core import SearchOptions, SearchResult, solve, solve_or_raise
from .parser import parse_grid
from .formatter import OutputStyle, format_grid
from .errors import (
    InputReadFailure,
    InputTooShort,
    OutputWriteFailure,
    SudokuError,
    Unsolvable,
)

__all__ = [
    "Grid",
    "accept",
    "reject",
    "choose_blank",
    "first_child",
    "next_sibling",
    "SearchOptions",
    "SearchResult",
    "solve",
    "solve_or_raise",
    "parse_grid",
    "OutputStyle",
    "format_grid",
    "SudokuError",
    "InputTooShort",
    "InputReadFailure",
    "OutputWriteFailure",
    "Unsolvable",
]
