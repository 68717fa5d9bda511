"""Top-level solve interface.

Expose `solve_puzzle(puzzle)` that accepts a Grid, puzzle text, or 9 rows of
digits, and `load_grid(path)` that reads a puzzle from a file or stdin.
"""

from pathlib import Path
from typing import Any, Optional, TextIO

from src.sudoku import solver_core
from src.sudoku.model import Grid
from src.sudoku.parser import parse_grid
from src.utils.io import read_text
from src.utils.trace import Tracer


def load_grid(path: Optional[Path] = None, stream: Optional[TextIO] = None) -> Grid:
    """Read a puzzle from `path` (standard input when None) and parse it."""
    return parse_grid(read_text(path, stream))


def solve_puzzle(
    puzzle: Any,
    options: Optional[solver_core.SearchOptions] = None,
    tracer: Optional[Tracer] = None,
) -> Grid:
    """
    Solve a puzzle and return the completed Grid.
    Accepts:
      - Grid instances (used directly)
      - Puzzle text (parsed via `parse_grid`)
      - A sequence of 9 rows of 9 ints
    Raises Unsolvable when no completion exists.
    """
    if isinstance(puzzle, Grid):
        grid = puzzle
    elif isinstance(puzzle, str):
        grid = parse_grid(puzzle)
    elif isinstance(puzzle, (list, tuple)):
        grid = Grid.from_rows(puzzle)
    else:
        raise TypeError("solve_puzzle expects a Grid, puzzle text, or a list of rows")

    return solver_core.solve_or_raise(grid, options, tracer)


__all__ = ["load_grid", "solve_puzzle"]
