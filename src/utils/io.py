"""I/O helpers for puzzle sources and solution destinations."""

import sys
from pathlib import Path
from typing import Optional, TextIO

from src.sudoku.errors import InputReadFailure, OutputWriteFailure


def read_text(path: Optional[Path] = None, stream: Optional[TextIO] = None) -> str:
    """Read a whole file, or standard input when no path is given."""
    if path is None:
        source = stream if stream is not None else sys.stdin
        try:
            return source.read()
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadFailure(f"Could not read puzzle from standard input: {e}") from e

    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadFailure(f"Could not read input file {path}: {e}") from e


def write_text(text: str, path: Optional[Path] = None, stream: Optional[TextIO] = None) -> None:
    """Write to a file (created or truncated), or standard output when no path is given."""
    if path is None:
        target = stream if stream is not None else sys.stdout
        try:
            target.write(text)
            target.flush()
        except OSError as e:
            raise OutputWriteFailure(f"Could not write solution to standard output: {e}") from e
        return

    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise OutputWriteFailure(f"Could not open output file {path}: {e}") from e
