"""Error kinds raised while reading, solving, and writing puzzles.

Every failure the solver reports inherits from :class:`SudokuError` so the
command line can catch a single base class and turn it into an exit status.
"""


class SudokuError(Exception):
    """Base exception for all solver failures."""


class InputTooShort(SudokuError):
    """Raised when the input holds fewer than 81 meaningful characters."""

    def __init__(self, found: int, required: int = 81):
        self.found = found
        self.required = required
        super().__init__(
            f"Not enough input: found {found} of {required} cells needed to build a puzzle."
        )


class InputReadFailure(SudokuError):
    """Raised when the puzzle source (file or stream) cannot be read."""


class OutputWriteFailure(SudokuError):
    """Raised when the destination cannot be created or written to."""


class Unsolvable(SudokuError):
    """Raised when the search exhausts every branch without a solution.

    This is an expected outcome for an invalid puzzle, not a defect.
    """
