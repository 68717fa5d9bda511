"""Render grids as text in one of the supported output styles."""

from enum import Enum
from typing import TextIO

from .model import BOX, SIZE, Grid

BORDER = "+-------+-------+-------+"


class OutputStyle(Enum):
    SIMPLE = "simple"  # all 81 digits on one line
    MULTILINE = "multiline"  # nine digits per line
    BORDERED = "bordered"  # borders around the puzzle and each 3x3 box

    @classmethod
    def parse(cls, name: str) -> "OutputStyle":
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = "|".join(s.value for s in cls)
            raise ValueError(f"Invalid output style {name!r}, expected {choices}") from None


def format_grid(grid: Grid, style: OutputStyle = OutputStyle.BORDERED) -> str:
    """Render ``grid`` without a trailing newline."""
    if style is OutputStyle.SIMPLE:
        return "".join(str(v) for v in grid)
    if style is OutputStyle.MULTILINE:
        return "\n".join(" ".join(str(v) for v in grid.row(r)) for r in range(SIZE))
    if style is OutputStyle.BORDERED:
        return _bordered(grid)
    raise ValueError(f"Unsupported output style: {style}")


def _bordered(grid: Grid) -> str:
    lines = []
    for r in range(SIZE):
        if r % BOX == 0:
            lines.append(BORDER)
        row = grid.row(r)
        chunks = [" ".join(str(v) for v in row[c:c + BOX]) for c in range(0, SIZE, BOX)]
        lines.append("| " + " | ".join(chunks) + " |")
    lines.append(BORDER)
    return "\n".join(lines)


class PartialPrinter:
    """Search observer that prints every visited candidate grid."""

    def __init__(self, style: OutputStyle, stream: TextIO):
        self.style = style
        self.stream = stream

    def __call__(self, grid: Grid) -> None:
        self.stream.write(format_grid(grid, self.style) + "\n\n")
        self.stream.flush()
