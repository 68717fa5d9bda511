"""Run configuration built from the command line."""

import os
from argparse import Namespace
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO

from .formatter import OutputStyle, PartialPrinter
from .solver_core import SearchOptions

STYLE_ENV = "SUDOKU_STYLE"


def default_style() -> OutputStyle:
    """Style used when ``--style`` is omitted; ``SUDOKU_STYLE`` overrides bordered."""
    return OutputStyle.parse(os.environ.get(STYLE_ENV, OutputStyle.BORDERED.value))


@dataclass(frozen=True)
class SolverConfig:
    input: Optional[Path] = None
    output: Optional[Path] = None
    style: OutputStyle = OutputStyle.BORDERED
    print_partials: bool = False
    delay_ms: Optional[int] = None
    trace: Optional[Path] = None

    def __post_init__(self) -> None:
        if self.delay_ms is not None and self.delay_ms < 0:
            raise ValueError("--delay must be a non-negative number of milliseconds")

    @classmethod
    def from_args(cls, args: Namespace) -> "SolverConfig":
        style = args.style if isinstance(args.style, OutputStyle) else OutputStyle.parse(args.style)
        return cls(
            input=args.input,
            output=args.output,
            style=style,
            print_partials=args.print_partials,
            delay_ms=args.delay,
            trace=getattr(args, "trace", None),
        )

    def search_options(self, stream: TextIO) -> SearchOptions:
        """Hooks for the search; partials go to ``stream`` in the configured style."""
        observer = PartialPrinter(self.style, stream) if self.print_partials else None
        return SearchOptions(delay_ms=self.delay_ms, observer=observer)
