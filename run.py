"""CLI entrypoint: read a puzzle (or a dataset of puzzles), solve, and write the result."""

import argparse
import csv
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from solver import load_grid, solve_puzzle
from src.sudoku import __version__, solver_core
from src.sudoku.config import STYLE_ENV, SolverConfig, default_style
from src.sudoku.errors import InputReadFailure, OutputWriteFailure, SudokuError
from src.sudoku.formatter import OutputStyle, format_grid
from src.sudoku.loader import load_puzzles
from src.sudoku.parser import parse_grid
from src.utils.io import write_text
from src.utils.trace import get_tracer, reset_tracer


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Solve 9x9 Sudoku puzzles by backtracking. Digits 1-9 fill a cell, "
            "0 or any other character is a blank, whitespace is ignored."
        )
    )
    parser.add_argument("-i", "--input", type=Path, default=None,
                        help="Location of puzzle to read (default: standard input)")
    parser.add_argument("-o", "--output", type=Path, default=None,
                        help="File to write the solution to (default: standard output)")
    parser.add_argument(
        "--style",
        choices=[s.value for s in OutputStyle],
        default=None,
        help=f"Output style (default: bordered, or ${STYLE_ENV} when set)",
    )
    parser.add_argument("-p", "--print-partials", action="store_true",
                        help="Print each partial solution to the console as the search runs")
    parser.add_argument("-d", "--delay", type=int, default=None, metavar="MILLISECONDS",
                        help="Delay between each visited candidate (useful with --print-partials)")
    parser.add_argument("--trace", type=Path, default=None,
                        help="Optional path to write the search trace as CSV")
    parser.add_argument(
        "--batch",
        type=Path,
        default=None,
        help=(
            "Solve every puzzle in a .csv/.parquet/.json/.jsonl/.txt dataset and write "
            "id,solution,steps,matches rows (simple style) to --output or stdout. "
            "Cannot be combined with --input, --print-partials, --delay or --trace"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    if args.style is None:
        try:
            args.style = default_style()
        except ValueError as e:
            parser.error(f"${STYLE_ENV}: {e}")
    if args.delay is not None and args.delay < 0:
        parser.error("--delay must be a non-negative number of milliseconds")
    if args.batch is not None:
        clashing = [
            flag for flag, value in (
                ("--input", args.input),
                ("--print-partials", args.print_partials),
                ("--delay", args.delay),
                ("--trace", args.trace),
            ) if value is not None and value is not False
        ]
        if clashing:
            parser.error(f"--batch cannot be combined with {', '.join(clashing)}")
    return args


def solve_single(config: SolverConfig) -> None:
    """Solve one puzzle; output is only written once a solution exists."""
    reset_tracer(keep_steps=config.trace is not None)
    tracer = get_tracer()

    grid = load_grid(config.input)
    try:
        solution = solve_puzzle(grid, config.search_options(sys.stdout), tracer)
    finally:
        if config.trace:
            tracer.to_csv(config.trace)

    write_text(format_grid(solution, config.style) + "\n", config.output)


def solve_batch(dataset: Path) -> List[Dict[str, Any]]:
    try:
        puzzles = load_puzzles(str(dataset))
    except (OSError, ValueError) as e:
        raise InputReadFailure(f"Could not load puzzles from {dataset}: {e}") from e

    results = []
    for puzzle in puzzles:
        reset_tracer()
        tracer = get_tracer()
        puzzle_id = puzzle.get("id", "unknown")

        try:
            result = solver_core.solve(parse_grid(puzzle["puzzle"]), tracer=tracer)
            steps = tracer.summary()["num_visits"]
            if result.solved:
                solution = format_grid(result.solution, OutputStyle.SIMPLE)
            else:
                print(f"ERROR: Failed to solve puzzle {puzzle_id}: Couldn't solve puzzle.", file=sys.stderr)
                solution = ""
        except SudokuError as e:
            print(f"ERROR: Failed to solve puzzle {puzzle_id}: {e}", file=sys.stderr)
            solution, steps = "", -1

        row = {"id": puzzle_id, "solution": solution, "steps": steps, "matches": ""}
        if "solution" in puzzle:
            row["matches"] = bool(solution) and solution == _normalize_reference(puzzle["solution"])
        results.append(row)
    return results


def _normalize_reference(text: str) -> str:
    try:
        return format_grid(parse_grid(text), OutputStyle.SIMPLE)
    except SudokuError:
        return ""


def write_results_csv(results, output_path: Path):
    with open(output_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["id", "solution", "steps", "matches"])

        for r in results:
            writer.writerow([r["id"], r["solution"], r["steps"], r["matches"]])


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        if args.batch is not None:
            results = solve_batch(args.batch)
            if args.output:
                try:
                    write_results_csv(results, args.output)
                except OSError as e:
                    raise OutputWriteFailure(f"Could not write results to {args.output}: {e}") from e
            else:
                for r in results:
                    print(f"{r['id']},{r['solution']},{r['steps']},{r['matches']}")
            return 0 if all(r["solution"] for r in results) else 1

        solve_single(SolverConfig.from_args(args))
    except SudokuError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
