"""Tests for turning puzzle text into a Grid."""

import io

import pytest

from solver import load_grid
from src.sudoku.errors import InputReadFailure, InputTooShort
from src.sudoku.formatter import OutputStyle, format_grid
from src.sudoku.parser import parse_grid
from puzzles import SOLVED, SOLVED_TEXT


def test_parses_single_line_of_digits():
    assert parse_grid(SOLVED_TEXT) == SOLVED


def test_whitespace_is_skipped_and_not_counted():
    text = "\n".join(" ".join(SOLVED_TEXT[r * 9:(r + 1) * 9]) for r in range(9))
    assert parse_grid("  \t" + text + "\n\n") == SOLVED


def test_zero_and_other_characters_are_blanks():
    text = "0.x,_" + SOLVED_TEXT[5:]
    grid = parse_grid(text)
    assert [grid[i] for i in range(5)] == [0, 0, 0, 0, 0]
    assert [grid[i] for i in range(5, 81)] == [SOLVED[i] for i in range(5, 81)]


def test_characters_after_the_81st_cell_are_ignored():
    assert parse_grid(SOLVED_TEXT + "999 trailing junk") == SOLVED


def test_too_short_input_fails_with_count():
    with pytest.raises(InputTooShort) as excinfo:
        parse_grid(SOLVED_TEXT[:80])
    assert excinfo.value.found == 80
    assert excinfo.value.required == 81


def test_whitespace_only_input_is_too_short():
    with pytest.raises(InputTooShort):
        parse_grid(" \n\t " * 50)


def test_simple_output_round_trips():
    grid = parse_grid("." * 40 + SOLVED_TEXT[40:])
    assert parse_grid(format_grid(grid, OutputStyle.SIMPLE)) == grid
    assert parse_grid(format_grid(SOLVED, OutputStyle.SIMPLE)) == SOLVED


def test_load_grid_reads_file_and_stream(tmp_path):
    path = tmp_path / "puzzle.txt"
    path.write_text(SOLVED_TEXT + "\n")
    assert load_grid(path) == SOLVED
    assert load_grid(stream=io.StringIO(SOLVED_TEXT)) == SOLVED


def test_load_grid_missing_file(tmp_path):
    with pytest.raises(InputReadFailure, match="Could not read input file"):
        load_grid(tmp_path / "missing.txt")
