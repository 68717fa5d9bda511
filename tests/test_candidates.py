"""Unit tests for blank-cell choice and child generation."""

import pytest

from src.sudoku.candidates import children, choose_blank, first_child, next_sibling
from src.sudoku.model import Grid
from puzzles import SOLVED, blank


def test_choose_blank_picks_lowest_index():
    assert choose_blank(blank(SOLVED, 70, 12, 45)) == 12
    assert choose_blank(Grid.empty()) == 0


def test_choose_blank_on_full_grid_is_none():
    assert choose_blank(SOLVED) is None


def test_first_child_sets_one_without_touching_parent():
    parent = blank(SOLVED, 8)
    child = first_child(parent, 8)
    assert child[8] == 1
    assert parent[8] == 0
    assert [child[i] for i in range(81) if i != 8] == [parent[i] for i in range(81) if i != 8]


def test_next_sibling_increments_until_nine():
    child = first_child(Grid.empty(), 0)
    values = [child[0]]
    while True:
        child = next_sibling(child, 0)
        if child is None:
            break
        values.append(child[0])
    assert values == [1, 2, 3, 4, 5, 6, 7, 8, 9]


def test_children_yields_nine_ascending_siblings():
    grids = list(children(Grid.empty(), 40))
    assert [g[40] for g in grids] == list(range(1, 10))
    assert all(g.blanks() == 80 for g in grids)


def test_misuse_raises_value_error():
    with pytest.raises(ValueError):
        first_child(Grid.empty(), 81)
    with pytest.raises(ValueError):
        next_sibling(Grid.empty(), 0)
