"""Depth-first backtracking search over candidate grids.

Each visited node goes through the same steps: optional delay, optional
progress callback, then ``reject`` / ``accept`` / expand. Children are
generated lazily one at a time (leftmost blank, digits 1..9) and the first
accepted grid ends the whole traversal.
"""

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from .candidates import choose_blank, first_child, next_sibling
from .constraints import accept, find_conflict
from .errors import Unsolvable
from .model import Grid
from src.utils.trace import Tracer, get_tracer

Observer = Callable[[Grid], None]


@dataclass(frozen=True)
class SearchOptions:
    """Instrumentation hooks; none of them change what the search finds."""

    delay_ms: Optional[int] = None
    observer: Optional[Observer] = None
    sleep: Callable[[float], None] = time.sleep

    def __post_init__(self) -> None:
        if self.delay_ms is not None and self.delay_ms < 0:
            raise ValueError("delay_ms must be non-negative")


@dataclass
class SearchNode:
    """One point in the search tree.

    ``blank_index`` is chosen on the first expansion and reused for every
    sibling; ``generated`` counts the children produced so far (0..9).
    """

    grid: Grid
    depth: int = 0
    blank_index: Optional[int] = None
    generated: int = 0
    _last_child: Optional[Grid] = field(default=None, repr=False)

    def expand(self) -> "SearchNode":
        self.blank_index = choose_blank(self.grid)
        if self.blank_index is None:
            raise ValueError("cannot expand a grid without blank cells")
        self._last_child = first_child(self.grid, self.blank_index)
        self.generated = 1
        return SearchNode(self._last_child, depth=self.depth + 1)

    def next_child(self) -> Optional["SearchNode"]:
        if self._last_child is None or self.blank_index is None:
            raise ValueError("next_child called before expand")
        sibling = next_sibling(self._last_child, self.blank_index)
        if sibling is None:
            return None
        self._last_child = sibling
        self.generated += 1
        return SearchNode(sibling, depth=self.depth + 1)


@dataclass(frozen=True)
class SearchResult:
    solution: Optional[Grid]
    nodes_visited: int
    max_depth: int

    @property
    def solved(self) -> bool:
        return self.solution is not None


class _Stats:
    def __init__(self) -> None:
        self.nodes_visited = 0
        self.max_depth = 0


def solve(
    grid: Grid, options: Optional[SearchOptions] = None, tracer: Optional[Tracer] = None
) -> SearchResult:
    """
    Search for the first solution reachable from ``grid`` in pre-order.
    Returns a SearchResult whose ``solution`` is None when the puzzle is unsolvable.
    """
    options = options or SearchOptions()
    tracer = tracer or get_tracer()
    stats = _Stats()
    solution = _backtrack(SearchNode(grid), options, tracer, stats)
    return SearchResult(
        solution=solution, nodes_visited=stats.nodes_visited, max_depth=stats.max_depth
    )


def solve_or_raise(
    grid: Grid, options: Optional[SearchOptions] = None, tracer: Optional[Tracer] = None
) -> Grid:
    """Like ``solve`` but raises Unsolvable instead of returning an empty result."""
    result = solve(grid, options, tracer)
    if result.solution is None:
        conflict = find_conflict(grid)
        if conflict is not None:
            raise Unsolvable(f"Couldn't solve puzzle: {conflict}.")
        raise Unsolvable(
            f"Couldn't solve puzzle: search exhausted after {result.nodes_visited} nodes."
        )
    return result.solution


def _backtrack(
    node: SearchNode, options: SearchOptions, tracer: Tracer, stats: _Stats
) -> Optional[Grid]:
    if options.delay_ms:
        options.sleep(options.delay_ms / 1000.0)
    if options.observer is not None:
        options.observer(node.grid)

    stats.nodes_visited += 1
    stats.max_depth = max(stats.max_depth, node.depth)
    tracer.log_visit(depth=node.depth, blanks_remaining=node.grid.blanks())

    conflict = find_conflict(node.grid)
    if conflict is not None:
        tracer.log_reject(depth=node.depth, reason=str(conflict))
        return None
    if accept(node.grid):
        tracer.log_solution_found(depth=node.depth)
        return node.grid

    child: Optional[SearchNode] = node.expand()
    while child is not None:
        tracer.log_expand(depth=node.depth, cell=node.blank_index, value=node.generated)
        result = _backtrack(child, options, tracer, stats)
        if result is not None:
            return result
        child = node.next_child()

    tracer.log_backtrack(depth=node.depth, cell=node.blank_index)
    return None
