"""Tracing module: logs search steps and writes them to CSV."""

import csv
import sys
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional


@dataclass
class TraceStep:
    """A single step in the search."""

    timestamp: float
    step_number: int
    action_type: str  # 'visit', 'reject', 'expand', 'backtrack', 'solution_found'
    depth: Optional[int] = None
    cell: Optional[int] = None  # linear index of the branching cell
    value: Optional[int] = None
    blanks_remaining: Optional[int] = None
    reason: Optional[str] = None


class Tracer:
    """Records search steps for logging and analysis.

    Action counts are always kept while enabled. Individual steps are only
    stored when ``keep_steps`` is set, since a hard puzzle can visit millions
    of nodes.
    """

    def __init__(self, enabled: bool = True, keep_steps: bool = False):
        self.enabled = enabled
        self.keep_steps = keep_steps
        self.steps: List[TraceStep] = []
        self.action_counts: Dict[str, int] = {}
        self.start_time = datetime.now().timestamp()
        self.step_counter = 0

    def _get_timestamp(self) -> float:
        """Get elapsed time in seconds since tracer creation."""
        return datetime.now().timestamp() - self.start_time

    def _record(self, action_type: str, **fields: Any) -> None:
        self.step_counter += 1
        self.action_counts[action_type] = self.action_counts.get(action_type, 0) + 1
        if self.keep_steps:
            self.steps.append(TraceStep(
                timestamp=self._get_timestamp(),
                step_number=self.step_counter,
                action_type=action_type,
                **fields,
            ))

    def log_visit(self, depth: int, blanks_remaining: int):
        """Log the controller entering a node."""
        if not self.enabled:
            return
        self._record('visit', depth=depth, blanks_remaining=blanks_remaining)

    def log_reject(self, depth: int, reason: str = ""):
        """Log a candidate failing the duplicate check."""
        if not self.enabled:
            return
        self._record('reject', depth=depth, reason=reason)

    def log_expand(self, depth: int, cell: int, value: int):
        """Log a child generated at the branching cell."""
        if not self.enabled:
            return
        self._record('expand', depth=depth, cell=cell, value=value)

    def log_backtrack(self, depth: int, cell: int, reason: str = "All 9 digits exhausted"):
        """Log a node reporting failure to its parent."""
        if not self.enabled:
            return
        self._record('backtrack', depth=depth, cell=cell, reason=reason)

    def log_solution_found(self, depth: int):
        """Log when a solution is found."""
        if not self.enabled:
            return
        self._record('solution_found', depth=depth, blanks_remaining=0)

    def to_csv(self, filepath: Path) -> None:
        """Write trace to CSV file."""
        if not self.steps:
            print("No trace steps to write", file=sys.stderr)
            return

        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        fieldnames = [
            'timestamp', 'step_number', 'action_type', 'depth', 'cell', 'value',
            'blanks_remaining', 'reason'
        ]

        with open(filepath, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for step in self.steps:
                writer.writerow(asdict(step))

        print(f"Trace written to {filepath} ({len(self.steps)} steps)", file=sys.stderr)

    def summary(self) -> Dict[str, Any]:
        """Get a summary of the trace."""
        return {
            'total_steps': self.step_counter,
            'elapsed_time_seconds': self._get_timestamp(),
            'action_counts': dict(self.action_counts),
            'num_visits': self.action_counts.get('visit', 0),
            'num_backtracks': self.action_counts.get('backtrack', 0),
        }


# Global tracer instance
_global_tracer: Optional[Tracer] = None


def get_tracer() -> Tracer:
    """Get or create the global tracer."""
    global _global_tracer
    if _global_tracer is None:
        _global_tracer = Tracer(enabled=True)
    return _global_tracer


def reset_tracer(keep_steps: bool = False) -> None:
    """Reset the global tracer."""
    global _global_tracer
    _global_tracer = Tracer(enabled=True, keep_steps=keep_steps) if keep_steps else None


def enable_tracing(enabled: bool = True) -> None:
    """Enable or disable tracing."""
    get_tracer().enabled = enabled
