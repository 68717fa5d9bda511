"""Test to verify trace.py works and captures search steps."""

import csv

from src.sudoku import solver_core
from src.sudoku.model import Grid
from src.utils.trace import Tracer, enable_tracing, get_tracer, reset_tracer


def test_tracer_captures_steps(tmp_path):
    tracer = Tracer(keep_steps=True)
    tracer.log_visit(depth=0, blanks_remaining=2)
    tracer.log_expand(depth=0, cell=4, value=1)
    tracer.log_visit(depth=1, blanks_remaining=1)
    tracer.log_reject(depth=1, reason="row 1 contains 1 more than once")
    tracer.log_backtrack(depth=0, cell=4)

    summary = tracer.summary()
    assert summary["total_steps"] == 5
    assert summary["num_visits"] == 2
    assert summary["num_backtracks"] == 1
    assert summary["action_counts"]["reject"] == 1
    assert [s.step_number for s in tracer.steps] == [1, 2, 3, 4, 5]

    out = tmp_path / "traces" / "trace.csv"
    tracer.to_csv(out)
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["action_type"] for r in rows] == ["visit", "expand", "visit", "reject", "backtrack"]
    assert rows[1]["cell"] == "4"


def test_counts_without_keeping_steps():
    tracer = Tracer()
    result = solver_core.solve(Grid.empty().with_value(0, 5).with_value(1, 5), tracer=tracer)
    assert not result.solved
    assert tracer.steps == []
    assert tracer.summary()["action_counts"] == {"visit": 1, "reject": 1}


def test_disabled_tracer_records_nothing(capsys):
    tracer = Tracer(enabled=False, keep_steps=True)
    tracer.log_visit(depth=0, blanks_remaining=81)
    assert tracer.summary()["total_steps"] == 0
    tracer.to_csv("unused.csv")
    assert "No trace steps to write" in capsys.readouterr().err


def test_global_tracer_lifecycle():
    reset_tracer()
    first = get_tracer()
    assert get_tracer() is first
    enable_tracing(False)
    assert not first.enabled

    reset_tracer(keep_steps=True)
    second = get_tracer()
    assert second is not first
    assert second.keep_steps
    reset_tracer()
