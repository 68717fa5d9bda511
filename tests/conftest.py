"""Shared fixtures: every test starts with a fresh global tracer."""
import pytest

from src.utils.trace import reset_tracer


@pytest.fixture(autouse=True)
def _fresh_tracer():
    reset_tracer()
    yield
    reset_tracer()
