"""
tests/conftest.py - Shared fixtures for the experiment tests.
"""

import pytest

from immortality.logbook import LogContext


class ScriptedSource:
    """Trial source that replays a fixed list of outcomes and counts calls."""

    def __init__(self, outcomes):
        self.outcomes = list(outcomes)
        self.calls = 0

    def __call__(self) -> bool:
        if self.calls >= len(self.outcomes):
            raise AssertionError(f"Trial source exhausted after {self.calls} draws")
        outcome = self.outcomes[self.calls]
        self.calls += 1
        return outcome


@pytest.fixture
def log_path(tmp_path):
    return tmp_path / "simulation_log.txt"


@pytest.fixture
def log(log_path):
    """LogContext writing into a temporary log file."""
    context = LogContext(log_path)
    context.setup()
    yield context
    context.close()


@pytest.fixture
def scripted():
    return ScriptedSource
