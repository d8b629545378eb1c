# tests/conftest.py

import logging
import os

import pytest
import structlog

from rollr.metrics import reset_counters


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Run each test from an empty directory with no ROLLR_* variables and fresh counters."""
    for key in list(os.environ):
        if key.upper().startswith("ROLLR_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_counters()
    yield
    # Drop handlers the CLI may have installed so later tests start clean
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    structlog.reset_defaults()


class FixedSource:
    """Deterministic RandomSource replaying a fixed sequence of draws."""

    def __init__(self, values):
        self.values = list(values)
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        return self.values.pop(0)


@pytest.fixture
def fixed_source():
    return FixedSource
