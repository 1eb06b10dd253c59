"""Shared test fixtures and configuration."""

from __future__ import annotations

import os
import threading

# Keep test runs from writing log files into the repository
os.environ.setdefault("LOG_TO_FILE", "false")

import pytest
from lagom import Container


class CountingFactory:
    """Container factory that records how many times it was called."""

    def __init__(self, delay: float = 0.0) -> None:
        self.calls = 0
        self._delay = delay
        self._lock = threading.Lock()

    def __call__(self) -> Container:
        with self._lock:
            self.calls += 1
        if self._delay:
            # Widen the window in which racing callers could double-construct
            threading.Event().wait(self._delay)
        return Container()


@pytest.fixture
def counting_factory() -> CountingFactory:
    """Return a fresh counting factory."""
    return CountingFactory()


@pytest.fixture
def slow_counting_factory() -> CountingFactory:
    """Return a counting factory that takes a moment to build the container."""
    return CountingFactory(delay=0.05)
