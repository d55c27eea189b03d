"""
Shared fixtures for the sum detector test suite.
"""

import logging
from typing import Iterable, List, Optional

import pytest

from sumdetector.config import ENV_OVERRIDES
from sumdetector.performance.memory import NullMemoryProbe
from sumdetector.performance.profiler import PerformanceProfiler


class ScriptedProbe:
    """Memory probe returning readings from a fixed script."""

    name = "scripted"

    def __init__(self, readings: Iterable[Optional[int]]):
        self.readings: List[Optional[int]] = list(readings)
        self.calls = 0
        self.stopped = False

    def read(self) -> Optional[int]:
        value = self.readings[self.calls]
        self.calls += 1
        return value

    def stop(self) -> None:
        self.stopped = True


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Run every test in an empty directory without SUMDETECTOR_* overrides."""
    for env_var in ENV_OVERRIDES:
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    logger = logging.getLogger("sumdetector")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True


@pytest.fixture
def quiet_profiler():
    """Profiler that never measures memory."""
    return PerformanceProfiler(memory_probe=NullMemoryProbe())


@pytest.fixture
def scripted_probe():
    """Factory for probes with predetermined readings."""
    return ScriptedProbe
