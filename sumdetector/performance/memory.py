"""
Memory probes for the performance profiler.

A probe returns the current memory reading in bytes, or None when the host
cannot provide one. Readings are never synthesized.
"""

import logging
import tracemalloc
from typing import Optional, Protocol

import psutil

logger = logging.getLogger(__name__)


class MemoryProbe(Protocol):
    """Protocol for memory readings."""

    name: str

    def read(self) -> Optional[int]:
        """Current usage in bytes, None if unavailable."""
        ...

    def stop(self) -> None:
        """Release whatever the probe started."""
        ...


class NullMemoryProbe:
    """Probe for hosts without memory introspection."""

    name = "none"

    def read(self) -> Optional[int]:
        return None

    def stop(self) -> None:
        pass


class ProcessMemoryProbe:
    """Resident set size of the current process, via psutil."""

    name = "psutil"

    def __init__(self):
        try:
            self.process: Optional[psutil.Process] = psutil.Process()
        except psutil.Error as e:
            logger.debug(f"Process memory unavailable: {e}")
            self.process = None

    def read(self) -> Optional[int]:
        if self.process is None:
            return None
        try:
            return self.process.memory_info().rss
        except psutil.Error as e:
            logger.debug(f"Process memory read failed: {e}")
            return None

    def stop(self) -> None:
        pass


class TracemallocProbe:
    """
    Python heap currently traced by tracemalloc.

    With auto_start the probe starts tracing on first read and `stop()` ends
    it again; otherwise it only reports while someone else is tracing.
    """

    name = "tracemalloc"

    def __init__(self, auto_start: bool = True):
        self.auto_start = auto_start
        self._started_here = False

    def read(self) -> Optional[int]:
        if not tracemalloc.is_tracing():
            if not self.auto_start:
                return None
            tracemalloc.start()
            self._started_here = True
        current, _peak = tracemalloc.get_traced_memory()
        return current

    def stop(self) -> None:
        """Stop tracing if this probe started it."""
        if self._started_here and tracemalloc.is_tracing():
            tracemalloc.stop()
        self._started_here = False


PROBE_NAMES = ("psutil", "tracemalloc", "none")


def get_memory_probe(name: str) -> MemoryProbe:
    """
    Create a probe by name.

    Raises:
        ValueError: For names outside PROBE_NAMES
    """
    if name == "psutil":
        return ProcessMemoryProbe()
    elif name == "tracemalloc":
        return TracemallocProbe()
    elif name == "none":
        return NullMemoryProbe()
    raise ValueError(f"Unknown memory probe '{name}', expected one of {', '.join(PROBE_NAMES)}")
