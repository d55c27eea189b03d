"""
Performance profiler for detector runs.

Wraps a single detector call, measuring elapsed time and a best-effort
memory delta, and converts detector failures into report data.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..algorithms.base import Detector
from ..core.types import CombinationSet, NumericSequence
from .complexity import ComplexityInfo, get_complexity_info
from .memory import MemoryProbe, ProcessMemoryProbe

logger = logging.getLogger(__name__)


@dataclass
class PerformanceReport:
    """Metrics and results for one detector run."""

    algorithm: str
    execution_time: float  # milliseconds, 3 decimal places
    memory_used: int       # bytes, never negative
    result: CombinationSet
    input_size: int
    complexity: Optional[ComplexityInfo] = None
    error: Optional[str] = None
    memory_probe: Optional[str] = None  # name of the probe that took the readings

    @property
    def result_count(self) -> int:
        return len(self.result)

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "algorithm": self.algorithm,
            "executionTime": self.execution_time,
            "memoryUsed": self.memory_used,
            "result": self.result.to_list(),
            "resultCount": self.result_count,
            "inputSize": self.input_size,
            "complexity": dict(self.complexity) if self.complexity is not None else None,
            "error": self.error,
        }


def memory_delta(start: Optional[int], end: Optional[int]) -> int:
    """Non-negative difference of two readings, 0 if either is missing."""
    if start is None or end is None:
        return 0
    return max(0, end - start)


class PerformanceProfiler:
    """Runs detectors with timing, memory measurement and error capture."""

    def __init__(self, memory_probe: Optional[MemoryProbe] = None):
        """
        Initialize profiler.

        Args:
            memory_probe: Source of memory readings (defaults to process RSS)
        """
        self.memory_probe = memory_probe if memory_probe is not None else ProcessMemoryProbe()

    def run(self, sequence: NumericSequence, algorithm_name: str, detector: Detector) -> PerformanceReport:
        """
        Execute a detector with performance monitoring.

        Args:
            sequence: Input integers
            algorithm_name: Display name, also the complexity lookup key
            detector: Detector function to execute

        Returns:
            PerformanceReport; on detector failure the result is empty and
            `error` holds the failure message
        """
        start_memory = self.memory_probe.read()
        start_time = time.perf_counter()

        error: Optional[str] = None
        try:
            result = detector(sequence)
        except Exception as e:
            error = str(e)
            result = CombinationSet(())
            logger.warning(
                f"{algorithm_name} detector failed: {error}",
                extra={"algorithm": algorithm_name, "error": error},
            )

        end_time = time.perf_counter()
        end_memory = self.memory_probe.read()

        if start_memory is None or end_memory is None:
            logger.debug(f"Memory probe '{self.memory_probe.name}' returned no reading")

        execution_time = round((end_time - start_time) * 1000, 3)
        report = PerformanceReport(
            algorithm=algorithm_name,
            execution_time=execution_time,
            memory_used=memory_delta(start_memory, end_memory),
            result=result,
            input_size=_safe_len(sequence),
            complexity=get_complexity_info(algorithm_name),
            error=error,
            memory_probe=self.memory_probe.name,
        )

        logger.debug(
            f"{algorithm_name}: {report.result_count} combinations from "
            f"{report.input_size} values in {execution_time}ms",
            extra={
                "algorithm": algorithm_name,
                "input_size": report.input_size,
                "result_count": report.result_count,
                "execution_time": execution_time,
            },
        )
        return report

    def close(self) -> None:
        """Release the memory probe, ending any tracing it started."""
        self.memory_probe.stop()


def _safe_len(sequence: Any) -> int:
    try:
        return len(sequence)
    except TypeError:
        return 0
