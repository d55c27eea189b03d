"""
Entry point composing parsing, algorithm selection and profiling.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..algorithms.selector import DEFAULT_ALGORITHM, resolve_algorithm
from ..engine.errors import ValidationError
from ..performance.profiler import PerformanceProfiler, PerformanceReport
from .parser import parse_sequence
from .types import CombinationDict, CombinationSet, NumericSequence

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    """Complete outcome of one analysis call."""

    input: NumericSequence
    result: CombinationSet
    error: Optional[str]
    performance_metrics: Optional[PerformanceReport]
    algorithm_used: str

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def combinations(self) -> List[CombinationDict]:
        return self.result.to_list()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase dictionary shape callers consume."""
        return {
            "input": list(self.input),
            "result": self.result.to_list(),
            "error": self.error,
            "performanceMetrics": (
                self.performance_metrics.to_dict() if self.performance_metrics is not None else None
            ),
            "algorithmUsed": self.algorithm_used,
        }


def analyze(raw_input: Any,
            algorithm: str = DEFAULT_ALGORITHM,
            profiler: Optional[PerformanceProfiler] = None) -> AnalysisResult:
    """
    Parse comma-separated integers and detect every sum combination.

    Failures never propagate: parse problems come back with no metrics,
    detector problems come back with metrics and an empty result.

    Args:
        raw_input: Comma-separated integers, e.g. "1,2,3,4"
        algorithm: "time-efficient" or "memory-efficient"; anything else
            runs the time-efficient detector
        profiler: Profiler to run the detector with

    Returns:
        AnalysisResult echoing `algorithm` verbatim
    """
    try:
        sequence = parse_sequence(raw_input)
    except ValidationError as e:
        logger.debug(f"Rejected input: {e.message}")
        return AnalysisResult(
            input=(),
            result=CombinationSet(()),
            error=e.message,
            performance_metrics=None,
            algorithm_used=algorithm,
        )

    selected = resolve_algorithm(algorithm)
    profiler = profiler or PerformanceProfiler()
    report = profiler.run(sequence, selected.display_name, selected.detector)

    return AnalysisResult(
        input=sequence,
        result=report.result,
        error=report.error,
        performance_metrics=report,
        algorithm_used=algorithm,
    )
