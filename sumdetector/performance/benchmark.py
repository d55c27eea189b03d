"""
Benchmark harness for the sum detectors.

Runs both strategies over random sequences of growing size, checks that
they agree, and estimates how runtime scales with input size.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import numpy as np

from ..algorithms.selector import AlgorithmStrategy, detector_for
from ..core.types import NumericSequence
from .profiler import PerformanceProfiler, PerformanceReport

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkRow:
    """Best-of-N timing for one strategy at one input size."""
    size: int
    strategy: AlgorithmStrategy
    best_time_ms: float
    result_count: int
    memory_used: int = 0
    error: Optional[str] = None

    def to_dict(self) -> Dict:
        return {
            "size": self.size,
            "strategy": self.strategy.value,
            "best_time_ms": self.best_time_ms,
            "result_count": self.result_count,
            "memory_used": self.memory_used,
            "error": self.error,
        }


@dataclass
class BenchmarkReport:
    """All rows of a benchmark run plus per-size agreement flags."""
    seed: int
    repeat: int
    rows: List[BenchmarkRow] = field(default_factory=list)
    consistency: Dict[int, bool] = field(default_factory=dict)

    @property
    def consistent(self) -> bool:
        return all(self.consistency.values())

    def rows_for(self, strategy: AlgorithmStrategy) -> List[BenchmarkRow]:
        return [row for row in self.rows if row.strategy is strategy]

    def growth_exponents(self) -> Dict[AlgorithmStrategy, Optional[float]]:
        """Empirical exponent k in time ~ n^k for each strategy."""
        exponents = {}
        for strategy in AlgorithmStrategy:
            rows = self.rows_for(strategy)
            exponents[strategy] = estimate_growth_exponent(
                [row.size for row in rows],
                [row.best_time_ms for row in rows],
            )
        return exponents

    def to_dict(self) -> Dict:
        return {
            "seed": self.seed,
            "repeat": self.repeat,
            "rows": [row.to_dict() for row in self.rows],
            "consistency": {str(size): ok for size, ok in self.consistency.items()},
            "growth_exponents": {
                strategy.value: exponent for strategy, exponent in self.growth_exponents().items()
            },
        }


def generate_sequence(size: int, seed: int = 42, value_range: int = 100) -> NumericSequence:
    """
    Random integers in [-value_range, value_range].

    Values are converted to Python ints so detectors see the same types the
    parser produces.
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    rng = np.random.default_rng(seed)
    values = rng.integers(-value_range, value_range, size=size, endpoint=True)
    return tuple(int(v) for v in values)


def estimate_growth_exponent(sizes: Sequence[int], times: Sequence[float]) -> Optional[float]:
    """
    Least-squares slope of log(time) against log(size).

    Returns:
        The slope, or None with fewer than two usable (positive) points
    """
    points = [(n, t) for n, t in zip(sizes, times) if n > 0 and t > 0]
    if len(set(n for n, _ in points)) < 2:
        return None
    log_n = np.log([n for n, _ in points])
    log_t = np.log([t for _, t in points])
    slope, _intercept = np.polyfit(log_n, log_t, 1)
    return float(slope)


def run_benchmark(sizes: Sequence[int],
                  seed: int = 42,
                  repeat: int = 3,
                  value_range: int = 100,
                  profiler: Optional[PerformanceProfiler] = None) -> BenchmarkReport:
    """
    Time every strategy on one random sequence per size.

    Args:
        sizes: Input sizes to test
        seed: Base random seed; size i uses seed + i
        repeat: Runs per (size, strategy); the fastest is kept
        value_range: Magnitude bound for generated values
        profiler: Profiler used for every run

    Returns:
        BenchmarkReport with one row per (size, strategy)
    """
    if repeat < 1:
        raise ValueError(f"repeat must be at least 1, got {repeat}")

    profiler = profiler or PerformanceProfiler()
    report = BenchmarkReport(seed=seed, repeat=repeat)

    for offset, size in enumerate(sizes):
        sequence = generate_sequence(size, seed=seed + offset, value_range=value_range)
        key_sets = []

        for strategy in AlgorithmStrategy:
            runs: List[PerformanceReport] = [
                profiler.run(sequence, strategy.display_name, detector_for(strategy))
                for _ in range(repeat)
            ]
            best = min(runs, key=lambda r: r.execution_time)
            key_sets.append(best.result.keys())
            report.rows.append(BenchmarkRow(
                size=size,
                strategy=strategy,
                best_time_ms=best.execution_time,
                result_count=best.result_count,
                memory_used=max(r.memory_used for r in runs),
                error=best.error,
            ))

        report.consistency[size] = all(keys == key_sets[0] for keys in key_sets)
        logger.debug(f"Benchmarked size {size}: consistent={report.consistency[size]}")

    return report
