"""Sum detection algorithms and strategy selection."""

from .memory_efficient import detect_sums_memory_efficient
from .time_efficient import detect_sums_time_efficient
from .selector import (
    AlgorithmStrategy,
    SelectedAlgorithm,
    DEFAULT_ALGORITHM,
    DEFAULT_STRATEGY,
    detector_for,
    resolve_algorithm,
)

__all__ = [
    "detect_sums_memory_efficient",
    "detect_sums_time_efficient",
    "AlgorithmStrategy",
    "SelectedAlgorithm",
    "DEFAULT_ALGORITHM",
    "DEFAULT_STRATEGY",
    "detector_for",
    "resolve_algorithm",
]
