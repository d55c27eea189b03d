"""
Algorithm selection for sum detection.

Maps a requested identifier to a detector. Identifiers that match no
strategy fall back to the time-efficient detector; the caller keeps the
identifier it asked for.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .base import Detector
from .memory_efficient import detect_sums_memory_efficient
from .time_efficient import detect_sums_time_efficient

logger = logging.getLogger(__name__)


class AlgorithmStrategy(Enum):
    """Available detection strategies."""
    TIME_EFFICIENT = "time-efficient"      # Sorted index + binary search
    MEMORY_EFFICIENT = "memory-efficient"  # Triple nested loop

    @property
    def display_name(self) -> str:
        """Short label used in reports and complexity lookups."""
        if self is AlgorithmStrategy.TIME_EFFICIENT:
            return "Time Eff."
        elif self is AlgorithmStrategy.MEMORY_EFFICIENT:
            return "Memory Eff."
        raise ValueError(f"Unhandled strategy: {self!r}")

    @property
    def label(self) -> str:
        """Long label for menus and listings."""
        if self is AlgorithmStrategy.TIME_EFFICIENT:
            return "Time Efficient"
        elif self is AlgorithmStrategy.MEMORY_EFFICIENT:
            return "Memory Efficient"
        raise ValueError(f"Unhandled strategy: {self!r}")

    @classmethod
    def from_identifier(cls, identifier: Optional[str]) -> Optional["AlgorithmStrategy"]:
        """Exact lookup by identifier, None when nothing matches."""
        for strategy in cls:
            if strategy.value == identifier:
                return strategy
        return None


DEFAULT_STRATEGY = AlgorithmStrategy.TIME_EFFICIENT
DEFAULT_ALGORITHM = DEFAULT_STRATEGY.value


@dataclass(frozen=True)
class SelectedAlgorithm:
    """Outcome of resolving an identifier."""
    requested: Optional[str]
    strategy: AlgorithmStrategy
    detector: Detector

    @property
    def display_name(self) -> str:
        return self.strategy.display_name

    @property
    def is_fallback(self) -> bool:
        """True when the requested identifier matched no strategy."""
        return self.requested != self.strategy.value


def detector_for(strategy: AlgorithmStrategy) -> Detector:
    """Return the detector function implementing a strategy."""
    if strategy is AlgorithmStrategy.TIME_EFFICIENT:
        return detect_sums_time_efficient
    elif strategy is AlgorithmStrategy.MEMORY_EFFICIENT:
        return detect_sums_memory_efficient
    raise ValueError(f"Unhandled strategy: {strategy!r}")


def resolve_algorithm(identifier: Optional[str]) -> SelectedAlgorithm:
    """
    Resolve an algorithm identifier to a detector.
    
    Args:
        identifier: Requested identifier, e.g. "memory-efficient"
        
    Returns:
        SelectedAlgorithm carrying the requested identifier verbatim
    """
    strategy = AlgorithmStrategy.from_identifier(identifier)
    if strategy is None:
        logger.debug(f"Unknown algorithm {identifier!r}, using {DEFAULT_STRATEGY.value}")
        strategy = DEFAULT_STRATEGY

    return SelectedAlgorithm(
        requested=identifier,
        strategy=strategy,
        detector=detector_for(strategy),
    )
