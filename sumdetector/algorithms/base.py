"""Shared helpers for the sum detectors."""

from typing import Any, Callable, Tuple

from ..core.types import CombinationSet, NumericSequence
from ..engine.errors import ExecutionError


Detector = Callable[[NumericSequence], CombinationSet]


def ensure_integer_sequence(sequence: Any, algorithm: str) -> Tuple[int, ...]:
    """
    Check that a detector was handed an ordered sequence of integers.

    Raises:
        ExecutionError: If the argument is not a list/tuple of ints
    """
    if not isinstance(sequence, (list, tuple)):
        raise ExecutionError(
            f"Input must be a sequence of integers, got {type(sequence).__name__}",
            algorithm=algorithm,
        )
    for index, value in enumerate(sequence):
        # bool is an int subclass but never a parsed value
        if isinstance(value, bool) or not isinstance(value, int):
            raise ExecutionError(
                f"Element at index {index} is not an integer: {value!r}",
                algorithm=algorithm,
            )
    return tuple(sequence)
