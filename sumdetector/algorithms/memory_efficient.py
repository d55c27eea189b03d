"""
Brute-force sum detection.

Every addend pair is checked against every other position, O(n^3) time with
no auxiliary structure beyond the deduplication set.
"""

from ..core.types import Combination, CombinationSet, NumericSequence
from .base import ensure_integer_sequence


def detect_sums_memory_efficient(sequence: NumericSequence) -> CombinationSet:
    """
    Find every (p_a, p_b, sum_index) with sequence[p_a] + sequence[p_b] == sequence[sum_index].

    Pairs are visited with p_a ascending, then p_b ascending, then sum_index
    ascending, so output order is deterministic for a given input.

    Args:
        sequence: Integers to analyze

    Returns:
        Deduplicated combinations in first-seen order
    """
    values = ensure_integer_sequence(sequence, "memory-efficient")
    n = len(values)
    results = CombinationSet(values)

    for p_a in range(n):
        for p_b in range(p_a + 1, n):
            target_sum = values[p_a] + values[p_b]
            for sum_index in range(n):
                if sum_index == p_a or sum_index == p_b:
                    continue
                if values[sum_index] == target_sum:
                    results.add(Combination(p_a, p_b, sum_index))

    return results
