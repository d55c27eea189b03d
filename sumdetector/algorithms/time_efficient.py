"""
Sum detection with binary search over a value-sorted index.

Sorting once costs O(n log n); each of the O(n^2) addend pairs then needs a
bisection plus a scan over equal values, O(n^2 log n) overall.
"""

from typing import List, Tuple

from ..core.types import Combination, CombinationSet, NumericSequence
from .base import ensure_integer_sequence


def build_sorted_index(values: NumericSequence) -> List[Tuple[int, int]]:
    """Pairs of (value, original_index), stable-sorted ascending by value."""
    return sorted(((value, index) for index, value in enumerate(values)), key=lambda pair: pair[0])


def find_value(indexed: List[Tuple[int, int]], target: int) -> int:
    """
    Midpoint bisection for any position holding `target`.

    Returns:
        A matching position, or -1 if the value is absent
    """
    left, right = 0, len(indexed) - 1
    while left <= right:
        mid = (left + right) // 2
        mid_value = indexed[mid][0]
        if mid_value == target:
            return mid
        if mid_value < target:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def collect_equal(indexed: List[Tuple[int, int]], mid: int, target: int) -> List[int]:
    """
    Original indices of every entry equal to `target` around a hit.

    Scans leftward from `mid` first, then rightward from `mid + 1`; duplicate
    values mean several positions can serve as the sum.
    """
    found = []
    k = mid
    while k >= 0 and indexed[k][0] == target:
        found.append(indexed[k][1])
        k -= 1
    k = mid + 1
    while k < len(indexed) and indexed[k][0] == target:
        found.append(indexed[k][1])
        k += 1
    return found


def detect_sums_time_efficient(sequence: NumericSequence) -> CombinationSet:
    """
    Find the same combinations as the brute-force detector in O(n^2 log n).

    Addend pairs are visited in original-index order; candidate sum positions
    come from the sorted index, so emission order can differ from the
    brute-force detector while the set of canonical keys is identical.

    Args:
        sequence: Integers to analyze

    Returns:
        Deduplicated combinations in first-seen order
    """
    values = ensure_integer_sequence(sequence, "time-efficient")
    n = len(values)
    indexed = build_sorted_index(values)
    results = CombinationSet(values)

    for p_a in range(n):
        for p_b in range(p_a + 1, n):
            target_sum = values[p_a] + values[p_b]
            mid = find_value(indexed, target_sum)
            if mid < 0:
                continue
            for sum_index in collect_equal(indexed, mid, target_sum):
                if sum_index != p_a and sum_index != p_b:
                    results.add(Combination(p_a, p_b, sum_index))

    return results
