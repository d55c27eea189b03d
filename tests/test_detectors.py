"""
Tests for the brute-force and binary-search sum detectors.

Verifies:
1. Known results on small inputs
2. Deterministic emission order of the brute-force detector
3. Agreement of canonical key sets between detectors
4. Rejection of malformed sequences
"""

import pytest

from sumdetector.algorithms.memory_efficient import detect_sums_memory_efficient
from sumdetector.algorithms.time_efficient import (
    build_sorted_index,
    collect_equal,
    detect_sums_time_efficient,
    find_value,
)
from sumdetector.core.types import CombinationSet
from sumdetector.engine.errors import ExecutionError
from sumdetector.performance.benchmark import generate_sequence


DETECTORS = [detect_sums_memory_efficient, detect_sums_time_efficient]


def triples(result):
    return [(c.p_a, c.p_b, c.sum_index) for c in result]


@pytest.mark.parametrize("detect", DETECTORS)
class TestKnownInputs:
    """Both detectors on hand-checked inputs."""

    def test_basic(self, detect):
        assert triples(detect((1, 2, 3))) == [(0, 1, 2)]

    def test_two_combinations(self, detect):
        assert set(triples(detect((1, 2, 3, 4)))) == {(0, 1, 2), (0, 2, 3)}

    def test_no_combinations(self, detect):
        assert triples(detect((1, 2, 4))) == []
        assert triples(detect((3, 0, 2))) == []
        assert triples(detect((3, 5, 7, 11, 13))) == []

    def test_short_inputs(self, detect):
        assert len(detect(())) == 0
        assert len(detect((5,))) == 0
        assert len(detect((3, 7))) == 0

    def test_duplicate_values(self, detect):
        """Test equal values at different indices are separate combinations."""
        assert set(triples(detect((3, 0, 3)))) == {(0, 1, 2), (1, 2, 0)}

    def test_zeros(self, detect):
        assert set(triples(detect((0, 0, 0)))) == {(0, 1, 2), (0, 2, 1), (1, 2, 0)}

    def test_negative_numbers(self, detect):
        assert triples(detect((-1, 2, 1))) == [(0, 1, 2)]
        assert triples(detect((-3, -1, -4))) == [(0, 1, 2)]

    def test_large_numbers(self, detect):
        big = 10 ** 40
        assert triples(detect((big, 2 * big, 3 * big))) == [(0, 1, 2)]

    def test_shared_sum_index(self, detect):
        """Test one sum position reached by two disjoint pairs is reported twice."""
        found = set(triples(detect((1, 4, 2, 3, 5))))
        assert (0, 1, 4) in found
        assert (2, 3, 4) in found
        assert len(found) == 4

    def test_returns_combination_set(self, detect):
        assert isinstance(detect([1, 2, 3]), CombinationSet)

    def test_every_result_is_valid(self, detect):
        sequence = (1, 2, 1, 3, 0, 4, -1)
        result = detect(sequence)
        assert len(result) > 0
        for combination in result:
            assert combination.is_valid_for(sequence)


class TestMemoryEfficientOrder:
    """Emission order of the brute-force detector."""

    def test_ascending_enumeration(self):
        result = detect_sums_memory_efficient((1, 2, 3, 4, 5))
        assert triples(result) == [(0, 1, 2), (0, 2, 3), (0, 3, 4), (1, 2, 4)]

    def test_sum_index_ascending_within_pair(self):
        result = detect_sums_memory_efficient((0, 0, 0, 0, 0))
        assert triples(result)[:3] == [(0, 1, 2), (0, 1, 3), (0, 1, 4)]
        assert triples(result)[-3:] == [(3, 4, 0), (3, 4, 1), (3, 4, 2)]


class TestTimeEfficientInternals:
    """Sorted index, bisection and equal-value scan."""

    def test_sorted_index_is_stable(self):
        assert build_sorted_index((3, 1, 3, 0)) == [(0, 3), (1, 1), (3, 0), (3, 2)]

    def test_find_value_hit_and_miss(self):
        indexed = build_sorted_index((5, 1, 9, 3))
        assert indexed[find_value(indexed, 9)][0] == 9
        assert find_value(indexed, 4) == -1
        assert find_value([], 1) == -1

    def test_collect_equal_scans_left_then_right(self):
        indexed = build_sorted_index((0, 0, 0, 0, 0))
        assert collect_equal(indexed, 2, 0) == [2, 1, 0, 3, 4]

    def test_emission_order_follows_scan(self):
        """Test order may differ from brute force while the set matches."""
        result = detect_sums_time_efficient((0, 0, 0, 0, 0))
        assert len(result) == 30
        assert triples(result)[-3:] == [(3, 4, 2), (3, 4, 1), (3, 4, 0)]


class TestDetectorAgreement:
    """Both detectors must produce the same canonical keys."""

    @pytest.mark.parametrize("sequence", [
        (1, 2, 3, 4, 5),
        (0, 0, 0, 0, 0),
        (1, 2, 1, 3),
        (0, 5, 5),
        (2, -2, 0, 0, 4, 2),
        (7,) * 6,
    ])
    def test_hand_picked(self, sequence):
        memory = detect_sums_memory_efficient(sequence)
        fast = detect_sums_time_efficient(sequence)
        assert memory.keys() == fast.keys()
        assert len(memory) == len(fast)

    @pytest.mark.parametrize("seed", range(8))
    def test_random_sequences(self, seed):
        sequence = generate_sequence(25, seed=seed, value_range=10)
        memory = detect_sums_memory_efficient(sequence)
        fast = detect_sums_time_efficient(sequence)
        assert memory.keys() == fast.keys()
        for combination in fast:
            assert combination.is_valid_for(sequence)


@pytest.mark.parametrize("detect", DETECTORS)
class TestMalformedSequences:
    """Detectors refuse input that is not a sequence of integers."""

    @pytest.mark.parametrize("bad", ["1,2,3", None, 42, {1, 2, 3}])
    def test_not_a_sequence(self, detect, bad):
        with pytest.raises(ExecutionError, match="Input must be a sequence of integers"):
            detect(bad)

    @pytest.mark.parametrize("bad", [(1, 2.5, 3), (1, "2", 3), (True, 1, 2)])
    def test_non_integer_element(self, detect, bad):
        with pytest.raises(ExecutionError, match="not an integer"):
            detect(bad)
