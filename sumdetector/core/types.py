"""Core data structures for sum combination detection."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, NamedTuple, Sequence, Set, Tuple, TypedDict


NumericSequence = Tuple[int, ...]


class CombinationDict(TypedDict):
    """Wire representation of a combination."""
    pA: int
    pB: int
    sum: int


class CombinationKey(NamedTuple):
    """Deduplication identity of a combination, addends ordered by index."""
    sum_value: int
    sum_index: int
    addend1_value: int
    addend1_index: int
    addend2_value: int
    addend2_index: int


@dataclass(frozen=True)
class Combination:
    """Index triple where sequence[p_a] + sequence[p_b] == sequence[sum_index]."""

    p_a: int
    p_b: int
    sum_index: int

    def canonical_key(self, sequence: Sequence[int]) -> CombinationKey:
        """Build the structural key from (value, index) of the sum and both addends."""
        first, second = sorted((self.p_a, self.p_b))
        return CombinationKey(
            sequence[self.sum_index], self.sum_index,
            sequence[first], first,
            sequence[second], second,
        )

    def is_valid_for(self, sequence: Sequence[int]) -> bool:
        """Check the sum invariant and index distinctness against a sequence."""
        indices = {self.p_a, self.p_b, self.sum_index}
        if len(indices) != 3 or self.p_a >= self.p_b:
            return False
        if not all(0 <= i < len(sequence) for i in indices):
            return False
        return sequence[self.p_a] + sequence[self.p_b] == sequence[self.sum_index]

    def to_dict(self) -> CombinationDict:
        """Convert to dictionary for JSON serialization."""
        return {"pA": self.p_a, "pB": self.p_b, "sum": self.sum_index}

    @classmethod
    def from_dict(cls, data: Dict[str, int]) -> Combination:
        """Create from dictionary."""
        return cls(p_a=data["pA"], p_b=data["pB"], sum_index=data["sum"])

    def __str__(self) -> str:
        return f"{self.p_a} + {self.p_b} = {self.sum_index}"


class CombinationSet:
    """
    Ordered collection of combinations, deduplicated by canonical key.

    Insertion (first-seen) order is preserved. The sequence the combinations
    index into is held so keys can be derived on insert.
    """

    def __init__(self, sequence: Sequence[int] = ()):
        self._sequence = sequence
        self._items: List[Combination] = []
        self._keys: Set[CombinationKey] = set()

    def add(self, combination: Combination) -> bool:
        """Append the combination unless its key was already seen."""
        key = combination.canonical_key(self._sequence)
        if key in self._keys:
            return False
        self._keys.add(key)
        self._items.append(combination)
        return True

    def keys(self) -> Set[CombinationKey]:
        """Canonical keys of every stored combination."""
        return set(self._keys)

    def to_list(self) -> List[CombinationDict]:
        """Serialize combinations in first-seen order."""
        return [c.to_dict() for c in self._items]

    def __iter__(self) -> Iterator[Combination]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Combination:
        return self._items[index]

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"CombinationSet({self._items!r})"


def key_set(sequence: Sequence[int], combinations: Iterable[Combination]) -> Set[CombinationKey]:
    """Canonical keys for any iterable of combinations over one sequence."""
    return {c.canonical_key(sequence) for c in combinations}
