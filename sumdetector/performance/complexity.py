"""
Static complexity metadata for the detectors.

Reporting only; nothing here influences which detector runs. The
memory-efficient label ignores the deduplication set, which grows with the
number of results.
"""

from types import MappingProxyType
from typing import Mapping, Optional, TypedDict


class ComplexityInfo(TypedDict):
    """Time/space complexity details."""
    time: str
    space: str
    description: str


COMPLEXITY_TABLE: Mapping[str, ComplexityInfo] = MappingProxyType({
    "Time Eff.": MappingProxyType({
        "time": "O(n² log n)",
        "space": "O(n)",
        "description": "Binary search optimized",
    }),
    "Memory Eff.": MappingProxyType({
        "time": "O(n³)",
        "space": "O(1)",
        "description": "Triple nested loop",
    }),
})


def get_complexity_info(algorithm_name: str) -> Optional[ComplexityInfo]:
    """
    Look up complexity details by algorithm display name.

    Args:
        algorithm_name: Display name such as "Time Eff."

    Returns:
        A fresh dict copy, or None for an unmapped name
    """
    info = COMPLEXITY_TABLE.get(algorithm_name)
    if info is None:
        return None
    return ComplexityInfo(time=info["time"], space=info["space"], description=info["description"])
