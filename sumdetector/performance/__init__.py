"""
Performance measurement for detector runs.

Profiling, memory probes, complexity metadata and benchmarking.
"""

from .complexity import COMPLEXITY_TABLE, ComplexityInfo, get_complexity_info
from .memory import (
    MemoryProbe,
    NullMemoryProbe,
    ProcessMemoryProbe,
    TracemallocProbe,
    get_memory_probe,
)
from .profiler import PerformanceProfiler, PerformanceReport

__all__ = [
    "COMPLEXITY_TABLE",
    "ComplexityInfo",
    "get_complexity_info",
    "MemoryProbe",
    "NullMemoryProbe",
    "ProcessMemoryProbe",
    "TracemallocProbe",
    "get_memory_probe",
    "PerformanceProfiler",
    "PerformanceReport",
]
