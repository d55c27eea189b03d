"""Sum Combination Detector - find index triples where two elements add up to a third."""

__version__ = "0.1.0"
__author__ = "Rohan Vinaik"
__email__ = "rohanpvinaik@gmail.com"

from .core.analyzer import AnalysisResult, analyze
from .core.types import Combination, CombinationSet
from .algorithms.selector import AlgorithmStrategy, resolve_algorithm
from .engine.errors import SumDetectorError, ValidationError, ExecutionError

__all__ = [
    "analyze",
    "AnalysisResult",
    "Combination",
    "CombinationSet",
    "AlgorithmStrategy",
    "resolve_algorithm",
    "SumDetectorError",
    "ValidationError",
    "ExecutionError",
    "__version__",
]
