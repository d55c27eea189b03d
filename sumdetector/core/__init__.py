"""Core data model, parsing and the analysis entry point."""

from .types import Combination, CombinationKey, CombinationSet, NumericSequence, key_set
from .parser import (
    EMPTY_INPUT_MESSAGE,
    parse_sequence,
    format_input,
    quick_validate,
)
from .analyzer import AnalysisResult, analyze

__all__ = [
    "Combination",
    "CombinationKey",
    "CombinationSet",
    "NumericSequence",
    "key_set",
    "EMPTY_INPUT_MESSAGE",
    "parse_sequence",
    "format_input",
    "quick_validate",
    "AnalysisResult",
    "analyze",
]
