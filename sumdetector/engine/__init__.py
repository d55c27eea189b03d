"""
Engine module for error types shared across the detector.
"""

from .errors import (
    SumDetectorError,
    ValidationError,
    ExecutionError,
    ConfigurationError,
    is_validation_error,
    is_execution_error,
)

__all__ = [
    'SumDetectorError',
    'ValidationError',
    'ExecutionError',
    'ConfigurationError',
    'is_validation_error',
    'is_execution_error',
]
