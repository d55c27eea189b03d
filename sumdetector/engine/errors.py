"""
Error types for the sum detection engine.

Input problems, detector failures and configuration problems each get one
class; everything derives from SumDetectorError.
"""

from typing import Optional, Any, Dict


class SumDetectorError(Exception):
    """
    Base exception for all sum detector errors.
    
    Provides common functionality for error tracking and reporting.
    """
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize detector error.
        
        Args:
            message: Error message
            details: Optional detailed error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for structured reporting."""
        return {
            'type': type(self).__name__,
            'message': self.message,
            'details': self.details,
        }


class ValidationError(SumDetectorError):
    """
    Raised when raw input text cannot be parsed into integers.
    
    Covers empty input, empty tokens and non-integer tokens.
    """
    
    def __init__(self, message: str,
                 position: Optional[int] = None,
                 token: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        """
        Initialize validation error.
        
        Args:
            message: Error message
            position: 1-based token position, None for whole-input problems
            token: Offending token text if applicable
            details: Additional error context
        """
        super().__init__(message, details)
        self.position = position
        self.token = token
        
        self.details.update({
            'position': position,
            'token': token
        })


class ExecutionError(SumDetectorError):
    """Raised by a detector when it cannot run on the sequence it was given."""
    
    def __init__(self, message: str,
                 algorithm: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
        self.algorithm = algorithm
        self.details['algorithm'] = algorithm


class ConfigurationError(SumDetectorError):
    """Raised when a config file or environment override is invalid."""

    def __init__(self, message: str,
                 source: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
        self.source = source
        self.details['source'] = source


def is_validation_error(error: Exception) -> bool:
    """Check if error is an input validation error."""
    return isinstance(error, ValidationError)


def is_execution_error(error: Exception) -> bool:
    """Check if error is a detector execution error."""
    return isinstance(error, ExecutionError)
