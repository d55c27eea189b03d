"""Utility helpers."""

from .logging_setup import LOGGER_NAME, setup_logging, log_operation

__all__ = ["LOGGER_NAME", "setup_logging", "log_operation"]
