"""
Logging for the sum detector.

Everything logs under the ``sumdetector`` logger. Console records go to
stderr; an optional JSON-lines file receives every record together with the
run context the library attaches (operation, algorithm, input size, result
count, execution time).
"""

import json
import logging
import logging.handlers
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "sumdetector"

# Attributes passed via ``extra=`` that are copied into JSON records
CONTEXT_FIELDS = ("operation", "algorithm", "input_size", "result_count", "execution_time", "error")

CONSOLE_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class JSONFormatter(logging.Formatter):
    """Serialize a record and its detector context as one JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, timezone.utc)
        entry = {
            "timestamp": created.isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in CONTEXT_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                entry[key] = value
        entry.update(getattr(record, "context", {}))

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


class ConsoleFormatter(logging.Formatter):
    """Human-readable lines, level names coloured on a terminal."""

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, use_color: Optional[bool] = None):
        super().__init__(CONSOLE_FORMAT, datefmt="%H:%M:%S")
        self.use_color = sys.stderr.isatty() if use_color is None else use_color

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno)
        if not self.use_color or color is None:
            return super().format(record)

        # Other handlers must still see the plain level name
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)


def setup_logging(level: str = "WARNING",
                  log_file: Optional[Union[str, Path]] = None,
                  console: bool = True) -> logging.Logger:
    """
    Configure the package logger, replacing handlers from earlier calls.

    Args:
        level: Console threshold (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: JSON-lines file that receives records at every level
        console: Attach the stderr handler

    Returns:
        The ``sumdetector`` logger
    """
    console_level = getattr(logging, level.upper())
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False
    logger.setLevel(logging.DEBUG if log_file else console_level)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(console_level)
        console_handler.setFormatter(ConsoleFormatter())
        logger.addHandler(console_handler)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            path, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(JSONFormatter())
        logger.addHandler(file_handler)

    return logger


def log_operation(logger: logging.Logger, operation: str, **context) -> None:
    """Record the start of a CLI operation with its parameters."""
    logger.info(f"Starting {operation}", extra={"operation": operation, "context": context})
