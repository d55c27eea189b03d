"""
Input parsing for comma-separated integer lists.

`parse_sequence` is the strict parser used by the analyzer. `format_input`
and `quick_validate` are lenient helpers for interactive callers that tidy
text before submitting it.
"""

import re
from typing import Any, List

from ..engine.errors import ValidationError
from .types import NumericSequence


EMPTY_INPUT_MESSAGE = "Please enter a valid input string (comma-separated numbers)"
QUICK_VALIDATION_MESSAGE = "Please enter valid numbers separated by commas"

# Optional sign followed by ASCII digits only
INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")
LEADING_INTEGER = re.compile(r"\s*[+-]?[0-9]")

_WHITESPACE_RUN = re.compile(r"\s+")
_SPACE_AROUND_COMMA = re.compile(r"\s*,\s*")
_REPEATED_COMMA = re.compile(r",\s*,")
_EDGE_COMMA = re.compile(r"^,|,$")


def parse_sequence(raw_text: Any) -> NumericSequence:
    """
    Parse comma-separated text into an ordered tuple of integers.

    Args:
        raw_text: Text such as "1, 2, 3"

    Returns:
        Tuple of parsed integers

    Raises:
        ValidationError: If the text is empty or any token is not an integer
    """
    if not isinstance(raw_text, str) or not raw_text.strip():
        raise ValidationError(EMPTY_INPUT_MESSAGE)

    values: List[int] = []
    for position, token in enumerate(raw_text.strip().split(","), start=1):
        value = token.strip()
        if not value:
            raise ValidationError(
                f"Empty value at position {position}",
                position=position,
                token=value,
            )
        if not INTEGER_LITERAL.fullmatch(value):
            raise ValidationError(
                f'Invalid integer "{value}" at position {position}',
                position=position,
                token=value,
            )
        values.append(int(value))

    return tuple(values)


def format_input(text: str) -> str:
    """Tidy user-typed text: single spaces, no space around commas, no empty slots."""
    formatted = _WHITESPACE_RUN.sub(" ", text)
    formatted = _SPACE_AROUND_COMMA.sub(",", formatted)
    formatted = _REPEATED_COMMA.sub(",", formatted)
    return _EDGE_COMMA.sub("", formatted)


def quick_validate(formatted: str) -> str:
    """
    Lenient check for text produced by `format_input`.

    Returns an empty string when every part starts with an integer,
    otherwise a message suitable for showing next to the input.
    """
    if not formatted:
        return ""
    parts = formatted.split(",")
    if any(not LEADING_INTEGER.match(part) for part in parts):
        return QUICK_VALIDATION_MESSAGE
    return ""
