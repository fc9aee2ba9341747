"""
Validation utilities for focus-timer.

Turns raw user input into validated timer parameters. Checks run in a fixed
priority order and the first failure wins; the ValidationError message is the
reason string shown to the user.
"""

import math
import re
from typing import Any, Optional, Union

from focus_timer.utils.exceptions import ValidationError

MIN_MINUTES = 1
MAX_MINUTES = 999

NAME_REQUIRED = "name required"
DURATION_REQUIRED = "duration required"
NOT_A_NUMBER = "must be a number"
NOT_WHOLE = "must be a whole number"
TOO_SHORT = "must be at least 1 minute"
TOO_LONG = "cannot exceed 999 minutes"

# Numeric text forms accepted by browser form handling
_DECIMAL = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")
_RADIX = re.compile(r"^0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")
_INFINITY = re.compile(r"^[+-]?Infinity$")


def validate_timer_name(name: Optional[str]) -> str:
    """
    Validate a timer name.

    Args:
        name: Raw name input

    Returns:
        Validated name (stripped)

    Raises:
        ValidationError: If the name is missing or blank

    Example:
        >>> validate_timer_name("  Tea  ")
        'Tea'
    """
    if name is None or not str(name).strip():
        raise ValidationError(NAME_REQUIRED, details={"field": "name"})
    return str(name).strip()


def validate_duration_minutes(minutes: Any) -> int:
    """
    Validate an already-numeric duration in minutes.

    Args:
        minutes: Duration in minutes

    Returns:
        The duration as int

    Raises:
        ValidationError: If minutes is not an int or is out of range
    """
    if isinstance(minutes, bool) or not isinstance(minutes, int):
        raise ValidationError(
            NOT_WHOLE,
            details={"field": "duration", "value": repr(minutes)},
        )

    if minutes < MIN_MINUTES:
        raise ValidationError(TOO_SHORT, details={"field": "duration", "value": minutes})

    if minutes > MAX_MINUTES:
        raise ValidationError(TOO_LONG, details={"field": "duration", "value": minutes})

    return minutes


def parse_duration_minutes(raw: Union[str, int, float, None]) -> int:
    """
    Parse a duration input field into whole minutes.

    Text is read the way a browser number conversion reads it: decimal and
    exponent notation ("12.0", "1e2"), unsigned hex, octal and binary
    literals ("0x10") and "Infinity" are numbers; "inf", "nan" and digit
    separators are not. The value must still be whole.

    Args:
        raw: Raw duration input (form text or number)

    Returns:
        Duration in minutes

    Raises:
        ValidationError: With one of the reason strings, in priority order

    Example:
        >>> parse_duration_minutes("25")
        25
        >>> parse_duration_minutes("12.5")
        ValidationError: must be a whole number
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise ValidationError(DURATION_REQUIRED, details={"field": "duration"})

    if isinstance(raw, bool):
        raise ValidationError(NOT_A_NUMBER, details={"field": "duration", "value": raw})

    if isinstance(raw, int):
        value: float = raw
    elif isinstance(raw, float):
        value = raw
    else:
        value = _parse_number_text(str(raw).strip())

    if isinstance(value, float):
        if math.isnan(value):
            raise ValidationError(NOT_A_NUMBER, details={"field": "duration", "value": raw})
        if not value.is_integer():
            raise ValidationError(NOT_WHOLE, details={"field": "duration", "value": raw})

    return validate_duration_minutes(int(value))


def _parse_number_text(text: str) -> float:
    if _DECIMAL.match(text):
        return float(text)
    if _RADIX.match(text):
        return float(int(text, 0))
    if _INFINITY.match(text):
        return -math.inf if text.startswith("-") else math.inf
    raise ValidationError(NOT_A_NUMBER, details={"field": "duration", "value": text})
