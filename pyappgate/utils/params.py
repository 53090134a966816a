"""Lenient parsing of query string values."""

import re
from typing import Optional

LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def safe_parse_int(value: Optional[str], default: int) -> int:
    """
    Parse the leading integer of a value, falling back to a default.

    Like JavaScript's ``parseInt``: leading whitespace is skipped and parsing
    stops at the first character that is not a digit, so ``"10abc"`` is 10.

    Args:
        value: The raw query string value.
        default: Returned when the value is missing or does not start with an integer.

    Returns:
        The parsed integer or the default.

    """
    if value is None:
        return default
    match = LEADING_INT.match(value)
    if match is None:
        return default
    return int(match.group(1))
