"""Value validation utilities.

Provides numeric detection for sort values and parsing of column keys
supplied as text (command line, JSON object keys).
"""

import re
from typing import Any

# Decimal or exponent notation, surrounding whitespace allowed.
# Deliberately rejects "nan", "inf" and digit separators ("1_000").
_NUMERIC_PATTERN = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")

_INTEGER_KEY_PATTERN = re.compile(r"^\d+$")
_INTEGER_STRING_PATTERN = re.compile(r"^[+-]?\d+$")


def is_numeric(value: Any) -> bool:
    """Check whether a value should be compared as a number.

    Numbers (int, float) are numeric; bool is not. Strings are numeric
    when they contain a plain decimal or exponent number.

    Args:
        value: Value to check

    Returns:
        True if numeric, False otherwise.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    if isinstance(value, str):
        return _NUMERIC_PATTERN.match(value) is not None
    return False


def to_number(value: Any) -> int | float | None:
    """Convert a numeric value to a number without losing precision.

    Numbers are returned unchanged. Integer strings become int (exact for
    any size), other numeric strings become float.

    Examples:
        "9007199254740993" → 9007199254740993
        " 2.5 " → 2.5

    Args:
        value: Value to convert

    Returns:
        Number, or None if the value is not numeric.
    """
    if not is_numeric(value):
        return None
    if isinstance(value, (int, float)):
        return value
    text = value.strip()
    if _INTEGER_STRING_PATTERN.match(text):
        return int(text)
    return float(text)


def parse_column_key(text: str) -> int | str:
    """Parse a column key given as text.

    Digit-only keys are metric indexes and become integers, everything
    else stays a column name.

    Examples:
        "2" → 2
        "nb_visits" → "nb_visits"
        "-1" → "-1"

    Args:
        text: Column key as text

    Returns:
        Integer metric index or the unchanged name.
    """
    if _INTEGER_KEY_PATTERN.match(text):
        return int(text)
    return text
