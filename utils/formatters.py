"""Text formatting utilities for log output.

Values that reach the logs (column keys, file paths, cell values) come
from user data and are sanitized first.
"""

import re
from typing import Any

import config


def sanitize_for_log(value: Any) -> str:
    """Sanitize values before logging to prevent log injection.

    Removes:
        - Newlines
        - ANSI escape codes
        - Control characters

    Max length: config.LOG_VALUE_MAX_LENGTH characters

    Args:
        value: Value to sanitize (any type, will be converted to string)

    Returns:
        Sanitized string safe for logging.
    """
    text = str(value)

    text = text.replace("\n", " ").replace("\r", " ")
    text = re.sub(r"\x1b\[[0-9;]*m", "", text)
    text = "".join(c for c in text if c.isprintable() or c.isspace())

    limit = config.LOG_VALUE_MAX_LENGTH
    if len(text) > limit:
        text = text[: limit - 3] + "..."

    return text


def describe_key(key: Any) -> str:
    """Describe a column key for log messages.

    Metric indexes are shown with a "#" prefix so that index 2 and a
    column literally named "2" are distinguishable in the logs.

    Examples:
        2 → "#2"
        "nb_visits" → "'nb_visits'"

    Args:
        key: Column key (metric index or column name)

    Returns:
        Sanitized, human-readable description.
    """
    if isinstance(key, int) and not isinstance(key, bool):
        return f"#{key}"
    return repr(sanitize_for_log(key))
