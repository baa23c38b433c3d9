"""Natural-alphanumeric and case-insensitive string comparison.

Provides cmp-style helpers shared by the comparators:
    - natural_compare: "img2" < "img10" (digit runs compared as numbers)
    - casefold_compare: plain case-insensitive lexicographic order
"""

import re
from typing import Any

_DIGIT_RUNS = re.compile(r"(\d+)")


def natural_sort_key(value: Any) -> tuple[tuple[int, int | str], ...]:
    """Get natural sort key for a value.

    Splits the text into digit and non-digit runs:
        - Decimal digit runs: category 0, compared by integer value
        - Other digits (superscripts like "²") count as text
        - Text runs: category 1, compared case-insensitively

    Leading and trailing whitespace is ignored. Non-string values are
    compared through their string form.

    Examples:
        "img10" → ((1, "img"), (0, 10))
        "Page 2" → ((1, "page "), (0, 2))

    Args:
        value: Value to build a key for

    Returns:
        Tuple of (category, part) pairs for comparison.
    """
    text = str(value).strip()
    parts: list[tuple[int, int | str]] = []
    for part in _DIGIT_RUNS.split(text):
        if not part:
            continue
        if part.isdecimal():
            parts.append((0, int(part)))
        else:
            parts.append((1, part.casefold()))
    return tuple(parts)


def natural_compare(a: Any, b: Any) -> int:
    """Compare two values in case-insensitive natural order.

    Args:
        a: First value
        b: Second value

    Returns:
        -1 if a sorts first, 1 if b sorts first, 0 if equivalent.
    """
    key_a = natural_sort_key(a)
    key_b = natural_sort_key(b)
    return (key_a > key_b) - (key_a < key_b)


def casefold_compare(a: Any, b: Any) -> int:
    """Compare two values case-insensitively, character by character.

    No digit-run handling: "img10" < "img2".

    Args:
        a: First value
        b: Second value

    Returns:
        -1 if a sorts first, 1 if b sorts first, 0 if equivalent.
    """
    text_a = str(a).casefold()
    text_b = str(b).casefold()
    return (text_a > text_b) - (text_a < text_b)
