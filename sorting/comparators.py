"""Row comparators for table sorting.

Three strategies, chosen once per sort from a representative value:
    - NUMERIC: numeric order, ties broken ascending by label
    - NATURAL: case-insensitive natural order ("img2" < "img10")
    - STRING: case-insensitive lexicographic order ("img10" < "img2")

All comparators are cmp-style (-1/0/1) and share the missing-value rule:
rows lacking the sort column always sink to the bottom, whatever the
direction.
"""

from typing import Any, Callable

import config
from enums import CompareMode, ValueKind
from models import Row
from utils import casefold_compare, is_numeric, natural_compare, to_number

Comparator = Callable[[Row, Row], int]


def compare_missing(a_value: Any, b_value: Any) -> int | None:
    """Order two values when at least one is missing.

    Args:
        a_value: Value of the first row (None if missing)
        b_value: Value of the second row (None if missing)

    Returns:
        0 if both missing, 1 if only a is missing, -1 if only b is
        missing, None if both are present.
    """
    if a_value is None and b_value is None:
        return 0
    if a_value is None:
        return 1
    if b_value is None:
        return -1
    return None


def classify_value(value: Any) -> ValueKind:
    """Classify a representative value as numeric or text."""
    return ValueKind.NUMERIC if is_numeric(value) else ValueKind.TEXT


def _as_number(value: Any) -> int | float:
    # Non-numeric values in a numeric column compare as zero
    number = to_number(value)
    return 0 if number is None else number


def _compare_labels(a: Row, b: Row) -> int:
    label_a = a.get_column(config.LABEL_COLUMN)
    label_b = b.get_column(config.LABEL_COLUMN)
    if label_a is None or label_b is None:
        return 0
    return natural_compare(label_a, label_b)


def numeric_comparator(column: Any, sign: int) -> Comparator:
    """Build a numeric comparator.

    Equal values fall back to the label column in ascending natural
    order regardless of sign. Without labels on both rows, equal values
    compare equal.

    Args:
        column: Column key to compare
        sign: 1 for ascending, -1 for descending

    Returns:
        Comparator bound to column and sign.
    """

    def compare(a: Row, b: Row) -> int:
        a_value = a.get_column(column)
        b_value = b.get_column(column)
        missing = compare_missing(a_value, b_value)
        if missing is not None:
            return missing

        a_number = _as_number(a_value)
        b_number = _as_number(b_value)
        if a_number < b_number:
            return -sign
        if a_number > b_number:
            return sign
        return _compare_labels(a, b)

    return compare


def natural_comparator(column: Any, sign: int) -> Comparator:
    """Build a case-insensitive natural-order comparator.

    Args:
        column: Column key to compare
        sign: 1 for ascending, -1 for descending

    Returns:
        Comparator bound to column and sign.
    """

    def compare(a: Row, b: Row) -> int:
        a_value = a.get_column(column)
        b_value = b.get_column(column)
        missing = compare_missing(a_value, b_value)
        if missing is not None:
            return missing
        return sign * natural_compare(a_value, b_value)

    return compare


def string_comparator(column: Any, sign: int) -> Comparator:
    """Build a case-insensitive lexicographic comparator.

    Args:
        column: Column key to compare
        sign: 1 for ascending, -1 for descending

    Returns:
        Comparator bound to column and sign.
    """

    def compare(a: Row, b: Row) -> int:
        a_value = a.get_column(column)
        b_value = b.get_column(column)
        missing = compare_missing(a_value, b_value)
        if missing is not None:
            return missing
        return sign * casefold_compare(a_value, b_value)

    return compare


_FACTORIES: dict[CompareMode, Callable[[Any, int], Comparator]] = {
    CompareMode.NUMERIC: numeric_comparator,
    CompareMode.NATURAL: natural_comparator,
    CompareMode.STRING: string_comparator,
}


def select_compare_mode(sample_value: Any, natural_sort: bool) -> CompareMode:
    """Pick the comparison strategy from a representative value.

    Args:
        sample_value: Value of the sort column in the representative row
        natural_sort: Use natural order for text values

    Returns:
        NUMERIC for numeric samples, otherwise NATURAL or STRING.
    """
    if classify_value(sample_value) is ValueKind.NUMERIC:
        return CompareMode.NUMERIC
    return CompareMode.NATURAL if natural_sort else CompareMode.STRING


def select_comparator(
    sample_value: Any,
    column: Any,
    sign: int,
    natural_sort: bool,
) -> tuple[CompareMode, Comparator]:
    """Pick and bind a comparator for one sort call.

    Args:
        sample_value: Value of the sort column in the representative row
        column: Resolved column key
        sign: 1 for ascending, -1 for descending
        natural_sort: Use natural order for text values

    Returns:
        Tuple of (mode, comparator).
    """
    mode = select_compare_mode(sample_value, natural_sort)
    return mode, _FACTORIES[mode](column, sign)
