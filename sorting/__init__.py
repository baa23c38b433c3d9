"""Table sorting for tablesort.

Provides the Sort filter, column resolution against the metric registry,
and the numeric / natural / string row comparators.
"""

from .base import Filter
from .column_resolver import ColumnResolver
from .comparators import (
    Comparator,
    classify_value,
    compare_missing,
    natural_comparator,
    numeric_comparator,
    select_comparator,
    select_compare_mode,
    string_comparator,
)
from .sort import Sort, sort_table

__all__ = [
    # Filters
    "Filter",
    "Sort",
    "sort_table",
    # Column resolution
    "ColumnResolver",
    # Comparators
    "Comparator",
    "compare_missing",
    "classify_value",
    "numeric_comparator",
    "natural_comparator",
    "string_comparator",
    "select_compare_mode",
    "select_comparator",
]
