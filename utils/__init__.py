"""Utilities package for tablesort.

Provides value validation, natural string comparison, and log formatting.
"""

from .formatters import describe_key, sanitize_for_log
from .natural_sort import casefold_compare, natural_compare, natural_sort_key
from .validators import is_numeric, parse_column_key, to_number

__all__ = [
    # Formatters
    "sanitize_for_log",
    "describe_key",
    # Natural sort
    "natural_sort_key",
    "natural_compare",
    "casefold_compare",
    # Validators
    "is_numeric",
    "to_number",
    "parse_column_key",
]
