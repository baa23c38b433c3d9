"""Type-safe enumerations for tablesort.

All categorical values use enum types for type safety and consistency.
"""

from enum import Enum


class SortOrder(str, Enum):
    """Sort direction.

    Only "asc" is recognized as ascending. Every other value, including
    None and typos, normalizes to DESC.
    """

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def from_value(cls, value: object) -> "SortOrder":
        """Normalize any direction value to ASC or DESC.

        Args:
            value: Requested direction (typically "asc" or "desc")

        Returns:
            SortOrder.ASC for "asc", SortOrder.DESC otherwise.
        """
        if value == cls.ASC.value:
            return cls.ASC
        return cls.DESC

    @property
    def sign(self) -> int:
        """Multiplier applied to comparison results (+1 asc, -1 desc)."""
        return 1 if self is SortOrder.ASC else -1


class ValueKind(str, Enum):
    """Classification of a representative column value."""

    NUMERIC = "numeric"
    TEXT = "text"


class CompareMode(str, Enum):
    """Comparator strategy chosen for a sort call.

    NUMERIC: numeric ordering with label tie-break
    NATURAL: case-insensitive natural-alphanumeric ordering ("img2" < "img10")
    STRING: case-insensitive lexicographic ordering
    """

    NUMERIC = "numeric"
    NATURAL = "natural"
    STRING = "string"
