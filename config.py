"""Configuration constants for tablesort.

All configurable values stored here for easy customization.
Single source of truth for all constants and configuration.
"""

from enum import IntEnum

# Sorting Defaults
DEFAULT_SORT_ORDER: str = "desc"  # Anything other than "asc" sorts descending
DEFAULT_NATURAL_SORT: bool = True

# Secondary sort column used to break ties between equal numeric values
LABEL_COLUMN: str = "label"

# JSON Interchange
# A table tree is either a list of row objects or {"rows": [...]}.
# Each row object is {"columns": {...}, "subtable": <tree>} (subtable optional).
JSON_ROWS_KEY: str = "rows"
JSON_COLUMNS_KEY: str = "columns"
JSON_SUBTABLE_KEY: str = "subtable"
JSON_INDENT: int = 2

# Logging
LOG_VALUE_MAX_LENGTH: int = 200

LOG_COLORS: dict[str, str] = {
    "DEBUG": "\033[96m",  # Cyan
    "INFO": "\033[92m",  # Green
    "WARNING": "\033[93m",  # Yellow
    "ERROR": "\033[91m",  # Red
    "CRITICAL": "\033[95m",  # Magenta
}
LOG_COLOR_RESET: str = "\033[0m"


class ExitCode(IntEnum):
    """Standard exit codes for the tablesort tool."""

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_INPUT = 2  # Input file unreadable or not a table tree
    INVALID_ARGUMENTS = 4


# Tool Metadata
VERSION: str = "1.0.0"
TOOL_NAME: str = "tablesort"
