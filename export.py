"""JSON import and export of table trees.

Input accepts either a list of row objects or {"rows": [...]}:

    [
        {"columns": {"label": "Europe", "2": 30},
         "subtable": [{"columns": {"label": "France", "2": 20}}]},
        {"columns": {"label": "Asia", "2": 12}}
    ]

Digit-only column keys are metric indexes and are loaded as integers.
Export wraps the tree with metadata.
"""

import json
from datetime import datetime, timezone
from typing import Any

import config
from models import Row, Table
from utils import parse_column_key


def table_from_dict(data: Any, path: str = "$") -> Table:
    """Build a table tree from decoded JSON.

    Args:
        data: List of row objects or {"rows": [...]}
        path: Location of data within the document (for error messages)

    Returns:
        Table with nested sub-tables.

    Raises:
        ValueError: If data is not a valid table tree.
    """
    if isinstance(data, dict):
        if config.JSON_ROWS_KEY not in data:
            raise ValueError(f"{path}: expected a list of rows or an object with '{config.JSON_ROWS_KEY}'")
        path = f"{path}.{config.JSON_ROWS_KEY}"
        data = data[config.JSON_ROWS_KEY]

    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of rows, got {type(data).__name__}")

    table = Table()
    for index, row_data in enumerate(data):
        table.add_row(_row_from_dict(row_data, f"{path}[{index}]"))
    return table


def _row_from_dict(data: Any, path: str) -> Row:
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a row object, got {type(data).__name__}")

    columns = data.get(config.JSON_COLUMNS_KEY, {})
    if not isinstance(columns, dict):
        raise ValueError(f"{path}.{config.JSON_COLUMNS_KEY}: expected an object")

    row = Row(columns={parse_column_key(key): value for key, value in columns.items()})

    subtable = data.get(config.JSON_SUBTABLE_KEY)
    if subtable is not None:
        row.add_subtable(table_from_dict(subtable, f"{path}.{config.JSON_SUBTABLE_KEY}"))
    return row


def load_from_json(text: str) -> Table:
    """Parse a JSON document into a table tree.

    Raises:
        ValueError: If the text is not JSON or not a table tree
            (json.JSONDecodeError is a ValueError).
    """
    return table_from_dict(json.loads(text))


def table_to_dict(table: Table) -> list[dict[str, Any]]:
    """Convert a table tree to JSON-compatible rows (current order)."""
    rows = []
    for row in table.get_rows():
        row_data: dict[str, Any] = {config.JSON_COLUMNS_KEY: row.get_columns()}
        subtable = row.get_subtable()
        if subtable is not None:
            row_data[config.JSON_SUBTABLE_KEY] = table_to_dict(subtable)
        rows.append(row_data)
    return rows


def export_to_json(
    table: Table,
    indent: int = config.JSON_INDENT,
) -> str:
    """Export to JSON format with metadata.

    Args:
        table: Table tree to export
        indent: JSON indentation (default 2)

    Returns:
        JSON string with metadata and rows.
    """
    metadata = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "row_count": table.get_row_count(),
        "sorted_by": table.get_sorted_by_column(),
        "tool": config.TOOL_NAME,
        "version": config.VERSION,
    }

    output = {
        "metadata": metadata,
        config.JSON_ROWS_KEY: table_to_dict(table),
    }

    # Metric index keys (ints) become strings, as on input
    return json.dumps(output, indent=indent)
