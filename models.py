"""Data models for report tables.

A Table is an ordered list of Rows. Each Row maps column keys (metric
indexes or names) to values and may own one nested sub-table, forming an
ownership tree:

    Table
    ├── Row {label: "Europe", nb_visits: 30}
    │   └── Table
    │       ├── Row {label: "France", nb_visits: 20}
    │       └── Row {label: "Spain", nb_visits: 10}
    └── Row {label: "Asia", nb_visits: 12}

Sorting only reorders rows; no row is ever added, removed or copied.
"""

from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import TYPE_CHECKING, Any, Callable, Iterable, Iterator

import config
from logging_config import get_logger

if TYPE_CHECKING:
    from sorting.base import Filter

logger = get_logger(__name__)

# cmp-style comparator: negative, zero or positive
RowComparator = Callable[["Row", "Row"], int]


@dataclass
class Row:
    """A single record of a report table.

    A column whose value is None is treated as absent.
    """

    columns: dict[Any, Any] = field(default_factory=dict)
    subtable: "Table | None" = None

    def get_column(self, key: Any) -> Any:
        """Get a column value.

        Args:
            key: Column key (metric index or name)

        Returns:
            Stored value, or None if the row has no such column.
        """
        try:
            return self.columns.get(key)
        except TypeError:
            # Unhashable keys can never be column keys
            return None

    def has_column(self, key: Any) -> bool:
        """Check whether the row has a (non-None) value for a column."""
        return self.get_column(key) is not None

    def set_column(self, key: Any, value: Any) -> None:
        """Set a column value."""
        self.columns[key] = value

    def get_columns(self) -> dict[Any, Any]:
        """Return a copy of the column mapping."""
        return dict(self.columns)

    @property
    def label(self) -> Any:
        """Value of the label column, or None."""
        return self.get_column(config.LABEL_COLUMN)

    def get_subtable(self) -> "Table | None":
        """Return the owned sub-table, or None."""
        return self.subtable

    def add_subtable(self, table: "Table") -> "Table":
        """Attach a sub-table to this row.

        Args:
            table: Table to own

        Returns:
            The attached table.

        Raises:
            ValueError: If the row already owns a sub-table.
        """
        if self.subtable is not None:
            raise ValueError("Row already owns a sub-table")
        self.subtable = table
        return table

    def remove_subtable(self) -> "Table | None":
        """Detach and return the owned sub-table."""
        table, self.subtable = self.subtable, None
        return table


@dataclass
class Table:
    """Ordered collection of rows.

    Attributes:
        rows: Rows in display order (overwritten by sort)
        recursive_sort_enabled: Sticky flag, sorting also reorders every
            row's sub-table once set
        sorted_by: Column key used by the last sort, None before sorting
    """

    rows: list[Row] = field(default_factory=list)
    recursive_sort_enabled: bool = False
    sorted_by: Any = None

    def add_row(self, row: Row) -> Row:
        """Append a row."""
        self.rows.append(row)
        return row

    def add_rows(self, rows: Iterable[Row]) -> None:
        """Append several rows, keeping their order."""
        for row in rows:
            self.add_row(row)

    def get_rows(self) -> list[Row]:
        """Return the rows in their current order."""
        return self.rows

    def get_row_count(self) -> int:
        """Return the number of rows."""
        return len(self.rows)

    def get_first_row(self) -> Row | None:
        """Return the first row, or None for an empty table."""
        return self.rows[0] if self.rows else None

    def get_row_from_label(self, label: Any) -> Row | None:
        """Return the first row whose label equals the given value."""
        for row in self.rows:
            if row.label == label:
                return row
        return None

    def get_column(self, key: Any) -> list[Any]:
        """Return a column's values across rows (None where missing)."""
        return [row.get_column(key) for row in self.rows]

    def get_sorted_by_column(self) -> Any:
        """Return the column key used by the last sort."""
        return self.sorted_by

    def enable_recursive_sort(self) -> None:
        """Make sorting also reorder sub-tables. Cannot be switched off."""
        self.recursive_sort_enabled = True

    def is_single_row_variant(self) -> bool:
        """Return True for tables that refuse sorting."""
        return False

    def sort(
        self,
        comparator: RowComparator,
        column: Any,
        resort: "Callable[[Table], Any] | None" = None,
    ) -> None:
        """Sort rows in place.

        The sort is stable. When recursive sort is enabled, sub-tables are
        visited depth-first after this table's own order is final.

        Args:
            comparator: cmp-style function comparing two rows
            column: Column key the comparator sorts by
            resort: Optional callback used to sort each sub-table. Without
                it, sub-tables reuse comparator and column unchanged.
        """
        self.sorted_by = column
        self.rows.sort(key=cmp_to_key(comparator))

        if not self.recursive_sort_enabled:
            return

        for row in self.rows:
            subtable = row.get_subtable()
            if subtable is None:
                continue
            subtable.enable_recursive_sort()
            if resort is None:
                subtable.sort(comparator, column)
            else:
                resort(subtable)

    def filter(self, filter_class: "type[Filter]", *args: Any, **kwargs: Any) -> "Filter":
        """Apply a filter to this table.

        Args:
            filter_class: Filter subclass, constructed with this table first
            *args: Extra constructor arguments
            **kwargs: Extra constructor keyword arguments

        Returns:
            The applied filter instance.
        """
        table_filter = filter_class(self, *args, **kwargs)
        table_filter.filter(self)
        return table_filter

    def iter_tree(self, depth: int = 0) -> Iterator[tuple[int, "Table"]]:
        """Yield (depth, table) for this table and every nested sub-table.

        Depth-first, in row order.
        """
        yield depth, self
        for row in self.rows:
            subtable = row.get_subtable()
            if subtable is not None:
                yield from subtable.iter_tree(depth + 1)


@dataclass
class SimpleTable(Table):
    """Single-row table (e.g. a report's totals). Never sorted."""

    def __post_init__(self) -> None:
        if len(self.rows) > 1:
            raise ValueError("SimpleTable holds a single row")

    def add_row(self, row: Row) -> Row:
        """Set the single row.

        Raises:
            ValueError: If the table already holds a row.
        """
        if self.rows:
            raise ValueError("SimpleTable holds a single row")
        return super().add_row(row)

    def is_single_row_variant(self) -> bool:
        return True

    def sort(
        self,
        comparator: RowComparator,
        column: Any,
        resort: "Callable[[Table], Any] | None" = None,
    ) -> None:
        logger.debug("Ignoring sort request on single-row table")
