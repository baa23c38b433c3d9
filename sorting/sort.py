"""Sort filter: orders a table (and optionally its sub-tables) by a column.

Sorting is a best-effort presentation step. Unsortable tables, empty
column keys and missing columns are no-ops or fallbacks, never errors.
"""

from typing import Any

import config
from enums import SortOrder
from logging_config import get_logger
from metrics import MetricRegistry
from models import Table
from utils import describe_key

from .base import Filter
from .column_resolver import ColumnResolver
from .comparators import select_comparator

logger = get_logger(__name__)


class Sort(Filter):
    """Sort a table by the value of a column.

    Attributes:
        column_to_sort: Requested column, replaced by the resolved column
            after the first filter() call
        order: Normalized direction
        natural_sort: Use natural order for text values
        resolver: Column resolver (holds the metric registry)
    """

    def __init__(
        self,
        table: Table,
        column_to_sort: Any,
        order: Any = config.DEFAULT_SORT_ORDER,
        natural_sort: bool = config.DEFAULT_NATURAL_SORT,
        recursive_sort: bool = False,
        registry: MetricRegistry | None = None,
    ) -> None:
        """Create the filter.

        Args:
            table: Table to sort
            column_to_sort: Column key (metric index or name)
            order: "asc" for ascending, anything else for descending
            natural_sort: Use natural order for text values
            recursive_sort: Also sort every sub-table, depth-first
            registry: Metric registry for column resolution (default registry if None)
        """
        super().__init__(table)
        if recursive_sort:
            table.enable_recursive_sort()
        self.column_to_sort = column_to_sort
        self.natural_sort = natural_sort
        self.resolver = ColumnResolver(registry)
        self.set_order(order)

    def set_order(self, order: Any) -> None:
        """Update the direction ("asc", anything else means "desc")."""
        self.order = SortOrder.from_value(order)

    @property
    def sign(self) -> int:
        return self.order.sign

    def filter(self, table: Table) -> None:
        """Sort a table in place.

        Process:
            1. Skip empty column keys, single-row tables and empty tables
            2. Resolve the column against the first row and keep it
            3. Pick the comparator from the first row's value
            4. Sort; each sub-table resolves the kept column against its
               own first row

        Args:
            table: Table to sort
        """
        if _is_empty_key(self.column_to_sort):
            logger.debug("No sort column given, leaving table unsorted")
            return
        if not _is_sortable(table):
            return

        self.column_to_sort = self.resolver.resolve(self.column_to_sort, table.get_first_row())
        self._sort_by(table, self.column_to_sort)

    def _sort_by(self, table: Table, column: Any) -> None:
        mode, comparator = select_comparator(
            table.get_first_row().get_column(column),
            column,
            self.sign,
            self.natural_sort,
        )
        logger.debug(
            "Sorting %d rows by %s (%s, %s)",
            table.get_row_count(),
            describe_key(column),
            self.order.value,
            mode.value,
        )
        table.sort(comparator, column, resort=self._sort_subtable)

    def _sort_subtable(self, subtable: Table) -> None:
        if not _is_sortable(subtable):
            return
        column = self.resolver.resolve(self.column_to_sort, subtable.get_first_row())
        self._sort_by(subtable, column)


def _is_empty_key(column: Any) -> bool:
    return column is None or column == ""


def _is_sortable(table: Table) -> bool:
    if table.is_single_row_variant():
        logger.debug("Single-row table is never sorted")
        return False
    return table.get_row_count() > 0


def sort_table(
    table: Table,
    column: Any,
    order: Any = config.DEFAULT_SORT_ORDER,
    natural_sort: bool = config.DEFAULT_NATURAL_SORT,
    recursive: bool = False,
    registry: MetricRegistry | None = None,
) -> Any:
    """Sort a table in place by a column.

    Args:
        table: Table to sort
        column: Column key (metric index or name)
        order: "asc" for ascending, anything else for descending
        natural_sort: Use natural order for text values
        recursive: Also sort every sub-table
        registry: Metric registry for column resolution

    Returns:
        Column key actually used at the top level, or None if the table
        was left untouched.
    """
    sort_filter = Sort(table, column, order, natural_sort, recursive, registry)
    sort_filter.apply()

    if _is_empty_key(column) or not _is_sortable(table):
        return None
    return sort_filter.column_to_sort
