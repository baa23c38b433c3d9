"""Sort column resolution.

A requested sort column may not exist on a given table: the report may
store metrics by index instead of name, or the column belongs to another
report. Resolution picks the key actually used for sorting.
"""

from typing import Any

from logging_config import get_logger
from metrics import DEFAULT_REGISTRY, MetricRegistry
from models import Row
from utils import describe_key

logger = get_logger(__name__)


class ColumnResolver:
    """Resolve a requested sort column against a representative row.

    Priority (first match wins):
        1. The requested key, if the row has it
        2. The registry name of a requested metric index, if the row has it
        3. The registry's visit count metric, if the row has it
        4. The requested key unchanged (rows will all compare as missing)
    """

    def __init__(self, registry: MetricRegistry | None = None) -> None:
        self.registry = registry if registry is not None else DEFAULT_REGISTRY

    def resolve(self, column: Any, row: Row) -> Any:
        """Return the effective sort key. Never raises.

        Args:
            column: Requested column key (metric index or name)
            row: Representative row, usually the table's first

        Returns:
            Column key to sort by.
        """
        if row.has_column(column):
            return column

        name = self.registry.lookup_name_by_id(column)
        if name is not None and row.has_column(name):
            logger.debug("Sort column %s resolved to metric name %s", describe_key(column), describe_key(name))
            return name

        # e.g. previously sorted by revenue_per_visit, this report has no such column
        visit_count_key = self.registry.visit_count_key
        if row.has_column(visit_count_key):
            logger.debug(
                "Sort column %s not found, falling back to %s",
                describe_key(column),
                describe_key(visit_count_key),
            )
            return visit_count_key

        logger.debug("Sort column %s not found in table, keeping it", describe_key(column))
        return column
