"""Base class for table filters."""

from abc import ABC, abstractmethod

from models import Table


class Filter(ABC):
    """A transformation applied in place to a table.

    Filters are constructed with the table they are meant for and then
    applied with filter(), either directly or through Table.filter().
    """

    def __init__(self, table: Table) -> None:
        self.table = table

    @abstractmethod
    def filter(self, table: Table) -> None:
        """Apply the filter to a table in place."""

    def apply(self) -> None:
        """Apply the filter to the table it was constructed with."""
        self.filter(self.table)
