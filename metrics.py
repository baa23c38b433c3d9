"""Metric registry: symbolic metric indexes and their canonical names.

Report tables may store metrics either under their integer index
(compact archives) or under their name. The registry translates between
the two and is consulted only when resolving which column to sort by.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

# Generic visit metrics
INDEX_NB_UNIQ_VISITORS: int = 1
INDEX_NB_VISITS: int = 2
INDEX_NB_ACTIONS: int = 3
INDEX_MAX_ACTIONS: int = 4
INDEX_SUM_VISIT_LENGTH: int = 5
INDEX_BOUNCE_COUNT: int = 6
INDEX_NB_VISITS_CONVERTED: int = 7
INDEX_NB_CONVERSIONS: int = 8
INDEX_REVENUE: int = 9
INDEX_GOALS: int = 10
INDEX_SUM_DAILY_NB_UNIQ_VISITORS: int = 11

# Actions reports
INDEX_PAGE_NB_HITS: int = 12
INDEX_PAGE_SUM_TIME_SPENT: int = 13
INDEX_PAGE_EXIT_NB_UNIQ_VISITORS: int = 14
INDEX_PAGE_EXIT_NB_VISITS: int = 15
INDEX_PAGE_EXIT_SUM_DAILY_NB_UNIQ_VISITORS: int = 16
INDEX_PAGE_ENTRY_NB_UNIQ_VISITORS: int = 17
INDEX_PAGE_ENTRY_SUM_DAILY_NB_UNIQ_VISITORS: int = 18
INDEX_PAGE_ENTRY_NB_VISITS: int = 19
INDEX_PAGE_ENTRY_NB_ACTIONS: int = 20
INDEX_PAGE_ENTRY_SUM_VISIT_LENGTH: int = 21
INDEX_PAGE_ENTRY_BOUNCE_COUNT: int = 22

METRIC_ID_TO_NAME: dict[int, str] = {
    INDEX_NB_UNIQ_VISITORS: "nb_uniq_visitors",
    INDEX_NB_VISITS: "nb_visits",
    INDEX_NB_ACTIONS: "nb_actions",
    INDEX_MAX_ACTIONS: "max_actions",
    INDEX_SUM_VISIT_LENGTH: "sum_visit_length",
    INDEX_BOUNCE_COUNT: "bounce_count",
    INDEX_NB_VISITS_CONVERTED: "nb_visits_converted",
    INDEX_NB_CONVERSIONS: "nb_conversions",
    INDEX_REVENUE: "revenue",
    INDEX_GOALS: "goals",
    INDEX_SUM_DAILY_NB_UNIQ_VISITORS: "sum_daily_nb_uniq_visitors",
    INDEX_PAGE_NB_HITS: "nb_hits",
    INDEX_PAGE_SUM_TIME_SPENT: "sum_time_spent",
    INDEX_PAGE_EXIT_NB_UNIQ_VISITORS: "exit_nb_uniq_visitors",
    INDEX_PAGE_EXIT_NB_VISITS: "exit_nb_visits",
    INDEX_PAGE_EXIT_SUM_DAILY_NB_UNIQ_VISITORS: "sum_daily_exit_nb_uniq_visitors",
    INDEX_PAGE_ENTRY_NB_UNIQ_VISITORS: "entry_nb_uniq_visitors",
    INDEX_PAGE_ENTRY_SUM_DAILY_NB_UNIQ_VISITORS: "sum_daily_entry_nb_uniq_visitors",
    INDEX_PAGE_ENTRY_NB_VISITS: "entry_nb_visits",
    INDEX_PAGE_ENTRY_NB_ACTIONS: "entry_nb_actions",
    INDEX_PAGE_ENTRY_SUM_VISIT_LENGTH: "entry_sum_visit_length",
    INDEX_PAGE_ENTRY_BOUNCE_COUNT: "entry_bounce_count",
}


@dataclass(frozen=True)
class MetricRegistry:
    """Read-only bidirectional mapping between metric indexes and names.

    Attributes:
        id_to_name: Metric index -> canonical name (wrapped read-only)
        visit_count_key: Key of the default "visit count" metric, used as
            the last-resort sort column
    """

    id_to_name: Mapping[int, str]
    visit_count_key: Any = INDEX_NB_VISITS
    _name_to_id: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # frozen dataclass: bypass __setattr__ for derived fields
        object.__setattr__(self, "id_to_name", MappingProxyType(dict(self.id_to_name)))
        object.__setattr__(
            self,
            "_name_to_id",
            MappingProxyType({name: idx for idx, name in self.id_to_name.items()}),
        )

    def lookup_name_by_id(self, metric_id: Any) -> str | None:
        """Return the canonical name for a metric index, or None if unknown."""
        try:
            return self.id_to_name.get(metric_id)
        except TypeError:
            # Unhashable keys are never metric indexes
            return None

    def lookup_id_by_name(self, name: Any) -> int | None:
        """Return the metric index for a canonical name, or None if unknown."""
        try:
            return self._name_to_id.get(name)
        except TypeError:
            return None

    def __contains__(self, metric_id: object) -> bool:
        return self.lookup_name_by_id(metric_id) is not None


DEFAULT_REGISTRY: MetricRegistry = MetricRegistry(METRIC_ID_TO_NAME)
