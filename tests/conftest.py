"""Pytest configuration and shared fixtures.

Provides common test fixtures and configuration for the test suite.
"""

import sys
from pathlib import Path
from typing import Generator

import pytest

# Add parent directory to path so imports work
# This allows: from models import ... to find /project/models.py
sys.path.insert(0, str(Path(__file__).parent.parent))

from logging_config import setup_logging
from metrics import INDEX_NB_ACTIONS, INDEX_NB_VISITS
from models import Row, SimpleTable, Table


# Configure logging once for entire test session
@pytest.fixture(scope="session", autouse=True)
def configure_logging() -> Generator[None, None, None]:
    """Configure logging for all tests.

    Runs once before any tests (scope="session", autouse=True).
    """
    setup_logging(verbose=False)
    yield


def make_table(*column_sets: dict) -> Table:
    """Build a flat table from column dicts, in order."""
    return Table(rows=[Row(columns=dict(columns)) for columns in column_sets])


def labels(table: Table) -> list:
    """Return the label column of every row, in order."""
    return [row.label for row in table.get_rows()]


@pytest.fixture
def visits_table() -> Table:
    """Named metrics, with a tie on nb_visits."""
    return make_table(
        {"label": "b", "nb_visits": 5},
        {"label": "a", "nb_visits": 10},
        {"label": "a2", "nb_visits": 5},
    )


@pytest.fixture
def indexed_table() -> Table:
    """Metrics stored under their integer index (compact archive form)."""
    return make_table(
        {"label": "low", INDEX_NB_VISITS: 3, INDEX_NB_ACTIONS: 30},
        {"label": "high", INDEX_NB_VISITS: 40, INDEX_NB_ACTIONS: 4},
        {"label": "mid", INDEX_NB_VISITS: 12, INDEX_NB_ACTIONS: 12},
    )


@pytest.fixture
def nested_table() -> Table:
    """Two-level tree: continents with country sub-tables."""
    europe = Row(columns={"label": "Europe", "nb_visits": 30})
    europe.add_subtable(
        make_table(
            {"label": "Spain", "nb_visits": 10},
            {"label": "France", "nb_visits": 20},
        )
    )
    asia = Row(columns={"label": "Asia", "nb_visits": 45})
    # Country table stores visits by metric index only
    asia.add_subtable(
        make_table(
            {"label": "Japan", INDEX_NB_VISITS: 15},
            {"label": "India", INDEX_NB_VISITS: 30},
        )
    )
    oceania = Row(columns={"label": "Oceania", "nb_visits": 2})
    return Table(rows=[europe, oceania, asia])


@pytest.fixture
def simple_table() -> SimpleTable:
    """Single-row totals table."""
    return SimpleTable(rows=[Row(columns={"nb_visits": 100, "label": "Total"})])
