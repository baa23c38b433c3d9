"""Tests for config.py.

Tests configuration constants and exit codes.
"""

import config
from config import ExitCode


class TestExitCode:
    """Tests for ExitCode enum."""

    def test_exit_code_values(self):
        assert ExitCode.SUCCESS == 0
        assert ExitCode.GENERAL_ERROR == 1
        assert ExitCode.INVALID_INPUT == 2
        assert ExitCode.INVALID_ARGUMENTS == 4

    def test_exit_codes_unique(self):
        values = [code.value for code in ExitCode]
        assert len(values) == len(set(values))

    def test_exit_code_in_range(self):
        for code in ExitCode:
            assert 0 <= code <= 255


class TestSortingDefaults:
    """Tests for sorting constants."""

    def test_default_order_is_descending(self):
        assert config.DEFAULT_SORT_ORDER == "desc"

    def test_natural_sort_on_by_default(self):
        assert config.DEFAULT_NATURAL_SORT is True

    def test_label_column(self):
        assert config.LABEL_COLUMN == "label"


class TestJsonKeys:
    """Tests for JSON interchange keys."""

    def test_keys_distinct(self):
        keys = {config.JSON_ROWS_KEY, config.JSON_COLUMNS_KEY, config.JSON_SUBTABLE_KEY}
        assert len(keys) == 3

    def test_indent_positive(self):
        assert config.JSON_INDENT > 0


class TestLogColors:
    """Tests for log color configuration."""

    def test_standard_levels_colored(self):
        assert set(config.LOG_COLORS) == {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

    def test_codes_are_ansi(self):
        for code in [*config.LOG_COLORS.values(), config.LOG_COLOR_RESET]:
            assert code.startswith("\033[")
            assert code.endswith("m")


class TestToolMetadata:
    """Tests for tool metadata."""

    def test_tool_name(self):
        assert config.TOOL_NAME == "tablesort"

    def test_version_format(self):
        parts = config.VERSION.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)
