"""Tests for utils/validators.py.

Tests numeric detection and column key parsing.
"""

import pytest

from utils.validators import is_numeric, parse_column_key, to_number


class TestIsNumeric:
    """Tests for is_numeric function."""

    @pytest.mark.parametrize("value", [0, 5, -3, 2.5, 1e9, float("nan")])
    def test_numbers(self, value):
        assert is_numeric(value) is True

    @pytest.mark.parametrize("value", ["5", "-3", "+2.5", ".5", "5.", "1e3", "2.5E-2", " 42 "])
    def test_numeric_strings(self, value):
        assert is_numeric(value) is True

    @pytest.mark.parametrize("value", ["", "abc", "img2", "1,000", "1_000", "nan", "inf", "0x1F", "5 5"])
    def test_non_numeric_strings(self, value):
        assert is_numeric(value) is False

    def test_bool_is_not_numeric(self):
        """Test booleans are not treated as numbers."""
        assert is_numeric(True) is False
        assert is_numeric(False) is False

    @pytest.mark.parametrize("value", [None, [], {}, object()])
    def test_other_types(self, value):
        assert is_numeric(value) is False


class TestToNumber:
    """Tests for to_number function."""

    def test_converts(self):
        assert to_number("10") == 10.0
        assert to_number(" 2.5 ") == 2.5
        assert to_number(7) == 7.0

    def test_non_numeric_returns_none(self):
        assert to_number("abc") is None
        assert to_number(True) is None
        assert to_number(None) is None


class TestParseColumnKey:
    """Tests for parse_column_key function."""

    def test_digits_become_metric_index(self):
        assert parse_column_key("2") == 2
        assert parse_column_key("012") == 12

    @pytest.mark.parametrize("text", ["nb_visits", "-1", "2.0", " 2", "", "label"])
    def test_other_keys_unchanged(self, text):
        assert parse_column_key(text) == text


class TestToNumberPrecision:
    """Large integers keep their exact value."""

    def test_ints_returned_unchanged(self):
        value = 2**53 + 1
        assert to_number(value) == value
        assert isinstance(to_number(value), int)

    def test_floats_returned_unchanged(self):
        assert to_number(2.5) == 2.5

    def test_integer_strings_parsed_exactly(self):
        assert to_number("9007199254740993") == 2**53 + 1
        assert to_number(" -42 ") == -42
        assert isinstance(to_number("+7"), int)

    def test_decimal_strings_are_floats(self):
        assert isinstance(to_number("1.0"), float)
        assert to_number("1e3") == 1000.0
