"""Tests for value parsing and result rendering."""

import pytest
from land_converter.core.converter.formatting import (
    INVALID_VALUE_MESSAGE,
    ValueParseError,
    format_conversion,
    format_conversions,
    format_value,
    parse_value,
)


class TestParseValue:
    def test_integer_text(self):
        assert parse_value("12") == 12.0

    def test_decimal_with_whitespace(self):
        assert parse_value("  3.25 ") == 3.25

    def test_negative(self):
        assert parse_value("-1.5") == -1.5

    def test_exponent(self):
        assert parse_value("1e3") == 1000.0

    @pytest.mark.parametrize("text", ["", "   ", "abc", "1,5", "12 ropani"])
    def test_non_numeric(self, text):
        with pytest.raises(ValueParseError) as exc:
            parse_value(text)
        assert str(exc.value) == INVALID_VALUE_MESSAGE

    @pytest.mark.parametrize("text", ["nan", "inf", "-Infinity"])
    def test_non_finite(self, text):
        with pytest.raises(ValueParseError):
            parse_value(text)

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_value("x")


class TestFormat:
    def test_format_value_default_precision(self):
        assert format_value(1.0) == "1.000000"

    def test_format_value_custom_precision(self):
        assert format_value(15.99748, 2) == "16.00"

    def test_format_conversion(self):
        text = format_conversion(1.0, "ropani", 508.72 / 31.80, "aana")
        assert text == "1.000000 ropani is equal to 15.997484 aana"

    def test_format_conversions(self):
        text = format_conversions(2.0, "bigha", {"bigha": 2.0, "katha": 40.0})
        assert text.splitlines() == [
            "Conversions for 2.000000 bigha:",
            "2.000000 bigha",
            "40.000000 katha",
        ]
