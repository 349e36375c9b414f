"""
Tests for the compact string parsers.

Covers duration strings, contract lengths and date ranges, including the
case-sensitive minute/month unit letters.
"""

from datetime import datetime, timedelta

import pytest

from synthdata.data.models import DateRange, TimePeriod
from synthdata.data.parsers import (
    format_date_range,
    parse_contract_length,
    parse_date_range,
    parse_time_period,
)
from synthdata.errors import (
    ContractLengthError,
    DateRangeError,
    InvalidDateRangeError,
    ParseError,
    TimeExpressionError,
)


class TestParseTimePeriod:
    """Test parse_time_period function."""

    @pytest.mark.parametrize("text,expected", [
        ("1m", timedelta(minutes=1)),
        ("15m", timedelta(minutes=15)),
        ("4H", timedelta(hours=4)),
        ("1D", timedelta(days=1)),
        ("2W", timedelta(weeks=2)),
        ("3M", timedelta(days=90)),
        ("2y", timedelta(days=730)),
    ])
    def test_units(self, text, expected):
        """Each unit letter scales the magnitude by its factor."""
        assert parse_time_period(text).delta == expected

    def test_minutes_and_months_are_distinct(self):
        """Lowercase m is minutes, uppercase M is thirty days."""
        assert parse_time_period("1m").delta == timedelta(minutes=1)
        assert parse_time_period("1M").delta == timedelta(days=30)

    def test_zero_amount_is_zero_duration(self):
        """A zero magnitude parses to a zero duration."""
        period = parse_time_period("0D")
        assert period == TimePeriod(amount=0, unit="D")
        assert period.delta == timedelta(0)

    def test_keeps_amount_and_unit(self):
        """Parsed period remembers its original parts."""
        period = parse_time_period("12H")
        assert period.amount == 12
        assert period.unit == "H"
        assert str(period) == "12H"

    @pytest.mark.parametrize("text", ["", "15", "007"])
    def test_missing_unit(self, text):
        """Strings without a unit character are rejected."""
        with pytest.raises(TimeExpressionError, match="no unit"):
            parse_time_period(text)

    @pytest.mark.parametrize("text", ["D", "-1D", " 1D", "x1D"])
    def test_invalid_magnitude(self, text):
        """The magnitude must be a non-negative integer."""
        with pytest.raises(TimeExpressionError, match="magnitude"):
            parse_time_period(text)

    @pytest.mark.parametrize("text", ["1d", "1h", "1Y", "1w", "1DD", "1 D", "1s"])
    def test_unknown_unit(self, text):
        """Unit matching is exact and case-sensitive."""
        with pytest.raises(TimeExpressionError, match="Unknown time unit"):
            parse_time_period(text)

    @pytest.mark.parametrize("text", ["99999999999D", "9999999999999999999m", "3000000y"])
    def test_magnitude_too_large(self, text):
        """Durations beyond what timedelta holds are parse errors."""
        with pytest.raises(TimeExpressionError, match="too large") as exc_info:
            parse_time_period(text)
        assert exc_info.value.raw_value == text

    def test_error_carries_raw_value(self):
        """Errors keep the offending input for reporting."""
        with pytest.raises(ParseError) as exc_info:
            parse_time_period("5q")
        assert exc_info.value.raw_value == "5q"


class TestParseContractLength:
    """Test parse_contract_length function."""

    @pytest.mark.parametrize("text,expected", [("1M", 1), ("3M", 3), ("12M", 12), ("0M", 0)])
    def test_valid(self, text, expected):
        """Trailing M is stripped and the rest parsed as months."""
        assert parse_contract_length(text) == expected

    def test_integer_passthrough(self):
        """Config files may give the month count as a number."""
        assert parse_contract_length(6) == 6

    @pytest.mark.parametrize("value", ["3", "3m", "3D", "M", "-1M", "1.5M", "three M", -2, True])
    def test_invalid(self, value):
        """Anything other than <integer>M is rejected."""
        with pytest.raises(ContractLengthError):
            parse_contract_length(value)


class TestParseDateRange:
    """Test parse_date_range function."""

    def test_valid(self, jan_feb_range):
        """Both sides parse into naive datetimes."""
        result = parse_date_range(jan_feb_range)
        assert result == DateRange(datetime(2024, 1, 1), datetime(2024, 3, 1))
        assert result.start.tzinfo is None

    def test_round_trip(self):
        """Formatting and re-parsing reproduces the original pair."""
        original = DateRange(datetime(2023, 5, 17, 8, 45, 12), datetime(2024, 2, 29, 23, 59, 59))
        assert parse_date_range(format_date_range(original)) == original

    def test_round_trip_early_years(self):
        """Years below 1000 are written zero-padded and read back."""
        original = DateRange(datetime(999, 1, 1), datetime(999, 12, 31, 23, 59, 59))
        text = format_date_range(original)
        assert text == "0999-01-01 00:00:00|0999-12-31 23:59:59"
        assert parse_date_range(text) == original

    @pytest.mark.parametrize("text", [
        "2024-01-01 00:00:00",
        "2024-01-01 00:00:00||2024-03-01 00:00:00",
        "2024-01-01 00:00:00|2024-02-01 00:00:00|2024-03-01 00:00:00",
    ])
    def test_wrong_separator_count(self, text):
        """Exactly one pipe is required."""
        with pytest.raises(DateRangeError, match="exactly one"):
            parse_date_range(text)

    def test_malformed_start(self):
        """A start side that does not match the format is named in the error."""
        with pytest.raises(DateRangeError, match="Invalid start date"):
            parse_date_range("notadate|2024-01-01 00:00:00")

    def test_malformed_end(self):
        """An end side that does not match the format is named in the error."""
        with pytest.raises(DateRangeError, match="Invalid end date"):
            parse_date_range("2024-01-01 00:00:00|2024-01-02")

    @pytest.mark.parametrize("side", [
        "2024-1-1 00:00:00",
        "2024-01-01T00:00:00",
        "2024-01-01 00:00:00 ",
        "2024-02-30 00:00:00",
    ])
    def test_fixed_width_format(self, side):
        """Unpadded, ISO-T, padded or impossible timestamps are rejected."""
        with pytest.raises(DateRangeError):
            parse_date_range(f"{side}|2025-01-01 00:00:00")

    def test_start_must_precede_end(self):
        """Reversed or empty ranges are rejected."""
        with pytest.raises(InvalidDateRangeError):
            parse_date_range("2024-03-01 00:00:00|2024-01-01 00:00:00")
        with pytest.raises(InvalidDateRangeError):
            parse_date_range("2024-03-01 00:00:00|2024-03-01 00:00:00")
