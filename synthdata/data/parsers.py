"""
Parsers for the compact strings used on the command line and in config files.

This module turns duration strings ("4H"), contract lengths ("3M") and date
ranges ("2024-01-01 00:00:00|2024-03-01 00:00:00") into model objects. Every
failure raises a ParseError subclass carrying the raw value, so callers can
report per-dataset problems instead of aborting blindly.
"""

from typing import Union

from synthdata.errors import (
    ContractLengthError,
    DateRangeError,
    ParseError,
    TimeExpressionError,
)
from synthdata.utils.time import TIMESTAMP_FORMAT, format_timestamp, parse_timestamp

from .models import UNIT_MINUTES, DateRange, TimePeriod

__all__ = [
    "ParseError",
    "parse_time_period",
    "parse_contract_length",
    "parse_date_range",
    "format_date_range",
]

DATE_RANGE_SEPARATOR = "|"


def _parse_unsigned(digits: str) -> int:
    """Strict non-negative integer: ASCII digits only, no sign or whitespace."""
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"not an unsigned integer: {digits!r}")
    return int(digits)


def parse_time_period(text: str) -> TimePeriod:
    """
    Parse a `<integer><unit>` duration string.

    Units are case-sensitive: m=minutes, H=hours, D=days, W=weeks,
    M=months (30 days), y=years (365 days).

    Args:
        text: Duration string such as "1D" or "15m"

    Returns:
        Parsed TimePeriod

    Raises:
        TimeExpressionError: If the unit is missing or unknown, or the
            magnitude is not a valid integer or too large for a duration
    """
    split_at = next((i for i, ch in enumerate(text) if not ch.isdigit()), None)
    if split_at is None:
        raise TimeExpressionError(
            f"Time expression {text!r} has no unit",
            raw_value=text,
            expected_format="<integer><m|H|D|W|M|y>",
        )

    magnitude, unit = text[:split_at], text[split_at:]

    try:
        amount = _parse_unsigned(magnitude)
    except ValueError as e:
        raise TimeExpressionError(
            f"Invalid magnitude in time expression {text!r}",
            raw_value=text,
            expected_format="<integer><m|H|D|W|M|y>",
        ) from e

    if unit not in UNIT_MINUTES:
        raise TimeExpressionError(
            f"Unknown time unit {unit!r} in {text!r}",
            raw_value=text,
            expected_format="<integer><m|H|D|W|M|y>",
        )

    period = TimePeriod(amount=amount, unit=unit)
    try:
        period.delta
    except OverflowError as e:
        raise TimeExpressionError(
            f"Time expression {text!r} is too large",
            raw_value=text,
            expected_format="<integer><m|H|D|W|M|y>",
        ) from e

    return period


def parse_contract_length(text: Union[str, int]) -> int:
    """
    Parse a contract length such as "3M" into a month count.

    Integers (from config files) are accepted as-is when non-negative.

    Raises:
        ContractLengthError: If the value is not `<integer>M`
    """
    if isinstance(text, int) and not isinstance(text, bool):
        if text < 0:
            raise ContractLengthError(
                f"Contract length must be non-negative, got {text}",
                raw_value=str(text),
                expected_format="<integer>M",
            )
        return text

    if not isinstance(text, str) or not text.endswith("M"):
        raise ContractLengthError(
            f"Contract length {text!r} must end with 'M'",
            raw_value=str(text),
            expected_format="<integer>M",
        )

    try:
        return _parse_unsigned(text[:-1])
    except ValueError as e:
        raise ContractLengthError(
            f"Invalid month count in contract length {text!r}",
            raw_value=text,
            expected_format="<integer>M",
        ) from e


def parse_date_range(text: str) -> DateRange:
    """
    Parse `"<start>|<end>"` into a DateRange.

    Both sides use the fixed format `YYYY-MM-DD HH:MM:SS` and are naive.

    Raises:
        DateRangeError: On a wrong separator count or a malformed timestamp
        InvalidDateRangeError: If start is not before end
    """
    parts = text.split(DATE_RANGE_SEPARATOR)
    if len(parts) != 2:
        raise DateRangeError(
            f"Date range {text!r} must contain exactly one '{DATE_RANGE_SEPARATOR}', "
            f"found {len(parts) - 1}",
            raw_value=text,
            expected_format=f"{TIMESTAMP_FORMAT}|{TIMESTAMP_FORMAT}",
        )

    bounds = []
    for side, value in zip(("start", "end"), parts):
        try:
            bounds.append(parse_timestamp(value))
        except ValueError as e:
            raise DateRangeError(
                f"Invalid {side} date {value!r}: expected {TIMESTAMP_FORMAT}",
                raw_value=text,
                expected_format=TIMESTAMP_FORMAT,
            ) from e

    return DateRange(start=bounds[0], end=bounds[1])


def format_date_range(date_range: DateRange) -> str:
    """Format a DateRange back into its `"<start>|<end>"` string."""
    return DATE_RANGE_SEPARATOR.join(
        (format_timestamp(date_range.start), format_timestamp(date_range.end))
    )
