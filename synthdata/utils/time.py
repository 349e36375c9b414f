"""
Calendar arithmetic and timestamp formatting.

Contract windows are measured in calendar months, while bar periods are fixed
durations. This module holds the calendar side plus the one timestamp format
shared by the parsers and the CSV writer.
"""

import calendar
from datetime import datetime

from synthdata.errors import DateOverflowError

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def add_months(base: datetime, months: int) -> datetime:
    """
    Add calendar months to a timestamp, clamping the day to the target month.

    Args:
        base: Starting timestamp
        months: Number of months to add (may be negative)

    Returns:
        Timestamp with the same time of day, `months` calendar months later

    Raises:
        DateOverflowError: If the result falls outside datetime's range
    """
    month_index = base.month - 1 + months
    year = base.year + month_index // 12
    month = month_index % 12 + 1

    if year < 1 or year > 9999:
        raise DateOverflowError(
            f"Adding {months} months to {base} leaves the representable date range",
            base=base,
            months=months,
        )

    last_day = calendar.monthrange(year, month)[1]
    return base.replace(year=year, month=month, day=min(base.day, last_day))


def months_between(start: datetime, end: datetime) -> int:
    """
    Count whole calendar months from start to end.

    Args:
        start: Earlier timestamp
        end: Later timestamp

    Returns:
        Largest n such that add_months(start, n) <= end
    """
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if months > 0 and add_months(start, months) > end:
        months -= 1
    return months


def format_timestamp(ts: datetime) -> str:
    """Format a timestamp for CSV output and date range strings."""
    # strftime("%Y") does not pad years below 1000 on every platform
    return f"{ts.year:04d}-" + ts.strftime("%m-%d %H:%M:%S")


def parse_timestamp(text: str) -> datetime:
    """Parse a `YYYY-MM-DD HH:MM:SS` timestamp. Raises ValueError on mismatch."""
    parsed = datetime.strptime(text, TIMESTAMP_FORMAT)
    # strptime tolerates unpadded fields; the format is fixed-width
    if format_timestamp(parsed) != text:
        raise ValueError(f"timestamp {text!r} does not match {TIMESTAMP_FORMAT}")
    return parsed
