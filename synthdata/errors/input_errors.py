"""
Input error classifications for dataset definitions.

These exceptions cover everything a user can get wrong: duration strings,
contract lengths, date ranges, config files and dataset types.
"""

from typing import Any, Optional


class InputError(Exception):
    """Base class for malformed user input."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class ParseError(InputError):
    """A compact string could not be parsed."""

    def __init__(self, message: str, raw_value: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_value = raw_value
        self.expected_format = expected_format


class TimeExpressionError(ParseError):
    """Invalid `<integer><unit>` duration string."""
    pass


class ContractLengthError(ParseError):
    """Invalid `<integer>M` contract length."""
    pass


class DateRangeError(ParseError):
    """Invalid `<start>|<end>` date range string."""
    pass


class InvalidDateRangeError(InputError):
    """Date range whose start is not before its end."""

    def __init__(self, message: str, start: Any = None, end: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.start = start
        self.end = end


class InvalidTimePeriodError(InputError):
    """Bar period that cannot advance time."""
    pass


class ConfigError(InputError):
    """Dataset configuration file is unreadable or invalid."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []


class UnknownDatasetTypeError(InputError):
    """Dataset type with no registered generator."""

    def __init__(self, message: str, dataset_type: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.dataset_type = dataset_type
