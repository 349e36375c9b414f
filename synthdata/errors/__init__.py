"""
Error classification for dataset generation.

Malformed input fails fast with a descriptive message. System failures
(file system, date arithmetic) are fatal and propagate to the caller.
"""

from .input_errors import (
    InputError,
    ParseError,
    TimeExpressionError,
    ContractLengthError,
    DateRangeError,
    InvalidDateRangeError,
    InvalidTimePeriodError,
    ConfigError,
    UnknownDatasetTypeError,
)
from .system_failures import (
    SystemFailureError,
    PersistenceError,
    DateOverflowError,
)

__all__ = [
    # Input Errors
    "InputError",
    "ParseError",
    "TimeExpressionError",
    "ContractLengthError",
    "DateRangeError",
    "InvalidDateRangeError",
    "InvalidTimePeriodError",
    "ConfigError",
    "UnknownDatasetTypeError",
    # System Failures
    "SystemFailureError",
    "PersistenceError",
    "DateOverflowError",
]
