"""
System failure error classifications.

These exceptions abort generation. Files already written are left in place.
"""

from typing import Any, Optional


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class PersistenceError(SystemFailureError):
    """File system failure while creating or writing output."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 target: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.target = target


class DateOverflowError(SystemFailureError):
    """Date arithmetic left the representable datetime range."""

    def __init__(self, message: str, base: Any = None, months: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.base = base
        self.months = months
