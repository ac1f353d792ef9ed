"""Errors raised by the interval core.

All of them subclass `ValueError` so callers treating bad template input as a value problem keep
working without importing this module.
"""

from __future__ import annotations


class DateIntervalError(ValueError):
    """Base class for interval humanization errors."""


class InvalidInputError(DateIntervalError):
    """Raised when a value cannot be normalized into a point in time."""


class InvalidArgumentError(DateIntervalError):
    """Raised when a formatting argument is out of its supported range."""


class UnsupportedLocaleError(DateIntervalError):
    """Raised when no grammar table exists for the requested locale."""
