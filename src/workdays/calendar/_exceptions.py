from __future__ import annotations


class CalendarError(Exception):
    """Base exception for all workdays errors."""


class FormatError(CalendarError, ValueError):
    """Text that does not match the expected date, timestamp or quarter pattern."""


class RangeError(CalendarError, ValueError):
    """Argument outside the domain of a calendar operation."""
