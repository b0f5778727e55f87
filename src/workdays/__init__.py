"""
workdays
~~~~~~~~

Business-day aware date arithmetic and date/timestamp format conversion.

Subpackages
-----------
workdays.calendar   BusinessCalendar, holiday tables, exceptions.
workdays.periods    Quarter, week, month and weekday bucketing.
workdays.formats    Date / timestamp parsing, formatting, epoch milliseconds.
workdays.clock      Injectable clock and "now" helpers.
"""

from __future__ import annotations

import logging

from workdays.calendar import (
    BusinessCalendar,
    CalendarError,
    FormatError,
    HolidaySet,
    RangeError,
    default_calendar,
    load_holidays,
)
from workdays.config import Config, load_config

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "BusinessCalendar",
    "CalendarError",
    "Config",
    "FormatError",
    "HolidaySet",
    "RangeError",
    "default_calendar",
    "load_config",
    "load_holidays",
]
