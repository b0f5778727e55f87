"""
workdays.calendar
~~~~~~~~~~~~~~~~~

Business-day arithmetic.  A BusinessCalendar combines a Mon..Sun weekmask with
an immutable holiday table loaded from configuration data.

Basic usage::

    from workdays.calendar import default_calendar

    cal = default_calendar()                       # Mon–Fri, US market 2019
    cal.is_holiday("2019-01-01")                   # → True
    cal.date_add("2019-01-01", 1)                  # → date(2019, 1, 2)
    cal.dates_in_range("2019-06-01", "2019-06-07", exclude_holidays=True)
    cal.date_diff("2019-01-01", "2019-01-08", exclude_holidays=True)   # → 4

A holiday start date is first rolled back to the previous business day, for
date_sub and date_add alike.

NumPy arrays are accepted wherever a single date is::

    import numpy as np
    starts = np.array(["2019-01-01", "2019-07-03"], dtype="datetime64[D]")
    cal.date_add(starts, 2)

Public API
----------
BusinessCalendar  The main class.
HolidaySet        Immutable holiday table.
load_holidays     Read a holiday table from YAML.
default_calendar  Cached calendar over the packaged table.
CalendarError     Base exception for all workdays errors.
FormatError       Malformed date, timestamp or quarter text.
RangeError        Argument outside an operation's domain.
"""

from __future__ import annotations

from workdays.calendar._exceptions import CalendarError, FormatError, RangeError
from workdays.calendar.holidays import HolidaySet, load_holidays
from workdays.calendar.calendar import BusinessCalendar, default_calendar

__all__ = [
    "BusinessCalendar",
    "CalendarError",
    "FormatError",
    "HolidaySet",
    "RangeError",
    "default_calendar",
    "load_holidays",
]
