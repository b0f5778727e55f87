"""
workdays.periods
~~~~~~~~~~~~~~~~

Bucketing of dates into quarters (``yyyyQn``), ISO weeks (``yyyy-ww``),
months (``yyyy-MM``) and weekday names::

    from workdays.periods import quarter_of, previous_quarter

    str(quarter_of("2019-09-04"))        # → "2019Q3"
    str(previous_quarter("2020Q1"))      # → "2019Q4"
"""

from __future__ import annotations

from workdays.periods.periods import (
    Quarter,
    day_of_week,
    month_of_year,
    previous_quarter,
    quarter_of,
    week_of_year,
)

__all__ = [
    "Quarter",
    "day_of_week",
    "month_of_year",
    "previous_quarter",
    "quarter_of",
    "week_of_year",
]
