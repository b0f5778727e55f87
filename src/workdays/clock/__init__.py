"""
workdays.clock
~~~~~~~~~~~~~~

Source of "now".  Helpers take an optional Clock so tests can pin time::

    from workdays.clock import FixedClock, is_stale, today

    clock = FixedClock(1_546_300_800_000)        # 2019-01-01 00:00:00 UTC
    today(clock)                                 # → date(2019, 1, 1)
    is_stale(1_546_300_800_000, clock.advance(minutes=21))   # → True
"""

from __future__ import annotations

from workdays.clock.clock import (
    STALE_AFTER_MINUTES,
    Clock,
    FixedClock,
    SystemClock,
    current_timestamp,
    is_stale,
    is_today,
    today,
)

__all__ = [
    "STALE_AFTER_MINUTES",
    "Clock",
    "FixedClock",
    "SystemClock",
    "current_timestamp",
    "is_stale",
    "is_today",
    "today",
]
