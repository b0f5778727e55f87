from __future__ import annotations

import time
from datetime import date
from typing import Optional, Protocol

from workdays.config import ClockConfig
from workdays.formats.dates import DateLike, parse_date
from workdays.formats.timestamps import millis_to_datetime, millis_to_timestamp

STALE_AFTER_MINUTES = 20


class Clock(Protocol):
    def now_millis(self) -> int: ...


class SystemClock:
    """Reads the host's wall clock."""

    def now_millis(self) -> int:
        return time.time_ns() // 1_000_000

    def __repr__(self) -> str:
        return "SystemClock()"


class FixedClock:
    """A clock frozen at one instant."""

    def __init__(self, millis: int) -> None:
        self._millis = int(millis)

    def now_millis(self) -> int:
        return self._millis

    def advance(self, *, minutes: float = 0.0, seconds: float = 0.0, millis: int = 0) -> "FixedClock":
        delta = int(round((minutes * 60.0 + seconds) * 1000.0)) + int(millis)
        return FixedClock(self._millis + delta)

    def __repr__(self) -> str:
        return f"FixedClock(millis={self._millis})"


def _resolve(clock: Optional[Clock]) -> Clock:
    return clock if clock is not None else SystemClock()


def today(clock: Optional[Clock] = None) -> date:
    return millis_to_datetime(_resolve(clock).now_millis()).date()


def current_timestamp(clock: Optional[Clock] = None, millis: bool = True) -> str:
    """Current time as ``yyyy-MM-dd HH:mm:ss.S`` (or without ``.S``)."""
    return millis_to_timestamp(_resolve(clock).now_millis(), millis=millis)


def is_today(value: DateLike, clock: Optional[Clock] = None) -> bool:
    return parse_date(value) == today(clock)


def is_stale(
    msec: int,
    clock: Optional[Clock] = None,
    threshold_minutes: Optional[float] = None,
    config: Optional[ClockConfig] = None,
) -> bool:
    """
    True if `msec` lies more than the staleness threshold before the clock's
    now.  The threshold is `threshold_minutes` when given, else
    `config.stale_after_minutes`, else STALE_AFTER_MINUTES.
    """
    if threshold_minutes is None:
        threshold_minutes = (
            config.stale_after_minutes if config is not None else STALE_AFTER_MINUTES
        )
    age = _resolve(clock).now_millis() - msec
    return age > threshold_minutes * 60_000
