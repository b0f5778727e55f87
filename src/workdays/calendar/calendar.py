from __future__ import annotations

import logging
from datetime import date, datetime
from functools import lru_cache
from typing import Iterator, Optional, Sequence, Union

import numpy as np

from ._exceptions import RangeError
from .holidays import HolidaySet, load_holidays
from workdays.config import CalendarConfig
from workdays.formats.dates import DateLike, to_datetime64
from workdays.formats.timestamps import datetime_to_millis, millis_to_datetime

logger = logging.getLogger(__name__)

DatesLike = Union[DateLike, Sequence[DateLike], "np.ndarray"]

_ONE_DAY = np.timedelta64(1, "D")


class BusinessCalendar:
    """
    Compiled business-day calendar: a Mon..Sun weekmask plus a holiday table,
    compiled once into a ``numpy.busdaycalendar``.

    A date is a holiday when its weekday is off in the weekmask (Saturday and
    Sunday by default) or when it appears in the holiday table.  Instances are
    immutable; ``with_holiday`` / ``without_holiday`` derive new calendars.

    Every query accepts a scalar date-like or an array of them.  Scalars return
    ``datetime.date`` / ``bool`` / ``int``; arrays return NumPy arrays of the
    same shape.
    """

    DEFAULT_WEEKMASK: tuple[int, ...] = (1, 1, 1, 1, 1, 0, 0)

    def __init__(
        self,
        holidays: Optional[HolidaySet] = None,
        weekmask: Sequence[int] = DEFAULT_WEEKMASK,
    ) -> None:
        mask = [int(w) for w in weekmask]
        if len(mask) != 7:
            raise RangeError(f"Weekmask must have 7 entries (Mon..Sun); got {len(mask)}.")
        if any(w not in (0, 1) for w in mask):
            raise RangeError(f"Weekmask entries must be 0 or 1; got {mask}.")
        if not any(mask):
            raise RangeError("Weekmask has no working day; no business day can ever be reached.")

        self._weekmask: tuple[int, ...] = tuple(mask)
        self._holidays: HolidaySet = holidays if holidays is not None else HolidaySet()
        self._busdaycal = np.busdaycalendar(
            weekmask=list(self._weekmask),
            holidays=np.array(list(self._holidays), dtype="datetime64[D]"),
        )
        logger.debug("Compiled %r", self)

    @classmethod
    def from_config(cls, config: CalendarConfig) -> "BusinessCalendar":
        holidays = load_holidays(config.holidays_file or None)
        return cls(holidays, weekmask=config.weekmask)

    # ── derived calendars ────────────────────────────────────────────────

    def with_holiday(self, day: DateLike) -> "BusinessCalendar":
        return BusinessCalendar(self._holidays.union([day]), self._weekmask)

    def without_holiday(self, day: DateLike) -> "BusinessCalendar":
        return BusinessCalendar(self._holidays.difference([day]), self._weekmask)

    # ── holiday predicate ────────────────────────────────────────────────

    def is_holiday(self, day: DatesLike) -> bool | np.ndarray:
        return _unwrap(~np.is_busday(to_datetime64(day), busdaycal=self._busdaycal))

    def is_business_day(self, day: DatesLike) -> bool | np.ndarray:
        return _unwrap(np.is_busday(to_datetime64(day), busdaycal=self._busdaycal))

    # ── business-day shift ───────────────────────────────────────────────

    def date_add(self, start: DatesLike, num_days: int | np.ndarray) -> date | np.ndarray:
        """
        Add `num_days` business days to `start`.

        A `start` that is itself a holiday is first moved back to the previous
        business day; the count is taken from there, so ``date_add(d, 0)``
        returns that earlier business day rather than `d`.
        """
        return self._shift(start, num_days, forward=True)

    def date_sub(self, start: DatesLike, num_days: int | np.ndarray) -> date | np.ndarray:
        """
        Subtract `num_days` business days from `start`, after moving a holiday
        `start` back to the previous business day.
        """
        return self._shift(start, num_days, forward=False)

    def millis_add(self, msec: int, num_days: int) -> int:
        """
        `date_add` on an epoch-millisecond instant.  The date part is shifted
        in UTC and the time of day is kept.
        """
        return self._shift_millis(msec, num_days, forward=True)

    def millis_sub(self, msec: int, num_days: int) -> int:
        return self._shift_millis(msec, num_days, forward=False)

    def _shift_millis(self, msec: int, num_days: int, forward: bool) -> int:
        moment = millis_to_datetime(msec)
        day = self._shift(moment.date(), num_days, forward=forward)
        return datetime_to_millis(datetime.combine(day, moment.time()))

    def roll_back(self, day: DatesLike) -> date | np.ndarray:
        """Nearest business day on or before `day`."""
        return self._shift(day, 0, forward=False)

    def _shift(self, start: DatesLike, num_days, forward: bool) -> date | np.ndarray:
        n = np.asarray(num_days)
        if not np.issubdtype(n.dtype, np.integer):
            raise RangeError(f"Business-day count must be an integer; got {num_days!r}.")
        if np.any(n < 0):
            raise RangeError(f"Business-day count must be >= 0; got {num_days!r}.")
        offsets = n if forward else -n
        result = np.busday_offset(
            to_datetime64(start), offsets, roll="backward", busdaycal=self._busdaycal
        )
        return _unwrap(result)

    # ── inclusive ranges ─────────────────────────────────────────────────

    def dates_in_range(
        self, start: DateLike, end: DateLike, exclude_holidays: bool = False
    ) -> list[date]:
        """
        Every date from `start` to `end`, both included, ascending.  Empty when
        `start` is after `end`.  With `exclude_holidays` the holidays are
        dropped.
        """
        days = self._range_array(start, end)
        if exclude_holidays and days.size:
            days = days[np.is_busday(days, busdaycal=self._busdaycal)]
        return days.tolist()

    def iter_dates_in_range(
        self, start: DateLike, end: DateLike, exclude_holidays: bool = False
    ) -> Iterator[date]:
        current = to_datetime64(start)
        last = to_datetime64(end)
        while current <= last:
            if not exclude_holidays or np.is_busday(current, busdaycal=self._busdaycal):
                yield current.item()
            current = current + _ONE_DAY

    def _range_array(self, start: DateLike, end: DateLike) -> np.ndarray:
        lo = to_datetime64(start)
        hi = to_datetime64(end)
        if lo > hi:
            return np.array([], dtype="datetime64[D]")
        return np.arange(lo, hi + _ONE_DAY, dtype="datetime64[D]")

    # ── differences ──────────────────────────────────────────────────────

    def date_diff(self, date1: DateLike, date2: DateLike, *, exclude_holidays: bool) -> int:
        """
        Day steps from `date1` to `date2`: the size of the inclusive range
        between them minus one, negative when `date1` is the later date.
        With `exclude_holidays` only business days are counted.
        """
        d1 = to_datetime64(date1)
        d2 = to_datetime64(date2)
        lo, hi = (d1, d2) if d1 <= d2 else (d2, d1)
        if exclude_holidays:
            size = int(np.busday_count(lo, hi + _ONE_DAY, busdaycal=self._busdaycal))
        else:
            size = int((hi - lo) // _ONE_DAY) + 1
        steps = max(size - 1, 0)
        return -steps if d1 > d2 else steps

    def business_date_diff(self, date1: DateLike, date2: DateLike) -> int:
        return self.date_diff(date1, date2, exclude_holidays=True)

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def holidays(self) -> HolidaySet:
        return self._holidays

    @property
    def weekmask(self) -> tuple[int, ...]:
        return self._weekmask

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BusinessCalendar):
            return NotImplemented
        return self._weekmask == other._weekmask and self._holidays == other._holidays

    def __hash__(self) -> int:
        return hash((self._weekmask, self._holidays))

    def __repr__(self) -> str:
        return (
            f"BusinessCalendar(weekmask={''.join(map(str, self._weekmask))}, "
            f"holidays={len(self._holidays)}, "
            f"years={self._holidays.years})"
        )


def _unwrap(result: np.ndarray):
    if np.ndim(result) == 0:
        value = result.item() if isinstance(result, np.ndarray) else result
        if isinstance(value, np.generic):
            value = value.item()
        return value
    return result


@lru_cache(maxsize=1)
def default_calendar() -> BusinessCalendar:
    """Mon-Fri calendar over the packaged US market holiday table."""
    return BusinessCalendar(load_holidays())
