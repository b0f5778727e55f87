from __future__ import annotations

import re
from dataclasses import dataclass

from workdays.calendar._exceptions import FormatError, RangeError
from workdays.formats.dates import DateLike, parse_date

_QUARTER_RE = re.compile(r"(\d{4})Q([1-4])")

# Last (month, day) of each quarter.
_QUARTER_ENDS = ((3, 31), (6, 30), (9, 30), (12, 31))

_DAY_ABBREVS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


@dataclass(frozen=True, slots=True, order=True)
class Quarter:
    year: int
    number: int

    def __post_init__(self) -> None:
        if self.number not in (1, 2, 3, 4):
            raise RangeError(f"Quarter number must be 1..4; got {self.number}.")

    @classmethod
    def parse(cls, text: str) -> "Quarter":
        m = _QUARTER_RE.fullmatch(text.strip())
        if m is None:
            raise FormatError(f"Expected yyyyQn; got {text!r}.")
        return cls(int(m.group(1)), int(m.group(2)))

    def previous(self) -> "Quarter":
        if self.number == 1:
            return Quarter(self.year - 1, 4)
        return Quarter(self.year, self.number - 1)

    def __str__(self) -> str:
        return f"{self.year:04d}Q{self.number}"


def quarter_of(value: DateLike) -> Quarter:
    d = parse_date(value)
    for number, end in enumerate(_QUARTER_ENDS[:-1], start=1):
        if (d.month, d.day) <= end:
            return Quarter(d.year, number)
    return Quarter(d.year, len(_QUARTER_ENDS))


def previous_quarter(q: Quarter | str) -> Quarter:
    if isinstance(q, str):
        q = Quarter.parse(q)
    return q.previous()


def week_of_year(value: DateLike) -> str:
    """
    ISO-8601 week as ``yyyy-ww``.  The year is the ISO week-year, so
    2016-01-03 belongs to ``2015-53`` and 2019-12-30 to ``2020-01``.
    """
    iso_year, iso_week, _ = parse_date(value).isocalendar()
    return f"{iso_year:04d}-{iso_week:02d}"


def month_of_year(value: DateLike) -> str:
    d = parse_date(value)
    return f"{d.year:04d}-{d.month:02d}"


def day_of_week(value: DateLike) -> str:
    """Three-letter English weekday: Mon .. Sun."""
    return _DAY_ABBREVS[parse_date(value).weekday()]
