"""
Timestamp text and epoch-millisecond conversions.

Timestamps are naive ``datetime`` values.  Epoch milliseconds are read and
written as UTC wall-clock time; no other timezone is ever applied.

The sub-second field ``S`` is a millisecond count written without zero
padding, so 5 ms renders as ``.5`` and 120 ms as ``.120``.  Parsing reads the
digits back as the same integer count.
"""

from __future__ import annotations

import re
from datetime import datetime, time, timedelta

from workdays.calendar._exceptions import FormatError
from workdays.formats.dates import DATE_FMT, parse_date

SECONDS_FMT = "%Y-%m-%d %H:%M:%S"

_TIMESTAMP_RE = re.compile(
    r"(\d{4})[-/](\d{2})[-/](\d{2}) (\d{2}):(\d{2}):(\d{2})(?:\.(\d{1,3}))?"
)
_TIME_RE = re.compile(r"(\d{1,2}):(\d{1,2}):(\d{1,2})")

_EPOCH = datetime(1970, 1, 1)


def parse_timestamp(s: str) -> datetime:
    m = _TIMESTAMP_RE.fullmatch(s.strip())
    if m is None:
        raise FormatError(f"Expected yyyy-MM-dd HH:mm:ss[.S]; got {s!r}.")
    year, month, day, hour, minute, second = (int(g) for g in m.groups()[:6])
    millis = int(m.group(7)) if m.group(7) else 0
    try:
        return datetime(year, month, day, hour, minute, second, millis * 1000)
    except ValueError as exc:
        raise FormatError(f"Invalid timestamp {s!r}: {exc}.") from exc


def parse_date_time(date_str: str, time_str: str) -> datetime:
    """Combine a yyyy-MM-dd date and an HH:mm:ss time into one datetime."""
    d = parse_date(date_str)
    m = _TIME_RE.fullmatch(time_str.strip())
    if m is None:
        raise FormatError(f"Expected HH:mm:ss; got {time_str!r}.")
    try:
        t = time(*(int(g) for g in m.groups()))
    except ValueError as exc:
        raise FormatError(f"Invalid time of day {time_str!r}: {exc}.") from exc
    return datetime.combine(d, t)


def format_timestamp(dt: datetime, millis: bool = True) -> str:
    text = dt.strftime(SECONDS_FMT)
    if millis:
        text += f".{dt.microsecond // 1000}"
    return text


# ── epoch milliseconds ───────────────────────────────────────────────────

def millis_to_datetime(msec: int) -> datetime:
    return _EPOCH + timedelta(milliseconds=msec)


def datetime_to_millis(dt: datetime) -> int:
    delta = dt - _EPOCH
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


def millis_to_date_str(msec: int) -> str:
    return millis_to_datetime(msec).strftime(DATE_FMT)


def millis_to_timestamp(msec: int, millis: bool = True) -> str:
    return format_timestamp(millis_to_datetime(msec), millis=millis)


def millis_to_time(msec: int) -> str:
    """HH:mm for the given instant."""
    return millis_to_datetime(msec).strftime("%H:%M")


def millis_to_time_of_day(msec: int) -> time:
    return millis_to_datetime(msec).time().replace(microsecond=0)


def millis_to_hhmmss(msec: int) -> int:
    """
    Pack the time of day into a plain integer: 13:05:09 -> 130509.

    Leading zeros are lost, so the result lies in [0, 235959].
    """
    t = millis_to_time_of_day(msec)
    return t.hour * 10_000 + t.minute * 100 + t.second


def date_str_to_millis(s: str) -> int:
    return datetime_to_millis(datetime.combine(parse_date(s), time()))


def timestamp_to_millis(s: str) -> int:
    return datetime_to_millis(parse_timestamp(s))
