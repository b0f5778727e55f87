"""
workdays.formats
~~~~~~~~~~~~~~~~

Parsing and formatting of dates (``yyyy-MM-dd``, ``yyyy/MM/dd`` accepted on
input) and timestamps (``yyyy-MM-dd HH:mm:ss[.S]``), plus conversion to and
from epoch milliseconds.  Malformed text raises FormatError.
"""

from __future__ import annotations

from workdays.formats.dates import (
    DATE_FMT,
    DateLike,
    convert_date_format,
    format_date,
    is_date_format,
    normalize_date,
    parse_date,
    to_datetime64,
)
from workdays.formats.timestamps import (
    date_str_to_millis,
    datetime_to_millis,
    format_timestamp,
    millis_to_date_str,
    millis_to_datetime,
    millis_to_hhmmss,
    millis_to_time,
    millis_to_time_of_day,
    millis_to_timestamp,
    parse_date_time,
    parse_timestamp,
    timestamp_to_millis,
)

__all__ = [
    "DATE_FMT",
    "DateLike",
    "convert_date_format",
    "date_str_to_millis",
    "datetime_to_millis",
    "format_date",
    "format_timestamp",
    "is_date_format",
    "millis_to_date_str",
    "millis_to_datetime",
    "millis_to_hhmmss",
    "millis_to_time",
    "millis_to_time_of_day",
    "millis_to_timestamp",
    "normalize_date",
    "parse_date",
    "parse_date_time",
    "parse_timestamp",
    "timestamp_to_millis",
    "to_datetime64",
]
