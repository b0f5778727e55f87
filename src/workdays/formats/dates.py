from __future__ import annotations

import re
from datetime import date, datetime
from typing import Union

import numpy as np

from workdays.calendar._exceptions import FormatError

DATE_FMT = "%Y-%m-%d"

DateLike = Union[str, date, datetime, np.datetime64]

_DATE_RE = re.compile(r"(\d{4})[-/](\d{2})[-/](\d{2})")
_SLASHED_RE = re.compile(r"[0-9]{4}/[0-9]{2}/[0-9]{2}")


def is_date_format(s: str) -> bool:
    """True if `s` is written as yyyy/MM/dd. Only the syntax is checked."""
    return _SLASHED_RE.fullmatch(s) is not None


def parse_date(value: DateLike) -> date:
    """
    Convert a date-like value to a `datetime.date`.

    Strings must be ``yyyy-MM-dd`` or ``yyyy/MM/dd``.  A datetime keeps only
    its date part.  Anything that does not name a real calendar day raises
    FormatError.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, np.datetime64):
        if np.isnat(value):
            raise FormatError("NaT is not a calendar date.")
        return value.astype("datetime64[D]").item()
    if isinstance(value, str):
        m = _DATE_RE.fullmatch(value.strip())
        if m is None:
            raise FormatError(f"Expected yyyy-MM-dd or yyyy/MM/dd; got {value!r}.")
        year, month, day = (int(g) for g in m.groups())
        try:
            return date(year, month, day)
        except ValueError as exc:
            raise FormatError(f"Invalid calendar date {value!r}: {exc}.") from exc
    raise TypeError(f"Unsupported type for date: {type(value)}")


def format_date(value: DateLike) -> str:
    return parse_date(value).strftime(DATE_FMT)


def normalize_date(s: str) -> str:
    """Rewrite a yyyy/MM/dd or yyyy-MM-dd string in canonical yyyy-MM-dd form."""
    return format_date(s)


def convert_date_format(source_format: str, s: str) -> str:
    """
    Parse `s` with a strftime-style `source_format` and return it as yyyy-MM-dd.

    >>> convert_date_format("%b %d %Y", "Jan 01 2019")
    '2019-01-01'
    """
    try:
        parsed = datetime.strptime(s, source_format)
    except ValueError as exc:
        raise FormatError(f"{s!r} does not match format {source_format!r}.") from exc
    return parsed.strftime(DATE_FMT)


def to_datetime64(value: DateLike | np.ndarray | list) -> np.datetime64 | np.ndarray:
    """Scalar or array of date-likes as day-resolution datetime64."""
    if isinstance(value, (np.ndarray, list, tuple)):
        arr = np.asarray(value)
        if np.issubdtype(arr.dtype, np.datetime64):
            return arr.astype("datetime64[D]")
        flat = [np.datetime64(parse_date(v), "D") for v in arr.ravel().tolist()]
        return np.array(flat, dtype="datetime64[D]").reshape(arr.shape)
    return np.datetime64(parse_date(value), "D")
