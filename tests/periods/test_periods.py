from __future__ import annotations

from datetime import date

import pytest

from workdays.calendar import FormatError, RangeError
from workdays.periods import (
    Quarter,
    day_of_week,
    month_of_year,
    previous_quarter,
    quarter_of,
    week_of_year,
)


# ── Quarters ──────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "day, expected",
    [
        ("2019-01-01", "2019Q1"),
        ("2019-03-31", "2019Q1"),
        ("2019-04-01", "2019Q2"),
        ("2019-06-30", "2019Q2"),
        ("2019-07-01", "2019Q3"),
        ("2019-09-04", "2019Q3"),
        ("2019-09-30", "2019Q3"),
        ("2019-10-01", "2019Q4"),
        ("2019-12-31", "2019Q4"),
    ],
)
def test_quarter_of_boundaries(day: str, expected: str) -> None:
    assert str(quarter_of(day)) == expected


def test_quarter_of_accepts_date() -> None:
    assert quarter_of(date(2020, 2, 29)) == Quarter(2020, 1)


def test_previous_quarter_wraps_year() -> None:
    assert previous_quarter("2020Q1") == Quarter(2019, 4)
    assert str(previous_quarter("2020Q1")) == "2019Q4"


def test_previous_quarter_within_year() -> None:
    assert previous_quarter(Quarter(2019, 3)) == Quarter(2019, 2)
    assert Quarter(2019, 2).previous().previous() == Quarter(2018, 4)


def test_quarter_parse_and_str() -> None:
    q = Quarter.parse("2019Q3")
    assert (q.year, q.number) == (2019, 3)
    assert str(q) == "2019Q3"


@pytest.mark.parametrize("text", ["2019Q5", "2019Q0", "2019-Q1", "19Q1", "2019q1", ""])
def test_quarter_parse_malformed_raises(text: str) -> None:
    with pytest.raises(FormatError):
        Quarter.parse(text)


def test_quarter_number_validated() -> None:
    with pytest.raises(RangeError):
        Quarter(2019, 5)
    with pytest.raises(RangeError):
        Quarter(2019, 0)


def test_quarters_order() -> None:
    assert Quarter(2019, 4) < Quarter(2020, 1)
    assert sorted([Quarter(2020, 1), Quarter(2019, 2)]) == [Quarter(2019, 2), Quarter(2020, 1)]


# ── Weeks, months, weekdays ───────────────────────────────────────────────────

@pytest.mark.parametrize(
    "day, expected",
    [
        ("2019-01-03", "2019-01"),
        ("2016-01-03", "2015-53"),
        ("2019-12-30", "2020-01"),
        ("2019-06-15", "2019-24"),
    ],
)
def test_week_of_year_is_iso(day: str, expected: str) -> None:
    assert week_of_year(day) == expected


def test_month_of_year_uses_calendar_year() -> None:
    assert month_of_year("2019-01-03") == "2019-01"
    assert month_of_year("2019/12/30") == "2019-12"


@pytest.mark.parametrize(
    "day, expected",
    [
        ("2019-01-01", "Tue"),
        ("2019-09-04", "Wed"),
        ("2019-06-01", "Sat"),
        ("2019-06-02", "Sun"),
        ("2019-06-03", "Mon"),
    ],
)
def test_day_of_week(day: str, expected: str) -> None:
    assert day_of_week(day) == expected


def test_bucketing_rejects_bad_dates() -> None:
    with pytest.raises(FormatError):
        quarter_of("2019-02-30")
    with pytest.raises(FormatError):
        week_of_year("June 1")
