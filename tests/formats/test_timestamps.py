from __future__ import annotations

from datetime import datetime, time

import pytest

from workdays.calendar import FormatError
from workdays.formats import (
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

NEW_YEAR_2019 = 1_546_300_800_000                      # 2019-01-01 00:00:00 UTC
AFTERNOON = NEW_YEAR_2019 + (13 * 3600 + 5 * 60 + 9) * 1000 + 5   # 13:05:09.005


# ── Text ──────────────────────────────────────────────────────────────────────

class TestParseTimestamp:

    def test_with_millis(self) -> None:
        assert parse_timestamp("2019-01-01 13:05:09.5") == datetime(2019, 1, 1, 13, 5, 9, 5000)
        assert parse_timestamp("2019-01-01 13:05:09.120") == datetime(2019, 1, 1, 13, 5, 9, 120000)

    def test_without_millis(self) -> None:
        assert parse_timestamp("2019-01-01 13:05:09") == datetime(2019, 1, 1, 13, 5, 9)

    def test_slashed_date_part(self) -> None:
        assert parse_timestamp("2019/01/01 00:00:00.0") == datetime(2019, 1, 1)

    @pytest.mark.parametrize(
        "text",
        ["2019-01-01", "2019-01-01T13:05:09", "2019-01-01 13:05", "2019-01-01 13:05:09.1234"],
    )
    def test_malformed_raises(self, text: str) -> None:
        with pytest.raises(FormatError):
            parse_timestamp(text)

    def test_impossible_time_raises(self) -> None:
        with pytest.raises(FormatError):
            parse_timestamp("2019-01-01 25:00:00")

    def test_parse_date_time(self) -> None:
        assert parse_date_time("2019/07/04", "09:30:00") == datetime(2019, 7, 4, 9, 30)

    def test_parse_date_time_bad_time_raises(self) -> None:
        with pytest.raises(FormatError):
            parse_date_time("2019-07-04", "9h30")
        with pytest.raises(FormatError):
            parse_date_time("2019-07-04", "09:61:00")


class TestFormatTimestamp:

    def test_millis_unpadded(self) -> None:
        assert format_timestamp(datetime(2019, 1, 1, 13, 5, 9, 5000)) == "2019-01-01 13:05:09.5"
        assert format_timestamp(datetime(2019, 1, 1, 13, 5, 9, 120000)) == "2019-01-01 13:05:09.120"

    def test_without_millis(self) -> None:
        dt = datetime(2019, 1, 1, 13, 5, 9, 5000)
        assert format_timestamp(dt, millis=False) == "2019-01-01 13:05:09"

    def test_round_trip(self) -> None:
        for text in ("2019-12-31 23:59:59.999", "2019-06-01 00:00:00.0", "2019-06-01 08:15:00.42"):
            assert format_timestamp(parse_timestamp(text)) == text


# ── Epoch milliseconds ────────────────────────────────────────────────────────

class TestEpochMillis:

    def test_millis_to_datetime(self) -> None:
        assert millis_to_datetime(NEW_YEAR_2019) == datetime(2019, 1, 1)
        assert millis_to_datetime(AFTERNOON) == datetime(2019, 1, 1, 13, 5, 9, 5000)

    def test_datetime_to_millis(self) -> None:
        assert datetime_to_millis(datetime(1970, 1, 1)) == 0
        assert datetime_to_millis(datetime(2019, 1, 1, 13, 5, 9, 5000)) == AFTERNOON

    def test_before_epoch(self) -> None:
        assert datetime_to_millis(datetime(1969, 12, 31, 23, 59, 59)) == -1000
        assert millis_to_datetime(-1000) == datetime(1969, 12, 31, 23, 59, 59)

    def test_date_str(self) -> None:
        assert millis_to_date_str(AFTERNOON) == "2019-01-01"
        assert date_str_to_millis("2019/01/01") == NEW_YEAR_2019

    def test_timestamp(self) -> None:
        assert millis_to_timestamp(AFTERNOON) == "2019-01-01 13:05:09.5"
        assert millis_to_timestamp(AFTERNOON, millis=False) == "2019-01-01 13:05:09"
        assert timestamp_to_millis("2019-01-01 13:05:09.5") == AFTERNOON

    def test_time_of_day(self) -> None:
        assert millis_to_time(AFTERNOON) == "13:05"
        assert millis_to_time_of_day(AFTERNOON) == time(13, 5, 9)

    def test_hhmmss_packing(self) -> None:
        assert millis_to_hhmmss(AFTERNOON) == 130509
        assert millis_to_hhmmss(NEW_YEAR_2019) == 0
        assert millis_to_hhmmss(NEW_YEAR_2019 + 9 * 1000) == 9
        assert millis_to_hhmmss(NEW_YEAR_2019 - 1000) == 235959

    def test_bad_text_raises(self) -> None:
        with pytest.raises(FormatError):
            date_str_to_millis("01/01/2019")
        with pytest.raises(FormatError):
            timestamp_to_millis("2019-01-01")
