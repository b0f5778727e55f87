from __future__ import annotations

import logging
from datetime import date
from importlib import resources
from pathlib import Path
from typing import Any, Iterable, Iterator, Mapping

import yaml

from ._exceptions import FormatError
from workdays.formats.dates import DateLike, parse_date

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "us_market.yaml"


class HolidaySet:
    """
    Immutable table of holiday dates, optionally named.

    Weekends are not part of the table; the calendar's weekmask covers them.
    """

    __slots__ = ("_dates", "_names", "_label")

    def __init__(
        self,
        dates: Iterable[DateLike] = (),
        names: Mapping[DateLike, str] | None = None,
        label: str = "",
    ) -> None:
        parsed = {parse_date(d) for d in dates}
        named: dict[date, str] = {}
        for d, name in (names or {}).items():
            day = parse_date(d)
            parsed.add(day)
            named[day] = str(name)
        self._dates: frozenset[date] = frozenset(parsed)
        self._names: dict[date, str] = named
        self._label = label

    # ── construction from configuration data ─────────────────────────────

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "HolidaySet":
        """
        Build from the parsed form of a holiday file::

            name: us-market
            holidays:
              2019:
                - {date: 2019-01-01, name: New Year's Day}
                - 2019-01-21
        """
        if not isinstance(raw, Mapping):
            raise FormatError("Holiday table must be a mapping.")
        by_year = raw.get("holidays") or {}
        if not isinstance(by_year, Mapping):
            raise FormatError("'holidays' must map a year to a list of dates.")

        dates: list[date] = []
        names: dict[date, str] = {}
        for year, entries in by_year.items():
            try:
                year_number = int(year)
            except (TypeError, ValueError) as exc:
                raise FormatError(f"Holiday year must be a number; got {year!r}.") from exc
            if entries is None:
                continue
            if not isinstance(entries, list):
                raise FormatError(f"Holidays for {year} must be a list; got {entries!r}.")
            for entry in entries:
                if isinstance(entry, Mapping):
                    if "date" not in entry:
                        raise FormatError(f"Holiday entry without a date: {entry!r}.")
                    day = _entry_date(entry["date"])
                    if entry.get("name"):
                        names[day] = str(entry["name"])
                else:
                    day = _entry_date(entry)
                if day.year != year_number:
                    raise FormatError(f"Holiday {day} listed under year {year}.")
                dates.append(day)
        return cls(dates, names, label=str(raw.get("name", "")))

    # ── set protocol ─────────────────────────────────────────────────────

    def __contains__(self, value: object) -> bool:
        try:
            return parse_date(value) in self._dates  # type: ignore[arg-type]
        except (FormatError, TypeError):
            return False

    def __iter__(self) -> Iterator[date]:
        return iter(sorted(self._dates))

    def __len__(self) -> int:
        return len(self._dates)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HolidaySet):
            return NotImplemented
        return self._dates == other._dates

    def __hash__(self) -> int:
        return hash(self._dates)

    # ── derived sets ─────────────────────────────────────────────────────

    def union(self, other: Iterable[DateLike]) -> "HolidaySet":
        names = dict(self._names)
        if isinstance(other, HolidaySet):
            names.update(other._names)
        return HolidaySet(list(self._dates) + list(other), names, self._label)

    def difference(self, other: Iterable[DateLike]) -> "HolidaySet":
        removed = {parse_date(d) for d in other}
        kept = self._dates - removed
        return HolidaySet(
            kept, {d: n for d, n in self._names.items() if d in kept}, self._label
        )

    # ── properties / repr ────────────────────────────────────────────────

    def name_of(self, value: DateLike) -> str | None:
        return self._names.get(parse_date(value))

    @property
    def label(self) -> str:
        return self._label

    @property
    def years(self) -> list[int]:
        return sorted({d.year for d in self._dates})

    def __repr__(self) -> str:
        return f"HolidaySet(label={self._label!r}, holidays={len(self)}, years={self.years})"


def _entry_date(value: Any) -> date:
    try:
        return parse_date(value)
    except TypeError as exc:
        raise FormatError(f"Holiday entry is not a date: {value!r}.") from exc


def load_holidays(path: str | Path | None = None) -> HolidaySet:
    """
    Load a holiday table from a YAML file.  Without a path the packaged
    US market table is used.
    """
    if path is None:
        source = resources.files("workdays.calendar").joinpath("data").joinpath(DEFAULT_TABLE)
        text = source.read_text(encoding="utf-8")
        origin = f"package:{DEFAULT_TABLE}"
    else:
        table_file = Path(path)
        if not table_file.exists():
            raise FileNotFoundError(f"Holiday table not found: {path}")
        text = table_file.read_text(encoding="utf-8")
        origin = str(table_file)

    try:
        raw = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise FormatError(f"Holiday table {origin} is not valid YAML: {exc}") from exc

    holidays = HolidaySet.from_mapping(raw)
    logger.info("Loaded %d holidays (%s) from %s", len(holidays), holidays.label, origin)
    return holidays
