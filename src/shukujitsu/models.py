"""Data types for a year's holidays."""

from __future__ import annotations

import datetime
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import NamedTuple

from shukujitsu.errors import DuplicateHolidayError
from shukujitsu.locales import DEFAULT_LOCALE, translate

TIMEZONE = "Asia/Tokyo"

SUBSTITUTE_PREFIX = "substitute:"


class Holiday(NamedTuple):
    """A single public holiday on a given date."""

    key: str
    names: Mapping[str, str]
    date: datetime.date

    def name(self, locale: str = DEFAULT_LOCALE) -> str:
        """Display name in *locale*, falling back to English, then the key."""
        return translate(self.names, locale, self.key)

    @property
    def weekday(self) -> int:
        return self.date.weekday()

    @property
    def is_substitute(self) -> bool:
        return self.key.startswith(SUBSTITUTE_PREFIX)


class YearContext(NamedTuple):
    """Read-only input handed to every rule."""

    year: int
    timezone: str = TIMEZONE


class HolidaySet:
    """Immutable, ordered holidays of one year, keyed by holiday key.

    Iteration follows the order in which the rules produced the holidays;
    use :meth:`sorted_by_date` for calendar order.
    """

    def __init__(self, year: int, holidays: Mapping[str, Holiday], timezone: str = TIMEZONE):
        self.year = year
        self.timezone = timezone
        self._holidays = MappingProxyType(dict(holidays))
        self._by_date: dict[datetime.date, list[Holiday]] = {}
        for h in self._holidays.values():
            self._by_date.setdefault(h.date, []).append(h)

    @property
    def holidays(self) -> Mapping[str, Holiday]:
        """Key -> ``Holiday`` mapping."""
        return self._holidays

    def dates(self) -> dict[str, datetime.date]:
        """Key -> date mapping."""
        return {key: h.date for key, h in self._holidays.items()}

    def names(self, locale: str = DEFAULT_LOCALE) -> dict[str, str]:
        """Key -> display name in *locale*."""
        return {key: h.name(locale) for key, h in self._holidays.items()}

    def get(self, key: str) -> Holiday | None:
        return self._holidays.get(key)

    def on(self, date: datetime.date) -> list[Holiday]:
        """Holidays falling on *date* (empty list when none)."""
        return list(self._by_date.get(date, ()))

    def sorted_by_date(self) -> list[Holiday]:
        # sorted() is stable, so same-date holidays keep rule order
        return sorted(self._holidays.values(), key=lambda h: h.date)

    def __iter__(self) -> Iterator[Holiday]:
        return iter(self._holidays.values())

    def __len__(self) -> int:
        return len(self._holidays)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, datetime.date):
            return item in self._by_date
        return item in self._holidays

    def __repr__(self) -> str:
        return f"HolidaySet(year={self.year}, holidays={list(self._holidays)!r})"


class HolidaySetBuilder:
    """Accumulates holidays for one computation, then freezes them.

    Keeps a set of taken dates alongside the holidays so collision checks
    during the substitution pass are constant time.
    """

    def __init__(self, context: YearContext):
        self.context = context
        self._holidays: dict[str, Holiday] = {}
        self._taken: set[datetime.date] = set()

    def add(self, holiday: Holiday) -> None:
        if holiday.key in self._holidays:
            msg = f"Holiday {holiday.key!r} already added for {self.context.year}"
            raise DuplicateHolidayError(msg)
        self._holidays[holiday.key] = holiday
        self._taken.add(holiday.date)

    def snapshot(self) -> tuple[Holiday, ...]:
        """The holidays added so far, in insertion order."""
        return tuple(self._holidays.values())

    def taken_dates(self) -> frozenset[datetime.date]:
        """Frozen copy of the dates added so far."""
        return frozenset(self._taken)

    def is_taken(self, date: datetime.date) -> bool:
        """Whether *date* is already a holiday, including ones added just now."""
        return date in self._taken

    def build(self) -> HolidaySet:
        return HolidaySet(self.context.year, self._holidays, self.context.timezone)
