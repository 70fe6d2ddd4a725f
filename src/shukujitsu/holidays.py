"""Japanese public holidays for a given year.

:func:`japan_holidays` evaluates the rule table in :mod:`shukujitsu.rules`
in a fixed order, then adds substitute holidays for those falling on a
Sunday.  The remaining functions answer date questions on top of it.
"""

from __future__ import annotations

import datetime
import logging
from functools import cache

from shukujitsu.errors import InvalidInputError
from shukujitsu.locales import DEFAULT_LOCALE, validate_locale
from shukujitsu.models import Holiday, HolidaySet, HolidaySetBuilder, YearContext
from shukujitsu.rules import JAPAN_RULES, apply_substitutions

logger = logging.getLogger(__name__)

MIN_YEAR = 1000
MAX_YEAR = 9999


def _validate_year(year: object) -> int:
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidInputError(f"Year must be an integer, got {year!r}")
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidInputError(f"Year {year} is outside {MIN_YEAR}-{MAX_YEAR}")
    return year


@cache
def _compute(year: int) -> HolidaySet:
    builder = HolidaySetBuilder(YearContext(year))
    for rule in JAPAN_RULES:
        holiday = rule.evaluate(builder.context)
        if holiday is not None:
            builder.add(holiday)
    apply_substitutions(builder)
    result = builder.build()
    logger.debug("Computed %d holidays for %d", len(result), year)
    return result


def japan_holidays(year: int) -> HolidaySet:
    """All Japanese public holidays of *year*, substitute holidays included.

    Raises ``InvalidInputError`` if *year* is not an integer in 1000-9999.
    Years before 1948 have no holidays.
    """
    return _compute(_validate_year(year))


def get_holidays(year: int, locale: str = DEFAULT_LOCALE) -> list[tuple[datetime.date, str]]:
    """Return ``(date, name)`` pairs for *year*, sorted by date."""
    validate_locale(locale)
    return [(h.date, h.name(locale)) for h in japan_holidays(year).sorted_by_date()]


# ---------------------------------------------------------------------------
# Date queries
# ---------------------------------------------------------------------------


def is_holiday(target_date: datetime.date) -> bool:
    """Check if a date is a Japanese public holiday."""
    return target_date in japan_holidays(target_date.year)


def holiday_name(target_date: datetime.date, locale: str = DEFAULT_LOCALE) -> str | None:
    """Get the name of the holiday on a date, or None if not a holiday."""
    validate_locale(locale)
    found = japan_holidays(target_date.year).on(target_date)
    if not found:
        return None
    return found[0].name(locale)


def is_working_day(target_date: datetime.date) -> bool:
    """
    Check if a date is a working day.

    A working day is:
    - Not a weekend (Saturday/Sunday)
    - Not a Japanese public holiday
    """
    # 5 = Saturday, 6 = Sunday
    if target_date.weekday() in (5, 6):
        return False
    return not is_holiday(target_date)


def holidays_between(
    start: datetime.date, end: datetime.date, *, inclusive: bool = True
) -> list[Holiday]:
    """Holidays from *start* to *end*, sorted by date.

    With ``inclusive=False`` the boundary dates themselves are left out.
    """
    if start > end:
        raise InvalidInputError(f"Start date {start} is after end date {end}")

    found: list[Holiday] = []
    for year in range(start.year, end.year + 1):
        for h in japan_holidays(year).sorted_by_date():
            if inclusive and start <= h.date <= end:
                found.append(h)
            elif not inclusive and start < h.date < end:
                found.append(h)
    return found


def next_holiday(target_date: datetime.date) -> Holiday | None:
    """The first holiday strictly after *target_date*, if any."""
    for year in range(target_date.year, MAX_YEAR + 1):
        for h in japan_holidays(year).sorted_by_date():
            if h.date > target_date:
                return h
    return None


def previous_holiday(target_date: datetime.date) -> Holiday | None:
    """The last holiday strictly before *target_date*, if any."""
    for year in range(target_date.year, MIN_YEAR - 1, -1):
        for h in reversed(japan_holidays(year).sorted_by_date()):
            if h.date < target_date:
                return h
    return None
