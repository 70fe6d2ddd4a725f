"""Rules that place Japanese public holidays on the calendar.

Every rule is evaluated against a :class:`~shukujitsu.models.YearContext`
and returns the holiday for that year, or ``None`` when the holiday did not
exist (yet) in that year.  :func:`apply_substitutions` runs last and adds the
substitute ("furikae") holidays for holidays falling on a Sunday.
"""

from __future__ import annotations

import datetime
import logging
import math
from collections.abc import Mapping
from typing import NamedTuple

from shukujitsu.locales import observed_names, translations
from shukujitsu.models import SUBSTITUTE_PREFIX, Holiday, HolidaySetBuilder, YearContext

logger = logging.getLogger(__name__)

MONDAY = 0
SUNDAY = 6

VERNAL = "vernal"
AUTUMNAL = "autumnal"

EQUINOX_GRADIENT = 0.242194

# (first year, last year, vernal param, autumnal param, leap-cycle base year)
EQUINOX_ERAS: tuple[tuple[int, int, float, float, int], ...] = (
    (1948, 1979, 20.8357, 23.2588, 1983),
    (1980, 2099, 20.8431, 23.2488, 1980),
    (2100, 2150, 21.8510, 24.2488, 1980),
)

_EQUINOX_MONTHS = {VERNAL: 3, AUTUMNAL: 9}

# Substitute holidays were introduced on this date; from 2007 the substitute
# moves past any run of consecutive holidays.
SUBSTITUTES_SINCE = datetime.date(1973, 4, 12)
CONSECUTIVE_SUBSTITUTES_SINCE = 2007

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def nth_weekday(year: int, month: int, weekday: int, n: int) -> datetime.date | None:
    """Return the *n*-th occurrence of *weekday* in *month* of *year*.

    *weekday* follows ``datetime`` convention: 0 = Monday … 6 = Sunday.
    *n* is 1-based (1 = first, 2 = second, …).  Returns ``None`` when the
    month has fewer than *n* such weekdays.
    """
    first = datetime.date(year, month, 1)
    # Days until the first target weekday
    delta = (weekday - first.weekday()) % 7
    first_occurrence = first + datetime.timedelta(days=delta)
    result = first_occurrence + datetime.timedelta(weeks=n - 1)
    if result.month != month:
        return None
    return result


def equinox_day(year: int, season: str) -> int | None:
    """Day of month of the vernal (March) or autumnal (September) equinox.

    Uses the approximation formula, which is only defined for 1948-2150;
    other years return ``None``.
    """
    if season not in _EQUINOX_MONTHS:
        raise ValueError(f"Unknown equinox season {season!r}")
    for first, last, vernal, autumnal, base in EQUINOX_ERAS:
        if first <= year <= last:
            param = vernal if season == VERNAL else autumnal
            return math.floor(param + EQUINOX_GRADIENT * (year - 1980) - (year - base) // 4)
    return None


# ---------------------------------------------------------------------------
# Rule types
# ---------------------------------------------------------------------------


class FixedDateRule(NamedTuple):
    """Holiday on the same month/day every year from *since* (until *until*)."""

    key: str
    names: Mapping[str, str]
    month: int
    day: int
    since: int
    until: int | None = None

    def evaluate(self, context: YearContext) -> Holiday | None:
        year = context.year
        if year < self.since or (self.until is not None and year >= self.until):
            return None
        return Holiday(self.key, self.names, datetime.date(year, self.month, self.day))


class NthWeekdayRule(NamedTuple):
    """Holiday on the *n*-th *weekday* of *month* from *cutover* on.

    Between *fallback_since* and *cutover* the holiday sat on the fixed date
    *month*/*fallback_day*.
    """

    key: str
    names: Mapping[str, str]
    month: int
    weekday: int
    n: int
    cutover: int
    fallback_since: int
    fallback_day: int

    def evaluate(self, context: YearContext) -> Holiday | None:
        year = context.year
        if year >= self.cutover:
            date = nth_weekday(year, self.month, self.weekday, self.n)
        elif year >= self.fallback_since:
            date = datetime.date(year, self.month, self.fallback_day)
        else:
            date = None
        if date is None:
            return None
        return Holiday(self.key, self.names, date)


class EquinoxRule(NamedTuple):
    """Holiday on the day of the vernal or autumnal equinox."""

    key: str
    names: Mapping[str, str]
    season: str

    def evaluate(self, context: YearContext) -> Holiday | None:
        day = equinox_day(context.year, self.season)
        if day is None:
            return None
        month = _EQUINOX_MONTHS[self.season]
        return Holiday(self.key, self.names, datetime.date(context.year, month, day))


Rule = FixedDateRule | NthWeekdayRule | EquinoxRule

# ---------------------------------------------------------------------------
# Japanese rule table (evaluation order matters)
# ---------------------------------------------------------------------------

_GREENERY_DAY = translations(en_US="Greenery Day", ja_JP="みどりの日")

JAPAN_RULES: tuple[Rule, ...] = (
    FixedDateRule("new_years_day", translations(en_US="New Year's Day", ja_JP="元日"), 1, 1, 1948),
    FixedDateRule(
        "national_foundation_day",
        translations(en_US="National Foundation Day", ja_JP="建国記念の日"),
        2,
        11,
        1966,
    ),
    FixedDateRule("showa_day", translations(en_US="Showa Day", ja_JP="昭和の日"), 4, 29, 2007),
    FixedDateRule(
        "constitution_memorial_day",
        translations(en_US="Constitution Memorial Day", ja_JP="憲法記念日"),
        5,
        3,
        1948,
    ),
    FixedDateRule("childrens_day", translations(en_US="Children's Day", ja_JP="こどもの日"), 5, 5, 1948),
    FixedDateRule("mountain_day", translations(en_US="Mountain Day", ja_JP="山の日"), 8, 11, 2016),
    FixedDateRule("culture_day", translations(en_US="Culture Day", ja_JP="文化の日"), 11, 3, 1948),
    FixedDateRule(
        "labor_thanksgiving_day",
        translations(en_US="Labor Thanksgiving Day", ja_JP="勤労感謝の日"),
        11,
        23,
        1948,
    ),
    # Kept at 1948 although December 23 only became the date in 1989.
    FixedDateRule(
        "emperors_birthday", translations(en_US="Emperor's Birthday", ja_JP="天皇誕生日"), 12, 23, 1948
    ),
    EquinoxRule("vernal_equinox_day", translations(en_US="Vernal Equinox Day", ja_JP="春分の日"), VERNAL),
    NthWeekdayRule(
        "coming_of_age_day",
        translations(en_US="Coming of Age Day", ja_JP="成人の日"),
        month=1,
        weekday=MONDAY,
        n=2,
        cutover=2000,
        fallback_since=1948,
        fallback_day=15,
    ),
    FixedDateRule("greenery_day", _GREENERY_DAY, 4, 29, 1989, until=2007),
    FixedDateRule("greenery_day", _GREENERY_DAY, 5, 4, 2007),
    NthWeekdayRule(
        "marine_day",
        translations(en_US="Marine Day", ja_JP="海の日"),
        month=7,
        weekday=MONDAY,
        n=3,
        cutover=2003,
        fallback_since=1996,
        fallback_day=20,
    ),
    NthWeekdayRule(
        "respect_for_the_aged_day",
        translations(en_US="Respect for the Aged Day", ja_JP="敬老の日"),
        month=9,
        weekday=MONDAY,
        n=3,
        cutover=2003,
        fallback_since=1996,
        fallback_day=15,
    ),
    # Fixed-date era gated at 1996, not 1966.
    NthWeekdayRule(
        "health_and_sports_day",
        translations(en_US="Health and Sports Day", ja_JP="体育の日"),
        month=10,
        weekday=MONDAY,
        n=2,
        cutover=2000,
        fallback_since=1996,
        fallback_day=10,
    ),
    EquinoxRule(
        "autumnal_equinox_day", translations(en_US="Autumnal Equinox Day", ja_JP="秋分の日"), AUTUMNAL
    ),
)

NOT_SUBSTITUTED: frozenset[str] = frozenset({"vernal_equinox_day", "autumnal_equinox_day"})

# ---------------------------------------------------------------------------
# Substitute holidays
# ---------------------------------------------------------------------------


def substitute_for(original: Holiday, date: datetime.date) -> Holiday:
    """The holiday observed on *date* in place of *original*."""
    return Holiday(SUBSTITUTE_PREFIX + original.key, observed_names(original.names), date)


def apply_substitutions(builder: HolidaySetBuilder) -> None:
    """Add a substitute holiday for every holiday that falls on a Sunday.

    From 2007 the substitute goes to the first day that is not already a
    holiday, substitutes added earlier in this pass included.  From
    1973-04-12 until then only the following Monday qualifies, and no
    substitute is added when that Monday is itself a holiday.
    """
    year = builder.context.year
    original_dates = builder.taken_dates()

    for holiday in builder.snapshot():
        if holiday.key in NOT_SUBSTITUTED or holiday.weekday != SUNDAY:
            continue

        if year >= CONSECUTIVE_SUBSTITUTES_SINCE:
            date = holiday.date
            while builder.is_taken(date):
                date += datetime.timedelta(days=1)
        elif holiday.date >= SUBSTITUTES_SINCE:
            date = holiday.date + datetime.timedelta(days=1)
            if date in original_dates:
                logger.debug("No substitute for %s: %s is already a holiday", holiday.key, date)
                continue
        else:
            continue

        substitute = substitute_for(holiday, date)
        builder.add(substitute)
        logger.debug("Added %s on %s", substitute.key, date)
