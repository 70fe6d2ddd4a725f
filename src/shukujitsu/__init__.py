"""Japanese public holiday calculator.

Computes the holidays of a year from fixed dates, Nth-weekday rules and the
equinox approximation, plus the substitute holidays observed when a holiday
falls on a Sunday.
"""

from shukujitsu.errors import (
    ConfigError,
    DuplicateHolidayError,
    InvalidInputError,
    ShukujitsuError,
    UnknownLocaleError,
)
from shukujitsu.holidays import (
    get_holidays,
    holiday_name,
    holidays_between,
    is_holiday,
    is_working_day,
    japan_holidays,
    next_holiday,
    previous_holiday,
)
from shukujitsu.models import Holiday, HolidaySet, YearContext
from shukujitsu.rules import equinox_day, nth_weekday

__all__ = [
    "ConfigError",
    "DuplicateHolidayError",
    "Holiday",
    "HolidaySet",
    "InvalidInputError",
    "ShukujitsuError",
    "UnknownLocaleError",
    "YearContext",
    "equinox_day",
    "get_holidays",
    "holiday_name",
    "holidays_between",
    "is_holiday",
    "is_working_day",
    "japan_holidays",
    "next_holiday",
    "nth_weekday",
    "previous_holiday",
]
