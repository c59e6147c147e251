"""luach public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Register standard day attributes on import
from .attributes import standard as _standard  # noqa: F401

from .api import (
    day_info,
    to_hebrew,
    to_gregorian,
    resolve_anniversary,
    anniversaries_in_gregorian_year,
    bar_mitzvah,
    year_info,
    months_in_year,
    days_in_month,
    month_bounds,
    new_year_day,
    first_day_of_month,
    last_day_of_month,
)
from .core.errors import CalendarRangeError, CalendarValidationError, LuachError
from .core.months import HebrewMonth
from .core.types import DayInfo, GregorianDate, HebrewDate
from .engines.anniversary import Anniversary
from .engines.calendar import normalize
from .engines.hebrew_year import YearType, is_leap_year, month_length, year_length, year_type

__all__ = [
    "day_info",
    "to_hebrew",
    "to_gregorian",
    "normalize",
    "resolve_anniversary",
    "anniversaries_in_gregorian_year",
    "bar_mitzvah",
    "year_info",
    "months_in_year",
    "days_in_month",
    "month_bounds",
    "new_year_day",
    "first_day_of_month",
    "last_day_of_month",
    "Anniversary",
    "HebrewMonth",
    "HebrewDate",
    "GregorianDate",
    "DayInfo",
    "YearType",
    "is_leap_year",
    "month_length",
    "year_length",
    "year_type",
    "LuachError",
    "CalendarValidationError",
    "CalendarRangeError",
]
