"""
luach.engines.hebrew_year
-------------------------
Closed-form year model of the arithmetic Hebrew calendar: leap years,
year lengths and month lengths. Every function is a pure function of the year.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Tuple

from luach.core.errors import CalendarValidationError
from luach.core.months import HebrewMonth
from .specs import HEBREW

P = HEBREW

_FIXED_30 = frozenset({
    HebrewMonth.TISHRI, HebrewMonth.SHEVAT, HebrewMonth.ADAR_I,
    HebrewMonth.NISAN, HebrewMonth.SIVAN, HebrewMonth.AV,
})

_LEAP_MONTHS: Tuple[HebrewMonth, ...] = tuple(HebrewMonth)
_COMMON_MONTHS: Tuple[HebrewMonth, ...] = tuple(m for m in HebrewMonth if m is not HebrewMonth.ADAR_I)


class YearType(Enum):
    DEFICIENT = "deficient"   # 353 / 383
    REGULAR = "regular"       # 354 / 384
    COMPLETE = "complete"     # 355 / 385


def is_leap_year(year: int) -> bool:
    """Years 3, 6, 8, 11, 14, 17, 19 of each 19-year cycle."""
    return (P.leaps_per_cycle * year + 1) % P.cycle_years < P.leaps_per_cycle


def months_in_year(year: int) -> int:
    return 13 if is_leap_year(year) else 12


def months(year: int) -> Tuple[HebrewMonth, ...]:
    """Months of the year in civil order (TISHRI first)."""
    return _LEAP_MONTHS if is_leap_year(year) else _COMMON_MONTHS


def elapsed_days(year: int) -> int:
    """
    Days from the epoch to the molad of Tishri of `year`, postponed by one day
    when the molad falls on Sunday, Wednesday or Friday.
    """
    months_elapsed = (P.cycle_months * year - (P.cycle_months - 1)) // P.cycle_years
    parts = P.molad_offset_parts + P.lunation_parts * months_elapsed
    day = P.lunation_days * months_elapsed + parts // P.parts_per_day
    if (3 * (day + 1)) % 7 < 3:
        day += 1
    return day


def new_year_delay(year: int) -> int:
    """Remaining postponements keeping year lengths within 353..355 / 383..385."""
    ny0 = elapsed_days(year - 1)
    ny1 = elapsed_days(year)
    ny2 = elapsed_days(year + 1)
    if ny2 - ny1 == 356:
        return 2
    if ny1 - ny0 == 382:
        return 1
    return 0


@lru_cache(maxsize=4096)
def new_year_jdn(year: int) -> int:
    """JDN of 1 Tishri of `year`."""
    return P.epoch_jdn + elapsed_days(year) + new_year_delay(year)


def year_length(year: int) -> int:
    return new_year_jdn(year + 1) - new_year_jdn(year)


def year_type(year: int) -> YearType:
    n = year_length(year) % 10   # 353/383 -> 3, 354/384 -> 4, 355/385 -> 5
    if n == 3:
        return YearType.DEFICIENT
    if n == 5:
        return YearType.COMPLETE
    return YearType.REGULAR


def month_length(year: int, month: HebrewMonth) -> int:
    if month is HebrewMonth.ADAR_I and not is_leap_year(year):
        raise CalendarValidationError(f"ADAR_I is out of range in common year {year}")
    if month in _FIXED_30:
        return 30
    if month is HebrewMonth.HESHVAN:
        return 30 if year_type(year) is YearType.COMPLETE else 29
    if month is HebrewMonth.KISLEV:
        return 29 if year_type(year) is YearType.DEFICIENT else 30
    return 29


def days_before_month(year: int, month: HebrewMonth) -> int:
    """Days between 1 Tishri and the first day of `month` in the same year."""
    total = 0
    for m in months(year):
        if m is month:
            return total
        total += month_length(year, m)
    raise CalendarValidationError(f"{month.name} is out of range in common year {year}")
