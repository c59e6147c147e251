from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from functools import total_ordering
from typing import Any, Dict, Optional, Tuple

from .errors import CalendarRangeError, CalendarValidationError
from .months import HebrewMonth
from .time import gregorian_from_jdn, gregorian_month_length, gregorian_to_jdn
from luach.engines import hebrew_year as hy
from luach.engines.specs import HEBREW


@dataclass(frozen=True, order=True)
class GregorianDate:
    """Proleptic Gregorian date with astronomical year numbering (year 0 = 1 BCE)."""
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not (1 <= self.month <= 12):
            raise CalendarValidationError(f"Gregorian month must be in 1..12, got {self.month}")
        n = gregorian_month_length(self.year, self.month)
        if not (1 <= self.day <= n):
            raise CalendarValidationError(
                f"Gregorian day must be in 1..{n} for {self.year}-{self.month:02d}, got {self.day}"
            )

    @classmethod
    def from_date(cls, d: date) -> "GregorianDate":
        return cls(d.year, d.month, d.day)

    @classmethod
    def from_jdn(cls, jdn: int) -> "GregorianDate":
        return cls(*gregorian_from_jdn(jdn))

    def to_jdn(self) -> int:
        return gregorian_to_jdn(self.year, self.month, self.day)

    def to_date(self) -> date:
        if not (1 <= self.year <= 9999):
            raise CalendarRangeError(f"Gregorian year {self.year} is not representable as datetime.date")
        return date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


@total_ordering
@dataclass(frozen=True)
class HebrewDate:
    """
    A validated date of the arithmetic Hebrew calendar (Anno Mundi).

    Construction fails with CalendarRangeError outside the supported years and
    with CalendarValidationError when the month does not exist in the year
    (ADAR_I of a common year) or the day exceeds the month length.
    """
    year: int
    month: HebrewMonth
    day: int

    def __post_init__(self) -> None:
        if not isinstance(self.month, HebrewMonth):
            raise TypeError(f"month must be a HebrewMonth, got {type(self.month).__name__}")
        if not (HEBREW.min_year <= self.year <= HEBREW.max_year):
            raise CalendarRangeError(
                f"Hebrew year {self.year} outside supported span {HEBREW.min_year}..{HEBREW.max_year}"
            )
        n = hy.month_length(self.year, self.month)
        if not (1 <= self.day <= n):
            raise CalendarValidationError(
                f"day must be in 1..{n} for {self.month.name} {self.year}, got {self.day}"
            )

    @classmethod
    def of_civil(cls, year: int, month: int, day: int) -> "HebrewDate":
        return cls(year, HebrewMonth.of_civil(month, hy.is_leap_year(year)), day)

    @classmethod
    def of_biblical(cls, year: int, month: int, day: int) -> "HebrewDate":
        return cls(year, HebrewMonth.of_biblical(month, hy.is_leap_year(year)), day)

    def _key(self) -> Tuple[int, int, int]:
        return (self.year, self.month.value, self.day)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HebrewDate):
            return NotImplemented
        return self._key() < other._key()

    def is_leap_year(self) -> bool:
        return hy.is_leap_year(self.year)

    def length_of_month(self) -> int:
        return hy.month_length(self.year, self.month)

    def length_of_year(self) -> int:
        return hy.year_length(self.year)

    def day_of_year(self) -> int:
        return hy.days_before_month(self.year, self.month) + self.day

    def to_jdn(self) -> int:
        from luach.engines.calendar import hebrew_to_jdn
        return hebrew_to_jdn(self)

    def to_gregorian(self) -> GregorianDate:
        return GregorianDate.from_jdn(self.to_jdn())

    def plus_days(self, n: int) -> "HebrewDate":
        from luach.engines.calendar import hebrew_from_jdn
        return hebrew_from_jdn(self.to_jdn() + n)

    def minus_days(self, n: int) -> "HebrewDate":
        return self.plus_days(-n)

    def __str__(self) -> str:
        return f"AM-{self.year}-{self.month.name}-{self.day}"


@dataclass(frozen=True)
class DayInfo:
    gregorian: GregorianDate
    hebrew: HebrewDate
    jdn: int
    attributes: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None
