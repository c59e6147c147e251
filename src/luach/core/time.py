from __future__ import annotations
from datetime import date
from typing import Tuple

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_gregorian_leap(y: int) -> bool:
    """Proleptic Gregorian leap year (astronomical numbering, year 0 is leap)."""
    return y % 4 == 0 and (y % 100 != 0 or y % 400 == 0)


def gregorian_month_length(y: int, m: int) -> int:
    if m == 2 and is_gregorian_leap(y):
        return 29
    return _MONTH_DAYS[m - 1]


def gregorian_to_jdn(y: int, m: int, day: int) -> int:
    """Proleptic Gregorian (y, m, d) -> Julian Day Number (Fliegel-Van Flandern)."""
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def gregorian_from_jdn(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of gregorian_to_jdn."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def to_jdn(d: date) -> int:
    """Convert a datetime.date to Julian Day Number (JDN)."""
    return gregorian_to_jdn(d.year, d.month, d.day)


def weekday(jdn: int) -> int:
    """0=Mon..6=Sun, same convention as date.weekday()."""
    return jdn % 7
