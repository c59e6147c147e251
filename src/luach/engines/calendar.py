"""
luach.engines.calendar
----------------------
The converter. Hebrew and Gregorian dates meet only on the Julian Day Number
line: a cross-calendar conversion is always from_jdn(to_jdn(x)).
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Union

from luach.core.errors import CalendarRangeError
from luach.core.time import to_jdn
from luach.core.types import GregorianDate, HebrewDate
from . import hebrew_year as hy
from .specs import HEBREW

logger = logging.getLogger(__name__)

DateLike = Union[HebrewDate, GregorianDate, date]


def hebrew_to_jdn(h: HebrewDate) -> int:
    return hy.new_year_jdn(h.year) + hy.days_before_month(h.year, h.month) + h.day - 1


def hebrew_year_of_jdn(jdn: int) -> int:
    """
    Hebrew year containing `jdn`. The mean-year estimate is never more than one
    year ahead of the truth, so at most two correction steps follow.
    """
    mean = HEBREW.mean_year
    approx = ((jdn - HEBREW.epoch_jdn) * mean.denominator) // mean.numerator + 1
    year = approx - 1
    while hy.new_year_jdn(year + 1) <= jdn:
        year += 1
    return year


def hebrew_from_jdn(jdn: int) -> HebrewDate:
    year = hebrew_year_of_jdn(jdn)
    if not (HEBREW.min_year <= year <= HEBREW.max_year):
        raise CalendarRangeError(
            f"JDN {jdn} falls in Hebrew year {year}, outside {HEBREW.min_year}..{HEBREW.max_year}"
        )

    offset = jdn - hy.new_year_jdn(year)
    for m in hy.months(year):
        n = hy.month_length(year, m)
        if offset < n:
            return HebrewDate(year, m, offset + 1)
        offset -= n
    raise RuntimeError("unreachable")


def normalize(d: DateLike) -> HebrewDate:
    """Convert any supported calendar date into its Hebrew representation."""
    if isinstance(d, HebrewDate):
        return d
    if isinstance(d, GregorianDate):
        jdn = d.to_jdn()
    elif isinstance(d, date):
        jdn = to_jdn(d)
    else:
        raise TypeError(f"Cannot convert {type(d).__name__} to a Hebrew date")
    h = hebrew_from_jdn(jdn)
    logger.debug("normalize %s -> %s (jdn=%d)", d, h, jdn)
    return h


def to_gregorian(h: HebrewDate) -> GregorianDate:
    return GregorianDate.from_jdn(hebrew_to_jdn(h))
