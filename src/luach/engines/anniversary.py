"""
luach.engines.anniversary
-------------------------
Personal anniversaries in the Hebrew calendar and their Gregorian images.

Two rules exist. BIRTHDAY keeps the month (moving a leap-month birthday into
Adar of common years) and rolls a 30th forward into the next month when the
target month is short. YAHRZEIT follows Dershowitz/Reingold, "Calendrical
Calculations"; some communities deviate from it, so its branch conditions are
kept exactly as stated there.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, List, Union

from luach.core.months import HebrewMonth
from luach.core.time import gregorian_to_jdn
from luach.core.types import GregorianDate, HebrewDate
from . import hebrew_year as hy
from .calendar import DateLike, hebrew_year_of_jdn, normalize, to_gregorian
from .specs import HEBREW

logger = logging.getLogger(__name__)

ADAR_I = HebrewMonth.ADAR_I
ADAR_II = HebrewMonth.ADAR_II


def _birthday(event: HebrewDate, year: int) -> HebrewDate:
    m, d = event.month, event.day
    if m is ADAR_II:
        # Adar of a common year and Adar II of a leap year both mean "last Adar".
        return HebrewDate.of_biblical(year, 13 if hy.is_leap_year(year) else 12, d)
    if m is ADAR_I and not hy.is_leap_year(year):
        m = ADAR_II
    if d <= 29:
        return HebrewDate(year, m, d)
    return HebrewDate(year, m, 1).plus_days(d - 1)


def _yahrzeit(event: HebrewDate, year: int) -> HebrewDate:
    y, m, d = event.year, event.month, event.day
    if m is HebrewMonth.HESHVAN and d == 30 and hy.month_length(y + 1, HebrewMonth.HESHVAN) == 29:
        logger.debug("yahrzeit %s: long Heshvan followed by a short one", event)
        return HebrewDate(year, HebrewMonth.KISLEV, 1).minus_days(1)
    if m is HebrewMonth.KISLEV and d == 30 and hy.month_length(y + 1, HebrewMonth.KISLEV) == 29:
        logger.debug("yahrzeit %s: long Kislev followed by a short one", event)
        return HebrewDate(year, HebrewMonth.TEVET, 1).minus_days(1)
    if m is ADAR_II and hy.is_leap_year(y):
        return HebrewDate(year, ADAR_II, d)
    if m.biblical_value(False) == 12 and d == 30 and not hy.is_leap_year(year):
        logger.debug("yahrzeit %s: 30 Adar I in a common year falls back to 30 Shevat", event)
        return HebrewDate(year, HebrewMonth.SHEVAT, 30)
    return HebrewDate.of_biblical(year, m.biblical_value(False), 1).plus_days(d - 1)


class Anniversary(Enum):
    BIRTHDAY = "birthday"
    YAHRZEIT = "yahrzeit"

    @classmethod
    def parse(cls, rule: Union["Anniversary", str]) -> "Anniversary":
        if isinstance(rule, Anniversary):
            return rule
        try:
            return cls[rule.strip().upper()]
        except KeyError:
            raise KeyError(f"Unknown anniversary rule '{rule}'. Available: {[r.value for r in cls]}") from None

    def in_hebrew_year(self, event: DateLike, year: int) -> HebrewDate:
        """Anniversary of `event` in the given Hebrew year."""
        h = normalize(event)
        out = _RULES[self](h, year)
        logger.debug("%s of %s in AM %d -> %s", self.name, h, year, out)
        return out

    def in_gregorian_year(self, event: DateLike, year: int) -> List[GregorianDate]:
        """
        All anniversaries of `event` falling in the given Gregorian year, in
        ascending order. A Hebrew year is shorter or longer than a Gregorian one,
        so the result has 0, 1 or 2 elements.
        """
        h = normalize(event)
        hyear = hebrew_year_of_jdn(gregorian_to_jdn(year, 1, 1))
        out = []
        for y in (hyear, hyear + 1):
            if not (HEBREW.min_year <= y <= HEBREW.max_year):
                continue
            g = to_gregorian(_RULES[self](h, y))
            if g.year == year:
                out.append(g)
        return out


_RULES: Dict[Anniversary, Callable[[HebrewDate, int], HebrewDate]] = {
    Anniversary.BIRTHDAY: _birthday,
    Anniversary.YAHRZEIT: _yahrzeit,
}


def resolve(rule: Union[Anniversary, str], event: DateLike, year: int) -> HebrewDate:
    return Anniversary.parse(rule).in_hebrew_year(event, year)


def in_gregorian_year(rule: Union[Anniversary, str], event: DateLike, year: int) -> List[GregorianDate]:
    return Anniversary.parse(rule).in_gregorian_year(event, year)
