from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, List, Sequence, Union

from .core.months import HebrewMonth
from .core.types import DayInfo, GregorianDate, HebrewDate
from .attributes.registry import compute_attributes
from .engines import hebrew_year as hy
from .engines.anniversary import Anniversary
from .engines.calendar import DateLike, hebrew_from_jdn, normalize
from .engines.calendar import to_gregorian as _to_gregorian

MonthLike = Union[HebrewMonth, str]
RuleLike = Union[Anniversary, str]


def _month(M: MonthLike) -> HebrewMonth:
    return M if isinstance(M, HebrewMonth) else HebrewMonth.parse(M)


def to_hebrew(d: DateLike) -> HebrewDate:
    return normalize(d)

def to_gregorian(h: HebrewDate) -> GregorianDate:
    return _to_gregorian(h)

def day_info(
    d: DateLike,
    *,
    attributes: Sequence[str] = (),
    debug: bool = False,
) -> DayInfo:
    h = normalize(d)
    jdn = h.to_jdn()
    info = DayInfo(
        gregorian=GregorianDate.from_jdn(jdn),
        hebrew=h,
        jdn=jdn,
        debug={"new_year_jdn": hy.new_year_jdn(h.year), "day_of_year": h.day_of_year()} if debug else None,
    )
    if attributes:
        info = replace(info, attributes=compute_attributes(info, attributes))
    return info

# ============================================================
# Anniversaries
# ============================================================

def resolve_anniversary(rule: RuleLike, event: DateLike, hebrew_year: int) -> HebrewDate:
    """Anniversary of `event` in `hebrew_year` under the BIRTHDAY or YAHRZEIT rule."""
    return Anniversary.parse(rule).in_hebrew_year(event, hebrew_year)

def anniversaries_in_gregorian_year(rule: RuleLike, event: DateLike, gregorian_year: int) -> List[GregorianDate]:
    """The 0, 1 or 2 anniversaries of `event` inside `gregorian_year`, ascending."""
    return Anniversary.parse(rule).in_gregorian_year(event, gregorian_year)

def bar_mitzvah(birth: DateLike) -> HebrewDate:
    """Thirteenth birthday in the Hebrew calendar."""
    h = normalize(birth)
    return Anniversary.BIRTHDAY.in_hebrew_year(h, h.year + 13)

# ============================================================
# Year / month level helpers
# ============================================================

def year_info(Y: int) -> Dict[str, Any]:
    return {
        "Y": Y,
        "leap_year": hy.is_leap_year(Y),
        "year_length": hy.year_length(Y),
        "year_type": hy.year_type(Y).value,
        "new_year": new_year_day(Y)["date"],
        "months": months_in_year(Y),
    }

def months_in_year(Y: int) -> List[Dict[str, Any]]:
    leap = hy.is_leap_year(Y)
    out = []
    for m in hy.months(Y):
        out.append({
            "Y": Y,
            "month": m,
            "civil": m.civil_value(leap),
            "biblical": m.biblical_value(leap),
            "length": hy.month_length(Y, m),
        })
    return out

def days_in_month(Y: int, M: MonthLike) -> List[Dict[str, Any]]:
    first = HebrewDate(Y, _month(M), 1)
    jdn0 = first.to_jdn()
    rows = []
    for i in range(first.length_of_month()):
        rows.append({
            "day": i + 1,
            "jdn": jdn0 + i,
            "date": GregorianDate.from_jdn(jdn0 + i),
        })
    return rows

def month_bounds(Y: int, M: MonthLike, *, as_date: bool = True) -> Dict[str, Any]:
    m = _month(M)
    first = HebrewDate(Y, m, 1)
    first_jdn = first.to_jdn()
    last_jdn = first_jdn + first.length_of_month() - 1

    out: Dict[str, Any] = {"Y": Y, "M": m, "first_jdn": first_jdn, "last_jdn": last_jdn}
    if as_date:
        out["first_date"] = GregorianDate.from_jdn(first_jdn)
        out["last_date"] = GregorianDate.from_jdn(last_jdn)
    return out

def new_year_day(Y: int, *, as_date: bool = True) -> Dict[str, Any]:
    jdn = hy.new_year_jdn(Y)
    prev = hebrew_from_jdn(jdn - 1) if Y > 1 else None
    out: Dict[str, Any] = {"Y": Y, "jdn": jdn, "prev_day": prev}
    if as_date:
        out["date"] = GregorianDate.from_jdn(jdn)
    return out

def first_day_of_month(Y: int, M: MonthLike) -> GregorianDate:
    return month_bounds(Y, M)["first_date"]

def last_day_of_month(Y: int, M: MonthLike) -> GregorianDate:
    return month_bounds(Y, M)["last_date"]
