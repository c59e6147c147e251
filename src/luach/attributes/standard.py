from __future__ import annotations
from typing import Any, Dict

from ..core.time import weekday as _weekday
from ..engines import hebrew_year as hy
from .registry import register_attribute

def weekday(info) -> Dict[str, Any]:
    # 0=Mon..6=Sun, same as date.weekday()
    return {"weekday": _weekday(info.jdn)}

def year_type(info) -> Dict[str, Any]:
    y = info.hebrew.year
    return {
        "leap_year": hy.is_leap_year(y),
        "year_length": hy.year_length(y),
        "year_type": hy.year_type(y).value,
    }

def day_of_year(info) -> Dict[str, Any]:
    return {"day_of_year": info.hebrew.day_of_year()}

def month_numbers(info) -> Dict[str, Any]:
    h = info.hebrew
    leap = hy.is_leap_year(h.year)
    return {
        "civil_month": h.month.civil_value(leap),
        "biblical_month": h.month.biblical_value(leap),
    }

register_attribute("weekday", weekday)
register_attribute("year_type", year_type)
register_attribute("day_of_year", day_of_year)
register_attribute("month_numbers", month_numbers)
