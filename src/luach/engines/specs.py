"""
luach.engines.specs
-------------------
Pure data parameters of the arithmetic Hebrew calendar.

Molad constants follow Dershowitz/Reingold, "Calendrical Calculations":
a mean lunation is 29 days 13753 parts (1 day = 25920 parts), and the molad of
Tishri of year 1 sits 12084 parts after the epoch day began.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction


@dataclass(frozen=True)
class HebrewCalendarParams:
    epoch_jdn: int               # JDN of 1 Tishri AM 1 (R.D. -1373427)
    min_year: int
    max_year: int

    cycle_years: int             # Metonic cycle
    cycle_months: int
    parts_per_day: int
    lunation_days: int
    lunation_parts: int
    molad_offset_parts: int

    def __post_init__(self) -> None:
        if self.min_year < 1:
            raise ValueError("min_year must be >= 1")
        if not (self.min_year <= self.max_year):
            raise ValueError("Require min_year <= max_year")
        if self.cycle_months <= 12 * self.cycle_years:
            raise ValueError("cycle_months must exceed 12 * cycle_years")
        if not (0 <= self.lunation_parts < self.parts_per_day):
            raise ValueError("lunation_parts must be in 0..parts_per_day-1")

    @property
    def leaps_per_cycle(self) -> int:
        return self.cycle_months - 12 * self.cycle_years

    @property
    def mean_year(self) -> Fraction:
        """Mean year length in days (35975351/98496 for the standard constants)."""
        lunation = self.lunation_days + Fraction(self.lunation_parts, self.parts_per_day)
        return lunation * self.cycle_months / self.cycle_years


HEBREW = HebrewCalendarParams(
    epoch_jdn=347998,
    min_year=1,
    max_year=9999,
    cycle_years=19,
    cycle_months=235,
    parts_per_day=25920,
    lunation_days=29,
    lunation_parts=13753,
    molad_offset_parts=12084,
)
