"""
luach.core.months
-----------------
Hebrew month labels and their two numbering schemes.

Civil numbering starts the year at TISHRI (the year number changes there).
Biblical numbering starts at NISAN and is the one used to carry an anniversary
from one year into another.
"""

from __future__ import annotations

from enum import Enum

from .errors import CalendarValidationError


class HebrewMonth(Enum):
    """
    Months in civil order of a leap year. ADAR_I is the leap month; in a
    common year the single Adar is labelled ADAR_II.
    """
    TISHRI = 1
    HESHVAN = 2
    KISLEV = 3
    TEVET = 4
    SHEVAT = 5
    ADAR_I = 6
    ADAR_II = 7
    NISAN = 8
    IYAR = 9
    SIVAN = 10
    TAMUZ = 11
    AV = 12
    ELUL = 13

    def civil_value(self, leap: bool) -> int:
        """1..13 in leap years, 1..12 in common years."""
        if leap or self.value < HebrewMonth.ADAR_I.value:
            return self.value
        if self is HebrewMonth.ADAR_I:
            raise CalendarValidationError("ADAR_I has no civil number in a common year")
        return self.value - 1

    def biblical_value(self, leap: bool) -> int:
        """
        NISAN = 1. With leap=False both ADAR_I and ADAR_II map to 12, which is
        what the anniversary rules rely on.
        """
        if leap:
            return (self.value - 8) % 13 + 1
        civil = self.value if self.value <= HebrewMonth.ADAR_I.value else self.value - 1
        return (civil - 7) % 12 + 1

    @classmethod
    def of_civil(cls, value: int, leap: bool) -> "HebrewMonth":
        top = 13 if leap else 12
        if not (1 <= value <= top):
            raise CalendarValidationError(f"civil month must be in 1..{top}, got {value}")
        if not leap and value >= cls.ADAR_I.value:
            value += 1
        return cls(value)

    @classmethod
    def of_biblical(cls, value: int, leap: bool) -> "HebrewMonth":
        top = 13 if leap else 12
        if not (1 <= value <= top):
            raise CalendarValidationError(f"biblical month must be in 1..{top}, got {value}")
        civil = (value + 6) % 13 + 1 if leap else (value + 5) % 12 + 1
        return cls.of_civil(civil, leap)

    @classmethod
    def parse(cls, text: str) -> "HebrewMonth":
        """Accept a member name ('adar_i', 'Nisan') in any case."""
        key = text.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return cls[key]
        except KeyError:
            raise CalendarValidationError(
                f"Unknown Hebrew month '{text}'. Available: {[m.name for m in cls]}"
            ) from None
