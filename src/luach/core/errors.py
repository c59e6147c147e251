class LuachError(Exception):
    """Base error."""

class CalendarValidationError(LuachError, ValueError):
    """Raised when a date field is malformed (month not in year, day beyond month end, ...)."""

class CalendarRangeError(LuachError, ValueError):
    """Raised when a date lies outside the supported Hebrew year span."""
