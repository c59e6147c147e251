"""Diagnostics package.

Light-weight command line checks and tables. year_types needs the optional
plotting extras (pip install "luach[diagnostics]").
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "year_types", "anniversary_table"]
