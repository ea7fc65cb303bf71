"""Diagnostics package.

- always available: pretty_month, new_years_table, round_trip, leap_years
- nowruz_scatter: optional (requires numpy + matplotlib, pip install "pardis[diagnostics]")
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "leap_years", "nowruz_scatter"]
