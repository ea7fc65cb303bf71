"""
pardis.picker.presets
---------------------
Named date ranges computed from "today" in JDN space, so the same code serves
every calendar.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from ..core.time import weekday
from ..core.types import CalendarDate, DateRange
from ..engines.interfaces import CalendarEngine

PRESETS: Tuple[str, ...] = ("thisWeek", "thisMonth", "last7Days", "last30Days")

ALIASES: Dict[str, str] = {"last7": "last7Days", "last30": "last30Days"}


def canonical_preset(name: str) -> Optional[str]:
    name = ALIASES.get(name, name)
    return name if name in PRESETS else None


def _last_n_days(cal: CalendarEngine, today: CalendarDate, n: int) -> DateRange:
    today_jdn = cal.to_jdn(*today.as_tuple())
    return DateRange(start=cal.from_jdn(today_jdn - (n - 1)), end=today)


def _this_month(cal: CalendarEngine, today: CalendarDate) -> DateRange:
    last = cal.get_days_in_month(today.year, today.month)
    return DateRange(
        start=cal.make_date(today.year, today.month, 1),
        end=cal.make_date(today.year, today.month, last),
    )


def _this_week(cal: CalendarEngine, today: CalendarDate) -> DateRange:
    # Weeks start on Saturday: offset 0=Saturday .. 6=Friday
    today_jdn = cal.to_jdn(*today.as_tuple())
    offset = (weekday(today_jdn) + 1) % 7
    floor_jdn = cal.to_jdn(cal.min_year, 1, 1)
    start_jdn = max(today_jdn - offset, floor_jdn)
    return DateRange(start=cal.from_jdn(start_jdn), end=cal.from_jdn(today_jdn - offset + 6))


def compute_preset(cal: CalendarEngine, today: CalendarDate, name: str) -> Optional[DateRange]:
    """Range for a named preset, or None if the name is unknown."""
    preset = canonical_preset(name)
    if preset == "thisWeek":
        return _this_week(cal, today)
    if preset == "thisMonth":
        return _this_month(cal, today)
    if preset == "last7Days":
        return _last_n_days(cal, today, 7)
    if preset == "last30Days":
        return _last_n_days(cal, today, 30)
    return None
