"""
pardis.engines.gregorian
------------------------
Proleptic Gregorian arithmetic. The calendar's native triple is the Gregorian
triple, so JDN conversion is JulianDayMath itself and to/from_gregorian are
identities. Correct for any integer year; the picker enforces the year clamp.
"""

from __future__ import annotations

from typing import Tuple

from ..core.time import from_jdn as _from_jdn, to_jdn as _to_jdn, today_gregorian, weekday
from ..core.types import CalendarDate, CalendarSpec

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_gregorian_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def gregorian_month_length(year: int, month: int) -> int:
    if month == 2 and is_leap_gregorian_year(year):
        return 29
    return _MONTH_DAYS[month - 1]


class GregorianCalendar:
    """Implements CalendarEngine for the proleptic Gregorian calendar."""

    def __init__(self, spec: CalendarSpec):
        self.spec = spec

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def min_year(self) -> int:
        return self.spec.min_year

    @property
    def max_year(self) -> int:
        return self.spec.max_year

    @property
    def months_in_year(self) -> int:
        return 12

    @property
    def week_start(self) -> int:
        return self.spec.week_start

    @property
    def weekend_days(self) -> Tuple[int, ...]:
        return self.spec.weekend_days

    @property
    def month_names(self) -> Tuple[str, ...]:
        return self.spec.month_names

    def get_days_in_month(self, year: int, month: int) -> int:
        return gregorian_month_length(year, month)

    def is_leap_year(self, year: int) -> bool:
        return is_leap_gregorian_year(year)

    def to_jdn(self, year: int, month: int, day: int) -> int:
        return _to_jdn(year, month, day)

    def from_jdn(self, jdn: int) -> CalendarDate:
        return CalendarDate(*_from_jdn(jdn))

    def to_gregorian(self, year: int, month: int, day: int) -> CalendarDate:
        return CalendarDate(year, month, day)

    def from_gregorian(self, gy: int, gm: int, gd: int) -> CalendarDate:
        return CalendarDate(gy, gm, gd)

    def today(self) -> CalendarDate:
        return CalendarDate(*today_gregorian())

    def get_weekday_offset(self, year: int, month: int, week_start: int) -> int:
        dow = weekday(_to_jdn(year, month, 1))
        return (dow - week_start + 7) % 7

    def make_date(self, year: int, month: int, day: int) -> CalendarDate:
        return CalendarDate(year, month, day)

    def __repr__(self) -> str:
        return f"GregorianCalendar({self.min_year}..{self.max_year})"
