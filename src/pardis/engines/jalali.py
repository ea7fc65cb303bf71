"""
pardis.engines.jalali
---------------------
Jalali (solar Hijri) arithmetic via the break-point algorithm: a fixed table of
years at which the 33-year leap cycle shifts. The table encodes empirical
astronomical corrections and is valid only between its first and last entries.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..core.errors import InvalidCalendarYear
from ..core.time import _div, _mod, from_jdn as _g_from_jdn, to_jdn as _g_to_jdn, today_gregorian, weekday
from ..core.types import CalendarDate, CalendarSpec

BREAKS: Tuple[int, ...] = (
    -61, 9, 38, 199, 426, 686, 756, 818, 1111, 1181, 1210,
    1635, 2060, 2097, 2192, 2262, 2324, 2394, 2456, 3178,
)

# Break-point domain: BREAKS[0] <= jy < BREAKS[-1]
MIN_ALGORITHM_YEAR = BREAKS[0]
MAX_ALGORITHM_YEAR = BREAKS[-1] - 1


@dataclass(frozen=True)
class JalCal:
    leap: bool
    gy: int      # Gregorian year in which the Jalali year begins
    march: int   # day of March on which Farvardin 1 falls


def jal_cal(jy: int) -> JalCal:
    if jy < BREAKS[0] or jy >= BREAKS[-1]:
        raise InvalidCalendarYear(jy)

    gy = jy + 621
    leap_j = -14
    jp = BREAKS[0]
    jump = 0

    for jm in BREAKS[1:]:
        jump = jm - jp
        if jy < jm:
            break
        leap_j += _div(jump, 33) * 8 + _div(_mod(jump, 33), 4)
        jp = jm

    n = jy - jp
    leap_j += _div(n, 33) * 8 + _div(_mod(n, 33) + 3, 4)
    if _mod(jump, 33) == 4 and jump - n == 4:
        leap_j += 1

    leap_g = _div(gy, 4) - _div((_div(gy, 100) + 1) * 3, 4) - 150
    march = 20 + leap_j - leap_g

    if jump - n < 6:
        n = n - jump + _div(jump + 4, 33) * 33
    leap = _mod(_mod(n + 1, 33) - 1, 4)
    if leap == -1:
        leap = 4

    return JalCal(leap=(leap == 0), gy=gy, march=march)


def is_leap_jalali_year(jy: int) -> bool:
    return jal_cal(jy).leap


def jalali_month_length(jy: int, jm: int) -> int:
    if jm <= 6:
        return 31
    if jm <= 11:
        return 30
    return 30 if is_leap_jalali_year(jy) else 29


def j2d(jy: int, jm: int, jd: int) -> int:
    """Jalali date -> JDN."""
    r = jal_cal(jy)
    return _g_to_jdn(r.gy, 3, r.march) + (jm - 1) * 31 - _div(jm, 7) * (jm - 7) + jd - 1


def d2j(jdn: int) -> Tuple[int, int, int]:
    """JDN -> Jalali date."""
    gy = _g_from_jdn(jdn)[0]
    jy = gy - 621
    if jy == BREAKS[-1]:
        # Dey..Esfand of the last table year fall in the next Gregorian year
        jy -= 1
        k = jdn - j2d(jy, 1, 1)
        if k >= 365 + is_leap_jalali_year(jy):
            raise InvalidCalendarYear(jy + 1)
        k -= 186
        return jy, 7 + _div(k, 30), 1 + _mod(k, 30)
    r = jal_cal(jy)
    k = jdn - _g_to_jdn(gy, 3, r.march)

    if k >= 0:
        if k <= 185:
            return jy, 1 + _div(k, 31), 1 + _mod(k, 31)
        k -= 186
    else:
        jy -= 1
        k += 179
        if is_leap_jalali_year(jy):
            k += 1

    return jy, 7 + _div(k, 30), 1 + _mod(k, 30)


def to_jalali(gy: int, gm: int, gd: int) -> CalendarDate:
    return CalendarDate(*d2j(_g_to_jdn(gy, gm, gd)))


def to_gregorian(jy: int, jm: int, jd: int) -> CalendarDate:
    return CalendarDate(*_g_from_jdn(j2d(jy, jm, jd)))


def today_jalali() -> CalendarDate:
    return to_jalali(*today_gregorian())


class JalaliCalendar:
    """Implements CalendarEngine for the Jalali calendar."""

    def __init__(self, spec: CalendarSpec):
        self.spec = spec
        if spec.min_year < MIN_ALGORITHM_YEAR or spec.max_year > MAX_ALGORITHM_YEAR:
            raise ValueError(
                f"Jalali year range must lie within {MIN_ALGORITHM_YEAR}..{MAX_ALGORITHM_YEAR}"
            )

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
        return jalali_month_length(year, month)

    def is_leap_year(self, year: int) -> bool:
        return is_leap_jalali_year(year)

    def to_jdn(self, year: int, month: int, day: int) -> int:
        return j2d(year, month, day)

    def from_jdn(self, jdn: int) -> CalendarDate:
        return CalendarDate(*d2j(jdn))

    def to_gregorian(self, year: int, month: int, day: int) -> CalendarDate:
        return to_gregorian(year, month, day)

    def from_gregorian(self, gy: int, gm: int, gd: int) -> CalendarDate:
        return to_jalali(gy, gm, gd)

    def today(self) -> CalendarDate:
        return to_jalali(*today_gregorian())

    def get_weekday_offset(self, year: int, month: int, week_start: int) -> int:
        dow = weekday(j2d(year, month, 1))
        return (dow - week_start + 7) % 7

    def make_date(self, year: int, month: int, day: int) -> CalendarDate:
        return CalendarDate(year, month, day)

    def __repr__(self) -> str:
        return f"JalaliCalendar({self.min_year}..{self.max_year})"
