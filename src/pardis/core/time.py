from __future__ import annotations
from datetime import date
from typing import Tuple

# JDN of 1970-01-01 (Unix epoch)
JDN_UNIX_EPOCH = 2440588
MS_PER_DAY = 86400000


def _div(a: int, b: int) -> int:
    """Integer division truncating toward zero (not floor)."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _mod(a: int, b: int) -> int:
    """Remainder consistent with _div: same sign as the dividend."""
    return a - _div(a, b) * b


def to_jdn(year: int, month: int, day: int) -> int:
    """Proleptic Gregorian (year, month, day) -> Julian Day Number.

    The constants are calibrated for truncating division; floor division
    corrupts results wherever an intermediate goes negative.
    """
    d = (
        _div((year + _div(month - 8, 6) + 100100) * 1461, 4)
        + _div(153 * _mod(month + 9, 12) + 2, 5)
        + day
        - 34840408
    )
    d = d - _div(_div(year + 100100 + _div(month - 8, 6), 100) * 3, 4) + 752
    return d


def from_jdn(jdn: int) -> Tuple[int, int, int]:
    """Inverse of to_jdn: Julian Day Number -> proleptic Gregorian triple."""
    j = 4 * jdn + 139361631
    j = j + _div(_div(4 * jdn + 183187720, 146097) * 3, 4) * 4 - 3908
    i = _div(_mod(j, 1461), 4) * 5 + 308
    gd = _div(_mod(i, 153), 5) + 1
    gm = _mod(_div(i, 153), 12) + 1
    gy = _div(j, 1461) - 100100 + _div(8 - gm, 6)
    return gy, gm, gd


def date_to_jdn(d: date) -> int:
    return to_jdn(d.year, d.month, d.day)


def jdn_to_date(jdn: int) -> date:
    return date(*from_jdn(jdn))


def weekday(jdn: int) -> int:
    """Day of week for a JDN, 0=Sunday .. 6=Saturday."""
    return (jdn + 1) % 7


def jdn_to_timestamp_ms(jdn: int) -> int:
    """Unix timestamp (milliseconds) of UTC midnight starting that day."""
    return (jdn - JDN_UNIX_EPOCH) * MS_PER_DAY


def today_gregorian() -> Tuple[int, int, int]:
    """Wall-clock Gregorian date as a (year, month, day) triple."""
    t = date.today()
    return t.year, t.month, t.day
