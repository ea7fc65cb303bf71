"""
pardis.engines.interfaces
-------------------------
The capability boundary between calendar arithmetic and the picker state
machine. Every calendar exposes the same contract, so the picker is written
once and never branches on which calendar is active.

Standard Reference Frame:
All day counts are Julian Day Numbers (JDN): integers where JDN 2451545 is
2000-01-01 (Gregorian). Weekdays use 0=Sunday .. 6=Saturday.
"""

from __future__ import annotations

from typing import Protocol, Tuple

from ..core.types import CalendarDate


class CalendarEngine(Protocol):
    """
    Stateless arithmetic for one calendar system. Triples passed in and
    returned are always in the calendar's own numbering.
    """
    @property
    def name(self) -> str: ...

    @property
    def min_year(self) -> int:
        """Lowest year the picker may display or select."""
        ...

    @property
    def max_year(self) -> int: ...

    @property
    def months_in_year(self) -> int: ...

    @property
    def week_start(self) -> int:
        """Default first grid column as a weekday (0=Sunday .. 6=Saturday)."""
        ...

    @property
    def weekend_days(self) -> Tuple[int, ...]: ...

    @property
    def month_names(self) -> Tuple[str, ...]: ...

    def get_days_in_month(self, year: int, month: int) -> int: ...

    def is_leap_year(self, year: int) -> bool: ...

    def to_jdn(self, year: int, month: int, day: int) -> int: ...

    def from_jdn(self, jdn: int) -> CalendarDate: ...

    def to_gregorian(self, year: int, month: int, day: int) -> CalendarDate:
        """Same absolute day as a Gregorian date."""
        ...

    def from_gregorian(self, gy: int, gm: int, gd: int) -> CalendarDate: ...

    def today(self) -> CalendarDate: ...

    def get_weekday_offset(self, year: int, month: int, week_start: int) -> int:
        """
        Grid column (0..6) of the first day of the month when the week
        starts on `week_start`.
        """
        ...

    def make_date(self, year: int, month: int, day: int) -> CalendarDate: ...
