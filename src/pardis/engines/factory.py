"""
pardis.engines.factory
----------------------
Builds live calendar engines from CalendarSpec records.
"""

from __future__ import annotations

from ..core.types import CalendarSpec
from .gregorian import GregorianCalendar
from .interfaces import CalendarEngine
from .jalali import JalaliCalendar


def make_calendar(spec: CalendarSpec) -> CalendarEngine:
    """The universal entry point."""
    if spec.name == "jalali":
        return JalaliCalendar(spec)
    if spec.name == "gregorian":
        return GregorianCalendar(spec)
    raise TypeError(f"Unknown calendar spec: {spec.name!r}")
