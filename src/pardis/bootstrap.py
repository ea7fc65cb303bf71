from __future__ import annotations
from pardis.core.engine import CalendarRegistry
from pardis.engines.specs import ALL_SPECS
from pardis.engines.factory import make_calendar

def build_registry() -> CalendarRegistry:
    calendars = {}
    for name, spec in ALL_SPECS.items():
        calendars[name] = make_calendar(spec)
    return CalendarRegistry(calendars)
