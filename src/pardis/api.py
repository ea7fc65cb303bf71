from __future__ import annotations

from typing import Any, Dict, List, Optional

from .core.engine import CalendarRegistry
from .core.types import CalendarDate, CalendarSpec
from .engines.factory import make_calendar as _make_calendar
from .engines.interfaces import CalendarEngine
from .engines.jalali import to_gregorian as _j_to_gregorian, to_jalali as _g_to_jalali
from .picker.engine import PardisEngine
from .picker.options import PickerOptions

_registry: Optional[CalendarRegistry] = None

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def list_calendars() -> List[str]:
    return _reg().list()

def get_calendar(name: str) -> CalendarEngine:
    return _reg().get(name)

def calendar_info(name: str) -> Dict[str, Any]:
    cal = _reg().get(name)
    return {
        "name": cal.name,
        "min_year": cal.min_year,
        "max_year": cal.max_year,
        "months_in_year": cal.months_in_year,
        "week_start": cal.week_start,
        "weekend_days": cal.weekend_days,
        "month_names": cal.month_names,
    }

def make_calendar(spec: CalendarSpec) -> CalendarEngine:
    return _make_calendar(spec)

def register_calendar(name: str, calendar: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, calendar, overwrite=overwrite)

# ============================================================
# Conversions
# ============================================================

def to_jalali(gy: int, gm: int, gd: int) -> CalendarDate:
    """Gregorian -> Jalali."""
    return _g_to_jalali(gy, gm, gd)

def to_gregorian(jy: int, jm: int, jd: int) -> CalendarDate:
    """Jalali -> Gregorian."""
    return _j_to_gregorian(jy, jm, jd)

def convert(year: int, month: int, day: int, *, source: str, target: str) -> CalendarDate:
    """Convert a date between any two registered calendars through its JDN."""
    jdn = _reg().get(source).to_jdn(year, month, day)
    return _reg().get(target).from_jdn(jdn)

def to_jdn(year: int, month: int, day: int, *, calendar: str = "jalali") -> int:
    return _reg().get(calendar).to_jdn(year, month, day)

def from_jdn(jdn: int, *, calendar: str = "jalali") -> CalendarDate:
    return _reg().get(calendar).from_jdn(jdn)

def is_leap_year(year: int, *, calendar: str = "jalali") -> bool:
    return _reg().get(calendar).is_leap_year(year)

def days_in_month(year: int, month: int, *, calendar: str = "jalali") -> int:
    return _reg().get(calendar).get_days_in_month(year, month)

def today(*, calendar: str = "jalali") -> CalendarDate:
    return _reg().get(calendar).today()

# ============================================================
# Picker
# ============================================================

def make_picker(options: Optional[PickerOptions] = None, **overrides: Any) -> PardisEngine:
    """Picker bound to the registered calendar named by options.calendar."""
    opts = options or PickerOptions()
    if overrides:
        opts = opts.tweak(**overrides)
    return PardisEngine(opts, calendar_engine=_reg().get(opts.calendar))
