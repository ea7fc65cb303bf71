"""pardis public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_calendars,
    get_calendar,
    calendar_info,
    make_calendar,
    register_calendar,
    to_jalali,
    to_gregorian,
    convert,
    to_jdn,
    from_jdn,
    is_leap_year,
    days_in_month,
    today,
    make_picker,
)
from .core.errors import InvalidCalendarYear, PardisError, UnknownCalendarError
from .core.notices import DeprecationNotices
from .core.types import CalendarDate, DatePayload, DateRange, RangePayload
from .picker.engine import PardisEngine
from .picker.options import PickerOptions

__all__ = [
    "list_calendars",
    "get_calendar",
    "calendar_info",
    "make_calendar",
    "register_calendar",
    "to_jalali",
    "to_gregorian",
    "convert",
    "to_jdn",
    "from_jdn",
    "is_leap_year",
    "days_in_month",
    "today",
    "make_picker",
    "InvalidCalendarYear",
    "PardisError",
    "UnknownCalendarError",
    "DeprecationNotices",
    "CalendarDate",
    "DatePayload",
    "DateRange",
    "RangePayload",
    "PardisEngine",
    "PickerOptions",
]
