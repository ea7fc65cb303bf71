from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Literal, Optional, Tuple

ViewMode = Literal["day", "month", "year"]
OutputFormat = Literal["jalali", "gregorian", "both"]
CalendarName = Literal["jalali", "gregorian"]

VIEW_MODES: Tuple[str, ...] = ("day", "month", "year")
OUTPUT_FORMATS: Tuple[str, ...] = ("jalali", "gregorian", "both")


@dataclass(frozen=True)
class CalendarDate:
    """A (year, month, day) triple in exactly one calendar system."""
    year: int
    month: int
    day: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def matches(self, year: int, month: int, day: int) -> bool:
        return self.year == year and self.month == month and self.day == day


@dataclass(frozen=True)
class HighlightedDate:
    date: CalendarDate
    class_name: str = "highlighted"


@dataclass(frozen=True)
class ViewInfo:
    year: int
    month: int
    month_name: str
    view_mode: ViewMode


@dataclass(frozen=True)
class DateRange:
    start: CalendarDate
    end: CalendarDate


@dataclass(frozen=True)
class CalendarPart:
    """One calendar's rendering of a selected day."""
    year: int
    month: int
    day: int
    month_name: str
    formatted: str
    timestamp: int
    date: Optional[date] = None  # Gregorian parts only
    formatted_persian: Optional[str] = None  # Jalali parts only

    def to_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in self.__dict__.items() if v is not None}


@dataclass(frozen=True)
class DatePayload:
    """Both calendars' view of the same absolute day, produced at selection time."""
    calendar: CalendarName
    output_format: OutputFormat
    jalali: Optional[CalendarPart]
    gregorian: Optional[CalendarPart]
    iso: str
    timestamp: int

    def to_dict(self) -> Dict[str, Any]:
        """Flat dict for single-calendar formats, nested for 'both'."""
        if self.output_format != "both":
            part = self.jalali if self.output_format == "jalali" else self.gregorian
            out = part.to_dict()
            out.update(iso=self.iso, timestamp=self.timestamp)
            return out
        return {
            "calendar": self.calendar,
            "jalali": self.jalali.to_dict(),
            "gregorian": self.gregorian.to_dict(),
            "iso": self.iso,
            "timestamp": self.timestamp,
        }


@dataclass(frozen=True)
class RangePayload:
    start: DatePayload
    end: DatePayload


@dataclass(frozen=True)
class DayCell:
    year: int
    month: int
    day: int
    day_of_week: int  # grid column, 0..6
    is_current_month: bool
    is_today: bool = False
    is_selected: bool = False
    is_range_start: bool = False
    is_range_end: bool = False
    is_in_range: bool = False
    is_in_hover_range: bool = False
    is_hover_range_end: bool = False
    is_disabled: bool = False
    is_weekend: bool = False
    highlight_class: Optional[str] = None


@dataclass(frozen=True)
class MonthCell:
    index: int
    name: str
    is_current: bool
    is_selected: bool


@dataclass(frozen=True)
class YearCell:
    year: int
    is_current: bool
    is_selected: bool


@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a calendar engine."""
    name: CalendarName
    min_year: int
    max_year: int
    week_start: int                 # 0=Sunday .. 6=Saturday
    weekend_days: Tuple[int, ...]   # weekdays, 0=Sunday .. 6=Saturday
    month_names: Tuple[str, ...]
    meta: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.name not in ("jalali", "gregorian"):
            raise ValueError(f"Unknown calendar kind '{self.name}'")
        if self.min_year > self.max_year:
            raise ValueError("Require min_year <= max_year")
        if not (0 <= self.week_start <= 6):
            raise ValueError("week_start must be in 0..6")
        if any(not (0 <= d <= 6) for d in self.weekend_days):
            raise ValueError("weekend_days must be in 0..6")
        if len(self.month_names) != 12:
            raise ValueError("month_names must have 12 entries")
