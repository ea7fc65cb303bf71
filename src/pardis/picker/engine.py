"""
pardis.picker.engine
--------------------
PardisEngine: the headless picker state machine. Owns the view position, the
selection (single or range) and the constraints; asks a CalendarEngine for all
arithmetic and publishes changes through an EventEmitter. It holds no
rendering state and never branches on which calendar is active.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from ..core.errors import UnknownCalendarError
from ..core.notices import DEFAULT_NOTICES, DeprecationNotices
from ..core.types import (
    VIEW_MODES,
    CalendarDate,
    DateRange,
    DayCell,
    MonthCell,
    RangePayload,
    ViewInfo,
    YearCell,
)
from ..engines.factory import make_calendar
from ..engines.interfaces import CalendarEngine
from ..engines.specs import ALL_SPECS
from .events import EventEmitter
from .options import PickerOptions, normalize_date, normalize_disabled, normalize_highlighted
from .payload import PAYLOAD_BUILDERS
from .presets import compute_preset

LOG = logging.getLogger(__name__)

_UNSET: Any = object()
_NEXT_VIEW_MODE = {"day": "month", "month": "year", "year": "day"}


class PardisEngine:
    def __init__(
        self,
        options: Optional[PickerOptions] = None,
        *,
        calendar_engine: Optional[CalendarEngine] = None,
        notices: Optional[DeprecationNotices] = None,
        **overrides: Any,
    ):
        opts = options or PickerOptions()
        if overrides:
            opts = opts.tweak(**overrides)
        self.options = opts
        self.notices = notices if notices is not None else DEFAULT_NOTICES

        calendar = calendar_engine
        if calendar is None:
            if opts.calendar not in ALL_SPECS:
                raise UnknownCalendarError(f"Unknown calendar '{opts.calendar}'. Available: {sorted(ALL_SPECS)}")
            calendar = make_calendar(ALL_SPECS[opts.calendar])
        self.calendar = calendar
        self._build_payload = PAYLOAD_BUILDERS[calendar.name]

        self.range_mode = bool(opts.range_mode)
        self.output_format = opts.output_format
        self.week_start = opts.week_start if opts.week_start is not None else calendar.week_start

        self._apply_constraints(
            opts.min_date, opts.max_date, opts.disabled_dates, opts.highlighted_dates, opts.max_range
        )

        self.today: CalendarDate = calendar.today()

        self.view_year = opts.initial_year or self.today.year
        self.view_month = opts.initial_month or self.today.month
        self.view_mode = "day"
        self._clamp_view()

        self.selected_date: Optional[CalendarDate] = None
        self.range_start: Optional[CalendarDate] = None
        self.range_end: Optional[CalendarDate] = None
        self.hover_date: Optional[CalendarDate] = None

        self._events = EventEmitter()

    # ---------------------------------------------------------
    # Events
    # ---------------------------------------------------------

    def on(self, event: str, fn: Callable[[Any], None]) -> Callable[[], None]:
        return self._events.on(event, fn)

    def off(self, event: str, fn: Callable[[Any], None]) -> None:
        self._events.off(event, fn)

    def emit(self, event: str, data: Any = None) -> None:
        self._events.emit(event, data)

    # ---------------------------------------------------------
    # Constraints
    # ---------------------------------------------------------

    def _apply_constraints(self, min_date, max_date, disabled, highlighted, max_range) -> None:
        cal = self.calendar
        self.min_date = normalize_date(min_date, self.notices) if min_date is not None else None
        self.max_date = normalize_date(max_date, self.notices) if max_date is not None else None
        self.max_range: Optional[int] = max_range

        self._min_jdn = cal.to_jdn(*self.min_date.as_tuple()) if self.min_date else None
        self._max_jdn = cal.to_jdn(*self.max_date.as_tuple()) if self.max_date else None

        self.disabled_dates = normalize_disabled(disabled, self.notices)
        if self.disabled_dates is None or callable(self.disabled_dates):
            self._disabled_jdns = frozenset()
        else:
            self._disabled_jdns = frozenset(cal.to_jdn(*t) for t in self.disabled_dates)

        self.highlighted_dates = normalize_highlighted(highlighted, self.notices)
        self._highlight_by_jdn: Dict[int, str] = {}
        for h in self.highlighted_dates:
            self._highlight_by_jdn.setdefault(cal.to_jdn(*h.date.as_tuple()), h.class_name)

    def set_constraints(
        self,
        *,
        min_date: Any = _UNSET,
        max_date: Any = _UNSET,
        disabled_dates: Any = _UNSET,
        highlighted_dates: Any = _UNSET,
        max_range: Any = _UNSET,
    ) -> None:
        """Replace some constraints; arguments left out keep their current value."""
        changes = {
            k: v for k, v in {
                "min_date": min_date,
                "max_date": max_date,
                "disabled_dates": disabled_dates,
                "highlighted_dates": highlighted_dates,
                "max_range": max_range,
            }.items() if v is not _UNSET
        }
        self.options = self.options.tweak(**changes)
        o = self.options
        self._apply_constraints(o.min_date, o.max_date, o.disabled_dates, o.highlighted_dates, o.max_range)

    def _exceeds_max_range(self, start_jdn: int, end_jdn: int) -> bool:
        return self.max_range is not None and abs(end_jdn - start_jdn) + 1 > self.max_range

    # ---------------------------------------------------------
    # Navigation
    # ---------------------------------------------------------

    def _view_key(self):
        return (self.view_year, self.view_month, self.view_mode)

    def _clamp_view(self) -> None:
        cal = self.calendar
        self.view_year = min(max(self.view_year, cal.min_year), cal.max_year)
        self.view_month = min(max(self.view_month, 1), cal.months_in_year)

    def _move_view(self, year: int, month: int, mode: Optional[str] = None) -> None:
        before = self._view_key()
        self.view_year, self.view_month = year, month
        if mode is not None:
            self.view_mode = mode
        self._clamp_view()
        if self._view_key() != before:
            self.emit("viewChange", self.get_view_info())

    def next_month(self) -> None:
        cal = self.calendar
        if self.view_year >= cal.max_year and self.view_month == cal.months_in_year:
            return
        if self.view_month == cal.months_in_year:
            self._move_view(self.view_year + 1, 1)
        else:
            self._move_view(self.view_year, self.view_month + 1)

    def prev_month(self) -> None:
        cal = self.calendar
        if self.view_year <= cal.min_year and self.view_month == 1:
            return
        if self.view_month == 1:
            self._move_view(self.view_year - 1, cal.months_in_year)
        else:
            self._move_view(self.view_year, self.view_month - 1)

    def next_year(self) -> None:
        self._move_view(self.view_year + 1, self.view_month)

    def prev_year(self) -> None:
        self._move_view(self.view_year - 1, self.view_month)

    def next_decade(self) -> None:
        # one year-grid page
        self._move_view(self.view_year + 12, self.view_month)

    def prev_decade(self) -> None:
        self._move_view(self.view_year - 12, self.view_month)

    def go_to_today(self) -> None:
        self._move_view(self.today.year, self.today.month, "day")

    def go_to_date(self, year: int, month: int) -> None:
        self._move_view(year, month)

    def select_today(self) -> None:
        """Show today's month and, in single mode, select today."""
        self.go_to_today()
        if not self.range_mode:
            self.select_date(*self.today.as_tuple())

    def set_view_mode(self, mode: str) -> None:
        if mode not in VIEW_MODES:
            raise ValueError(f"view_mode must be one of {VIEW_MODES}")
        self._move_view(self.view_year, self.view_month, mode)

    def toggle_view_mode(self) -> None:
        self.set_view_mode(_NEXT_VIEW_MODE[self.view_mode])

    # ---------------------------------------------------------
    # Selection
    # ---------------------------------------------------------

    def _payload(self, d: CalendarDate):
        return self._build_payload(d.year, d.month, d.day, self.output_format)

    def select_date(self, year: int, month: int, day: int) -> None:
        if self.is_disabled(year, month, day):
            LOG.debug("rejected disabled date %d/%d/%d", year, month, day)
            return
        cal = self.calendar
        picked = cal.make_date(year, month, day)

        if not self.range_mode:
            self.selected_date = picked
            self.view_year, self.view_month = year, month
            self.emit("select", self._payload(picked))
            return

        if self.range_start is None or self.range_end is not None:
            self.range_start = picked
            self.range_end = None
            self.emit("rangeStart", self._payload(picked))
            return

        start_jdn = cal.to_jdn(*self.range_start.as_tuple())
        end_jdn = cal.to_jdn(year, month, day)
        if self._exceeds_max_range(start_jdn, end_jdn):
            LOG.debug("rejected range of %d days (max_range=%s)", abs(end_jdn - start_jdn) + 1, self.max_range)
            return
        if end_jdn < start_jdn:
            self.range_start, self.range_end = picked, self.range_start
        else:
            self.range_end = picked
        self.hover_date = None
        self.emit("rangeSelect", RangePayload(self._payload(self.range_start), self._payload(self.range_end)))

    def set_hover_date(self, year: int, month: int, day: int) -> None:
        """Preview end point while a range is open; ignored otherwise."""
        if self.range_mode and self.range_start is not None and self.range_end is None:
            self.hover_date = self.calendar.make_date(year, month, day)

    def clear_hover(self) -> None:
        self.hover_date = None

    def clear_selection(self) -> None:
        self.selected_date = None
        self.range_start = None
        self.range_end = None
        self.hover_date = None
        self.emit("clear", None)

    def get_preset_range(self, name: str) -> Optional[DateRange]:
        return compute_preset(self.calendar, self.today, name)

    def apply_preset(self, name: str) -> None:
        rng = self.get_preset_range(name)
        if rng is None:
            LOG.debug("unknown preset %r", name)
            return
        cal = self.calendar
        if self._exceeds_max_range(cal.to_jdn(*rng.start.as_tuple()), cal.to_jdn(*rng.end.as_tuple())):
            LOG.debug("preset %r exceeds max_range=%s", name, self.max_range)
            return
        self.range_start = rng.start
        self.range_end = rng.end
        self.hover_date = None
        self.emit("rangeSelect", RangePayload(self._payload(rng.start), self._payload(rng.end)))
        self.emit("viewChange", self.get_view_info())

    # ---------------------------------------------------------
    # Queries
    # ---------------------------------------------------------

    def _in_bounds(self, year: int) -> bool:
        return self.calendar.min_year <= year <= self.calendar.max_year

    def is_disabled(self, year: int, month: int, day: int) -> bool:
        if not self._in_bounds(year):
            return True
        jdn = self.calendar.to_jdn(year, month, day)
        if self._min_jdn is not None and jdn < self._min_jdn:
            return True
        if self._max_jdn is not None and jdn > self._max_jdn:
            return True
        if callable(self.disabled_dates):
            return bool(self.disabled_dates(year, month, day))
        return jdn in self._disabled_jdns

    def get_highlight_class(self, year: int, month: int, day: int) -> Optional[str]:
        if not self._highlight_by_jdn or not self._in_bounds(year):
            return None
        return self._highlight_by_jdn.get(self.calendar.to_jdn(year, month, day))

    def is_today(self, year: int, month: int, day: int) -> bool:
        return self.today.matches(year, month, day)

    def is_range_start(self, year: int, month: int, day: int) -> bool:
        return self.range_start is not None and self.range_start.matches(year, month, day)

    def is_range_end(self, year: int, month: int, day: int) -> bool:
        return self.range_end is not None and self.range_end.matches(year, month, day)

    def is_selected(self, year: int, month: int, day: int) -> bool:
        if self.range_mode:
            return self.is_range_start(year, month, day) or self.is_range_end(year, month, day)
        return self.selected_date is not None and self.selected_date.matches(year, month, day)

    def _strictly_between(self, year: int, month: int, day: int, a: CalendarDate, b: CalendarDate) -> bool:
        cal = self.calendar
        jdn = cal.to_jdn(year, month, day)
        lo, hi = sorted((cal.to_jdn(*a.as_tuple()), cal.to_jdn(*b.as_tuple())))
        return lo < jdn < hi

    def is_in_range(self, year: int, month: int, day: int) -> bool:
        if not self._in_bounds(year) or self.range_start is None or self.range_end is None:
            return False
        return self._strictly_between(year, month, day, self.range_start, self.range_end)

    def is_in_hover_range(self, year: int, month: int, day: int) -> bool:
        if not self._in_bounds(year):
            return False
        if self.range_start is None or self.range_end is not None or self.hover_date is None:
            return False
        return self._strictly_between(year, month, day, self.range_start, self.hover_date)

    def is_hover_range_end(self, year: int, month: int, day: int) -> bool:
        if self.range_start is None or self.range_end is not None or self.hover_date is None:
            return False
        return self.hover_date.matches(year, month, day)

    def is_weekend(self, column: int) -> bool:
        """Whether grid column 0..6 falls on a weekend day."""
        return (column + self.week_start) % 7 in self.calendar.weekend_days

    # ---------------------------------------------------------
    # Grids
    # ---------------------------------------------------------

    def _make_cell(self, year: int, month: int, day: int, column: int, is_current_month: bool) -> DayCell:
        return DayCell(
            year=year,
            month=month,
            day=day,
            day_of_week=column,
            is_current_month=is_current_month,
            is_today=self.is_today(year, month, day),
            is_selected=self.is_selected(year, month, day),
            is_range_start=self.is_range_start(year, month, day),
            is_range_end=self.is_range_end(year, month, day),
            is_in_range=self.is_in_range(year, month, day),
            is_in_hover_range=self.is_in_hover_range(year, month, day),
            is_hover_range_end=self.is_hover_range_end(year, month, day),
            is_disabled=self.is_disabled(year, month, day),
            is_weekend=self.is_weekend(column),
            highlight_class=self.get_highlight_class(year, month, day),
        )

    def get_days_of_month(self) -> List[DayCell]:
        """
        7-column grid for the view month: trailing days of the previous month,
        the month itself, and leading days of the next month up to a full week.
        """
        cal = self.calendar
        year, month = self.view_year, self.view_month
        days_in_month = cal.get_days_in_month(year, month)
        offset = cal.get_weekday_offset(year, month, self.week_start)

        days: List[DayCell] = []

        if offset > 0:
            prev_year, prev_month = (year - 1, cal.months_in_year) if month == 1 else (year, month - 1)
            prev_days = cal.get_days_in_month(prev_year, prev_month)
            for col in range(offset):
                days.append(self._make_cell(prev_year, prev_month, prev_days - offset + 1 + col, col, False))

        for d in range(1, days_in_month + 1):
            days.append(self._make_cell(year, month, d, (offset + d - 1) % 7, True))

        remainder = len(days) % 7
        if remainder:
            next_year, next_month = (year + 1, 1) if month == cal.months_in_year else (year, month + 1)
            for d in range(1, 7 - remainder + 1):
                days.append(self._make_cell(next_year, next_month, d, (offset + days_in_month + d - 1) % 7, False))

        return days

    def get_months(self) -> List[MonthCell]:
        sel = self.selected_date
        return [
            MonthCell(
                index=i,
                name=name,
                is_current=(self.today.year == self.view_year and self.today.month == i),
                is_selected=(sel is not None and sel.year == self.view_year and sel.month == i),
            )
            for i, name in enumerate(self.calendar.month_names, start=1)
        ]

    def get_years(self) -> List[YearCell]:
        """Twelve consecutive years around the view year, kept inside the calendar bounds."""
        min_y, max_y = self.calendar.min_year, self.calendar.max_year
        start = max(self.view_year - 5, min_y)
        if start + 11 > max_y:
            start = max(min_y, max_y - 11)
        sel = self.selected_date
        return [
            YearCell(
                year=y,
                is_current=(y == self.today.year),
                is_selected=(sel is not None and sel.year == y),
            )
            for y in range(start, min(start + 12, max_y + 1))
        ]

    def get_view_info(self) -> ViewInfo:
        return ViewInfo(
            year=self.view_year,
            month=self.view_month,
            month_name=self.calendar.month_names[self.view_month - 1],
            view_mode=self.view_mode,
        )

    def __repr__(self) -> str:
        mode = "range" if self.range_mode else "single"
        return f"PardisEngine({self.calendar.name}, {mode}, view={self.view_year}/{self.view_month})"
