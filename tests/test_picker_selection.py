# tests/test_picker_selection.py

from unittest.mock import patch

import pytest

from pardis.core.types import CalendarDate, RangePayload
from pardis.picker.engine import PardisEngine


@pytest.fixture
def single():
    return PardisEngine(initial_year=1403, initial_month=1)


@pytest.fixture
def ranged():
    return PardisEngine(range_mode=True, initial_year=1403, initial_month=5)


def _record(engine, *events):
    seen = []
    for name in events:
        engine.on(name, lambda data, name=name: seen.append((name, data)))
    return seen


def test_single_select(single):
    seen = _record(single, "select", "viewChange")
    single.select_date(1403, 12, 30)
    assert single.selected_date == CalendarDate(1403, 12, 30)
    assert (single.view_year, single.view_month) == (1403, 12)
    assert [name for name, _ in seen] == ["select"]
    payload = seen[0][1]
    assert (payload.jalali.year, payload.jalali.month, payload.jalali.day) == (1403, 12, 30)
    assert payload.iso == "2025-03-20"
    assert single.is_selected(1403, 12, 30)
    assert not single.is_selected(1403, 12, 29)


def test_range_flow(ranged):
    seen = _record(ranged, "rangeStart", "rangeSelect")
    ranged.select_date(1403, 5, 2)
    assert ranged.range_start == CalendarDate(1403, 5, 2)
    assert ranged.range_end is None
    ranged.select_date(1403, 5, 10)
    assert ranged.range_end == CalendarDate(1403, 5, 10)
    assert [name for name, _ in seen] == ["rangeStart", "rangeSelect"]
    rng = seen[1][1]
    assert isinstance(rng, RangePayload)
    assert rng.start.jalali.day == 2 and rng.end.jalali.day == 10

    assert ranged.is_in_range(1403, 5, 5)
    assert not ranged.is_in_range(1403, 5, 2)
    assert not ranged.is_in_range(1403, 5, 10)
    assert ranged.is_range_start(1403, 5, 2)
    assert ranged.is_range_end(1403, 5, 10)
    assert ranged.is_selected(1403, 5, 10)

    # a third click starts over
    ranged.select_date(1403, 6, 1)
    assert ranged.range_start == CalendarDate(1403, 6, 1)
    assert ranged.range_end is None


def test_reverse_click_swaps(ranged):
    ranged.select_date(1403, 5, 10)
    ranged.select_date(1403, 5, 2)
    assert ranged.range_start == CalendarDate(1403, 5, 2)
    assert ranged.range_end == CalendarDate(1403, 5, 10)


def test_range_across_year_end(ranged):
    ranged.select_date(1404, 1, 3)
    ranged.select_date(1403, 12, 28)
    assert ranged.range_start == CalendarDate(1403, 12, 28)
    assert ranged.is_in_range(1403, 12, 30)
    assert ranged.is_in_range(1404, 1, 1)
    assert not ranged.is_in_range(1404, 1, 4)


def test_max_range():
    e = PardisEngine(range_mode=True, max_range=5, initial_year=1403, initial_month=1)
    seen = _record(e, "rangeSelect")
    e.select_date(1403, 1, 1)
    e.select_date(1403, 1, 10)
    assert e.range_start == CalendarDate(1403, 1, 1)
    assert e.range_end is None
    assert seen == []
    e.select_date(1403, 1, 5)
    assert e.range_end == CalendarDate(1403, 1, 5)
    assert len(seen) == 1


def test_hover_preview(ranged):
    ranged.set_hover_date(1403, 5, 9)
    assert ranged.hover_date is None  # no open range yet

    ranged.select_date(1403, 5, 3)
    ranged.set_hover_date(1403, 5, 9)
    assert ranged.is_in_hover_range(1403, 5, 5)
    assert not ranged.is_in_hover_range(1403, 5, 3)
    assert not ranged.is_in_hover_range(1403, 5, 9)
    assert ranged.is_hover_range_end(1403, 5, 9)

    ranged.clear_hover()
    assert not ranged.is_in_hover_range(1403, 5, 5)

    ranged.set_hover_date(1403, 5, 1)
    assert ranged.is_in_hover_range(1403, 5, 2)
    ranged.select_date(1403, 5, 9)
    assert ranged.hover_date is None
    assert not ranged.is_in_hover_range(1403, 5, 5)


def test_disabled_date_is_ignored():
    e = PardisEngine(disabled_dates=[(1403, 1, 13)], initial_year=1403, initial_month=1)
    seen = _record(e, "select")
    e.select_date(1403, 1, 13)
    assert e.selected_date is None
    assert seen == []


def test_clear_selection(ranged):
    seen = _record(ranged, "clear")
    ranged.select_date(1403, 5, 2)
    ranged.select_date(1403, 5, 4)
    ranged.clear_selection()
    assert (ranged.range_start, ranged.range_end, ranged.hover_date) == (None, None, None)
    assert seen == [("clear", None)]


def test_select_today():
    with patch("pardis.engines.jalali.today_gregorian", return_value=(2025, 3, 26)):
        e = PardisEngine(initial_year=1390, initial_month=3)
    seen = _record(e, "viewChange", "select")
    e.select_today()
    assert e.selected_date == CalendarDate(1404, 1, 6)
    assert (e.view_year, e.view_month) == (1404, 1)
    assert [name for name, _ in seen] == ["viewChange", "select"]


def test_gregorian_select_payload():
    e = PardisEngine(calendar="gregorian", initial_year=2025, initial_month=3)
    seen = _record(e, "select")
    e.select_date(2025, 3, 21)
    payload = seen[0][1]
    assert payload.calendar == "gregorian"
    assert (payload.jalali.year, payload.jalali.month, payload.jalali.day) == (1404, 1, 1)
    assert payload.gregorian.formatted == "2025-03-21"
    assert payload.iso == "2025-03-21"


def test_select_last_day_of_calendar():
    e = PardisEngine(initial_year=3177, initial_month=12)
    seen = _record(e, "select")
    e.select_date(3177, 12, 29)
    payload = seen[0][1]
    assert (payload.jalali.year, payload.jalali.month, payload.jalali.day) == (3177, 12, 29)
    g = e.calendar.to_gregorian(3177, 12, 29)
    assert (payload.gregorian.year, payload.gregorian.month, payload.gregorian.day) == g.as_tuple()
    assert payload.iso == f"{g.year}-{g.month:02d}-{g.day:02d}"


def test_select_dey_of_last_year():
    e = PardisEngine(initial_year=3177, initial_month=11)
    seen = _record(e, "select")
    e.select_date(3177, 11, 1)
    assert seen[0][1].jalali.month == 11
