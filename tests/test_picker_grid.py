# tests/test_picker_grid.py

from unittest.mock import patch

import pytest

from pardis.picker.engine import PardisEngine


def _current(cells):
    return [c for c in cells if c.is_current_month]


@pytest.mark.parametrize("year, days", [(1403, 30), (1402, 29)])
def test_esfand_length(year, days):
    e = PardisEngine(initial_year=year, initial_month=12)
    cells = e.get_days_of_month()
    assert len(_current(cells)) == days
    assert len(cells) % 7 == 0


def test_jalali_layout():
    # 1403/12/1 is a Wednesday; weeks start on Saturday
    e = PardisEngine(initial_year=1403, initial_month=12)
    cells = e.get_days_of_month()
    assert len(cells) == 35
    assert [(c.month, c.day) for c in cells[:4]] == [(11, 27), (11, 28), (11, 29), (11, 30)]
    assert (cells[4].day, cells[4].day_of_week) == (1, 4)
    assert (cells[-1].year, cells[-1].month, cells[-1].day) == (1404, 1, 1)
    assert [c.day_of_week for c in cells[:7]] == list(range(7))
    # Friday is the last column
    assert [c.is_weekend for c in cells[:7]] == [False] * 6 + [True]


def test_gregorian_layout():
    # 2025-01-01 is a Wednesday; weeks start on Sunday
    e = PardisEngine(calendar="gregorian", initial_year=2025, initial_month=1)
    cells = e.get_days_of_month()
    assert len(cells) == 35
    assert (cells[0].year, cells[0].month, cells[0].day) == (2024, 12, 29)
    assert cells[3].day == 1 and cells[3].is_current_month
    assert [c.is_weekend for c in cells[:7]] == [True, False, False, False, False, False, True]


def test_week_start_override():
    e = PardisEngine(calendar="gregorian", initial_year=2025, initial_month=1, week_start=1)
    cells = e.get_days_of_month()
    assert cells[2].day == 1 and cells[2].is_current_month
    assert [c.is_weekend for c in cells[:7]] == [False] * 5 + [True, True]


def test_cell_flags():
    with patch("pardis.engines.jalali.today_gregorian", return_value=(2025, 3, 12)):
        e = PardisEngine(
            range_mode=True,
            initial_year=1403,
            initial_month=12,
            min_date=(1403, 12, 3),
            highlighted_dates=[(1403, 12, 29)],
        )
    e.select_date(1403, 12, 5)
    e.select_date(1403, 12, 8)
    by_day = {c.day: c for c in _current(e.get_days_of_month())}
    assert by_day[2].is_disabled and not by_day[3].is_disabled
    assert by_day[5].is_range_start and by_day[5].is_selected
    assert by_day[6].is_in_range and by_day[7].is_in_range
    assert by_day[8].is_range_end
    # 2025-03-12 is 1403/12/22
    assert by_day[22].is_today
    assert by_day[29].highlight_class == "highlighted"


def test_last_month_of_calendar_does_not_raise():
    e = PardisEngine(initial_year=3177, initial_month=12)
    cells = e.get_days_of_month()
    spill = [c for c in cells if c.year == 3178]
    assert all(c.is_disabled for c in spill)


def test_months_grid():
    e = PardisEngine(initial_year=1403, initial_month=1)
    e.select_date(1403, 7, 1)
    months = e.get_months()
    assert [m.index for m in months] == list(range(1, 13))
    assert months[11].name == "اسفند"
    assert [m.index for m in months if m.is_selected] == [7]


def test_view_info():
    e = PardisEngine(calendar="gregorian", initial_year=2025, initial_month=3)
    info = e.get_view_info()
    assert (info.year, info.month, info.month_name, info.view_mode) == (2025, 3, "March", "day")
