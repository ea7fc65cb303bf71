# tests/test_picker_navigation.py

import pytest

from pardis.core.types import ViewInfo
from pardis.engines.factory import make_calendar
from pardis.engines.specs import JALALI, tweak
from pardis.picker.engine import PardisEngine


def _engine(**kw):
    kw.setdefault("initial_year", 1403)
    kw.setdefault("initial_month", 6)
    return PardisEngine(**kw)


def _record(engine, event="viewChange"):
    seen = []
    engine.on(event, seen.append)
    return seen


def test_next_month_rolls_year():
    e = _engine(initial_month=12)
    seen = _record(e)
    e.next_month()
    assert (e.view_year, e.view_month) == (1404, 1)
    assert seen == [ViewInfo(year=1404, month=1, month_name="فروردین", view_mode="day")]


def test_prev_month_rolls_year():
    e = _engine(initial_month=1)
    e.prev_month()
    assert (e.view_year, e.view_month) == (1402, 12)


def test_prev_month_converges_to_lower_bound():
    e = _engine()
    for _ in range(100000):
        e.prev_month()
    assert (e.view_year, e.view_month) == (1, 1)


def test_year_and_decade_clamp():
    e = _engine()
    for _ in range(5000):
        e.prev_year()
    assert e.view_year == 1
    for _ in range(2000):
        e.next_decade()
    assert e.view_year == 3177
    for _ in range(2000):
        e.prev_decade()
    assert e.view_year == 1


def test_boundaries_do_not_emit():
    e = _engine(initial_year=1, initial_month=1)
    seen = _record(e)
    e.prev_month()
    e.prev_year()
    e.prev_decade()
    assert seen == []
    assert (e.view_year, e.view_month) == (1, 1)

    e = _engine(initial_year=3177, initial_month=12)
    seen = _record(e)
    e.next_month()
    e.next_year()
    e.next_decade()
    assert seen == []
    assert (e.view_year, e.view_month) == (3177, 12)


def test_initial_view_is_clamped():
    e = _engine(initial_year=5000, initial_month=13)
    assert (e.view_year, e.view_month) == (3177, 12)


def test_go_to_date_clamps():
    e = _engine()
    e.go_to_date(-40, 0)
    assert (e.view_year, e.view_month) == (1, 1)
    e.go_to_date(1390, 7)
    assert (e.view_year, e.view_month) == (1390, 7)


def test_go_to_today_resets_view_mode():
    e = _engine()
    e.set_view_mode("year")
    e.go_to_today()
    assert (e.view_year, e.view_month, e.view_mode) == (e.today.year, e.today.month, "day")


def test_view_modes():
    e = _engine()
    seen = _record(e)
    e.toggle_view_mode()
    e.toggle_view_mode()
    e.toggle_view_mode()
    assert [v.view_mode for v in seen] == ["month", "year", "day"]
    with pytest.raises(ValueError):
        e.set_view_mode("week")


def test_get_years_stays_in_bounds():
    e = _engine(initial_year=1)
    years = [c.year for c in e.get_years()]
    assert years == list(range(1, 13))

    e = _engine(initial_year=3177)
    years = [c.year for c in e.get_years()]
    assert years == list(range(3166, 3178))

    e = _engine(initial_year=1403)
    years = [c.year for c in e.get_years()]
    assert years[0] == 1398 and len(years) == 12


def test_narrow_calendar_bounds():
    cal = make_calendar(tweak(JALALI, min_year=1400, max_year=1405))
    e = PardisEngine(calendar_engine=cal, initial_year=1403, initial_month=1)
    for _ in range(100):
        e.prev_month()
    assert (e.view_year, e.view_month) == (1400, 1)
    assert [c.year for c in e.get_years()] == [1400, 1401, 1402, 1403, 1404, 1405]
