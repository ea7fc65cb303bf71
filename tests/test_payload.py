# tests/test_payload.py

from datetime import date

import pytest

from pardis.engines.factory import make_calendar
from pardis.engines.specs import GREGORIAN
from pardis.picker.payload import (
    PAYLOAD_BUILDERS,
    build_gregorian_payload,
    build_jalali_payload,
    build_payload,
)

NOWRUZ_1404_MS = 1742515200000


def test_both_calendars_name_the_same_day():
    p = build_jalali_payload(1404, 1, 1)
    assert p.calendar == "jalali"
    assert (p.jalali.year, p.jalali.month, p.jalali.day) == (1404, 1, 1)
    assert (p.gregorian.year, p.gregorian.month, p.gregorian.day) == (2025, 3, 21)
    assert p.jalali.month_name == "فروردین"
    assert p.gregorian.month_name == "March"
    assert p.jalali.formatted == "1404/01/01"
    assert p.jalali.formatted_persian == "۱۴۰۴/۰۱/۰۱"
    assert p.gregorian.date == date(2025, 3, 21)
    assert p.iso == "2025-03-21"
    assert p.timestamp == p.jalali.timestamp == p.gregorian.timestamp == NOWRUZ_1404_MS


def test_gregorian_source():
    p = build_gregorian_payload(2025, 3, 21)
    assert p.calendar == "gregorian"
    assert (p.jalali.year, p.jalali.month, p.jalali.day) == (1404, 1, 1)
    assert p.gregorian.formatted == "2025-03-21"


def test_leap_day_of_esfand():
    p = build_jalali_payload(1403, 12, 30)
    assert p.iso == "2025-03-20"


@pytest.mark.parametrize("fmt, present, absent", [("jalali", "jalali", "gregorian"), ("gregorian", "gregorian", "jalali")])
def test_single_format(fmt, present, absent):
    p = build_jalali_payload(1404, 1, 1, fmt)
    assert getattr(p, present) is not None
    assert getattr(p, absent) is None
    flat = p.to_dict()
    assert flat["iso"] == "2025-03-21"
    assert flat["timestamp"] == NOWRUZ_1404_MS
    assert "month_name" in flat
    assert "calendar" not in flat


def test_both_format_dict_is_nested():
    d = build_jalali_payload(1404, 1, 1).to_dict()
    assert set(d) == {"calendar", "jalali", "gregorian", "iso", "timestamp"}
    assert d["jalali"]["formatted_persian"] == "۱۴۰۴/۰۱/۰۱"
    assert "date" not in d["jalali"]
    assert d["gregorian"]["date"] == date(2025, 3, 21)


def test_builder_lookup():
    assert set(PAYLOAD_BUILDERS) == {"jalali", "gregorian"}
    cal = make_calendar(GREGORIAN)
    assert build_payload(cal, 2025, 3, 21) == build_gregorian_payload(2025, 3, 21)
