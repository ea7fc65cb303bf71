# tests/test_formatting.py

import pytest

from pardis.core.types import CalendarDate
from pardis.formatting import (
    format_date,
    format_number,
    format_persian,
    from_persian_digits,
    parse_date_string,
    to_arabic_digits,
    to_persian_digits,
)


def test_format_date_pads():
    assert format_date(1403, 1, 5) == "1403/01/05"
    assert format_date(2025, 3, 21, sep="-") == "2025-03-21"


def test_native_digits():
    assert to_persian_digits("1403/12/30") == "۱۴۰۳/۱۲/۳۰"
    assert to_arabic_digits(1403) == "١٤٠٣"
    assert format_persian(1404, 1, 1) == "۱۴۰۴/۰۱/۰۱"
    assert from_persian_digits("۱۴۰۳/١٢/30") == "1403/12/30"


def test_format_number():
    assert format_number(25) == "۲۵"
    assert format_number(25, "arabic") == "٢٥"
    assert format_number(25, "latin") == "25"
    with pytest.raises(ValueError):
        format_number(25, "roman")


@pytest.mark.parametrize("s", ["1403/12/30", "1403-12-30", "1403.12.30", "۱۴۰۳/۱۲/۳۰", " 1403/12/30 "])
def test_parse_accepts_separators_and_digits(s):
    assert parse_date_string(s) == CalendarDate(1403, 12, 30)


@pytest.mark.parametrize("s", ["", "1403/12", "1403/12/30/1", "abc/de/fg", "1403//30"])
def test_parse_rejects(s):
    assert parse_date_string(s) is None
