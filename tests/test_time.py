# tests/test_time.py

import random
from datetime import date

from pardis.core import time as jt

# date.toordinal() is 1 on 0001-01-01, whose JDN is 1721426
ORDINAL_TO_JDN = 1721425


def test_known_epochs():
    assert jt.to_jdn(2000, 1, 1) == 2451545
    assert jt.to_jdn(1970, 1, 1) == jt.JDN_UNIX_EPOCH
    assert jt.jdn_to_timestamp_ms(jt.JDN_UNIX_EPOCH) == 0


def test_truncating_division():
    assert jt._div(7, 2) == 3
    assert jt._div(-7, 2) == -3
    assert jt._div(-7, 6) == -1
    assert jt._div(7, -2) == -3
    assert jt._mod(-7, 6) == -1
    assert jt._mod(7, 6) == 1
    assert jt._mod(-12, 4) == 0


def test_jdn_matches_stdlib_ordinal():
    random.seed(42)
    for _ in range(5000):
        d = date.fromordinal(random.randint(date(1, 1, 1).toordinal(), date(9999, 12, 31).toordinal()))
        jdn = jt.date_to_jdn(d)
        assert jdn == d.toordinal() + ORDINAL_TO_JDN
        assert jt.jdn_to_date(jdn) == d


def test_jdn_roundtrip_supported_window():
    start = jt.to_jdn(1600, 1, 1)
    end = jt.to_jdn(2999, 12, 31)
    random.seed(7)
    for _ in range(5000):
        jdn = random.randint(start, end)
        assert jt.to_jdn(*jt.from_jdn(jdn)) == jdn


def test_weekday():
    # 2000-01-01 was a Saturday, 2025-03-21 a Friday
    assert jt.weekday(jt.to_jdn(2000, 1, 1)) == 6
    assert jt.weekday(jt.to_jdn(2025, 3, 21)) == 5
    d = date(2024, 2, 29)
    assert jt.weekday(jt.date_to_jdn(d)) == d.isoweekday() % 7


def test_timestamp_is_utc_midnight():
    assert jt.jdn_to_timestamp_ms(jt.to_jdn(2025, 3, 21)) == 1742515200000
