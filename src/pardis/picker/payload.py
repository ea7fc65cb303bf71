"""
pardis.picker.payload
---------------------
DatePayload construction. The cross-calendar part is always derived from the
native date through the conversion algorithms, so both parts name the same
absolute day.
"""

from __future__ import annotations

from typing import Tuple

from ..core.time import jdn_to_date, jdn_to_timestamp_ms, to_jdn
from ..core.types import CalendarPart, DatePayload
from ..engines.interfaces import CalendarEngine
from ..engines.jalali import d2j, j2d
from ..engines.specs import GREGORIAN_MONTHS_EN, JALALI_MONTHS_FA
from ..formatting import format_date, format_persian


def _jalali_part(jy: int, jm: int, jd: int, timestamp: int) -> CalendarPart:
    return CalendarPart(
        year=jy,
        month=jm,
        day=jd,
        month_name=JALALI_MONTHS_FA[jm - 1],
        formatted=format_date(jy, jm, jd),
        timestamp=timestamp,
        formatted_persian=format_persian(jy, jm, jd),
    )


def _gregorian_part(jdn: int, timestamp: int) -> CalendarPart:
    d = jdn_to_date(jdn)
    return CalendarPart(
        year=d.year,
        month=d.month,
        day=d.day,
        month_name=GREGORIAN_MONTHS_EN[d.month - 1],
        formatted=d.isoformat(),
        timestamp=timestamp,
        date=d,
    )


def _payload(calendar: str, jdn: int, jalali: Tuple[int, int, int], output_format: str) -> DatePayload:
    ts = jdn_to_timestamp_ms(jdn)
    greg = _gregorian_part(jdn, ts)
    return DatePayload(
        calendar=calendar,
        output_format=output_format,
        jalali=_jalali_part(*jalali, ts) if output_format != "gregorian" else None,
        gregorian=greg if output_format != "jalali" else None,
        iso=greg.formatted,
        timestamp=ts,
    )


def build_jalali_payload(jy: int, jm: int, jd: int, output_format: str = "both") -> DatePayload:
    # the native triple is used as given; only the Gregorian side is converted
    return _payload("jalali", j2d(jy, jm, jd), (jy, jm, jd), output_format)


def build_gregorian_payload(gy: int, gm: int, gd: int, output_format: str = "both") -> DatePayload:
    jdn = to_jdn(gy, gm, gd)
    return _payload("gregorian", jdn, d2j(jdn), output_format)


PAYLOAD_BUILDERS = {
    "jalali": build_jalali_payload,
    "gregorian": build_gregorian_payload,
}


def build_payload(calendar: CalendarEngine, year: int, month: int, day: int, output_format: str = "both") -> DatePayload:
    return PAYLOAD_BUILDERS[calendar.name](year, month, day, output_format)
