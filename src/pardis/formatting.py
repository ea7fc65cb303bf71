"""Date string formatting and parsing, including Persian/Arabic-Indic digits."""

from __future__ import annotations

import re
from typing import Optional

from .core.types import CalendarDate

PERSIAN_DIGITS = "۰۱۲۳۴۵۶۷۸۹"
ARABIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"

_TO_PERSIAN = str.maketrans("0123456789", PERSIAN_DIGITS)
_TO_ARABIC = str.maketrans("0123456789", ARABIC_DIGITS)
_FROM_NATIVE = str.maketrans(PERSIAN_DIGITS + ARABIC_DIGITS, "0123456789" * 2)

_SEP_RE = re.compile(r"[/\-.]")


def format_date(year: int, month: int, day: int, sep: str = "/") -> str:
    """YYYY/MM/DD with zero-padded month and day."""
    return f"{year}{sep}{month:02d}{sep}{day:02d}"


def to_persian_digits(s) -> str:
    return str(s).translate(_TO_PERSIAN)


def to_arabic_digits(s) -> str:
    return str(s).translate(_TO_ARABIC)


def from_persian_digits(s: str) -> str:
    """Replace Persian and Arabic-Indic digits with ASCII digits."""
    return s.translate(_FROM_NATIVE)


def format_persian(year: int, month: int, day: int) -> str:
    return to_persian_digits(format_date(year, month, day))


def format_number(n, numeral_type: str = "persian") -> str:
    if numeral_type == "latin":
        return str(n)
    if numeral_type == "arabic":
        return to_arabic_digits(n)
    if numeral_type == "persian":
        return to_persian_digits(n)
    raise ValueError("numeral_type must be 'persian', 'arabic' or 'latin'")


def parse_date_string(s: str) -> Optional[CalendarDate]:
    """
    Parse 'Y/M/D' (also '-' or '.' separated, native digits allowed).
    Returns None when the string is not three integers; the calendar
    validity of the triple is not checked here.
    """
    parts = _SEP_RE.split(from_persian_digits(s.strip()))
    if len(parts) != 3:
        return None
    try:
        y, m, d = (int(p) for p in parts)
    except ValueError:
        return None
    return CalendarDate(y, m, d)
