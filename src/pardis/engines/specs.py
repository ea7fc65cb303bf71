from __future__ import annotations

from dataclasses import replace
from typing import Dict, Tuple

from ..core.types import CalendarSpec


# ============================================================
# MONTH NAMES
# ============================================================

JALALI_MONTHS_FA: Tuple[str, ...] = (
    "فروردین", "اردیبهشت", "خرداد",
    "تیر", "مرداد", "شهریور",
    "مهر", "آبان", "آذر",
    "دی", "بهمن", "اسفند",
)

JALALI_MONTHS_LATIN: Tuple[str, ...] = (
    "Farvardin", "Ordibehesht", "Khordad",
    "Tir", "Mordad", "Shahrivar",
    "Mehr", "Aban", "Azar",
    "Dey", "Bahman", "Esfand",
)

GREGORIAN_MONTHS_EN: Tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


# ============================================================
# WEEKDAYS (0=Sunday .. 6=Saturday)
# ============================================================

SUNDAY, FRIDAY, SATURDAY = 0, 5, 6


# ============================================================
# CALENDAR SPECS
# ============================================================

# The break-point table covers Jalali years -61..3177; the picker exposes only
# the positive era.
JALALI = CalendarSpec(
    name="jalali",
    min_year=1,
    max_year=3177,
    week_start=SATURDAY,
    weekend_days=(FRIDAY,),
    month_names=JALALI_MONTHS_FA,
    meta={"latin_month_names": JALALI_MONTHS_LATIN},
)

# Gregorian grids follow the Western convention (Sunday start, Saturday/Sunday
# weekend) rather than the Jalali one; override via tweak or PickerOptions.week_start.
GREGORIAN = CalendarSpec(
    name="gregorian",
    min_year=1600,
    max_year=2999,
    week_start=SUNDAY,
    weekend_days=(SATURDAY, SUNDAY),
    month_names=GREGORIAN_MONTHS_EN,
)

ALL_SPECS: Dict[str, CalendarSpec] = {
    "jalali": JALALI,
    "gregorian": GREGORIAN,
}


def tweak(spec: CalendarSpec, **kwargs) -> CalendarSpec:
    """Copy of `spec` with some fields replaced (validated again)."""
    return replace(spec, **kwargs)
