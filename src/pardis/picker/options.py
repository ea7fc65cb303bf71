"""
pardis.picker.options
---------------------
Picker configuration and constraint normalization.

Constraint dates may be given as CalendarDate, (year, month, day) tuples,
mappings with year/month/day keys, or the legacy jy/jm/jd (gy/gm/gd) keys.
Legacy mappings are still accepted but produce a one-time deprecation notice.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Iterable, Mapping, Optional, Tuple, Union

from ..core.notices import DeprecationNotices
from ..core.types import OUTPUT_FORMATS, CalendarDate, HighlightedDate

DisabledPredicate = Callable[[int, int, int], bool]
DateLike = Union[CalendarDate, Tuple[int, int, int], Mapping[str, Any]]

_LEGACY_KEYS = (("jy", "jm", "jd"), ("gy", "gm", "gd"))

LEGACY_TUPLE_MESSAGE = (
    "pardis: constraint dates with {keys} keys are deprecated; "
    "use CalendarDate or {{year, month, day}} instead."
)


@dataclass(frozen=True)
class PickerOptions:
    calendar: str = "jalali"
    range_mode: bool = False
    output_format: str = "both"
    min_date: Optional[DateLike] = None
    max_date: Optional[DateLike] = None
    disabled_dates: Optional[Union[Iterable[DateLike], DisabledPredicate]] = None
    highlighted_dates: Optional[Iterable[Any]] = None
    max_range: Optional[int] = None
    initial_year: Optional[int] = None
    initial_month: Optional[int] = None
    week_start: Optional[int] = None  # default: the calendar's own week start

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(f"output_format must be one of {OUTPUT_FORMATS}")
        if self.max_range is not None and self.max_range < 1:
            raise ValueError("max_range must be >= 1")
        if self.week_start is not None and not (0 <= self.week_start <= 6):
            raise ValueError("week_start must be in 0..6")

    def tweak(self, **kwargs) -> "PickerOptions":
        return replace(self, **kwargs)


def normalize_date(value: DateLike, notices: DeprecationNotices) -> CalendarDate:
    """Coerce any accepted date shape into an independent CalendarDate."""
    if isinstance(value, CalendarDate):
        return value
    if isinstance(value, tuple) and len(value) == 3:
        return CalendarDate(*(int(v) for v in value))
    if isinstance(value, Mapping):
        if "year" in value:
            return CalendarDate(int(value["year"]), int(value["month"]), int(value["day"]))
        for keys in _LEGACY_KEYS:
            if keys[0] in value:
                notices.notify("legacy-tuple", LEGACY_TUPLE_MESSAGE.format(keys="/".join(keys)))
                return CalendarDate(*(int(value[k]) for k in keys))
    raise ValueError(f"Cannot interpret {value!r} as a calendar date")


def normalize_disabled(
    value: Optional[Union[Iterable[DateLike], DisabledPredicate]],
    notices: DeprecationNotices,
) -> Optional[Union[frozenset, DisabledPredicate]]:
    if value is None:
        return None
    if callable(value):
        return value
    return frozenset(normalize_date(v, notices).as_tuple() for v in value)


def normalize_highlighted(
    value: Optional[Iterable[Any]],
    notices: DeprecationNotices,
) -> Tuple[HighlightedDate, ...]:
    if not value:
        return ()
    out = []
    for item in value:
        if isinstance(item, HighlightedDate):
            out.append(item)
            continue
        class_name = "highlighted"
        if isinstance(item, Mapping):
            class_name = item.get("class_name") or item.get("className") or class_name
        out.append(HighlightedDate(normalize_date(item, notices), class_name))
    return tuple(out)
