from __future__ import annotations

import argparse
from typing import List, Optional

from pardis.engines.jalali import to_jalali
from pardis.picker.engine import PardisEngine

WEEKDAY_ABBR = ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa")


def dow_header(week_start: int) -> str:
    return " ".join(WEEKDAY_ABBR[(week_start + i) % 7].ljust(6) for i in range(7)).rstrip()


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def render_grid(title: str, week_start: int, weeks: list[list[tuple[str, str]]]) -> str:
    header = dow_header(week_start)
    lines = [title, header, "-" * len(header)]
    for wk in weeks:
        lines.append(" ".join(c[0] for c in wk))
        lines.append(" ".join(c[1] for c in wk))
    return "\n".join(lines) + "\n"


def _other_label(calendar: str, eng: PardisEngine, year: int, month: int, day: int) -> str:
    g = eng.calendar.to_gregorian(year, month, day)
    if calendar == "jalali":
        return f"{g.month:02d}-{g.day:02d}"
    j = to_jalali(g.year, g.month, g.day)
    return f"{j.month:02d}-{j.day:02d}"


def month_calendar(calendar: str, year: int, month: int, *, week_start: Optional[int] = None) -> str:
    """
    Month grid with the other calendar's MM-DD label under each day.
    Filler days of neighbouring months are left blank; today is starred.
    """
    eng = PardisEngine(calendar=calendar, initial_year=year, initial_month=month, week_start=week_start)
    year, month = eng.view_year, eng.view_month  # clamped

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    for c in eng.get_days_of_month():
        if c.is_current_month:
            mark = "*" if c.is_today else ""
            wk.append(cell(f"{c.day:2d}{mark}", _other_label(calendar, eng, c.year, c.month, c.day)))
        else:
            wk.append(cell("", ""))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []

    info = eng.get_view_info()
    days = eng.calendar.get_days_in_month(year, month)
    title = f"{calendar} month  {year}-{month:02d}  {info.month_name}  ({days} days)"
    return render_grid(title, eng.week_start, weeks)


def main(argv: List[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Jalali and/or Gregorian month grid with paired labels."
    )
    p.add_argument("--jalali", nargs=2, type=int, metavar=("JY", "JM"),
                   help="Jalali month to print: JY JM (e.g. 1403 12)")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2025 3)")
    p.add_argument("--week-start", type=int, default=None, choices=range(7),
                   help="0=Sunday .. 6=Saturday (default: the calendar's own)")
    args = p.parse_args(argv)

    if not args.jalali and not args.greg:
        # sensible default demo
        print(month_calendar("jalali", 1403, 12, week_start=args.week_start))
        print(month_calendar("gregorian", 2025, 3, week_start=args.week_start))
        return 0

    if args.jalali:
        jy, jm = args.jalali
        print(month_calendar("jalali", jy, jm, week_start=args.week_start))

    if args.greg:
        gy, gm = args.greg
        print(month_calendar("gregorian", gy, gm, week_start=args.week_start))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
