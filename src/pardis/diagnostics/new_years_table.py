from __future__ import annotations

from datetime import date
import argparse
from typing import List

from pardis.core.time import jdn_to_date, weekday
from pardis.engines.jalali import MAX_ALGORITHM_YEAR, MIN_ALGORITHM_YEAR, is_leap_jalali_year, j2d
from pardis.engines.specs import GREGORIAN_MONTHS_EN

WEEKDAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")


def nowruz(jy: int) -> date:
    """Gregorian date of 1 Farvardin of Jalali year jy."""
    return jdn_to_date(j2d(jy, 1, 1))


def rows(from_year: int, to_year: int) -> List[tuple[int, date, str, bool]]:
    out = []
    for jy in range(from_year, to_year + 1):
        jdn = j2d(jy, 1, 1)
        out.append((jy, jdn_to_date(jdn), WEEKDAY_NAMES[weekday(jdn)], is_leap_jalali_year(jy)))
    return out


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Nowruz (1 Farvardin) Gregorian date for a span of Jalali years."
    )
    p.add_argument("--from-year", type=int, default=1395)
    p.add_argument("--to-year", type=int, default=1425)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of the Gregorian column (default: iso).",
    )
    args = p.parse_args(argv)

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")
    if Y0 < MIN_ALGORITHM_YEAR or Y1 > MAX_ALGORITHM_YEAR:
        raise SystemExit(f"years must lie within {MIN_ALGORITHM_YEAR}..{MAX_ALGORITHM_YEAR}")

    def fmt(d: date) -> str:
        return f"{d.month:02d}-{d.day:02d}" if args.dates == "mmdd" else d.isoformat()

    headers = ["Year", "Nowruz", "Weekday", "Leap"]
    colw = [5, 10, 9, 4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    by_day: dict[tuple[int, int], int] = {}
    for jy, d, wd, leap in rows(Y0, Y1):
        print("  ".join(s.ljust(w) for s, w in zip((str(jy), fmt(d), wd, "L" if leap else ""), colw)))
        by_day[(d.month, d.day)] = by_day.get((d.month, d.day), 0) + 1

    print("\nNowruz day distribution:")
    for (m, d), n in sorted(by_day.items()):
        print(f"  {GREGORIAN_MONTHS_EN[m - 1]} {d}: {n}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
