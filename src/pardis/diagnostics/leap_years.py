#!/usr/bin/env python3
"""
Jalali leap years from the break-point algorithm, compared with the plain
33-year arithmetic rule ((25*jy + 11) mod 33 < 8). The two agree over long
stretches and part ways near the break-point table entries.
"""
from __future__ import annotations

import argparse
from typing import List, Optional

from pardis.engines.jalali import BREAKS, is_leap_jalali_year


def is_leap_33(jy: int) -> bool:
    return (25 * jy + 11) % 33 < 8


def leap_years(start_year: int, end_year: int) -> List[int]:
    return [y for y in range(start_year, end_year + 1) if is_leap_jalali_year(y)]


def mismatches(start_year: int, end_year: int) -> List[int]:
    return [y for y in range(start_year, end_year + 1) if is_leap_jalali_year(y) != is_leap_33(y)]


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="List Jalali leap years and where the 33-year rule disagrees.")
    p.add_argument("--start-year", type=int, default=1300)
    p.add_argument("--end-year", type=int, default=1500)
    p.add_argument("--per-line", type=int, default=12)
    args = p.parse_args(argv)

    years = leap_years(args.start_year, args.end_year)
    print(f"Leap years {args.start_year}..{args.end_year} ({len(years)}):")
    for i in range(0, len(years), args.per_line):
        print("  " + " ".join(f"{y:5d}" for y in years[i : i + args.per_line]))

    diff = mismatches(args.start_year, args.end_year)
    print(f"\nDisagreements with the 33-year rule ({len(diff)}):")
    if not diff:
        print("  (none)")
    for y in diff:
        bp = "leap" if is_leap_jalali_year(y) else "common"
        print(f"  {y}: break-point says {bp}")

    near = [b for b in BREAKS if args.start_year <= b <= args.end_year]
    if near:
        print("\nBreak points in span:", ", ".join(str(b) for b in near))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
