from __future__ import annotations

import argparse
import random
from datetime import date, timedelta

from pardis.core.time import date_to_jdn, from_jdn, to_jdn
from pardis.engines.jalali import d2j, j2d, jalali_month_length


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def gregorian_roundtrip(N: int, start: date, end: date, seed: int, *, max_failures: int) -> int:
    """Gregorian -> JDN -> Jalali -> JDN -> Gregorian on random days."""
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)
        jdn = to_jdn(d0.year, d0.month, d0.day)
        if jdn != date_to_jdn(d0) or from_jdn(jdn) != (d0.year, d0.month, d0.day):
            failures += 1
            print("\nFAIL (gregorian jdn)")
            print("d0:", d0, "jdn:", jdn, "back:", from_jdn(jdn))
        else:
            j = d2j(jdn)
            back = j2d(*j)
            if back != jdn:
                failures += 1
                print("\nFAIL (jalali)")
                print("d0:", d0, "jalali:", j, "jdn:", jdn, "back:", back)
        if failures >= max_failures:
            return failures

    return failures


def jalali_sweep(from_year: int, to_year: int, *, max_failures: int) -> int:
    """Every Jalali day in [from_year, to_year] must map to consecutive JDNs."""
    failures = 0
    expected = j2d(from_year, 1, 1)
    for jy in range(from_year, to_year + 1):
        for jm in range(1, 13):
            for jd in range(1, jalali_month_length(jy, jm) + 1):
                jdn = j2d(jy, jm, jd)
                if jdn != expected or d2j(jdn) != (jy, jm, jd):
                    failures += 1
                    print("\nFAIL (sweep)")
                    print("jalali:", (jy, jm, jd), "jdn:", jdn, "expected:", expected, "back:", d2j(jdn))
                    if failures >= max_failures:
                        return failures
                expected = jdn + 1
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Round-trip tests: gregorian <-> JDN <-> jalali.")
    p.add_argument("--N", type=int, default=20000, help="Random trials.")
    p.add_argument("--start", type=str, default="1600-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2999-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--sweep", nargs=2, type=int, metavar=("JY0", "JY1"), default=(1, 3177),
                   help="Jalali year span swept day by day (default: 1 3177).")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)
    if end < start:
        raise SystemExit("--end must be >= --start")

    print("Testing random gregorian days ...")
    total_fail = gregorian_roundtrip(args.N, start, end, args.seed, max_failures=args.max_failures)
    print(f"Sweeping jalali years {args.sweep[0]}..{args.sweep[1]} ...")
    total_fail += jalali_sweep(args.sweep[0], args.sweep[1], max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
