from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_CALENDARS = ("jalali", "gregorian")


def _parse_ymd(s: str) -> tuple[int, int, int]:
    from pardis.formatting import parse_date_string

    d = parse_date_string(s)
    if d is None:
        raise SystemExit(f"Cannot parse date {s!r}; expected Y-M-D or Y/M/D")
    return d.as_tuple()


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_convert(argv: list[str]) -> int:
    import pardis

    p = argparse.ArgumentParser(prog="pardis convert", description="Convert a date between calendars")
    p.add_argument("date", help="Y-M-D or Y/M/D (Persian digits accepted)")
    p.add_argument("--from", dest="source", choices=_CALENDARS, default="gregorian")
    p.add_argument("--to", dest="target", choices=_CALENDARS, default=None,
                   help="target calendar (default: the other one)")
    p.add_argument("--persian-digits", action="store_true")
    p.add_argument("--latin-months", action="store_true", help="transliterated Jalali month names")
    args = p.parse_args(argv)

    target = args.target or ("jalali" if args.source == "gregorian" else "gregorian")
    y, m, d = _parse_ymd(args.date)
    out = pardis.convert(y, m, d, source=args.source, target=target)

    from pardis.formatting import format_date, to_persian_digits

    src_s = format_date(y, m, d)
    dst_s = format_date(*out.as_tuple())
    if args.persian_digits:
        dst_s = to_persian_digits(dst_s)
    cal = pardis.get_calendar(target)
    names = cal.month_names
    if args.latin_months:
        names = cal.spec.meta.get("latin_month_names", names)
    month_name = names[out.month - 1]
    print(f"{src_s} ({args.source}) -> {dst_s} ({target}, {month_name})")
    return 0


def cmd_month(argv: list[str]) -> int:
    from pardis.diagnostics.pretty_month import month_calendar

    p = argparse.ArgumentParser(prog="pardis month", description="Print a month grid")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("--calendar", choices=_CALENDARS, default="jalali")
    p.add_argument("--week-start", type=int, default=None, choices=range(7), help="0=Sunday .. 6=Saturday")
    args = p.parse_args(argv)

    print(month_calendar(args.calendar, args.year, args.month, week_start=args.week_start), end="")
    return 0


def cmd_preset(argv: list[str]) -> int:
    import pardis
    from pardis.picker.presets import PRESETS
    from pardis.formatting import format_date

    p = argparse.ArgumentParser(prog="pardis preset", description="Print a named preset range relative to today")
    p.add_argument("name", choices=PRESETS)
    p.add_argument("--calendar", choices=_CALENDARS, default="jalali")
    args = p.parse_args(argv)

    rng = pardis.make_picker(calendar=args.calendar).get_preset_range(args.name)
    print(f"{args.name}: {format_date(*rng.start.as_tuple())} .. {format_date(*rng.end.as_tuple())}")
    return 0


def cmd_leap(argv: list[str]) -> int:
    import pardis

    p = argparse.ArgumentParser(prog="pardis leap", description="Is the year a leap year?")
    p.add_argument("year", type=int)
    p.add_argument("--calendar", choices=_CALENDARS, default="jalali")
    args = p.parse_args(argv)

    leap = pardis.is_leap_year(args.year, calendar=args.calendar)
    last = pardis.days_in_month(args.year, 12 if args.calendar == "jalali" else 2, calendar=args.calendar)
    print(f"{args.year} ({args.calendar}): {'leap' if leap else 'common'} year, last short month has {last} days")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `pardis YYYY-MM-DD` converts a Gregorian date to Jalali
    if argv and _DATE_RE.match(argv[0]):
        return cmd_convert(argv)

    p = argparse.ArgumentParser(prog="pardis", description="Jalali/Gregorian calendar toolkit CLI.")
    p.add_argument("--log-level", default="WARNING", choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("convert", help="Convert a date between calendars")
    sub.add_parser("month", help="Print a month grid with paired labels")
    sub.add_parser("preset", help="Print a preset range (thisWeek, thisMonth, last7Days, last30Days)")
    sub.add_parser("leap", help="Leap-year check")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "nowruz-table", "leap-years", "nowruz-scatter", "pretty-month"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "convert":
        return cmd_convert(rest)

    if args.cmd == "month":
        return cmd_month(rest)

    if args.cmd == "preset":
        return cmd_preset(rest)

    if args.cmd == "leap":
        return cmd_leap(rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "pardis.diagnostics.round_trip",
            "nowruz-table": "pardis.diagnostics.new_years_table",
            "leap-years": "pardis.diagnostics.leap_years",
            "nowruz-scatter": "pardis.diagnostics.nowruz_scatter",
            "pretty-month": "pardis.diagnostics.pretty_month",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
