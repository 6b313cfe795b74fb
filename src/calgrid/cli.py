from __future__ import annotations

import argparse
from datetime import date
import logging
import sys
import re
import importlib
import inspect

from calgrid.core.errors import CalgridError, ConfigurationError


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    try:
        y, m, d = map(int, s.split("-"))
        return date(y, m, d)
    except ValueError as e:
        raise ConfigurationError(f"invalid date '{s}' (expected YYYY-MM-DD): {e}") from e


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


def _range_parser(prog: str, description: str) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=prog, description=description)
    p.add_argument("start", help="YYYY-MM-DD")
    p.add_argument("end", help="YYYY-MM-DD")
    p.add_argument("--calendar", default="gregorian")
    p.add_argument("--first-weekday", type=int, default=None, help="1=Sunday .. 7=Saturday")
    p.add_argument("--no-fill", action="store_true")
    return p


def _configuration(args):
    import calgrid

    return calgrid.make_configuration(
        _parse_ymd(args.start),
        _parse_ymd(args.end),
        calendar=args.calendar,
        first_weekday=args.first_weekday,
        fill_next_month_dates=not args.no_fill,
    )


def cmd_months(argv: list[str]) -> int:
    import calgrid

    p = _range_parser("calgrid months", "One summary line per generated month")
    args = p.parse_args(argv)

    months = calgrid.generate_months(_configuration(args))
    for m in months:
        flags = ("F" if m.is_first_displayable_month else "-") + ("L" if m.is_last_displayable_month else "-")
        print(
            f"{m.index:4d}  {m.year:04d}-{m.number:02d} {m.name.name.title():<9}  "
            f"days={m.metadata.number_of_days:2d}  lead={m.metadata.leading_fill}  "
            f"trail={len(m.trailing_days)}  weeks={m.number_of_weeks}  {flags}"
        )
    return 0

def cmd_locate(argv: list[str]) -> int:
    import calgrid

    p = _range_parser("calgrid locate", "Resolve a navigation target inside a generated range")
    g = p.add_mutually_exclusive_group(required=True)
    g.add_argument("--date", help="YYYY-MM-DD")
    g.add_argument("--month", help="Month name or number")
    g.add_argument("--year", type=int)
    p.add_argument("--offset", type=int, default=1, help="Occurrence of --month (1-based)")
    args = p.parse_args(argv)

    config = _configuration(args)
    months = calgrid.generate_months(config)

    if args.date:
        loc = calgrid.locate_date(months, _parse_ymd(args.date), calendar=config.calendar)
        index = loc.month_index if loc is not None else None
    elif args.month:
        loc = None
        index = calgrid.locate_month(months, args.month, args.offset)
    else:
        loc = None
        index = calgrid.locate_year(months, args.year)

    if index is None:
        print("no match")
        return 0
    m = months[index]
    where = f"month={index}" if loc is None else f"month={loc.month_index} day={loc.day_index}"
    print(f"{where}  {m.name.name.title()} {m.year}")
    return 0

def cmd_calendars(argv: list[str]) -> int:
    import calgrid

    p = argparse.ArgumentParser(prog="calgrid calendars", description="List registered calendar systems")
    p.parse_args(argv)
    for name in calgrid.list_calendars():
        info = calgrid.calendar_info(name)
        print(f"{name:<10} {info['kind']:<18} first_weekday={info['default_first_weekday']}")
    return 0

def cmd_date(argv: list[str]) -> int:
    """`calgrid YYYY-MM-DD [...]`: print the month holding that date."""
    return _run_module_main("calgrid.diagnostics.pretty_month", [argv[0], argv[0]] + argv[1:])

def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    verbose = "-v" in argv or "--verbose" in argv
    argv = [a for a in argv if a not in ("-v", "--verbose")]
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        # Shortcut: `calgrid YYYY-MM-DD ...`
        if argv and _DATE_RE.match(argv[0]):
            return cmd_date(argv)
        return _dispatch(argv)
    except CalgridError as e:
        print(f"calgrid: error: {e}", file=sys.stderr)
        return 2

def _dispatch(argv: list[str]) -> int:
    p = argparse.ArgumentParser(prog="calgrid", description="Calendar grid generation toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="DEBUG logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("months", help="Summarize generated months for a date range")
    sub.add_parser("month", help="Print month grids for a date range")
    sub.add_parser("pretty-month", help="Alias of 'month'")
    sub.add_parser("locate", help="Resolve a date/month/year navigation target")
    sub.add_parser("calendars", help="List registered calendar systems")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["invariants", "fill-stats"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.cmd == "months":
        return cmd_months(rest)

    if args.cmd in ("month", "pretty-month"):
        return _run_module_main("calgrid.diagnostics.pretty_month", rest)

    if args.cmd == "locate":
        return cmd_locate(rest)

    if args.cmd == "calendars":
        return cmd_calendars(rest)

    if args.cmd == "diag":
        tool_map = {
            "invariants": "calgrid.diagnostics.invariants",
            "fill-stats": "calgrid.diagnostics.fill_stats",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
