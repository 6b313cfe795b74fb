from __future__ import annotations

from datetime import date
import argparse

import calgrid
from calgrid.core.errors import ConfigurationError
from calgrid.core.types import CalendarConfiguration, CalendarDay, CalendarMonth, GridLocation
from calgrid.view import CalendarView


def dow_header(first_weekday: int = 1, w: int = 6) -> str:
    return " ".join(s.ljust(w) for s in calgrid.weekday_symbols(first_weekday)).rstrip()


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def format_grid(title: str, weeks: list[list[tuple[str, str]]], first_weekday: int = 1) -> str:
    header = dow_header(first_weekday)
    lines = [title, header, "-" * len(header)]
    for wk in weeks:
        lines.append(" ".join(c[0] for c in wk).rstrip())
        lines.append(" ".join(c[1] for c in wk).rstrip())
    return "\n".join(lines) + "\n"


class TextDataSource:
    """Renders cells as (top, bottom) text pairs: day label over a status marker."""

    def __init__(self, config: CalendarConfiguration):
        self.config = config

    def configuration(self, view: CalendarView) -> CalendarConfiguration:
        return self.config

    def cell_for_item(self, view: CalendarView, location: GridLocation, day: CalendarDay) -> tuple[str, str]:
        if day.is_today:
            mark = "today"
        elif not day.is_within_displayed_month:
            mark = "."
        else:
            mark = ""
        return cell(f"{day.number:>2}", mark)

    def header_for_month(self, view: CalendarView, kind: str, index: int, month: CalendarMonth) -> str:
        m = month.metadata
        return (f"{view.configuration.calendar.name} {month.name.name.title()} {month.year}"
                f"  [#{index}]  ({m.first_day} .. {m.last_day})")


def render_month(view: CalendarView, index: int) -> str:
    cells = view.visible_items(index)
    weeks = [cells[i : i + 7] for i in range(0, len(cells), 7)]
    if weeks and len(weeks[-1]) < 7:
        weeks[-1] = weeks[-1] + [cell("", "")] * (7 - len(weeks[-1]))
    return format_grid(view.header_for_month(index), weeks, view.configuration.first_weekday)


def _parse_ymd(s: str) -> date:
    try:
        y, m, d = map(int, s.split("-"))
        return date(y, m, d)
    except ValueError as e:
        raise ConfigurationError(f"invalid date '{s}' (expected YYYY-MM-DD): {e}") from e


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print generated month grids (leading/trailing fill marked with '.')."
    )
    p.add_argument("start", nargs="?", help="YYYY-MM-DD (default: today)")
    p.add_argument("end", nargs="?", help="YYYY-MM-DD (default: start)")
    p.add_argument("--calendar", default="gregorian", help="gregorian|iso|julian (default: gregorian)")
    p.add_argument("--first-weekday", type=int, default=None, help="1=Sunday .. 7=Saturday")
    p.add_argument("--no-fill", action="store_true", help="Do not complete the last week with next-month days.")
    p.add_argument("--index", type=int, action="append", default=[],
                   help="Positional month index to print (repeatable; default: all)")
    args = p.parse_args(argv)

    system = calgrid.get_calendar(args.calendar)
    start = _parse_ymd(args.start) if args.start else system.today()
    end = _parse_ymd(args.end) if args.end else start

    config = calgrid.make_configuration(
        start, end,
        calendar=system,
        first_weekday=args.first_weekday,
        fill_next_month_dates=not args.no_fill,
    )
    view = CalendarView(TextDataSource(config))
    for i in (args.index or range(view.number_of_months)):
        if not 0 <= i < view.number_of_months:
            print(f"index {i} out of range (0..{view.number_of_months - 1})")
            continue
        print(render_month(view, i))
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
