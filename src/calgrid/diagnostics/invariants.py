from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import List, Sequence

import calgrid
from calgrid.core.types import CalendarConfiguration, CalendarMonth


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def parse_calendars(s: str) -> List[str]:
    # "gregorian,julian" -> ["gregorian", "julian"]
    return [x.strip() for x in s.split(",") if x.strip()]


def check_months(config: CalendarConfiguration, months: Sequence[CalendarMonth], today: date) -> List[str]:
    """Return a list of human-readable violations (empty when all hold)."""
    cal = config.calendar
    problems: List[str] = []

    expected = cal.month_difference(config.start_date, config.end_date) + 1
    if len(months) != expected:
        problems.append(f"month count {len(months)} != {expected}")

    firsts = [m.index for m in months if m.is_first_displayable_month]
    lasts = [m.index for m in months if m.is_last_displayable_month]
    if firsts != [0] or lasts != [len(months) - 1]:
        problems.append(f"boundary flags first={firsts} last={lasts}")

    todays = 0
    for i, m in enumerate(months):
        if m.index != i:
            problems.append(f"index {m.index} at position {i}")
        if i > 0:
            prev = months[i - 1]
            if cal.add_months(prev.metadata.first_day, 1) != m.metadata.first_day:
                problems.append(f"gap between #{i - 1} and #{i}")

        within = [d for d in m.days if d.is_within_displayed_month]
        if len(within) != m.metadata.number_of_days:
            problems.append(f"#{i}: {len(within)} in-month days, metadata says {m.metadata.number_of_days}")
        if not 1 <= m.metadata.first_day_weekday <= 7:
            problems.append(f"#{i}: first_day_weekday {m.metadata.first_day_weekday}")
        if len(m.leading_days) != m.metadata.first_day_weekday - 1:
            problems.append(f"#{i}: leading fill {len(m.leading_days)}")
        if any(d.is_within_displayed_month for d in m.leading_days + m.trailing_days):
            problems.append(f"#{i}: fill day flagged as in-month")
        trailing = len(m.trailing_days)
        if not 0 <= trailing <= 6:
            problems.append(f"#{i}: trailing fill {trailing}")
        if config.fill_next_month_dates and len(m.days) % 7 != 0:
            problems.append(f"#{i}: {len(m.days)} cells do not fill whole weeks")
        if not config.fill_next_month_dates and trailing:
            problems.append(f"#{i}: trailing fill present with fill disabled")

        dates = [d.date for d in m.days]
        if any(b - a != timedelta(days=1) for a, b in zip(dates, dates[1:])):
            problems.append(f"#{i}: days are not consecutive")

        for d in m.days:
            if d.is_today:
                todays += 1
                if not d.is_within_displayed_month or d.date != today:
                    problems.append(f"#{i}: bad is_today on {d.date}")

    if todays > 1:
        problems.append(f"{todays} days flagged is_today")
    return problems


def invariants_test(
    calendar: str,
    N: int,
    start: date,
    end: date,
    seed: int,
    *,
    max_failures: int,
) -> int:
    random.seed(seed)
    system = calgrid.get_calendar(calendar)
    failures = 0

    for _ in range(N):
        a = random_date(start, end)
        b = a + timedelta(days=random.randint(0, 3 * 366))
        fw = random.randint(1, 7)
        fill = random.random() < 0.5
        today = random_date(a, b)

        config = calgrid.make_configuration(a, b, calendar=system, first_weekday=fw, fill_next_month_dates=fill)
        months = calgrid.generate_months(config, today=today)
        problems = check_months(config, months, today)
        if problems:
            failures += 1
            print("\nFAIL")
            print("calendar:", calendar)
            print("range:", a, "..", b, "first_weekday:", fw, "fill:", fill)
            for msg in problems:
                print("  -", msg)
            if failures >= max_failures:
                break

    print(f"{calendar}: {N} configurations, {failures} failure(s)")
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Randomized structural checks of generated month sequences.")
    p.add_argument("--calendars", default="gregorian,iso,julian")
    p.add_argument("-n", "--samples", type=int, default=500)
    p.add_argument("--start", default="1900-01-01")
    p.add_argument("--end", default="2100-12-31")
    p.add_argument("--seed", type=int, default=42)
    p.add_argument("--max-failures", type=int, default=10)
    args = p.parse_args(argv)

    total = 0
    for name in parse_calendars(args.calendars):
        total += invariants_test(
            name, args.samples, parse_date(args.start), parse_date(args.end), args.seed,
            max_failures=args.max_failures,
        )
    return 1 if total else 0

if __name__ == "__main__":
    raise SystemExit(main())
