"""
calgrid.engines.generate
------------------------
Month/day generation. Turns a CalendarConfiguration into the ordered,
gap-free tuple of CalendarMonth records that the view pages through.

Weekday values follow the 1=Sunday .. 7=Saturday numbering of the calendar
system. The leading-fill and trailing-fill normalizations below use
different thresholds (``<= 0`` vs ``>= 7``); the grid sizes its first and
last rows from them.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, List, Optional, Tuple

from calgrid.core.engine import CalendarSystem
from calgrid.core.errors import ConfigurationError
from calgrid.core.types import (
    CalendarConfiguration,
    CalendarDay,
    CalendarMonth,
    LayoutBehavior,
    MonthMetadata,
    MonthsOfYear,
    Weekday,
)

logger = logging.getLogger(__name__)


def make_configuration(
    start: Any,
    end: Any,
    *,
    calendar: CalendarSystem,
    first_weekday: Optional[int] = None,
    fill_next_month_dates: bool = True,
    layout_behavior: Optional[LayoutBehavior] = None,
) -> CalendarConfiguration:
    """Normalize both boundaries to start-of-day and validate the range."""
    start_date = calendar.start_of_day(start)
    end_date = calendar.start_of_day(end)
    if end_date < start_date:
        raise ConfigurationError(f"end date {end_date} precedes start date {start_date}")

    fw = calendar.default_first_weekday if first_weekday is None else int(first_weekday)
    if not 1 <= fw <= 7:
        raise ConfigurationError(f"first_weekday must be in 1..7, got {first_weekday}")

    return CalendarConfiguration(
        start_date=start_date,
        end_date=end_date,
        calendar=calendar,
        first_weekday=fw,
        fill_next_month_dates=bool(fill_next_month_dates),
        layout_behavior=layout_behavior if layout_behavior is not None else LayoutBehavior.default(),
    )


def month_metadata(calendar: CalendarSystem, base: date, first_weekday: int) -> MonthMetadata:
    y, m, _ = calendar.components(base)
    number_of_days = calendar.days_in_month(y, m)
    first_day, last_day = calendar.month_interval(base)

    first_day_weekday = calendar.weekday(first_day) + 1 - first_weekday
    if first_day_weekday <= 0:
        first_day_weekday = 7 - abs(first_day_weekday)

    return MonthMetadata(
        number_of_days=number_of_days,
        first_day=first_day,
        last_day=last_day,
        first_day_weekday=first_day_weekday,
    )


def _day(calendar: CalendarSystem, base: date, offset: int, *, within: bool, today: date) -> CalendarDay:
    d = calendar.add_days(base, offset)
    return CalendarDay(
        date=d,
        number=str(calendar.components(d)[2]),
        is_today=within and d == today,
        is_within_displayed_month=within,
    )


def generate_days(calendar: CalendarSystem, metadata: MonthMetadata, *, today: date) -> List[CalendarDay]:
    """Leading fill from the previous month followed by the month's own days."""
    lead = metadata.first_day_weekday
    days = []
    for offset in range(1, metadata.number_of_days + lead):
        within = offset >= lead
        days.append(_day(calendar, metadata.first_day, offset - lead, within=within, today=today))
    return days


def start_of_next_month(
    calendar: CalendarSystem, metadata: MonthMetadata, first_weekday: int, *, today: date
) -> List[CalendarDay]:
    """Days of the following month that complete the last week row."""
    last = metadata.last_day
    additional = 7 - calendar.weekday(last) - 1 + first_weekday
    if additional >= 7:
        additional = abs(7 - additional)
    if additional <= 0:
        return []
    return [_day(calendar, last, k, within=False, today=today) for k in range(1, additional + 1)]


def generate(config: CalendarConfiguration, *, today: Optional[date] = None) -> Tuple[CalendarMonth, ...]:
    """
    Build every month between ``config.start_date`` and ``config.end_date``
    (inclusive, month granularity). ``today`` defaults to the calendar's
    wall-clock day and only affects ``CalendarDay.is_today``.
    """
    cal = config.calendar
    if config.end_date < config.start_date:
        raise ConfigurationError(f"end date {config.end_date} precedes start date {config.start_date}")
    if today is None:
        today = cal.today()
    else:
        today = cal.start_of_day(today)

    count = cal.month_difference(config.start_date, config.end_date) + 1
    logger.debug("generating %d month(s) %s..%s (%s, first_weekday=%d)",
                 count, config.start_date, config.end_date, cal.name, config.first_weekday)

    months: List[CalendarMonth] = []
    for index in range(count):
        base = cal.add_months(config.start_date, index)
        meta = month_metadata(cal, base, config.first_weekday)
        days = generate_days(cal, meta, today=today)
        if config.fill_next_month_dates:
            days += start_of_next_month(cal, meta, config.first_weekday, today=today)

        year, number, _ = cal.components(base)
        months.append(CalendarMonth(
            name=MonthsOfYear(number),
            number=number,
            index=index,
            year=year,
            days=tuple(days),
            metadata=meta,
            is_first_displayable_month=(index == 0),
            is_last_displayable_month=(index == count - 1),
        ))

    return tuple(months)


def weekday_symbols(first_weekday: int = 1) -> List[str]:
    """Two-letter weekday labels for a header row starting at first_weekday."""
    if not 1 <= first_weekday <= 7:
        raise ConfigurationError(f"first_weekday must be in 1..7, got {first_weekday}")
    return [Weekday((first_weekday - 1 + k) % 7 + 1).short for k in range(7)]
