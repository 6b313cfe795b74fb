"""
calgrid.engines.navigation
--------------------------
Index resolution over a generated month sequence. Every resolver returns
``None`` when the request cannot be satisfied; callers treat that as a
no-op rather than an error.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from calgrid.core.engine import CalendarSystem
from calgrid.core.types import CalendarMonth, GridLocation, MonthsOfYear


def positive(offset: int) -> int:
    """Occurrence offsets are magnitudes: -2 and 2 mean the same thing."""
    return abs(int(offset))


def _in_range(months: Sequence[CalendarMonth], index: Optional[int]) -> bool:
    return index is not None and 0 <= index < len(months)


def resolve_next(months: Sequence[CalendarMonth], current: Optional[int]) -> Optional[int]:
    if not _in_range(months, current):
        return None
    if months[current].is_last_displayable_month:
        return None
    return current + 1


def resolve_previous(months: Sequence[CalendarMonth], current: Optional[int]) -> Optional[int]:
    if not _in_range(months, current):
        return None
    if months[current].is_first_displayable_month:
        return None
    return current - 1


def resolve_date(months: Sequence[CalendarMonth], target: Any, calendar: CalendarSystem) -> Optional[GridLocation]:
    """
    Location of ``target`` in its home month. Fill-day copies of the same
    date in neighbouring months are skipped.
    """
    day0 = calendar.start_of_day(target)
    for mi, month in enumerate(months):
        for di, day in enumerate(month.days):
            if day.date == day0 and day.is_within_displayed_month:
                return GridLocation(mi, di)
    return None


def resolve_month(months: Sequence[CalendarMonth], name: Any, offset: int = 1) -> Optional[int]:
    """Index of the ``offset``-th (1-based) month called ``name``."""
    try:
        month_name = MonthsOfYear.parse(name)
    except ValueError:
        return None
    indices = [m.index for m in months if m.name == month_name]
    if offset < 1 or offset > len(indices):
        return None
    return indices[offset - 1]


def resolve_year(months: Sequence[CalendarMonth], year: int) -> Optional[int]:
    for m in months:
        if m.year == year:
            return m.index
    return None
