"""
calgrid.systems._base
---------------------
Shared machinery for solar calendar systems whose day instants are mapped
through Julian Day Numbers. Subclasses provide the field <-> JDN conversion
and the leap-year rule; everything else (weekday, month arithmetic, month
bounds) is derived here.
"""

from __future__ import annotations

import calendar as pycal
from datetime import date, datetime, timedelta, tzinfo
from typing import Any, Dict, Optional, Tuple, Union

from calgrid.core.errors import ConfigurationError, MetadataGenerationError
from calgrid.core.time import month_ordinal, to_jdn, weekday_from_jdn


def _resolve_tz(tz: Union[str, tzinfo, None]) -> Optional[tzinfo]:
    if tz is None or isinstance(tz, tzinfo):
        return tz
    from zoneinfo import ZoneInfo
    return ZoneInfo(tz)


class SolarCalendar:
    """
    Twelve-month solar calendar with a pluggable leap rule.
    """
    name = "solar"
    default_first_weekday = 1

    def __init__(
        self,
        *,
        first_weekday: Optional[int] = None,
        tz: Union[str, tzinfo, None] = None,
        name: Optional[str] = None,
    ):
        if first_weekday is not None:
            if not 1 <= first_weekday <= 7:
                raise ConfigurationError(f"first_weekday must be in 1..7, got {first_weekday}")
            self.default_first_weekday = int(first_weekday)
        if name is not None:
            self.name = name
        self.tz = _resolve_tz(tz)

    # ---------------------------------------------------------
    # Field mapping (subclass hooks)
    # ---------------------------------------------------------

    def is_leap_year(self, year: int) -> bool:
        raise NotImplementedError

    def components(self, d: date) -> Tuple[int, int, int]:
        raise NotImplementedError

    def _build(self, year: int, month: int, day: int) -> date:
        raise NotImplementedError

    # ---------------------------------------------------------
    # Derived rules
    # ---------------------------------------------------------

    def days_in_month(self, year: int, month: int) -> int:
        if not 1 <= month <= 12:
            raise MetadataGenerationError(f"{self.name}: month {month} is outside 1..12")
        if month == 2 and self.is_leap_year(year):
            return 29
        return pycal.mdays[month]

    def date_from(self, year: int, month: int, day: int) -> date:
        if not 1 <= day <= self.days_in_month(year, month):
            raise ConfigurationError(f"{self.name}: invalid day {year}-{month:02d}-{day:02d}")
        try:
            return self._build(year, month, day)
        except (ValueError, OverflowError) as e:
            raise ConfigurationError(f"{self.name}: {year}-{month:02d}-{day:02d} is out of range") from e

    def weekday(self, d: date) -> int:
        return weekday_from_jdn(to_jdn(d))

    def month_interval(self, d: date) -> Tuple[date, date]:
        """First and last day (inclusive) of the month containing d."""
        y, m, _ = self.components(d)
        try:
            return self.date_from(y, m, 1), self.date_from(y, m, self.days_in_month(y, m))
        except ConfigurationError as e:
            raise MetadataGenerationError(f"{self.name}: no month interval for {d}") from e

    def add_days(self, d: date, n: int) -> date:
        try:
            return d + timedelta(days=n)
        except OverflowError as e:
            raise ConfigurationError(f"{self.name}: {d} + {n} days is out of range") from e

    def add_months(self, d: date, n: int) -> date:
        """Shift by n months, clamping the day to the target month's length."""
        y, m, day = self.components(d)
        y2, m2 = divmod(month_ordinal(y, m) + n, 12)
        m2 += 1
        return self.date_from(y2, m2, min(day, self.days_in_month(y2, m2)))

    def month_difference(self, a: date, b: date) -> int:
        ya, ma, _ = self.components(a)
        yb, mb, _ = self.components(b)
        return month_ordinal(yb, mb) - month_ordinal(ya, ma)

    # ---------------------------------------------------------
    # Wall clock and normalization
    # ---------------------------------------------------------

    def today(self) -> date:
        if self.tz is not None:
            return datetime.now(self.tz).date()
        return date.today()

    def start_of_day(self, value: Any) -> date:
        if isinstance(value, datetime):
            if self.tz is not None and value.tzinfo is not None:
                value = value.astimezone(self.tz)
            return value.date()
        if isinstance(value, date):
            return value
        raise ConfigurationError(f"Expected a date or datetime, got {type(value).__name__}")

    def is_same_day(self, a: Any, b: Any) -> bool:
        return self.start_of_day(a) == self.start_of_day(b)

    def info(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "kind": type(self).__name__,
            "default_first_weekday": self.default_first_weekday,
            "tz": str(self.tz) if self.tz is not None else None,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, first_weekday={self.default_first_weekday})"
