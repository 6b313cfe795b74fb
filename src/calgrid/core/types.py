from __future__ import annotations
from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum, IntEnum
from typing import TYPE_CHECKING, Any, List, NamedTuple, Optional, Tuple

if TYPE_CHECKING:
    from .engine import CalendarSystem


class MonthsOfYear(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def parse(cls, value: Any) -> "MonthsOfYear":
        """Accept a member, a month number (1..12) or a case-insensitive name/abbreviation."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        key = str(value).strip().upper()
        for m in cls:
            if m.name == key or (len(key) >= 3 and m.name.startswith(key)):
                return m
        raise ValueError(f"Unknown month '{value}'")


class Weekday(IntEnum):
    """Foundation numbering: 1=Sunday .. 7=Saturday."""
    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7

    @property
    def short(self) -> str:
        return self.name[:2].title()


class ScrollDirection(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class ScrollingBehavior(Enum):
    CONTINUOUS = "continuous"
    MONTH = "month"


@dataclass(frozen=True)
class LayoutBehavior:
    scroll_direction: ScrollDirection = ScrollDirection.HORIZONTAL
    scroll_behavior: ScrollingBehavior = ScrollingBehavior.MONTH

    @staticmethod
    def default() -> "LayoutBehavior":
        return LayoutBehavior()

    @property
    def paging_enabled(self) -> bool:
        return self.scroll_behavior is ScrollingBehavior.MONTH

    @property
    def scroll_position(self) -> str:
        if self.scroll_direction is ScrollDirection.HORIZONTAL:
            return "centered_horizontally"
        return "centered_vertically"


class GridLocation(NamedTuple):
    month_index: int
    day_index: int


@dataclass(frozen=True)
class CalendarConfiguration:
    """Immutable input to month generation.

    Build instances with ``make_configuration`` (or ``calgrid.make_configuration``),
    which normalizes both boundaries to start-of-day and validates them.
    """
    start_date: date
    end_date: date
    calendar: "CalendarSystem"
    first_weekday: int
    fill_next_month_dates: bool = True
    layout_behavior: LayoutBehavior = field(default_factory=LayoutBehavior)

    def tweak(self, **kwargs) -> "CalendarConfiguration":
        from ..engines.generate import make_configuration
        cfg = replace(self, **kwargs)
        return make_configuration(
            cfg.start_date,
            cfg.end_date,
            calendar=cfg.calendar,
            first_weekday=cfg.first_weekday,
            fill_next_month_dates=cfg.fill_next_month_dates,
            layout_behavior=cfg.layout_behavior,
        )

    @staticmethod
    def default(calendar: Optional["CalendarSystem"] = None, *, today: Optional[date] = None) -> "CalendarConfiguration":
        """Today through the same day next year, next-month fill enabled."""
        from ..engines.generate import make_configuration
        if calendar is None:
            from ..systems.gregorian import GregorianCalendar
            calendar = GregorianCalendar()
        start = today if today is not None else calendar.today()
        end = calendar.add_months(start, 12)
        return make_configuration(start, end, calendar=calendar)


@dataclass(frozen=True)
class MonthMetadata:
    number_of_days: int
    first_day: date
    last_day: date
    # 1..7; first_day_weekday - 1 leading slots precede the first day
    first_day_weekday: int

    @property
    def leading_fill(self) -> int:
        return self.first_day_weekday - 1

    @property
    def number_of_weeks(self) -> int:
        return -(-(self.leading_fill + self.number_of_days) // 7)


@dataclass(frozen=True)
class CalendarDay:
    date: date
    number: str
    is_today: bool
    is_within_displayed_month: bool


@dataclass(frozen=True)
class CalendarMonth:
    name: MonthsOfYear
    number: int
    index: int
    year: int
    days: Tuple[CalendarDay, ...]
    metadata: MonthMetadata
    is_first_displayable_month: bool
    is_last_displayable_month: bool

    @property
    def number_of_weeks(self) -> int:
        return self.metadata.number_of_weeks

    @property
    def leading_days(self) -> Tuple[CalendarDay, ...]:
        return self.days[: self.metadata.leading_fill]

    @property
    def displayed_days(self) -> Tuple[CalendarDay, ...]:
        lead = self.metadata.leading_fill
        return self.days[lead : lead + self.metadata.number_of_days]

    @property
    def trailing_days(self) -> Tuple[CalendarDay, ...]:
        return self.days[self.metadata.leading_fill + self.metadata.number_of_days :]

    def weeks(self) -> List[Tuple[CalendarDay, ...]]:
        return [self.days[i : i + 7] for i in range(0, len(self.days), 7)]
