from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Protocol, Tuple, Union

from .errors import UnknownCalendarError

DateLike = Union[date, Any]  # date | datetime

class CalendarSystem(Protocol):
    """
    Rule set for month lengths, leap years and weekday numbering.
    Day instants are plain ``date`` objects (an absolute civil day); the
    system maps them to and from its own (year, month, day) fields.
    Weekdays use 1=Sunday .. 7=Saturday.
    """
    name: str
    default_first_weekday: int

    def info(self) -> Dict[str, Any]: ...
    def today(self) -> date: ...
    def start_of_day(self, value: DateLike) -> date: ...
    def components(self, d: date) -> Tuple[int, int, int]: ...
    def date_from(self, year: int, month: int, day: int) -> date: ...
    def weekday(self, d: date) -> int: ...
    def days_in_month(self, year: int, month: int) -> int: ...
    def month_interval(self, d: date) -> Tuple[date, date]: ...
    def add_days(self, d: date, n: int) -> date: ...
    def add_months(self, d: date, n: int) -> date: ...
    def month_difference(self, a: date, b: date) -> int: ...
    def is_same_day(self, a: DateLike, b: DateLike) -> bool: ...

@dataclass
class CalendarRegistry:
    _systems: Dict[str, CalendarSystem]

    def get(self, name: str) -> CalendarSystem:
        if name not in self._systems:
            raise UnknownCalendarError(f"Unknown calendar '{name}'. Available: {sorted(self._systems)}")
        return self._systems[name]

    def list(self) -> List[str]:
        return sorted(self._systems.keys())

    def register(self, name: str, system: CalendarSystem, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._systems):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        self._systems[name] = system
