from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional, Tuple, Union

from .core.engine import CalendarRegistry, CalendarSystem
from .core.types import CalendarConfiguration, CalendarMonth, GridLocation, LayoutBehavior
from .engines import navigation as _nav
from .engines.generate import generate, make_configuration as _make_configuration

_registry: Optional[CalendarRegistry] = None

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def _system(calendar: Union[str, CalendarSystem]) -> CalendarSystem:
    if isinstance(calendar, str):
        return _reg().get(calendar)
    return calendar

def list_calendars() -> List[str]:
    return _reg().list()

def calendar_info(name: str) -> Dict[str, Any]:
    return _reg().get(name).info()

def get_calendar(name: str) -> CalendarSystem:
    return _reg().get(name)

def register_calendar(name: str, system: CalendarSystem, *, overwrite: bool = False) -> None:
    _reg().register(name, system, overwrite=overwrite)

def make_configuration(
    start: Any,
    end: Any,
    *,
    calendar: Union[str, CalendarSystem] = "gregorian",
    first_weekday: Optional[int] = None,
    fill_next_month_dates: bool = True,
    layout_behavior: Optional[LayoutBehavior] = None,
) -> CalendarConfiguration:
    return _make_configuration(
        start,
        end,
        calendar=_system(calendar),
        first_weekday=first_weekday,
        fill_next_month_dates=fill_next_month_dates,
        layout_behavior=layout_behavior,
    )

def generate_months(config: CalendarConfiguration, *, today: Optional[date] = None) -> Tuple[CalendarMonth, ...]:
    return generate(config, today=today)

# ============================================================
# Navigation helpers (no view required)
# ============================================================

def locate_date(months: Tuple[CalendarMonth, ...], target: Any, *, calendar: Union[str, CalendarSystem] = "gregorian") -> Optional[GridLocation]:
    return _nav.resolve_date(months, target, _system(calendar))

def locate_month(months: Tuple[CalendarMonth, ...], name: Any, offset: int = 1) -> Optional[int]:
    return _nav.resolve_month(months, name, _nav.positive(offset))

def locate_year(months: Tuple[CalendarMonth, ...], year: int) -> Optional[int]:
    return _nav.resolve_year(months, year)
