from __future__ import annotations
from calgrid.core.engine import CalendarRegistry
from calgrid.core.types import Weekday
from calgrid.systems import GregorianCalendar, JulianCalendar

def build_registry() -> CalendarRegistry:
    systems = {
        "gregorian": GregorianCalendar(),
        "iso": GregorianCalendar(first_weekday=Weekday.MONDAY, name="iso"),
        "julian": JulianCalendar(),
    }
    return CalendarRegistry(systems)
