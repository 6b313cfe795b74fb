from __future__ import annotations
from datetime import date
from typing import Tuple

from calgrid.core.time import from_jdn, jdn_to_julian, julian_to_jdn, to_jdn
from ._base import SolarCalendar


class JulianCalendar(SolarCalendar):
    """
    Julian calendar. Day instants stay Gregorian-keyed ``date`` objects;
    fields are translated through the Julian Day Number.
    """
    name = "julian"

    def is_leap_year(self, year: int) -> bool:
        return year % 4 == 0

    def components(self, d: date) -> Tuple[int, int, int]:
        return jdn_to_julian(to_jdn(d))

    def _build(self, year: int, month: int, day: int) -> date:
        return from_jdn(julian_to_jdn(year, month, day))
