from __future__ import annotations
import calendar as pycal
from datetime import date
from typing import Tuple

from ._base import SolarCalendar


class GregorianCalendar(SolarCalendar):
    """Proleptic Gregorian calendar (the one ``datetime.date`` already speaks)."""
    name = "gregorian"

    def is_leap_year(self, year: int) -> bool:
        return pycal.isleap(year)

    def components(self, d: date) -> Tuple[int, int, int]:
        return d.year, d.month, d.day

    def _build(self, year: int, month: int, day: int) -> date:
        return date(year, month, day)
