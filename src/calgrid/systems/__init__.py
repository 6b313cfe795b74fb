from .gregorian import GregorianCalendar
from .julian import JulianCalendar

__all__ = ["GregorianCalendar", "JulianCalendar"]
