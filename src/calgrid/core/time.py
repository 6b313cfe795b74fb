from __future__ import annotations
from datetime import date


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def from_jdn(jdn: int) -> date:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return date(year, month, day)

def julian_to_jdn(y: int, m: int, day: int) -> int:
    """Julian calendar fields to JDN."""
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - 32083

def jdn_to_julian(jdn: int) -> tuple[int, int, int]:
    """Inverse of julian_to_jdn: (year, month, day) in the Julian calendar."""
    c = jdn + 32082
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = d - 4800 + (m // 10)
    return year, month, day

def weekday_from_jdn(jdn: int) -> int:
    # JDN 0 is a Monday; 1=Sun..7=Sat
    return (jdn + 1) % 7 + 1

def month_ordinal(year: int, month: int) -> int:
    """Linear month count, so month differences ignore the day field."""
    return 12 * year + (month - 1)
