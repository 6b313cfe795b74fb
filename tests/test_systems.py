# tests/test_systems.py

import calendar as pycal
import pytest
from datetime import date, datetime, timedelta, timezone

from calgrid.core.errors import ConfigurationError, MetadataGenerationError
from calgrid.core.time import from_jdn, jdn_to_julian, julian_to_jdn, to_jdn, weekday_from_jdn
from calgrid.systems import GregorianCalendar, JulianCalendar


@pytest.fixture
def greg():
    return GregorianCalendar()


@pytest.fixture
def julian():
    return JulianCalendar()


def test_known_epochs():
    assert to_jdn(date(2000, 1, 1)) == 2451545
    assert from_jdn(2451545) == date(2000, 1, 1)
    # 2000-01-01 was a Saturday
    assert weekday_from_jdn(2451545) == 7


def test_julian_jdn_inverse():
    for jdn in range(2299150, 2299170):
        assert julian_to_jdn(*jdn_to_julian(jdn)) == jdn
    # Gregorian reform: Julian 1582-10-04 was followed by Gregorian 1582-10-15
    assert julian_to_jdn(1582, 10, 4) + 1 == to_jdn(date(1582, 10, 15))


def test_weekday_numbering(greg):
    assert greg.weekday(date(2024, 2, 1)) == 5   # Thursday
    assert greg.weekday(date(2024, 9, 1)) == 1   # Sunday
    assert greg.weekday(date(2024, 6, 1)) == 7   # Saturday


@pytest.mark.parametrize("year,expected", [(2024, 29), (2023, 28), (1900, 28), (2000, 29)])
def test_gregorian_february(greg, year, expected):
    assert greg.days_in_month(year, 2) == expected


@pytest.mark.parametrize("year", [1600, 1900, 2023, 2024])
def test_gregorian_month_lengths_match_stdlib(greg, year):
    for month in range(1, 13):
        assert greg.days_in_month(year, month) == pycal.monthrange(year, month)[1]


def test_julian_leap_rule(julian):
    assert julian.days_in_month(1900, 2) == 29
    assert julian.date_from(1900, 2, 29) == date(1900, 3, 13)


def test_julian_fields(julian):
    assert julian.date_from(2024, 1, 1) == date(2024, 1, 14)
    assert julian.components(date(2024, 1, 14)) == (2024, 1, 1)
    first, last = julian.month_interval(date(2024, 1, 20))
    assert first == date(2024, 1, 14)
    assert last == date(2024, 2, 13)


def test_add_months_clamps_to_month_end(greg):
    jan31 = date(2024, 1, 31)
    assert greg.add_months(jan31, 1) == date(2024, 2, 29)
    assert greg.add_months(jan31, 13) == date(2025, 2, 28)
    assert greg.add_months(date(2024, 3, 31), -1) == date(2024, 2, 29)
    assert greg.add_months(date(2024, 11, 15), 2) == date(2025, 1, 15)


def test_month_difference_ignores_day(greg):
    assert greg.month_difference(date(2023, 1, 31), date(2023, 2, 1)) == 1
    assert greg.month_difference(date(2023, 1, 1), date(2023, 1, 31)) == 0
    assert greg.month_difference(date(2023, 1, 15), date(2025, 1, 10)) == 24


def test_month_interval(greg):
    assert greg.month_interval(date(2024, 2, 15)) == (date(2024, 2, 1), date(2024, 2, 29))


def test_start_of_day(greg):
    assert greg.start_of_day(datetime(2024, 1, 1, 23, 59)) == date(2024, 1, 1)
    assert greg.is_same_day(datetime(2024, 1, 1, 23, 59), date(2024, 1, 1))
    with pytest.raises(ConfigurationError):
        greg.start_of_day("2024-01-01")


def test_start_of_day_uses_calendar_zone():
    tokyo = GregorianCalendar(tz=timezone(timedelta(hours=9)))
    instant = datetime(2024, 1, 1, 20, 0, tzinfo=timezone.utc)
    assert tokyo.start_of_day(instant) == date(2024, 1, 2)
    assert GregorianCalendar().start_of_day(instant) == date(2024, 1, 1)


def test_invalid_fields(greg):
    with pytest.raises(ConfigurationError):
        greg.date_from(2023, 2, 29)
    with pytest.raises(MetadataGenerationError):
        greg.days_in_month(2024, 13)
    with pytest.raises(ConfigurationError):
        greg.add_months(date(9999, 12, 1), 1)


def test_first_weekday_override():
    iso = GregorianCalendar(first_weekday=2, name="iso")
    assert iso.default_first_weekday == 2
    assert iso.info()["name"] == "iso"
    with pytest.raises(ConfigurationError):
        GregorianCalendar(first_weekday=8)
