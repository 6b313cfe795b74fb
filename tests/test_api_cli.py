# tests/test_api_cli.py

import pytest
from datetime import date

import calgrid
from calgrid.cli import main
from calgrid.core.errors import UnknownCalendarError
from calgrid.systems import GregorianCalendar


def test_registry_lists_builtin_calendars():
    names = calgrid.list_calendars()
    assert {"gregorian", "iso", "julian"} <= set(names)
    assert calgrid.calendar_info("iso")["default_first_weekday"] == 2


def test_unknown_calendar():
    with pytest.raises(UnknownCalendarError):
        calgrid.get_calendar("martian")
    with pytest.raises(KeyError):
        calgrid.make_configuration(date(2024, 1, 1), date(2024, 1, 1), calendar="martian")


def test_register_calendar():
    sat = GregorianCalendar(first_weekday=7, name="saturday-first")
    calgrid.register_calendar("saturday-first", sat, overwrite=True)
    with pytest.raises(KeyError):
        calgrid.register_calendar("saturday-first", sat)

    config = calgrid.make_configuration(date(2024, 2, 1), date(2024, 2, 1), calendar="saturday-first")
    assert config.first_weekday == 7
    (feb,) = calgrid.generate_months(config, today=date(2000, 1, 1))
    # Thursday with Saturday first: 5 + 1 - 7 = -1 -> 6
    assert feb.metadata.first_day_weekday == 6


def test_calendar_object_accepted():
    config = calgrid.make_configuration(date(2024, 2, 1), date(2024, 2, 1), calendar=GregorianCalendar())
    assert config.calendar.name == "gregorian"


def test_cli_months(capsys):
    assert main(["months", "2024-01-01", "2024-03-31"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 3
    assert "2024-02 February" in lines[1]
    assert "days=29" in lines[1]
    assert "lead=4" in lines[1]
    assert lines[0].endswith("F-")
    assert lines[2].endswith("-L")


def test_cli_locate(capsys):
    assert main(["locate", "2023-01-15", "2025-01-10", "--month", "january", "--offset", "2"]) == 0
    assert capsys.readouterr().out.strip() == "month=12  January 2024"

    assert main(["locate", "2024-01-01", "2024-03-31", "--date", "2024-03-01"]) == 0
    assert capsys.readouterr().out.strip() == "month=2 day=5  March 2024"

    assert main(["locate", "2024-01-01", "2024-03-31", "--year", "2030"]) == 0
    assert capsys.readouterr().out.strip() == "no match"

    assert main(["locate", "2023-01-15", "2025-01-10", "--month", "Foo"]) == 0
    assert capsys.readouterr().out.strip() == "no match"


def test_cli_reports_configuration_errors(capsys):
    assert main(["months", "2024-03-01", "2024-01-01"]) == 2
    err = capsys.readouterr().err
    assert "precedes" in err


@pytest.mark.parametrize("argv", [
    ["months", "2024-02-30", "2024-03-31"],
    ["locate", "2024-01-01", "2024-03-31", "--date", "2024-13-01"],
    ["month", "2024-02", "2024-03-01"],
])
def test_cli_reports_invalid_dates(capsys, argv):
    assert main(argv) == 2
    err = capsys.readouterr().err.strip()
    assert err.startswith("calgrid: error: invalid date")
    assert len(err.splitlines()) == 1


def test_cli_calendars(capsys):
    assert main(["calendars"]) == 0
    out = capsys.readouterr().out
    assert "gregorian" in out and "julian" in out


def test_cli_pretty_month(capsys):
    assert main(["month", "2024-02-01", "2024-02-01", "--first-weekday", "2"]) == 0
    out = capsys.readouterr().out
    assert "February 2024" in out
    assert out.splitlines()[1].startswith("Mo     Tu")


def test_cli_date_shortcut(capsys):
    assert main(["2024-02-15"]) == 0
    out = capsys.readouterr().out
    assert "gregorian February 2024" in out
    assert out.splitlines()[1].startswith("Su     Mo")
