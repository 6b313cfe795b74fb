# tests/test_view.py

import pytest
from dataclasses import replace
from datetime import date

import calgrid
from calgrid.core.errors import ConfigurationError
from calgrid.core.types import GridLocation, LayoutBehavior, ScrollDirection, ScrollingBehavior
from calgrid.view import CalendarView

TODAY = date(2024, 2, 15)


class Source:
    def __init__(self, config):
        self.config = config
        self.calls = 0

    def configuration(self, view):
        self.calls += 1
        return self.config

    def cell_for_item(self, view, location, day):
        return (location, day.number)


class HeaderSource(Source):
    def header_for_month(self, view, kind, index, month):
        return f"{kind}:{month.name.name}:{index}"


class Recorder:
    def __init__(self):
        self.selected = []
        self.changed = []

    def did_select_day(self, view, day, location):
        self.selected.append((day.date, location))

    def did_change_month(self, view, month):
        self.changed.append(month.index)


@pytest.fixture
def config():
    return calgrid.make_configuration(date(2023, 1, 15), date(2025, 1, 10), first_weekday=1)


@pytest.fixture
def view(config):
    return CalendarView(Source(config), Recorder(), today=TODAY)


def test_queries(view):
    assert view.number_of_months == 25
    assert view.displayed_month.index == 0
    assert view.month(13).name is calgrid.MonthsOfYear.FEBRUARY
    assert view.number_of_weeks(13) == 5
    assert view.number_of_items(13) == 35
    assert view.day(13, 4).date == date(2024, 2, 1)
    assert view.day(13, 18).is_today


def test_negative_indices_are_rejected(view):
    with pytest.raises(IndexError):
        view.month(-1)
    with pytest.raises(IndexError):
        view.day(0, -1)
    with pytest.raises(IndexError):
        view.day(-1, 0)
    with pytest.raises(IndexError):
        view.number_of_weeks(-1)
    with pytest.raises(IndexError):
        view.number_of_items(-1)
    with pytest.raises(IndexError):
        view.cell_for_item(GridLocation(-1, 0))
    with pytest.raises(IndexError):
        view.header_for_month(-1)
    with pytest.raises(IndexError):
        view.did_select_item(GridLocation(0, -3))
    assert view.delegate.selected == []


def test_attach_announces_first_month(view):
    view.attach()
    assert view.delegate.changed == [0]


def test_next_and_previous(view):
    assert view.move_to_previous_month() is None
    assert view.delegate.changed == []

    month = view.move_to_next_month(animate=False)
    assert month.index == 1
    assert view.displayed_month.index == 1
    assert view.last_scroll.location == GridLocation(1, 0)
    assert view.last_scroll.position == "centered_horizontally"
    assert view.last_scroll.animated is False

    view.move_to_previous_month()
    assert view.delegate.changed == [1, 0]


def test_next_stops_at_last_month(view):
    view.move_to_year(2025)
    assert view.displayed_month.is_last_displayable_month
    before = view.last_scroll
    assert view.move_to_next_month() is None
    assert view.last_scroll is before
    assert view.delegate.changed == [24]


def test_move_to_month_offset_is_a_magnitude(view):
    assert view.move_to_month(calgrid.MonthsOfYear.JANUARY, offset=-2).index == 12
    assert view.move_to_month("january", offset=4) is None
    assert view.displayed_month.index == 12
    assert view.delegate.changed == [12]


def test_unknown_month_is_ignored(view):
    view.move_to_year(2024)
    before = view.last_scroll
    assert view.move_to_month(13) is None
    assert view.move_to_month("Foo") is None
    assert view.displayed_month.index == 12
    assert view.last_scroll is before
    assert view.delegate.changed == [12]


def test_move_to_date(view):
    month = view.move_to_date(date(2024, 3, 1))
    assert (month.year, month.number) == (2024, 3)
    assert view.last_scroll.location.month_index == 14
    assert view.day(*view.last_scroll.location).date == date(2024, 3, 1)
    assert view.move_to_date(date(2030, 1, 1)) is None
    assert view.displayed_month.index == 14


def test_selection_and_scrolling(view):
    view.did_select_item(GridLocation(13, 18))
    assert view.delegate.selected == [(date(2024, 2, 15), GridLocation(13, 18))]

    view.did_end_scrolling(5)
    view.did_end_scrolling(99)
    assert view.displayed_month.index == 5
    assert view.delegate.changed == [5]


def test_rendering_callbacks(view, config):
    assert view.cell_for_item(GridLocation(0, 0)) == (GridLocation(0, 0), "1")
    cells = view.visible_items(13)
    assert len(cells) == 35
    assert cells[4][1] == "1"
    assert view.header_for_month(0) is None

    hv = CalendarView(HeaderSource(config), today=TODAY)
    assert hv.header_for_month(13) == "calendar-header:FEBRUARY:13"


def test_reconfigure_replaces_months(view, config):
    source = view.data_source
    view.move_to_year(2024)
    old = view.months

    source.config = config.tweak(end_date=date(2023, 6, 1))
    view.reload_data()
    assert view.months is not old
    assert view.number_of_months == 6
    assert view.displayed_month.index == 0
    assert view.last_scroll is None


def test_failed_reconfigure_keeps_published_months(view, config):
    old = view.months
    view.data_source.config = replace(config, end_date=date(2020, 1, 1))
    with pytest.raises(ConfigurationError):
        view.reload_data()
    assert view.months is old


def test_vertical_layout_hint(config):
    vertical = config.tweak(layout_behavior=LayoutBehavior(scroll_direction=ScrollDirection.VERTICAL))
    v = CalendarView(Source(vertical), today=TODAY)
    v.move_to_next_month()
    assert v.last_scroll.position == "centered_vertically"


def test_paging_hint(view, config):
    view.move_to_next_month()
    assert view.last_scroll.paged is True

    continuous = config.tweak(layout_behavior=LayoutBehavior(scroll_behavior=ScrollingBehavior.CONTINUOUS))
    v = CalendarView(Source(continuous), today=TODAY)
    v.move_to_next_month()
    assert v.last_scroll.paged is False
    assert v.last_scroll.position == "centered_horizontally"


def test_default_configuration_without_data_source():
    v = CalendarView(today=date(2024, 5, 10))
    assert v.number_of_months == 13
    assert v.configuration.fill_next_month_dates
    assert v.cell_for_item(GridLocation(0, 0)) is None
