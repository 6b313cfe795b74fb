"""
calgrid.view
------------
Toolkit-independent calendar view. Owns the generated month tuple for the
lifetime of one configuration and mediates between a host data source
(configuration + cell/header rendering) and a host delegate (selection and
displayed-month events).

The host widget toolkit does the actual drawing and scrolling: this class
only says *what* to render and *where* to scroll (``last_scroll``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, List, Optional, Protocol, Tuple

from calgrid.core.types import CalendarConfiguration, CalendarDay, CalendarMonth, GridLocation
from calgrid.engines.generate import generate
from calgrid.engines import navigation as nav

logger = logging.getLogger(__name__)

HEADER_KIND = "calendar-header"


class CalendarDataSource(Protocol):
    def configuration(self, view: "CalendarView") -> CalendarConfiguration:
        """Called whenever the data source is assigned or the view reloads."""
        ...

    def cell_for_item(self, view: "CalendarView", location: GridLocation, day: CalendarDay) -> Any:
        """Return an opaque renderable for one day cell."""
        ...

    # Optional:
    # def header_for_month(self, view, kind: str, index: int, month: CalendarMonth) -> Any


class CalendarDelegate(Protocol):
    def did_select_day(self, view: "CalendarView", day: CalendarDay, location: GridLocation) -> None: ...

    def did_change_month(self, view: "CalendarView", month: CalendarMonth) -> None: ...


@dataclass(frozen=True)
class ScrollRequest:
    location: GridLocation
    position: str
    animated: bool
    paged: bool = True


class CalendarView:
    def __init__(
        self,
        data_source: Optional[CalendarDataSource] = None,
        delegate: Optional[CalendarDelegate] = None,
        *,
        today: Optional[date] = None,
    ):
        self.delegate = delegate
        self._today = today
        self._data_source: Optional[CalendarDataSource] = None
        self._configuration: Optional[CalendarConfiguration] = None
        self._months: Tuple[CalendarMonth, ...] = ()
        self._displayed: Optional[int] = None
        self.last_scroll: Optional[ScrollRequest] = None
        self.data_source = data_source

    # ---------------------------------------------------------
    # Configuration
    # ---------------------------------------------------------

    @property
    def data_source(self) -> Optional[CalendarDataSource]:
        return self._data_source

    @data_source.setter
    def data_source(self, value: Optional[CalendarDataSource]) -> None:
        self._data_source = value
        self.reload_data()

    @property
    def configuration(self) -> CalendarConfiguration:
        if self._configuration is None:
            self.reload_data()
        return self._configuration

    def reload_data(self) -> None:
        """Regenerate from the data source; the old tuple stays published on failure."""
        if self._data_source is not None:
            config = self._data_source.configuration(self)
        else:
            config = CalendarConfiguration.default(today=self._today)
        months = generate(config, today=self._today)

        self._configuration = config
        self._months = months
        self._displayed = 0 if months else None
        self.last_scroll = None
        logger.debug("view reloaded: %d month(s)", len(months))

    # ---------------------------------------------------------
    # Queries
    # ---------------------------------------------------------

    @property
    def months(self) -> Tuple[CalendarMonth, ...]:
        return self._months

    @property
    def number_of_months(self) -> int:
        return len(self._months)

    def number_of_weeks(self, month_index: int) -> int:
        return self.month(month_index).number_of_weeks

    def number_of_items(self, month_index: int) -> int:
        return len(self.month(month_index).days)

    def month(self, index: int) -> CalendarMonth:
        if index < 0:
            raise IndexError(f"month index {index} is negative")
        return self._months[index]

    def day(self, month_index: int, day_index: int) -> CalendarDay:
        if day_index < 0:
            raise IndexError(f"day index {day_index} is negative")
        return self.month(month_index).days[day_index]

    @property
    def displayed_month(self) -> Optional[CalendarMonth]:
        if self._displayed is None or not self._months:
            return None
        if self._displayed >= len(self._months):
            return None
        return self._months[self._displayed]

    # ---------------------------------------------------------
    # Rendering
    # ---------------------------------------------------------

    def cell_for_item(self, location: GridLocation) -> Any:
        day = self.day(*location)
        if self._data_source is None:
            return None
        return self._data_source.cell_for_item(self, GridLocation(*location), day)

    def header_for_month(self, index: int, kind: str = HEADER_KIND) -> Any:
        month = self.month(index)
        fn = getattr(self._data_source, "header_for_month", None)
        if fn is None:
            return None
        return fn(self, kind, index, month)

    def visible_items(self, month_index: int) -> List[Any]:
        return [self.cell_for_item(GridLocation(month_index, i)) for i in range(self.number_of_items(month_index))]

    # ---------------------------------------------------------
    # Host events
    # ---------------------------------------------------------

    def attach(self) -> None:
        """The view became visible: announce the first month."""
        if self._months and self.delegate is not None:
            self.delegate.did_change_month(self, self._months[0])

    def did_select_item(self, location: GridLocation) -> None:
        day = self.day(*location)
        if self.delegate is not None:
            self.delegate.did_select_day(self, day, GridLocation(*location))

    def did_end_scrolling(self, month_index: int) -> None:
        """The user finished a scroll gesture with ``month_index`` in view."""
        if not 0 <= month_index < len(self._months):
            return
        self._displayed = month_index
        if self.delegate is not None:
            self.delegate.did_change_month(self, self._months[month_index])

    # ---------------------------------------------------------
    # Programmatic navigation
    # ---------------------------------------------------------

    def _scroll(self, location: GridLocation, animate: bool) -> CalendarMonth:
        layout = self.configuration.layout_behavior
        self.last_scroll = ScrollRequest(
            location=location,
            position=layout.scroll_position,
            animated=animate,
            paged=layout.paging_enabled,
        )
        self._displayed = location.month_index
        month = self._months[location.month_index]
        if self.delegate is not None:
            self.delegate.did_change_month(self, month)
        return month

    def _miss(self, what: str) -> None:
        logger.debug("navigation ignored: %s", what)
        return None

    def move_to_next_month(self, animate: bool = True) -> Optional[CalendarMonth]:
        idx = nav.resolve_next(self._months, self._displayed)
        if idx is None:
            return self._miss("next month")
        return self._scroll(GridLocation(idx, 0), animate)

    def move_to_previous_month(self, animate: bool = True) -> Optional[CalendarMonth]:
        idx = nav.resolve_previous(self._months, self._displayed)
        if idx is None:
            return self._miss("previous month")
        return self._scroll(GridLocation(idx, 0), animate)

    def move_to_date(self, target: Any, animate: bool = True) -> Optional[CalendarMonth]:
        loc = nav.resolve_date(self._months, target, self.configuration.calendar)
        if loc is None:
            return self._miss(f"date {target}")
        return self._scroll(loc, animate)

    def move_to_month(self, month: Any, offset: int = 1, animate: bool = True) -> Optional[CalendarMonth]:
        idx = nav.resolve_month(self._months, month, nav.positive(offset))
        if idx is None:
            return self._miss(f"month {month} #{offset}")
        return self._scroll(GridLocation(idx, 0), animate)

    def move_to_year(self, year: int, animate: bool = True) -> Optional[CalendarMonth]:
        idx = nav.resolve_year(self._months, year)
        if idx is None:
            return self._miss(f"year {year}")
        return self._scroll(GridLocation(idx, 0), animate)
