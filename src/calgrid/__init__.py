"""calgrid public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_calendars,
    calendar_info,
    get_calendar,
    register_calendar,
    make_configuration,
    generate_months,
    locate_date,
    locate_month,
    locate_year,
)
from .core.errors import CalgridError, ConfigurationError, MetadataGenerationError, UnknownCalendarError
from .core.types import (
    CalendarConfiguration,
    CalendarDay,
    CalendarMonth,
    GridLocation,
    LayoutBehavior,
    MonthMetadata,
    MonthsOfYear,
    ScrollDirection,
    ScrollingBehavior,
    Weekday,
)
from .engines.generate import weekday_symbols
from .view import CalendarView

__all__ = [
    "list_calendars",
    "calendar_info",
    "get_calendar",
    "register_calendar",
    "make_configuration",
    "generate_months",
    "locate_date",
    "locate_month",
    "locate_year",
    "weekday_symbols",
    "CalendarView",
    "CalendarConfiguration",
    "CalendarDay",
    "CalendarMonth",
    "GridLocation",
    "LayoutBehavior",
    "MonthMetadata",
    "MonthsOfYear",
    "ScrollDirection",
    "ScrollingBehavior",
    "Weekday",
    "CalgridError",
    "ConfigurationError",
    "MetadataGenerationError",
    "UnknownCalendarError",
]
