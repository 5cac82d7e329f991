"""Calendar adapters, one per date/time library, and `calendar_for` to pick one from an instant."""

from typing import Any

from datephrase.base import BaseCalendar
from datephrase.calendars.datetime_calendar import DatetimeCalendar
from datephrase.calendars.numpy_calendar import NumpyCalendar
from datephrase.calendars.pandas_calendar import PandasCalendar


# pandas.Timestamp subclasses datetime, so it has to be tried first
CALENDARS: tuple[type[BaseCalendar], ...] = (PandasCalendar, DatetimeCalendar, NumpyCalendar)
CALENDARS_BY_NAME = {calendar.name: calendar for calendar in CALENDARS}


def calendar_for(instant: Any) -> BaseCalendar:
    """Return the adapter for the library `instant` comes from, set to the instant's timezone."""
    for calendar in CALENDARS:
        if calendar.supports(instant):
            return calendar.from_instant(instant)
    raise TypeError(f"No calendar adapter for {type(instant).__name__} instances")


__all__ = [
    "CALENDARS",
    "CALENDARS_BY_NAME",
    "DatetimeCalendar",
    "NumpyCalendar",
    "PandasCalendar",
    "calendar_for",
]
