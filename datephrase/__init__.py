from loguru import logger

from datephrase.base import BaseCalendar
from datephrase.calendars import CALENDARS_BY_NAME, DatetimeCalendar, NumpyCalendar, PandasCalendar, calendar_for
from datephrase.dates import parse_date_string, parse_duration
from datephrase.errors import (
    AmbiguousForm,
    BackendConstructionFailed,
    DateParseError,
    EmptyInput,
    OutOfRange,
    UnexpectedAbsoluteDate,
    UnexpectedDate,
    UnexpectedTime,
    UnexpectedToken,
)
from datephrase.types import Dialect, Direction, Interval, IntervalUnit


# Library code stays quiet unless the application opts in with logger.enable("datephrase")
logger.disable("datephrase")

__all__ = [
    "AmbiguousForm",
    "BackendConstructionFailed",
    "BaseCalendar",
    "CALENDARS_BY_NAME",
    "DateParseError",
    "DatetimeCalendar",
    "Dialect",
    "Direction",
    "EmptyInput",
    "Interval",
    "IntervalUnit",
    "NumpyCalendar",
    "OutOfRange",
    "PandasCalendar",
    "UnexpectedAbsoluteDate",
    "UnexpectedDate",
    "UnexpectedTime",
    "UnexpectedToken",
    "calendar_for",
    "parse_date_string",
    "parse_duration",
]
