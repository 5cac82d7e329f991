"""
Resolve a date phrase from the command line.

    python -m datephrase --text "next friday 8pm"
    python -m datephrase --text "8/11" --dialect us --calendar pandas --timezone Europe/Berlin
    python -m datephrase --text "2 weeks ago" --duration
"""

import functools
import sys
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from loguru import logger
from pydantic import BaseModel, Field

from datephrase.base import BaseCalendar, omni_import
from datephrase.calendars import CALENDARS_BY_NAME, NumpyCalendar
from datephrase.cli import cli
from datephrase.dates import parse_date_string, parse_duration
from datephrase.errors import DateParseError
from datephrase.log_format import log_formatter
from datephrase.types import Dialect


class Config(BaseModel):
    text: str = Field(description="The phrase to parse")
    dialect: Dialect = Field(default=Dialect.UK, description="uk reads 8/11 as 8 Nov, us as Aug 11")
    calendar: str = Field(
        default="datetime",
        description="datetime, pandas, numpy, or the import path of a BaseCalendar subclass",
    )
    timezone: str | None = Field(default=None, description="IANA timezone of the base instant, e.g. Europe/London")
    duration: bool = Field(default=False, description="Parse the text as a duration instead of a date")
    verbose: bool = Field(default=False, description="Log how the phrase was parsed")


def build_calendar(name: str, timezone: str | None) -> BaseCalendar:
    calendar_cls = CALENDARS_BY_NAME.get(name) or omni_import(name)
    if not (isinstance(calendar_cls, type) and issubclass(calendar_cls, BaseCalendar)):
        raise TypeError(f"{name} is not a BaseCalendar subclass")
    if timezone is None:
        return calendar_cls()
    if calendar_cls is NumpyCalendar:
        raise TypeError("the numpy calendar has no timezones")
    return calendar_cls(ZoneInfo(timezone))


@cli
def main(config: Config) -> int:
    """Resolve a date phrase against the current time."""
    if config.verbose:
        logger.remove()
        logger.level("DEBUG", color="<fg #808080>")
        logger.add(sys.stderr, level="DEBUG", format=functools.partial(log_formatter, colorize=True))
        logger.enable("datephrase")

    try:
        if config.duration:
            print(parse_duration(config.text))
            return 0
        calendar = build_calendar(config.calendar, config.timezone)
        with logger.contextualize(text=config.text):
            print(parse_date_string(config.text, calendar=calendar, dialect=config.dialect))
    except (DateParseError, ImportError, ZoneInfoNotFoundError, TypeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
