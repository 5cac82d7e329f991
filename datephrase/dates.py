"""Entry points: resolve a date phrase against a base instant, or read a phrase as a duration."""

from typing import Any

from beartype import beartype
from loguru import logger

from datephrase.base import BaseCalendar
from datephrase.calendars import DatetimeCalendar, calendar_for
from datephrase.errors import EmptyInput, UnexpectedAbsoluteDate, UnexpectedDate, UnexpectedTime, UnexpectedToken
from datephrase.grammar import parse, resolve
from datephrase.types import Dialect, Interval


@beartype
def parse_date_string(
    text: str,
    now: Any = None,
    dialect: Dialect = Dialect.UK,
    calendar: BaseCalendar | None = None,
) -> Any:
    """
    Parse a date phrase such as 'next friday 8pm', '3 days ago' or '2018-04-01T10:00Z'.

    Relative parts are measured from `now`, which can be a `datetime`, a `pandas.Timestamp` or a
    `numpy.datetime64`; the result has the same type and, where the library supports it, the same
    timezone. With no `now` the current time is used, taken from `calendar` or from a naive
    local `datetime`.

    Args:
        text: the phrase to parse. Case and extra whitespace do not matter.
        now: the base instant.
        dialect: decides between 'dd/mm' and 'mm/dd', and what 'next friday' means.
        calendar: the adapter to do date arithmetic with. Defaults to the one matching `now`.

    Raises:
        DateParseError: one of its subclasses, depending on what went wrong.
    """
    if calendar is None:
        calendar = DatetimeCalendar() if now is None else calendar_for(now)
    if now is None:
        now = calendar.now()

    partial = parse(text, dialect)
    result = resolve(partial, now, calendar, dialect)
    logger.debug(f"{text!r} from {now} ({dialect.value}, {calendar!r}) -> {result}")
    return result


@beartype
def parse_duration(text: str) -> Interval:
    """
    Parse a phrase that only describes an amount of time, such as '3 weeks' or '15m ago'.

    Parts in the same unit are added up ('1 day 2 weeks' is 15 days). Seconds, days and months
    are never converted into each other, so mixing them raises `AmbiguousForm`.
    """
    partial = parse(text, Dialect.UK)
    if partial.has_time:
        raise UnexpectedTime()
    if partial.year is not None:
        raise UnexpectedAbsoluteDate()
    if partial.has_date:
        raise UnexpectedDate()
    if not partial.adjustments:
        if not text.strip():
            raise EmptyInput()
        raise UnexpectedToken(0, text.strip())

    duration, *rest = partial.adjustments
    for interval in rest:
        duration = duration + interval
    logger.debug(f"{text!r} -> {duration}")
    return duration
