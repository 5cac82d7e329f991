from typing import Any

from datephrase.base import BaseCalendar
from datephrase.types import Dialect, Direction, Interval, IntervalUnit


# Two-digit years land in this window (both ends included)
PIVOT_WINDOW = (1940, 2040)


def pivot_year(value: int, digits: int) -> int:
    """'18' -> 2018, '45' -> 1945. Only exactly-two-digit years are pivoted."""
    if digits != 2:
        return value
    year = 2000 + value
    low, high = PIVOT_WINDOW
    return year if low <= year <= high else 1900 + value


def weekday_offset(base_weekday: int, target: int, direction: Direction, dialect: Dialect) -> int:
    """
    Days from the base date to the requested weekday.

    A plain 'friday' is the coming Friday, today included. 'last friday' is always the week before
    that. 'next friday' is ambiguous: in the US it means the same as 'friday' (this is how the
    `date` command reads it) but otherwise it means the Friday of next week.
    """
    days = (target - base_weekday) % 7
    if direction is Direction.LAST:
        days -= 7
    elif direction is Direction.NEXT and dialect is Dialect.UK:
        days += 7
    return days


def named_date_year(month: int, day: int, base: tuple[int, int, int], direction: Direction) -> int:
    """
    Year for a day-month without a year ('April 1', '8/11', 'jul').

    The base year is assumed. 'next' pushes a date already behind the base date into next year,
    'last' pulls a date still ahead of it into last year.
    """
    base_year, base_month, base_day = base
    if direction is Direction.NEXT and (month, day) < (base_month, base_day):
        return base_year + 1
    if direction is Direction.LAST and (month, day) > (base_month, base_day):
        return base_year - 1
    return base_year


def apply_interval(calendar: BaseCalendar, instant: Any, interval: Interval) -> Any:
    if interval.unit is IntervalUnit.SECONDS:
        return calendar.add_seconds(instant, interval.amount)
    if interval.unit is IntervalUnit.DAYS:
        return calendar.add_days(instant, interval.amount)
    return calendar.add_months(instant, interval.amount)


def with_offset(calendar: BaseCalendar, instant: Any, offset: int) -> Any:
    """Reinterpret `instant`'s wall-clock time as being `offset` seconds east of UTC."""
    return calendar.add_seconds(instant, calendar.utc_offset(instant) - offset)
