"""
Grammar for date phrases.

`parse` walks the token stream left to right. At every position the productions in
`PRODUCTIONS` are tried in order; the first one that matches consumes its tokens and records
what it found in a `PartialDate`. `resolve` then turns the `PartialDate` into an instant
relative to a base instant, going through a `BaseCalendar` for every date operation.

Supported forms:
  - ISO dates: '2018-04-01', optionally followed by a time ('2018-04-01T08:20:30Z')
  - month names: '1 April 2018', 'April 1, 2018', 'next April 1', 'April 2018'
  - slash and dot dates: '04/01/18', '4/1', 'last 8/11', '1.4.2018' (dialect decides the order)
  - weekdays: 'friday', 'next fri', 'last Thurs'
  - bare months: 'apr', 'last December'
  - intervals: '3h', '2 days ago', '-3 month', 'next week', 'tomorrow'
  - times: '18:03', '18:03:40.25', '8:30pm', '6.03pm', '9am', '08:20:30 +04:00', '10:20Z'
  - a lone year: '2018'
"""

from typing import Any, Callable

from loguru import logger
from pydantic import BaseModel, Field

from datephrase.arithmetic import apply_interval, named_date_year, pivot_year, weekday_offset, with_offset
from datephrase.base import BaseCalendar
from datephrase.errors import AmbiguousForm, EmptyInput, OutOfRange, UnexpectedToken
from datephrase.tokens import Token, TokenKind, TokenStream
from datephrase.types import Dialect, Direction, Interval, IntervalUnit
from datephrase.vocabulary import MODIFIERS, NAMED_DAYS, month_name, time_unit, week_day


class PartialDate(BaseModel):
    """Everything a phrase said, before it is pinned to a base instant."""

    year: int | None = None
    month: int | None = None
    day: int | None = None
    weekday: int | None = None
    direction: Direction | None = None
    hour: int | None = None
    minute: int | None = None
    second: int | None = None
    microsecond: int | None = None
    utc_offset: int | None = None
    # "absolute" | "named" | "weekday" | "relative"; only one date form per phrase
    anchor: str | None = None
    adjustments: list[Interval] = Field(default_factory=list)

    def assign(self, **fields: Any) -> None:
        """Set fields that are still empty. A field given twice makes the phrase ambiguous."""
        for name, value in fields.items():
            if getattr(self, name) is not None:
                raise AmbiguousForm(f"{name} is given more than once", field=name)
            setattr(self, name, value)

    @property
    def has_date(self) -> bool:
        return self.month is not None or self.weekday is not None

    @property
    def has_time(self) -> bool:
        return self.hour is not None


Production = Callable[[TokenStream, PartialDate, Dialect], bool]


# --------------------------
# Token helpers
# --------------------------
def _expect(stream: TokenStream, kind: TokenKind, expected: str | None = None) -> Token:
    token = stream.peek()
    if token.kind is not kind:
        raise UnexpectedToken(token.position, token.text, expected or kind.value)
    stream.advance()
    return token


def _check(field: str, value: int, low: int, high: int) -> int:
    if not low <= value <= high:
        raise OutOfRange(field, value)
    return value


def _modifier(stream: TokenStream) -> tuple[Direction | None, int]:
    """Direction word at the cursor, and how many tokens it takes (0 or 1)."""
    token = stream.peek()
    if token.kind is TokenKind.WORD and token.text in MODIFIERS:
        return MODIFIERS[token.text], 1
    return None, 0


def _starts_time(stream: TokenStream, offset: int) -> bool:
    """Whether the number at `offset` is the hour of a time rather than a day or a year."""
    follower = stream.peek(offset + 1)
    if follower.kind in (TokenKind.COLON, TokenKind.DOT, TokenKind.AMPM):
        return True
    return follower.kind is TokenKind.WORD and time_unit(follower.text) is not None


def _is_plain_number(stream: TokenStream, offset: int) -> bool:
    return stream.peek(offset).kind is TokenKind.NUMBER and not _starts_time(stream, offset)


def _assign_day_month(
    partial: PartialDate, day: int, month: int, year: int | None, direction: Direction | None
) -> None:
    _check("month", month, 1, 12)
    _check("day", day, 1, 31)
    if year is None:
        partial.assign(month=month, day=day, direction=direction or Direction.HERE, anchor="named")
    elif direction is not None:
        raise AmbiguousForm(f"'{direction.value}' cannot be combined with an explicit year", field="direction")
    else:
        partial.assign(year=year, month=month, day=day, anchor="absolute")


# --------------------------
# Date productions
# --------------------------
def iso_date(stream: TokenStream, partial: PartialDate, dialect: Dialect) -> bool:
    """yyyy-mm-dd"""
    first = stream.peek()
    if not (first.kind is TokenKind.NUMBER and first.digits == 4 and stream.peek(1).kind is TokenKind.DASH):
        return False
    stream.advance(2)
    month = _expect(stream, TokenKind.NUMBER, "month").value
    _expect(stream, TokenKind.DASH)
    day = _expect(stream, TokenKind.NUMBER, "day").value
    _assign_day_month(partial, day, month, first.value, None)
    return True


def day_month_date(stream: TokenStream, partial: PartialDate, dialect: Dialect) -> bool:
    """[next|last] 4 July [2017]"""
    direction, skip = _modifier(stream)
    day, name = stream.peek(skip), stream.peek(skip + 1)
    if day.kind is not TokenKind.NUMBER or name.kind is not TokenKind.WORD:
        return False
    month = month_name(name.text)
    if month is None:
        return False
    stream.advance(skip + 2)
    year = None
    if _is_plain_number(stream, 0):
        year_token = stream.advance()[0]
        year = pivot_year(year_token.value, year_token.digits)
    _assign_day_month(partial, day.value, month, year, direction)
    return True


def month_day_date(stream: TokenStream, partial: PartialDate, dialect: Dialect) -> bool:
    """[next|last] July 4 [2017], or July 2017"""
    direction, skip = _modifier(stream)
    name = stream.peek(skip)
    if name.kind is not TokenKind.WORD or not _is_plain_number(stream, skip + 1):
        return False
    month = month_name(name.text)
    if month is None:
        return False
    number = stream.peek(skip + 1)
    stream.advance(skip + 2)
    if number.digits == 4:
        _assign_day_month(partial, 1, month, number.value, direction)
        return True
    year = None
    if _is_plain_number(stream, 0):
        year_token = stream.advance()[0]
        year = pivot_year(year_token.value, year_token.digits)
    _assign_day_month(partial, number.value, month, year, direction)
    return True


def slash_date(stream: TokenStream, partial: PartialDate, dialect: Dialect) -> bool:
    """
    US: mm/dd/yy, mm/dd/yyyy, [next|last] mm/dd
    UK: dd/mm/yy, dd/mm/yyyy, [next|last] dd/mm

    Dots work as well as slashes, but only with all three parts: 'd.m' on its own is a time.
    """
    direction, skip = _modifier(stream)
    first, separator = stream.peek(skip), stream.peek(skip + 1)
    if first.kind is not TokenKind.NUMBER:
        return False
    if separator.kind is TokenKind.DOT:
        dotted = [stream.peek(skip + i).kind for i in range(2, 5)]
        if dotted != [TokenKind.NUMBER, TokenKind.DOT, TokenKind.NUMBER]:
            return False
    elif separator.kind is not TokenKind.SLASH:
        return False
    stream.advance(skip + 2)
    second = _expect(stream, TokenKind.NUMBER, "day or month")
    year = None
    if stream.peek().kind is separator.kind:
        stream.advance()
        year_token = _expect(stream, TokenKind.NUMBER, "year")
        year = pivot_year(year_token.value, year_token.digits)
    if dialect is Dialect.US:
        month, day = first.value, second.value
    else:
        day, month = first.value, second.value
    _assign_day_month(partial, day, month, year, direction)
    return True


def weekday_name(stream: TokenStream, partial: PartialDate, dialect: Dialect) -> bool:
    """[next|last|this] friday"""
    direction, skip = _modifier(stream)
    name = stream.peek(skip)
    if name.kind is not TokenKind.WORD:
        return False
    weekday = week_day(name.text)
    if weekday is None:
        return False
    stream.advance(skip + 1)
    partial.assign(weekday=weekday, direction=direction or Direction.HERE, anchor="weekday")
    return True


def bare_month(stream: TokenStream, partial: PartialDate, dialect: Dialect) -> bool:
    """[next|last|this] April: the first of the month"""
    direction, skip = _modifier(stream)
    name = stream.peek(skip)
    if name.kind is not TokenKind.WORD:
        return False
    month = month_name(name.text)
    if month is None:
        return False
    stream.advance(skip + 1)
    _assign_day_month(partial, 1, month, None, direction)
    return True


def bare_year(stream: TokenStream, partial: PartialDate, dialect: Dialect) -> bool:
    """A four-digit number with nothing after it is a year"""
    first = stream.peek()
    if not (first.kind is TokenKind.NUMBER and first.digits == 4 and stream.peek(1).kind is TokenKind.END):
        return False
    stream.advance()
    partial.assign(year=first.value, month=1, day=1, anchor="absolute")
    return True


# --------------------------
# Interval productions
# --------------------------
def named_day(stream: TokenStream, partial: PartialDate, dialect: Dialect) -> bool:
    """now, today, yesterday, tomorrow"""
    token = stream.peek()
    if token.kind is not TokenKind.WORD or token.text not in NAMED_DAYS:
        return False
    stream.advance()
    partial.assign(anchor="relative")
    partial.adjustments.append(NAMED_DAYS[token.text])
    return True


def modified_unit(stream: TokenStream, partial: PartialDate, dialect: Dialect) -> bool:
    """next week, last year, this month"""
    direction, _ = _modifier(stream)
    if direction is None:
        return False
    name = stream.peek(1)
    unit = time_unit(name.text) if name.kind is TokenKind.WORD else None
    if unit is None:
        return False
    stream.advance(2)
    factor = {Direction.NEXT: 1, Direction.LAST: -1, Direction.HERE: 0}[direction]
    partial.adjustments.append(unit * factor)
    return True


def counted_unit(stream: TokenStream, partial: PartialDate, dialect: Dialect) -> bool:
    """3 days, 15m ago, -2h"""
    first = stream.peek()
    negative = first.kind is TokenKind.DASH
    if negative:
        if stream.peek(1).kind is not TokenKind.NUMBER:
            return False
        stream.advance()
    elif first.kind is not TokenKind.NUMBER or stream.peek(1).kind is not TokenKind.WORD:
        return False
    count = stream.peek()
    name = stream.peek(1)
    unit = time_unit(name.text) if name.kind is TokenKind.WORD else None
    if unit is None:
        if negative:
            raise UnexpectedToken(name.position, name.text, "time unit")
        return False
    stream.advance(2)
    if stream.peek().is_word("ago"):
        if negative:
            token = stream.peek()
            raise UnexpectedToken(token.position, token.text, "no 'ago' after a negative interval")
        stream.advance()
        negative = True
    partial.adjustments.append(unit * (-count.value if negative else count.value))
    return True


# --------------------------
# Time productions
# --------------------------
def _time_start(stream: TokenStream, separator: TokenKind) -> int | None:
    """Tokens to skip before the hour: 1 for the 'T' in ISO timestamps, else 0. None if no match."""
    skip = 1 if stream.peek().is_word("t") else 0
    if stream.peek(skip).kind is TokenKind.NUMBER and stream.peek(skip + 1).kind is separator:
        return skip
    return None


def _twelve_hour(hour: int, meridiem: str) -> int:
    _check("hour", hour, 0, 12)
    if meridiem == "am":
        return 0 if hour == 12 else hour
    return 12 if hour == 12 else hour + 12


def _utc_offset(stream: TokenStream) -> int | None:
    """+04:00, -0700, +04, Z"""
    token = stream.peek()
    if token.is_word("z"):
        stream.advance()
        return 0
    if token.kind not in (TokenKind.PLUS, TokenKind.DASH) or stream.peek(1).kind is not TokenKind.NUMBER:
        return None
    # '10:00 -3h' is an interval after a time, not an offset
    follower = stream.peek(2)
    if follower.kind is TokenKind.WORD and time_unit(follower.text) is not None:
        return None
    sign = -1 if token.kind is TokenKind.DASH else 1
    hours_token = stream.advance(2)[1]
    if stream.peek().kind is TokenKind.COLON:
        stream.advance()
        hours, minutes = hours_token.value, _expect(stream, TokenKind.NUMBER, "offset minutes").value
    elif hours_token.digits == 4:
        hours, minutes = divmod(hours_token.value, 100)
    else:
        hours, minutes = hours_token.value, 0
    _check("offset hour", hours, 0, 23)
    _check("offset minute", minutes, 0, 59)
    return sign * 60 * (minutes + 60 * hours)


def formal_time(stream: TokenStream, partial: PartialDate, dialect: Dialect) -> bool:
    """hh:mm[:ss[.ffffff]] followed by am/pm, Z or a UTC offset"""
    skip = _time_start(stream, TokenKind.COLON)
    if skip is None:
        return False
    hour = stream.advance(skip + 2)[-2].value
    minute = _check("minute", _expect(stream, TokenKind.NUMBER, "minutes").value, 0, 59)
    second = microsecond = 0
    if stream.peek().kind is TokenKind.COLON:
        stream.advance()
        second = _check("second", _expect(stream, TokenKind.NUMBER, "seconds").value, 0, 59)
        if stream.peek().kind is TokenKind.DOT and stream.peek(1).kind is TokenKind.NUMBER:
            # only microsecond precision is kept
            fraction = stream.advance(2)[1].text
            microsecond = int(fraction[:6].ljust(6, "0"))
    token = stream.peek()
    if token.kind is TokenKind.AMPM:
        stream.advance()
        hour = _twelve_hour(hour, token.text)
    else:
        _check("hour", hour, 0, 23)
    partial.assign(hour=hour, minute=minute, second=second, microsecond=microsecond)
    offset = _utc_offset(stream)
    if offset is not None:
        partial.assign(utc_offset=offset)
    return True


def informal_time(stream: TokenStream, partial: PartialDate, dialect: Dialect) -> bool:
    """h.mm[am|pm] and h am|pm"""
    skip = _time_start(stream, TokenKind.DOT)
    if skip is not None:
        if stream.peek(skip + 2).kind is not TokenKind.NUMBER:
            return False
        hour, _, minute_token = stream.advance(skip + 3)[skip:]
        minute = _check("minute", minute_token.value, 0, 59)
    elif stream.peek().kind is TokenKind.NUMBER and stream.peek(1).kind is TokenKind.AMPM:
        hour, minute = stream.advance()[0], 0
    else:
        return False
    token = stream.peek()
    if token.kind is TokenKind.AMPM:
        stream.advance()
        value = _twelve_hour(hour.value, token.text)
    else:
        value = _check("hour", hour.value, 0, 23)
    partial.assign(hour=value, minute=minute, second=0, microsecond=0)
    return True


# Priority order: earlier productions win when several could match at the same position
PRODUCTIONS: tuple[Production, ...] = (
    iso_date,
    day_month_date,
    month_day_date,
    slash_date,
    weekday_name,
    bare_month,
    named_day,
    modified_unit,
    counted_unit,
    formal_time,
    informal_time,
    bare_year,
)


def parse(text: str, dialect: Dialect) -> PartialDate:
    stream = TokenStream(text)
    if stream.at_end():
        raise EmptyInput()

    partial = PartialDate()
    while not stream.at_end():
        token = stream.peek()
        for production in PRODUCTIONS:
            if production(stream, partial, dialect):
                logger.debug(f"{production.__name__} matched at position {token.position} of {text!r}")
                break
        else:
            raise UnexpectedToken(token.position, token.text)
    logger.debug(f"parsed {text!r}: {partial!r}")
    return partial


def resolve(partial: PartialDate, base: Any, calendar: BaseCalendar, dialect: Dialect) -> Any:
    """Pin `partial` to `base`: explicit fields first, then the UTC offset, then the intervals in order."""
    base_year, base_month, base_day = calendar.components(base)[:3]
    time = (partial.hour, partial.minute, partial.second, partial.microsecond) if partial.has_time else (0, 0, 0, 0)

    if partial.weekday is not None:
        offset = weekday_offset(calendar.weekday(base), partial.weekday, partial.direction, dialect)
        target = calendar.add_days(calendar.from_components(base_year, base_month, base_day), offset)
        year, month, day = calendar.components(target)[:3]
        instant = calendar.from_components(year, month, day, *time)
    elif partial.month is not None:
        year = partial.year
        if year is None:
            year = named_date_year(partial.month, partial.day, (base_year, base_month, base_day), partial.direction)
        instant = calendar.from_components(year, partial.month, partial.day, *time)
    elif partial.has_time or any(a.unit is IntervalUnit.MONTHS for a in partial.adjustments):
        # A month step from 'now' lands on the start of the day, like a named date
        instant = calendar.from_components(base_year, base_month, base_day, *time)
    else:
        instant = base

    if partial.utc_offset is not None:
        instant = with_offset(calendar, instant, partial.utc_offset)
    for interval in partial.adjustments:
        instant = apply_interval(calendar, instant, interval)
        logger.debug(f"applied {interval}: {instant}")
    return instant
