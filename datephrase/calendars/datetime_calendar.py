from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any

from beartype import beartype
from dateutil.relativedelta import relativedelta

from datephrase.base import BaseCalendar
from datephrase.errors import BackendConstructionFailed


@beartype
class DatetimeCalendar(BaseCalendar):
    """Standard library `datetime`, naive or aware (`zoneinfo.ZoneInfo`, `timezone`, ...)."""

    name = "datetime"

    def __init__(self, tz: tzinfo | None = None) -> None:
        self.tz = tz

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(tz={self.tz!r})"

    @classmethod
    def supports(cls, instant: Any) -> bool:
        return isinstance(instant, datetime)

    @classmethod
    def from_instant(cls, instant: datetime) -> "DatetimeCalendar":
        return cls(instant.tzinfo)

    def now(self) -> datetime:
        return datetime.now(self.tz)

    def components(self, instant: datetime) -> tuple[int, int, int, int, int, int]:
        return instant.year, instant.month, instant.day, instant.hour, instant.minute, instant.second

    def weekday(self, instant: datetime) -> int:
        return instant.weekday()

    def utc_offset(self, instant: datetime) -> int:
        offset = instant.utcoffset()
        return 0 if offset is None else int(offset.total_seconds())

    def from_components(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
    ) -> datetime:
        try:
            return datetime(year, month, day, hour, minute, second, microsecond, tzinfo=self.tz)
        except (ValueError, OverflowError) as e:
            raise BackendConstructionFailed(self.name, e) from e

    def add_seconds(self, instant: datetime, seconds: int) -> datetime:
        try:
            if instant.tzinfo is None:
                return instant + timedelta(seconds=seconds)
            # Aware arithmetic in Python is wall-clock; go through UTC for elapsed time
            shifted = instant.astimezone(timezone.utc) + timedelta(seconds=seconds)
            return shifted.astimezone(instant.tzinfo)
        except (ValueError, OverflowError) as e:
            raise BackendConstructionFailed(self.name, e) from e

    def add_days(self, instant: datetime, days: int) -> datetime:
        try:
            return instant + timedelta(days=days)
        except (ValueError, OverflowError) as e:
            raise BackendConstructionFailed(self.name, e) from e

    def add_months(self, instant: datetime, months: int) -> datetime:
        try:
            return instant + relativedelta(months=months)
        except (ValueError, OverflowError) as e:
            raise BackendConstructionFailed(self.name, e) from e
