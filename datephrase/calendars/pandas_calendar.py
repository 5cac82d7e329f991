from datetime import tzinfo
from typing import Any

import pandas as pd
from beartype import beartype

from datephrase.base import BaseCalendar
from datephrase.errors import BackendConstructionFailed


@beartype
class PandasCalendar(BaseCalendar):
    """`pandas.Timestamp`, tz-naive or tz-aware. `DateOffset` does the calendar-aware steps."""

    name = "pandas"

    def __init__(self, tz: tzinfo | str | None = None) -> None:
        self.tz = tz

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(tz={self.tz!r})"

    @classmethod
    def supports(cls, instant: Any) -> bool:
        return isinstance(instant, pd.Timestamp)

    @classmethod
    def from_instant(cls, instant: pd.Timestamp) -> "PandasCalendar":
        return cls(instant.tz)

    def now(self) -> pd.Timestamp:
        return pd.Timestamp.now(tz=self.tz)

    def components(self, instant: pd.Timestamp) -> tuple[int, int, int, int, int, int]:
        return instant.year, instant.month, instant.day, instant.hour, instant.minute, instant.second

    def weekday(self, instant: pd.Timestamp) -> int:
        return instant.dayofweek

    def utc_offset(self, instant: pd.Timestamp) -> int:
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
    ) -> pd.Timestamp:
        try:
            return pd.Timestamp(
                year=year,
                month=month,
                day=day,
                hour=hour,
                minute=minute,
                second=second,
                microsecond=microsecond,
                tz=self.tz,
            )
        except (ValueError, OverflowError) as e:
            raise BackendConstructionFailed(self.name, e) from e

    def add_seconds(self, instant: pd.Timestamp, seconds: int) -> pd.Timestamp:
        # Timedelta arithmetic on tz-aware timestamps is absolute time
        try:
            return instant + pd.Timedelta(seconds=seconds)
        except (ValueError, OverflowError) as e:
            raise BackendConstructionFailed(self.name, e) from e

    def add_days(self, instant: pd.Timestamp, days: int) -> pd.Timestamp:
        try:
            return instant + pd.DateOffset(days=days)
        except (ValueError, OverflowError) as e:
            raise BackendConstructionFailed(self.name, e) from e

    def add_months(self, instant: pd.Timestamp, months: int) -> pd.Timestamp:
        try:
            return instant + pd.DateOffset(months=months)
        except (ValueError, OverflowError) as e:
            raise BackendConstructionFailed(self.name, e) from e
