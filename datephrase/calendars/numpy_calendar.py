from typing import Any

import numpy as np
from beartype import beartype

from datephrase.base import BaseCalendar
from datephrase.errors import BackendConstructionFailed


_EPOCH_MONTH = np.datetime64(0, "M")  # 1970-01
_US_PER_SECOND = 1_000_000
_US_PER_DAY = 86_400 * _US_PER_SECOND
# The smallest int64 is NaT
_US_MIN, _US_MAX = int(np.iinfo(np.int64).min) + 1, int(np.iinfo(np.int64).max)
# Well past the datetime64[us] range, yet small enough for month and day counts in int64
_YEAR_LIMIT = 1_000_000


def _as_us(instant: np.datetime64) -> np.datetime64:
    return instant.astype("datetime64[us]")


def _epoch_days(instant: np.datetime64) -> int:
    return int(instant.astype("datetime64[D]").astype(np.int64))


def _days_in_month(month: np.datetime64) -> int:
    return _epoch_days(month + 1) - _epoch_days(month)


@beartype
class NumpyCalendar(BaseCalendar):
    """
    `numpy.datetime64` at microsecond resolution.

    datetime64 has no timezone, so every instant is read as UTC wall-clock time and explicit
    offsets in the text are converted to UTC.

    numpy wraps around silently when a value leaves the int64 range, so all arithmetic is done
    on Python ints and checked against that range before a datetime64 is built.
    """

    name = "numpy"

    @classmethod
    def supports(cls, instant: Any) -> bool:
        return isinstance(instant, np.datetime64)

    @classmethod
    def from_instant(cls, instant: np.datetime64) -> "NumpyCalendar":
        return cls()

    def now(self) -> np.datetime64:
        return _as_us(np.datetime64("now"))

    def components(self, instant: np.datetime64) -> tuple[int, int, int, int, int, int]:
        us = _as_us(instant)
        day = us.astype("datetime64[D]")
        month = us.astype("datetime64[M]")
        months_since_epoch = int(month.astype(np.int64))
        year, month_index = divmod(months_since_epoch, 12)
        day_of_month = int((day - month.astype("datetime64[D]")).astype(np.int64)) + 1
        seconds_of_day = int((us - day).astype(np.int64)) // _US_PER_SECOND
        hour, rest = divmod(seconds_of_day, 3600)
        minute, second = divmod(rest, 60)
        return 1970 + year, month_index + 1, day_of_month, hour, minute, second

    def weekday(self, instant: np.datetime64) -> int:
        # 1970-01-01 was a Thursday
        return (_epoch_days(_as_us(instant)) + 3) % 7

    def utc_offset(self, instant: np.datetime64) -> int:
        return 0

    def from_components(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
    ) -> np.datetime64:
        # datetime64 happily rolls 25:00 into the next day, so check every field here
        if not 1 <= month <= 12:
            raise BackendConstructionFailed(self.name, f"month must be in 1..12, got {month}")
        start = self._month(year * 12 + month - 1)
        if not 1 <= day <= _days_in_month(start):
            raise BackendConstructionFailed(self.name, f"day is out of range for month: {year}-{month:02d}-{day}")
        if not (0 <= hour < 24 and 0 <= minute < 60 and 0 <= second < 60 and 0 <= microsecond < _US_PER_SECOND):
            raise BackendConstructionFailed(
                self.name, f"time is out of range: {hour}:{minute}:{second}.{microsecond}"
            )
        time_of_day = ((hour * 60 + minute) * 60 + second) * _US_PER_SECOND + microsecond
        return self._from_us((_epoch_days(start) + day - 1) * _US_PER_DAY + time_of_day)

    def add_seconds(self, instant: np.datetime64, seconds: int) -> np.datetime64:
        return self._from_us(self._to_us(instant) + seconds * _US_PER_SECOND)

    def add_days(self, instant: np.datetime64, days: int) -> np.datetime64:
        return self._from_us(self._to_us(instant) + days * _US_PER_DAY)

    def add_months(self, instant: np.datetime64, months: int) -> np.datetime64:
        days, time_of_day = divmod(self._to_us(instant), _US_PER_DAY)
        current = np.datetime64(days, "D").astype("datetime64[M]")
        day_of_month = days - _epoch_days(current) + 1
        target = self._month(1970 * 12 + int(current.astype(np.int64)) + months)
        clamped = min(day_of_month, _days_in_month(target))
        return self._from_us((_epoch_days(target) + clamped - 1) * _US_PER_DAY + time_of_day)

    def _month(self, months_since_year_zero: int) -> np.datetime64:
        """datetime64[M] for a month counted from January of year 0."""
        year = months_since_year_zero // 12
        if not -_YEAR_LIMIT <= year <= _YEAR_LIMIT:
            raise BackendConstructionFailed(self.name, f"year {year} is out of range")
        return _EPOCH_MONTH + (months_since_year_zero - 1970 * 12)

    def _to_us(self, instant: np.datetime64) -> int:
        return int(_as_us(instant).astype(np.int64))

    def _from_us(self, us: int) -> np.datetime64:
        if not _US_MIN <= us <= _US_MAX:
            raise BackendConstructionFailed(self.name, "instant is outside the datetime64[us] range")
        return np.datetime64(us, "us")
