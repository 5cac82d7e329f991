"""
tests/test_calendars.py

Covers:
  - The adapter contract, run against every adapter:
      component round trip, weekday numbering, day and month arithmetic,
      month-end clamping, elapsed seconds, invalid dates
  - Timezone handling in the datetime and pandas adapters
  - Picking an adapter from an instant
"""

from datetime import datetime, timedelta, timezone

import numpy as np
import pandas as pd
import pytest

from datephrase.calendars import (
    CALENDARS_BY_NAME,
    DatetimeCalendar,
    NumpyCalendar,
    PandasCalendar,
    calendar_for,
)
from datephrase.errors import BackendConstructionFailed


PLUS_TWO = timezone(timedelta(hours=2))


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture(params=["datetime", "pandas", "numpy"])
def calendar(request):
    """Each adapter, naive."""
    return CALENDARS_BY_NAME[request.param]()


# ── Contract ──────────────────────────────────────────────────────────────────

class TestContract:

    def test_components_round_trip(self, calendar):
        instant = calendar.from_components(2018, 3, 21, 11, 5, 9)
        assert calendar.components(instant) == (2018, 3, 21, 11, 5, 9)

    def test_defaults_to_midnight(self, calendar):
        assert calendar.components(calendar.from_components(2018, 3, 21)) == (2018, 3, 21, 0, 0, 0)

    @pytest.mark.parametrize("day,weekday", [(19, 0), (21, 2), (25, 6)])
    def test_weekday_counts_from_monday(self, calendar, day, weekday):
        assert calendar.weekday(calendar.from_components(2018, 3, day)) == weekday

    def test_add_days_keeps_time_of_day(self, calendar):
        instant = calendar.add_days(calendar.from_components(2018, 3, 30, 11), 3)
        assert calendar.components(instant) == (2018, 4, 2, 11, 0, 0)

    def test_add_negative_days(self, calendar):
        instant = calendar.add_days(calendar.from_components(2018, 1, 1), -1)
        assert calendar.components(instant) == (2017, 12, 31, 0, 0, 0)

    def test_add_seconds_crosses_midnight(self, calendar):
        instant = calendar.add_seconds(calendar.from_components(2018, 3, 21, 23, 30), 3600)
        assert calendar.components(instant) == (2018, 3, 22, 0, 30, 0)

    @pytest.mark.parametrize("start", [30, 31])
    @pytest.mark.parametrize("year,day", [(2023, 28), (2024, 29)])
    def test_add_months_clamps_to_month_end(self, calendar, year, day, start):
        instant = calendar.add_months(calendar.from_components(year, 1, start, 8), 1)
        assert calendar.components(instant) == (year, 2, day, 8, 0, 0)

    def test_add_months_across_years(self, calendar):
        instant = calendar.add_months(calendar.from_components(2018, 3, 21), -15)
        assert calendar.components(instant) == (2016, 12, 21, 0, 0, 0)

    def test_add_zero_months(self, calendar):
        instant = calendar.from_components(2018, 3, 21, 11)
        assert calendar.components(calendar.add_months(instant, 0)) == (2018, 3, 21, 11, 0, 0)

    @pytest.mark.parametrize("fields", [(2018, 2, 30), (2018, 13, 1), (2018, 4, 31), (2018, 3, 21, 24)])
    def test_invalid_dates_fail(self, calendar, fields):
        with pytest.raises(BackendConstructionFailed) as e:
            calendar.from_components(*fields)
        assert e.value.backend == calendar.name

    def test_naive_instants_have_no_offset(self, calendar):
        assert calendar.utc_offset(calendar.from_components(2018, 3, 21)) == 0


# ── Timezones ─────────────────────────────────────────────────────────────────

class TestTimezones:

    @pytest.mark.parametrize("calendar_cls", [DatetimeCalendar, PandasCalendar])
    def test_utc_offset(self, calendar_cls):
        calendar = calendar_cls(PLUS_TWO)
        assert calendar.utc_offset(calendar.from_components(2018, 3, 21, 11)) == 7200

    def test_datetime_keeps_tz(self):
        instant = DatetimeCalendar(PLUS_TWO).from_components(2018, 3, 21, 11)
        assert instant == datetime(2018, 3, 21, 11, tzinfo=PLUS_TWO)

    def test_pandas_keeps_tz(self):
        instant = PandasCalendar("UTC").from_components(2018, 3, 21, 11)
        assert instant == pd.Timestamp("2018-03-21 11:00", tz="UTC")

    def test_numpy_microseconds(self):
        instant = NumpyCalendar().from_components(2018, 3, 21, 11, 0, 0, 250000)
        assert instant == np.datetime64("2018-03-21T11:00:00.250000")


# ── calendar_for ──────────────────────────────────────────────────────────────

class TestCalendarFor:

    def test_datetime(self):
        calendar = calendar_for(datetime(2018, 3, 21, tzinfo=PLUS_TWO))
        assert isinstance(calendar, DatetimeCalendar)
        assert calendar.tz is PLUS_TWO

    def test_pandas_before_datetime(self):
        calendar = calendar_for(pd.Timestamp("2018-03-21", tz="UTC"))
        assert isinstance(calendar, PandasCalendar)

    def test_numpy(self):
        assert isinstance(calendar_for(np.datetime64("2018-03-21")), NumpyCalendar)

    def test_unknown_type(self):
        with pytest.raises(TypeError):
            calendar_for("2018-03-21")


# ── numpy range ───────────────────────────────────────────────────────────────

class TestNumpyRange:
    """datetime64[us] covers roughly +-290,000 years; leaving it must fail, not wrap around."""

    @pytest.fixture
    def numpy_calendar(self):
        return NumpyCalendar()

    @pytest.mark.parametrize("year", [300_000, -300_000, 999_999, 10**12])
    def test_year_out_of_range(self, numpy_calendar, year):
        with pytest.raises(BackendConstructionFailed):
            numpy_calendar.from_components(year, 1, 1)

    def test_before_epoch_round_trip(self, numpy_calendar):
        instant = numpy_calendar.from_components(1600, 2, 29, 12)
        assert numpy_calendar.components(instant) == (1600, 2, 29, 12, 0, 0)

    @pytest.mark.parametrize("days", [2 * 10**8, -2 * 10**8, 10**20])
    def test_add_days_out_of_range(self, numpy_calendar, days):
        with pytest.raises(BackendConstructionFailed):
            numpy_calendar.add_days(numpy_calendar.from_components(2018, 3, 21), days)

    def test_add_seconds_out_of_range(self, numpy_calendar):
        with pytest.raises(BackendConstructionFailed):
            numpy_calendar.add_seconds(numpy_calendar.from_components(2018, 3, 21), 10**20)

    @pytest.mark.parametrize("months", [12 * 400_000, 10**20])
    def test_add_months_out_of_range(self, numpy_calendar, months):
        with pytest.raises(BackendConstructionFailed):
            numpy_calendar.add_months(numpy_calendar.from_components(2018, 3, 21), months)
