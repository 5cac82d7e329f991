"""
tests/test_duration.py

Covers:
  - Durations in seconds, days and months
  - Negative durations ('ago', leading '-')
  - Summing parts in the same unit
  - Phrases that are not durations
"""

import pytest

from datephrase import (
    AmbiguousForm,
    EmptyInput,
    Interval,
    UnexpectedAbsoluteDate,
    UnexpectedDate,
    UnexpectedTime,
    UnexpectedToken,
    parse_duration,
)


# ── Valid durations ───────────────────────────────────────────────────────────

class TestSeconds:

    @pytest.mark.parametrize("text,seconds", [
        ("1 seconds", 1),
        ("24 seconds", 24),
        ("34 s", 34),
        ("34 sec", 34),
        ("6h", 21600),
        ("4 hours ago", -14400),
        ("5 min", 300),
        ("10m", 600),
        ("15m ago", -900),
        ("-2h", -7200),
    ])
    def test_seconds(self, text, seconds):
        assert parse_duration(text) == Interval.seconds(seconds)


class TestDays:

    @pytest.mark.parametrize("text,days", [
        ("1 day", 1),
        ("2 days ago", -2),
        ("3 weeks", 21),
        ("2 weeks ago", -14),
        ("tomorrow", 1),
        ("yesterday", -1),
        ("today", 0),
        ("next week", 7),
    ])
    def test_days(self, text, days):
        assert parse_duration(text) == Interval.days(days)


class TestMonths:

    @pytest.mark.parametrize("text,months", [
        ("1 month", 1),
        ("6 months", 6),
        ("8 years", 96),
        ("last year", -12),
        ("3 months ago", -3),
    ])
    def test_months(self, text, months):
        assert parse_duration(text) == Interval.months(months)


class TestSums:

    def test_same_unit_parts_add_up(self):
        assert parse_duration("1 day 2 weeks") == Interval.days(15)

    def test_signs_per_part(self):
        assert parse_duration("1h -15m") == Interval.seconds(2700)

    def test_mixed_units_are_ambiguous(self):
        with pytest.raises(AmbiguousForm):
            parse_duration("1 day 3 hours")


# ── Not durations ─────────────────────────────────────────────────────────────

class TestNotDurations:

    @pytest.mark.parametrize("text", ["2020-01-01", "30 June 2018", "1/1/18", "2018"])
    def test_exact_dates(self, text):
        with pytest.raises(UnexpectedAbsoluteDate):
            parse_duration(text)

    @pytest.mark.parametrize("text", ["tuesday", "next friday", "april", "8/11"])
    def test_named_dates(self, text):
        with pytest.raises(UnexpectedDate):
            parse_duration(text)

    @pytest.mark.parametrize("text", ["2 days 15:00", "15:00", "9am", "friday 10:00"])
    def test_times(self, text):
        with pytest.raises(UnexpectedTime):
            parse_duration(text)

    def test_unknown_word(self):
        with pytest.raises(UnexpectedToken) as e:
            parse_duration("bananas")
        assert e.value.position == 0

    def test_empty(self):
        with pytest.raises(EmptyInput):
            parse_duration("   ")
