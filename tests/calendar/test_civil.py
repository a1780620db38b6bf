"""
tests/calendar/test_civil.py

Covers:
  - Coercion of datetimes, dates, ISO strings and datetime64 into Chicago time
  - Rejection of missing and unparseable values
  - Civil-day arithmetic across a DST change
"""

from datetime import date, datetime, timedelta, timezone

import numpy as np
import pytest

from rentcal.calendar._exceptions import InvalidDate
from rentcal.calendar.civil import (
    TIMEZONE,
    add_days,
    civil_day,
    to_local,
)


# ── Coercion ──────────────────────────────────────────────────────────────────

class TestToLocal:

    def test_naive_datetime_is_wall_clock(self):
        out = to_local(datetime(2024, 6, 17, 9, 30))
        assert out.tzinfo is TIMEZONE
        assert (out.hour, out.minute) == (9, 30)

    def test_aware_datetime_converted(self):
        out = to_local(datetime(2024, 6, 17, 12, 0, tzinfo=timezone.utc))
        assert out.hour == 7            # CDT, UTC-5
        assert out.day == 17

    def test_winter_offset(self):
        out = to_local(datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc))
        assert out.hour == 6            # CST, UTC-6

    def test_date_is_midnight(self):
        out = to_local(date(2024, 6, 17))
        assert out == datetime(2024, 6, 17, tzinfo=TIMEZONE)

    def test_date_only_string(self):
        assert to_local("2024-12-25") == datetime(2024, 12, 25, tzinfo=TIMEZONE)

    def test_utc_string_crosses_day(self):
        out = to_local("2024-06-18T03:00:00Z")
        assert (out.day, out.hour) == (17, 22)

    def test_offset_string(self):
        out = to_local("2024-06-17T09:00:00-05:00")
        assert (out.day, out.hour) == (17, 9)

    def test_millisecond_string(self):
        out = to_local("2024-06-17T14:00:00.000Z")
        assert (out.hour, out.microsecond) == (9, 0)

    def test_datetime64(self):
        out = to_local(np.datetime64("2024-06-17T09:00"))
        assert out == datetime(2024, 6, 17, 9, tzinfo=TIMEZONE)

    @pytest.mark.parametrize(
        "bad",
        [None, "", "   ", "invalid", "2024-13-01", "2024-02-30", np.datetime64("NaT"), 12345, 1.5, []],
    )
    def test_invalid(self, bad):
        with pytest.raises(InvalidDate):
            to_local(bad)

    def test_invalid_is_value_error(self):
        with pytest.raises(ValueError):
            to_local("invalid")

    def test_message_names_argument(self):
        with pytest.raises(InvalidDate, match="start_date"):
            to_local(None, "start_date")


# ── Arithmetic ────────────────────────────────────────────────────────────────

class TestArithmetic:

    def test_civil_day(self):
        assert civil_day(to_local("2024-06-18T03:00:00Z")) == np.datetime64("2024-06-17")

    def test_add_days_keeps_wall_clock_across_dst(self):
        # 2024-03-10 is the spring-forward day in Chicago
        before = datetime(2024, 3, 9, 9, tzinfo=TIMEZONE)
        after = add_days(before, 1)
        assert (after.day, after.hour) == (10, 9)
        assert before.utcoffset() == timedelta(hours=-6)
        assert after.utcoffset() == timedelta(hours=-5)

    def test_add_zero_days(self):
        d = datetime(2024, 6, 17, 9, tzinfo=TIMEZONE)
        assert add_days(d, 0) == d

