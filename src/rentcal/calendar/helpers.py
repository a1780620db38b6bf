"""
Calendar helpers for rental orders.

Each function takes the holiday set as an argument (a sequence of ISO-8601
strings or a prebuilt :class:`BusinessCalendar`) and has no side effects.
Weekends are Saturday and Sunday; every day boundary is taken in the
America/Chicago zone.
"""

from __future__ import annotations

import logging
import numbers
from datetime import datetime
from typing import Any, Callable, Sequence, Union

import numpy as np

from ._exceptions import InvalidChargePeriod
from .calendar import BusinessCalendar
from .civil import (
    CLOSE_TIME,
    CUTOFF_HOUR,
    DEFAULT_START_TIME,
    OPEN_TIME,
    DateLike,
    add_days,
    at_time,
    civil_day,
    system_now,
    to_local,
)
from .result import DurationResult

logger = logging.getLogger(__name__)

Holidays = Union[Sequence[str], BusinessCalendar]


def _charge_period(value: Any) -> int:
    if (
        isinstance(value, (bool, np.bool_))
        or not isinstance(value, numbers.Real)
        or not float(value).is_integer()
        or value < 1
    ):
        raise InvalidChargePeriod(
            f"charge period must be a whole number >= 1; got {value!r}."
        )
    return int(value)


def is_holiday(test_date: DateLike, holidays: Holidays) -> bool:
    """True if ``test_date`` falls on the same civil day as any holiday.

    The time of day of ``test_date`` is ignored.
    """
    local = to_local(test_date, "test_date")
    cal = BusinessCalendar.coerce(holidays)
    return bool(cal.is_holiday(civil_day(local)))


def is_off_hours(value: DateLike) -> bool:
    """True if strictly before 08:00 or strictly after 16:00 local time."""
    local = to_local(value, "date")
    opening = at_time(local.date(), OPEN_TIME)
    closing = at_time(local.date(), CLOSE_TIME)
    return local < opening or local > closing


def get_default_start_date(
    holidays: Holidays,
    *,
    clock: Callable[[], datetime] = system_now,
) -> datetime:
    """
    Default rental start: 09:00 on the next working day.

    Today is kept while the local hour is 8 or less, so an order placed at
    08:45 still defaults to today. From 09:00 on it rolls to tomorrow.
    Weekends and holidays are then skipped.
    """
    cal = BusinessCalendar.coerce(holidays)

    now = to_local(clock(), "now")
    if now.hour > CUTOFF_HOUR:
        now = add_days(now, 1)
    candidate = civil_day(now)

    day = cal.roll_forward(candidate)
    start = at_time(day.item(), DEFAULT_START_TIME)
    logger.debug(
        "Default start date %s (now=%s, skipped %d days)",
        start.isoformat(),
        now.isoformat(),
        int((day - candidate) / np.timedelta64(1, "D")),
    )
    return start


def get_end_date_by_charge_period(
    start_date: DateLike,
    charge_period: int,
    holidays: Holidays,
) -> datetime:
    """
    End date such that ``[start_date, end]`` holds exactly ``charge_period``
    chargeable days. The start day is the first of them when it is itself
    chargeable. The wall-clock time of ``start_date`` is kept.
    """
    local = to_local(start_date, "start_date")
    period = _charge_period(charge_period)
    cal = BusinessCalendar.coerce(holidays)

    first = civil_day(local)
    last = cal.offset(first, period - 1)
    end = add_days(local, int((last - first) / np.timedelta64(1, "D")))
    logger.debug(
        "Charge period %d from %s ends %s", period, local.isoformat(), end.isoformat()
    )
    return end


def count_business_days(
    start: DateLike,
    end: DateLike,
    holidays: Holidays,
) -> DurationResult:
    """
    Size of the civil-day range from ``start`` to ``end`` inclusive.

    An ``end`` before ``start`` is not an error: it gives zero days.
    """
    start_local = to_local(start, "start")
    end_local = to_local(end, "end")
    cal = BusinessCalendar.coerce(holidays)

    first = civil_day(start_local)
    last = civil_day(end_local)
    calendar_days = max(int((last - first) / np.timedelta64(1, "D")) + 1, 0)
    days = cal.count(first, last)
    return DurationResult.from_counts(calendar_days, days)
