"""
rentcal.calendar
~~~~~~~~~~~~~~~~

Business-day arithmetic for rental orders.  Weekends (Saturday, Sunday) and
a caller-supplied list of holiday dates are not chargeable; every day
boundary is taken in America/Chicago.

Basic usage::

    from rentcal.calendar import count_business_days, get_end_date_by_charge_period

    holidays = ["2024-07-04", "2024-12-25"]
    end = get_end_date_by_charge_period("2024-07-01T09:00", 5, holidays)
    count_business_days("2024-07-01T09:00", end, holidays).period_label  # '1 week'

A holiday list can be compiled once and passed anywhere a list is::

    from rentcal.calendar import BusinessCalendar

    cal = BusinessCalendar(holidays)
    cal.count(np.datetime64("2024-07-01"), np.datetime64("2024-07-31"))  # 22

Public API
----------
is_holiday, is_off_hours, get_default_start_date,
get_end_date_by_charge_period, count_business_days
                    The calendar helpers.
BusinessCalendar    Holiday list compiled to a NumPy business-day calendar.
DurationResult      Output of count_business_days.
CalendarError       Base exception for all calendar-related errors.
"""

from __future__ import annotations

from rentcal.calendar._exceptions import (
    CalendarError,
    InvalidArgument,
    InvalidChargePeriod,
    InvalidDate,
    InvalidHolidayList,
    MissingRequiredDate,
)
from rentcal.calendar.calendar import BusinessCalendar
from rentcal.calendar.civil import TIMEZONE
from rentcal.calendar.helpers import (
    count_business_days,
    get_default_start_date,
    get_end_date_by_charge_period,
    is_holiday,
    is_off_hours,
)
from rentcal.calendar.result import DurationResult

__all__ = [
    "BusinessCalendar",
    "CalendarError",
    "DurationResult",
    "InvalidArgument",
    "InvalidChargePeriod",
    "InvalidDate",
    "InvalidHolidayList",
    "MissingRequiredDate",
    "TIMEZONE",
    "count_business_days",
    "get_default_start_date",
    "get_end_date_by_charge_period",
    "is_holiday",
    "is_off_hours",
]
