"""Business-day and holiday calendar helpers for rental orders."""

from rentcal.calendar import (
    BusinessCalendar,
    CalendarError,
    DurationResult,
    InvalidArgument,
    InvalidChargePeriod,
    InvalidDate,
    InvalidHolidayList,
    MissingRequiredDate,
    count_business_days,
    get_default_start_date,
    get_end_date_by_charge_period,
    is_holiday,
    is_off_hours,
)
from rentcal.duration import OrderDuration, OrderWindow, get_duration

__version__ = "0.1.0"

__all__ = [
    "BusinessCalendar",
    "CalendarError",
    "DurationResult",
    "InvalidArgument",
    "InvalidChargePeriod",
    "InvalidDate",
    "InvalidHolidayList",
    "MissingRequiredDate",
    "OrderDuration",
    "OrderWindow",
    "count_business_days",
    "get_default_start_date",
    "get_duration",
    "get_end_date_by_charge_period",
    "is_holiday",
    "is_off_hours",
]
