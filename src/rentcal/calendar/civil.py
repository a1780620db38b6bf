"""
Civil-date handling for the fixed America/Chicago zone.

Every value entering the package passes through :func:`to_local`, so the
rest of the code only ever sees aware datetimes in :data:`TIMEZONE`.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Any, Union
from zoneinfo import ZoneInfo

import numpy as np
from dateutil.parser import isoparse

from ._exceptions import InvalidDate

TIMEZONE = ZoneInfo("America/Chicago")

OPEN_TIME = time(8, 0)
CLOSE_TIME = time(16, 0)
DEFAULT_START_TIME = time(9, 0)
CUTOFF_HOUR = 8

# Monday..Sunday, numpy busdaycalendar format.
WEEKMASK = "1111100"

DateLike = Union[datetime, date, str, np.datetime64]


def parse_iso(value: str) -> datetime:
    """Parse an ISO-8601 string into an aware datetime in TIMEZONE.

    Offset-less strings are read as Chicago wall-clock time.
    """
    parsed = isoparse(value.strip())
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=TIMEZONE)
    return parsed.astimezone(TIMEZONE)


def to_local(value: Any, name: str = "date") -> datetime:
    """Coerce a date-like value to an aware datetime in TIMEZONE."""
    if value is None:
        raise InvalidDate(f"{name} must be a valid date; got None.")

    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=TIMEZONE)
        return value.astimezone(TIMEZONE)

    if isinstance(value, date):
        return datetime.combine(value, time(), tzinfo=TIMEZONE)

    if isinstance(value, np.datetime64):
        if np.isnat(value):
            raise InvalidDate(f"{name} must be a valid date; got NaT.")
        item = value.astype("datetime64[us]").item()
        return to_local(item, name)

    if isinstance(value, str):
        if not value.strip():
            raise InvalidDate(f"{name} must be a valid date; got an empty string.")
        try:
            return parse_iso(value)
        except (ValueError, OverflowError) as exc:
            raise InvalidDate(f"{name} must be a valid date; got {value!r}.") from exc

    raise InvalidDate(
        f"{name} must be a valid date; got {type(value).__name__}."
    )


def civil_day(value: datetime) -> np.datetime64:
    """The civil day of a local datetime as a ``datetime64[D]``."""
    return np.datetime64(value.date(), "D")


def add_days(value: datetime, days: int) -> datetime:
    """Shift by whole civil days, keeping the wall-clock time."""
    # Aware arithmetic on a single ZoneInfo is wall-clock arithmetic.
    return value + timedelta(days=int(days))


def at_time(day: date, t: time) -> datetime:
    return datetime.combine(day, t, tzinfo=TIMEZONE)


def system_now() -> datetime:
    return datetime.now(TIMEZONE)
