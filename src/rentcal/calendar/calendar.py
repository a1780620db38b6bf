from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date
from typing import Any, Union

import numpy as np

from ._exceptions import CalendarError, InvalidDate, InvalidHolidayList
from .civil import WEEKMASK, parse_iso, to_local

logger = logging.getLogger(__name__)

DayLike = Union[date, str, np.datetime64, "np.ndarray"]


def _parse_holiday(entry: Any, index: int) -> np.datetime64:
    try:
        if isinstance(entry, str):
            local = parse_iso(entry)
        elif isinstance(entry, (date, np.datetime64)):
            local = to_local(entry, f"holidays[{index}]")
        else:
            raise InvalidHolidayList(
                f"holidays[{index}] must be an ISO-8601 date string; "
                f"got {type(entry).__name__}."
            )
    except (ValueError, OverflowError, InvalidDate) as exc:
        raise InvalidHolidayList(
            f"holidays[{index}] is not a valid date: {entry!r}."
        ) from exc
    return np.datetime64(local.date(), "D")


def _check_holidays(holidays: Any) -> None:
    if isinstance(holidays, (str, bytes)) or not isinstance(
        holidays, (Sequence, np.ndarray)
    ):
        raise InvalidHolidayList(
            f"holidays must be a sequence of dates; got {type(holidays).__name__}."
        )


class BusinessCalendar:
    """
    Compiled holiday set: sorted civil days + numpy business-day calendar.
    Build once per holiday list and reuse it across many calls so the
    strings are parsed a single time.
    """

    def __init__(self, holidays: Sequence[str] | np.ndarray = ()) -> None:
        _check_holidays(holidays)

        days = [_parse_holiday(h, i) for i, h in enumerate(holidays)]
        self._holidays: np.ndarray = np.unique(
            np.array(days, dtype="datetime64[D]")
        )
        self._weekmask: str = WEEKMASK
        self._cal = np.busdaycalendar(
            weekmask=self._weekmask, holidays=self._holidays
        )
        logger.debug(
            "Compiled business calendar with %d holidays (%d entries supplied)",
            self._holidays.size,
            len(days),
        )

    @classmethod
    def coerce(cls, holidays: Any) -> BusinessCalendar:
        if isinstance(holidays, cls):
            return holidays
        return cls(holidays)

    # ── day conversion ───────────────────────────────────────────────────

    @staticmethod
    def _as_days(day: Any) -> np.ndarray:
        if isinstance(day, np.ndarray) and day.dtype.kind == "M":
            out = day.astype("datetime64[D]")
        elif isinstance(day, np.ndarray):
            # Strings and objects may carry offsets; numpy would read them in UTC.
            out = np.array(
                [BusinessCalendar._as_days(d) for d in day.ravel()],
                dtype="datetime64[D]",
            ).reshape(day.shape)
        elif isinstance(day, (list, tuple)):
            out = np.array(
                [BusinessCalendar._as_days(d) for d in day], dtype="datetime64[D]"
            )
        elif isinstance(day, np.datetime64):
            out = np.asarray(day, dtype="datetime64[D]")
        else:
            out = np.asarray(np.datetime64(to_local(day, "day").date(), "D"))
        if np.isnat(out).any():
            raise InvalidDate("day must be a valid date; got NaT.")
        return out

    @staticmethod
    def _unwrap(result: np.ndarray) -> Any:
        return result.item() if np.ndim(result) == 0 else result

    # ── queries ──────────────────────────────────────────────────────────

    def is_holiday(self, day: DayLike) -> bool | np.ndarray:
        d = self._as_days(day)
        return self._unwrap(np.isin(d, self._holidays))

    def is_business_day(self, day: DayLike) -> bool | np.ndarray:
        d = self._as_days(day)
        return self._unwrap(np.is_busday(d, busdaycal=self._cal))

    def roll_forward(self, day: DayLike) -> np.datetime64 | np.ndarray:
        return self.offset(day, 0)

    def offset(self, day: DayLike, n: int | np.ndarray) -> np.datetime64 | np.ndarray:
        if np.any(np.asarray(n) < 0):
            raise CalendarError(f"Business-day offset must be >= 0; got {n}.")
        d = self._as_days(day)
        out = np.busday_offset(d, n, roll="forward", busdaycal=self._cal)
        return out[()] if isinstance(out, np.ndarray) and out.ndim == 0 else out

    def count(self, start_day: DayLike, end_day: DayLike) -> int | np.ndarray:
        """Business days in the inclusive range [start_day, end_day]."""
        s = self._as_days(start_day)
        e = self._as_days(end_day)
        s, e = np.broadcast_arrays(s, e)
        n = np.busday_count(s, e + np.timedelta64(1, "D"), busdaycal=self._cal)
        result = np.where(e < s, 0, n)
        return int(result) if np.ndim(result) == 0 else result

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def holidays(self) -> np.ndarray:
        return self._holidays.copy()

    @property
    def weekmask(self) -> str:
        return self._weekmask

    def __len__(self) -> int:
        return int(self._holidays.size)

    def __contains__(self, day: object) -> bool:
        return bool(np.all(self.is_holiday(day)))

    def __repr__(self) -> str:
        return (
            f"BusinessCalendar(weekmask={self._weekmask!r}, "
            f"holidays={len(self)})"
        )
