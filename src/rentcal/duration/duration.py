from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any

from rentcal.calendar import BusinessCalendar, count_business_days
from rentcal.calendar._exceptions import InvalidArgument, MissingRequiredDate
from rentcal.calendar.civil import DateLike, to_local
from rentcal.calendar.result import DurationResult

logger = logging.getLogger(__name__)

_CAMEL = {
    "active_days": "activeDays",
    "active_weeks": "activeWeeks",
    "active_label": "activeLabel",
    "active_period_label": "activePeriodLabel",
    "charge_days": "chargeDays",
    "charge_weeks": "chargeWeeks",
    "charge_label": "chargeLabel",
    "charge_period_label": "chargePeriodLabel",
}


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


@dataclass(frozen=True, slots=True)
class OrderWindow:
    """Delivery/collection dates of an order, with an optional charge window."""

    delivery_start: DateLike
    collection_start: DateLike
    charge_start: DateLike | None = None
    charge_end: DateLike | None = None

    @classmethod
    def from_mapping(cls, dates: Mapping[str, Any]) -> OrderWindow:
        return cls(
            delivery_start=dates.get("delivery_start"),
            collection_start=dates.get("collection_start"),
            charge_start=dates.get("charge_start"),
            charge_end=dates.get("charge_end"),
        )

    def charge_bounds(self) -> tuple[DateLike, DateLike]:
        start = self.delivery_start if _blank(self.charge_start) else self.charge_start
        end = self.collection_start if _blank(self.charge_end) else self.charge_end
        return start, end


@dataclass(frozen=True, slots=True)
class OrderDuration:
    active_days: int
    active_weeks: float
    active_label: str
    active_period_label: str
    charge_days: int
    charge_weeks: float
    charge_label: str
    charge_period_label: str

    @classmethod
    def from_results(cls, active: DurationResult, charge: DurationResult) -> OrderDuration:
        return cls(
            active_days=active.days,
            active_weeks=active.weeks,
            active_label=active.label,
            active_period_label=active.period_label,
            charge_days=charge.days,
            charge_weeks=charge.weeks,
            charge_label=charge.label,
            charge_period_label=charge.period_label,
        )

    def as_dict(self) -> dict[str, Any]:
        """camelCase keys, as JSON clients expect them."""
        return {_CAMEL[k]: v for k, v in asdict(self).items()}


def _window(dates: Any) -> OrderWindow:
    if isinstance(dates, OrderWindow):
        window = dates
    elif isinstance(dates, Mapping):
        window = OrderWindow.from_mapping(dates)
    else:
        raise InvalidArgument(
            f"dates must be a mapping or OrderWindow; got {type(dates).__name__}."
        )
    if _blank(window.delivery_start) or _blank(window.collection_start):
        raise MissingRequiredDate(
            "dates.delivery_start and dates.collection_start are required."
        )
    return window


def get_duration(
    dates: OrderWindow | Mapping[str, Any],
    holidays: Any,
) -> OrderDuration:
    """
    Active (delivery to collection) and charge durations of an order.

    The charge window falls back to the delivery/collection dates when
    ``charge_start``/``charge_end`` are missing or empty. When it resolves to
    the same values as the active window the active result is reused.
    """
    window = _window(dates)
    cal = BusinessCalendar.coerce(holidays)

    charge_start, charge_end = window.charge_bounds()
    to_local(window.delivery_start, "dates.delivery_start")
    to_local(window.collection_start, "dates.collection_start")
    to_local(charge_start, "dates.charge_start")
    to_local(charge_end, "dates.charge_end")

    active = count_business_days(window.delivery_start, window.collection_start, cal)

    if charge_start == window.delivery_start and charge_end == window.collection_start:
        logger.debug("Charge window matches active window; reusing result")
        charge = active
    else:
        charge = count_business_days(charge_start, charge_end, cal)

    return OrderDuration.from_results(active, charge)
