from __future__ import annotations

from dataclasses import dataclass

DAYS_PER_WEEK = 5


def _fmt(n: float) -> str:
    # 10 / 5 -> "2", 11 / 5 -> "2.2"
    return str(int(n)) if float(n).is_integer() else str(n)


def duration_label(days: int) -> str:
    if days == 1:
        return "day"
    if 1 < days < DAYS_PER_WEEK:
        return "days"
    if days == DAYS_PER_WEEK:
        return "week"
    if days > DAYS_PER_WEEK:
        return "weeks"
    # Zero chargeable days has no unit.
    return ""


def period_label(days: int) -> str:
    label = duration_label(days)
    if label in ("day", "days"):
        return f"{days} {label}"
    if label in ("week", "weeks"):
        return f"{_fmt(days / DAYS_PER_WEEK)} {label}"
    return ""


@dataclass(frozen=True, slots=True)
class DurationResult:
    """
    Calendar and business-day size of one date range.

    ``weeks`` and ``calendar_weeks`` are plain divisions by five and may be
    fractional.
    """

    calendar_days: int
    calendar_weeks: float
    days: int
    weeks: float
    label: str
    period_label: str

    @classmethod
    def from_counts(cls, calendar_days: int, days: int) -> DurationResult:
        return cls(
            calendar_days=calendar_days,
            calendar_weeks=calendar_days / DAYS_PER_WEEK,
            days=days,
            weeks=days / DAYS_PER_WEEK,
            label=duration_label(days),
            period_label=period_label(days),
        )
