from __future__ import annotations

import dataclasses

import pytest

from rentcal.calendar.result import DurationResult, duration_label, period_label


@pytest.mark.parametrize(
    "days, label, period",
    [
        (0, "", ""),
        (1, "day", "1 day"),
        (2, "days", "2 days"),
        (3, "days", "3 days"),
        (4, "days", "4 days"),
        (5, "week", "1 week"),
        (6, "weeks", "1.2 weeks"),
        (10, "weeks", "2 weeks"),
        (11, "weeks", "2.2 weeks"),
        (23, "weeks", "4.6 weeks"),
    ],
)
def test_label_thresholds(days: int, label: str, period: str) -> None:
    assert duration_label(days) == label
    assert period_label(days) == period


def test_from_counts() -> None:
    r = DurationResult.from_counts(calendar_days=7, days=5)
    assert r.calendar_days == 7
    assert r.calendar_weeks == pytest.approx(1.4)
    assert r.days == 5
    assert r.weeks == 1.0
    assert r.label == "week"
    assert r.period_label == "1 week"


def test_weeks_are_not_rounded() -> None:
    r = DurationResult.from_counts(calendar_days=9, days=7)
    assert r.weeks == pytest.approx(1.4)
    assert r.calendar_weeks == pytest.approx(1.8)


def test_value_equality() -> None:
    assert DurationResult.from_counts(3, 3) == DurationResult.from_counts(3, 3)


def test_frozen() -> None:
    r = DurationResult.from_counts(1, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        r.days = 2  # type: ignore[misc]
