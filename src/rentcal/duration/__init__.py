"""
rentcal.duration
~~~~~~~~~~~~~~~~

Active and charge durations of a rental order.

The active window runs from ``delivery_start`` to ``collection_start``; the
charge window from ``charge_start`` to ``charge_end``, each defaulting to its
active counterpart when missing or empty.

Basic usage::

    from rentcal.duration import get_duration

    d = get_duration(
        {
            "delivery_start": "2024-06-17T09:00:00-05:00",
            "collection_start": "2024-06-21T17:00:00-05:00",
            "charge_start": "2024-06-18T09:00:00-05:00",
            "charge_end": "2024-06-20T17:00:00-05:00",
        },
        holidays=[],
    )
    d.active_period_label, d.charge_period_label   # ('1 week', '3 days')
"""

from rentcal.duration.duration import OrderDuration, OrderWindow, get_duration

__all__ = ["OrderDuration", "OrderWindow", "get_duration"]
