"""Pickup date options offered to the customer."""

from datetime import date, timedelta

from cupcake_order.config import PICKUP_DAYS


def format_pickup_label(day: date) -> str:
    """Abbreviated weekday, month and unpadded day, e.g. ``Mon Jan 1``."""
    return f"{day:%a %b} {day.day}"


def pickup_options(start: date, days: int = PICKUP_DAYS) -> tuple[str, ...]:
    """Labels for ``days`` consecutive calendar days, beginning with ``start``."""
    return tuple(format_pickup_label(start + timedelta(days=offset)) for offset in range(days))
