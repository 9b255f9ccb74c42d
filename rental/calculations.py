"""Helper functions for rental pricing and durations."""

import math
from dataclasses import dataclass
from datetime import date, datetime
from typing import Union

DateLike = Union[date, datetime, str]

SECONDS_PER_DAY = 24 * 60 * 60


@dataclass(frozen=True)
class PriceBreakdown:
    """Result of a price calculation."""

    subtotal: float
    discount: float
    total: float


def calc_price(daily_rate: float, days: int, discount_percent: float = 0) -> PriceBreakdown:
    """
    Calculate the rental price for a number of days.

    - subtotal: daily_rate * days
    - discount: subtotal * discount_percent / 100
    - total: subtotal - discount

    Discounts outside 0..100 are not rejected; callers validate first.
    """
    subtotal = daily_rate * days
    discount = subtotal * (discount_percent / 100)
    return PriceBreakdown(subtotal=subtotal, discount=discount, total=subtotal - discount)


def to_datetime(value: DateLike) -> datetime:
    """Normalize a date, datetime or ISO string to a naive datetime."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return datetime.fromisoformat(value)


def days_between(start: DateLike, end: DateLike) -> int:
    """
    Whole days between two dates, in either order.

    Uses a fixed 24-hour day and rounds to the nearest day (halves up),
    with no calendar or DST awareness.
    """
    delta = to_datetime(end) - to_datetime(start)
    return math.floor(abs(delta.total_seconds()) / SECONDS_PER_DAY + 0.5)
