"""Reservation dataclass for ledger records."""

from dataclasses import dataclass
from datetime import date, datetime

from .status import ReservationStatus


@dataclass
class Reservation:
    """A customer's booking of one vehicle over a date range."""

    code: str
    customer_name: str
    customer_email: str
    vehicle_id: int
    vehicle: str
    pickup_date: date
    return_date: date
    days: int
    total: float
    status: ReservationStatus
    created_at: datetime

    @property
    def is_pending(self) -> bool:
        return self.status == ReservationStatus.PENDING
