"""
Reservation Ledger
==================

Owns the active reservations and the revenue derived from them, and keeps both
consistent with the fleet registry.

- create: validate, price, store as pending, vehicle becomes reserved
- confirm: reservation becomes confirmed, vehicle becomes rented
- cancel: reservation is removed, vehicle becomes available again

Revenue is the opening revenue plus the total of every reservation still in
the ledger, summed from the live records on each call rather than kept as a
running figure.
"""

from datetime import datetime
from typing import Callable, Dict, List, Optional, Set

from .calculations import DateLike, calc_price, days_between, to_datetime
from .codes import CodeGenerator
from .errors import (
    InvalidDateRange,
    ReservationNotFound,
    VehicleNotFound,
    VehicleUnavailable,
)
from .fleet import FleetRegistry
from .reservation import Reservation
from .status import ReservationStatus, VehicleStatus


class ReservationLedger:
    def __init__(
        self,
        fleet: FleetRegistry,
        codes: Optional[CodeGenerator] = None,
        opening_revenue: float = 0,
        now: Callable[[], datetime] = datetime.now,
    ):
        self.fleet = fleet
        self.codes = codes or fleet.codes
        self.opening_revenue = opening_revenue
        self._now = now
        self._reservations: Dict[str, Reservation] = {}
        self._issued_codes: Set[str] = set()

    def create_reservation(
        self,
        customer_name: str,
        customer_email: str,
        vehicle_id: int,
        pickup_date: DateLike,
        return_date: DateLike,
    ) -> Reservation:
        """
        Reserve a vehicle for a customer.

        Nothing is modified unless every check passes.

        :raises InvalidDateRange: If the return date is not after the pickup date.
        :raises VehicleNotFound: If no vehicle has the given id.
        :raises VehicleUnavailable: If the vehicle is reserved, rented or in maintenance.
        """
        pickup = to_datetime(pickup_date)
        returned = to_datetime(return_date)
        if returned <= pickup:
            raise InvalidDateRange(pickup_date, return_date)

        vehicle = self.fleet.find_by_id(vehicle_id)
        if vehicle is None:
            raise VehicleNotFound(vehicle_id)
        if not vehicle.is_available:
            raise VehicleUnavailable(vehicle_id, vehicle.status)

        days = days_between(pickup, returned)
        cost = calc_price(vehicle.daily_rate, days, 0)

        reservation = Reservation(
            code=self._unused_code(),
            customer_name=customer_name,
            customer_email=customer_email,
            vehicle_id=vehicle.id,
            vehicle=vehicle.name,
            pickup_date=pickup.date(),
            return_date=returned.date(),
            days=days,
            total=cost.total,
            status=ReservationStatus.PENDING,
            created_at=self._now(),
        )

        self._reservations[reservation.code] = reservation
        self._issued_codes.add(reservation.code)
        self.fleet.set_status(vehicle.id, VehicleStatus.RESERVED)
        return reservation

    def confirm_reservation(self, code: str) -> Reservation:
        """
        Confirm a reservation and mark its vehicle as rented.

        Confirming an already confirmed reservation changes nothing.

        :raises ReservationNotFound: If the code is not in the ledger.
        """
        reservation = self._get(code)
        reservation.status = ReservationStatus.CONFIRMED
        self.fleet.set_status(reservation.vehicle_id, VehicleStatus.RENTED)
        return reservation

    def cancel_reservation(self, code: str) -> Reservation:
        """
        Remove a reservation, free its vehicle and take back its revenue.

        :raises ReservationNotFound: If the code is not in the ledger.
        """
        reservation = self._get(code)
        self.fleet.set_status(reservation.vehicle_id, VehicleStatus.AVAILABLE)
        del self._reservations[code]
        return reservation

    def find_reservation(self, code: str) -> Optional[Reservation]:
        return self._reservations.get(code)

    def list_reservations(self) -> List[Reservation]:
        """Active reservations in the order they were made."""
        return list(self._reservations.values())

    def total_revenue(self) -> float:
        """Opening revenue plus the totals of the reservations still held."""
        return self.opening_revenue + sum(r.total for r in self._reservations.values())

    def _get(self, code: str) -> Reservation:
        reservation = self._reservations.get(code)
        if reservation is None:
            raise ReservationNotFound(code)
        return reservation

    def _unused_code(self) -> str:
        code = self.codes.next_code()
        while code in self._issued_codes:
            code = self.codes.next_code()
        return code
