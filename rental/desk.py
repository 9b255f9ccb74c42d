"""RentalDesk - the fleet and ledger behind one query/command surface."""

import random
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional

from .calculations import DateLike, PriceBreakdown, calc_price
from .codes import CodeGenerator
from .fleet import FleetRegistry
from .ledger import ReservationLedger
from .reservation import Reservation
from .status import VehicleStatus
from .vehicle import Vehicle


@dataclass(frozen=True)
class DeskStats:
    """Dashboard figures for the fleet and revenue."""

    total_vehicles: int
    available: int
    rented: int
    revenue: float


class RentalDesk:
    """
    Composition root owning one fleet registry and one reservation ledger.

    Every operation runs under a single re-entrant lock so multi-step
    mutations appear atomic to concurrent readers (e.g. a threaded web server).
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], int]] = None,
        now: Callable[[], datetime] = datetime.now,
        opening_revenue: float = 0,
    ):
        codes = CodeGenerator(rng=rng, clock=clock)
        self.fleet = FleetRegistry(codes)
        self.ledger = ReservationLedger(
            self.fleet, codes, opening_revenue=opening_revenue, now=now
        )
        self._lock = threading.RLock()

    # Queries

    def list_vehicles(self) -> List[Vehicle]:
        with self._lock:
            return self.fleet.list_vehicles()

    def find_vehicle(self, vehicle_id: int) -> Optional[Vehicle]:
        with self._lock:
            return self.fleet.find_by_id(vehicle_id)

    def list_available_vehicles(self) -> List[Vehicle]:
        with self._lock:
            return self.fleet.list_available()

    def list_reservations(self) -> List[Reservation]:
        with self._lock:
            return self.ledger.list_reservations()

    def find_reservation(self, code: str) -> Optional[Reservation]:
        with self._lock:
            return self.ledger.find_reservation(code)

    def total_revenue(self) -> float:
        with self._lock:
            return self.ledger.total_revenue()

    def stats(self) -> DeskStats:
        with self._lock:
            return DeskStats(
                total_vehicles=len(self.fleet),
                available=self.fleet.count_by_status(VehicleStatus.AVAILABLE),
                rented=self.fleet.count_by_status(VehicleStatus.RENTED),
                revenue=self.ledger.total_revenue(),
            )

    def quote(self, daily_rate: float, days: int, discount_percent: float = 0) -> PriceBreakdown:
        return calc_price(daily_rate, days, discount_percent)

    # Commands

    def add_vehicle(
        self, make: str, model: str, year: int, category: str, daily_rate: float
    ) -> Vehicle:
        with self._lock:
            return self.fleet.add_vehicle(make, model, year, category, daily_rate)

    def set_vehicle_status(self, vehicle_id: int, status: VehicleStatus) -> None:
        """Used when seeding a fleet whose cars are already out or in the shop."""
        with self._lock:
            self.fleet.set_status(vehicle_id, status)

    def create_reservation(
        self,
        customer_name: str,
        customer_email: str,
        vehicle_id: int,
        pickup_date: DateLike,
        return_date: DateLike,
    ) -> Reservation:
        with self._lock:
            return self.ledger.create_reservation(
                customer_name, customer_email, vehicle_id, pickup_date, return_date
            )

    def confirm_reservation(self, code: str) -> Reservation:
        with self._lock:
            return self.ledger.confirm_reservation(code)

    def cancel_reservation(self, code: str) -> Reservation:
        with self._lock:
            return self.ledger.cancel_reservation(code)
