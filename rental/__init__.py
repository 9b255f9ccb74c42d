"""
Car rental front desk models.

This package keeps a vehicle fleet, its reservations and the revenue they
bring in mutually consistent:
- VehicleStatus / ReservationStatus: lifecycle enums
- Vehicle: a car in the fleet
- Reservation: a customer's booking of one vehicle
- FleetRegistry: the vehicles and their status
- ReservationLedger: the reservations and the revenue they add up to
- RentalDesk: fleet and ledger behind one query/command surface
"""

from .status import VehicleStatus, ReservationStatus
from .vehicle import Vehicle
from .reservation import Reservation
from .calculations import PriceBreakdown, calc_price, days_between
from .codes import CodeGenerator
from .errors import (
    RentalError,
    InvalidDateRange,
    VehicleNotFound,
    VehicleUnavailable,
    ReservationNotFound,
    SeedError,
)
from .fleet import FleetRegistry
from .ledger import ReservationLedger
from .desk import RentalDesk, DeskStats
from .loader import (
    load_desk,
    seed_desk,
    load_schema,
    validate_seed_data,
    validate_seed_file,
)

__all__ = [
    "VehicleStatus",
    "ReservationStatus",
    "Vehicle",
    "Reservation",
    "PriceBreakdown",
    "calc_price",
    "days_between",
    "CodeGenerator",
    "RentalError",
    "InvalidDateRange",
    "VehicleNotFound",
    "VehicleUnavailable",
    "ReservationNotFound",
    "SeedError",
    "FleetRegistry",
    "ReservationLedger",
    "RentalDesk",
    "DeskStats",
    "load_desk",
    "seed_desk",
    "load_schema",
    "validate_seed_data",
    "validate_seed_file",
]
