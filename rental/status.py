"""Status enums for vehicles and reservations."""

from enum import Enum


class VehicleStatus(Enum):
    """Rental status of a vehicle in the fleet."""

    AVAILABLE = "available"
    RESERVED = "reserved"
    RENTED = "rented"
    MAINTENANCE = "maintenance"


class ReservationStatus(Enum):
    """Lifecycle of a reservation. Cancelled reservations are removed, not kept."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
