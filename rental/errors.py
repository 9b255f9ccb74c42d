"""Errors raised by the fleet registry, reservation ledger and seed loader."""


class RentalError(Exception):
    """Base class for recoverable rental desk errors."""


class InvalidDateRange(RentalError):
    """Return date is not strictly after the pickup date."""

    def __init__(self, pickup_date, return_date):
        self.pickup_date = pickup_date
        self.return_date = return_date
        super().__init__(
            f"Return date {return_date} must be after pickup date {pickup_date}"
        )


class VehicleNotFound(RentalError):
    """No vehicle with the requested id exists."""

    def __init__(self, vehicle_id):
        self.vehicle_id = vehicle_id
        super().__init__(f"Vehicle {vehicle_id} not found")


class VehicleUnavailable(RentalError):
    """The vehicle exists but is not available for a new reservation."""

    def __init__(self, vehicle_id, status):
        self.vehicle_id = vehicle_id
        self.status = status
        super().__init__(f"Vehicle {vehicle_id} is {status.value}, not available")


class ReservationNotFound(RentalError):
    """No reservation with the requested code exists."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Reservation {code} not found")


class SeedError(RentalError):
    """A fleet seed file could not be loaded."""
