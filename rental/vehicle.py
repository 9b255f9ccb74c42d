"""Vehicle class for fleet records."""

from .status import VehicleStatus


class Vehicle:
    """A car in the rental fleet."""

    def __init__(
        self,
        id: int,
        registration: str,
        make: str,
        model: str,
        year: int,
        category: str,
        daily_rate: float,
        status: VehicleStatus = VehicleStatus.AVAILABLE,
        mileage: int = 0,
    ):
        self.id = id
        self.registration = registration
        self.make = make
        self.model = model
        self.year = year
        self.category = category
        self.daily_rate = daily_rate
        self.status = status
        self.mileage = mileage

    @property
    def name(self) -> str:
        """Human-readable vehicle name."""
        return f"{self.make} {self.model}"

    @property
    def is_available(self) -> bool:
        return self.status == VehicleStatus.AVAILABLE

    def __repr__(self) -> str:
        return f"Vehicle({self.id}, {self.name!r}, {self.status.value})"
