"""FleetRegistry - the authoritative collection of vehicles and their status."""

from typing import Dict, List, Optional

from .codes import CodeGenerator
from .status import VehicleStatus
from .vehicle import Vehicle


class FleetRegistry:
    """Ordered vehicles keyed by id. Vehicles are never removed."""

    def __init__(self, codes: Optional[CodeGenerator] = None):
        self.codes = codes or CodeGenerator()
        self._vehicles: Dict[int, Vehicle] = {}

    def __len__(self) -> int:
        return len(self._vehicles)

    def add_vehicle(
        self, make: str, model: str, year: int, category: str, daily_rate: float
    ) -> Vehicle:
        """
        Add a vehicle to the fleet.

        The id is the next sequential number; the registration tag and
        starting mileage come from the code generator. New vehicles are
        always available.
        """
        vehicle = Vehicle(
            id=len(self._vehicles) + 1,
            registration=self.codes.registration_tag(),
            make=make,
            model=model,
            year=year,
            category=category,
            daily_rate=daily_rate,
            status=VehicleStatus.AVAILABLE,
            mileage=self.codes.starting_mileage(),
        )
        self._vehicles[vehicle.id] = vehicle
        return vehicle

    def find_by_id(self, vehicle_id: int) -> Optional[Vehicle]:
        return self._vehicles.get(vehicle_id)

    def list_vehicles(self) -> List[Vehicle]:
        return list(self._vehicles.values())

    def list_available(self) -> List[Vehicle]:
        return [v for v in self._vehicles.values() if v.is_available]

    def count_by_status(self, status: VehicleStatus) -> int:
        return sum(1 for v in self._vehicles.values() if v.status == status)

    def set_status(self, vehicle_id: int, status: VehicleStatus) -> None:
        """Overwrite a vehicle's status. Unknown ids are ignored."""
        vehicle = self._vehicles.get(vehicle_id)
        if vehicle is not None:
            vehicle.status = status
