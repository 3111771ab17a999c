"""Fleet registry: ordered vehicle list with name lookup."""

from __future__ import annotations

from collections.abc import Iterator

from fueltrack.exceptions import (
    DuplicateVehicleError,
    EmptyFleetError,
    InvalidVehicleNameError,
    VehicleIndexError,
    VehicleNotFoundError,
)
from fueltrack.models.vehicle_type import VehicleType
from fueltrack.vehicle import Vehicle


class FleetRegistry:
    """Registered vehicles in registration order, addressable by name.

    The ordered list drives the 1-based display numbers; the name index is
    kept in step with it by every mutating method.
    """

    def __init__(self) -> None:
        self._vehicles: list[Vehicle] = []
        self._by_name: dict[str, Vehicle] = {}

    def __len__(self) -> int:
        return len(self._vehicles)

    def __iter__(self) -> Iterator[Vehicle]:
        return iter(list(self._vehicles))

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def register(self, name: str, vehicle_type: VehicleType) -> Vehicle:
        """Create and register a vehicle. Names are unique."""
        name = name.strip()
        if not name:
            raise InvalidVehicleNameError("Vehicle name cannot be empty")
        if name in self._by_name:
            raise DuplicateVehicleError(name)
        vehicle = Vehicle(name, vehicle_type)
        self._vehicles.append(vehicle)
        self._by_name[name] = vehicle
        return vehicle

    def by_index(self, index: int) -> Vehicle:
        """Return the vehicle at a 1-based display index."""
        if not 1 <= index <= len(self._vehicles):
            raise VehicleIndexError(index, len(self._vehicles))
        return self._vehicles[index - 1]

    def by_name(self, name: str) -> Vehicle:
        try:
            return self._by_name[name]
        except KeyError:
            raise VehicleNotFoundError(name) from None

    def remove(self, name: str) -> Vehicle:
        """Unregister a vehicle; later display numbers shift down by one."""
        vehicle = self.by_name(name)
        del self._by_name[name]
        self._vehicles.remove(vehicle)
        return vehicle

    def most_efficient(self) -> Vehicle:
        """Return the vehicle with the best overall efficiency.

        Ties go to the vehicle registered first.
        """
        if not self._vehicles:
            raise EmptyFleetError()
        best = self._vehicles[0]
        best_efficiency = best.overall_efficiency()
        for vehicle in self._vehicles[1:]:
            efficiency = vehicle.overall_efficiency()
            if efficiency > best_efficiency:
                best, best_efficiency = vehicle, efficiency
        return best
