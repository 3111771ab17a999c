"""Tracker service: the operations the console drives."""

from __future__ import annotations

from fueltrack.api_logging import log_service_call
from fueltrack.constants import DEFAULT_LOW_FUEL_THRESHOLD, DEFAULT_MONITOR_INTERVAL
from fueltrack.fleet import FleetRegistry
from fueltrack.models.summary import VehicleSummary
from fueltrack.models.trip import Trip
from fueltrack.models.vehicle_type import VehicleType
from fueltrack.monitor import MonitorSupervisor, WarningSink
from fueltrack.vehicle import Vehicle


class FuelTracker:
    """Fleet bookkeeping plus one low-fuel monitor per registered vehicle.

    Usage:
        with FuelTracker(sink=print) as tracker:
            tracker.register_vehicle("Civic", VehicleType.CAR)
            tracker.refill(1, current_level=0, amount=40, price_per_unit=1.6)
            tracker.record_trip(1, distance=120, fuel_used=8)
    """

    def __init__(
        self,
        sink: WarningSink,
        monitor_interval: float = DEFAULT_MONITOR_INTERVAL,
        low_fuel_threshold: float = DEFAULT_LOW_FUEL_THRESHOLD,
    ) -> None:
        self.fleet = FleetRegistry()
        self.monitors = MonitorSupervisor(
            sink,
            interval=monitor_interval,
            threshold=low_fuel_threshold,
        )

    def __enter__(self) -> FuelTracker:
        return self

    def __exit__(self, *args: object) -> None:
        self.shutdown()

    @log_service_call
    def register_vehicle(self, name: str, vehicle_type: VehicleType) -> Vehicle:
        """Register a vehicle and start monitoring its fuel."""
        vehicle = self.fleet.register(name, vehicle_type)
        self.monitors.start(vehicle)
        return vehicle

    @log_service_call
    def refill(
        self,
        index: int,
        current_level: float,
        amount: float,
        price_per_unit: float,
    ) -> Vehicle:
        """Set the gauge reading for a vehicle, then add *amount* fuel."""
        vehicle = self.fleet.by_index(index)
        vehicle.refill_fuel(amount, price_per_unit, current_level=current_level)
        return vehicle

    @log_service_call
    def record_trip(self, index: int, distance: float, fuel_used: float) -> Trip:
        return self.fleet.by_index(index).add_trip(distance, fuel_used)

    def list_vehicles(self) -> list[VehicleSummary]:
        return [v.summary(i) for i, v in enumerate(self.fleet, start=1)]

    def list_trips(self, index: int) -> list[tuple[int, Trip]]:
        return self.fleet.by_index(index).list_trips()

    @log_service_call
    def most_efficient(self) -> Vehicle:
        return self.fleet.most_efficient()

    @log_service_call
    def remove_vehicle(self, name: str) -> Vehicle:
        """Stop monitoring a vehicle and drop it from the fleet."""
        vehicle = self.fleet.remove(name)
        self.monitors.cancel(name)
        return vehicle

    @log_service_call
    def shutdown(self) -> None:
        """Cancel every monitor. Safe to call more than once."""
        self.monitors.shutdown()
