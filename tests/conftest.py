"""Shared test fixtures and sample data."""

from __future__ import annotations

import threading

import pytest

from fueltrack import api_logging
from fueltrack.models.vehicle_type import VehicleType
from fueltrack.models.warning import LowFuelWarning
from fueltrack.vehicle import Vehicle

# (distance, fuel_used) pairs; efficiencies 10.0, 12.0, 12.0, 8.0
SAMPLE_TRIPS = [
    (50.0, 5.0),
    (60.0, 5.0),
    (24.0, 2.0),
    (16.0, 2.0),
]


class WarningCollector:
    """Thread-safe warning sink that lets tests wait for emissions."""

    def __init__(self) -> None:
        self.warnings: list[LowFuelWarning] = []
        self._lock = threading.Lock()
        self._received = threading.Event()

    def __call__(self, warning: LowFuelWarning) -> None:
        with self._lock:
            self.warnings.append(warning)
        self._received.set()

    def wait(self, timeout: float = 2.0) -> bool:
        return self._received.wait(timeout)

    def count(self) -> int:
        with self._lock:
            return len(self.warnings)


def _make_vehicle(
    name: str = "Civic",
    vehicle_type: VehicleType = VehicleType.CAR,
    fuel: float = 0.0,
    price: float = 1.5,
) -> Vehicle:
    vehicle = Vehicle(name, vehicle_type)
    if fuel > 0:
        vehicle.refill_fuel(fuel, price)
    return vehicle


@pytest.fixture(autouse=True)
def _log_to_tmp_path(tmp_path):
    """Keep service logs out of the working directory."""
    api_logging.configure_log_dir(str(tmp_path / "logs"))
    yield tmp_path / "logs"
    api_logging.configure_log_dir(str(tmp_path / "logs"))


@pytest.fixture
def make_vehicle():
    """Factory fixture for creating vehicles, optionally pre-fueled."""
    return _make_vehicle


@pytest.fixture
def vehicle() -> Vehicle:
    return _make_vehicle()


@pytest.fixture
def warnings() -> WarningCollector:
    return WarningCollector()
