"""In-memory vehicle fuel and trip efficiency tracker."""

from fueltrack.exceptions import (
    DuplicateVehicleError,
    EmptyFleetError,
    FuelTrackerError,
    InsufficientFuelError,
    InvalidAmountError,
    InvalidVehicleNameError,
    VehicleIndexError,
    VehicleNotFoundError,
)
from fueltrack.fleet import FleetRegistry
from fueltrack.models import LowFuelWarning, Trip, VehicleSummary, VehicleType
from fueltrack.monitor import LowFuelMonitor, MonitorState, MonitorSupervisor
from fueltrack.tracker import FuelTracker
from fueltrack.vehicle import Vehicle

__all__ = [
    "DuplicateVehicleError",
    "EmptyFleetError",
    "FleetRegistry",
    "FuelTracker",
    "FuelTrackerError",
    "InsufficientFuelError",
    "InvalidAmountError",
    "InvalidVehicleNameError",
    "LowFuelMonitor",
    "LowFuelWarning",
    "MonitorState",
    "MonitorSupervisor",
    "Trip",
    "Vehicle",
    "VehicleIndexError",
    "VehicleNotFoundError",
    "VehicleSummary",
    "VehicleType",
]

__version__ = "0.1.0"
