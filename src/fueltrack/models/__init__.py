"""Fuel tracker data models."""

from fueltrack.models.summary import VehicleSummary
from fueltrack.models.trip import Trip
from fueltrack.models.vehicle_type import VehicleType
from fueltrack.models.warning import LowFuelWarning

__all__ = [
    "LowFuelWarning",
    "Trip",
    "VehicleSummary",
    "VehicleType",
]
