"""Vehicle summary row model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from fueltrack.models.vehicle_type import VehicleType


class VehicleSummary(BaseModel):
    """Point-in-time snapshot of a vehicle, as shown in the fleet table."""

    model_config = ConfigDict(frozen=True)

    index: int
    name: str
    vehicle_type: VehicleType
    fuel_level: float
    total_fuel_added: float
    price_per_unit: float
    overall_efficiency: float
    trip_count: int
