"""Low-fuel warning event model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class LowFuelWarning(BaseModel):
    """Emitted by a monitor when a vehicle's fuel drops below the threshold."""

    model_config = ConfigDict(frozen=True)

    vehicle_name: str
    fuel_level: float
    threshold: float
    date: datetime = Field(default_factory=datetime.now)
