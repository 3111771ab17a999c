"""Trip record model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Trip(BaseModel):
    """One recorded trip: distance driven and the fuel it took."""

    model_config = ConfigDict(frozen=True)

    distance: float = Field(ge=0, allow_inf_nan=False)
    fuel_used: float = Field(gt=0, allow_inf_nan=False)

    @property
    def efficiency(self) -> float:
        """Distance per unit of fuel for this trip."""
        return self.distance / self.fuel_used
