"""Vehicle fuel accounting: refills, trips and efficiency."""

from __future__ import annotations

import math
import threading

from pydantic import ValidationError

from fueltrack.exceptions import InsufficientFuelError, InvalidAmountError
from fueltrack.models.summary import VehicleSummary
from fueltrack.models.trip import Trip
from fueltrack.models.vehicle_type import VehicleType


class Vehicle:
    """A tracked vehicle with its fuel balance and trip history.

    The interactive session is the only writer. Low-fuel monitors read
    ``fuel_level`` from their own threads, so every access to the balance
    goes through ``_fuel_lock``.

    Usage:
        car = Vehicle("Civic", VehicleType.CAR)
        car.refill_fuel(10, price_per_unit=1.5)
        car.add_trip(distance=50, fuel_used=5)
        car.overall_efficiency()  # 10.0
    """

    def __init__(self, name: str, vehicle_type: VehicleType) -> None:
        self.name = name
        self.vehicle_type = vehicle_type
        self.total_fuel_added = 0.0
        self.price_per_unit = 0.0
        self._fuel_level = 0.0
        self._fuel_lock = threading.Lock()
        self._trips: list[Trip] = []
        self._best_trip: Trip | None = None

    def __repr__(self) -> str:
        return f"Vehicle(name={self.name!r}, vehicle_type={self.vehicle_type.value})"

    @property
    def fuel_level(self) -> float:
        with self._fuel_lock:
            return self._fuel_level

    @property
    def trips(self) -> tuple[Trip, ...]:
        return tuple(self._trips)

    @property
    def best_trip(self) -> Trip | None:
        """The most efficient trip so far; the earliest one wins a tie."""
        return self._best_trip

    def set_fuel_level(self, level: float) -> None:
        """Override the current fuel balance, e.g. after reading the gauge."""
        if not math.isfinite(level) or level < 0:
            raise InvalidAmountError(f"Fuel level must be a finite non-negative number, got {level}")
        with self._fuel_lock:
            self._fuel_level = float(level)

    def refill_fuel(
        self,
        amount: float,
        price_per_unit: float,
        current_level: float | None = None,
    ) -> None:
        """Add fuel to the tank and record the price paid per unit.

        When *current_level* is given the balance is first reset to it, as
        when the driver reads the gauge before filling up. All arguments are
        checked before anything changes.
        """
        if not math.isfinite(amount) or amount <= 0:
            raise InvalidAmountError(f"Refill amount must be positive, got {amount}")
        if not math.isfinite(price_per_unit) or price_per_unit < 0:
            raise InvalidAmountError(f"Price per unit must be a finite non-negative number, got {price_per_unit}")
        if current_level is not None and (not math.isfinite(current_level) or current_level < 0):
            raise InvalidAmountError(f"Fuel level must be a finite non-negative number, got {current_level}")
        with self._fuel_lock:
            if current_level is not None:
                self._fuel_level = float(current_level)
            self._fuel_level += amount
        self.total_fuel_added += amount
        self.price_per_unit = float(price_per_unit)

    def add_trip(self, distance: float, fuel_used: float) -> Trip:
        """Record a trip and burn its fuel.

        Using exactly the remaining fuel is allowed and leaves the tank at 0.
        Nothing changes when the trip is rejected.

        Raises:
            InvalidAmountError: distance is negative or fuel_used is not positive.
            InsufficientFuelError: fuel_used exceeds the current fuel level.
        """
        try:
            trip = Trip(distance=distance, fuel_used=fuel_used)
        except ValidationError as exc:
            raise InvalidAmountError(f"Invalid trip values: {exc}") from exc

        with self._fuel_lock:
            if trip.fuel_used > self._fuel_level:
                raise InsufficientFuelError(trip.fuel_used, self._fuel_level)
            self._fuel_level -= trip.fuel_used

        self._trips.append(trip)
        if self._best_trip is None or trip.efficiency > self._best_trip.efficiency:
            self._best_trip = trip
        return trip

    def overall_efficiency(self) -> float:
        """Total distance over total fuel used, or 0.0 with nothing recorded."""
        total_distance = sum(t.distance for t in self._trips)
        total_fuel = sum(t.fuel_used for t in self._trips)
        if total_fuel == 0:
            return 0.0
        return total_distance / total_fuel

    def list_trips(self) -> list[tuple[int, Trip]]:
        """Return trips in recording order with 1-based display numbers."""
        return list(enumerate(self._trips, start=1))

    def summary(self, index: int) -> VehicleSummary:
        return VehicleSummary(
            index=index,
            name=self.name,
            vehicle_type=self.vehicle_type,
            fuel_level=self.fuel_level,
            total_fuel_added=self.total_fuel_added,
            price_per_unit=self.price_per_unit,
            overall_efficiency=self.overall_efficiency(),
            trip_count=len(self._trips),
        )
