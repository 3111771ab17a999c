"""Custom exceptions for the fuel tracker."""

from __future__ import annotations


class FuelTrackerError(Exception):
    """Base exception for all fuel tracker errors. The console catches only this."""


class InsufficientFuelError(FuelTrackerError):
    """Raised when a trip needs more fuel than the vehicle holds."""

    def __init__(self, requested: float, available: float) -> None:
        self.requested = requested
        self.available = available
        super().__init__(
            f"Not enough fuel! Trip needs {requested:.2f} liters but only "
            f"{available:.2f} left. Please refill first."
        )


class VehicleIndexError(FuelTrackerError):
    """Raised when a display index does not point at a registered vehicle."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Invalid S.No {index} (fleet has {size} vehicles)")


class VehicleNotFoundError(FuelTrackerError):
    """Raised when no vehicle is registered under a name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No vehicle named {name!r}")


class EmptyFleetError(FuelTrackerError):
    """Raised when a fleet-wide query runs with no vehicles registered."""

    def __init__(self) -> None:
        super().__init__("No vehicles added!")


class DuplicateVehicleError(FuelTrackerError):
    """Raised when registering a name that is already taken."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"A vehicle named {name!r} already exists")


class InvalidAmountError(FuelTrackerError):
    """Raised for negative or zero fuel amounts, distances, prices or levels."""


class InvalidVehicleNameError(FuelTrackerError):
    """Raised when a vehicle name is empty or whitespace."""
