"""Tests for console table formatting."""

from __future__ import annotations

from fueltrack.formatters import (
    format_efficiency,
    format_trip_table,
    format_vehicle_table,
    format_warning,
)
from fueltrack.models import LowFuelWarning, Trip, VehicleType


class TestVehicleTable:
    def test_empty(self) -> None:
        assert format_vehicle_table([]) == "No vehicles added yet!"

    def test_rows(self, make_vehicle) -> None:
        car = make_vehicle(name="Civic", fuel=10, price=1.5)
        car.add_trip(50, 5)
        truck = make_vehicle(name="Hauler", vehicle_type=VehicleType.TRUCK)
        table = format_vehicle_table([car.summary(1), truck.summary(2)])
        lines = table.splitlines()

        assert lines[1].startswith("| S.No| Name")
        assert lines[3] == (
            "| 1   | Civic           | CAR    | 5.00       | 10.00      "
            "| 1.50      | 10.00       |"
        )
        assert "| 2   | Hauler          | TRUCK  |" in lines[4]
        assert lines[0] == lines[2] == lines[-1]
        assert all(len(line) == len(lines[0]) for line in lines)

    def test_long_name_truncated(self, make_vehicle) -> None:
        v = make_vehicle(name="A" * 30)
        lines = format_vehicle_table([v.summary(1)]).splitlines()
        assert len(lines[3]) == len(lines[0])


class TestTripTable:
    def test_empty(self) -> None:
        assert format_trip_table([], None) == "No trips recorded for this vehicle."

    def test_rows_and_best_trip(self) -> None:
        first = Trip(distance=50, fuel_used=5)
        second = Trip(distance=60, fuel_used=5)
        table = format_trip_table([(1, first), (2, second)], second)
        lines = table.splitlines()

        assert lines[3] == "| 1   | 50.00        | 5.00      | 10.00       |"
        assert lines[4] == "| 2   | 60.00        | 5.00      | 12.00       |"
        assert lines[-1] == "Most Efficient Trip: 12.00 km/l"


class TestMessages:
    def test_efficiency(self) -> None:
        assert format_efficiency(11.0) == "11.00 km/l"

    def test_warning(self) -> None:
        warning = LowFuelWarning(vehicle_name="Civic", fuel_level=3.25, threshold=5.0)
        assert format_warning(warning) == "Warning: Low fuel in vehicle Civic (3.25 liters left)"
