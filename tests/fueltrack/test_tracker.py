"""Tests for the FuelTracker service."""

from __future__ import annotations

import pytest

from fueltrack.exceptions import (
    DuplicateVehicleError,
    EmptyFleetError,
    InsufficientFuelError,
    VehicleIndexError,
    VehicleNotFoundError,
)
from fueltrack.models.vehicle_type import VehicleType
from fueltrack.monitor import MonitorState
from fueltrack.tracker import FuelTracker


@pytest.fixture
def tracker(warnings):
    # Long interval: monitors sample once on start, then stay quiet
    with FuelTracker(warnings, monitor_interval=60) as t:
        yield t


class TestRegisterVehicle:
    def test_starts_monitor(self, tracker) -> None:
        vehicle = tracker.register_vehicle("Civic", VehicleType.CAR)
        assert tracker.fleet.by_index(1) is vehicle
        assert tracker.monitors.get("Civic").is_running

    def test_new_vehicle_is_low_on_fuel(self, tracker, warnings) -> None:
        tracker.register_vehicle("Civic", VehicleType.CAR)
        assert warnings.wait()
        assert warnings.warnings[0].vehicle_name == "Civic"

    def test_duplicate_does_not_start_second_monitor(self, tracker) -> None:
        tracker.register_vehicle("Civic", VehicleType.CAR)
        with pytest.raises(DuplicateVehicleError):
            tracker.register_vehicle("Civic", VehicleType.BIKE)
        assert len(tracker.monitors) == 1


class TestRefillAndTrips:
    def test_reference_scenario(self, tracker) -> None:
        tracker.register_vehicle("Civic", VehicleType.CAR)
        tracker.refill(1, current_level=0, amount=10, price_per_unit=1.5)
        tracker.record_trip(1, distance=50, fuel_used=5)
        trip = tracker.record_trip(1, distance=60, fuel_used=5)

        vehicle = tracker.fleet.by_index(1)
        assert vehicle.fuel_level == 0.0
        assert vehicle.best_trip is trip
        assert [i for i, _ in tracker.list_trips(1)] == [1, 2]
        assert tracker.list_vehicles()[0].overall_efficiency == 11.0

    def test_refill_overrides_current_level(self, tracker) -> None:
        tracker.register_vehicle("Civic", VehicleType.CAR)
        tracker.refill(1, current_level=0, amount=30, price_per_unit=1.5)
        vehicle = tracker.refill(1, current_level=4, amount=10, price_per_unit=1.6)
        assert vehicle.fuel_level == 14.0
        assert vehicle.total_fuel_added == 40.0
        assert vehicle.price_per_unit == 1.6

    def test_trip_without_fuel(self, tracker) -> None:
        tracker.register_vehicle("Civic", VehicleType.CAR)
        with pytest.raises(InsufficientFuelError):
            tracker.record_trip(1, distance=10, fuel_used=1)

    def test_bad_index(self, tracker) -> None:
        with pytest.raises(VehicleIndexError):
            tracker.refill(1, current_level=0, amount=10, price_per_unit=1.5)
        with pytest.raises(VehicleIndexError):
            tracker.list_trips(1)


class TestQueries:
    def test_list_vehicles(self, tracker) -> None:
        tracker.register_vehicle("A", VehicleType.CAR)
        tracker.register_vehicle("B", VehicleType.TRUCK)
        summaries = tracker.list_vehicles()
        assert [(s.index, s.name) for s in summaries] == [(1, "A"), (2, "B")]
        assert summaries[1].vehicle_type is VehicleType.TRUCK

    def test_most_efficient(self, tracker) -> None:
        tracker.register_vehicle("A", VehicleType.CAR)
        tracker.register_vehicle("B", VehicleType.BIKE)
        tracker.refill(1, current_level=0, amount=10, price_per_unit=1.5)
        tracker.refill(2, current_level=0, amount=10, price_per_unit=1.5)
        tracker.record_trip(1, distance=80, fuel_used=10)
        tracker.record_trip(2, distance=120, fuel_used=10)
        assert tracker.most_efficient().name == "B"

    def test_most_efficient_empty(self, tracker) -> None:
        with pytest.raises(EmptyFleetError):
            tracker.most_efficient()


class TestRemoveAndShutdown:
    def test_remove_cancels_monitor(self, tracker) -> None:
        tracker.register_vehicle("A", VehicleType.CAR)
        monitor = tracker.monitors.get("A")
        tracker.remove_vehicle("A")
        assert monitor.state is MonitorState.CANCELLED
        assert "A" not in tracker.fleet
        assert "A" not in tracker.monitors

    def test_remove_missing(self, tracker) -> None:
        with pytest.raises(VehicleNotFoundError):
            tracker.remove_vehicle("Z")

    def test_shutdown_cancels_everything(self, warnings) -> None:
        tracker = FuelTracker(warnings, monitor_interval=60)
        tracker.register_vehicle("A", VehicleType.CAR)
        tracker.register_vehicle("B", VehicleType.BIKE)
        monitors = [tracker.monitors.get("A"), tracker.monitors.get("B")]
        tracker.shutdown()
        tracker.shutdown()
        assert all(m.state is MonitorState.CANCELLED for m in monitors)
        assert len(tracker.monitors) == 0


class TestServiceLogging:
    def test_calls_are_logged(self, tracker, _log_to_tmp_path) -> None:
        tracker.register_vehicle("Civic", VehicleType.CAR)
        with pytest.raises(InsufficientFuelError):
            tracker.record_trip(1, distance=10, fuel_used=1)
        content = (_log_to_tmp_path / "fueltrack.log").read_text()
        assert "SERVICE CALL: FuelTracker.register_vehicle('Civic'" in content
        assert "SERVICE OK: FuelTracker.register_vehicle" in content
        assert "SERVICE FAIL: FuelTracker.record_trip -> InsufficientFuelError" in content

    def test_arguments_and_results_read_as_domain_values(self, tracker, _log_to_tmp_path) -> None:
        tracker.register_vehicle("Civic", VehicleType.CAR)
        tracker.refill(1, current_level=0, amount=20, price_per_unit=1.5)
        tracker.record_trip(1, distance=120, fuel_used=8)
        content = (_log_to_tmp_path / "fueltrack.log").read_text()
        assert "SERVICE CALL: FuelTracker.register_vehicle('Civic', CAR)" in content
        assert "SERVICE OK: FuelTracker.register_vehicle -> Vehicle(name='Civic', vehicle_type=CAR)" in content
        assert "SERVICE OK: FuelTracker.record_trip -> Trip(120 km, 8 liters)" in content
        assert "VehicleType." not in content
