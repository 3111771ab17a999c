"""Basic usage example for the fuel tracker service, without the menu."""

from fueltrack import FuelTracker, FuelTrackerError, VehicleType
from fueltrack.formatters import (
    format_efficiency,
    format_trip_table,
    format_vehicle_table,
    format_warning,
)


def main() -> None:
    with FuelTracker(sink=lambda w: print(format_warning(w)), monitor_interval=1.0) as tracker:
        print("=== Registering vehicles ===")
        tracker.register_vehicle("Civic", VehicleType.CAR)
        tracker.register_vehicle("Ducati", VehicleType.BIKE)
        tracker.register_vehicle("Actros", VehicleType.TRUCK)

        print("\n=== Refilling ===")
        tracker.refill(1, current_level=0, amount=40, price_per_unit=1.65)
        tracker.refill(2, current_level=0, amount=15, price_per_unit=1.65)
        tracker.refill(3, current_level=0, amount=300, price_per_unit=1.52)

        print("\n=== Recording trips ===")
        for index, distance, fuel_used in [
            (1, 120, 8),
            (1, 80, 6),
            (2, 150, 6),
            (3, 400, 120),
            (2, 200, 10),  # more than the bike has left
        ]:
            try:
                trip = tracker.record_trip(index, distance, fuel_used)
                print(f"  S.No {index}: {distance} km on {fuel_used} l -> {format_efficiency(trip.efficiency)}")
            except FuelTrackerError as exc:
                print(f"  S.No {index}: {exc}")

        print("\n=== Fleet ===")
        print(format_vehicle_table(tracker.list_vehicles()))

        civic = tracker.fleet.by_name("Civic")
        print("\n=== Civic trips ===")
        print(format_trip_table(civic.list_trips(), civic.best_trip))

        best = tracker.most_efficient()
        print(f"\nMost efficient: {best.name} ({format_efficiency(best.overall_efficiency())})")


if __name__ == "__main__":
    main()
