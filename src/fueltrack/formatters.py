"""Text table rendering for the console."""

from __future__ import annotations

from fueltrack.constants import EFFICIENCY_UNIT, FUEL_UNIT
from fueltrack.models.summary import VehicleSummary
from fueltrack.models.trip import Trip
from fueltrack.models.warning import LowFuelWarning

_VEHICLE_BORDER = "+-----+-----------------+--------+------------+------------+-----------+-------------+"
_VEHICLE_HEADER = "| S.No| Name            | Type   | FuelLevel  | TotalFuel  | Price/L   | Efficiency  |"

_TRIP_BORDER = "+-----+--------------+-----------+-------------+"
_TRIP_HEADER = "| S.No| Distance(km) | FuelUsed  | Efficiency  |"


def format_vehicle_table(summaries: list[VehicleSummary]) -> str:
    """Render the fleet table, or a notice when the fleet is empty."""
    if not summaries:
        return "No vehicles added yet!"
    lines = [_VEHICLE_BORDER, _VEHICLE_HEADER, _VEHICLE_BORDER]
    for s in summaries:
        lines.append(
            f"| {s.index:<4}| {s.name:<15.15} | {s.vehicle_type.value:<6} "
            f"| {s.fuel_level:<10.2f} | {s.total_fuel_added:<10.2f} "
            f"| {s.price_per_unit:<9.2f} | {s.overall_efficiency:<11.2f} |"
        )
    lines.append(_VEHICLE_BORDER)
    return "\n".join(lines)


def format_trip_table(trips: list[tuple[int, Trip]], best_trip: Trip | None) -> str:
    """Render a vehicle's trips followed by its most efficient trip."""
    if not trips:
        return "No trips recorded for this vehicle."
    lines = [_TRIP_BORDER, _TRIP_HEADER, _TRIP_BORDER]
    for index, trip in trips:
        lines.append(
            f"| {index:<4}| {trip.distance:<12.2f} | {trip.fuel_used:<9.2f} "
            f"| {trip.efficiency:<11.2f} |"
        )
    lines.append(_TRIP_BORDER)
    if best_trip is not None:
        lines.append(f"Most Efficient Trip: {format_efficiency(best_trip.efficiency)}")
    return "\n".join(lines)


def format_efficiency(efficiency: float) -> str:
    return f"{efficiency:.2f} {EFFICIENCY_UNIT}"


def format_warning(warning: LowFuelWarning) -> str:
    return (
        f"Warning: Low fuel in vehicle {warning.vehicle_name} "
        f"({warning.fuel_level:.2f} {FUEL_UNIT} left)"
    )
