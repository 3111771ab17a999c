"""Interactive menu for the fuel tracker."""

from __future__ import annotations

import argparse
import math
import os
import sys
from collections.abc import Callable, Sequence

from fueltrack import __version__
from fueltrack.api_logging import configure_log_dir, log_warning
from fueltrack.constants import (
    DEFAULT_LOW_FUEL_THRESHOLD,
    DEFAULT_MONITOR_INTERVAL,
    DISTANCE_UNIT,
    ENV_LOG_DIR,
    ENV_LOW_FUEL_THRESHOLD,
    ENV_MONITOR_INTERVAL,
    FUEL_UNIT,
)
from fueltrack.exceptions import FuelTrackerError
from fueltrack.formatters import (
    format_efficiency,
    format_trip_table,
    format_vehicle_table,
    format_warning,
)
from fueltrack.models.vehicle_type import VehicleType
from fueltrack.models.warning import LowFuelWarning
from fueltrack.tracker import FuelTracker

MENU = """
--- Vehicle Fuel Tracker ---
1. Add Vehicle
2. Record Trip
3. Refill Fuel
4. View Vehicle Details
5. Show Most Efficient Vehicle
6. Remove Vehicle
7. Exit"""

EXIT_CHOICE = 7


class ConsoleApp:
    """Menu loop over a FuelTracker.

    Input and output are injectable so the loop can be driven from tests.
    Domain errors are printed and the menu continues; a closed input stream
    ends the session.
    """

    def __init__(
        self,
        monitor_interval: float = DEFAULT_MONITOR_INTERVAL,
        low_fuel_threshold: float = DEFAULT_LOW_FUEL_THRESHOLD,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self._input = input_fn
        self._output = output_fn
        self.tracker = FuelTracker(
            self._on_warning,
            monitor_interval=monitor_interval,
            low_fuel_threshold=low_fuel_threshold,
        )
        self._actions: dict[int, Callable[[], None]] = {
            1: self.add_vehicle,
            2: self.record_trip,
            3: self.refill_fuel,
            4: self.show_details,
            5: self.show_most_efficient,
            6: self.remove_vehicle,
        }

    def run(self) -> int:
        """Run the menu until the user exits. Returns a process exit code."""
        try:
            while True:
                self._output(MENU)
                choice = self._read_int("Choose an option: ")
                if choice == EXIT_CHOICE:
                    self._output("Exiting tracker. Goodbye!")
                    return 0
                action = self._actions.get(choice)
                if action is None:
                    self._output("Invalid option! Try again.")
                    continue
                try:
                    action()
                except FuelTrackerError as exc:
                    self._output(str(exc))
        except EOFError:
            self._output("\nInput closed. Exiting tracker.")
            return 1
        except KeyboardInterrupt:
            self._output("\nInterrupted. Exiting tracker.")
            return 0
        finally:
            self.tracker.shutdown()

    # ── Menu actions ───────────────────────────────────────────

    def add_vehicle(self) -> None:
        name = self._input("Enter vehicle name: ").strip()
        vehicle_type = self._read_vehicle_type()
        self.tracker.register_vehicle(name, vehicle_type)
        self._output("Vehicle added successfully!")
        self._show_vehicles()

    def record_trip(self) -> None:
        self._show_vehicles()
        index = self._read_int("Enter Vehicle S.No to record trip: ")
        vehicle = self.tracker.fleet.by_index(index)
        distance = self._read_float(f"Distance traveled ({DISTANCE_UNIT}): ")
        fuel_used = self._read_float(f"Fuel used ({FUEL_UNIT}): ")
        self.tracker.record_trip(index, distance, fuel_used)
        self._output(f"Trip added successfully! Fuel left: {vehicle.fuel_level:.2f} {FUEL_UNIT}")
        self._output(format_trip_table(vehicle.list_trips(), vehicle.best_trip))

    def refill_fuel(self) -> None:
        self._show_vehicles()
        index = self._read_int("Enter Vehicle S.No to refill fuel: ")
        self.tracker.fleet.by_index(index)
        current = self._read_float(f"Current fuel ({FUEL_UNIT}): ")
        amount = self._read_float(f"Fuel added ({FUEL_UNIT}): ")
        price = self._read_float("Price per litre: ")
        self.tracker.refill(index, current, amount, price)
        self._output("Fuel updated successfully!")
        self._show_vehicles()

    def show_details(self) -> None:
        self._show_vehicles()
        for summary in self.tracker.list_vehicles():
            vehicle = self.tracker.fleet.by_index(summary.index)
            self._output(f"\nTrips for Vehicle S.No {summary.index} ({summary.name}):")
            self._output(format_trip_table(vehicle.list_trips(), vehicle.best_trip))

    def show_most_efficient(self) -> None:
        vehicle = self.tracker.most_efficient()
        self._output(
            f"Most Efficient Vehicle: {vehicle.name} | "
            f"Efficiency: {format_efficiency(vehicle.overall_efficiency())}"
        )

    def remove_vehicle(self) -> None:
        self._show_vehicles()
        index = self._read_int("Enter Vehicle S.No to remove: ")
        name = self.tracker.fleet.by_index(index).name
        self.tracker.remove_vehicle(name)
        self._output(f"Vehicle {name} removed.")

    # ── Helpers ────────────────────────────────────────────────

    def _on_warning(self, warning: LowFuelWarning) -> None:
        self._output(format_warning(warning))
        log_warning(warning)

    def _show_vehicles(self) -> None:
        self._output(format_vehicle_table(self.tracker.list_vehicles()))

    def _read_vehicle_type(self) -> VehicleType:
        options = " ".join(f"{i}.{t.value}" for i, t in enumerate(VehicleType, start=1))
        while True:
            choice = self._read_int(f"Select Type: {options}: ")
            try:
                return VehicleType.from_menu_choice(choice)
            except ValueError:
                self._output("Invalid type! Try again.")

    def _read_int(self, prompt: str) -> int:
        while True:
            raw = self._input(prompt)
            try:
                return int(raw.strip())
            except ValueError:
                self._output(f"Please enter a whole number, got {raw!r}.")

    def _read_float(self, prompt: str) -> float:
        while True:
            raw = self._input(prompt)
            try:
                value = float(raw.strip())
            except ValueError:
                self._output(f"Please enter a number, got {raw!r}.")
                continue
            if not math.isfinite(value):
                self._output(f"Please enter a finite number, got {raw!r}.")
                continue
            return value


def _positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None
    if not math.isfinite(number) or number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive finite number: {value!r}")
    return number


def _non_negative_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None
    if not math.isfinite(number) or number < 0:
        raise argparse.ArgumentTypeError(f"must be a finite non-negative number: {value!r}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Command-line options. Environment variables supply the defaults."""
    parser = argparse.ArgumentParser(
        prog="fueltrack",
        description="Track vehicle fuel refills, trips and fuel efficiency.",
    )
    # argparse runs string defaults through `type`, so env values get validated too
    parser.add_argument(
        "--interval",
        type=_positive_float,
        default=os.environ.get(ENV_MONITOR_INTERVAL, str(DEFAULT_MONITOR_INTERVAL)),
        help=f"seconds between low-fuel checks (env {ENV_MONITOR_INTERVAL})",
    )
    parser.add_argument(
        "--threshold",
        type=_non_negative_float,
        default=os.environ.get(ENV_LOW_FUEL_THRESHOLD, str(DEFAULT_LOW_FUEL_THRESHOLD)),
        help=f"warn when fuel drops below this many {FUEL_UNIT} (env {ENV_LOW_FUEL_THRESHOLD})",
    )
    parser.add_argument(
        "--log-dir",
        default=os.environ.get(ENV_LOG_DIR),
        help=f"directory for fueltrack.log (env {ENV_LOG_DIR}, default ./logs)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.log_dir:
        configure_log_dir(args.log_dir)
    app = ConsoleApp(monitor_interval=args.interval, low_fuel_threshold=args.threshold)
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
