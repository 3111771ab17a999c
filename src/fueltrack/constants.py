"""Shared defaults for the fuel tracker."""

from __future__ import annotations

DEFAULT_MONITOR_INTERVAL = 5.0  # seconds between fuel samples
DEFAULT_LOW_FUEL_THRESHOLD = 5.0  # liters

ENV_MONITOR_INTERVAL = "FUELTRACK_MONITOR_INTERVAL"
ENV_LOW_FUEL_THRESHOLD = "FUELTRACK_LOW_FUEL_THRESHOLD"
ENV_LOG_DIR = "FUELTRACK_LOG_DIR"

DISTANCE_UNIT = "km"
FUEL_UNIT = "liters"
EFFICIENCY_UNIT = "km/l"
