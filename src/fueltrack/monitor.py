"""Background low-fuel monitoring, one cancellable worker per vehicle."""

from __future__ import annotations

import math
import threading
from collections.abc import Callable
from enum import Enum

from fueltrack.constants import DEFAULT_LOW_FUEL_THRESHOLD, DEFAULT_MONITOR_INTERVAL
from fueltrack.models.warning import LowFuelWarning
from fueltrack.vehicle import Vehicle

WarningSink = Callable[[LowFuelWarning], None]


class MonitorState(str, Enum):
    PENDING = "pending"
    RUNNING = "running"
    CANCELLED = "cancelled"


class LowFuelMonitor:
    """Periodically samples a vehicle's fuel level and reports when it is low.

    The monitor only reads the vehicle. A warning is emitted on every sample
    that finds the level strictly below ``threshold``; there is no
    de-duplication, the sink decides what to do with repeats.

    Usage:
        monitor = LowFuelMonitor(vehicle, print, interval=5.0)
        monitor.start()
        ...
        monitor.cancel()  # no warnings are emitted once this returns
    """

    def __init__(
        self,
        vehicle: Vehicle,
        sink: WarningSink,
        interval: float = DEFAULT_MONITOR_INTERVAL,
        threshold: float = DEFAULT_LOW_FUEL_THRESHOLD,
    ) -> None:
        if not math.isfinite(interval) or interval <= 0:
            raise ValueError(f"Monitor interval must be a positive finite number, got {interval}")
        if not math.isfinite(threshold) or threshold < 0:
            raise ValueError(f"Low-fuel threshold must be a finite non-negative number, got {threshold}")
        self.vehicle = vehicle
        self.interval = interval
        self.threshold = threshold
        self._sink = sink
        self._state = MonitorState.PENDING
        self._cancelled = threading.Event()
        # Held while emitting so cancel() cannot return mid-emission.
        self._lock = threading.RLock()
        self._thread: threading.Thread | None = None

    @property
    def state(self) -> MonitorState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is MonitorState.RUNNING

    def start(self) -> None:
        """Start the worker thread. A monitor can be started once."""
        with self._lock:
            if self._state is not MonitorState.PENDING:
                raise RuntimeError(f"Monitor for {self.vehicle.name!r} is {self._state.value}")
            self._thread = threading.Thread(
                target=self._run,
                name=f"fuel-monitor-{self.vehicle.name}",
                daemon=True,
            )
            self._state = MonitorState.RUNNING
            self._thread.start()

    def check_now(self) -> LowFuelWarning | None:
        """Sample the fuel level once, emitting and returning a warning if low."""
        level = self.vehicle.fuel_level
        if level >= self.threshold:
            return None
        warning = LowFuelWarning(
            vehicle_name=self.vehicle.name,
            fuel_level=level,
            threshold=self.threshold,
        )
        with self._lock:
            if self._cancelled.is_set():
                return None
            self._sink(warning)
        return warning

    def cancel(self, timeout: float | None = None) -> None:
        """Stop the monitor and wait for its worker to exit. Idempotent."""
        with self._lock:
            if self._state is MonitorState.CANCELLED:
                return
            self._state = MonitorState.CANCELLED
            self._cancelled.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)

    def _run(self) -> None:
        while not self._cancelled.is_set():
            self.check_now()
            if self._cancelled.wait(self.interval):
                break


class MonitorSupervisor:
    """Process-wide set of running monitors, keyed by vehicle name.

    ``shutdown()`` cancels every monitor; use the supervisor as a context
    manager to make sure that happens on exit.
    """

    def __init__(
        self,
        sink: WarningSink,
        interval: float = DEFAULT_MONITOR_INTERVAL,
        threshold: float = DEFAULT_LOW_FUEL_THRESHOLD,
    ) -> None:
        self.interval = interval
        self.threshold = threshold
        self._sink = sink
        self._monitors: dict[str, LowFuelMonitor] = {}
        self._lock = threading.Lock()

    def __enter__(self) -> MonitorSupervisor:
        return self

    def __exit__(self, *args: object) -> None:
        self.shutdown()

    def __len__(self) -> int:
        return len(self._monitors)

    def __contains__(self, name: object) -> bool:
        return name in self._monitors

    def get(self, name: str) -> LowFuelMonitor | None:
        return self._monitors.get(name)

    def start(self, vehicle: Vehicle) -> LowFuelMonitor:
        """Create and start the monitor for a vehicle."""
        with self._lock:
            if vehicle.name in self._monitors:
                raise RuntimeError(f"Vehicle {vehicle.name!r} is already monitored")
            monitor = LowFuelMonitor(
                vehicle,
                self._sink,
                interval=self.interval,
                threshold=self.threshold,
            )
            # Started under the lock so a concurrent shutdown() sees it running.
            self._monitors[vehicle.name] = monitor
            monitor.start()
        return monitor

    def cancel(self, name: str) -> bool:
        """Cancel one vehicle's monitor. Returns False if none was running."""
        with self._lock:
            monitor = self._monitors.pop(name, None)
        if monitor is None:
            return False
        monitor.cancel()
        return True

    def shutdown(self) -> None:
        """Cancel and forget every monitor."""
        with self._lock:
            monitors = list(self._monitors.values())
            self._monitors.clear()
        for monitor in monitors:
            monitor.cancel()
