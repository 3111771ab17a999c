"""Service call logging for the fuel tracker."""

from __future__ import annotations

import functools
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

from fueltrack.constants import DISTANCE_UNIT, ENV_LOG_DIR, FUEL_UNIT
from fueltrack.models.trip import Trip
from fueltrack.models.vehicle_type import VehicleType
from fueltrack.models.warning import LowFuelWarning

F = TypeVar("F", bound=Callable[..., Any])

_LOG_DIR = os.environ.get(ENV_LOG_DIR) or os.path.join(os.getcwd(), "logs")
_LOG_FILE = os.path.join(_LOG_DIR, "fueltrack.log")
_LOGGER_NAME = "fueltrack.service"

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def _file_handlers(logger: logging.Logger) -> list[logging.FileHandler]:
    return [h for h in logger.handlers if isinstance(h, logging.FileHandler)]


def configure_log_dir(log_dir: str) -> None:
    """Point the log file at *log_dir*, closing any log file already open.

    Handlers of other kinds on the service logger (capture handlers installed
    by a test runner, a console handler added by the host) are left alone.
    """
    global _LOG_DIR, _LOG_FILE, _logger
    with _logger_lock:
        _LOG_DIR = log_dir
        _LOG_FILE = os.path.join(log_dir, "fueltrack.log")
        logger = logging.getLogger(_LOGGER_NAME)
        for handler in _file_handlers(logger):
            handler.close()
            logger.removeHandler(handler)
        _logger = None


def _get_logger() -> logging.Logger:
    """Return the file logger, creating log dir and handler on first use."""
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        os.makedirs(_LOG_DIR, exist_ok=True)

        logger = logging.getLogger(_LOGGER_NAME)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False

        if not _file_handlers(logger):
            handler = logging.FileHandler(_LOG_FILE, encoding="utf-8")
            handler.setFormatter(
                logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
            )
            logger.addHandler(handler)
        _logger = logger

    return _logger


def _describe(value: Any) -> str:
    """Short log rendering of a service argument or result."""
    if isinstance(value, VehicleType):
        return value.value
    if isinstance(value, Trip):
        return f"Trip({value.distance:g} {DISTANCE_UNIT}, {value.fuel_used:g} {FUEL_UNIT})"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(_describe(v) for v in value) + "]"
    # Vehicle has its own short repr
    return repr(value)


def log_service_call(fn: F) -> F:
    """Decorator that logs tracker service calls and their outcome.

    Arguments and results are rendered by ``_describe`` so vehicles, types
    and trips read as domain values rather than object dumps.
    """

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        # Skip 'self' in the argument summary
        arg_parts = [_describe(a) for a in args[1:]]
        arg_parts += [f"{k}={_describe(v)}" for k, v in kwargs.items()]
        logger.info("SERVICE CALL: %s(%s)", fn.__qualname__, ", ".join(arg_parts))

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            logger.error(
                "SERVICE FAIL: %s -> %s: %s (%.3fs)",
                fn.__qualname__, type(exc).__name__, exc, time.monotonic() - start,
            )
            raise
        logger.info(
            "SERVICE OK: %s -> %s (%.3fs)",
            fn.__qualname__, _describe(result), time.monotonic() - start,
        )
        return result

    return wrapper  # type: ignore[return-value]


def log_warning(warning: LowFuelWarning) -> None:
    """Record a low-fuel warning in the log file."""
    _get_logger().warning(
        "LOW FUEL: %s at %.2f (threshold %.2f)",
        warning.vehicle_name, warning.fuel_level, warning.threshold,
    )
