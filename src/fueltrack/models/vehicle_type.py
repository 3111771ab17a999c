"""Vehicle categories."""

from __future__ import annotations

from enum import Enum


class VehicleType(str, Enum):
    """Supported vehicle categories, in menu order."""

    CAR = "CAR"
    BIKE = "BIKE"
    TRUCK = "TRUCK"

    @classmethod
    def from_menu_choice(cls, choice: int) -> VehicleType:
        """Return the type for a 1-based menu selection."""
        members = list(cls)
        if not 1 <= choice <= len(members):
            raise ValueError(f"Vehicle type choice must be 1-{len(members)}, got {choice}")
        return members[choice - 1]
