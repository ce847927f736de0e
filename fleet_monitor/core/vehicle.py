"""Vehicle telemetry record for the fleet monitor."""

import math
from dataclasses import dataclass

from fleet_monitor.core.alerts import CRITICAL_TEMPERATURE, LOW_FUEL_THRESHOLD


class InvalidVehicleError(ValueError):
    """Raised when a telemetry value is outside its allowed range."""


@dataclass(frozen=True)
class VehicleRecord:
    """Immutable telemetry snapshot of a single vehicle.

    Attributes:
        vehicle_id: Vehicle identifier.  Duplicates are allowed.
        speed: Current speed in km/h (>= 0.0).
        temperature: Engine temperature in degrees Celsius (>= 0.0).
        fuel: Fuel level in percent (0.0-100.0).
    """

    vehicle_id: int
    speed: float
    temperature: float
    fuel: float

    def __post_init__(self) -> None:
        """Validate telemetry values."""
        for name in ("speed", "temperature", "fuel"):
            if not math.isfinite(getattr(self, name)):
                raise InvalidVehicleError(f"{name} must be finite.")
        if not self.speed >= 0.0:
            raise InvalidVehicleError("speed must be >= 0.0.")
        if not self.temperature >= 0.0:
            raise InvalidVehicleError("temperature must be >= 0.0.")
        if not 0.0 <= self.fuel <= 100.0:
            raise InvalidVehicleError("fuel must be between 0.0 and 100.0.")

    def is_overheating(self) -> bool:
        """Return True if the temperature exceeds the critical threshold."""
        return self.temperature > CRITICAL_TEMPERATURE

    def has_low_fuel(self) -> bool:
        """Return True if the fuel level is below the low-fuel threshold."""
        return self.fuel < LOW_FUEL_THRESHOLD
