"""Alert thresholds and alert events for the fleet monitor.

A record is checked against two fixed thresholds.  Each triggered
condition yields its own :class:`FleetAlert`, so a vehicle that is both
overheating and low on fuel produces two events.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from fleet_monitor.core.vehicle import VehicleRecord

# Temperature above which a vehicle is overheating (degrees Celsius).
CRITICAL_TEMPERATURE: Final[float] = 110.0

# Fuel level below which a vehicle is running low (percent).
LOW_FUEL_THRESHOLD: Final[float] = 15.0


class AlertKind(enum.Enum):
    """Condition reported by an alert."""

    OVERHEATING = "Critical Overheating"
    LOW_FUEL = "Low Fuel Warning"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class FleetAlert:
    """A single triggered condition for one vehicle.

    Attributes:
        vehicle_id: Identifier of the vehicle that triggered the alert.
        kind: Which threshold was crossed.
    """

    vehicle_id: int
    kind: AlertKind


def evaluate_alerts(record: VehicleRecord) -> list[FleetAlert]:
    """Evaluate both alert conditions for one record.

    Overheating is always reported before low fuel.

    Args:
        record: Vehicle snapshot to check.

    Returns:
        Zero, one or two alerts for *record*.
    """
    alerts: list[FleetAlert] = []
    if record.is_overheating():
        alerts.append(FleetAlert(record.vehicle_id, AlertKind.OVERHEATING))
    if record.has_low_fuel():
        alerts.append(FleetAlert(record.vehicle_id, AlertKind.LOW_FUEL))
    return alerts
