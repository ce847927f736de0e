"""Core telemetry model and aggregation for the fleet monitor."""

from fleet_monitor.core.alerts import (
    CRITICAL_TEMPERATURE,
    LOW_FUEL_THRESHOLD,
    AlertKind,
    FleetAlert,
    evaluate_alerts,
)
from fleet_monitor.core.fleet import FleetAggregator, mean_of
from fleet_monitor.core.vehicle import InvalidVehicleError, VehicleRecord

__all__ = [
    "AlertKind",
    "CRITICAL_TEMPERATURE",
    "FleetAggregator",
    "FleetAlert",
    "InvalidVehicleError",
    "LOW_FUEL_THRESHOLD",
    "VehicleRecord",
    "evaluate_alerts",
    "mean_of",
]
