"""Loaders that turn external telemetry sources into vehicle records."""

from fleet_monitor.data_ingestion.csv_loader import (
    IngestionIssue,
    IngestionResult,
    MalformedRowError,
    build_records,
    load_vehicle_file,
    parse_row,
)

__all__ = [
    "IngestionIssue",
    "IngestionResult",
    "MalformedRowError",
    "build_records",
    "load_vehicle_file",
    "parse_row",
]
