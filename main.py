"""CLI entrypoint for the fleet telemetry monitor."""

from __future__ import annotations

import argparse
import logging
import sys

from fleet_monitor import __version__
from fleet_monitor.config import DEFAULT_DATA_PATH, load_sample_fleet
from fleet_monitor.core.fleet import FleetAggregator
from fleet_monitor.data_ingestion.csv_loader import (
    IngestionResult,
    build_records,
    load_vehicle_file,
)
from fleet_monitor.report import render_report


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Report fleet averages and threshold alerts from vehicle telemetry.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "path",
        nargs="?",
        default=str(DEFAULT_DATA_PATH),
        help=f"Delimited telemetry file (default: {DEFAULT_DATA_PATH})",
    )
    source.add_argument(
        "--sample",
        action="store_true",
        help="Use the bundled YAML sample fleet instead of a file",
    )
    parser.add_argument(
        "--delimiter", "-d", default=",", help="Field separator character (default: ',')"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Load telemetry, print the fleet report and return an exit code."""
    args = _build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    try:
        if args.sample:
            result: IngestionResult = build_records(load_sample_fleet())
        else:
            result = load_vehicle_file(args.path, delimiter=args.delimiter)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not result.records:
        print("No vehicles loaded from file", file=sys.stderr)
        return 1

    fleet = FleetAggregator(result.records)
    fleet.compute_averages()
    print(render_report(fleet, result.issues), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
