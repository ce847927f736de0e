"""Plain-text rendering of fleet statistics and alerts.

Numbers are printed with ``:g`` so that whole values appear without a
trailing ``.0`` (``100`` rather than ``100.0``).
"""

from __future__ import annotations

from collections.abc import Iterable

from fleet_monitor.core.alerts import FleetAlert
from fleet_monitor.core.fleet import FleetAggregator
from fleet_monitor.data_ingestion.csv_loader import IngestionIssue

TITLE_BANNER = "--- Fleet Management System ---"
STATUS_BANNER = "--- Fleet Status ---"
ALERTS_BANNER = "--- Alerts ---"
ISSUES_BANNER = "--- Skipped Rows ---"


def format_averages(fleet: FleetAggregator) -> list[str]:
    """Format the most recently computed fleet averages."""
    return [
        f"Average Speed: {fleet.average_speed():g} km/h",
        f"Average Temperature: {fleet.average_temperature():g} °C",
        f"Average Fuel: {fleet.average_fuel():g}%",
    ]


def format_status(fleet: FleetAggregator) -> list[str]:
    """One status line per vehicle, in fleet order."""
    return [
        f"Vehicle {record.vehicle_id} Speed: {record.speed:g} "
        f"Temp: {record.temperature:g} Fuel: {record.fuel:g}"
        for record in fleet
    ]


def format_alerts(alerts: Iterable[FleetAlert]) -> list[str]:
    lines = [f"Vehicle ID {alert.vehicle_id}: {alert.kind.label}" for alert in alerts]
    return lines or ["No alerts."]


def format_issues(issues: Iterable[IngestionIssue]) -> list[str]:
    lines: list[str] = []
    for issue in issues:
        prefix = f"Vehicle {issue.vehicle_id}" if issue.vehicle_id is not None else "Row"
        lines.append(f"{prefix}: {issue.reason} [{issue.raw}]")
    return lines


def render_report(
    fleet: FleetAggregator,
    issues: Iterable[IngestionIssue] = (),
) -> str:
    """Render the full fleet report.

    The caller is responsible for calling
    :meth:`FleetAggregator.compute_averages` beforehand.

    Args:
        fleet: Fleet whose averages, status and alerts are reported.
        issues: Rows skipped during ingestion.  The section is omitted
            when there are none.

    Returns:
        The report text, newline terminated.
    """
    lines: list[str] = [TITLE_BANNER, ""]
    lines.extend(format_averages(fleet))
    lines.extend(["", STATUS_BANNER])
    lines.extend(format_status(fleet))
    lines.extend(["", ALERTS_BANNER])
    lines.extend(format_alerts(fleet.check_alerts()))

    issue_lines = format_issues(issues)
    if issue_lines:
        lines.extend(["", ISSUES_BANNER])
        lines.extend(issue_lines)

    return "\n".join(lines) + "\n"
