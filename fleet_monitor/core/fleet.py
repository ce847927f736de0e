"""Fleet-wide aggregation for the fleet monitor.

The aggregator owns its own copy of the vehicle records.  Averages are
derived state: they are only refreshed by an explicit call to
:meth:`FleetAggregator.compute_averages`, so appending a record leaves
the previously computed values in place until the next recompute.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import TypeVar

import numpy as np

from fleet_monitor.core.alerts import FleetAlert, evaluate_alerts
from fleet_monitor.core.vehicle import VehicleRecord

T = TypeVar("T")


def mean_of(items: Sequence[T], projection: Callable[[T], float]) -> float:
    """Arithmetic mean of a numeric projection over a sequence.

    Args:
        items: Values to project.  May be empty.
        projection: Function mapping each item to the number to average.

    Returns:
        The mean as a Python float, or ``0.0`` when *items* is empty.
    """
    if not items:
        return 0.0
    values = np.fromiter(
        (projection(item) for item in items), dtype=np.float64, count=len(items)
    )
    return float(values.mean())


class FleetAggregator:
    """Collection of vehicle records with summary statistics and alerts.

    The last computed averages are read through :meth:`average_speed`,
    :meth:`average_temperature` and :meth:`average_fuel`; they only
    change when :meth:`compute_averages` runs.
    """

    __slots__ = ("_records", "_avg_speed", "_avg_temperature", "_avg_fuel")

    def __init__(self, records: Iterable[VehicleRecord] = ()) -> None:
        self._records: list[VehicleRecord] = list(records)
        self._avg_speed: float = 0.0
        self._avg_temperature: float = 0.0
        self._avg_fuel: float = 0.0

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[VehicleRecord]:
        return iter(self._records)

    def __repr__(self) -> str:
        return (
            f"FleetAggregator(vehicles={len(self._records)}, "
            f"avg_speed={self._avg_speed:.2f}, "
            f"avg_temperature={self._avg_temperature:.2f}, "
            f"avg_fuel={self._avg_fuel:.2f})"
        )

    @property
    def records(self) -> tuple[VehicleRecord, ...]:
        """Snapshot of the owned records in insertion order."""
        return tuple(self._records)

    def append(self, record: VehicleRecord) -> None:
        """Add a record to the end of the fleet.

        Averages are not refreshed; call :meth:`compute_averages` again
        before reading them.
        """
        self._records.append(record)

    def compute_averages(self) -> None:
        """Recompute average speed, temperature and fuel over all records."""
        self._avg_speed = mean_of(self._records, lambda r: r.speed)
        self._avg_temperature = mean_of(self._records, lambda r: r.temperature)
        self._avg_fuel = mean_of(self._records, lambda r: r.fuel)

    def average_speed(self) -> float:
        return self._avg_speed

    def average_temperature(self) -> float:
        return self._avg_temperature

    def average_fuel(self) -> float:
        return self._avg_fuel

    def check_alerts(self) -> list[FleetAlert]:
        """Evaluate alert conditions for every record.

        Records are visited in insertion order and each record's
        overheating and low-fuel conditions are checked independently.

        Returns:
            All triggered alerts, in record order.
        """
        alerts: list[FleetAlert] = []
        for record in self._records:
            alerts.extend(evaluate_alerts(record))
        return alerts
