"""Configuration and sample data loader for the fleet monitor."""

import math
from pathlib import Path

import yaml

from fleet_monitor.data_ingestion.csv_loader import RawVehicle

DATA_DIR: Path = Path(__file__).resolve().parent.parent / "data"
DEFAULT_DATA_PATH: Path = DATA_DIR / "vehicles.csv"
SAMPLE_FLEET_PATH: Path = DATA_DIR / "sample_fleet.yaml"

_REQUIRED_FIELDS: tuple[str, ...] = ("id", "speed", "temperature", "fuel")

_NUMERIC_FIELDS: tuple[str, ...] = _REQUIRED_FIELDS[1:]  # all except id


def load_sample_fleet(path: Path | None = None) -> list[RawVehicle]:
    """Load the sample fleet from a YAML file.

    Entries are checked for shape only.  Range validation happens when
    the tuples are turned into records, so out-of-range sample entries
    are reported and skipped there rather than failing the load.

    Args:
        path: Optional override for the sample fleet file path.

    Returns:
        ``(id, speed, temperature, fuel)`` tuples in file order.

    Raises:
        FileNotFoundError: If the sample file does not exist.
        ValueError: If any entry is missing fields or has a
            non-numeric value.
    """
    fleet_path = path or SAMPLE_FLEET_PATH
    if not fleet_path.exists():
        raise FileNotFoundError(f"Sample fleet file not found: {fleet_path}")

    with open(fleet_path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}

    entries: list[dict] = data.get("vehicles") or []
    rows: list[RawVehicle] = []

    for idx, entry in enumerate(entries):
        # --- Validate required fields ---
        for field in _REQUIRED_FIELDS:
            if field not in entry:
                raise ValueError(
                    f"Vehicle entry {idx} is missing required field '{field}'"
                )

        if isinstance(entry["id"], bool) or not isinstance(entry["id"], int):
            raise ValueError(
                f"Vehicle entry {idx}: 'id' must be an integer, "
                f"got {type(entry['id']).__name__}"
            )

        # --- Validate numeric types ---
        for field in _NUMERIC_FIELDS:
            val = entry[field]
            if isinstance(val, bool) or not isinstance(val, (int, float)):
                raise ValueError(
                    f"Vehicle entry {idx} (id {entry['id']}): "
                    f"'{field}' must be numeric, got {type(val).__name__}"
                )
            if not math.isfinite(val):
                raise ValueError(
                    f"Vehicle entry {idx} (id {entry['id']}): "
                    f"'{field}' must be finite, got {val}"
                )

        rows.append(
            (
                int(entry["id"]),
                float(entry["speed"]),
                float(entry["temperature"]),
                float(entry["fuel"]),
            )
        )

    return rows
