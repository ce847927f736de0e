"""Delimited-file loader for vehicle telemetry.

The expected file layout is a header row followed by one vehicle per
line::

    id,speed,temperature,fuel
    1,60.5,90.0,45.0

Rows that cannot be tokenised or converted are reported and skipped, as
are rows whose values fail :class:`VehicleRecord` validation.  Only a
missing file aborts the load.
"""

from __future__ import annotations

import io
import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pandas as pd

from fleet_monitor.core.vehicle import InvalidVehicleError, VehicleRecord

_logger = logging.getLogger(__name__)

COLUMNS: tuple[str, ...] = ("id", "speed", "temperature", "fuel")

RawVehicle = tuple[int, float, float, float]


class MalformedRowError(ValueError):
    """Raised when a row cannot be converted into a raw vehicle tuple."""


@dataclass(frozen=True)
class IngestionIssue:
    """A row that was skipped during ingestion.

    Attributes:
        raw: The offending row as text.
        reason: Why the row was rejected.
        vehicle_id: Identifier of the row, if it could be parsed.
    """

    raw: str
    reason: str
    vehicle_id: int | None = None


@dataclass
class IngestionResult:
    """Records loaded from a source together with the rows that were skipped."""

    records: list[VehicleRecord] = field(default_factory=list)
    issues: list[IngestionIssue] = field(default_factory=list)

    def extend(self, other: IngestionResult) -> None:
        self.records.extend(other.records)
        self.issues.extend(other.issues)


# ---------------------------------------------------------------------------
# Row conversion
# ---------------------------------------------------------------------------


def _try_parse_id(token: object) -> int | None:
    if not isinstance(token, str):
        return None
    try:
        return int(token)
    except ValueError:
        return None


def parse_row(fields: Sequence[object]) -> RawVehicle:
    """Convert one tokenised row into a typed ``(id, speed, temperature, fuel)``.

    Args:
        fields: Raw tokens as read from the file.  Missing trailing
            fields may appear as ``None`` or NaN.

    Returns:
        The converted tuple.  Range checks are left to
        :class:`VehicleRecord`.

    Raises:
        MalformedRowError: If the field count is wrong, a field is empty,
            the id is not an integer, or a reading is not a finite number.
    """
    if len(fields) != len(COLUMNS):
        raise MalformedRowError(
            f"expected {len(COLUMNS)} fields, got {len(fields)}."
        )

    tokens: list[str] = []
    for name, token in zip(COLUMNS, fields):
        if not isinstance(token, str) or not token.strip():
            raise MalformedRowError(f"{name} is missing.")
        tokens.append(token.strip())

    vehicle_id = _try_parse_id(tokens[0])
    if vehicle_id is None:
        raise MalformedRowError(f"id must be an integer, got {tokens[0]!r}.")

    readings: list[float] = []
    for name, token in zip(COLUMNS[1:], tokens[1:]):
        try:
            value = float(token)
        except ValueError:
            raise MalformedRowError(
                f"{name} must be numeric, got {token!r}."
            ) from None
        if not math.isfinite(value):
            raise MalformedRowError(f"{name} must be finite, got {token!r}.")
        readings.append(value)

    speed, temperature, fuel = readings
    return vehicle_id, speed, temperature, fuel


def _present_fields(fields: Sequence[object]) -> list[str]:
    """Tokens actually present on a line, without the trailing padding."""
    tokens = list(fields)
    while tokens and not isinstance(tokens[-1], str):
        tokens.pop()
    return ["" if not isinstance(t, str) else t for t in tokens]


# ---------------------------------------------------------------------------
# Record construction
# ---------------------------------------------------------------------------


def build_records(rows: Iterable[RawVehicle]) -> IngestionResult:
    """Construct vehicle records from typed tuples.

    Tuples that violate a record invariant are reported in
    ``issues`` and skipped; the remaining tuples are still processed.

    Args:
        rows: ``(id, speed, temperature, fuel)`` tuples.

    Returns:
        The valid records, in input order, and one issue per rejected tuple.
    """
    result = IngestionResult()
    for row in rows:
        vehicle_id, speed, temperature, fuel = row
        try:
            record = VehicleRecord(vehicle_id, speed, temperature, fuel)
        except InvalidVehicleError as exc:
            _logger.warning("Error creating vehicle %s: %s", vehicle_id, exc)
            result.issues.append(
                IngestionIssue(
                    raw=repr(tuple(row)), reason=str(exc), vehicle_id=vehicle_id
                )
            )
            continue
        _logger.debug("Loaded vehicle ID: %s", vehicle_id)
        result.records.append(record)
    return result


# ---------------------------------------------------------------------------
# File loader
# ---------------------------------------------------------------------------


def read_vehicle_table(path: Path, delimiter: str = ",") -> pd.DataFrame:
    """Read the raw string table of a vehicle file.

    The header row is skipped without being interpreted.  The table is
    as wide as the longest line in the file, so rows with extra fields
    keep them in the trailing columns instead of being re-aligned.

    Args:
        path: File to read.
        delimiter: Single field separator character.

    Returns:
        A DataFrame of string cells with integer column labels.  Cells
        beyond the end of a shorter line are NaN.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ValueError: If *delimiter* is not a single character.
    """
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character.")
    if not path.exists():
        raise FileNotFoundError(f"Unable to open file: {path}")

    text = path.read_text(encoding="utf-8")
    lines = text.splitlines()[1:]
    width = max([len(COLUMNS)] + [line.count(delimiter) + 1 for line in lines])

    if not any(line.strip() for line in lines):
        return pd.DataFrame(columns=list(range(width)), dtype=str)

    return pd.read_csv(
        io.StringIO(text),
        sep=delimiter,
        header=None,
        skiprows=1,
        names=list(range(width)),
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        engine="python",
    )


def _check_row(fields: Sequence[object]) -> RawVehicle:
    present = _present_fields(fields)
    extra = [f for f in present[len(COLUMNS):] if f.strip()]
    if extra:
        raise MalformedRowError(
            f"expected {len(COLUMNS)} fields, got {len(present)}."
        )
    return parse_row(fields[: len(COLUMNS)])


def load_vehicle_file(path: Path | str, delimiter: str = ",") -> IngestionResult:
    """Load vehicle records from a delimited text file.

    A row carrying a value beyond the fourth field is malformed; empty
    trailing fields (a line ending in the delimiter) are tolerated.

    Args:
        path: File to read.
        delimiter: Single field separator character.

    Returns:
        Loaded records plus every skipped row.  Malformed rows are
        listed, in file order, before rows that fail validation.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ValueError: If *delimiter* is not a single character.
    """
    frame = read_vehicle_table(Path(path), delimiter)
    result = IngestionResult()

    rows: list[RawVehicle] = []
    for fields in frame.itertuples(index=False, name=None):
        try:
            rows.append(_check_row(fields))
        except MalformedRowError as exc:
            raw = delimiter.join(_present_fields(fields))
            _logger.warning("Error parsing line: %s (%s)", raw, exc)
            result.issues.append(
                IngestionIssue(
                    raw=raw,
                    reason=str(exc),
                    vehicle_id=_try_parse_id(fields[0]) if fields else None,
                )
            )

    result.extend(build_records(rows))
    return result
