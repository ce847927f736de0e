"""Tests for delimited-file ingestion.

Files are written to ``tmp_path`` so the suite never depends on the
bundled data directory.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path

import pytest

from fleet_monitor.core.vehicle import VehicleRecord
from fleet_monitor.data_ingestion.csv_loader import (
    MalformedRowError,
    build_records,
    load_vehicle_file,
    parse_row,
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_HEADER = "ID,Speed,Temperature,Fuel"


def _write(tmp_path: Path, lines: list[str], name: str = "vehicles.csv") -> Path:
    path = tmp_path / name
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# parse_row
# ---------------------------------------------------------------------------


def test_parse_row_converts_types() -> None:
    assert parse_row(["7", "60.5", "90", " 45.0 "]) == (7, 60.5, 90.0, 45.0)


def test_parse_row_rejects_wrong_field_count() -> None:
    with pytest.raises(MalformedRowError, match="expected 4 fields"):
        parse_row(["1", "2", "3"])


def test_parse_row_rejects_missing_value() -> None:
    with pytest.raises(MalformedRowError, match="fuel is missing"):
        parse_row(["1", "60", "90", float("nan")])
    with pytest.raises(MalformedRowError, match="speed is missing"):
        parse_row(["1", "", "90", "50"])


def test_parse_row_rejects_non_integer_id() -> None:
    with pytest.raises(MalformedRowError, match="id must be an integer"):
        parse_row(["x1", "60", "90", "50"])


def test_parse_row_rejects_non_numeric_reading() -> None:
    with pytest.raises(MalformedRowError, match="temperature must be numeric"):
        parse_row(["1", "60", "hot", "50"])


def test_parse_row_rejects_non_finite_reading() -> None:
    with pytest.raises(MalformedRowError, match="must be finite"):
        parse_row(["1", "nan", "90", "50"])
    with pytest.raises(MalformedRowError, match="must be finite"):
        parse_row(["1", "60", "inf", "50"])


# ---------------------------------------------------------------------------
# build_records
# ---------------------------------------------------------------------------


def test_build_records_skips_invalid_and_continues() -> None:
    rows = [
        (1, 120.0, 130.0, 10.0),
        (2, -5.0, 90.0, 40.0),
        (3, 0.0, 85.0, 50.0),
        (4, 60.0, 90.0, 101.0),
    ]
    result = build_records(rows)

    assert [r.vehicle_id for r in result.records] == [1, 3]
    assert [i.vehicle_id for i in result.issues] == [2, 4]
    assert "speed" in result.issues[0].reason
    assert "fuel" in result.issues[1].reason


def test_build_records_logs_rejections(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        build_records([(5, 60.0, -1.0, 50.0)])
    assert "Error creating vehicle 5" in caplog.text


def test_build_records_rejects_non_finite_values() -> None:
    result = build_records([(1, math.nan, 90.0, 50.0), (2, 60.0, math.inf, 50.0)])
    assert result.records == []
    assert [i.vehicle_id for i in result.issues] == [1, 2]
    assert "speed must be finite" in result.issues[0].reason


def test_build_records_empty_input() -> None:
    result = build_records([])
    assert result.records == []
    assert result.issues == []


# ---------------------------------------------------------------------------
# load_vehicle_file
# ---------------------------------------------------------------------------


def test_load_valid_file(tmp_path: Path) -> None:
    path = _write(tmp_path, [_HEADER, "1,60.5,90,45", "2,72,115.5,30"])
    result = load_vehicle_file(path)

    assert result.records == [
        VehicleRecord(1, 60.5, 90.0, 45.0),
        VehicleRecord(2, 72.0, 115.5, 30.0),
    ]
    assert result.issues == []


def test_header_row_is_skipped(tmp_path: Path) -> None:
    """The first line is a header even if it looks like data."""
    path = _write(tmp_path, ["9,9,9,9", "1,60,90,50"])
    result = load_vehicle_file(path)
    assert [r.vehicle_id for r in result.records] == [1]


def test_malformed_and_invalid_rows_are_reported(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        [
            _HEADER,
            "1,60,90,50",
            "2,65,abc,40",
            "3,-12,95,50",
            "4,70,92",
            "5,55,98,12.5",
        ],
    )
    result = load_vehicle_file(path)

    assert [r.vehicle_id for r in result.records] == [1, 5]
    reported = {issue.vehicle_id for issue in result.issues}
    assert reported == {2, 3, 4}


def test_row_with_extra_fields_is_reported(tmp_path: Path) -> None:
    path = _write(tmp_path, [_HEADER, "1,60,90,50", "2,60,90,50,7", "3,61,91,51"])
    result = load_vehicle_file(path)

    assert [r.vehicle_id for r in result.records] == [1, 3]
    assert len(result.issues) == 1
    assert result.issues[0].vehicle_id == 2
    assert "expected 4 fields, got 5" in result.issues[0].reason


def test_extra_fields_on_first_data_row_do_not_shift_columns(tmp_path: Path) -> None:
    """A long first row is reported and later rows keep their alignment."""
    path = _write(tmp_path, [_HEADER, "2,60,90,50,7", "3,61,91,51"])
    result = load_vehicle_file(path)

    assert result.records == [VehicleRecord(3, 61.0, 91.0, 51.0)]
    assert len(result.issues) == 1
    issue = result.issues[0]
    assert issue.vehicle_id == 2
    assert issue.raw == "2,60,90,50,7"
    assert "expected 4 fields, got 5" in issue.reason


def test_empty_trailing_field_is_tolerated(tmp_path: Path) -> None:
    path = _write(tmp_path, [_HEADER, "1,60,90,50,", "2,61,91,51"])
    result = load_vehicle_file(path)
    assert [r.vehicle_id for r in result.records] == [1, 2]
    assert result.issues == []


def test_custom_delimiter(tmp_path: Path) -> None:
    path = _write(tmp_path, ["id;speed;temperature;fuel", "1;60.5;90;45"])
    result = load_vehicle_file(path, delimiter=";")
    assert result.records == [VehicleRecord(1, 60.5, 90.0, 45.0)]


def test_multi_character_delimiter_rejected(tmp_path: Path) -> None:
    path = _write(tmp_path, [_HEADER])
    with pytest.raises(ValueError, match="single character"):
        load_vehicle_file(path, delimiter="::")


def test_header_only_file_yields_nothing(tmp_path: Path) -> None:
    path = _write(tmp_path, [_HEADER])
    result = load_vehicle_file(path)
    assert result.records == []
    assert result.issues == []


def test_empty_file_yields_nothing(tmp_path: Path) -> None:
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    result = load_vehicle_file(path)
    assert result.records == []


def test_blank_lines_are_ignored(tmp_path: Path) -> None:
    path = _write(tmp_path, [_HEADER, "1,60,90,50", "", "2,61,91,51"])
    result = load_vehicle_file(path)
    assert [r.vehicle_id for r in result.records] == [1, 2]
    assert result.issues == []


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="Unable to open file"):
        load_vehicle_file(tmp_path / "nope.csv")


def test_loaded_values_are_finite(tmp_path: Path) -> None:
    path = _write(tmp_path, [_HEADER, "1,nan,90,50", "2,60,90,50"])
    result = load_vehicle_file(path)
    assert [r.vehicle_id for r in result.records] == [2]
    assert all(math.isfinite(r.speed) for r in result.records)
