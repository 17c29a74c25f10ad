"""Tests for the dashboard CLI.

Tests cover:
- metrics command (table and JSON output, invalid inputs)
- validate command (valid and invalid session rows)
"""

import json
import sys

import pytest
from loguru import logger
from typer.testing import CliRunner

from cli.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_logger():
    """The CLI callback reconfigures loguru against the runner's streams."""
    yield
    logger.remove()
    logger.add(sys.stderr)


def write_json(tmp_path, name: str, payload) -> str:
    path = tmp_path / name
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def dashboard_payload(**overrides) -> dict:
    payload = {
        "today": "2025-01-28",
        "activities": [
            {"id": "s1", "date": "2025-01-27", "type": "training", "duration_min": 60, "intensity": 5, "status": "completed"},
            {"id": "s2", "date": "2025-01-28", "type": "match", "duration_min": 90, "intensity": 8, "status": "completed"},
            {"id": "s3", "date": "2025-01-30", "type": "training", "duration_min": 60, "status": "scheduled"},
        ],
        "history": [{"day": f"2025-01-{day:02d}", "load": 300} for day in range(8, 22)],
        "readiness": [{"day": "2025-01-28", "value": 8}],
    }
    payload.update(overrides)
    return payload


# ============================================================================
# METRICS
# ============================================================================


def test_metrics_renders_summary(tmp_path):
    result = runner.invoke(app, ["metrics", write_json(tmp_path, "inputs.json", dashboard_payload())])

    assert result.exit_code == 0
    assert "Workload as of 2025-01-28" in result.output
    assert "High load" in result.output
    assert "Recommendations" in result.output


def test_metrics_json_output(tmp_path):
    result = runner.invoke(
        app, ["metrics", write_json(tmp_path, "inputs.json", dashboard_payload()), "--json", "--method", "ewma"]
    )

    assert result.exit_code == 0
    assert '"chronic_method": "ewma"' in result.output
    assert '"acute_load_7d": 1020.0' in result.output


def test_metrics_today_override(tmp_path):
    result = runner.invoke(
        app, ["metrics", write_json(tmp_path, "inputs.json", dashboard_payload()), "--json", "--today", "2025-02-03"]
    )

    assert result.exit_code == 0
    assert '"week_start": "2025-02-03"' in result.output


def test_metrics_invalid_category_exits(tmp_path):
    payload = dashboard_payload(
        activities=[{"id": "x", "date": "2025-01-28", "type": "yoga", "duration_min": 60, "status": "done"}]
    )

    result = runner.invoke(app, ["metrics", write_json(tmp_path, "inputs.json", payload)])

    assert result.exit_code == 1
    assert "Invalid dashboard inputs" in result.output


def test_metrics_unreadable_file_exits(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    result = runner.invoke(app, ["metrics", str(path)])

    assert result.exit_code == 1


# ============================================================================
# VALIDATE
# ============================================================================


def test_validate_accepts_valid_rows(tmp_path):
    rows = [
        {"id": "s1", "type": "training", "date": "2025-01-27", "start_time": "18:00", "duration_min": 60},
        {
            "id": "s2",
            "type": "match",
            "date": "2025-01-28",
            "start_time": "12:00",
            "duration_min": 90,
            "intensity": 8,
            "difficulty": 7,
            "satisfaction": 9,
        },
    ]

    result = runner.invoke(app, ["validate", write_json(tmp_path, "sessions.json", rows)])

    assert result.exit_code == 0
    assert "s1" in result.output
    assert "s2" in result.output


def test_validate_reports_invalid_rows(tmp_path):
    rows = [
        {"id": "s1", "type": "training", "date": "2025-01-27", "start_time": "18:00", "duration_min": 60},
        {"id": "s2", "type": "training", "date": "2025-01-28", "start_time": "18:00", "duration_min": 0},
    ]

    result = runner.invoke(app, ["validate", write_json(tmp_path, "sessions.json", rows)])

    assert result.exit_code == 1
    assert "Duration must be greater than 0" in result.output


def test_validate_reports_string_ratings(tmp_path):
    rows = [
        {
            "id": "s1",
            "type": "match",
            "date": "2025-01-28",
            "start_time": "12:00",
            "duration_min": 90,
            "intensity": "8",
            "difficulty": 7,
            "satisfaction": 9,
        },
    ]

    result = runner.invoke(app, ["validate", write_json(tmp_path, "sessions.json", rows)])

    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "Intensity must be a number" in result.output


def test_validate_requires_list(tmp_path):
    result = runner.invoke(app, ["validate", write_json(tmp_path, "sessions.json", {"id": "s1"})])

    assert result.exit_code == 1
