"""Tests for the strava-tools CLI."""

from unittest.mock import AsyncMock

import pytest
from typer.testing import CliRunner

from strava_tools.cli import _collect_arguments, app
from strava_tools.core.logger import setup_logger

runner = CliRunner()


@pytest.fixture
def update_fn(monkeypatch, updated_activity):
    mock = AsyncMock(return_value=updated_activity)
    monkeypatch.setattr("strava_tools.integrations.strava.client.update_activity", mock)
    return mock


def test_update_activity_command(update_fn):
    result = runner.invoke(
        app,
        ["update-activity", "12345", "--name", "Updated Name", "--no-commute", "--token", "cli-token"],
    )

    assert result.exit_code == 0
    assert "Updated Test Activity" in result.output
    update_fn.assert_awaited_once_with("cli-token", 12345, {"name": "Updated Name", "commute": False})


def test_update_activity_command_remove_gear(update_fn, monkeypatch):
    monkeypatch.setenv("STRAVA_ACCESS_TOKEN", "env-token")

    result = runner.invoke(app, ["update-activity", "12345", "--remove-gear"])

    assert result.exit_code == 0
    update_fn.assert_awaited_once_with("env-token", 12345, {"gear_id": None})


def test_update_activity_command_without_token(update_fn):
    result = runner.invoke(app, ["update-activity", "12345", "--name", "x"])

    assert result.exit_code == 1
    assert "Configuration error" in result.output
    update_fn.assert_not_awaited()


def test_update_activity_command_rejects_negative_id(update_fn):
    result = runner.invoke(app, ["update-activity", "--token", "t", "--", "-5"])

    assert result.exit_code == 1
    assert "Invalid arguments" in result.output
    update_fn.assert_not_awaited()


def test_gear_options_are_exclusive(update_fn):
    result = runner.invoke(app, ["update-activity", "1", "--gear-id", "b1", "--remove-gear", "--token", "t"])

    assert result.exit_code == 2
    update_fn.assert_not_awaited()


def test_list_tools_command():
    result = runner.invoke(app, ["list-tools"])

    assert result.exit_code == 0
    assert "update-activity" in result.output
    assert "gearId" in result.output


def test_collect_arguments_skips_unset_options():
    arguments = _collect_arguments(7, None, "Ride", None, None, False, None, None, False)

    assert arguments == {"activityId": 7, "type": "Ride", "private": False}


def test_update_activity_command_log_file(update_fn, tmp_path):
    log_file = tmp_path / "cli.log"

    result = runner.invoke(app, ["update-activity", "12345", "--token", "t", "--log-file", str(log_file)])
    setup_logger(level="INFO")

    assert result.exit_code == 0
    assert "Updating activity ID: 12345..." in log_file.read_text(encoding="utf-8")
