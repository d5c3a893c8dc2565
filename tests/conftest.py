"""Shared fixtures for strava tools tests."""

import copy

import pytest

from strava_tools.integrations.strava.schemas import StravaDetailedActivity, parse_detailed_activity

DETAILED_ACTIVITY = {
    "id": 12345,
    "resource_state": 3,
    "athlete": {"id": 98765, "resource_state": 2},
    "name": "Updated Test Activity",
    "distance": 5000,
    "moving_time": 1800,
    "elapsed_time": 1900,
    "total_elevation_gain": 100,
    "type": "Run",
    "sport_type": "running",
    "start_date": "2024-01-01T10:00:00Z",
    "start_date_local": "2024-01-01T06:00:00Z",
    "timezone": "America/Los_Angeles",
    "start_latlng": [37.7749, -122.4194],
    "end_latlng": [37.7749, -122.4194],
    "kudos_count": 0,
    "map": None,
    "trainer": False,
    "commute": False,
    "manual": False,
    "private": False,
    "flagged": False,
    "gear_id": None,
    "average_speed": 2.78,
    "average_heartrate": 140,
    "calories": 400,
    "description": "Test activity description",
    "gear": None,
    "device_name": "Test Device",
}


@pytest.fixture
def activity_payload() -> dict:
    """Raw Strava response body for a detailed activity."""
    return copy.deepcopy(DETAILED_ACTIVITY)


@pytest.fixture
def updated_activity(activity_payload) -> StravaDetailedActivity:
    return parse_detailed_activity(activity_payload)


@pytest.fixture(autouse=True)
def isolate_strava_env(monkeypatch, tmp_path):
    """Keep tests independent of the developer's environment and .env file."""
    for name in ("STRAVA_ACCESS_TOKEN", "STRAVA_API_BASE_URL", "STRAVA_HTTP_TIMEOUT", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
