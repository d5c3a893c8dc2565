import pytest
from pydantic import ValidationError

from strava_tools.config.settings import DEFAULT_STRAVA_API_BASE_URL, load_settings


def test_defaults():
    current = load_settings()

    assert current.strava_access_token == ""
    assert current.strava_api_base_url == DEFAULT_STRAVA_API_BASE_URL
    assert current.strava_http_timeout == 30.0
    assert current.log_level == "INFO"
    assert current.log_file == ""


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("STRAVA_ACCESS_TOKEN", "abc")
    monkeypatch.setenv("STRAVA_HTTP_TIMEOUT", "5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    current = load_settings()

    assert current.strava_access_token == "abc"
    assert current.strava_http_timeout == 5.0
    assert current.log_level == "DEBUG"


def test_reads_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("STRAVA_ACCESS_TOKEN=from-file\n")

    assert load_settings().strava_access_token == "from-file"


def test_invalid_log_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    assert load_settings().log_level == "INFO"


def test_non_positive_timeout_rejected(monkeypatch):
    monkeypatch.setenv("STRAVA_HTTP_TIMEOUT", "0")

    with pytest.raises(ValidationError):
        load_settings()
