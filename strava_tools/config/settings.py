from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_STRAVA_API_BASE_URL = "https://www.strava.com/api/v3"


class Settings(BaseSettings):
    strava_access_token: str = Field(default="", validation_alias="STRAVA_ACCESS_TOKEN")
    strava_api_base_url: str = Field(
        default=DEFAULT_STRAVA_API_BASE_URL,
        validation_alias="STRAVA_API_BASE_URL",
        description="Strava REST API root, without trailing slash",
    )
    strava_http_timeout: float = Field(
        default=30.0,
        validation_alias="STRAVA_HTTP_TIMEOUT",
        description="Timeout in seconds for a single Strava API request",
    )
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_file: str = Field(default="", validation_alias="LOG_FILE", description="Optional log file path; empty disables file logging")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @field_validator("strava_api_base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("strava_http_timeout")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("STRAVA_HTTP_TIMEOUT must be positive")
        return value


def load_settings() -> Settings:
    """Build a fresh Settings instance from the current environment.

    Tool handlers call this once per invocation so a token rotated in the
    environment is picked up without restarting the process.
    """
    return Settings()


settings = load_settings()
