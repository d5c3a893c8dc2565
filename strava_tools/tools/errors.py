"""Error classes for strava tools."""


class ConfigurationError(Exception):
    """Tool cannot run because required configuration is missing."""

    def __init__(self, setting: str, message: str):
        self.setting = setting
        self.message = message
        super().__init__(self.message)
