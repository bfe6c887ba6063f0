"""Centralised configuration via Pydantic Settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Run configuration loaded from ``TESTOBJECT_*`` environment variables."""

    model_config = {"env_prefix": "TESTOBJECT_", "frozen": True}

    # Credentials. An empty key is passed through; the farm rejects the session.
    api_key: str = ""
    app_id: str = "1"

    # Endpoints
    appium_endpoint: str = "https://app.testobject.com:443/api/appium/wd/hub"
    rest_url: str = "https://app.testobject.com/api/rest"

    # Matrix
    # Format: "1.4.8,1.6.4"
    appium_versions: str = "1.4.8,1.6.0-updated-chromedriver,1.6.4,1.6.5"

    # Waits
    result_timeout_seconds: int = 30
    poll_interval_seconds: float = 0.5
    http_timeout_seconds: int = 30

    @property
    def appium_version_list(self) -> list[str]:
        return [v.strip() for v in self.appium_versions.split(",") if v.strip()]


def get_settings() -> Settings:
    """Factory — allows overriding in tests."""
    return Settings()
