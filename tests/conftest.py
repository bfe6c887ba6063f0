"""Shared pytest fixtures for the calcmatrix test suite."""

from __future__ import annotations

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest

from calcmatrix.config import Settings
from calcmatrix.shared.enums import DevicePlatform
from calcmatrix.shared.models import DeviceDescriptor


@pytest.fixture()
def settings() -> Settings:
    """Return a Settings instance with test defaults and no real waits."""
    return Settings(
        api_key="test-api-key",
        app_id="7",
        appium_endpoint="http://appium.test/wd/hub",
        rest_url="http://testobject.test/api/rest",
        appium_versions="1.6.4,1.6.5",
        result_timeout_seconds=0,
        poll_interval_seconds=0,
    )


@pytest.fixture()
def capable_device() -> DeviceDescriptor:
    return DeviceDescriptor(id="A", os=DevicePlatform.ANDROID, os_version="4.3", is_available=True)


@pytest.fixture()
def sample_uuid() -> uuid.UUID:
    return uuid.UUID("00000000-0000-0000-0000-000000000042")


@pytest.fixture()
def mock_session() -> MagicMock:
    """Remote session whose result field reads "4" straight away."""
    session = MagicMock()
    session.find_element_by_id = AsyncMock(side_effect=lambda element_id: f"el:{element_id}")
    session.find_element_by_class_name = AsyncMock(return_value="el:result")
    session.tap = AsyncMock(return_value=None)
    session.get_text = AsyncMock(return_value="4")
    session.close = AsyncMock(return_value=None)
    session.capability = MagicMock(
        side_effect=lambda name: {
            "testobject_test_report_url": "https://app.testobject.com/report/1",
            "testobject_test_live_view_url": "https://app.testobject.com/live/1",
        }.get(name)
    )
    return session


@pytest.fixture()
def mock_sessions(mock_session: MagicMock) -> AsyncMock:
    factory = AsyncMock()
    factory.open.return_value = mock_session
    return factory
