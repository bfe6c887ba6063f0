"""Frozen Pydantic domain models shared by all modules."""

from __future__ import annotations

import uuid
from typing import Any

from pydantic import BaseModel, Field, field_validator

from calcmatrix.shared.enums import DevicePlatform, TestOutcome

DEFAULT_TEST_NAME = "Appium Version Matrix with Random Device"


class DeviceDescriptor(BaseModel):
    """One device entry as reported by the farm inventory."""

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}

    id: str
    os: DevicePlatform = DevicePlatform.UNKNOWN
    os_version: str = Field(default="", alias="osVersion")
    is_available: bool = Field(default=False, alias="isAvailable")

    @field_validator("os", mode="before")
    @classmethod
    def _coerce_platform(cls, value: Any) -> Any:
        if isinstance(value, DevicePlatform):
            return value
        try:
            return DevicePlatform(str(value).upper())
        except ValueError:
            return DevicePlatform.UNKNOWN

    @field_validator("os_version", mode="before")
    @classmethod
    def _coerce_version(cls, value: Any) -> Any:
        # Odd versions are rejected later by the capability check.
        if value is None:
            return ""
        if not isinstance(value, str):
            return str(value)
        return value


class SessionConfig(BaseModel):
    """Capabilities requested for one remote session."""

    model_config = {"frozen": True}

    api_key: str
    app_id: str = "1"
    device_id: str
    appium_version: str
    test_uuid: uuid.UUID = Field(default_factory=uuid.uuid4)
    test_name: str = DEFAULT_TEST_NAME
    no_sign: str = "true"
    automation_name: str = "Appium"

    def to_capabilities(self) -> dict[str, str]:
        """Render the TestObject desired-capabilities mapping."""
        return {
            "noSign": self.no_sign,
            "automationName": self.automation_name,
            "testobject_api_key": self.api_key,
            "testobject_app_id": self.app_id,
            "testobject_appium_version": self.appium_version,
            "testobject_device": self.device_id,
            "testobject_testuuid": str(self.test_uuid),
            "testobject_test_name": self.test_name,
        }


class TestResult(BaseModel):
    """Pass/fail record for one Appium version."""

    __test__ = False

    model_config = {"frozen": True}

    appium_version: str
    outcome: TestOutcome = TestOutcome.FAILED
    device_id: str | None = None
    test_uuid: uuid.UUID | None = None
    error_kind: str | None = None
    error_message: str | None = None
    report_url: str | None = None
    live_view_url: str | None = None

    @property
    def passed(self) -> bool:
        return self.outcome == TestOutcome.PASSED
