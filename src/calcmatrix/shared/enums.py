"""Domain enumerations used across all modules."""

from __future__ import annotations

from enum import Enum, unique


@unique
class DevicePlatform(str, Enum):
    """Operating system reported by the device inventory."""

    ANDROID = "ANDROID"
    IOS = "IOS"
    UNKNOWN = "UNKNOWN"


@unique
class TestOutcome(str, Enum):
    """Result of one matrix run."""

    __test__ = False

    PASSED = "passed"
    FAILED = "failed"
