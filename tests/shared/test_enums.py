"""Tests for shared enum definitions."""

from __future__ import annotations

from calcmatrix.shared.enums import DevicePlatform, TestOutcome


class TestDevicePlatform:
    def test_all_platforms_present(self) -> None:
        assert {p.value for p in DevicePlatform} == {"ANDROID", "IOS", "UNKNOWN"}

    def test_string_value(self) -> None:
        assert DevicePlatform.ANDROID == "ANDROID"


class TestTestOutcome:
    def test_all_outcomes_present(self) -> None:
        assert {o.value for o in TestOutcome} == {"passed", "failed"}
