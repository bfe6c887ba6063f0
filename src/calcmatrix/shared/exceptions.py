"""Hierarchical exception types for calcmatrix runs."""

from __future__ import annotations


class CalcMatrixError(Exception):
    """Base exception for all calcmatrix errors."""


# ── Device selection ────────────────────────────────────────────


class InventoryError(CalcMatrixError):
    """Failed to query the device inventory."""


class NoDeviceAvailableError(CalcMatrixError):
    """No device passed the availability, platform and version filters."""


class MalformedVersionError(CalcMatrixError):
    """OS version is not of the single-digit ``M.m`` shape."""


# ── Remote session ──────────────────────────────────────────────


class SessionError(CalcMatrixError):
    """Remote Appium session error."""


class SessionOpenError(SessionError):
    """Remote session could not be established."""


class ElementNotFoundError(SessionError):
    """A locator did not resolve to an element."""


class AssertionTimeoutError(CalcMatrixError):
    """Expected text did not appear before the deadline."""
