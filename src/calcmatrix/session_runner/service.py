"""Core service running the 2 + 2 calculator check on one remote device."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from calcmatrix.config import Settings
from calcmatrix.session_runner.capabilities import build_session_config
from calcmatrix.session_runner.interfaces import DevicePicker, RemoteSession, SessionFactory
from calcmatrix.shared.enums import TestOutcome
from calcmatrix.shared.exceptions import AssertionTimeoutError, CalcMatrixError, SessionError
from calcmatrix.shared.models import SessionConfig, TestResult

logger = logging.getLogger(__name__)

EXPECTED_RESULT = "4"

RESULT_FIELD_CLASS = "android.widget.EditText"

_REPORT_URL_CAP = "testobject_test_report_url"
_LIVE_VIEW_URL_CAP = "testobject_test_live_view_url"


async def wait_for_text(
    session: RemoteSession,
    element: Any,
    expected: str,
    *,
    timeout: float = 30,
    poll_interval: float = 0.5,
) -> None:
    """Poll ``element`` until its text equals ``expected``.

    The text is always read at least once. Read errors are retried until
    the deadline.

    Raises:
        AssertionTimeoutError: If the text does not match within ``timeout`` seconds.
    """
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    last_text: str | None = None

    while True:
        try:
            last_text = await session.get_text(element)
            if last_text == expected:
                return
        except SessionError as exc:
            logger.debug("text poll error: %s", exc)

        if loop.time() >= deadline:
            raise AssertionTimeoutError(f"expected {expected!r} within {timeout}s, last saw {last_text!r}")
        await asyncio.sleep(poll_interval)


class TwoPlusTwoRunner:
    """Orchestrate select -> open -> tap 2+2= -> assert -> close for one version."""

    def __init__(
        self,
        selector: DevicePicker,
        sessions: SessionFactory,
        settings: Settings,
    ) -> None:
        self.selector = selector
        self.sessions = sessions
        self._settings = settings

    async def run(self, appium_version: str) -> TestResult:
        """Run the check once and return an immutable result.

        Known failures become a failed result; anything else propagates.
        The session is closed on every path once it has been opened.
        """
        session: RemoteSession | None = None
        config: SessionConfig | None = None
        result = TestResult(appium_version=appium_version)

        try:
            logger.info("appium version %s: selecting device", appium_version)
            device_id = await self.selector.select()
            result = result.model_copy(update={"device_id": device_id})

            config = build_session_config(self._settings, appium_version, device_id)
            result = result.model_copy(update={"test_uuid": config.test_uuid})

            logger.info("opening session on %s (uuid=%s)", device_id, config.test_uuid)
            session = await self.sessions.open(self._settings.appium_endpoint, config.to_capabilities())

            report_url = session.capability(_REPORT_URL_CAP)
            live_view_url = session.capability(_LIVE_VIEW_URL_CAP)
            logger.info("report: %s live view: %s", report_url, live_view_url)
            result = result.model_copy(update={"report_url": report_url, "live_view_url": live_view_url})

            await self._two_plus_two(session)

            logger.info("appium version %s passed on %s", appium_version, device_id)
            return result.model_copy(update={"outcome": TestOutcome.PASSED})
        except CalcMatrixError as exc:
            logger.error(
                "appium version %s failed on %s (uuid=%s): %s: %s",
                appium_version,
                result.device_id,
                result.test_uuid,
                type(exc).__name__,
                exc,
            )
            return result.model_copy(
                update={
                    "outcome": TestOutcome.FAILED,
                    "error_kind": type(exc).__name__,
                    "error_message": str(exc),
                }
            )
        finally:
            if session is not None:
                try:
                    logger.info("closing session for uuid=%s", config.test_uuid if config else None)
                    await session.close()
                except Exception as exc:
                    logger.error("failed to close session: %s", exc)

    async def _two_plus_two(self, session: RemoteSession) -> None:
        button_two = await session.find_element_by_id("digit2")
        await session.tap(button_two)

        button_plus = await session.find_element_by_id("plus")
        await session.tap(button_plus)

        await session.tap(button_two)

        button_equals = await session.find_element_by_id("equal")
        await session.tap(button_equals)

        result_field = await session.find_element_by_class_name(RESULT_FIELD_CLASS)
        await wait_for_text(
            session,
            result_field,
            EXPECTED_RESULT,
            timeout=self._settings.result_timeout_seconds,
            poll_interval=self._settings.poll_interval_seconds,
        )
