"""Remote session implementation on top of the Appium Python client."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from appium import webdriver
from appium.options.common import AppiumOptions
from appium.webdriver.common.appiumby import AppiumBy
from selenium.common.exceptions import NoSuchElementException, WebDriverException
from urllib3.exceptions import HTTPError as TransportError

from calcmatrix.shared.exceptions import ElementNotFoundError, SessionError, SessionOpenError

logger = logging.getLogger(__name__)

_APPIUM_PREFIX = "appium:"


class AppiumSession:
    """Wrap a blocking ``webdriver.Remote`` behind the RemoteSession protocol.

    WebDriver calls block on HTTP round-trips, so each one runs in a worker
    thread.
    """

    def __init__(self, driver: Any) -> None:
        self._driver = driver

    @property
    def session_id(self) -> str | None:
        return getattr(self._driver, "session_id", None)

    async def find_element_by_id(self, element_id: str) -> Any:
        return await self._find(AppiumBy.ID, element_id)

    async def find_element_by_class_name(self, class_name: str) -> Any:
        return await self._find(AppiumBy.CLASS_NAME, class_name)

    async def tap(self, element: Any) -> None:
        try:
            await asyncio.to_thread(element.click)
        except WebDriverException as exc:
            raise SessionError(f"tap failed: {exc.msg}") from exc
        except (OSError, TransportError) as exc:
            raise SessionError(f"tap failed: connection lost: {exc}") from exc

    async def get_text(self, element: Any) -> str:
        try:
            return await asyncio.to_thread(lambda: element.text)
        except WebDriverException as exc:
            raise SessionError(f"could not read element text: {exc.msg}") from exc
        except (OSError, TransportError) as exc:
            raise SessionError(f"could not read element text: connection lost: {exc}") from exc

    def capability(self, name: str) -> Any:
        caps = self._driver.capabilities or {}
        value = caps.get(name)
        if value is None:
            value = caps.get(f"{_APPIUM_PREFIX}{name}")
        return value

    async def close(self) -> None:
        try:
            await asyncio.to_thread(self._driver.quit)
        except WebDriverException as exc:
            raise SessionError(f"failed to quit session {self.session_id}: {exc.msg}") from exc
        except (OSError, TransportError) as exc:
            raise SessionError(f"failed to quit session {self.session_id}: connection lost: {exc}") from exc
        logger.info("closed session %s", self.session_id)

    async def _find(self, by: str, value: str) -> Any:
        try:
            return await asyncio.to_thread(self._driver.find_element, by=by, value=value)
        except NoSuchElementException as exc:
            raise ElementNotFoundError(f"no element matching {by}={value!r}") from exc
        except WebDriverException as exc:
            raise SessionError(f"lookup {by}={value!r} failed: {exc.msg}") from exc
        except (OSError, TransportError) as exc:
            raise SessionError(f"lookup {by}={value!r} failed: connection lost: {exc}") from exc


class AppiumSessionFactory:
    """Open Appium sessions. Implements the ``SessionFactory`` protocol."""

    async def open(self, endpoint: str, capabilities: dict[str, str]) -> AppiumSession:
        """Create a remote session with the given desired capabilities.

        Raises:
            SessionOpenError: If the server rejects the request or is unreachable.
        """
        options = AppiumOptions()
        for name, value in capabilities.items():
            options.set_capability(name, value)

        try:
            driver = await asyncio.to_thread(webdriver.Remote, command_executor=endpoint, options=options)
        except WebDriverException as exc:
            raise SessionOpenError(f"could not open session at {endpoint}: {exc.msg}") from exc
        except (OSError, TransportError) as exc:
            raise SessionOpenError(f"could not reach {endpoint}: {exc}") from exc

        session = AppiumSession(driver)
        logger.info("opened session %s at %s", session.session_id, endpoint)
        return session
