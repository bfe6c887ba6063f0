"""TestObject REST client for the device inventory."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from calcmatrix.shared.exceptions import InventoryError
from calcmatrix.shared.models import DeviceDescriptor

logger = logging.getLogger(__name__)


class TestObjectInventoryClient:
    """List devices via the TestObject REST API.

    Implements the ``DeviceInventory`` protocol.
    """

    __test__ = False

    def __init__(self, base_url: str, *, timeout: int = 30) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout

    async def list_devices(self) -> list[DeviceDescriptor]:
        """Fetch the current device list.

        Returns:
            Parsed device descriptors, in inventory order.

        Raises:
            InventoryError: If the HTTP request fails or the payload is not a device list.
        """
        url = f"{self._base_url}/devices"

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.get(url)
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPStatusError as exc:
            raise InventoryError(f"inventory returned {exc.response.status_code}: {exc.response.text[:200]}") from exc
        except httpx.HTTPError as exc:
            raise InventoryError(f"inventory request failed: {exc}") from exc
        except ValueError as exc:
            raise InventoryError(f"inventory returned invalid JSON: {exc}") from exc

        if not isinstance(data, list):
            raise InventoryError(f"expected a device list, got {type(data).__name__}")

        devices: list[DeviceDescriptor] = []
        for item in data:
            devices.append(_parse_device(item))

        logger.info("inventory returned %d devices", len(devices))
        return devices


def _parse_device(item: Any) -> DeviceDescriptor:
    try:
        return DeviceDescriptor.model_validate(item)
    except ValidationError as exc:
        raise InventoryError(f"malformed device entry: {exc.errors()[0]['msg']}") from exc
