"""Protocol interfaces for device_selector dependency injection."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from calcmatrix.shared.models import DeviceDescriptor


@runtime_checkable
class DeviceInventory(Protocol):
    """Protocol for querying the device farm inventory."""

    async def list_devices(self) -> list[DeviceDescriptor]:
        """Return a snapshot of every device known to the farm.

        Raises:
            InventoryError: If the inventory cannot be queried
        """
        ...
