"""Protocol interfaces for session_runner dependency injection."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DevicePicker(Protocol):
    """Protocol for choosing the device a run executes on."""

    async def select(self) -> str:
        """Return the id of the device to request.

        Raises:
            NoDeviceAvailableError: If no device qualifies
            InventoryError: If the inventory cannot be queried
        """
        ...


@runtime_checkable
class RemoteSession(Protocol):
    """Protocol for one open remote automation session."""

    async def find_element_by_id(self, element_id: str) -> Any:
        """Locate an element by resource id.

        Raises:
            ElementNotFoundError: If nothing matches
        """
        ...

    async def find_element_by_class_name(self, class_name: str) -> Any:
        """Locate the first element of a UI class.

        Raises:
            ElementNotFoundError: If nothing matches
        """
        ...

    async def tap(self, element: Any) -> None: ...

    async def get_text(self, element: Any) -> str:
        """Read the element's current text.

        Raises:
            SessionError: If the element can no longer be read
        """
        ...

    def capability(self, name: str) -> Any:
        """Return a capability echoed back by the server, or None."""
        ...

    async def close(self) -> None:
        """End the session and release the device."""
        ...


@runtime_checkable
class SessionFactory(Protocol):
    """Protocol for opening remote sessions."""

    async def open(self, endpoint: str, capabilities: dict[str, str]) -> RemoteSession:
        """Open a session against ``endpoint``.

        Raises:
            SessionOpenError: If the server refuses or cannot be reached
        """
        ...
