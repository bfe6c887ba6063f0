"""Random selection of a UIAutomator-capable Android device."""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from calcmatrix.device_selector.interfaces import DeviceInventory
from calcmatrix.shared.enums import DevicePlatform
from calcmatrix.shared.exceptions import MalformedVersionError, NoDeviceAvailableError
from calcmatrix.shared.models import DeviceDescriptor

logger = logging.getLogger(__name__)

# UIAutomator ships with Android 4.3 (API 18)
_MIN_MAJOR = 4
_MIN_MINOR = 3


def parse_os_version(version: str) -> tuple[int, int]:
    """Split an ``M.m...`` version into single-digit major and minor.

    Only the characters at positions 0 and 2 are read. Multi-digit majors
    such as ``"10.2"`` are rejected rather than coerced.

    Raises:
        MalformedVersionError: If the string does not have that shape.
    """
    if len(version) < 3:
        raise MalformedVersionError(f"version too short: {version!r}")
    major, separator, minor = version[0], version[1], version[2]
    if not major.isdigit() or separator.isdigit() or not minor.isdigit():
        raise MalformedVersionError(f"not a single-digit M.m version: {version!r}")
    return int(major), int(minor)


def is_uiautomator_capable(version: str) -> bool:
    """Return True if the OS version is Android 4.3 or newer.

    Malformed versions count as not capable.
    """
    try:
        major, minor = parse_os_version(version)
    except MalformedVersionError as exc:
        logger.debug("treating device as not capable: %s", exc)
        return False
    # Minor only gates major 4, so "5.0" qualifies.
    if major != _MIN_MAJOR:
        return major > _MIN_MAJOR
    return minor >= _MIN_MINOR


def filter_candidates(inventory: Sequence[DeviceDescriptor]) -> list[DeviceDescriptor]:
    return [
        device
        for device in inventory
        if device.is_available and device.os == DevicePlatform.ANDROID and is_uiautomator_capable(device.os_version)
    ]


def select_device(inventory: Sequence[DeviceDescriptor], *, rng: random.Random | None = None) -> str:
    """Pick one qualifying device uniformly at random and return its id.

    Args:
        inventory: Device snapshot to choose from.
        rng: Random source; the module-level generator when omitted.

    Raises:
        NoDeviceAvailableError: If no device qualifies.
    """
    candidates = filter_candidates(inventory)
    if not candidates:
        raise NoDeviceAvailableError(f"no available Android >= 4.3 device among {len(inventory)} devices")
    chooser = rng if rng is not None else random
    device = chooser.choice(candidates)
    logger.info("selected device %s (%d candidates)", device.id, len(candidates))
    return device.id


class DeviceSelector:
    """Query the inventory once and pick a random qualifying device."""

    def __init__(self, inventory: DeviceInventory, *, rng: random.Random | None = None) -> None:
        self._inventory = inventory
        self._rng = rng

    async def select(self) -> str:
        devices = await self._inventory.list_devices()
        return select_device(devices, rng=self._rng)
