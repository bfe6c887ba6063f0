"""Assemble the per-run session configuration."""

from __future__ import annotations

import logging
import uuid

from calcmatrix.config import Settings
from calcmatrix.shared.models import SessionConfig

logger = logging.getLogger(__name__)


def mask_secret(value: str) -> str:
    if not value:
        return "<unset>"
    if len(value) <= 4:
        return "****"
    return f"{value[:4]}****"


def build_session_config(
    settings: Settings,
    appium_version: str,
    device_id: str,
    *,
    test_uuid: uuid.UUID | None = None,
) -> SessionConfig:
    """Build a fresh SessionConfig for one run.

    A new UUID is generated unless one is given, so every run can be found
    in the farm's logs.
    """
    config = SessionConfig(
        api_key=settings.api_key,
        app_id=settings.app_id,
        device_id=device_id,
        appium_version=appium_version,
        test_uuid=test_uuid or uuid.uuid4(),
    )
    logger.info(
        "session config: api_key=%s app_id=%s appium=%s device=%s uuid=%s",
        mask_secret(config.api_key),
        config.app_id,
        config.appium_version,
        config.device_id,
        config.test_uuid,
    )
    return config
