"""Command-line entry point running the Appium version matrix."""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Sequence

from calcmatrix.config import Settings, get_settings
from calcmatrix.device_selector.inventory import TestObjectInventoryClient
from calcmatrix.device_selector.selector import DeviceSelector
from calcmatrix.session_runner.appium_driver import AppiumSessionFactory
from calcmatrix.session_runner.service import TwoPlusTwoRunner
from calcmatrix.shared.enums import TestOutcome
from calcmatrix.shared.models import TestResult

logger = logging.getLogger(__name__)


def build_runner(settings: Settings) -> TwoPlusTwoRunner:
    inventory = TestObjectInventoryClient(settings.rest_url, timeout=settings.http_timeout_seconds)
    return TwoPlusTwoRunner(DeviceSelector(inventory), AppiumSessionFactory(), settings)


async def run_matrix(
    settings: Settings,
    versions: Sequence[str] | None = None,
    *,
    runner: TwoPlusTwoRunner | None = None,
) -> list[TestResult]:
    """Run the check once per Appium version, one after another."""
    runner = runner or build_runner(settings)
    matrix = list(versions) if versions else settings.appium_version_list

    results: list[TestResult] = []
    for version in matrix:
        try:
            result = await runner.run(version)
        except Exception as exc:
            logger.exception("appium version %s crashed", version)
            result = TestResult(
                appium_version=version,
                outcome=TestOutcome.FAILED,
                error_kind=type(exc).__name__,
                error_message=str(exc),
            )
        results.append(result)

    for result in results:
        if result.passed:
            logger.info("PASS appium=%s device=%s uuid=%s", result.appium_version, result.device_id, result.test_uuid)
        else:
            logger.error(
                "FAIL appium=%s device=%s uuid=%s error=%s",
                result.appium_version,
                result.device_id,
                result.test_uuid,
                result.error_kind,
            )
    return results


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run the calculator 2+2 check across Appium versions.")
    parser.add_argument(
        "--version",
        dest="versions",
        action="append",
        help="Appium version to run (repeatable; defaults to TESTOBJECT_APPIUM_VERSIONS)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    results = asyncio.run(run_matrix(get_settings(), args.versions))
    if not all(r.passed for r in results):
        raise SystemExit(1)


if __name__ == "__main__":
    main()
