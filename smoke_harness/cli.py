"""CLI entry point for the app smoke test runner."""

import argparse
import asyncio
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

import aiohttp
from pydantic import ValidationError

from smoke_harness.config import RunnerConfig
from smoke_harness.reporter import exit_code
from smoke_harness.runner import TestRunner
from smoke_harness.suites.app_smoke import register_app_smoke_tests

CONFIG_ERROR_EXIT_CODE = 2


async def run(config: RunnerConfig) -> int:
    """Run the app smoke suite and return exit code."""
    log = logging.getLogger("smoke_harness")
    log.info("Testing app at %s", config.app_url)

    runner = TestRunner(timeout=config.test_timeout)
    async with aiohttp.ClientSession() as session:
        register_app_smoke_tests(runner, session, config)
        summary = await runner.run()

    return exit_code(summary)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run smoke tests against a web app")
    parser.add_argument(
        "--app-url",
        help="Base URL of the app under test (default: $APP_URL or localhost:3000)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Per-test timeout in seconds (default: no timeout)",
    )
    parser.add_argument(
        "--max-response-ms",
        type=float,
        help="Maximum acceptable response time in milliseconds",
    )
    parser.add_argument(
        "--expected-title",
        help="Expected contents of the page <title>",
    )
    parser.add_argument(
        "--browser",
        action="store_true",
        default=None,
        help="Also render the page in headless Chromium",
    )
    parser.add_argument(
        "--browser-executable",
        type=Path,
        help="Path to the browser binary",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for stderr output",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    try:
        config = RunnerConfig.from_env(
            os.environ,
            app_url=args.app_url,
            test_timeout=args.timeout,
            max_response_ms=args.max_response_ms,
            expected_title=args.expected_title,
            browser=args.browser,
            browser_executable=args.browser_executable,
        )
    except ValidationError as exc:
        logging.getLogger("smoke_harness").error("Invalid configuration: %s", exc)
        sys.exit(CONFIG_ERROR_EXIT_CODE)

    sys.exit(asyncio.run(run(config)))


if __name__ == "__main__":  # pragma: no cover
    main()
