"""Tests for CLI module."""

from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, patch

import pytest

from smoke_harness.cli import CONFIG_ERROR_EXIT_CODE, main, parse_args, run
from smoke_harness.config import RunnerConfig
from smoke_harness.runner import TestRunner


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host environment out of config."""
    for name in ["APP_URL", "SMOKE_TEST_TIMEOUT", "SMOKE_BROWSER", "SMOKE_APP_URL"]:
        monkeypatch.delenv(name, raising=False)


def test_parse_args_defaults() -> None:
    """Unset flags are None so environment and defaults apply."""
    args = parse_args([])

    assert args.app_url is None
    assert args.timeout is None
    assert args.browser is None
    assert args.log_level == "WARNING"


def test_parse_args_values() -> None:
    """Flags are parsed into typed values."""
    args = parse_args(
        [
            "--app-url",
            "http://app.test/",
            "--timeout",
            "5",
            "--browser",
            "--browser-executable",
            "/usr/bin/chromium",
        ]
    )

    assert args.app_url == "http://app.test/"
    assert args.timeout == 5.0
    assert args.browser is True
    assert args.browser_executable == Path("/usr/bin/chromium")


class TestMain:
    """Tests for main function."""

    def test_exits_with_run_status(self) -> None:
        """Builds config from flags and exits with the run's exit code."""
        with (
            patch(
                "smoke_harness.cli.run", new_callable=AsyncMock, return_value=1
            ) as mock_run,
            pytest.raises(SystemExit) as exc_info,
        ):
            main(["--app-url", "http://app.test/", "--timeout", "3"])

        assert exc_info.value.code == 1
        config = mock_run.await_args.args[0]
        assert config.app_url == "http://app.test/"
        assert config.test_timeout == 3.0

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """APP_URL is used when no flag is given."""
        monkeypatch.setenv("APP_URL", "http://env.test/")

        with (
            patch(
                "smoke_harness.cli.run", new_callable=AsyncMock, return_value=0
            ) as mock_run,
            pytest.raises(SystemExit) as exc_info,
        ):
            main([])

        assert exc_info.value.code == 0
        assert mock_run.await_args.args[0].app_url == "http://env.test/"

    def test_invalid_config_exits_with_config_error(self) -> None:
        """Invalid configuration exits before running tests."""
        with (
            patch("smoke_harness.cli.run", new_callable=AsyncMock) as mock_run,
            pytest.raises(SystemExit) as exc_info,
        ):
            main(["--timeout", "-1"])

        assert exc_info.value.code == CONFIG_ERROR_EXIT_CODE
        mock_run.assert_not_called()


class TestRun:
    """Tests for run function."""

    async def test_returns_failure_when_a_test_fails(self) -> None:
        """Exit code is 1 when the suite has a failure."""

        def register(runner: TestRunner, *_: Any) -> None:
            runner.test("A", lambda: None)
            runner.test("B", lambda: 1 / 0)

        with patch(
            "smoke_harness.cli.register_app_smoke_tests", side_effect=register
        ):
            exit_code = await run(RunnerConfig(app_url="http://app.test/"))

        assert exit_code == 1

    async def test_returns_success_when_all_pass(self) -> None:
        """Exit code is 0 when every test passes."""

        def register(runner: TestRunner, *_: Any) -> None:
            runner.test("A", lambda: None)

        with patch(
            "smoke_harness.cli.register_app_smoke_tests", side_effect=register
        ):
            exit_code = await run(RunnerConfig(app_url="http://app.test/"))

        assert exit_code == 0
