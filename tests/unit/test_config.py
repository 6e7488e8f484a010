"""Tests for runner configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from smoke_harness.config import RunnerConfig


def test_defaults() -> None:
    """Empty environment gives default configuration."""
    config = RunnerConfig.from_env({})

    assert config.app_url == "http://localhost:3000"
    assert config.test_timeout is None
    assert config.max_response_ms == 1000
    assert config.expected_title == "Bun + React"
    assert config.browser is False
    assert config.browser_executable is None


def test_reads_app_url_from_env() -> None:
    """APP_URL sets the app URL."""
    config = RunnerConfig.from_env({"APP_URL": "http://app.test/"})

    assert config.app_url == "http://app.test/"


def test_reads_prefixed_env_vars() -> None:
    """SMOKE_* variables are parsed into typed fields."""
    config = RunnerConfig.from_env(
        {
            "SMOKE_TEST_TIMEOUT": "2.5",
            "SMOKE_BROWSER": "true",
            "SMOKE_BROWSER_EXECUTABLE": "/usr/bin/chromium",
        }
    )

    assert config.test_timeout == 2.5
    assert config.browser is True
    assert config.browser_executable == Path("/usr/bin/chromium")


def test_overrides_take_precedence() -> None:
    """Explicit overrides win over environment; None overrides are ignored."""
    config = RunnerConfig.from_env(
        {"APP_URL": "http://env.test/", "SMOKE_EXPECTED_TITLE": "Env"},
        app_url="http://cli.test/",
        expected_title=None,
    )

    assert config.app_url == "http://cli.test/"
    assert config.expected_title == "Env"


def test_rejects_non_positive_timeout() -> None:
    """Timeout must be positive."""
    with pytest.raises(ValidationError):
        RunnerConfig.from_env({"SMOKE_TEST_TIMEOUT": "0"})


def test_rejects_unknown_fields() -> None:
    """Unknown fields are rejected."""
    with pytest.raises(ValidationError):
        RunnerConfig(retries=3)  # type: ignore[call-arg]


def test_is_frozen() -> None:
    """Config cannot be modified after creation."""
    config = RunnerConfig()

    with pytest.raises(ValidationError):
        config.app_url = "http://other.test/"  # type: ignore[misc]


def test_required_selectors_from_env() -> None:
    """Comma-separated selectors are split into a tuple."""
    config = RunnerConfig.from_env({"SMOKE_REQUIRED_SELECTORS": "#root, nav ,,main"})

    assert config.required_selectors == ("#root", "nav", "main")


def test_required_selectors_default() -> None:
    """Default selectors cover the app shell."""
    assert RunnerConfig().required_selectors == ("#root", "title", "script", "link")
