"""Configuration for the smoke test runner."""

from collections.abc import Mapping
from pathlib import Path
from typing import Self

from pydantic import Field, field_validator

from smoke_harness.models.base import Model

ENV_PREFIX = "SMOKE_"


class RunnerConfig(Model):
    """Configuration for running the app smoke suite."""

    app_url: str = Field(
        default="http://localhost:3000", description="Base URL of the app under test"
    )
    test_timeout: float | None = Field(
        default=None, gt=0, description="Per-test timeout in seconds (None disables)"
    )
    max_response_ms: float = Field(
        default=1000, gt=0, description="Upper bound for an acceptable response time"
    )
    expected_title: str = Field(
        default="Bun + React", description="Expected contents of the <title> tag"
    )
    required_selectors: tuple[str, ...] = Field(
        default=("#root", "title", "script", "link"),
        description="CSS selectors that must match at least one element",
    )
    browser: bool = Field(
        default=False, description="Also render the page in a headless browser"
    )
    browser_executable: Path | None = Field(
        default=None, description="Browser binary to launch (bundled one if unset)"
    )

    @field_validator("required_selectors", mode="before")
    @classmethod
    def split_selectors(cls, value: object) -> object:
        """Accept a comma-separated string, as read from the environment."""
        if isinstance(value, str):
            return tuple(s.strip() for s in value.split(",") if s.strip())
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str], **overrides: object) -> Self:
        """Build config from environment variables, then apply overrides.

        ``APP_URL`` sets the app URL; other fields are read from
        ``SMOKE_<FIELD>`` variables. Overrides set to None are ignored.
        """
        values: dict[str, object] = {}
        if app_url := environ.get("APP_URL"):
            values["app_url"] = app_url

        for name in cls.model_fields:
            if (value := environ.get(f"{ENV_PREFIX}{name.upper()}")) is not None:
                values[name] = value

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)
