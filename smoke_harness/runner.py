"""Test runner combining registration, execution and reporting."""

import logging
import sys
from dataclasses import dataclass, field
from typing import NoReturn

from smoke_harness.executor import TestExecutor
from smoke_harness.models.case import Hook
from smoke_harness.models.result import RunSummary
from smoke_harness.registry import TestRegistry
from smoke_harness.reporter import exit_code, print_report

log = logging.getLogger(__name__)


class RunnerAlreadyUsedError(RuntimeError):
    """Raised when run() is called more than once on the same runner."""


@dataclass(kw_only=True)
class TestRunner:
    """Single-use harness: register tests and hooks, then run once.

    Hooks live on the instance, so independent runners can coexist in one
    process.
    """

    __test__ = False

    timeout: float | None = None
    registry: TestRegistry = field(default_factory=TestRegistry)
    _used: bool = field(default=False, init=False, repr=False)

    def test(self, name: str, body: Hook) -> None:
        """Register a test body under ``name``."""
        self.registry.test(name, body)

    def before_each(self, body: Hook) -> None:
        """Set the hook run before every test."""
        self.registry.before_each(body)

    def after_each(self, body: Hook) -> None:
        """Set the hook run after every test."""
        self.registry.after_each(body)

    async def run(self) -> RunSummary:
        """Execute all registered tests, print the report and return the summary.

        Raises:
            RunnerAlreadyUsedError: If this runner has already been run

        """
        if self._used:
            raise RunnerAlreadyUsedError("TestRunner instances can only be run once")
        self._used = True

        executor = TestExecutor(registry=self.registry, timeout=self.timeout)
        results = await executor.run()

        summary = RunSummary.from_results(results)
        log.info(
            "Run finished: %d passed, %d failed (%.2fms)",
            summary.passed_count,
            summary.failed_count,
            summary.total_duration_ms,
        )
        print_report(summary)
        return summary

    async def run_and_exit(self) -> NoReturn:
        """Run the tests and exit the process with the report's status."""
        summary = await self.run()
        sys.exit(exit_code(summary))
