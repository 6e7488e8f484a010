"""Sequential executor for registered test cases."""

import asyncio
import inspect
import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass

from smoke_harness.models.case import Hook, TestCase
from smoke_harness.models.result import Failure, TestResult
from smoke_harness.registry import TestRegistry

log = logging.getLogger(__name__)


async def invoke(step: Hook) -> Failure | None:
    """Run one hook or test body, returning the failure it raised if any."""
    try:
        outcome = step()
        if inspect.isawaitable(outcome):
            await outcome
    except Exception as exc:
        return Failure.from_exception(exc)
    return None


@dataclass(frozen=True, kw_only=True)
class TestExecutor:
    """Runs test cases one at a time, in registration order.

    A failing test never stops the run; its first failure is recorded and
    execution moves on to the next case.
    """

    __test__ = False

    registry: TestRegistry
    timeout: float | None = None

    async def run(self) -> Sequence[TestResult]:
        """Execute every registered case and return one result per case."""
        cases = self.registry.cases
        log.info("Executing %d test(s)", len(cases))

        results: list[TestResult] = []
        for case in cases:
            results.append(await self._run_case(case))

        log.info("Test execution completed")
        return results

    async def _run_case(self, case: TestCase) -> TestResult:
        log.debug("Starting test: %s", case.name)
        start = time.perf_counter()

        try:
            async with asyncio.timeout(self.timeout):
                failure = await self._run_steps(case)
        except TimeoutError:
            failure = Failure(
                kind="timeout",
                message=f"Test timed out after {self.timeout}s",
                exception_type="TimeoutError",
            )

        duration_ms = (time.perf_counter() - start) * 1000

        if failure is None:
            log.info("Test passed: %s (%.2fms)", case.name, duration_ms)
            return TestResult(name=case.name, status="passed", duration_ms=duration_ms)

        log.warning(
            "Test failed: %s (%.2fms): %s", case.name, duration_ms, failure.message
        )
        return TestResult(
            name=case.name, status="failed", duration_ms=duration_ms, error=failure
        )

    async def _run_steps(self, case: TestCase) -> Failure | None:
        """Run before hook, body, after hook; stop at the first failure."""
        steps = [
            step
            for step in (
                self.registry.before_each_hook,
                case.body,
                self.registry.after_each_hook,
            )
            if step is not None
        ]

        for step in steps:
            if (failure := await invoke(step)) is not None:
                return failure
        return None
