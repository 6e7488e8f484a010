"""Models for test execution results."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal, Self

from smoke_harness.assertions import AssertionFailure

FailureKind = Literal["assertion", "unexpected", "timeout"]


@dataclass(frozen=True, kw_only=True)
class Failure:
    """Diagnostic captured from the first failing step of a test."""

    kind: FailureKind
    message: str
    exception_type: str

    @classmethod
    def from_exception(cls, exc: BaseException) -> Self:
        """Normalize any raised exception into a message-bearing diagnostic."""
        if isinstance(exc, AssertionFailure):
            kind: FailureKind = "assertion"
        elif isinstance(exc, TimeoutError):
            kind = "timeout"
        else:
            kind = "unexpected"

        # KeyError.__str__ quotes its key
        if isinstance(exc, KeyError) and len(exc.args) == 1:
            message = str(exc.args[0])
        else:
            message = str(exc)

        return cls(
            kind=kind,
            message=message or type(exc).__name__,
            exception_type=type(exc).__name__,
        )


@dataclass(frozen=True, kw_only=True)
class TestResult:
    """Result of a single test execution."""

    __test__ = False

    name: str
    status: Literal["passed", "failed"]
    duration_ms: float
    error: Failure | None = None

    @property
    def passed(self) -> bool:
        return self.status == "passed"


@dataclass(frozen=True, kw_only=True)
class RunSummary:
    """Aggregated counts and timings for a completed run."""

    results: Sequence[TestResult]
    total_count: int
    passed_count: int
    failed_count: int
    total_duration_ms: float

    @classmethod
    def from_results(cls, results: Sequence[TestResult]) -> Self:
        """Fold an ordered result sequence into a summary."""
        passed = sum(1 for result in results if result.passed)
        return cls(
            results=tuple(results),
            total_count=len(results),
            passed_count=passed,
            failed_count=len(results) - passed,
            total_duration_ms=sum(result.duration_ms for result in results),
        )
