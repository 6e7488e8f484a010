"""Assertion helpers for use inside test bodies.

Every helper is synchronous and side-effect free. A broken expectation
raises AssertionFailure, which the executor records as a failed test.
"""

from collections.abc import Callable
from typing import Any


class AssertionFailure(AssertionError):
    """Raised when an expectation checked by a test body does not hold."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def assert_true(condition: object, message: str | None = None) -> None:
    """Fail unless ``condition`` is truthy."""
    if not condition:
        raise AssertionFailure(message or "Assertion failed")


def assert_equal(actual: Any, expected: Any, message: str | None = None) -> None:
    """Fail unless ``actual == expected``."""
    if actual != expected:
        raise AssertionFailure(message or f"Expected {expected!r} but got {actual!r}")


def assert_not_equal(actual: Any, expected: Any, message: str | None = None) -> None:
    """Fail when ``actual == expected``."""
    if actual == expected:
        raise AssertionFailure(
            message or f"Expected values to be different but both were {actual!r}"
        )


def assert_contains(haystack: str, needle: str, message: str | None = None) -> None:
    """Fail unless ``needle`` is a substring of ``haystack``."""
    if needle not in haystack:
        raise AssertionFailure(message or f'Expected "{haystack}" to contain "{needle}"')


def assert_throws(
    fn: Callable[[], object],
    message: str | None = None,
    expected: type[BaseException] = Exception,
) -> BaseException:
    """Fail unless calling ``fn`` raises an instance of ``expected``.

    Returns the raised exception so callers can inspect it. Exceptions that
    are not instances of ``expected`` propagate unchanged.
    """
    try:
        fn()
    except expected as exc:
        return exc

    raise AssertionFailure(message or "Expected function to throw but it did not")
