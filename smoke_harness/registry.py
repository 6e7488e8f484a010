"""Ordered registry of test cases and per-test hooks."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from smoke_harness.models.case import Hook, TestCase

log = logging.getLogger(__name__)


@dataclass(kw_only=True)
class TestRegistry:
    """Holds test cases in registration order plus one before and one after hook.

    Duplicate test names are allowed; each registration becomes its own case.
    """

    __test__ = False

    _cases: list[TestCase] = field(default_factory=list, init=False)
    before_each_hook: Hook | None = None
    after_each_hook: Hook | None = None

    @property
    def cases(self) -> Sequence[TestCase]:
        return tuple(self._cases)

    def test(self, name: str, body: Hook) -> None:
        """Append a test case."""
        log.debug("Registering test: %s", name)
        self._cases.append(TestCase(name=name, body=body))

    def before_each(self, body: Hook) -> None:
        """Set the hook run before every test, replacing any previous one."""
        self.before_each_hook = body

    def after_each(self, body: Hook) -> None:
        """Set the hook run after every test, replacing any previous one."""
        self.after_each_hook = body
