"""Models for registered test cases and hooks."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeAlias

Hook: TypeAlias = Callable[[], Awaitable[None] | None]


@dataclass(frozen=True, kw_only=True)
class TestCase:
    """A named test body, registered once and never modified."""

    __test__ = False

    name: str
    body: Hook
