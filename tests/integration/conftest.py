"""Fixtures for integration tests."""

from collections.abc import AsyncGenerator, Generator

import aiohttp
import pytest
from aioresponses import aioresponses as aioresponses_cls


@pytest.fixture
def aioresponses() -> Generator[aioresponses_cls, None, None]:
    """Mock all aiohttp requests made during the test."""
    with aioresponses_cls() as mocked:
        yield mocked


@pytest.fixture
async def session(
    aioresponses: aioresponses_cls,
) -> AsyncGenerator[aiohttp.ClientSession, None]:
    """Create client session with mocked transport."""
    async with aiohttp.ClientSession() as client:
        yield client
