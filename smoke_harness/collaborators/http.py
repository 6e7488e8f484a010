"""HTTP helpers for fetching pages from the app under test."""

import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass

import aiohttp
from yarl import URL

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class FetchedPage:
    """Response of a page fetch, with the body read as text."""

    url: URL
    status: int
    headers: Mapping[str, str]
    content_type: str
    html: str
    elapsed_ms: float


async def fetch_page(session: aiohttp.ClientSession, url: str | URL) -> FetchedPage:
    """GET ``url`` and read the full body."""
    start = time.perf_counter()
    async with session.get(url) as response:
        html = await response.text()
        elapsed_ms = (time.perf_counter() - start) * 1000
        log.debug("GET %s -> %d (%.2fms)", url, response.status, elapsed_ms)
        return FetchedPage(
            url=URL(url),
            status=response.status,
            headers=dict(response.headers),
            content_type=response.headers.get("Content-Type", ""),
            html=html,
            elapsed_ms=elapsed_ms,
        )


async def fetch_status(session: aiohttp.ClientSession, url: str | URL) -> int:
    """GET ``url`` and return only the status code."""
    async with session.get(url) as response:
        log.debug("GET %s -> %d", url, response.status)
        return response.status


def resolve_asset(base_url: str | URL, reference: str) -> URL:
    """Resolve an asset reference found in markup against the page URL."""
    return URL(base_url).join(URL(reference))
