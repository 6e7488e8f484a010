"""Headless browser rendering checks."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from playwright.async_api import async_playwright

log = logging.getLogger(__name__)

BODY_TEXT_SCRIPT = "() => document.body.innerText"
HEADINGS_SCRIPT = (
    "() => Array.from(document.querySelectorAll('h1, h2, h3'))"
    ".map(el => el.textContent)"
)


@dataclass(frozen=True, kw_only=True)
class RenderedPage:
    """Content of a page after the browser has rendered it."""

    title: str
    body_text: str
    headings: Sequence[str]


async def render_page(url: str, executable_path: Path | None = None) -> RenderedPage:
    """Load ``url`` in headless Chromium and extract rendered content."""
    async with async_playwright() as playwright:
        browser = await playwright.chromium.launch(
            headless=True, executable_path=executable_path
        )
        try:
            page = await browser.new_page()
            await page.goto(url)
            title = await page.title()
            body_text = await page.evaluate(BODY_TEXT_SCRIPT)
            headings = await page.evaluate(HEADINGS_SCRIPT)
        finally:
            await browser.close()

    log.debug("Rendered %s: title=%r, %d heading(s)", url, title, len(headings))
    return RenderedPage(
        title=title,
        body_text=body_text,
        headings=tuple(h or "" for h in headings),
    )
